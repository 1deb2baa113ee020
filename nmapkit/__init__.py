"""Models for nmap XML scan results, OS families, and builders for nmap timing arguments."""

__version__ = "0.1.0"
__all__ = ["osfamilies", "results", "timing"]