[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nmapkit"
version = "0.1.0"
description = "Typed models for nmap XML scan results and builders for nmap timing and performance arguments"
requires-python = ">=3.10"
keywords = ["nmap", "xml", "network", "scanner", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nmapkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
