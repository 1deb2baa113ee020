"""Timing and performance options for nmap, expressed as command-line arguments.

Each option function returns the list of arguments it contributes to an nmap
command line; options can be combined by concatenating their results.
"""

from __future__ import annotations

from datetime import timedelta
from enum import IntEnum

__all__ = [
    "Timing",
    "timing_template",
    "stats_every",
    "min_hostgroup",
    "max_hostgroup",
    "min_parallelism",
    "max_parallelism",
    "min_rtt_timeout",
    "max_rtt_timeout",
    "initial_rtt_timeout",
    "max_retries",
    "host_timeout",
    "scan_delay",
    "max_scan_delay",
    "min_rate",
    "max_rate",
]


class Timing(IntEnum):
    """Timing templates, from the slowest (paranoid) to the fastest (insane)."""

    # No parallelism, 5 min timeout, 100ms-10s RTT timeout, 5 min scan delay.
    SLOWEST = 0
    # No parallelism, 15 s timeout, 100ms-10s RTT timeout, 15 s scan delay.
    SNEAKY = 1
    # No parallelism, 1 s timeout, 100ms-10s RTT timeout, 400 ms scan delay.
    POLITE = 2
    # Parallelism, 1 s timeout, 100ms-10s RTT timeout, no scan delay.
    NORMAL = 3
    # Parallelism, 500 ms timeout, 100ms-1250ms RTT timeout, no scan delay.
    AGGRESSIVE = 4
    # Parallelism, 250 ms timeout, 50ms-300ms RTT timeout, no scan delay.
    FASTEST = 5


def _integer(value: int) -> str:
    return f"{value:d}"


def _milliseconds(duration: timedelta) -> str:
    if not isinstance(duration, timedelta):
        raise TypeError(f"expected a timedelta, got {type(duration).__name__}")
    micros = (duration.days * 86_400 + duration.seconds) * 1_000_000 + duration.microseconds
    millis = abs(micros) // 1000
    return f"{-millis if micros < 0 else millis}ms"


def timing_template(timing: Timing | int) -> list[str]:
    """Select a timing template."""
    return [f"-T{int(timing)}"]


def stats_every(interval: str) -> list[str]:
    """Print a timing status message after each interval, such as ``"5s"``."""
    return ["--stats-every", interval]


def min_hostgroup(size: int) -> list[str]:
    """Set the minimal parallel host scan group size."""
    return ["--min-hostgroup", _integer(size)]


def max_hostgroup(size: int) -> list[str]:
    """Set the maximal parallel host scan group size."""
    return ["--max-hostgroup", _integer(size)]


def min_parallelism(probes: int) -> list[str]:
    """Set the minimal number of parallel probes."""
    return ["--min-parallelism", _integer(probes)]


def max_parallelism(probes: int) -> list[str]:
    """Set the maximal number of parallel probes."""
    return ["--max-parallelism", _integer(probes)]


def min_rtt_timeout(round_trip_time: timedelta) -> list[str]:
    """Set the minimal probe round-trip time."""
    return ["--min-rtt-timeout", _milliseconds(round_trip_time)]


def max_rtt_timeout(round_trip_time: timedelta) -> list[str]:
    """Set the maximal probe round-trip time."""
    return ["--max-rtt-timeout", _milliseconds(round_trip_time)]


def initial_rtt_timeout(round_trip_time: timedelta) -> list[str]:
    """Set the initial probe round-trip time."""
    return ["--initial-rtt-timeout", _milliseconds(round_trip_time)]


def max_retries(tries: int) -> list[str]:
    """Set the maximal number of port scan probe retransmissions."""
    return ["--max-retries", _integer(tries)]


def host_timeout(timeout: timedelta) -> list[str]:
    """Give up on a target host after this much time."""
    return ["--host-timeout", _milliseconds(timeout)]


def scan_delay(timeout: timedelta) -> list[str]:
    """Set the minimum time to wait between probes sent to a host."""
    return ["--scan-delay", _milliseconds(timeout)]


def max_scan_delay(timeout: timedelta) -> list[str]:
    """Set the maximum time to wait between probes sent to a host."""
    return ["--max-scan-delay", _milliseconds(timeout)]


def min_rate(packets_per_second: int) -> list[str]:
    """Set the minimal number of packets sent per second."""
    return ["--min-rate", _integer(packets_per_second)]


def max_rate(packets_per_second: int) -> list[str]:
    """Set the maximal number of packets sent per second."""
    return ["--max-rate", _integer(packets_per_second)]