"""Data model for nmap XML scan results, with parsing and serialization helpers."""

from __future__ import annotations

import io
import os
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import BinaryIO, Callable, TypeVar
from xml.sax.saxutils import escape as _escape_text

from nmapkit.osfamilies import OSFamily

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")
_BOOLS = {
    "1": True, "t": True, "T": True, "TRUE": True, "true": True, "True": True,
    "0": False, "f": False, "F": False, "FALSE": False, "false": False, "False": False,
}
_ATTR_ESCAPES = str.maketrans({
    '"': "&#34;",
    "'": "&#39;",
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
})

_T = TypeVar("_T")


# ---------------------------------------------------------------------------
# Attribute and element helpers


def _parse_int(text: str, bits: int = 64, unsigned: bool = False) -> int:
    if text == "":
        return 0
    stripped = text.strip()
    pattern = _UNSIGNED_RE if unsigned else _SIGNED_RE
    if not pattern.fullmatch(stripped):
        raise ValueError(f"invalid integer {text!r}")
    value = int(stripped)
    low, high = (0, 2**bits - 1) if unsigned else (-(2 ** (bits - 1)), 2 ** (bits - 1) - 1)
    if not low <= value <= high:
        raise ValueError(f"integer {text!r} out of range")
    return value


def _parse_float(text: str) -> float:
    if text == "":
        return 0.0
    try:
        return float(text.strip())
    except ValueError:
        raise ValueError(f"invalid number {text!r}") from None


def _parse_bool(text: str) -> bool:
    if text == "":
        return False
    try:
        return _BOOLS[text.strip()]
    except KeyError:
        raise ValueError(f"invalid boolean {text!r}") from None


def _str(el: ET.Element, name: str) -> str:
    return el.get(name, "")


def _int(el: ET.Element, name: str) -> int:
    return _parse_int(el.get(name, ""))


def _float(el: ET.Element, name: str) -> float:
    return _parse_float(el.get(name, ""))


def _bool(el: ET.Element, name: str) -> bool:
    return _parse_bool(el.get(name, ""))


def _timestamp(el: ET.Element, name: str) -> Timestamp:
    value = el.get(name)
    return Timestamp() if value is None else Timestamp.from_xml_attr(value)


def _text(el: ET.Element) -> str:
    """Character data held directly by an element."""
    return (el.text or "") + "".join(child.tail or "" for child in el)


def _inner_xml(el: ET.Element) -> str:
    """The markup between an element's start and end tags."""
    return _escape_text(el.text or "") + "".join(
        ET.tostring(child, encoding="unicode") for child in el
    )


def _child(el: ET.Element, path: str, build: Callable[[ET.Element], _T], default: Callable[[], _T]) -> _T:
    found = el.findall(path)
    return build(found[-1]) if found else default()


def _children(el: ET.Element, path: str, build: Callable[[ET.Element], _T]) -> list[_T]:
    return [build(child) for child in el.findall(path)]


def _fromstring(data: bytes | str) -> ET.Element:
    try:
        return ET.fromstring(data)
    except ET.ParseError as exc:
        raise ValueError(f"malformed XML: {exc}") from exc


# ---------------------------------------------------------------------------
# Timestamp


@dataclass(frozen=True)
class Timestamp:
    """A point in time carried as a UNIX timestamp in seconds."""

    time: datetime = _ZERO_TIME

    def __post_init__(self) -> None:
        if self.time.tzinfo is None:
            object.__setattr__(self, "time", self.time.replace(tzinfo=timezone.utc))

    @classmethod
    def from_unix(cls, seconds: int) -> Timestamp:
        """Build a timestamp from seconds since the UNIX epoch."""
        try:
            return cls(_EPOCH + timedelta(seconds=seconds))
        except OverflowError:
            raise ValueError(f"timestamp {seconds} out of range") from None

    @property
    def is_zero(self) -> bool:
        """Whether this is the unset timestamp."""
        return self.time == _ZERO_TIME

    @classmethod
    def parse_time(cls, s: str) -> Timestamp:
        """Parse a decimal UNIX timestamp string."""
        if not _SIGNED_RE.fullmatch(s):
            raise ValueError(f"parsing {s!r}: invalid syntax")
        value = int(s)
        if not -(2**63) <= value < 2**63:
            raise ValueError(f"parsing {s!r}: value out of range")
        return cls.from_unix(value)

    def format_time(self) -> str:
        """Format as a decimal UNIX timestamp string."""
        return str((self.time - _EPOCH) // timedelta(seconds=1))

    def to_json(self) -> str:
        """JSON encoding: the bare timestamp number."""
        return self.format_time()

    @classmethod
    def from_json(cls, data: bytes | str) -> Timestamp:
        """Decode the JSON encoding produced by :meth:`to_json`."""
        text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
        return cls.parse_time(text)

    def to_xml_attr(self, name: str) -> tuple[str, str] | None:
        """An XML attribute as a (name, value) pair, or None when unset."""
        if self.is_zero:
            return None
        return name, self.format_time()

    @classmethod
    def from_xml_attr(cls, value: str) -> Timestamp:
        """Decode an XML attribute value."""
        return cls.parse_time(value)


# ---------------------------------------------------------------------------
# Run-level records


@dataclass
class ScanInfo:
    """The scan information."""

    num_services: int = 0
    protocol: str = ""
    scan_flags: str = ""
    services: str = ""
    type: str = ""

    @classmethod
    def _from_element(cls, el: ET.Element) -> ScanInfo:
        return cls(
            num_services=_int(el, "numservices"),
            protocol=_str(el, "protocol"),
            scan_flags=_str(el, "scanflags"),
            services=_str(el, "services"),
            type=_str(el, "type"),
        )


@dataclass
class Verbose:
    """The verbosity level of the scan."""

    level: int = 0

    @classmethod
    def _from_element(cls, el: ET.Element) -> Verbose:
        return cls(level=_int(el, "level"))


@dataclass
class Debugging:
    """The debugging level of the scan."""

    level: int = 0

    @classmethod
    def _from_element(cls, el: ET.Element) -> Debugging:
        return cls(level=_int(el, "level"))


@dataclass
class Task:
    """Information about a task."""

    time: Timestamp = field(default_factory=Timestamp)
    task: str = ""
    extra_info: str = ""

    @classmethod
    def _from_element(cls, el: ET.Element) -> Task:
        return cls(
            time=_timestamp(el, "time"),
            task=_str(el, "task"),
            extra_info=_str(el, "extrainfo"),
        )


@dataclass
class TaskProgress:
    """The progression of a task."""

    percent: float = 0.0
    remaining: int = 0
    task: str = ""
    etc: Timestamp = field(default_factory=Timestamp)
    time: Timestamp = field(default_factory=Timestamp)

    @classmethod
    def _from_element(cls, el: ET.Element) -> TaskProgress:
        return cls(
            percent=_float(el, "percent"),
            remaining=_int(el, "remaining"),
            task=_str(el, "task"),
            etc=_timestamp(el, "etc"),
            time=_timestamp(el, "time"),
        )


@dataclass
class Target:
    """A target as it was specified, with its status and the reason for it."""

    specification: str = ""
    status: str = ""
    reason: str = ""

    @classmethod
    def _from_element(cls, el: ET.Element) -> Target:
        return cls(
            specification=_str(el, "specification"),
            status=_str(el, "status"),
            reason=_str(el, "reason"),
        )


# ---------------------------------------------------------------------------
# Host records


@dataclass
class Status:
    """A host's status."""

    state: str = ""
    reason: str = ""
    reason_ttl: float = 0.0

    def __str__(self) -> str:
        return self.state

    @classmethod
    def _from_element(cls, el: ET.Element) -> Status:
        return cls(
            state=_str(el, "state"),
            reason=_str(el, "reason"),
            reason_ttl=_float(el, "reason_ttl"),
        )


@dataclass
class Address:
    """An IPv4, IPv6 or hardware address of a host."""

    addr: str = ""
    addr_type: str = ""
    vendor: str = ""

    def __str__(self) -> str:
        return self.addr

    @classmethod
    def _from_element(cls, el: ET.Element) -> Address:
        return cls(
            addr=_str(el, "addr"),
            addr_type=_str(el, "addrtype"),
            vendor=_str(el, "vendor"),
        )


@dataclass
class Hostname:
    """A name for a host."""

    name: str = ""
    type: str = ""

    def __str__(self) -> str:
        return self.name

    @classmethod
    def _from_element(cls, el: ET.Element) -> Hostname:
        return cls(name=_str(el, "name"), type=_str(el, "type"))


@dataclass
class Smurf:
    """Responses from a smurf attack."""

    responses: str = ""

    @classmethod
    def _from_element(cls, el: ET.Element) -> Smurf:
        return cls(responses=_str(el, "responses"))


@dataclass
class Reason:
    """Why ports are closed or filtered, with how many share that reason."""

    reason: str = ""
    count: int = 0

    @classmethod
    def _from_element(cls, el: ET.Element) -> Reason:
        return cls(reason=_str(el, "reason"), count=_int(el, "count"))


@dataclass
class ExtraPort:
    """Summary of closed or filtered ports."""

    state: str = ""
    count: int = 0
    reasons: list[Reason] = field(default_factory=list)

    @classmethod
    def _from_element(cls, el: ET.Element) -> ExtraPort:
        return cls(
            state=_str(el, "state"),
            count=_int(el, "count"),
            reasons=_children(el, "extrareasons", Reason._from_element),
        )


class PortStatus(str, Enum):
    """A port's state; values outside the enumeration are kept as given."""

    OPEN = "open"
    CLOSED = "closed"
    FILTERED = "filtered"
    UNFILTERED = "unfiltered"

    @classmethod
    def _missing_(cls, value: object) -> PortStatus | None:
        if not isinstance(value, str):
            return None
        pseudo = str.__new__(cls, value)
        pseudo._name_ = value
        pseudo._value_ = value
        return pseudo

    def __str__(self) -> str:
        return self.value


@dataclass
class State:
    """A port's state (open, closed, ...) and why."""

    state: str = ""
    reason: str = ""
    reason_ip: str = ""
    reason_ttl: float = 0.0

    def __str__(self) -> str:
        return self.state

    @classmethod
    def _from_element(cls, el: ET.Element) -> State:
        return cls(
            state=_str(el, "state"),
            reason=_str(el, "reason"),
            reason_ip=_str(el, "reason_ip"),
            reason_ttl=_float(el, "reason_ttl"),
        )


@dataclass
class Owner:
    """The owner of a port."""

    name: str = ""

    def __str__(self) -> str:
        return self.name

    @classmethod
    def _from_element(cls, el: ET.Element) -> Owner:
        return cls(name=_str(el, "name"))


@dataclass
class Service:
    """Detailed information about a service on an open port."""

    device_type: str = ""
    extra_info: str = ""
    high_version: str = ""
    hostname: str = ""
    low_version: str = ""
    method: str = ""
    name: str = ""
    os_type: str = ""
    product: str = ""
    proto: str = ""
    rpc_num: str = ""
    service_fp: str = ""
    tunnel: str = ""
    version: str = ""
    confidence: int = 0
    cpes: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return self.name

    @classmethod
    def _from_element(cls, el: ET.Element) -> Service:
        return cls(
            device_type=_str(el, "devicetype"),
            extra_info=_str(el, "extrainfo"),
            high_version=_str(el, "highver"),
            hostname=_str(el, "hostname"),
            low_version=_str(el, "lowver"),
            method=_str(el, "method"),
            name=_str(el, "name"),
            os_type=_str(el, "ostype"),
            product=_str(el, "product"),
            proto=_str(el, "proto"),
            rpc_num=_str(el, "rpcnum"),
            service_fp=_str(el, "servicefp"),
            tunnel=_str(el, "tunnel"),
            version=_str(el, "version"),
            confidence=_int(el, "conf"),
            cpes=_children(el, "cpe", _text),
        )


# ---------------------------------------------------------------------------
# Script output


def _open_tag(tag: str, key: str) -> str:
    if key:
        return f'<{tag} key="{key.translate(_ATTR_ESCAPES)}">'
    return f"<{tag}>"


@dataclass
class Element:
    """The smallest building block of script output, optionally keyed."""

    key: str = ""
    value: str = ""

    @classmethod
    def _from_element(cls, el: ET.Element) -> Element:
        return cls(key=_str(el, "key"), value=_inner_xml(el))

    def _xml(self) -> str:
        return f"{_open_tag('elem', self.key)}{self.value}</elem>"


@dataclass
class Table:
    """A collection of nested tables and elements; every field may be empty."""

    key: str = ""
    tables: list[Table] = field(default_factory=list)
    elements: list[Element] = field(default_factory=list)

    @classmethod
    def _from_element(cls, el: ET.Element) -> Table:
        return cls(
            key=_str(el, "key"),
            tables=_children(el, "table", cls._from_element),
            elements=_children(el, "elem", Element._from_element),
        )

    @classmethod
    def from_xml(cls, data: bytes | str) -> Table:
        """Parse a table from an XML document whose root is the table."""
        return cls._from_element(_fromstring(data))

    def _xml(self, tag: str) -> str:
        inner = "".join(t._xml("table") for t in self.tables)
        inner += "".join(e._xml() for e in self.elements)
        return f"{_open_tag(tag, self.key)}{inner}</{tag}>"

    def to_xml(self) -> str:
        """Serialize as XML under a ``Table`` root element."""
        return self._xml("Table")


@dataclass
class Script:
    """Output of an Nmap Scripting Engine script."""

    id: str = ""
    output: str = ""
    elements: list[Element] = field(default_factory=list)
    tables: list[Table] = field(default_factory=list)

    @classmethod
    def _from_element(cls, el: ET.Element) -> Script:
        return cls(
            id=_str(el, "id"),
            output=_str(el, "output"),
            elements=_children(el, "elem", Element._from_element),
            tables=_children(el, "table", Table._from_element),
        )


@dataclass
class Port:
    """Everything known about a scanned port."""

    id: int = 0
    protocol: str = ""
    owner: Owner = field(default_factory=Owner)
    service: Service = field(default_factory=Service)
    state: State = field(default_factory=State)
    scripts: list[Script] = field(default_factory=list)

    def status(self) -> PortStatus:
        """The port's state as a :class:`PortStatus`."""
        return PortStatus(self.state.state)

    @classmethod
    def _from_element(cls, el: ET.Element) -> Port:
        return cls(
            id=_parse_int(el.get("portid", ""), bits=16, unsigned=True),
            protocol=_str(el, "protocol"),
            owner=_child(el, "owner", Owner._from_element, Owner),
            service=_child(el, "service", Service._from_element, Service),
            state=_child(el, "state", State._from_element, State),
            scripts=_children(el, "script", Script._from_element),
        )


# ---------------------------------------------------------------------------
# OS detection


@dataclass
class PortUsed:
    """A port used to fingerprint an operating system."""

    state: str = ""
    proto: str = ""
    id: int = 0

    @classmethod
    def _from_element(cls, el: ET.Element) -> PortUsed:
        return cls(state=_str(el, "state"), proto=_str(el, "proto"), id=_int(el, "portid"))


@dataclass
class OSClass:
    """Vendor information about an operating system."""

    vendor: str = ""
    os_generation: str = ""
    type: str = ""
    accuracy: int = 0
    family: str = ""
    cpes: list[str] = field(default_factory=list)

    def os_family(self) -> OSFamily:
        """The OS family as an :class:`OSFamily`."""
        return OSFamily(self.family)

    @classmethod
    def _from_element(cls, el: ET.Element) -> OSClass:
        return cls(
            vendor=_str(el, "vendor"),
            os_generation=_str(el, "osgen"),
            type=_str(el, "type"),
            accuracy=_int(el, "accuracy"),
            family=_str(el, "osfamily"),
            cpes=_children(el, "cpe", _text),
        )


@dataclass
class OSMatch:
    """An operating system match with its accuracy."""

    name: str = ""
    accuracy: int = 0
    line: int = 0
    classes: list[OSClass] = field(default_factory=list)

    @classmethod
    def _from_element(cls, el: ET.Element) -> OSMatch:
        return cls(
            name=_str(el, "name"),
            accuracy=_int(el, "accuracy"),
            line=_int(el, "line"),
            classes=_children(el, "osclass", OSClass._from_element),
        )


@dataclass
class OSFingerprint:
    """The raw fingerprint string of an operating system."""

    fingerprint: str = ""

    @classmethod
    def _from_element(cls, el: ET.Element) -> OSFingerprint:
        return cls(fingerprint=_str(el, "fingerprint"))


@dataclass
class OS:
    """The fingerprinted operating system of a host."""

    ports_used: list[PortUsed] = field(default_factory=list)
    matches: list[OSMatch] = field(default_factory=list)
    fingerprints: list[OSFingerprint] = field(default_factory=list)

    @classmethod
    def _from_element(cls, el: ET.Element) -> OS:
        return cls(
            ports_used=_children(el, "portused", PortUsed._from_element),
            matches=_children(el, "osmatch", OSMatch._from_element),
            fingerprints=_children(el, "osfingerprint", OSFingerprint._from_element),
        )


# ---------------------------------------------------------------------------
# Host timing and sequences


@dataclass
class Distance:
    """Number of hops to a host."""

    value: int = 0

    @classmethod
    def _from_element(cls, el: ET.Element) -> Distance:
        return cls(value=_int(el, "value"))


@dataclass
class Uptime:
    """How long the host has been up."""

    seconds: int = 0
    last_boot: str = ""

    @classmethod
    def _from_element(cls, el: ET.Element) -> Uptime:
        return cls(seconds=_int(el, "seconds"), last_boot=_str(el, "lastboot"))


@dataclass
class Sequence:
    """A detected sequence."""

    class_: str = ""
    values: str = ""

    @classmethod
    def _from_element(cls, el: ET.Element) -> Sequence:
        return cls(class_=_str(el, "class"), values=_str(el, "values"))


@dataclass
class TCPSequence:
    """A detected TCP sequence."""

    index: int = 0
    difficulty: str = ""
    values: str = ""

    @classmethod
    def _from_element(cls, el: ET.Element) -> TCPSequence:
        return cls(
            index=_int(el, "index"),
            difficulty=_str(el, "difficulty"),
            values=_str(el, "values"),
        )


@dataclass
class IPIDSequence(Sequence):
    """A detected IP ID sequence."""


@dataclass
class TCPTSSequence(Sequence):
    """A detected TCP timestamp sequence."""


@dataclass
class Hop:
    """One IP hop on the way to a host."""

    ttl: float = 0.0
    rtt: str = ""
    ip_addr: str = ""
    host: str = ""

    @classmethod
    def _from_element(cls, el: ET.Element) -> Hop:
        return cls(
            ttl=_float(el, "ttl"),
            rtt=_str(el, "rtt"),
            ip_addr=_str(el, "ipaddr"),
            host=_str(el, "host"),
        )


@dataclass
class Trace:
    """The route to a host."""

    proto: str = ""
    port: int = 0
    hops: list[Hop] = field(default_factory=list)

    @classmethod
    def _from_element(cls, el: ET.Element) -> Trace:
        return cls(
            proto=_str(el, "proto"),
            port=_int(el, "port"),
            hops=_children(el, "hop", Hop._from_element),
        )


@dataclass
class Times:
    """Round-trip time statistics for a host."""

    srtt: str = ""
    rtt: str = ""
    to: str = ""

    @classmethod
    def _from_element(cls, el: ET.Element) -> Times:
        return cls(srtt=_str(el, "srtt"), rtt=_str(el, "rttvar"), to=_str(el, "to"))


# ---------------------------------------------------------------------------
# Run statistics


@dataclass
class Finished:
    """Statistics about a finished scan."""

    time: Timestamp = field(default_factory=Timestamp)
    time_str: str = ""
    elapsed: float = 0.0
    summary: str = ""
    exit: str = ""
    error_msg: str = ""

    @classmethod
    def _from_element(cls, el: ET.Element) -> Finished:
        return cls(
            time=_timestamp(el, "time"),
            time_str=_str(el, "timestr"),
            elapsed=_float(el, "elapsed"),
            summary=_str(el, "summary"),
            exit=_str(el, "exit"),
            error_msg=_str(el, "errormsg"),
        )


@dataclass
class HostStats:
    """Counts of up, down and total hosts."""

    up: int = 0
    down: int = 0
    total: int = 0

    @classmethod
    def _from_element(cls, el: ET.Element) -> HostStats:
        return cls(up=_int(el, "up"), down=_int(el, "down"), total=_int(el, "total"))


@dataclass
class Stats:
    """Statistics for a scan."""

    finished: Finished = field(default_factory=Finished)
    hosts: HostStats = field(default_factory=HostStats)

    @classmethod
    def _from_element(cls, el: ET.Element) -> Stats:
        return cls(
            finished=_child(el, "finished", Finished._from_element, Finished),
            hosts=_child(el, "hosts", HostStats._from_element, HostStats),
        )


@dataclass
class Host:
    """A scanned host."""

    distance: Distance = field(default_factory=Distance)
    end_time: Timestamp = field(default_factory=Timestamp)
    ip_id_sequence: IPIDSequence = field(default_factory=IPIDSequence)
    os: OS = field(default_factory=OS)
    start_time: Timestamp = field(default_factory=Timestamp)
    timed_out: bool = False
    status: Status = field(default_factory=Status)
    tcp_sequence: TCPSequence = field(default_factory=TCPSequence)
    tcp_ts_sequence: TCPTSSequence = field(default_factory=TCPTSSequence)
    times: Times = field(default_factory=Times)
    trace: Trace = field(default_factory=Trace)
    uptime: Uptime = field(default_factory=Uptime)
    comment: str = ""
    addresses: list[Address] = field(default_factory=list)
    extra_ports: list[ExtraPort] = field(default_factory=list)
    hostnames: list[Hostname] = field(default_factory=list)
    host_scripts: list[Script] = field(default_factory=list)
    ports: list[Port] = field(default_factory=list)
    smurfs: list[Smurf] = field(default_factory=list)

    @classmethod
    def _from_element(cls, el: ET.Element) -> Host:
        return cls(
            distance=_child(el, "distance", Distance._from_element, Distance),
            end_time=_timestamp(el, "endtime"),
            ip_id_sequence=_child(el, "ipidsequence", IPIDSequence._from_element, IPIDSequence),
            os=_child(el, "os", OS._from_element, OS),
            start_time=_timestamp(el, "starttime"),
            timed_out=_bool(el, "timedout"),
            status=_child(el, "status", Status._from_element, Status),
            tcp_sequence=_child(el, "tcpsequence", TCPSequence._from_element, TCPSequence),
            tcp_ts_sequence=_child(el, "tcptssequence", TCPTSSequence._from_element, TCPTSSequence),
            times=_child(el, "times", Times._from_element, Times),
            trace=_child(el, "trace", Trace._from_element, Trace),
            uptime=_child(el, "uptime", Uptime._from_element, Uptime),
            comment=_str(el, "comment"),
            addresses=_children(el, "address", Address._from_element),
            extra_ports=_children(el, "ports/extraports", ExtraPort._from_element),
            hostnames=_children(el, "hostnames/hostname", Hostname._from_element),
            host_scripts=_children(el, "hostscript/script", Script._from_element),
            ports=_children(el, "ports/port", Port._from_element),
            smurfs=_children(el, "smurf", Smurf._from_element),
        )


# ---------------------------------------------------------------------------
# Run


@dataclass
class Run:
    """An nmap scanning run, keeping the raw XML it was parsed from."""

    args: str = ""
    profile_name: str = ""
    scanner: str = ""
    start_str: str = ""
    version: str = ""
    xml_output_version: str = ""
    debugging: Debugging = field(default_factory=Debugging)
    stats: Stats = field(default_factory=Stats)
    scan_info: ScanInfo = field(default_factory=ScanInfo)
    start: Timestamp = field(default_factory=Timestamp)
    verbose: Verbose = field(default_factory=Verbose)
    hosts: list[Host] = field(default_factory=list)
    post_scripts: list[Script] = field(default_factory=list)
    pre_scripts: list[Script] = field(default_factory=list)
    targets: list[Target] = field(default_factory=list)
    task_begin: list[Task] = field(default_factory=list)
    task_progress: list[TaskProgress] = field(default_factory=list)
    task_end: list[Task] = field(default_factory=list)
    nmap_errors: list[str] = field(default_factory=list)
    raw_xml: bytes = field(default=b"", repr=False, compare=False)

    @classmethod
    def _from_element(cls, el: ET.Element, raw_xml: bytes) -> Run:
        if el.tag != "nmaprun":
            raise ValueError(f"expected element type <nmaprun> but have <{el.tag}>")
        return cls(
            args=_str(el, "args"),
            profile_name=_str(el, "profile_name"),
            scanner=_str(el, "scanner"),
            start_str=_str(el, "startstr"),
            version=_str(el, "version"),
            xml_output_version=_str(el, "xmloutputversion"),
            debugging=_child(el, "debugging", Debugging._from_element, Debugging),
            stats=_child(el, "runstats", Stats._from_element, Stats),
            scan_info=_child(el, "scaninfo", ScanInfo._from_element, ScanInfo),
            start=_timestamp(el, "start"),
            verbose=_child(el, "verbose", Verbose._from_element, Verbose),
            hosts=_children(el, "host", Host._from_element),
            post_scripts=_children(el, "postscript/script", Script._from_element),
            pre_scripts=_children(el, "prescript/script", Script._from_element),
            targets=_children(el, "target", Target._from_element),
            task_begin=_children(el, "taskbegin", Task._from_element),
            task_progress=_children(el, "taskprogress", TaskProgress._from_element),
            task_end=_children(el, "taskend", Task._from_element),
            nmap_errors=_children(el, "NmapErrors", _text),
            raw_xml=raw_xml,
        )

    def to_file(self, file_path: str | os.PathLike[str]) -> None:
        """Write the raw XML to a file, creating it if needed.

        An existing file is written over from its start without being truncated.
        """
        fd = os.open(file_path, os.O_WRONLY | os.O_CREAT, 0o644)
        with os.fdopen(fd, "wb") as handle:
            handle.write(self.raw_xml)

    def to_reader(self) -> BinaryIO:
        """A readable binary stream over the raw XML."""
        return io.BytesIO(self.raw_xml)

    @classmethod
    def from_file(cls, filename: str | os.PathLike[str]) -> Run:
        """Read and parse an nmap XML file."""
        with open(filename, "rb") as handle:
            return parse(handle.read())


def parse(content: bytes | str) -> Run:
    """Parse nmap XML output into a :class:`Run`."""
    raw = content.encode("utf-8") if isinstance(content, str) else bytes(content)
    return Run._from_element(_fromstring(raw), raw)