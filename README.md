# nmapkit

Typed Python models for nmap's XML report format, plus small helpers that
build the timing and performance command-line arguments nmap understands.

The package has no dependencies outside the standard library and needs
Python 3.10 or later.

## What it does not do

nmapkit does not run nmap and has no command-line tool of its own. You
produce the XML report yourself (nmap's `-oX` output) and use
`nmapkit.results` to read it. The helpers in `nmapkit.timing` only return
argument lists; starting a scan with them is up to you.

## Reading scan results (`nmapkit.results`)

```python
from nmapkit.results import Run

run = Run.from_file("report.xml")
print(run.args, run.stats.hosts.up)

for host in run.hosts:
    print([str(address) for address in host.addresses], str(host.status))
    for port in host.ports:
        print(port.id, port.protocol, port.status(), str(port.service))
```

- `parse(content)` takes the XML as bytes or a string and returns a `Run`.
  It raises `ValueError` when the document is malformed, when its root is
  not `<nmaprun>`, or when a numeric or boolean attribute cannot be read.
- `Run.from_file(filename)` reads a file and parses it.
- The raw document is kept on `Run.raw_xml`. `Run.to_reader()` returns a
  binary stream over it, and `Run.to_file(path)` writes it out, creating
  the file with mode 0644 if needed. An existing file is written over from
  its start but not truncated. A `Run` built by hand has no raw XML.

All records are dataclasses with defaults for missing attributes:
`Host`, `Port`, `Service`, `State`, `Status`, `Address`, `Hostname`,
`ExtraPort`, `Reason`, `Owner`, `Script`, `OS`, `OSMatch`, `OSClass`,
`PortUsed`, `OSFingerprint`, `Trace`, `Hop`, `Times`, `Uptime`,
`Distance`, `TCPSequence`, `IPIDSequence`, `TCPTSSequence`, `Smurf`,
`Stats`, `Finished`, `HostStats`, `ScanInfo`, `Verbose`, `Debugging`,
`Target`, `Task` and `TaskProgress`.

`str()` of `Status`, `State`, `Address`, `Hostname`, `Owner` and `Service`
gives their state, address or name.

`Port.status()` returns a `PortStatus` (`OPEN`, `CLOSED`, `FILTERED`,
`UNFILTERED`); any other state string is kept as given.

### Operating system families

`OSClass.os_family()` returns an `OSFamily` from `nmapkit.osfamilies`, a
string enum of the families nmap reports (`OSFamily.Linux`,
`OSFamily.Windows`, `OSFamily.DLink` for `"D-Link"`, ...). A family that
is not listed still yields a value equal to its string; its `is_known`
property is then `False`.

### Script output tables

`Table.from_xml(data)` parses a `<table>` document into nested `Table` and
`Element` records; `Table.to_xml()` writes a table back out as XML under a
`<Table>` root.

### Timestamps

Times in the report (`Run.start`, task times, `Finished.time`, host start
and end times) are `Timestamp` values, stored as UNIX seconds in UTC.

- `Timestamp.parse_time(s)` / `Timestamp.from_unix(seconds)` build one;
  `parse_time` raises `ValueError` on anything but a decimal integer.
- `format_time()` returns the decimal string form.
- `to_json()` / `Timestamp.from_json(data)` use that bare number.
- `to_xml_attr(name)` returns a `(name, value)` pair, or `None` for an
  unset timestamp (`is_zero`); `Timestamp.from_xml_attr(value)` reads one.

## Building timing arguments (`nmapkit.timing`)

Each helper returns the list of arguments it adds to an nmap command line:

```python
from datetime import timedelta
from nmapkit.timing import Timing, timing_template, host_timeout, max_rate

args = [
    *timing_template(Timing.AGGRESSIVE),        # ["-T4"]
    *host_timeout(timedelta(seconds=42)),       # ["--host-timeout", "42000ms"]
    *max_rate(42),                              # ["--max-rate", "42"]
]
```

`Timing` runs from `SLOWEST` (0) through `SNEAKY`, `POLITE`, `NORMAL`,
`AGGRESSIVE` to `FASTEST` (5).

Helpers taking a count: `min_hostgroup`, `max_hostgroup`,
`min_parallelism`, `max_parallelism`, `max_retries`, `min_rate`,
`max_rate`. Helpers taking a `datetime.timedelta`, written in whole
milliseconds: `min_rtt_timeout`, `max_rtt_timeout`, `initial_rtt_timeout`,
`host_timeout`, `scan_delay`, `max_scan_delay`. `stats_every(interval)`
passes its interval string through unchanged, such as `"5s"`.