from datetime import datetime, timezone

import pytest

from nmapkit.osfamilies import OSFamily
from nmapkit.results import (
    Address,
    Element,
    ExtraPort,
    Hop,
    Hostname,
    IPIDSequence,
    OSClass,
    Owner,
    Port,
    PortStatus,
    PortUsed,
    Reason,
    Run,
    ScanInfo,
    Service,
    State,
    Status,
    Table,
    Task,
    TaskProgress,
    TCPSequence,
    TCPTSSequence,
    Timestamp,
    Times,
    Uptime,
    parse,
)

FINGERPRINT = (
    "SCAN(V=4.53%D=1/27%OT=80%CT=443%CU=%PV=N%G=N%TM=479D25ED%P=i686-pc-linux-gnu)\n"
    "SEQ(SP=F2%GCD=1%ISR=E9%TI=Z%TS=1C)\n"
    "OPS(O1=M5B4ST11NW0%O2=M5B4ST11NW0%O3=M5B4NNT11NW0%O4=M5B4ST11NW0%O5=M5B4ST11NW0%O6=M5B4ST11)\n"
    "WIN(W1=16A0%W2=16A0%W3=16A0%W4=16A0%W5=16A0%W6=16A0)\n"
    "ECN(R=Y%DF=Y%TG=40%W=16D0%O=M5B4NNSNW0%CC=N%Q=)\n"
    "T1(R=Y%DF=Y%TG=40%S=O%A=S+%F=AS%RD=0%Q=)\n"
    "T2(R=N)\n"
    "T3(R=Y%DF=Y%TG=40%W=16A0%S=O%A=S+%F=AS%O=M5B4ST11NW0%RD=0%Q=)\n"
    "T4(R=Y%DF=Y%TG=40%W=0%S=A%A=Z%F=R%O=%RD=0%Q=)\n"
    "T5(R=Y%DF=Y%TG=40%W=0%S=Z%A=S+%F=AR%O=%RD=0%Q=)\n"
    "T6(R=Y%DF=Y%TG=40%W=0%S=A%A=Z%F=R%O=%RD=0%Q=)\n"
    "T7(R=Y%DF=Y%TG=40%W=0%S=Z%A=S+%F=AR%O=%RD=0%Q=)\n"
    "U1(R=N)\n"
    "IE(R=N)\n"
)

ARGS = (
    "nmap -A -v -oX sample-03.xml freshmeat.net sourceforge.net nmap.org "
    "kernel.org openbsd.org netbsd.org google.com gmail.com"
)

SCAN_XML = f"""<?xml version="1.0"?>
<nmaprun scanner="nmap" args="{ARGS}" start="1201479002" startstr="Sun Jan 27 21:10:02 2008" version="4.53" xmloutputversion="1.01">
<scaninfo type="syn" protocol="tcp" numservices="1714" services="1-1027,1029-1033,1040"/>
<verbose level="1"/>
<debugging level="0"/>
<taskbegin task="Ping Scan" time="1201479013"/>
<taskend task="Ping Scan" time="1201479014" extrainfo="8 total hosts"/>
<taskbegin task="SYN Stealth Scan" time="1201479016"/>
<taskprogress task="SYN Stealth Scan" time="1201479046" percent="3.22" remaining="903" etc="1201479949"/>
<taskprogress task="SYN Stealth Scan" time="1201479442" percent="56.66" remaining="325" etc="1201479767"/>
<taskend task="SYN Stealth Scan" time="1201480878" extrainfo="8570 total ports"/>
<prescript><script id="broadcast" output="none"/></prescript>
<host starttime="1684341000" endtime="1684342000" timedout="true">
<status state="up" reason="reset"/>
<address addr="66.35.250.168" addrtype="ipv4"/>
<hostnames><hostname name="freshmeat.net" type="PTR"/></hostnames>
<ports>
<extraports state="filtered" count="1712"><extrareasons reason="host-prohibiteds" count="1712"/></extraports>
<port protocol="tcp" portid="80"><state state="open" reason="syn-ack" reason_ttl="45"/><service name="http" product="Apache httpd" version="1.3.39" extrainfo="(Unix) PHP/4.4.7" method="probed" conf="10"/><script id="robots.txt" output="User-Agent: * /img/ /redir/ "/><script id="HTML title" output="freshmeat.net: Welcome to freshmeat.net"/></port>
<port protocol="tcp" portid="443"><state state="closed" reason="reset" reason_ttl="46"/><service name="https" method="table" conf="3"/></port>
</ports>
<os>
<portused state="open" proto="tcp" portid="80"/>
<portused state="closed" proto="tcp" portid="443"/>
<osmatch name="MicroTik RouterOS 2.9.46" accuracy="94" line="14788"><osclass type="software router" vendor="MikroTik" osfamily="RouterOS" osgen="2.X" accuracy="94"/></osmatch>
<osmatch name="Linksys WRT54GS WAP (Linux kernel)" accuracy="94" line="8292"><osclass type="WAP" vendor="Linksys" osfamily="Linux" osgen="2.4.X" accuracy="94"/></osmatch>
<osmatch name="Linux 2.4.28 - 2.4.30" accuracy="94" line="8693"/>
<osfingerprint fingerprint="{FINGERPRINT.replace(chr(10), '&#xa;')}"/>
</os>
<uptime seconds="206" lastboot="Sun Jan 27 21:43:11 2008"/>
<tcpsequence index="242" difficulty="Good luck!" values="457B276,4584FC8,161C122C,161B185F,1605EA95,1614C498"/>
<ipidsequence class="All zeros" values="0,0,0,0,0,0"/>
<tcptssequence class="other" values="3FB03AA9,3FB03C75,45B26360,45B2636A,45B26374,45B2637E"/>
<trace port="80" proto="tcp">
<hop ttl="1" rtt="1.83" ipaddr="192.168.254.254"/>
<hop ttl="3" rtt="18.33" ipaddr="200.217.30.250" host="gigabitethernet5-1.80-cto-rn-rotd-02.telemar.net.br"/>
<hop ttl="18" rtt="238.36" ipaddr="66.35.250.168" host="freshmeat.net"/>
</trace>
<times srtt="269788" rttvar="41141" to="434352"/>
</host>
<runstats><finished time="1201481569" timestr="Sun Jan 27 21:52:49 2008"/><hosts up="8" down="0" total="8"/></runstats>
</nmaprun>
"""

SSH_KEY = (
    "AAAAB3NzaC1yc2EAAAABIwAAAQEAwVKoTY/7GFG7BmKkG6qFAHY/f3ciDX2MXTBLMEJP0xyUJsoy/"
    "CVRYw2b4qUB/GCJ5lh2InP+LVnPD3ZdtpyIvbS0eRZs/BH+mVLGh9xA/wOEUiiCfzQRsHj1xn7cqeWV"
    "iAzQtdGluk/5CVAvr1FU3HNaaWkg7KQOSiKAzgDwCBtQhlgI40xdXgbqMkrHeP4M1p4MxoEVpZMe4oOb"
    "ACWwazeHP/Xas1vy5rbnmE59MpEZaA8t7AfGlW4MrVMhAB1JsFMdd0qFLpy/l93H3ptSlx1+6PQ5gUyj"
    "hmDUjMR+k6fb0yOeGdOrjN8IrWPmebZRFBjK5aCJwubgY/03VsSBMQ=="
)


def _expected_table():
    return Table(
        key="key123",
        elements=[
            Element(key="key", value=SSH_KEY),
            Element(key="fingerprint", value="79f809acd4e232421049d3bd208285ec"),
            Element(key="type", value="ssh-rsa"),
            Element(key="bits", value="2048"),
            Element(value="just some value"),
        ],
        tables=[
            Table(elements=[Element(key="important element", value="ssh-rsa"), Element(value="just some value")]),
            Table(key="dialects", elements=[Element(value="2.02"), Element(value="2.10")]),
        ],
    )


def ts(seconds):
    return Timestamp.from_unix(seconds)


def test_parse_time_invalid():
    with pytest.raises(ValueError):
        Timestamp.parse_time("invalid")


def test_format_time_round_trip():
    assert Timestamp.parse_time("123456789").format_time() == "123456789"


def test_os_family():
    assert OSClass(family="Linux").os_family() == OSFamily.Linux


def test_os_family_unlisted_keeps_string():
    assert OSClass(family="RouterOS").os_family() == "RouterOS"


def test_parse_table_xml():
    expected = _expected_table()
    inner = "".join(f'<elem key="{e.key}">{e.value}</elem>' for e in expected.elements)
    first = "".join(f'<elem key="{e.key}">{e.value}</elem>' for e in expected.tables[0].elements)
    second = "".join(f'<elem key="{e.key}">{e.value}</elem>' for e in expected.tables[1].elements)
    document = (
        f'<table key="{expected.key}">{inner}'
        f'<table key = "">{first}</table>'
        f'<table key = "dialects">{second}</table></table>'
    )
    table = Table.from_xml(document)
    assert table.key == "key123"
    assert [e.value for e in table.elements] == [e.value for e in expected.elements]
    assert [t.key for t in table.tables] == ["", "dialects"]
    for got, want in zip(table.tables, expected.tables):
        assert [e.value for e in got.elements] == [e.value for e in want.elements]


def test_format_table_xml():
    table = _expected_table()
    output = table.to_xml()
    expected_parts = [
        '<Table key="key123">',
        "<table>",
        '<elem key="important element">ssh-rsa</elem>',
        "<elem>just some value</elem>",
        "</table>",
        '<table key="dialects">',
        "<elem>2.02</elem>",
        "<elem>2.10</elem>",
        f'<elem key="key">{SSH_KEY}</elem>',
        '<elem key="fingerprint">79f809acd4e232421049d3bd208285ec</elem>',
        '<elem key="type">ssh-rsa</elem>',
        '<elem key="bits">2048</elem>',
        "</Table>",
    ]
    for part in expected_parts:
        assert part in output


def test_table_xml_round_trip():
    table = _expected_table()
    assert Table.from_xml(table.to_xml()) == table


def test_table_from_malformed_xml():
    with pytest.raises(ValueError):
        Table.from_xml("<table><elem>")


def test_string_methods():
    assert str(Status(state="up")) == "up"
    assert str(Address(addr="192.168.1.1")) == "192.168.1.1"
    assert str(Hostname(name="toto.test")) == "toto.test"
    assert str(State(state="open")) == "open"
    assert str(Owner(name="test")) == "test"
    assert str(Service(name="http")) == "http"


def test_to_file_empty_run(tmp_path):
    target = tmp_path / "toto.txt"
    Run().to_file(target)
    assert target.read_bytes() == b""


def test_to_file_writes_raw_xml(tmp_path):
    target = tmp_path / "scan.xml"
    run = parse(SCAN_XML)
    run.to_file(target)
    assert target.read_bytes() == SCAN_XML.encode("utf-8")
    assert Run.from_file(target) == run


def test_to_reader():
    run = parse(SCAN_XML.encode("utf-8"))
    assert run.to_reader().read() == run.raw_xml == SCAN_XML.encode("utf-8")


def test_timestamp_json():
    stamp = Timestamp(datetime(1999, 11, 30, tzinfo=timezone.utc))
    assert stamp.to_json() == "943920000"
    decoded = Timestamp.from_json(b"943920000")
    assert decoded.format_time() == stamp.format_time()
    assert decoded == stamp


def test_timestamp_xml_attr():
    stamp = Timestamp(datetime(1999, 11, 30, tzinfo=timezone.utc))
    assert stamp.to_xml_attr("ts") == ("ts", "943920000")
    assert Timestamp().to_xml_attr("ts") is None
    assert Timestamp.from_xml_attr("943920000").format_time() == stamp.format_time()


def test_parse_run_header():
    run = parse(SCAN_XML)
    assert run.args == ARGS
    assert run.profile_name == ""
    assert run.scanner == "nmap"
    assert run.start_str == "Sun Jan 27 21:10:02 2008"
    assert run.version == "4.53"
    assert run.xml_output_version == "1.01"
    assert run.scan_info == ScanInfo(
        num_services=1714, protocol="tcp", services="1-1027,1029-1033,1040", type="syn"
    )
    assert run.start == ts(1201479002)
    assert run.verbose.level == 1
    assert run.debugging.level == 0
    assert run.targets == []
    assert run.stats.finished.time == ts(1201481569)
    assert run.stats.finished.time_str == "Sun Jan 27 21:52:49 2008"
    assert (run.stats.hosts.up, run.stats.hosts.down, run.stats.hosts.total) == (8, 0, 8)
    assert [s.id for s in run.pre_scripts] == ["broadcast"]


def test_parse_run_tasks():
    run = parse(SCAN_XML)
    assert run.task_begin == [
        Task(time=ts(1201479013), task="Ping Scan"),
        Task(time=ts(1201479016), task="SYN Stealth Scan"),
    ]
    assert run.task_end == [
        Task(time=ts(1201479014), task="Ping Scan", extra_info="8 total hosts"),
        Task(time=ts(1201480878), task="SYN Stealth Scan", extra_info="8570 total ports"),
    ]
    assert run.task_progress == [
        TaskProgress(percent=3.22, remaining=903, task="SYN Stealth Scan", etc=ts(1201479949), time=ts(1201479046)),
        TaskProgress(percent=56.66, remaining=325, task="SYN Stealth Scan", etc=ts(1201479767), time=ts(1201479442)),
    ]


def test_parse_run_host():
    (host,) = parse(SCAN_XML).hosts
    assert host.start_time == ts(1684341000)
    assert host.end_time == ts(1684342000)
    assert host.timed_out is True
    assert host.status == Status(state="up", reason="reset")
    assert host.addresses == [Address(addr="66.35.250.168", addr_type="ipv4")]
    assert host.hostnames == [Hostname(name="freshmeat.net", type="PTR")]
    assert host.extra_ports == [
        ExtraPort(state="filtered", count=1712, reasons=[Reason(reason="host-prohibiteds", count=1712)])
    ]
    assert host.ip_id_sequence == IPIDSequence(class_="All zeros", values="0,0,0,0,0,0")
    assert host.tcp_sequence == TCPSequence(
        index=242, difficulty="Good luck!", values="457B276,4584FC8,161C122C,161B185F,1605EA95,1614C498"
    )
    assert host.tcp_ts_sequence == TCPTSSequence(
        class_="other", values="3FB03AA9,3FB03C75,45B26360,45B2636A,45B26374,45B2637E"
    )
    assert host.times == Times(srtt="269788", rtt="41141", to="434352")
    assert host.uptime == Uptime(seconds=206, last_boot="Sun Jan 27 21:43:11 2008")
    assert host.smurfs == []
    assert host.host_scripts == []


def test_parse_run_ports():
    (host,) = parse(SCAN_XML).hosts
    http, https = host.ports
    assert http.id == 80 and http.protocol == "tcp"
    assert http.service == Service(
        name="http", extra_info="(Unix) PHP/4.4.7", method="probed",
        product="Apache httpd", version="1.3.39", confidence=10,
    )
    assert http.state == State(state="open", reason="syn-ack", reason_ttl=45)
    assert [(s.id, s.output) for s in http.scripts] == [
        ("robots.txt", "User-Agent: * /img/ /redir/ "),
        ("HTML title", "freshmeat.net: Welcome to freshmeat.net"),
    ]
    assert http.status() == PortStatus.OPEN
    assert https == Port(
        id=443, protocol="tcp",
        service=Service(name="https", method="table", confidence=3),
        state=State(state="closed", reason="reset", reason_ttl=46),
    )
    assert https.status() == PortStatus.CLOSED


def test_parse_run_os_and_trace():
    (host,) = parse(SCAN_XML).hosts
    assert host.os.ports_used == [PortUsed("open", "tcp", 80), PortUsed("closed", "tcp", 443)]
    assert [m.name for m in host.os.matches] == [
        "MicroTik RouterOS 2.9.46",
        "Linksys WRT54GS WAP (Linux kernel)",
        "Linux 2.4.28 - 2.4.30",
    ]
    assert host.os.matches[0].classes == [
        OSClass(vendor="MikroTik", os_generation="2.X", type="software router", accuracy=94, family="RouterOS")
    ]
    assert host.os.matches[1].line == 8292
    assert host.os.matches[2].classes == []
    assert host.os.fingerprints[0].fingerprint == FINGERPRINT
    assert host.trace.proto == "tcp" and host.trace.port == 80
    assert host.trace.hops == [
        Hop(ttl=1, rtt="1.83", ip_addr="192.168.254.254"),
        Hop(ttl=3, rtt="18.33", ip_addr="200.217.30.250", host="gigabitethernet5-1.80-cto-rn-rotd-02.telemar.net.br"),
        Hop(ttl=18, rtt="238.36", ip_addr="66.35.250.168", host="freshmeat.net"),
    ]


def test_parse_host_script_tables():
    document = (
        '<nmaprun><host><hostscript><script id="ssh-hostkey" output="x">'
        '<table><elem key="bits">2048</elem></table><elem>loose</elem>'
        "</script></hostscript></host></nmaprun>"
    )
    (script,) = parse(document).hosts[0].host_scripts
    assert script.tables == [Table(elements=[Element(key="bits", value="2048")])]
    assert script.elements == [Element(value="loose")]


def test_parse_wrong_root():
    with pytest.raises(ValueError, match="nmaprun"):
        parse("<other/>")


def test_parse_invalid_integer():
    with pytest.raises(ValueError):
        parse('<nmaprun><verbose level="loud"/></nmaprun>')


def test_parse_port_out_of_range():
    with pytest.raises(ValueError):
        parse('<nmaprun><host><ports><port portid="70000"/></ports></host></nmaprun>')


def test_parse_invalid_timestamp_attr():
    with pytest.raises(ValueError):
        parse('<nmaprun start=""/>')


def test_port_status_unlisted_value():
    assert Port(state=State(state="open|filtered")).status() == "open|filtered"