import pytest

from nmapkit.osfamilies import OSFamily


def test_lookup_by_value_returns_member():
    assert OSFamily("Linux") is OSFamily.Linux


def test_member_equals_its_string():
    family = OSFamily("Linux")
    assert family == "Linux"
    assert str(family) == "Linux"


@pytest.mark.parametrize(
    "member, value",
    [
        (OSFamily.ATandT, "AT&T"),
        (OSFamily.NutOS, "Nut/OS"),
        (OSFamily.XEUdotCom, "XEU.com"),
        (OSFamily.TwoN, "2N"),
        (OSFamily.AlcatelLucent, "Alcatel-Lucent"),
        (OSFamily.nCircle, "nCircle"),
    ],
)
def test_values_with_special_characters(member, value):
    assert member.value == value
    assert str(member) == value
    assert OSFamily(value) is member


def test_case_variants_are_distinct():
    assert OSFamily.DrayTek is not OSFamily.Draytek
    assert OSFamily("TP-LINK") is OSFamily.TPLINK
    assert OSFamily("TP-Link") is OSFamily.TPLink
    assert OSFamily("WAGO") is not OSFamily("Wago")


def test_values_are_unique():
    looked_up = {OSFamily(member.value) for member in OSFamily}
    assert len(looked_up) == len(OSFamily.__members__)


def test_every_member_round_trips_through_value():
    assert all(OSFamily(member.value) is member for member in OSFamily)


def test_unknown_family_keeps_its_string():
    family = OSFamily("RouterOS")
    assert family == "RouterOS"
    assert str(family) == "RouterOS"
    assert family.is_known is False


def test_unknown_family_is_not_added_to_members():
    family = OSFamily("embedded")
    assert family.value == "embedded"
    assert family.is_known is False
    assert "embedded" not in OSFamily.__members__


def test_known_family_is_known():
    assert OSFamily("Windows").is_known is True


def test_non_string_value_rejected():
    with pytest.raises(ValueError):
        OSFamily(42)