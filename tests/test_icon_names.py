import pytest

from flut.icon_names import make_icon_name_enum, parse_codepoints, to_pascal_case


def test_pascal_case_joins_segments():
    assert to_pascal_case("arrow_back") == "ArrowBack"


def test_pascal_case_digit_prefix():
    assert to_pascal_case("10k") == "_10k"
    assert to_pascal_case("3d_rotation").startswith("_")


def test_pascal_case_rejects_empty_segment():
    with pytest.raises(ValueError):
        to_pascal_case("a__b")


def test_parse_codepoints_maps_code_to_name():
    result = parse_codepoints("skull e8f9\nhome e88a")
    assert result == {0xE8F9: to_pascal_case("skull"), 0xE88A: to_pascal_case("home")}


def test_parse_duplicate_codepoint_later_wins():
    assert parse_codepoints("a 1 b 1") == {1: to_pascal_case("b")}


def test_parse_rejects_bad_codes():
    with pytest.raises(ValueError):
        parse_codepoints("a zz")
    with pytest.raises(ValueError):
        parse_codepoints("a 10000")
    with pytest.raises(ValueError):
        parse_codepoints("a -1")


def test_enum_members_round_trip():
    text = "skull e8f9 home e88a"
    icon_name = make_icon_name_enum(text)
    assert {member.name: int(member) for member in icon_name} == {
        name: code for code, name in parse_codepoints(text).items()
    }
    assert icon_name.__name__ == "IconName"