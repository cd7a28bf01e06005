import re

import pytest

from fractol.colornames import color_names, lookup_color


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("snow", 0xfffafa),
        ("black", 0x0),
        ("white", 0xffffff),
        ("red", 0xff0000),
        ("navy", 0x80),
        ("lightgoldenrodyellow", 0xfafad2),
        ("gray50", 0x7f7f7f),
        ("thistle4", 0x8b7b8b),
        ("light green", 0x90ee90),
    ],
)
def test_known_colors(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Light Green") == lookup_color("light green")
    assert lookup_color("NoNe") == -1


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2f4f4f
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xfafad2


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")
    with pytest.raises(KeyError):
        lookup_color("")


def test_names_are_unique_and_lowercase():
    names = color_names()
    assert len(names) == len(set(names))
    assert all(name == name.lower() for name in names)


def test_names_order_starts_with_table_start():
    names = color_names()
    assert names[:3] == ("snow", "ghost white", "ghostwhite")
    assert names[-1] == "none"


def test_every_name_resolves_to_24_bit_or_none():
    for name in color_names():
        value = lookup_color(name)
        if name == "none":
            assert value == -1
        else:
            assert 0 <= value <= 0xFFFFFF


def test_gray_and_grey_agree():
    names = set(color_names())
    numbered = [n for n in names if re.fullmatch(r"gray\d+", n)]
    assert len(numbered) == 101
    for name in numbered:
        twin = "grey" + name[4:]
        assert twin in names
        assert lookup_color(name) == lookup_color(twin)


def test_numbered_grays_are_increasing():
    values = [lookup_color(f"gray{i}") for i in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


def test_numbered_grays_have_equal_channels():
    for i in range(101):
        value = lookup_color(f"grey{i}")
        r, g, b = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
        assert r == g == b


def test_spaced_and_joined_names_match():
    assert lookup_color("ghost white") == lookup_color("ghostwhite")
    assert lookup_color("dark red") == lookup_color("darkred")
    assert lookup_color("medium spring") == lookup_color("mediumspringgreen")