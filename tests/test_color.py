import pytest

from fractol.color import (
    ColorMode,
    build_color_table,
    colorize,
    fire,
    poly_gradient,
    purple_trip,
    sin_trippy,
)

PALETTES = [poly_gradient, sin_trippy, fire, purple_trip]


def test_inside_set_is_black():
    assert poly_gradient(50, 50) == 0x000000
    assert sin_trippy(50, 50) == 0x000000
    assert fire(50, 50) == 0x000000
    assert purple_trip(50, 50) == 0x000000


def test_colors_fit_in_24_bits():
    for i in range(100):
        assert 0 <= poly_gradient(i, 100) <= 0xFFFFFF
        assert 0 <= sin_trippy(i, 100) <= 0xFFFFFF
        assert 0 <= fire(i, 100) <= 0xFFFFFF
        assert 0 <= purple_trip(i, 100) <= 0xFFFFFF


def test_fire_starts_black():
    assert fire(0, 30) == 0


def test_fire_brightens():
    reds = [fire(i, 100) >> 16 for i in range(100)]
    assert reds == sorted(reds)


def test_purple_trip_has_no_green():
    for i in range(64):
        assert (purple_trip(i, 64) >> 8) & 0xFF == 0


def test_mode_order():
    assert build_color_table(ColorMode(0), 10) == [
        poly_gradient(i, 10) for i in range(11)
    ]
    assert build_color_table(ColorMode(1), 10) == [
        sin_trippy(i, 10) for i in range(11)
    ]
    assert build_color_table(ColorMode(2), 10) == [fire(i, 10) for i in range(11)]
    assert build_color_table(ColorMode(3), 10) == [
        purple_trip(i, 10) for i in range(11)
    ]


@pytest.mark.parametrize("mode,palette", list(zip(ColorMode, PALETTES)))
def test_table_matches_palette(mode, palette):
    table = build_color_table(mode, 40)
    assert len(table) == 41
    assert table == [palette(i, 40) for i in range(41)]
    assert table[-1] == 0x000000


def test_unknown_mode_is_all_black():
    table = build_color_table(7, 20)
    assert len(table) == 21
    assert set(table) == {0x000000}


def test_colorize_looks_up_entry():
    table = build_color_table(ColorMode.SIN_TRIPPY, 30)
    assert colorize(12, table) == table[12]


def test_colorize_clamps_to_last_entry():
    table = build_color_table(ColorMode.FIRE, 30)
    assert colorize(500, table) == table[30]