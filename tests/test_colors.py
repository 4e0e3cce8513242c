import pytest

from strawshmup.colors import Colors, get_color


def _unpack(color):
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


@pytest.mark.parametrize("rgb", [(0, 0, 0), (255, 0, 255), (12, 34, 56), (255, 255, 255)])
def test_pack_round_trip(rgb):
    assert _unpack(get_color(*rgb)) == rgb


def test_named_colors_match_components():
    assert _unpack(Colors.RED) == (255, 0, 0)
    assert _unpack(Colors.YELLOW) == (255, 255, 0)
    assert _unpack(Colors.MAGENTA) == (255, 0, 255)
    assert Colors.WHITE == get_color(255, 255, 255)


def test_named_colors_are_the_eight_primaries():
    expected = {
        get_color(0, 0, 0),
        get_color(255, 0, 0),
        get_color(0, 255, 0),
        get_color(0, 0, 255),
        get_color(255, 255, 0),
        get_color(0, 255, 255),
        get_color(255, 0, 255),
        get_color(255, 255, 255),
    }
    assert len(expected) == 8
    assert {int(c) for c in Colors} == expected


@pytest.mark.parametrize("rgb", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_out_of_range_rejected(rgb):
    with pytest.raises(ValueError):
        get_color(*rgb)