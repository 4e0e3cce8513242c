"""Sprite files for the bullet shapes and the colours each shape comes in."""

from __future__ import annotations

import enum

BULLET_IMAGE_ROOT = "image/sprite/bullet"

_SIXTEEN = (
    "black", "gray", "silver", "white", "blue", "navy", "teal", "green",
    "lime", "aqua", "yellow", "red", "fuchsia", "olive", "purple", "maroon",
)
_ELEVEN = (
    "red", "orange", "yellow", "green", "teal", "aqua",
    "blue", "purple", "fuchsia", "silver", "gray",
)
_MARBLE = (
    "red", "orange", "yellow", "green", "teal",
    "aqua", "blue", "purple", "fuchsia", "gray",
)


class BulletShape(enum.Enum):
    """Bullet sprite families; the value is the folder and file prefix."""

    ANCHOR = "Anchor"
    BUBBLE = "Bubble"
    CIRCLE = "Circle"
    MARBLE = "Marble"
    CRYSTAL = "Crystal"
    STRAWBERRY = "Strawberry"
    POTATO = "Potato"
    LASER = "Laser"
    HEART = "Heart"
    OVAL = "Oval"

    @property
    def palette(self) -> dict[str, int]:
        """Map each available colour to its number in the file name."""
        return dict(_PALETTES[self])

    @property
    def colors(self) -> tuple[str, ...]:
        """The available colours in file-number order."""
        return tuple(_PALETTES[self])


def _numbered(colors: tuple[str, ...], first: int = 1) -> dict[str, int]:
    return {color: number for number, color in enumerate(colors, start=first)}


_PALETTES: dict[BulletShape, dict[str, int]] = {
    BulletShape.ANCHOR: _numbered(_SIXTEEN),
    BulletShape.BUBBLE: _numbered(_SIXTEEN),
    BulletShape.CIRCLE: _numbered(_SIXTEEN),
    BulletShape.MARBLE: _numbered(_MARBLE),
    BulletShape.CRYSTAL: _numbered(_SIXTEEN),
    BulletShape.STRAWBERRY: _numbered(_SIXTEEN),
    BulletShape.POTATO: _numbered(("basic",) + _SIXTEEN, first=0),
    BulletShape.LASER: _numbered(_ELEVEN),
    BulletShape.HEART: _numbered(_ELEVEN),
    BulletShape.OVAL: _numbered(_ELEVEN),
}


def bullet_image_path(shape: BulletShape | str, color: str) -> str:
    """Return the sprite file path of a bullet shape in the given colour."""
    shape = BulletShape(shape)
    key = color.lower()
    palette = _PALETTES[shape]
    if key not in palette:
        raise ValueError(f"{shape.value} bullets have no colour {color!r}")
    return f"{BULLET_IMAGE_ROOT}/{shape.value}/{shape.value}{palette[key]:02d}{key}.png"


def bullet_image_paths() -> list[str]:
    """Return every bullet sprite path, shape by shape in colour order."""
    return [
        bullet_image_path(shape, color)
        for shape in BulletShape
        for color in _PALETTES[shape]
    ]