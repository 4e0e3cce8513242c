"""Packed colour values used for drawing text and outlines."""

from __future__ import annotations

import enum


def get_color(red: int, green: int, blue: int) -> int:
    """Pack 8-bit red, green and blue components into one 0xRRGGBB integer."""
    for name, value in (("red", red), ("green", green), ("blue", blue)):
        if not 0 <= value <= 255:
            raise ValueError(f"{name} component must be within 0..255, got {value}")
    return (red << 16) | (green << 8) | blue


class Colors(enum.IntEnum):
    """The basic colours of the interface."""

    BLACK = get_color(0, 0, 0)
    RED = get_color(255, 0, 0)
    GREEN = get_color(0, 255, 0)
    BLUE = get_color(0, 0, 255)
    YELLOW = get_color(255, 255, 0)
    CYAN = get_color(0, 255, 255)
    MAGENTA = get_color(255, 0, 255)
    WHITE = get_color(255, 255, 255)