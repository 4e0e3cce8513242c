"""Keys the game reads and their push-latch flags."""

from __future__ import annotations

import enum
from typing import Collection

Keyboard = Collection["Key"]
"""The set of keys held down in the current frame."""


class Key(enum.Enum):
    """Keys with a push latch."""

    Z = enum.auto()
    X = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    RIGHT = enum.auto()
    LEFT = enum.auto()
    F3 = enum.auto()
    F4 = enum.auto()
    F5 = enum.auto()
    ENTER = enum.auto()


class KeyPushFlags:
    """Remembers which keys were down so that each press acts only once."""

    def __init__(self) -> None:
        self._held: dict[Key, bool] = {}
        self.reset()

    def reset(self) -> None:
        """Forget every held key."""
        self._held = {key: False for key in Key}

    def __getitem__(self, key: Key) -> bool:
        return self._held[key]

    def rising(self, key: Key, down: bool) -> bool:
        """Record the key's state; return True only on the frame it goes down."""
        if not self._held[key] and down:
            self._held[key] = True
            return True
        if self._held[key] and not down:
            self._held[key] = False
        return False