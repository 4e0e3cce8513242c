"""Records of when two objects last touched."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


def now_ms() -> int:
    """Return a monotonic clock reading in milliseconds."""
    return time.monotonic_ns() // 1_000_000


@dataclass
class Collision(Generic[T]):
    """The object collided with and the clocks of the last collision and damage."""

    id: T
    last_collided_clock: int = field(default_factory=now_ms)
    last_damaged_clock: int = field(default_factory=now_ms)