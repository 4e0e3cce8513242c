"""A rolling character selector used to spell a nickname."""

from __future__ import annotations

from typing import Callable

from strawshmup.keys import Key, KeyPushFlags, Keyboard


class Dial:
    """One slot of the nickname, rolled up and down through a fixed alphabet."""

    ENABLED_CHARACTERS = " ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_-!?@"
    INITIAL_POSITION = 0

    def __init__(self, on_move: Callable[[], None] | None = None) -> None:
        self.position = self.INITIAL_POSITION
        self._on_move = on_move

    def respond_to_keyinput(self, keyboard: Keyboard, flags: KeyPushFlags, confirming: bool) -> None:
        """Roll on a fresh press of UP or DOWN, unless the nickname is being confirmed."""
        if confirming:
            return
        if flags.rising(Key.UP, Key.UP in keyboard):
            self.uproll()
        if flags.rising(Key.DOWN, Key.DOWN in keyboard):
            self.downroll()

    def uproll(self) -> None:
        """Advance to the next character, wrapping to the first."""
        self.position = (self.position + 1) % len(self.ENABLED_CHARACTERS)
        self._moved()

    def downroll(self) -> None:
        """Go back to the previous character, wrapping to the last."""
        self.position = (self.position - 1) % len(self.ENABLED_CHARACTERS)
        self._moved()

    def get(self) -> str:
        """Return the selected character."""
        return self.ENABLED_CHARACTERS[self.position]

    def _moved(self) -> None:
        if self._on_move is not None:
            self._on_move()