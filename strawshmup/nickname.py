"""Entering a player nickname with a row of character dials."""

from __future__ import annotations

from typing import Callable

from strawshmup.dial import Dial
from strawshmup.keys import Key, KeyPushFlags, Keyboard

SOUND_CURSOR_MOVE = "cursormove"
SOUND_FORWARD = "forward"
SOUND_BACKWARD = "backward"


class NicknameInput:
    """Sixteen dials edited one at a time, then confirmed and determined."""

    DIGITS = 16

    def __init__(
        self,
        flags: KeyPushFlags | None = None,
        play: Callable[[str], None] | None = None,
    ) -> None:
        self.flags = flags if flags is not None else KeyPushFlags()
        self._play = play
        self.operating_digit = 0
        self.confirming = False
        self.determined = False
        self.dials = [Dial(on_move=self._cursor_moved) for _ in range(self.DIGITS)]

    def update(self, keyboard: Keyboard) -> None:
        """Handle one frame of key input for the whole input and the active dial."""
        self.respond_to_keyinput(keyboard)
        self.dials[self.operating_digit].respond_to_keyinput(keyboard, self.flags, self.confirming)

    def respond_to_keyinput(self, keyboard: Keyboard) -> None:
        """Move between dials and confirm while editing; go back or determine while confirming."""
        if not self.confirming:
            if self.flags.rising(Key.LEFT, Key.LEFT in keyboard):
                self.digitslide_left()
            if self.flags.rising(Key.RIGHT, Key.RIGHT in keyboard):
                self.digitslide_right()
            if self.flags.rising(Key.Z, Key.Z in keyboard):
                self.confirming = True
                self._sound(SOUND_FORWARD)
        else:
            if self.flags.rising(Key.X, Key.X in keyboard):
                self.confirming = False
                self._sound(SOUND_BACKWARD)
            if self.flags.rising(Key.ENTER, Key.ENTER in keyboard):
                self.determined = True
                self._sound(SOUND_FORWARD)

    def digitslide_left(self) -> None:
        """Move the cursor one dial to the left, stopping at the first."""
        if self.operating_digit >= 1:
            self.operating_digit -= 1
        self._sound(SOUND_CURSOR_MOVE)

    def digitslide_right(self) -> None:
        """Move the cursor one dial to the right, stopping at the last."""
        if self.operating_digit < self.DIGITS - 1:
            self.operating_digit += 1
        self._sound(SOUND_CURSOR_MOVE)

    def get(self) -> str:
        """Return the nickname spelled by all dials."""
        return "".join(dial.get() for dial in self.dials)

    def _cursor_moved(self) -> None:
        self._sound(SOUND_CURSOR_MOVE)

    def _sound(self, name: str) -> None:
        if self._play is not None:
            self._play(name)