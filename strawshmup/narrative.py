"""Dialogue pop-ups whose text rolls out letter by letter."""

from __future__ import annotations

import enum

from strawshmup.collide_polygon import Point

FIELD_WIDTH = 620


class PortraitID(enum.Enum):
    """Who is speaking, which selects the portrait and indicator."""

    ICHIGO_CHAN_NORMAL = enum.auto()
    ICHIGO_CHAN_AVATAR = enum.auto()
    MOFU = enum.auto()
    NEON = enum.auto()
    TOROI = enum.auto()
    TEXTFILE = enum.auto()


class NarrativePopState(enum.Enum):
    """Life cycle of a pop-up."""

    READY = enum.auto()
    ROLLING = enum.auto()
    AWAITING = enum.auto()


_PORTRAITS: dict[PortraitID, tuple[str, float]] = {
    PortraitID.ICHIGO_CHAN_NORMAL: ("FULLBODY_ICHIGOCHAN_NORMAL", 0.15),
    PortraitID.ICHIGO_CHAN_AVATAR: ("FULLBODY_ICHIGOCHAN_AVATAR", 0.15),
    PortraitID.MOFU: ("FULLBODY_MOFU", 0.15),
    PortraitID.NEON: ("FULLBODY_NEON", 0.15),
    PortraitID.TOROI: ("FULLBODY_TOROI", 0.15),
    PortraitID.TEXTFILE: ("TEXT_FILE", 1.0),
}

_INDICATORS: dict[PortraitID, str] = {
    PortraitID.ICHIGO_CHAN_NORMAL: "STRAWBERRY_FUCHSIA",
    PortraitID.ICHIGO_CHAN_AVATAR: "STRAWBERRY_RED",
    PortraitID.MOFU: "GHOST_YELLOW_FRONT",
    PortraitID.NEON: "GHOST_AQUA_FRONT",
    PortraitID.TOROI: "GHOST_GRAY_FRONT",
}


class NarrativePop:
    """One line of dialogue with its speaker and portrait."""

    POS = Point(FIELD_WIDTH / 2, 100)
    PORTRAIT_POS = Point(POS.x - 120, POS.y + 200)
    TEXT_POS = Point(POS.x - 290, POS.y + 30)
    SPEAKER_NAME_POS = Point(POS.x - 290, POS.y + 85)
    AWAITING_INDICATOR_POS = Point(POS.x + 275, POS.y - 60)

    TEXT_ROLL_SPEED = 20.0
    """Letters shown per second."""
    AWAITING_INDICATOR_BLINK_WAIT = 250
    """Milliseconds between blinks of the awaiting indicator."""

    def __init__(self, text: str, speaker_name: str, portrait_id: PortraitID) -> None:
        self.text = text
        self.speaker_name = speaker_name
        self.portrait_id = portrait_id
        self.state = NarrativePopState.READY
        self.displaying_text = ""
        self.display_letter_count = 0
        self.activated_clock = 0
        self.indicator_lit = False
        self.indicator_last_blinked_clock = 0

    def activate(self, now: int) -> None:
        """Start rolling the text at clock ``now`` (milliseconds)."""
        self.state = NarrativePopState.ROLLING
        self.activated_clock = now

    def update(self, now: int) -> None:
        """Advance the text roll and the indicator blink to clock ``now``."""
        if self.state is NarrativePopState.READY:
            self.display_letter_count = 0
        else:
            elapsed = (now - self.activated_clock) / 1000
            self.display_letter_count = max(0, int(elapsed * self.TEXT_ROLL_SPEED))

        self.displaying_text = self.text[: self.display_letter_count]

        if self.state is NarrativePopState.ROLLING and self.display_letter_count >= len(self.text):
            self.state = NarrativePopState.AWAITING

        if self.state is NarrativePopState.AWAITING:
            if now - self.indicator_last_blinked_clock > self.AWAITING_INDICATOR_BLINK_WAIT:
                self.indicator_lit = not self.indicator_lit
                self.indicator_last_blinked_clock = now

    def portrait_image(self) -> tuple[str, float]:
        """Return the portrait image name and its drawing scale."""
        return _PORTRAITS[self.portrait_id]

    def indicator_image(self) -> str | None:
        """Return the awaiting indicator image to show now, or None when none is shown."""
        if self.state is not NarrativePopState.AWAITING or not self.indicator_lit:
            return None
        return _INDICATORS.get(self.portrait_id)