"""Diagnostic values shown on screen in debug mode."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass
class DebugParams:
    """Timing, frame-rate and position figures collected while playing."""

    debug_flag: bool = False
    game_time: float = 0.0
    survival_time: float = 0.0
    survival_time_score: int = 0
    actual_fps: int = 0
    instant_fps: float = 0.0
    sleep_time: int = 0
    objects: int = 0
    my_character_infield_x: float = 0.0
    my_character_infield_y: float = 0.0
    my_character_draw_x: float = 0.0
    my_character_draw_y: float = 0.0

    def reset(self) -> None:
        """Put every value back to its starting value."""
        for spec in fields(self):
            setattr(self, spec.name, spec.default)

    def lines(self, limit_fps: int) -> list[str]:
        """Return the text lines of the debug overlay, top to bottom."""
        return [
            f"GAME_TIME(s) = {self.game_time:f}",
            f"SURVIVAL_TIME(s) = {self.survival_time:f}",
            f"SURVIVAL_TIME_SCORE = {self.survival_time_score:d}",
            f"LIMIT_FPS = {limit_fps:d}",
            f"ACTUAL_FPS = {self.actual_fps:d}",
            f"INSTANT_FPS = {self.instant_fps:f}",
            f"OBJECTS = {self.objects:d}",
            f"SLEEP_TIME(ms) = {self.sleep_time:d}",
            f"MY_FIELD_X = {self.my_character_infield_x:f}",
            f"MY_FIELD_Y = {self.my_character_infield_y:f}",
            f"MY_DRAW_X = {self.my_character_draw_x:f}",
            f"MY_DRAW_Y = {self.my_character_draw_y:f}",
        ]