"""Font files the game registers and the font handles it creates from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class FontSpec:
    """A font face name and the file that provides it."""

    face: str
    path: str


def font_files() -> list[str]:
    """Return the paths of the font files registered at start-up, in order."""
    return [spec.path for spec in FontCatalog.FONTS]


class FontCatalog:
    """Registers the game's fonts and keeps the handles made from them."""

    FONTS: tuple[FontSpec, ...] = (
        FontSpec("源ノ角ゴシック ExtraLight", "font/SourceHanSans-ExtraLight.ttc"),
        FontSpec("源ノ角ゴシック Heavy", "font/SourceHanSans-Heavy.ttc"),
        FontSpec("KHドット日比谷32", "font/KH-Dot-Hibiya-32.ttf"),
        FontSpec("DSEG14 Classic Mini", "font/DSEG14ClassicMini-Regular.ttf"),
        FontSpec("ロンド B スクエア", "font/Ronde-B_square.otf"),
        FontSpec("コーポレート明朝 ver3 Medium", "font/Corporate-Mincho-ver3.otf"),
        FontSpec("Nautilus Pompilius", "font/Nautilus.otf"),
    )

    # handle name -> (index into FONTS, size, thickness)
    CREATED: dict[str, tuple[int, int, int]] = {
        "NARRATIVE_POP_TEXT": (0, 24, 1),
        "NARRATIVE_POP_TEXT_NOSTALGIC": (2, 24, -1),
        "SCOREBOARD_TEXT": (1, 16, -1),
        "SCOREBOARD_VALUE": (3, 32, -1),
        "NAVIGATION_TEXT": (1, 48, -1),
        "STAGE_NUM_TEXT": (4, 32, -1),
        "STAGE_NAME_MAIN_TEXT": (5, 48, -1),
        "STAGE_NAME_SUB_TEXT": (6, 32, -1),
        "SONG_NAME_TEXT": (4, 32, -1),
        "SP_NAME_TEXT": (5, 32, -1),
    }

    DATA_FILES: dict[str, str] = {
        "DSEG14": "font/DSEG14 Classic Mini_32.dft",
        "HGP_SOUEIKAKU_GOTHIC_UB_64": "font/HGP創英角ｺﾞｼｯｸUB_サイズ64.dft",
        "HGP_SOUEIKAKU_GOTHIC_UB_48": "font/HGP創英角ｺﾞｼｯｸUB_サイズ48.dft",
        "HGP_SOUEIKAKU_GOTHIC_UB_32": "font/HGP創英角ｺﾞｼｯｸUB_サイズ32.dft",
        "HGP_SOUEIKAKU_GOTHIC_UB_24": "font/HGP創英角ｺﾞｼｯｸUB_サイズ24.dft",
        "HGP_SOUEIKAKU_GOTHIC_UB_16": "font/HGP創英角ｺﾞｼｯｸUB_サイズ16.dft",
        "CONSOLAS_64": "font/Consolas_サイズ64.dft",
    }

    def __init__(self) -> None:
        self.handles: dict[str, int] = {}

    def __getitem__(self, name: str) -> int:
        return self.handles[name]

    def load_all(
        self,
        register: Callable[[str], object],
        create: Callable[[str, int, int], int],
        load_data: Callable[[str], int],
    ) -> None:
        """Register every font file, then create and load all font handles.

        ``register(path)`` must return a true value on success;
        ``create(face, size, thickness)`` and ``load_data(path)`` return handles.
        """
        for spec in self.FONTS:
            if not register(spec.path):
                raise OSError(f"failed to register font file {spec.path}")
        for name, (index, size, thickness) in self.CREATED.items():
            self.handles[name] = create(self.FONTS[index].face, size, thickness)
        for name, path in self.DATA_FILES.items():
            self.handles[name] = load_data(path)

    def unload_all(self, unregister: Callable[[str], object]) -> None:
        """Drop every handle and unregister every font file."""
        self.handles.clear()
        for spec in self.FONTS:
            if not unregister(spec.path):
                raise OSError(f"failed to unregister font file {spec.path}")