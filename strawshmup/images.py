"""Image files the game loads and the handles it keeps for them."""

from __future__ import annotations

from typing import Callable

from strawshmup.bullet_images import BulletShape, bullet_image_path

GHOST_COLORS: tuple[str, ...] = (
    "red", "orange", "yellow", "green", "teal", "aqua",
    "blue", "purple", "fuchsia", "silver", "gray",
)

_GHOST_ROOT = "image/sprite/object/Ghost"

_PORTRAITS: dict[str, str] = {
    "FULLBODY_ICHIGOCHAN_NORMAL": "image/stand/1.png",
    "FULLBODY_ICHIGOCHAN_AVATAR": "image/stand/2.png",
    "FULLBODY_MOFU": "image/stand/3.png",
    "FULLBODY_NEON": "image/stand/4.png",
    "FULLBODY_TOROI": "image/stand/5.png",
}

_SPRITES: dict[str, str] = {
    "SPRITE_ICHIGOCHAN": "image/sprite/character/6.png",
    "SPRITE_MOFU": "image/sprite/character/7.png",
    "SPRITE_NEON": "image/sprite/character/8.png",
    "SPRITE_TOROI": "image/sprite/character/9.png",
    "SPRITE_ZKCHR_KURAGE": "image/sprite/character/10.png",
    "SPRITE_ZKCHR_KUJIRA": "image/sprite/character/11.png",
    "SPRITE_ZKCHR_LIGHT_ELE": "image/sprite/character/14.png",
    "SPRITE_ZKCHR_KNIGHT_RAY": "image/sprite/character/15.png",
    "SPRITE_ZKCHR_GOZGOK": "image/sprite/character/12.png",
    "SPRITE_ZKCHR_MEZDOROGON": "image/sprite/character/13.png",
}

_OBJECTS: dict[str, str] = {
    "LEIDENJAR0": "image/sprite/object/LeidenJar/LeidenJar0.png",
    "LEIDENJAR1": "image/sprite/object/LeidenJar/LeidenJar1.png",
    "LEIDENJAR2": "image/sprite/object/LeidenJar/LeidenJar2.png",
    "LEIDENJAR3": "image/sprite/object/LeidenJar/LeidenJar3.png",
    "KATANA": "image/sprite/object/Katana.png",
}

_SCREENS: dict[str, str] = {
    "LOGO": "image/DCSロゴ_シルエットあり.png",
    "LOGO_NONSILHOUETTE": "image/DCSロゴ.png",
    "ICHIGOCHAN_CONCEPTUAL": "image/いちごちゃん_タイトル画面.png",
    "SCREEN_BACKGROUND": "image/スクリーン背景.png",
    "SCREEN_BACKGROUND_CROPPED": "image/スクリーン背景_くりぬき.png",
    "FIELD_BACKGROUND_STAGE1": "image/FieldBackgroundArtStage1.png",
    "FIELD_BACKGROUND_STAGE2": "image/FieldBackgroundArtStage2.png",
    "FIELD_BACKGROUND_STAGE3": "image/FieldBackgroundArtStage3.png",
    "DIGIT_CURSOR": "image/DigitCursor.png",
    "NARRATIVE_POP": "image/会話テキストポップ_ゲーミンググラデーション.png",
    "HP_DONUT": "image/HpDonutWhite.png",
    "TEXT_FILE": "image/TextFile.png",
}


def _ghost_path(color: str, frame: int) -> str:
    number = GHOST_COLORS.index(color) + 1
    return f"{_GHOST_ROOT}/Ghost{number:02d}{color}{frame}.png"


def _bullet_entries(shapes: tuple[BulletShape, ...]) -> dict[str, str]:
    return {
        f"{shape.name}_{color.upper()}": bullet_image_path(shape, color)
        for shape in shapes
        for color in shape.colors
    }


def _ghost_entries() -> dict[str, str]:
    entries: dict[str, str] = {}
    for color in GHOST_COLORS:
        entries[f"GHOST_{color.upper()}_FRONT"] = _ghost_path(color, 1)
        entries[f"GHOST_{color.upper()}_BACK"] = _ghost_path(color, 2)
    return entries


def _catalog() -> dict[str, str]:
    entries: dict[str, str] = {}
    entries.update(_PORTRAITS)
    entries.update(_SPRITES)
    entries.update(_bullet_entries((
        BulletShape.ANCHOR, BulletShape.BUBBLE, BulletShape.CIRCLE, BulletShape.MARBLE,
        BulletShape.CRYSTAL, BulletShape.STRAWBERRY, BulletShape.POTATO,
    )))
    entries.update(_ghost_entries())
    entries.update(_OBJECTS)
    entries.update(_bullet_entries((BulletShape.LASER, BulletShape.HEART, BulletShape.OVAL)))
    entries.update(_SCREENS)
    return entries


_IMAGES: dict[str, str] = _catalog()


def image_paths() -> list[str]:
    """Return the path of every named image, in loading order."""
    return list(_IMAGES.values())


class ImageCatalog:
    """Loads the game's images and keeps a handle for each by name."""

    PATHS: dict[str, str] = _IMAGES

    def __init__(self) -> None:
        self.handles: dict[str, int] = {}
        self._ghosts: dict[str, list[int]] = {color: [] for color in GHOST_COLORS}

    def __getitem__(self, name: str) -> int:
        return self.handles[name]

    def load_all(self, loader: Callable[[str], int]) -> None:
        """Load every image with ``loader(path)``, which returns a handle.

        Ghost animation frames are loaded a second time into their own lists.
        """
        for name, path in self.PATHS.items():
            self.handles[name] = loader(path)
        for color in GHOST_COLORS:
            self._ghosts[color].extend(loader(_ghost_path(color, frame)) for frame in (1, 2))

    def ghost_frames(self, color: str) -> list[int]:
        """Return the animation frame handles of the ghost in ``color``."""
        key = color.lower()
        if key not in self._ghosts:
            raise ValueError(f"there is no ghost in colour {color!r}")
        return list(self._ghosts[key])