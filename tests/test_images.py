import pytest

from strawshmup.bullet_images import bullet_image_paths
from strawshmup.images import GHOST_COLORS, ImageCatalog, image_paths


class _Recorder:
    def __init__(self):
        self.paths = []

    def __call__(self, path):
        self.paths.append(path)
        return len(self.paths) - 1


@pytest.fixture
def loaded():
    recorder = _Recorder()
    catalog = ImageCatalog()
    catalog.load_all(recorder)
    return catalog, recorder


def test_image_paths_are_unique():
    paths = image_paths()
    assert len(paths) == len(set(paths))


def test_image_paths_include_every_bullet_sprite():
    assert set(bullet_image_paths()) <= set(image_paths())


def test_first_path_is_first_portrait():
    assert image_paths()[0] == "image/stand/1.png"


def test_known_paths_by_name(loaded):
    catalog, recorder = loaded
    assert recorder.paths[catalog["ANCHOR_BLACK"]] == "image/sprite/bullet/Anchor/Anchor01black.png"
    assert recorder.paths[catalog["SPRITE_ZKCHR_LIGHT_ELE"]] == "image/sprite/character/14.png"
    assert recorder.paths[catalog["POTATO_BASIC"]] == "image/sprite/bullet/Potato/Potato00basic.png"
    assert recorder.paths[catalog["GHOST_RED_BACK"]] == "image/sprite/object/Ghost/Ghost01red2.png"
    assert recorder.paths[catalog["NARRATIVE_POP"]] == "image/会話テキストポップ_ゲーミンググラデーション.png"


def test_every_named_image_gets_a_handle(loaded):
    catalog, _ = loaded
    assert set(catalog.handles) == set(ImageCatalog.PATHS)
    assert len(set(catalog.handles.values())) == len(catalog.handles)


def test_loader_called_for_names_then_ghost_frames(loaded):
    _, recorder = loaded
    named = image_paths()
    assert recorder.paths[: len(named)] == named
    assert len(recorder.paths) == len(named) + 2 * len(GHOST_COLORS)


@pytest.mark.parametrize("color", GHOST_COLORS)
def test_ghost_frames_match_front_and_back(loaded, color):
    catalog, recorder = loaded
    frames = catalog.ghost_frames(color)
    front = catalog[f"GHOST_{color.upper()}_FRONT"]
    back = catalog[f"GHOST_{color.upper()}_BACK"]
    assert [recorder.paths[h] for h in frames] == [recorder.paths[front], recorder.paths[back]]
    assert front not in frames and back not in frames


def test_ghost_frames_case_insensitive(loaded):
    catalog, _ = loaded
    assert catalog.ghost_frames("AQUA") == catalog.ghost_frames("aqua")


def test_ghost_frames_empty_before_loading():
    assert ImageCatalog().ghost_frames("red") == []


def test_ghost_frames_unknown_color():
    with pytest.raises(ValueError):
        ImageCatalog().ghost_frames("maroon")


def test_unknown_handle_name(loaded):
    catalog, _ = loaded
    assert "KURAGE" not in catalog.handles
    with pytest.raises(KeyError):
        _ = catalog["KURAGE"]


def test_ghost_frames_returns_copy(loaded):
    catalog, _ = loaded
    frames = catalog.ghost_frames("red")
    frames.clear()
    assert len(catalog.ghost_frames("red")) == 2