import pytest

from strawshmup.bullet_images import (
    BULLET_IMAGE_ROOT,
    BulletShape,
    bullet_image_path,
    bullet_image_paths,
)


@pytest.mark.parametrize(
    "shape, color, expected",
    [
        (BulletShape.ANCHOR, "black", "image/sprite/bullet/Anchor/Anchor01black.png"),
        (BulletShape.POTATO, "basic", "image/sprite/bullet/Potato/Potato00basic.png"),
        (BulletShape.MARBLE, "gray", "image/sprite/bullet/Marble/Marble10gray.png"),
        (BulletShape.OVAL, "gray", "image/sprite/bullet/Oval/Oval11gray.png"),
        (BulletShape.STRAWBERRY, "fuchsia", "image/sprite/bullet/Strawberry/Strawberry13fuchsia.png"),
        (BulletShape.POTATO, "maroon", "image/sprite/bullet/Potato/Potato16maroon.png"),
    ],
)
def test_paths_match_sprite_files(shape, color, expected):
    assert bullet_image_path(shape, color) == expected


def test_shape_given_by_name_and_colour_case_ignored():
    assert bullet_image_path("Heart", "RED") == bullet_image_path(BulletShape.HEART, "red")


def test_unknown_colour_raises():
    with pytest.raises(ValueError):
        bullet_image_path(BulletShape.MARBLE, "lime")
    with pytest.raises(ValueError):
        bullet_image_path(BulletShape.ANCHOR, "basic")


def test_unknown_shape_raises():
    with pytest.raises(ValueError):
        bullet_image_path("Cube", "red")


def test_all_paths_unique_and_well_formed():
    paths = bullet_image_paths()
    assert len(paths) == len(set(paths))
    for path in paths:
        assert path.startswith(BULLET_IMAGE_ROOT + "/")
        assert path.endswith(".png")


def test_all_paths_cover_every_palette_entry():
    paths = bullet_image_paths()
    expected = {
        bullet_image_path(shape, color) for shape in BulletShape for color in shape.colors
    }
    assert set(paths) == expected
    assert len(paths) == sum(len(shape.colors) for shape in BulletShape)


def test_paths_grouped_by_shape_in_enum_order():
    paths = bullet_image_paths()
    folders = [path.split("/")[3] for path in paths]
    seen = []
    for folder in folders:
        if not seen or seen[-1] != folder:
            seen.append(folder)
    assert seen == [shape.value for shape in BulletShape]


def test_palette_numbers_follow_colour_order_in_paths():
    for shape in BulletShape:
        numbers = [shape.palette[color] for color in shape.colors]
        assert numbers == list(range(numbers[0], numbers[0] + len(numbers)))
        for color, number in zip(shape.colors, numbers):
            path = bullet_image_path(shape, color)
            assert path.endswith(f"/{shape.value}{number:02d}{color}.png")


def test_palette_families_accept_the_same_colours():
    for color in BulletShape.ANCHOR.colors:
        anchor = bullet_image_path(BulletShape.ANCHOR, color)
        crystal = bullet_image_path(BulletShape.CRYSTAL, color)
        assert anchor.rsplit("/", 1)[1][len("Anchor"):] == crystal.rsplit("/", 1)[1][len("Crystal"):]
    for color in BulletShape.LASER.colors:
        assert bullet_image_path(BulletShape.HEART, color).endswith(f"{color}.png")
        assert bullet_image_path(BulletShape.OVAL, color).endswith(f"{color}.png")
    assert bullet_image_path(BulletShape.POTATO, "basic").endswith("Potato00basic.png")
    with pytest.raises(ValueError):
        bullet_image_path(BulletShape.BUBBLE, "basic")