# strawshmup

Game-logic pieces of a vertical shoot-'em-up. There is no graphics, sound or
input library here. The host application draws, plays sounds and reads the
keyboard. This package keeps the rules and the bookkeeping, and it has no
dependencies outside the standard library.

## Modules

### `strawshmup.collide_polygon`

- `Point(x, y)` is a mutable position in the playing field.
- `TraceSide` has the members `INNER` and `OUTER`.
- `CollideRealm` is the base class of collision areas. It carries
  `DRAW_COLOR` `(255, 0, 255)` and `DRAW_THICKNESS` `3.0`.
- `circle_hits_polygon(center, radius, vertices)` returns whether a circle
  overlaps a closed polygon whose vertices are given in order. It detects a
  circle touching an edge or a corner. It also detects the case where the
  centre lies on the same side of every edge, that is, where one shape
  contains the other.
- `CollidePolygon(vertices)` has `is_collided_with(circle)`, which takes any
  object with `center` and `radius`, and `update(vertices)`.

### `strawshmup.collide_circle`

`CollideCircle(x, y, radius)` keeps a whole-number radius. `set_radius`
drops the fraction and raises `ValueError` for a negative radius.

- `is_collided_with(other)` accepts another `CollideCircle`, which hits when
  the centre distance is below the sum of the radii, or a `CollidePolygon`.
  It raises `TypeError` for anything else.
- `update(point)` moves the centre.

### `strawshmup.collision`

`Collision(id, last_collided_clock, last_damaged_clock)` is a generic
dataclass. Both clocks default to `now_ms()`, which is a monotonic clock in
milliseconds.

### `strawshmup.keys`

`Key` lists the latched keys: `Z`, `X`, `UP`, `DOWN`, `RIGHT`, `LEFT`, `F3`,
`F4`, `F5` and `ENTER`. `KeyPushFlags` works as follows:

- `rising(key, down)` returns `True` only on the frame a key goes down.
- `flags[key]` tells whether a key is latched.
- `reset()` clears every latch.

### `strawshmup.dial` and `strawshmup.nickname`

`Dial` rolls through the alphabet
`" ABC…XYZabc…xyz0123456789_-!?@"` and wraps at both ends.

- `uproll()` and `downroll()` move through the alphabet.
- `get()` returns the selected character.
- `respond_to_keyinput(keyboard, flags, confirming)` reacts to fresh presses
  of UP and DOWN.
- An optional `on_move` callback runs on each roll.

`NicknameInput(flags=None, play=None)` holds 16 dials, and `get()` returns
the name they spell. The `keyboard` given to `update(keyboard)` is any
collection of the `Key` members that are held down.

- While editing, LEFT and RIGHT move between dials (stopping at either end),
  and Z starts confirming.
- While confirming, X goes back to editing and ENTER sets `determined`.
- `play`, if given, is called with `"cursormove"`, `"forward"` or
  `"backward"`.

### `strawshmup.narrative`

`NarrativePop(text, speaker_name, portrait_id)` is a dialogue line. Its
`state` runs from `READY` through `ROLLING` to `AWAITING`, the members of
`NarrativePopState`.

- `activate(now)` starts the roll.
- `update(now)` reveals 20 letters per second into `displaying_text`. Once
  the pop is awaiting, it also blinks the indicator every 250 ms.
- `portrait_image()` returns the portrait image name and scale.
- `indicator_image()` returns the name of the indicator image while it is
  lit, or `None`.

`PortraitID` lists the speakers.

### `strawshmup.debug_params`

`DebugParams` is a dataclass of the debug overlay values.

- `reset()` sets every value back to its default.
- `lines(limit_fps)` formats the overlay text, top to bottom.

### `strawshmup.colors`

`get_color(red, green, blue)` packs the components into `0xRRGGBB` and
raises `ValueError` when a component is out of range. `Colors` is an
`IntEnum` of `BLACK`, `RED`, `GREEN`, `BLUE`, `YELLOW`, `CYAN`, `MAGENTA` and
`WHITE`.

### `strawshmup.fonts`

`FontSpec(face, path)` names a font file. `font_files()` lists the font files
in registration order.

`FontCatalog.load_all(register, create, load_data)` registers each file, then
fills `handles` through your callbacks. It raises `OSError` when registration
fails. `unload_all(unregister)` does the reverse.

### `strawshmup.bullet_images` and `strawshmup.images`

`BulletShape` names the bullet sprite families. Each member has `palette`
and `colors`.

- `bullet_image_path(shape, color)` gives a sprite path and raises
  `ValueError` for a colour the shape lacks.
- `bullet_image_paths()` lists them all.
- `image_paths()` lists every named image in loading order.

`ImageCatalog` loads these images:

- `load_all(loader)` loads every image through `loader(path)`, which returns
  a handle.
- `ghost_frames(color)` returns the two ghost animation frames for a colour.

## Example

```python
from strawshmup.collide_polygon import Point, circle_hits_polygon

square = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
circle_hits_polygon(Point(5, 5), 1, square)    # True, the circle is inside
circle_hits_polygon(Point(20, 20), 1, square)  # False
```

## What this package does not do

There is no playable game here. It has none of the following:

- a game loop, a command or a window
- drawing or sound playback
- a field of characters and bullets
- stages, scoring or result output

Images and fonts are only catalogued by path. Loading them is left to the
callbacks you pass in.

## Installing and testing

Install the package with pip. The `test` extra adds pytest for the suite in
`tests/`.