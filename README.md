# flut

flut is a small widget toolkit for animated, game-like windows drawn with
pygame. You describe the interface as a tree of widgets. flut lays the tree
out and redraws it continuously only while something is animating. It passes
mouse and keyboard input on to the builder widgets in the tree.

## Playing the demo

The package includes a worm game built from flut widgets:

```
flut-worm
```

Steer with the arrow keys or W/A/S/D. Eat the green food to grow. Running
into a wall or into yourself ends the game, shakes the board and opens a
dialog.

The game reads its assets from paths relative to the current directory:

- `assets/worm/images/favicon.png` for the window icon. The icon is optional.
- `assets/worm/audio/eat.wav` and `assets/worm/audio/dead.wav` for sounds. Sounds that cannot be loaded are skipped.
- `assets/fonts/MaterialSymbolsOutlined[FILL,GRAD,opsz,wght].codepoints` and
  the matching `.ttf` for the skull icon in the end-of-game dialog.

These files are not included with the package. If the icon font files are
missing, the game fails when the worm dies.

## Building an interface

Every tree is made of two kinds of widget:

- **Builder widgets** (`flut.widgets.core.BuilderWidget`) hold state and turn
  it into another widget in `build(constraint)`.
  - They receive pointer input through `on_mouse_down`, `on_mouse_up`,
    `on_mouse_over` and `on_mouse_out`.
  - All other events, such as key presses, go to `process_event`.
  - They ask to be rebuilt by returning `True` from `update(dt)`.
  - `pre_draw` and `post_draw` run before and after their subtree is drawn.
- **Painter widgets** (`flut.widgets.core.PainterWidget`) draw themselves onto
  a `flut.canvas.Canvas` inside the `Rect` they are given.

A `Stack` holds a list of `StackChild` entries. Each entry places one child at
an explicit position and size.

The ready-made widgets are:

| Widget | Module | Purpose |
| --- | --- | --- |
| `Column`, `Row` | `flut.widgets.layout` | Lay children out vertically or horizontally. The first child without a size along the axis takes the remaining space. |
| `Grid` | `flut.widgets.grid` | Equally sized cells separated by a gap. Each cell is made by a builder function. |
| `RectWidget`, `Spacing` | `flut.widgets.painters` | A filled, optionally rounded rectangle, and an empty gap. |
| `Text`, `Icon` | `flut.widgets.text` | Text in a given `flut.models.FontCfg`, and one glyph from the icon font. |
| `Scale`, `Translation` | `flut.widgets.transforms` | Scale a child about its centre, or shift it. |
| `Dialog`, `Header` | `flut.widgets.dialog` | A panel that pops up over the whole window. It shakes when clicked outside. |

A size of `-1` in either direction means "fill the available space".

`flut.widget_tree.WidgetTree` keeps the built tree. It routes events to it,
rebuilds the parts whose builders report a change, and draws the tree.

`flut.app.run(App(...))` opens the window and runs the event loop until the
window is closed.

### A minimal window

```python
from flut.app import App, run
from flut.helpers import Clock
from flut.models import HorizontalAlign
from flut.widgets.core import BuilderWidget
from flut.widgets.layout import Column
from flut.widgets.painters import RectWidget, Spacing


class Blinker(BuilderWidget):
    def __init__(self):
        self.clock = Clock(2.0)
        self.lit = False

    def update(self, dt):
        if self.clock.update(dt):
            self.lit = not self.lit
            return True
        return False

    def build(self, constraint):
        return Column(
            align=HorizontalAlign.CENTER,
            children=[
                Spacing(height=32.0),
                RectWidget(color=(255, 200, 0) if self.lit else (40, 40, 40)),
            ],
        )


run(App(title="Blinker", size=(400, 300), child=Blinker()))
```

## Animation helpers

`flut.helpers` provides:

- `Clock(tps)` ticks a fixed number of times per second.
- `Timer(duration)` reports its `progress` and expires after `duration` seconds.
- `Transition(from_, to, duration)` interpolates a value linearly. When it
  finishes, it yields `Idle` holding the target value.
- `ShakeAnimation(duration, strength, tps, rng)` produces a random offset,
  available as `translation`.

Each of these holds an `Animation` while it is running. While any `Animation`
exists, the window updates and redraws continuously. Otherwise it waits for
the next input event.

`flut.app.frame_steps` splits a frame's elapsed time into update steps of at
most `1 / tps` seconds, with at most `max_ticks` steps per frame.

## Other modules

- `flut.context`:
  - records the drawable size;
  - holds the audio request queue (`send_audio`);
  - caches fonts (`get_font`, `get_icon_font`).
- `flut.audio.serve` plays each `flut.models.PlaySound` request. Each sound
  file is loaded only once.
- `flut.icon_names.make_icon_name_enum` builds an `IconName` enum from an icon
  font's codepoints listing.
- `flut.sparse_vec.SparseVec` is slot storage with stable indices. Freed
  indices are reused.

## Running the tests

```
pip install -e .[test]
pytest
```