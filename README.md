# pixelcraft

A small pixel-art editor. It opens a 1280 × 720 window with a 128 × 128
transparent canvas that you draw on in black. Pressing a mouse button on
the canvas paints the pixel under the pointer. Moving the pointer with the
left button held keeps painting. The mouse wheel zooms the canvas in or
out by a factor of 1.2 per step. Zooming scales about the canvas origin,
not about the pointer.

The window is laid out as an editor workspace. It has:

- a grey context tool bar along the top
- a tool bar beside the canvas
- three panels below the canvas
- five panels stacked on the right
- a status bar reading "Ready"

The panels sit in resizable panes. A menu bar offers File (New, Open, Save,
Exit), Edit (Undo, Redo) and Help (About). **File → Exit** closes the window.

## Installing

```
pip install .
```

The editor uses only the Python standard library. Its window needs Tk
(`tkinter`), which some Python distributions ship as a separate package.

## Running

```
pixelcraft
```

## Using the pieces in code

The drawing model works without a window.

```python
from pixelcraft.layer import CanvasLayer
from pixelcraft.scene import CanvasScene
from pixelcraft.view import CanvasView

layer = CanvasLayer(128, 128)
layer.draw_pixel(3, 4, (0, 0, 0, 255))
print(layer.pixel_at(3, 4))       # (0, 0, 0, 255)
print(layer.bounding_rect())      # Rect(x=0.0, y=0.0, width=128.0, height=128.0)

scene = CanvasScene()
scene.connect(lambda x, y: layer.draw_pixel(x, y, "#000000"))
scene.mouse_press_event(10, 12)                   # draws at (10, 12)
scene.mouse_move_event(11, 12, left_button=True)  # draws at (11, 12)
scene.mouse_move_event(12, 12, left_button=False) # draws nothing

view = CanvasView()
view.zoom_in()
print(view.map_to_scene(60, 60))  # (50.0, 50.0)
```

### `pixelcraft.layer`

`CanvasLayer(width, height)` is a grid of RGBA pixels that starts fully
transparent. A negative size raises `ValueError`.

- `draw_pixel(x, y, color)` composites the colour over the pixel that is
  already there. It takes an RGB or RGBA tuple of integers in 0..255, or a
  `"#rrggbb"` / `"#rrggbbaa"` string. A malformed colour raises
  `ValueError`. Points outside the layer are ignored.
- `pixel_at(x, y)` returns the stored RGBA tuple. It raises `IndexError`
  outside the layer.
- `bounding_rect()` returns a `Rect(x, y, width, height)` covering the
  layer.
- `take_dirty()` returns the regions marked for repaint since the last
  call, and clears them. Every `draw_pixel` marks a 5 × 5 region starting
  at the drawn point.

The module also defines the colours `TRANSPARENT` and `BLACK`.

### `pixelcraft.scene`

`CanvasScene` passes pointer events on to the callbacks registered with
`connect`. Each callback receives the position converted to integer
coordinates.

- `mouse_press_event(x, y)` always reports the position.
- `mouse_move_event(x, y, left_button)` reports it only when `left_button`
  is true.

### `pixelcraft.view`

`CanvasView` holds a zoom factor and an offset, starting at `1.0` and
`(0, 0)`.

- `zoom_in()` multiplies the zoom by `ZOOM_STEP` (1.2), and `zoom_out()`
  divides it by the same amount.
- `wheel_event(delta_y)` zooms in for a positive delta and out otherwise.
- `pan_by(dx, dy)` shifts the view by scene units.
- `map_to_scene(x, y)` and `map_from_scene(x, y)` convert between view and
  scene coordinates.

### `pixelcraft.main_window`

`Editor(width, height)` ties a layer, a scene and a view together.
`press(view_x, view_y)` and `drag(view_x, view_y, left_button)` take
positions in view coordinates and paint black on the layer beneath them.
`MainWindow(master)` builds the window inside a Tk root, and `run()`
enters its event loop. `main()` does both, and is what the `pixelcraft`
command runs.

## What it does not do

This is an early editor shell.

- There is a single layer and one colour, black.
- The New, Open, Save, Undo, Redo and About menu entries do nothing.
  Drawings cannot be saved or loaded, and strokes cannot be undone.
- The tool bar and the side and lower panels are empty.
- Panning exists in `CanvasView.pan_by`, but the window offers no control
  for it.

## Running the tests

```
pip install .[test]
pytest
```