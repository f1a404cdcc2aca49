"""The editor model and its desktop window."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from .layer import BLACK, CanvasLayer
from .scene import CanvasScene
from .view import CanvasView

_CANVAS_SIZE = 128
_LEFT_BUTTON_MASK = 0x0100


class Editor:
    """Wires a layer, a scene and a view together: pointer input paints black pixels."""

    def __init__(self, width: int, height: int) -> None:
        self.layer = CanvasLayer(width, height)
        self.scene = CanvasScene()
        self.view = CanvasView()
        self.scene.connect(lambda x, y: self.layer.draw_pixel(x, y, BLACK))

    def press(self, view_x: float, view_y: float) -> None:
        self.scene.mouse_press_event(*self.view.map_to_scene(view_x, view_y))

    def drag(self, view_x: float, view_y: float, left_button: bool) -> None:
        self.scene.mouse_move_event(*self.view.map_to_scene(view_x, view_y), left_button)


def _hex(color: tuple[int, int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*color[:3])


class MainWindow:
    """The application window: menus, status bar, panels and the drawing canvas."""

    def __init__(self, master: Any) -> None:
        import tkinter as tk

        self.master = master
        self.editor = Editor(_CANVAS_SIZE, _CANVAS_SIZE)
        master.title("PixelCraft")
        master.geometry("1280x720")

        self._build_menu(tk)

        self.status = tk.Label(master, text="Ready", anchor="w")
        self.status.pack(side=tk.BOTTOM, fill=tk.X)

        context_tool_bar = tk.Frame(master, height=50, bg="gray")
        context_tool_bar.pack(side=tk.TOP, fill=tk.X)

        main_pane = tk.PanedWindow(master, orient=tk.HORIZONTAL)
        main_pane.pack(side=tk.TOP, fill=tk.BOTH, expand=True)

        center_pane = tk.PanedWindow(main_pane, orient=tk.VERTICAL)
        main_pane.add(center_pane, stretch="always")

        tools_and_canvas = tk.Frame(center_pane)
        tk.Frame(tools_and_canvas, width=100, bg="red").pack(side=tk.LEFT, fill=tk.Y)
        self.canvas = tk.Canvas(tools_and_canvas, bg="white", highlightthickness=0)
        self.canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        center_pane.add(tools_and_canvas, stretch="always")

        lower_pane = tk.PanedWindow(center_pane, orient=tk.HORIZONTAL)
        for colour in ("green", None, "green"):
            panel = tk.Frame(lower_pane, width=200, height=200)
            if colour:
                panel.configure(bg=colour)
            lower_pane.add(panel, minsize=200)
        center_pane.add(lower_pane, minsize=200)

        right_pane = tk.PanedWindow(main_pane, orient=tk.VERTICAL)
        for colour in ("red", "green", "blue", "red", "blue"):
            right_pane.add(tk.Frame(right_pane, width=200, height=100, bg=colour), minsize=100)
        main_pane.add(right_pane, minsize=200)

        self.canvas.bind("<ButtonPress>", self._on_press)
        self.canvas.bind("<Motion>", self._on_motion)
        self.canvas.bind("<MouseWheel>", lambda e: self._on_wheel(e.delta))
        self.canvas.bind("<Button-4>", lambda e: self._on_wheel(120))
        self.canvas.bind("<Button-5>", lambda e: self._on_wheel(-120))
        self._redraw_all()

    def _build_menu(self, tk: Any) -> None:
        menu_bar = tk.Menu(self.master)
        file_menu = tk.Menu(menu_bar, tearoff=False)
        for label in ("New", "Open", "Save"):
            file_menu.add_command(label=label)
        file_menu.add_separator()
        file_menu.add_command(label="Exit", command=self.master.destroy)
        edit_menu = tk.Menu(menu_bar, tearoff=False)
        edit_menu.add_command(label="Undo")
        edit_menu.add_command(label="Redo")
        help_menu = tk.Menu(menu_bar, tearoff=False)
        help_menu.add_command(label="About")
        menu_bar.add_cascade(label="File", menu=file_menu)
        menu_bar.add_cascade(label="Edit", menu=edit_menu)
        menu_bar.add_cascade(label="Help", menu=help_menu)
        self.master.config(menu=menu_bar)

    def _on_press(self, event: Any) -> None:
        if getattr(event, "num", None) in (4, 5):
            return
        self.editor.press(event.x, event.y)
        self._refresh_dirty()

    def _on_motion(self, event: Any) -> None:
        self.editor.drag(event.x, event.y, bool(event.state & _LEFT_BUTTON_MASK))
        self._refresh_dirty()

    def _on_wheel(self, delta: float) -> None:
        self.editor.view.wheel_event(delta)
        self._redraw_all()

    def _draw_pixel(self, x: int, y: int) -> None:
        tag = f"px{x}_{y}"
        self.canvas.delete(tag)
        color = self.editor.layer.pixel_at(x, y)
        if color[3] == 0:
            return
        view = self.editor.view
        x0, y0 = view.map_from_scene(x, y)
        x1, y1 = view.map_from_scene(x + 1, y + 1)
        self.canvas.create_rectangle(x0, y0, x1, y1, fill=_hex(color), outline="", tags=("layer", tag))

    def _refresh_dirty(self) -> None:
        layer = self.editor.layer
        for rect in layer.take_dirty():
            for y in range(max(0, int(rect.y)), min(layer.height, int(rect.y + rect.height))):
                for x in range(max(0, int(rect.x)), min(layer.width, int(rect.x + rect.width))):
                    self._draw_pixel(x, y)

    def _redraw_all(self) -> None:
        layer = self.editor.layer
        layer.take_dirty()
        self.canvas.delete("layer")
        bounds = layer.bounding_rect()
        view = self.editor.view
        x0, y0 = view.map_from_scene(bounds.x, bounds.y)
        x1, y1 = view.map_from_scene(bounds.x + bounds.width, bounds.y + bounds.height)
        self.canvas.create_rectangle(x0, y0, x1, y1, outline="gray", tags=("layer",))
        for y in range(layer.height):
            for x in range(layer.width):
                self._draw_pixel(x, y)

    def run(self) -> None:
        self.master.mainloop()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the editor window and run until it is closed."""
    import tkinter as tk

    root = tk.Tk()
    MainWindow(root).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())