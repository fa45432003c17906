"""Tk front end for the snake game."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from snakegame.game import DEFAULT_DELAY, DOT_SIZE, MIN_WIDGET_SIZE, Direction, SnakeGame

ABOUT_TEXT = (
    "The game involves controlling a single block or snakehead "
    "by turning only left or right by ninety degrees until you "
    "manage to eat an apple. When you get the apple, the Snake "
    "grows an extra block or body segment. "
    "If, or rather when, the snake bumps into the edge of the "
    "screen or accidentally eats himself the game is over. The "
    "more apples the snake eats the higher the score."
)

_KEYS = {
    "Left": Direction.LEFT,
    "Right": Direction.RIGHT,
    "Up": Direction.UP,
    "Down": Direction.DOWN,
}

_RES_DIR = Path("..") / "res"


def key_to_direction(keysym: str) -> Optional[Direction]:
    """Map a Tk key name to a direction, or None for other keys."""
    return _KEYS.get(keysym)


def status_text(apples: int, size: int) -> str:
    """Text shown in the status bar."""
    return f"Apple number: {apples} | Snake size: {size}"


class SnakeApp:
    """Main window: menus, toolbar, playing field and status bar."""

    def __init__(self, root) -> None:
        import tkinter as tk

        self._tk = tk
        self.root = root
        self._apples = 0
        self._size = 0
        self._after_id: Optional[str] = None

        width, height = MIN_WIDGET_SIZE
        self.game = SnakeGame(
            width,
            height,
            on_apple_count=self.change_apple_number,
            on_snake_size=self.change_snake_length,
        )

        self._build_menu()
        self._build_toolbar()

        self.canvas = tk.Canvas(
            root, width=width, height=height, background="black", highlightthickness=0
        )
        self.canvas.pack(fill=tk.BOTH, expand=True)
        self.canvas.bind("<Configure>", self._on_resize)
        root.minsize(width, height)

        self.status = tk.Label(root, anchor="e", text=status_text(0, 0))
        self.status.pack(fill=tk.X, side=tk.BOTTOM)

        self._images = {name: self._load_image(name) for name in ("head", "body", "apple")}

        root.bind("<Key>", self.on_key)
        self.canvas.focus_set()

    def _build_menu(self) -> None:
        tk = self._tk
        menubar = tk.Menu(self.root)
        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(label="Exit", underline=0, command=self.root.quit)
        menubar.add_cascade(label="File", underline=0, menu=file_menu)

        game_menu = tk.Menu(menubar, tearoff=False)
        game_menu.add_command(label="Start", underline=0, command=self.start_game)
        game_menu.add_command(label="Pause", underline=0, command=self.pause_game)
        game_menu.add_command(label="Stop", underline=1, command=self.stop_game)
        menubar.add_cascade(label="Game", underline=0, menu=game_menu)

        help_menu = tk.Menu(menubar, tearoff=False)
        help_menu.add_command(label="About Tk ...", underline=6, command=self._about_tk)
        help_menu.add_command(label="About ...", underline=0, command=self.about_dialog)
        menubar.add_cascade(label="Help", underline=0, menu=help_menu)
        self.root.config(menu=menubar)

    def _build_toolbar(self) -> None:
        tk = self._tk
        toolbar = tk.Frame(self.root)
        for label, command in (
            ("Start", self.start_game),
            ("Pause", self.pause_game),
            ("Stop", self.stop_game),
            ("Exit", self.root.quit),
            ("About", self.about_dialog),
        ):
            tk.Button(toolbar, text=label, command=command, takefocus=False).pack(side=tk.LEFT)
        toolbar.pack(fill=tk.X, side=tk.TOP)

    def _load_image(self, name: str):
        try:
            return self._tk.PhotoImage(file=str(_RES_DIR / f"{name}.png"))
        except self._tk.TclError:
            return None

    def _on_resize(self, event) -> None:
        self.game.width = event.width
        self.game.height = event.height
        self.redraw()

    def _schedule(self) -> None:
        if self._after_id is None and self.game.timer_active:
            self._after_id = self.root.after(DEFAULT_DELAY, self._on_timer)

    def _cancel(self) -> None:
        if self._after_id is not None:
            self.root.after_cancel(self._after_id)
            self._after_id = None

    def _on_timer(self) -> None:
        self._after_id = None
        self.game.tick()
        self.redraw()
        self._schedule()

    def start_game(self) -> None:
        self.game.start()
        self._schedule()
        self.redraw()

    def pause_game(self) -> None:
        self.game.pause()

    def stop_game(self) -> None:
        self.game.stop()
        self._cancel()
        self.redraw()

    def about_dialog(self) -> None:
        from tkinter import messagebox

        messagebox.showinfo("About", ABOUT_TEXT, parent=self.root)

    def _about_tk(self) -> None:
        from tkinter import messagebox

        version = self.root.tk.call("info", "patchlevel")
        messagebox.showinfo("About Tk", f"Tk version {version}", parent=self.root)

    def change_apple_number(self, number: int) -> None:
        self._apples = number
        self._refresh_status()

    def change_snake_length(self, size: int) -> None:
        self._size = size
        self._refresh_status()

    def _refresh_status(self) -> None:
        if hasattr(self, "status"):
            self.status.config(text=status_text(self._apples, self._size))

    def on_key(self, event) -> None:
        direction = key_to_direction(event.keysym)
        if direction is not None:
            self.game.turn(direction)

    def redraw(self) -> None:
        self.canvas.delete("all")
        game = self.game
        if game.game_over:
            self.canvas.create_text(
                game.width // 2 - 70,
                game.height // 2,
                text="Game over!!!",
                fill="white",
                anchor="sw",
                font=("Courier", 15, "bold"),
            )
            return
        if not game.started:
            return
        self._draw_cell(game.apple, "apple", "red")
        for index, point in enumerate(game.snake):
            if index:
                self._draw_cell(point, "body", "green")
            else:
                self._draw_cell(point, "head", "yellow")

    def _draw_cell(self, point, name: str, colour: str) -> None:
        image = self._images.get(name)
        if image is not None:
            self.canvas.create_image(point.x, point.y, image=image, anchor="nw")
        else:
            self.canvas.create_oval(
                point.x, point.y, point.x + DOT_SIZE, point.y + DOT_SIZE, fill=colour, outline=""
            )


def main(argv=None) -> int:
    """Open the game window and run until it is closed."""
    import tkinter as tk

    root = tk.Tk()
    root.title("Snake")
    SnakeApp(root)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())