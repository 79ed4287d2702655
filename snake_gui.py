# Tkinter Snake player: owns the tick timer, input bindings and board drawing.
from __future__ import annotations

import tkinter as tk
from tkinter import messagebox

# Support both package imports and running this file directly.
try:
    from .game_logic import SnakeConfig, SnakeGame
    from .utils import CELL_FOOD, CELL_SNAKE, KEY_BINDINGS, PAUSE_KEY, encode_board, swipe_direction
except ImportError:
    from game_logic import SnakeConfig, SnakeGame
    from utils import CELL_FOOD, CELL_SNAKE, KEY_BINDINGS, PAUSE_KEY, encode_board, swipe_direction


class SnakeApp:
    """Tkinter presentation layer for SnakeGame."""
    BG = "#111827"
    BOARD_BG = "#1f2937"
    GRID_COLOR = "#374151"
    SNAKE_COLOR = "#22c55e"
    FOOD_COLOR = "#ef4444"
    TEXT_PRIMARY = "#f9fafb"
    TEXT_MUTED = "#9ca3af"
    GAME_OVER_COLOR = "#ef4444"
    PAUSE_BTN = "#a855f7"
    GRID_BTN = "#3b82f6"
    RESET_BTN = "#22c55e"

    def __init__(self, root: tk.Tk, config: SnakeConfig | None = None) -> None:
        self.root = root
        self.root.title("Snake Game")
        self.root.configure(bg=self.BG)

        self.config = config if config is not None else SnakeConfig()
        self.game = SnakeGame(self.config)
        self.show_grid = self.config.show_grid
        self.after_id: str | None = None  # Tkinter timer id for the game loop
        self.drag_start: tuple[int, int] | None = None

        self._build_layout()
        self._bind_inputs()
        self.root.protocol("WM_DELETE_WINDOW", self.close)
        self.draw()
        self._schedule_tick()

    def _build_layout(self) -> None:
        """Title, score/buttons row, and the board canvas."""
        tk.Label(
            self.root,
            text="Snake Game",
            fg=self.TEXT_PRIMARY,
            bg=self.BG,
            font=("Helvetica", 24, "bold"),
        ).pack(pady=(16, 10))

        bar = tk.Frame(self.root, bg=self.BG)
        bar.pack(fill="x", padx=16, pady=(0, 10))

        self.score_var = tk.StringVar(value="Score: 0")
        self.state_var = tk.StringVar(value="Press an arrow key to start")
        tk.Label(
            bar,
            textvariable=self.score_var,
            fg=self.TEXT_PRIMARY,
            bg=self.BG,
            font=("Helvetica", 16, "bold"),
        ).pack(side="left")

        self.grid_btn = self._button(bar, "Show Grid", self.GRID_BTN, self.toggle_grid)
        self.grid_btn.pack(side="right", padx=(6, 0))
        self.pause_btn = self._button(bar, "Pause", self.PAUSE_BTN, self.toggle_pause)
        self.pause_btn.pack(side="right")

        side = self.config.grid_size * self.config.cell_size
        self.canvas = tk.Canvas(
            self.root,
            width=side,
            height=side,
            bg=self.BOARD_BG,
            highlightthickness=2,
            highlightbackground=self.GRID_COLOR,
            bd=0,
        )
        self.canvas.pack(padx=16)

        footer = tk.Frame(self.root, bg=self.BG)
        footer.pack(fill="x", padx=16, pady=(10, 16))
        tk.Label(
            footer,
            textvariable=self.state_var,
            fg=self.TEXT_MUTED,
            bg=self.BG,
            font=("Helvetica", 11),
        ).pack(side="left")
        self.reset_btn = self._button(footer, "Play Again", self.RESET_BTN, self.reset_game)
        self.reset_btn.pack(side="right")

    def _button(self, parent: tk.Widget, text: str, color: str, command) -> tk.Button:
        return tk.Button(
            parent,
            text=text,
            command=command,
            fg="#ffffff",
            bg=color,
            activebackground=color,
            activeforeground="#ffffff",
            bd=0,
            relief="flat",
            font=("Helvetica", 11),
            padx=12,
            pady=6,
            cursor="hand2",
        )

    def _bind_inputs(self) -> None:
        """Arrow keys / WASD for intents, space for pause, mouse drag as swipe."""
        for key, direction in KEY_BINDINGS.items():
            sequence = f"<{key}>" if len(key) > 1 else key
            self.root.bind(sequence, lambda _e, d=direction: self.submit_intent(d))
        self.root.bind(f"<{PAUSE_KEY}>", lambda _e: self.toggle_pause())
        self.canvas.bind("<ButtonPress-1>", self._on_drag_start)
        self.canvas.bind("<ButtonRelease-1>", self._on_drag_end)

    def _on_drag_start(self, event: tk.Event) -> None:
        self.drag_start = (event.x, event.y)

    def _on_drag_end(self, event: tk.Event) -> None:
        if self.drag_start is None:
            return
        start_x, start_y = self.drag_start
        self.drag_start = None
        direction = swipe_direction(
            event.x - start_x,
            event.y - start_y,
            self.config.min_swipe_distance,
        )
        if direction is not None:
            self.submit_intent(direction)

    def submit_intent(self, direction: str) -> None:
        self.game.submit_intent(direction)
        self.draw()

    def _cancel_loop(self) -> None:
        """Cancel scheduled tick callback if one exists."""
        if self.after_id is not None:
            self.root.after_cancel(self.after_id)
            self.after_id = None

    def _schedule_tick(self) -> None:
        self._cancel_loop()
        self.after_id = self.root.after(self.config.tick_ms, self.tick)

    def tick(self) -> None:
        """Single frame of the game loop; the timer keeps firing for the window's lifetime."""
        self.after_id = None
        self.game.tick()
        self.draw()
        self._schedule_tick()

    def toggle_pause(self) -> None:
        self.game.toggle_pause()
        self.draw()

    def toggle_grid(self) -> None:
        self.show_grid = not self.show_grid
        self.draw()

    def reset_game(self) -> None:
        """Fresh game with the same config; restarts the timer."""
        self._cancel_loop()
        self.game.reset()
        self.draw()
        self._schedule_tick()

    def close(self) -> None:
        self._cancel_loop()
        self.root.destroy()

    def _status_text(self) -> str:
        if self.game.won:
            return "Board cleared!"
        if self.game.over:
            return "Game Over"
        if self.game.paused:
            return "Paused"
        if not self.game.started:
            return "Press an arrow key to start"
        return "Running"

    def draw(self) -> None:
        """Render board cells, optional gridlines, labels, and overlays."""
        snapshot = self.game.snapshot()
        board = encode_board(snapshot)
        size = snapshot.grid_size
        cell = self.config.cell_size
        side = size * cell

        self.canvas.delete("all")
        for y in range(size):
            for x in range(size):
                state = board[y, x]
                x1, y1 = x * cell, y * cell
                x2, y2 = x1 + cell, y1 + cell
                if state == CELL_SNAKE:
                    self.canvas.create_rectangle(x1, y1, x2, y2, fill=self.SNAKE_COLOR, outline="")
                elif state == CELL_FOOD:
                    self.canvas.create_oval(x1 + 2, y1 + 2, x2 - 2, y2 - 2, fill=self.FOOD_COLOR, outline="")

        if self.show_grid:
            for i in range(size + 1):
                pos = i * cell
                self.canvas.create_line(0, pos, side, pos, fill=self.GRID_COLOR)
                self.canvas.create_line(pos, 0, pos, side, fill=self.GRID_COLOR)

        self.score_var.set(f"Score: {snapshot.score}")
        self.state_var.set(self._status_text())
        self.pause_btn.configure(text="Resume" if snapshot.paused else "Pause")
        self.grid_btn.configure(text="Hide Grid" if self.show_grid else "Show Grid")

        if snapshot.paused and not snapshot.over:
            self.canvas.create_rectangle(0, 0, side, side, fill="#000000", stipple="gray50", outline="")
            self.canvas.create_text(
                side // 2,
                side // 2,
                text="PAUSED",
                fill=self.TEXT_PRIMARY,
                font=("Helvetica", 28, "bold"),
            )
        elif snapshot.over:
            self.canvas.create_rectangle(0, 0, side, side, fill="#000000", stipple="gray50", outline="")
            self.canvas.create_text(
                side // 2,
                side // 2 - 12,
                text="You Win!" if snapshot.won else "Game Over!",
                fill=self.GAME_OVER_COLOR,
                font=("Helvetica", 22, "bold"),
            )
            self.canvas.create_text(
                side // 2,
                side // 2 + 20,
                text="Press Play Again",
                fill=self.TEXT_MUTED,
                font=("Helvetica", 12),
            )


def run_player_gui(config: SnakeConfig | None = None) -> None:
    """Launch the Snake player window."""
    root = tk.Tk()
    try:
        SnakeApp(root, config)
    except ValueError as exc:
        messagebox.showerror("Invalid Setting", str(exc))
        root.destroy()
        return
    root.mainloop()


if __name__ == "__main__":
    run_player_gui()
