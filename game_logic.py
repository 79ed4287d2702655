# Core Snake game state and transition rules, independent from GUI/driver code.
from __future__ import annotations

from dataclasses import dataclass
import random


# Bounds used when validating configuration.
MIN_GRID_SIZE = 1
MAX_GRID_SIZE = 60
MIN_CELL_SIZE = 12
MAX_CELL_SIZE = 48
MIN_TICK_MS = 40
MAX_TICK_MS = 1000

DIRECTIONS = ("up", "down", "left", "right")
REVERSE_DIRECTION = {"up": "down", "down": "up", "left": "right", "right": "left"}


@dataclass
class SnakeConfig:
    """Runtime settings shared between the engine, drivers and GUI."""
    grid_size: int = 20
    tick_ms: int = 150
    start: tuple[int, int] | None = None    # defaults to the board centre
    min_swipe_distance: int = 30
    seed: int | None = None
    cell_size: int = 28
    show_grid: bool = False

    def start_cell(self) -> tuple[int, int]:
        if self.start is not None:
            return self.start
        center = self.grid_size // 2
        return center, center

    def validate(self) -> None:
        """Raise ValueError if any setting is outside its allowed range."""
        if not (MIN_GRID_SIZE <= self.grid_size <= MAX_GRID_SIZE):
            raise ValueError(f"Grid size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}.")
        if not (MIN_TICK_MS <= self.tick_ms <= MAX_TICK_MS):
            raise ValueError(f"Tick interval must be between {MIN_TICK_MS} and {MAX_TICK_MS} ms.")
        if not (MIN_CELL_SIZE <= self.cell_size <= MAX_CELL_SIZE):
            raise ValueError(f"Cell size must be between {MIN_CELL_SIZE} and {MAX_CELL_SIZE}.")
        if self.min_swipe_distance < 0:
            raise ValueError("Minimum swipe distance must be >= 0.")
        x, y = self.start_cell()
        if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
            raise ValueError(f"Start cell {(x, y)} is outside a {self.grid_size}x{self.grid_size} grid.")


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of the engine state, taken once per render."""
    grid_size: int
    snake: tuple[tuple[int, int], ...]
    food: tuple[int, int] | None
    heading: str | None
    score: int
    started: bool
    paused: bool
    over: bool
    won: bool


class SnakeGame:
    """Pure game state + rules (no Tkinter/UI code).

    Every operation is a silent no-op when its preconditions do not hold,
    so input callbacks and the tick timer never need to branch on failure.
    """
    def __init__(self, config: SnakeConfig | None = None) -> None:
        self.config = config if config is not None else SnakeConfig()
        self.config.validate()
        self.rng = random.Random(self.config.seed)
        self.reset()

    def reset(self) -> None:
        """Restore the canonical initial state with freshly placed food."""
        size = self.config.grid_size
        start = self.config.start_cell()
        self.snake: list[tuple[int, int]] = [start]         # ordered body, head at index 0
        self.free_tiles = {(x, y) for x in range(size) for y in range(size)}
        self.free_tiles.discard(start)
        self.food: tuple[int, int] | None = None
        self.direction: str | None = None                   # heading applied on the last tick
        self.pending_direction: str | None = None           # latest accepted intent
        self.started = False
        self.paused = False
        self.over = False
        self.won = False
        self.score = 0

        self.place_food()

    @property
    def heading(self) -> str | None:
        """Direction the head will move on the next tick."""
        return self.pending_direction

    def _next_head(self, direction: str) -> tuple[int, int]:
        """Translate current head by one tile in the given direction."""
        head_x, head_y = self.snake[0]
        if direction == "up":
            return head_x, head_y - 1
        if direction == "down":
            return head_x, head_y + 1
        if direction == "left":
            return head_x - 1, head_y
        return head_x + 1, head_y

    def in_bounds(self, x: int, y: int) -> bool:
        size = self.config.grid_size
        return 0 <= x < size and 0 <= y < size

    def submit_intent(self, direction: str) -> None:
        """Accept a heading change for the next tick; reject instant reversals."""
        if direction not in REVERSE_DIRECTION:
            return
        if self.over or self.paused:
            return
        if not self.started:
            self.direction = direction
            self.pending_direction = direction
            self.started = True
            return
        if REVERSE_DIRECTION[direction] == self.pending_direction:
            return
        self.pending_direction = direction

    def tick(self) -> bool:
        """Advance one step. Returns True only if the snake moved."""
        if self.over or self.paused or not self.started or self.pending_direction is None:
            return False

        self.direction = self.pending_direction
        new_x, new_y = self._next_head(self.direction)
        if not self.in_bounds(new_x, new_y):
            self.over = True
            return False

        new_head = (new_x, new_y)
        growing = new_head == self.food
        tail = self.snake[-1]

        # The tail cell is vacated this tick unless the snake grows.
        blocked = self.snake if growing else self.snake[:-1]
        if new_head in blocked:
            self.over = True
            return False

        if not growing:
            self.snake.pop()
            self.free_tiles.add(tail)
        self.snake.insert(0, new_head)
        self.free_tiles.discard(new_head)

        if growing:
            self.score += 1
            self.place_food()
        return True

    def place_food(self) -> None:
        """Put food on a uniformly random free tile; a full board ends the game as won."""
        if not self.free_tiles:
            self.food = None
            self.won = True
            self.over = True
            return
        # Sorted so a seeded rng gives the same board regardless of set ordering.
        self.food = self.rng.choice(sorted(self.free_tiles))

    def pause(self) -> None:
        if not self.over:
            self.paused = True

    def resume(self) -> None:
        if not self.over:
            self.paused = False

    def toggle_pause(self) -> None:
        """Freeze or unfreeze ticking without touching heading/started."""
        if self.over:
            return
        self.paused = not self.paused

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            grid_size=self.config.grid_size,
            snake=tuple(self.snake),
            food=self.food,
            heading=self.pending_direction,
            score=self.score,
            started=self.started,
            paused=self.paused,
            over=self.over,
            won=self.won,
        )
