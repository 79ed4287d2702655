# Shared helpers: input decoding, board encoding, autopilot, and headless game runs.
from __future__ import annotations

from typing import Callable

import numpy as np

try:
    from .game_logic import DIRECTIONS, REVERSE_DIRECTION, GameSnapshot, SnakeConfig, SnakeGame
except ImportError:
    from game_logic import DIRECTIONS, REVERSE_DIRECTION, GameSnapshot, SnakeConfig, SnakeGame


CELL_EMPTY = 0
CELL_FOOD = 1
CELL_SNAKE = 2

PAUSE_KEY = "space"
KEY_BINDINGS = {
    "Up": "up",
    "Down": "down",
    "Left": "left",
    "Right": "right",
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "W": "up",
    "S": "down",
    "A": "left",
    "D": "right",
}


def swipe_direction(dx: float, dy: float, min_distance: float = 30) -> str | None:
    """
    Decode a drag/swipe delta into a direction.
    - both axes shorter than min_distance: None
    - dominant horizontal axis: left/right by sign of dx
    - otherwise: up/down by sign of dy (screen y grows downwards)
    """
    if abs(dx) < min_distance and abs(dy) < min_distance:
        return None
    if abs(dx) > abs(dy):
        return "right" if dx > 0 else "left"
    return "down" if dy > 0 else "up"


def encode_board(snapshot: GameSnapshot) -> np.ndarray:
    """Cell-state grid indexed board[y, x]: empty, food or snake."""
    size = snapshot.grid_size
    board = np.full((size, size), CELL_EMPTY, dtype=np.int8)

    if snapshot.food is not None:
        fx, fy = snapshot.food
        board[fy, fx] = CELL_FOOD

    for x, y in snapshot.snake:
        board[y, x] = CELL_SNAKE

    return board


def _next_xy(x: int, y: int, direction: str) -> tuple[int, int]:
    if direction == "up":
        return x, y - 1
    if direction == "down":
        return x, y + 1
    if direction == "left":
        return x - 1, y
    return x + 1, y


def _is_collision(game: SnakeGame, x: int, y: int) -> bool:
    if not game.in_bounds(x, y):
        return True
    # Tail moves away unless the move eats food.
    body = game.snake if (x, y) == game.food else game.snake[:-1]
    return (x, y) in body


def greedy_intent(game: SnakeGame) -> str:
    """Autopilot: step toward food when safe, otherwise any safe direction."""
    hx, hy = game.snake[0]
    current = game.direction
    candidates = [d for d in DIRECTIONS if current is None or d != REVERSE_DIRECTION[current]]
    safe = [d for d in candidates if not _is_collision(game, *_next_xy(hx, hy, d))]

    if game.food is not None:
        fx, fy = game.food
        distance = abs(fx - hx) + abs(fy - hy)
        for direction in safe:
            nx, ny = _next_xy(hx, hy, direction)
            if abs(fx - nx) + abs(fy - ny) < distance:
                return direction

    if safe:
        if current in safe:
            return current
        return safe[0]
    return current if current is not None else DIRECTIONS[0]


def score_summary(scores: list[float]) -> dict[str, float]:
    """Mean/median/spread of a batch of game scores."""
    if not scores:
        raise ValueError("scores cannot be empty")

    arr = np.asarray(scores, dtype=np.float32)
    return {
        "mean": float(arr.mean()),
        "median": float(np.median(arr)),
        "max": float(arr.max()),
        "min": float(arr.min()),
        "std": float(arr.std()),
        "q1": float(np.percentile(arr, 25)),
        "q3": float(np.percentile(arr, 75)),
    }


def make_game(grid_size: int = 20, seed: int | None = None) -> SnakeGame:
    return SnakeGame(SnakeConfig(grid_size=grid_size, seed=seed))


def run_game(
    game: SnakeGame,
    intent_source: Callable[[SnakeGame], str | None] = greedy_intent,
    max_ticks: int = 2000,
    render_step: Callable[[GameSnapshot, int], None] | None = None,
) -> tuple[int, int, int, bool]:
    """Play one game headlessly: one intent then one tick per step.

    Returns (score, length, ticks, won).
    """
    if max_ticks <= 0:
        raise ValueError("max_ticks must be > 0")

    game.reset()
    ticks = 0
    for step in range(max_ticks):
        if game.over:
            break

        direction = intent_source(game)
        if direction is not None:
            game.submit_intent(direction)
        game.tick()
        ticks = step + 1

        if render_step is not None:
            render_step(game.snapshot(), step)

    return game.score, len(game.snake), ticks, game.won
