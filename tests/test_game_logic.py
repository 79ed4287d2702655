import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from game_logic import SnakeConfig, SnakeGame


def make(grid_size=20, start=(10, 10), seed=7):
    return SnakeGame(SnakeConfig(grid_size=grid_size, start=start, seed=seed))


def park_food(game, cell):
    """Move food somewhere known so ticks are deterministic."""
    game.food = cell


def test_initial_state():
    game = make()
    assert game.snake == [(10, 10)]
    assert game.score == 0
    assert game.heading is None
    assert not game.started and not game.paused and not game.over and not game.won
    assert game.food is not None and game.food != (10, 10)


def test_default_start_is_board_centre():
    game = SnakeGame(SnakeConfig(grid_size=12))
    assert game.snake == [(6, 6)]


def test_invalid_config_raises():
    with pytest.raises(ValueError):
        SnakeGame(SnakeConfig(grid_size=0))
    with pytest.raises(ValueError):
        SnakeGame(SnakeConfig(grid_size=10, start=(10, 3)))
    with pytest.raises(ValueError):
        SnakeGame(SnakeConfig(tick_ms=5))


def test_tick_before_start_is_noop():
    game = make()
    before = game.snapshot()
    assert game.tick() is False
    assert game.snapshot() == before


def test_first_intent_accepted_unconditionally():
    for direction in ("up", "down", "left", "right"):
        game = make()
        game.submit_intent(direction)
        assert game.started
        assert game.heading == direction


def test_unknown_direction_ignored():
    game = make()
    game.submit_intent("diagonal")
    assert not game.started
    assert game.heading is None


def test_move_right_one_cell():
    game = make()
    park_food(game, (0, 0))
    game.submit_intent("right")
    assert game.tick() is True
    assert game.snake == [(11, 10)]
    assert game.score == 0


def test_each_direction_moves_expected_axis():
    expected = {"up": (10, 9), "down": (10, 11), "left": (9, 10), "right": (11, 10)}
    for direction, head in expected.items():
        game = make()
        park_food(game, (0, 0))
        game.submit_intent(direction)
        game.tick()
        assert game.snake[0] == head


def test_reverse_intent_rejected_after_start():
    game = make()
    park_food(game, (0, 0))
    game.submit_intent("right")
    game.tick()
    game.submit_intent("left")
    assert game.heading == "right"


def test_reverse_rejected_even_before_first_tick():
    game = make()
    game.submit_intent("right")
    game.submit_intent("left")
    assert game.heading == "right"


def test_intents_between_ticks_overwrite():
    game = make()
    park_food(game, (0, 0))
    game.submit_intent("right")
    game.tick()
    game.submit_intent("up")
    game.submit_intent("left")
    assert game.heading == "left"
    game.tick()
    assert game.snake[0] == (10, 10)


def test_reverse_of_pending_heading_rejected_between_ticks():
    game = make()
    park_food(game, (0, 0))
    game.submit_intent("right")
    game.tick()
    game.submit_intent("up")
    game.submit_intent("down")
    assert game.heading == "up"
    game.tick()
    assert game.snake[0] == (11, 9)


def test_eating_food_grows_and_scores():
    game = make()
    park_food(game, (11, 10))
    game.submit_intent("right")
    game.tick()
    assert game.score == 1
    assert game.snake == [(11, 10), (10, 10)]
    assert game.food is not None
    assert game.food not in game.snake


def test_length_unchanged_without_food():
    game = make()
    park_food(game, (11, 10))
    game.submit_intent("right")
    game.tick()
    park_food(game, (0, 0))
    for _ in range(5):
        length = len(game.snake)
        game.tick()
        assert len(game.snake) == length


def test_boundary_collision_ends_game():
    game = make(start=(19, 10))
    park_food(game, (0, 0))
    game.submit_intent("right")
    assert game.tick() is False
    assert game.over
    assert game.snake == [(19, 10)]


def test_top_boundary_collision():
    game = make(start=(5, 0))
    park_food(game, (0, 19))
    game.submit_intent("up")
    game.tick()
    assert game.over
    assert game.snake == [(5, 0)]


def test_self_collision_ends_game():
    game = make(grid_size=10, start=(5, 5))
    game.snake = [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)]
    game.free_tiles -= set(game.snake)
    game.direction = "left"
    game.pending_direction = "left"
    game.started = True
    park_food(game, (0, 0))
    game.submit_intent("down")
    before = list(game.snake)
    game.tick()
    assert game.over
    assert game.snake == before


def test_moving_into_vacated_tail_is_allowed():
    game = make(grid_size=10, start=(5, 5))
    game.snake = [(5, 5), (6, 5), (6, 6), (5, 6)]
    game.free_tiles -= set(game.snake)
    game.direction = "left"
    game.pending_direction = "left"
    game.started = True
    park_food(game, (0, 0))
    game.submit_intent("down")
    assert game.tick() is True
    assert not game.over
    assert game.snake == [(5, 6), (5, 5), (6, 5), (6, 6)]


def test_food_never_on_snake():
    game = make(grid_size=6, start=(0, 0))
    game.snake = [(x, 0) for x in range(6)] + [(x, 1) for x in range(6)]
    game.free_tiles -= set(game.snake)
    for _ in range(200):
        game.place_food()
        assert game.food not in game.snake


def test_full_board_is_won():
    game = make(grid_size=4, start=(0, 0))
    game.snake = [(x, y) for y in range(4) for x in range(4)]
    game.free_tiles.clear()
    game.place_food()
    assert game.food is None
    assert game.won
    assert game.over


def test_eating_last_free_cell_wins():
    game = make(grid_size=4, start=(0, 1))
    # Snake covers every cell except (1, 1).
    game.snake = [(0, 1), (0, 0), (1, 0), (2, 0), (3, 0), (3, 1), (3, 2), (3, 3),
                  (2, 3), (1, 3), (0, 3), (0, 2), (1, 2), (2, 2), (2, 1)]
    game.free_tiles = {(1, 1)}
    game.direction = "down"
    game.pending_direction = "down"
    game.started = True
    park_food(game, (1, 1))
    game.submit_intent("right")
    game.tick()
    assert game.score == 1
    assert len(game.snake) == 16
    assert game.won and game.over
    assert game.food is None


def test_toggle_pause_freezes_ticks():
    game = make()
    park_food(game, (0, 0))
    game.submit_intent("right")
    game.toggle_pause()
    assert game.paused
    before = game.snapshot()
    for _ in range(3):
        assert game.tick() is False
    assert game.snapshot() == before
    game.toggle_pause()
    assert not game.paused
    game.tick()
    assert game.snake == [(11, 10)]


def test_intents_dropped_while_paused():
    game = make()
    park_food(game, (0, 0))
    game.submit_intent("right")
    game.pause()
    game.submit_intent("up")
    assert game.heading == "right"
    game.resume()
    game.submit_intent("up")
    assert game.heading == "up"


def test_pause_keeps_heading_and_started():
    game = make()
    game.submit_intent("down")
    game.pause()
    assert game.started
    assert game.heading == "down"


def test_game_over_freezes_everything():
    game = make(start=(19, 10))
    park_food(game, (0, 0))
    game.submit_intent("right")
    game.tick()
    assert game.over
    snake, food, score = list(game.snake), game.food, game.score
    game.submit_intent("up")
    game.tick()
    game.toggle_pause()
    assert game.snake == snake
    assert game.food == food
    assert game.score == score
    assert not game.paused


def test_reset_restores_initial_state():
    game = make()
    park_food(game, (11, 10))
    game.submit_intent("right")
    game.tick()
    game.toggle_pause()
    game.reset()
    assert game.snake == [(10, 10)]
    assert game.score == 0
    assert not game.started and not game.paused and not game.over and not game.won
    assert game.heading is None
    assert game.food is not None and game.food != (10, 10)


def test_reset_after_game_over():
    game = make(start=(0, 0))
    game.submit_intent("left")
    game.tick()
    assert game.over
    game.reset()
    assert not game.over
    assert game.snake == [(0, 0)]


def test_seeded_food_is_reproducible():
    first = make(seed=123)
    second = make(seed=123)
    assert first.food == second.food


def test_snapshot_is_detached_copy():
    game = make()
    park_food(game, (0, 0))
    snap = game.snapshot()
    game.submit_intent("right")
    game.tick()
    assert snap.snake == ((10, 10),)
    assert not snap.started
    assert game.snapshot().snake == ((11, 10),)


def test_single_cell_board_is_won_immediately():
    game = SnakeGame(SnakeConfig(grid_size=1, seed=1))
    assert game.snake == [(0, 0)]
    assert game.food is None
    assert game.won and game.over


def test_pause_after_game_over_is_noop():
    game = make(start=(19, 10))
    park_food(game, (0, 0))
    game.submit_intent("right")
    game.tick()
    assert game.over
    game.pause()
    assert not game.paused


def test_resume_after_game_over_is_noop():
    game = make(start=(19, 10))
    park_food(game, (0, 0))
    game.submit_intent("right")
    game.pause()
    # A game that ended while the pause flag was up stays frozen as it was.
    game.over = True
    game.resume()
    assert game.paused
    assert game.snake == [(19, 10)]
