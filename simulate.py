"""Run headless Snake games on a fixed tick cadence and report score statistics."""
from __future__ import annotations

import argparse
import os
import time

import numpy as np

try:
    from .game_logic import MAX_GRID_SIZE, MIN_GRID_SIZE
    from .utils import greedy_intent, make_game, run_game, score_summary
except ImportError:
    from game_logic import MAX_GRID_SIZE, MIN_GRID_SIZE
    from utils import greedy_intent, make_game, run_game, score_summary


LOCAL_MPLCONFIG = os.path.join(os.path.dirname(os.path.abspath(__file__)), ".mplconfig")


def _print_progress_bar(game_index: int, total: int, bar_length: int = 40) -> None:
    """Print a compact progress bar in the terminal."""
    total_safe = max(1, int(total))
    percent = min(1.0, max(0.0, game_index / total_safe))
    filled = int(bar_length * percent)
    bar = "#" * filled + "-" * (bar_length - filled)
    print(f"\rProgress: |{bar}| {game_index}/{total_safe} ({percent * 100:.1f}%)", end="", flush=True)


def _pyplot():
    """Import pyplot lazily; headless runs never touch matplotlib."""
    # Keep matplotlib cache local for environments without writable home config.
    os.makedirs(LOCAL_MPLCONFIG, exist_ok=True)
    os.environ.setdefault("MPLCONFIGDIR", LOCAL_MPLCONFIG)
    import matplotlib.pyplot as plt

    return plt


def plot_scores(scores: list[float], save_path: str | None = None) -> None:
    plt = _pyplot()
    fig, ax = plt.subplots(figsize=(8, 4.5))
    ax.set_title("Score Distribution")
    ax.set_xlabel("Score")
    ax.set_ylabel("Games")
    ax.grid(alpha=0.2)

    max_score = int(max(scores)) if scores else 0
    bins = np.arange(-0.5, max_score + 1.5, 1.0)
    ax.hist(scores, bins=bins, color="#44b5a4", alpha=0.85, edgecolor="#17323a")
    if scores:
        mean_all = float(np.mean(scores))
        median_all = float(np.median(scores))
        ax.axvline(mean_all, color="#1f77b4", linestyle="--", linewidth=1.6, label=f"Mean: {mean_all:.2f}")
        ax.axvline(median_all, color="#ff7f0e", linestyle="-", linewidth=1.6, label=f"Median: {median_all:.2f}")
        ax.legend(loc="upper right")

    fig.tight_layout()
    if save_path:
        fig.savefig(save_path)
        plt.close(fig)
    else:
        plt.show()


def simulate(
    num_games: int = 50,
    grid_size: int = 20,
    max_ticks: int = 2000,
    seed: int | None = None,
    tick_delay: float = 0.0,
    show_progress: bool = True,
) -> tuple[list[float], int]:
    """Play num_games autopilot games. Returns (scores, boards cleared)."""
    if num_games <= 0:
        raise ValueError("num_games must be > 0")

    game = make_game(grid_size=grid_size, seed=seed)
    render_step = None
    if tick_delay > 0:
        render_step = lambda _snapshot, _step: time.sleep(tick_delay)

    scores: list[float] = []
    wins = 0
    for index in range(1, num_games + 1):
        score, _, _, won = run_game(game, greedy_intent, max_ticks=max_ticks, render_step=render_step)
        scores.append(float(score))
        wins += int(won)
        if show_progress:
            _print_progress_bar(index, num_games)
    if show_progress:
        print()

    return scores, wins


def print_summary(scores: list[float], wins: int) -> None:
    stats = score_summary(scores)
    print("=" * 40)
    print("SIMULATION RESULTS")
    print("=" * 40)
    print(f"{'Games':<20} {len(scores):>15}")
    print(f"{'Boards cleared':<20} {wins:>15}")
    print(f"{'Mean score':<20} {stats['mean']:>15.2f}")
    print(f"{'Median score':<20} {stats['median']:>15.2f}")
    print(f"{'Max score':<20} {stats['max']:>15.2f}")
    print(f"{'Min score':<20} {stats['min']:>15.2f}")
    print(f"{'Std dev':<20} {stats['std']:>15.2f}")
    print(f"{'25th percentile':<20} {stats['q1']:>15.2f}")
    print(f"{'75th percentile':<20} {stats['q3']:>15.2f}")
    print("=" * 40)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run headless Snake autopilot games")
    parser.add_argument("--games", type=int, default=50, help="Number of games to play")
    parser.add_argument(
        "--grid-size",
        type=int,
        default=20,
        help=f"Board side length ({MIN_GRID_SIZE}-{MAX_GRID_SIZE})",
    )
    parser.add_argument("--max-ticks", type=int, default=2000, help="Tick cap per game")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument("--tick-delay", type=float, default=0.0, help="Seconds to sleep after each tick")
    parser.add_argument("--plot", action="store_true", help="Show a score histogram when done")
    parser.add_argument("--save-plot", default=None, help="Write the score histogram to this path")
    args = parser.parse_args(argv)

    try:
        scores, wins = simulate(
            num_games=args.games,
            grid_size=args.grid_size,
            max_ticks=args.max_ticks,
            seed=args.seed,
            tick_delay=args.tick_delay,
        )
    except ValueError as exc:
        parser.error(str(exc))

    print_summary(scores, wins)
    if args.plot or args.save_plot:
        plot_scores(scores, save_path=args.save_plot)


if __name__ == "__main__":
    main()
