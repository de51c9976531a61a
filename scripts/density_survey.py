import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from bunny_maze.algo.staircase import generate_maze
from bunny_maze.algo.runner import Outcome, run_moves
from bunny_maze.core.complexity import MazeAnalyzer
from bunny_maze.core.moves import path_to_moves


def survey_size(size: int, samples: int = 200):
    print(f"\n--- Surveying {size}x{size} ({samples} mazes) ---")

    start_time = time.time()
    density = 0.0
    reachable = 0
    shortcut = 0
    failures = 0

    for seed in range(samples):
        maze, path = generate_maze(size, seed=seed)
        stats = MazeAnalyzer.calculate_stats(maze)
        density += stats["obstacle_percent"]
        reachable += stats["reachable"]
        if stats["shortest_path"] < len(path):
            shortcut += 1

        # The guaranteed path replayed as moves must always win
        if run_moves(maze, path_to_moves(path)).outcome is not Outcome.REACHED_GOAL:
            failures += 1

    elapsed = time.time() - start_time
    print(f"Avg obstacle density: {density / samples:.1f}%")
    print(f"Avg reachable cells: {reachable / samples:.1f} of {size * size}")
    print(f"Mazes with a route shorter than the staircase: {shortcut}")
    print(f"Guaranteed path failures: {failures}")
    print(f"Time: {elapsed:.3f}s ({samples / elapsed if elapsed else 0:,.0f} mazes/sec)")


def run_suite():
    for size in (5, 8, 10, 15):
        survey_size(size)


if __name__ == "__main__":
    run_suite()
