#!/usr/bin/env python3
"""
Search Benchmark Runner

Times the search on the benchmark positions at several depths, and
optionally plays self-play games from the opening.

Usage:
    python tools/run_benchmark.py [--depths 1,2,3] [--games 2] [--max-moves 30] [--verbose]
"""

import sys
import argparse
import logging
from pathlib import Path

from tqdm import tqdm

sys.path.insert(0, str(Path(__file__).parent.parent))

from amazons_engine.config import SearchConfig
from amazons_engine.evaluation import MobilityEvaluator
from amazons_engine.search import SearchAgent
from amazons_engine.utils.testing import BENCHMARK_POSITIONS, play_game, run_benchmark


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def benchmark_depths(depths: list[int], verbose: bool = False):
    """
    Search every benchmark position at each depth and print a summary.

    Args:
        depths: List of depths to test
        verbose: If True, print the result of each position
    """
    evaluator = MobilityEvaluator()

    print("=" * 80)
    print("SEARCH BENCHMARK - Amazons Engine")
    print("=" * 80)
    print(f"Evaluator: {evaluator!r}")
    print(f"Positions: {len(BENCHMARK_POSITIONS)}")
    print(f"Depths: {depths}")
    print("=" * 80)

    summary = []
    for depth in depths:
        results = run_benchmark(depth, evaluator)
        total_time = sum(r.time_taken for r in results)
        total_nodes = sum(r.nodes for r in results)
        nodes_per_sec = total_nodes / total_time if total_time > 0 else 0
        summary.append((depth, total_nodes, total_time, nodes_per_sec))

        if verbose:
            print(f"\nDepth {depth}:")
            for r in results:
                print(
                    f"  {r.position.id}: {r.move} score={r.score} "
                    f"nodes={r.nodes:,} time={format_time(r.time_taken)}"
                )

    print("\n" + "=" * 80)
    print("SUMMARY TABLE")
    print("=" * 80)
    print(f"{'Depth':<8} {'Nodes':<15} {'Time':<12} {'Nodes/sec':<15}")
    print("-" * 80)
    for depth, total_nodes, total_time, nodes_per_sec in summary:
        print(f"{depth:<8} {total_nodes:<15,} {format_time(total_time):<12} {nodes_per_sec:>12,.0f}")
    print("=" * 80)

    return summary


def self_play(games: int, max_moves: int, depth: int):
    """Play games from the opening between two fixed-depth agents."""
    config = SearchConfig(fixed_depth=depth)
    white = SearchAgent(config=config)
    black = SearchAgent(config=config)

    for game in range(1, games + 1):
        with tqdm(total=max_moves, desc=f"Game {game}/{games}", leave=False) as pbar:
            record = play_game(
                white, black, max_moves=max_moves,
                on_move=lambda board, move: pbar.update(1),
            )
        winner = record.winner.name if record.winner else "none"
        print(f"Game {game}: {len(record.moves)} moves, winner: {winner}")
        print(" ".join(str(move) for move in record.moves))


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark the Amazons search"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default="1,2,3",
        help="Comma-separated list of depths to test (default: 1,2,3)"
    )
    parser.add_argument(
        "--games",
        type=int,
        default=0,
        help="Number of self-play games to play after the benchmark"
    )
    parser.add_argument(
        "--max-moves",
        type=int,
        default=30,
        help="Move limit for each self-play game (default: 30)"
    )
    parser.add_argument(
        "--game-depth",
        type=int,
        default=1,
        help="Search depth used in self-play games (default: 1)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print detailed results for each position"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        depths = [int(d.strip()) for d in args.depths.split(",")]
    except ValueError:
        print("Error: depths must be comma-separated integers")
        sys.exit(1)

    try:
        benchmark_depths(depths, verbose=args.verbose)
        if args.games > 0:
            self_play(args.games, args.max_moves, args.game_depth)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
