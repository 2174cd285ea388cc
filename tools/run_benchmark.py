#!/usr/bin/env python3
"""
Search Benchmark Runner

Runs the tactical suite and a timed search from the starting position at
multiple depths to track how the engine's cost grows with depth.

Usage:
    python tools/run_benchmark.py [--depths 1,2,3] [--verbose]
"""

import sys
import argparse
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pawnstorm.board import starting_board
from pawnstorm.search import best_move
from pawnstorm.utils.testing import run_tactical_suite


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


def run_benchmark(depths: list[int], verbose: bool = False):
    """
    Run the benchmark at multiple depths.

    Args:
        depths: List of depths to test
        verbose: If True, print detailed results for each position
    """
    print("=" * 80)
    print("SEARCH BENCHMARK - Pawnstorm Chess Engine")
    print("=" * 80)
    print("Evaluator: Material + Mobility")
    print("Search: Minimax with Single-Bound Pruning")
    print(f"Depths: {depths}")
    print("=" * 80)

    all_results = []

    for depth in depths:
        print(f"\n{'=' * 80}")
        print(f"DEPTH {depth}")
        print("=" * 80)

        suite = run_tactical_suite(depth=depth, verbose=verbose)

        board = starting_board()
        board.move_piece(4, 6, 4, 4)  # 1. e4, Black to reply
        start_time = time.time()
        result = best_move(board, depth)
        opening_time = time.time() - start_time

        nodes_per_sec = result.nodes / opening_time if opening_time > 0 else 0

        all_results.append({
            'depth': depth,
            'score': suite['score'],
            'total': suite['total'],
            'opening_move': result.uci,
            'opening_time': opening_time,
            'nodes': result.nodes,
            'nodes_per_sec': nodes_per_sec,
        })

        print(f"\nResults at depth {depth}:")
        print(f"  Tactical: {suite['score']}/{suite['total']} ({suite['percentage']:.1f}%)")
        print(f"  Avg time per position: {format_time(suite['avg_time'])}")
        print(f"  Reply to 1. e4: {result.uci} in {format_time(opening_time)}")
        print(f"  Nodes: {result.nodes:,}")
        print(f"  Nodes/sec: {nodes_per_sec:,.0f}")

    print("\n" + "=" * 80)
    print("SUMMARY TABLE")
    print("=" * 80)
    print(f"{'Depth':<8} {'Tactical':<12} {'Reply':<8} {'Time':<12} {'Nodes':<12} {'Nodes/sec':<15}")
    print("-" * 80)

    for r in all_results:
        print(
            f"{r['depth']:<8} {r['score']}/{r['total']:<10} {r['opening_move']:<8} "
            f"{format_time(r['opening_time']):<12} {r['nodes']:<12,} {r['nodes_per_sec']:>12,.0f}"
        )

    print("=" * 80)
    return all_results


def main():
    parser = argparse.ArgumentParser(
        description="Run the search benchmark at multiple depths"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default="1,2,3",
        help="Comma-separated list of depths to test (default: 1,2,3)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print detailed results for each position"
    )

    args = parser.parse_args()

    try:
        depths = [int(d.strip()) for d in args.depths.split(",")]
    except ValueError:
        print("Error: depths must be comma-separated integers")
        sys.exit(1)

    try:
        run_benchmark(depths, verbose=args.verbose)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
