"""Command-line interface for the Sudoku solver system."""

import argparse
import logging
import sys

from .core.board import SudokuBoard
from .core.exceptions import ConstructionError
from .core.validator import validate_solution
from .solvers import DLXSolver, BacktrackingSolver
from .benchmark import Benchmark, load_puzzles
from .benchmark.visualizer import Visualizer


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        description="Generalized Sudoku solver using Dancing Links",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a puzzle string with DLX
  python -m dlxsudoku.cli solve --puzzle "530070000600195000..."

  # Solve a puzzle file with both solvers
  python -m dlxsudoku.cli solve --file puzzle.txt --algorithm all

  # Time both solvers over a puzzle-per-line file
  python -m dlxsudoku.cli benchmark --input puzzles.txt --output results/
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    source = solve_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--puzzle", "-p", type=str,
        help="Puzzle string (0 or . for empty cells, A.. for digits above 9)"
    )
    source.add_argument(
        "--file", "-f", type=str,
        help="Puzzle file: alphabet line followed by one line per row"
    )
    solve_parser.add_argument(
        "--algorithm", "-a",
        choices=["dlx", "backtracking", "all"],
        default="dlx",
        help="Solving algorithm to use (default: dlx)"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics and debug logging"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Time solvers over a puzzle file")
    bench_parser.add_argument(
        "--input", "-i", type=str, required=True,
        help="File with one puzzle per line, optionally prefixed by an id"
    )
    bench_parser.add_argument(
        "--algorithm", "-a",
        choices=["dlx", "backtracking", "all"],
        default="all",
        help="Solving algorithm to time (default: all)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--max-iterations", "-m", type=int, default=None,
        help="Give up on a puzzle after this many search steps"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )
    bench_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    return parser


def make_solvers(algorithm: str, max_iterations=None) -> dict:
    """Map a CLI algorithm choice to named solver instances."""
    solver_map = {
        "dlx": ("DLX", DLXSolver(max_iterations=max_iterations)),
        "backtracking": ("Backtracking", BacktrackingSolver(max_iterations=max_iterations)),
    }
    if algorithm == "all":
        return dict(solver_map.values())
    name, solver = solver_map[algorithm]
    return {name: solver}


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s"
        )

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def cmd_solve(args):
    """Handle the solve command."""
    # Parse puzzle
    try:
        if args.file:
            board = SudokuBoard.from_file(args.file)
        else:
            board = SudokuBoard.from_string(args.puzzle)
    except ConstructionError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)

    print("Input puzzle:")
    print(board)
    print()

    # Solve with each algorithm
    for name, solver in make_solvers(args.algorithm).items():
        print(f"Solving with {name}...")
        solution = solver.solve(board)
        stats = solver.stats

        if validate_solution(board, solution):
            print(f"✓ Solved in {stats.time_seconds:.4f}s")
            if args.verbose:
                print(f"  Iterations: {stats.iterations:,}")
                print(f"  Backtracks: {stats.backtracks:,}")
            print(solution)
        else:
            print(f"✗ Failed to solve after {stats.time_seconds:.4f}s. Attempt:")
            if args.verbose:
                print(f"  Iterations: {stats.iterations:,}")
            print(solution)
        print()


def cmd_benchmark(args):
    """Handle the benchmark command."""
    try:
        puzzles = load_puzzles(args.input)
    except (OSError, ConstructionError) as e:
        print(f"Error loading puzzles: {e}")
        sys.exit(1)

    benchmark = Benchmark(
        puzzles,
        solvers=make_solvers(args.algorithm, args.max_iterations)
    )

    print("=" * 60)
    print("SUDOKU SOLVER BENCHMARK")
    print("=" * 60)
    print(f"Puzzles: {len(puzzles)}")
    print(f"Algorithms: {', '.join(benchmark.solvers.keys())}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    for algo, stats in summary["results_by_algorithm"].items():
        print(f"\n{algo}:")
        if stats["total_solved"] == stats["total_tested"]:
            print(f"  Completed all {stats['total_tested']} puzzles in {stats['total_time_seconds']:.4f}s")
        else:
            print(f"  Solved {stats['total_solved']} of {stats['total_tested']} puzzles "
                  f"in {stats['total_time_seconds']:.4f}s")
        print(f"  Accuracy: {stats['accuracy']:.1f}% ({stats['total_solved']}/{stats['total_tested']})")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Memory: {stats['avg_memory_mb']:.2f} MB")

    benchmark.save_results(args.output)

    if not args.no_charts and results:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
