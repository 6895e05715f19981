"""Timing harness for comparing Sudoku solvers over a file of puzzles."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Iterable, Optional, Tuple
import json
import os

from tqdm import tqdm

from ..core.board import SudokuBoard
from ..core.validator import validate_solution
from ..solvers import SudokuSolver, DLXSolver, BacktrackingSolver, timed_solve


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    puzzle_id: str
    clues: int
    algorithm: str
    solved: bool
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    nodes_explored: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "clues": self.clues,
            "algorithm": self.algorithm,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            **self.extra
        }


def parse_puzzle_lines(lines: Iterable[str]) -> List[Tuple[str, SudokuBoard]]:
    """
    Parse puzzles given one per line.

    Each line is either ``<id> <digits>`` or just ``<digits>``, with digits in
    the compact string form of :meth:`SudokuBoard.from_string`. Blank lines
    and lines starting with ``#`` are skipped. Puzzles without an id are
    numbered by their position among the puzzles.

    Raises:
        ConstructionError: If a line does not hold a valid board.
    """
    puzzles = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split()
        if len(parts) >= 2:
            puzzle_id, digits = parts[0], parts[1]
        else:
            puzzle_id, digits = str(len(puzzles)), parts[0]
        puzzles.append((puzzle_id, SudokuBoard.from_string(digits)))
    return puzzles


def load_puzzles(path: str) -> List[Tuple[str, SudokuBoard]]:
    """Read a puzzle-per-line file."""
    with open(path, "r") as f:
        return parse_puzzle_lines(f)


class Benchmark:
    """
    Benchmark framework for comparing Sudoku solving algorithms.

    Runs every solver on every puzzle and collects performance metrics.
    """

    def __init__(
        self,
        puzzles: List[Tuple[str, SudokuBoard]],
        solvers: Optional[Dict[str, SudokuSolver]] = None
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles: (puzzle_id, board) pairs to solve.
            solvers: Dict of solver_name -> solver_instance (default: DLX and
                     backtracking, both unbounded). Each solver carries its
                     own iteration budget.
        """
        self.puzzles = puzzles

        # Initialize solvers
        if solvers is None:
            self.solvers: Dict[str, SudokuSolver] = {
                "DLX": DLXSolver(),
                "Backtracking": BacktrackingSolver()
            }
        else:
            self.solvers = solvers

        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []

        total_tests = len(self.puzzles) * len(self.solvers)
        pbar = tqdm(total=total_tests, desc="Benchmarking", disable=not show_progress)

        for solver_name, solver in self.solvers.items():
            for puzzle_id, puzzle in self.puzzles:
                self.results.append(self._run_single(puzzle, puzzle_id, solver_name, solver))
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(
        self,
        puzzle: SudokuBoard,
        puzzle_id: str,
        solver_name: str,
        solver: SudokuSolver
    ) -> BenchmarkResult:
        """Run a single solver on a single puzzle."""
        solution, stats = timed_solve(solver, puzzle)

        return BenchmarkResult(
            puzzle_id=puzzle_id,
            clues=puzzle.count_filled(),
            algorithm=solver_name,
            solved=validate_solution(puzzle, solution),
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
            extra=dict(stats.extra)
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary: Dict[str, Any] = {
            "total_puzzles": len(self.puzzles),
            "solvers_tested": list(self.solvers.keys()),
            "results_by_algorithm": {}
        }

        # Group by algorithm
        for solver_name in self.solvers:
            solver_results = [r for r in self.results if r.algorithm == solver_name]
            if solver_results:
                solved = [r for r in solver_results if r.solved]
                times = [r.time_seconds for r in solver_results]
                memory = [r.memory_bytes for r in solver_results]

                summary["results_by_algorithm"][solver_name] = {
                    "accuracy": len(solved) / len(solver_results) * 100,
                    "total_time_seconds": sum(times),
                    "avg_time_seconds": sum(times) / len(times),
                    "max_time_seconds": max(times),
                    "min_time_seconds": min(times),
                    "avg_memory_mb": sum(memory) / len(memory) / (1024 * 1024),
                    "total_solved": len(solved),
                    "total_tested": len(solver_results)
                }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save raw benchmark results and the summary as JSON."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        print(f"Results saved to {output_dir}")
