"""Unit tests for the benchmark harness and charts."""

import json
import os

import matplotlib
matplotlib.use("Agg")

import pytest
from dlxsudoku.core.exceptions import ConstructionError
from dlxsudoku.benchmark import Benchmark, Visualizer, load_puzzles, parse_puzzle_lines
from dlxsudoku.solvers import BacktrackingSolver, DLXSolver


EASY_PUZZLE = "003020600900305001001806400008102900700000008006708200002609500800203009005010300"
MEDIUM_PUZZLE = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"


@pytest.fixture
def puzzles():
    return parse_puzzle_lines([f"easy {EASY_PUZZLE}", MEDIUM_PUZZLE])


class TestPuzzleLines:
    """Tests for the puzzle-per-line format."""

    def test_ids(self):
        """Lines may carry an id; those without are numbered."""
        parsed = parse_puzzle_lines(["p1 " + EASY_PUZZLE, MEDIUM_PUZZLE])
        assert [pid for pid, _ in parsed] == ["p1", "1"]
        assert parsed[0][1].count_filled() == 32

    def test_skips_blank_and_comment_lines(self):
        parsed = parse_puzzle_lines(["# header", "", "   ", EASY_PUZZLE])
        assert len(parsed) == 1
        assert parsed[0][0] == "0"

    def test_bad_line(self):
        with pytest.raises(ConstructionError):
            parse_puzzle_lines(["x 123"])

    def test_load_puzzles(self, tmp_path):
        path = tmp_path / "puzzles.txt"
        path.write_text(f"a {EASY_PUZZLE}\nb {MEDIUM_PUZZLE}\n")
        parsed = load_puzzles(str(path))
        assert [pid for pid, _ in parsed] == ["a", "b"]


class TestBenchmark:
    """Tests for the Benchmark class."""

    def test_run(self, puzzles):
        """Every solver runs on every puzzle."""
        benchmark = Benchmark(puzzles)
        results = benchmark.run(show_progress=False)

        assert len(results) == 4
        assert all(r.solved for r in results)
        assert {r.algorithm for r in results} == {"DLX", "Backtracking"}
        assert {r.puzzle_id for r in results} == {"easy", "1"}

    def test_summary(self, puzzles):
        benchmark = Benchmark(puzzles, solvers={"DLX": DLXSolver()})
        benchmark.run(show_progress=False)
        summary = benchmark.get_summary()

        assert summary["total_puzzles"] == 2
        assert summary["solvers_tested"] == ["DLX"]
        dlx = summary["results_by_algorithm"]["DLX"]
        assert dlx["accuracy"] == 100
        assert dlx["total_tested"] == 2
        assert dlx["total_time_seconds"] >= dlx["max_time_seconds"]

    def test_iteration_budget_marks_unsolved(self, puzzles):
        """Solvers given a tiny budget give up on every puzzle."""
        benchmark = Benchmark(puzzles, solvers={
            "DLX": DLXSolver(max_iterations=2),
            "Backtracking": BacktrackingSolver(max_iterations=2),
        })
        results = benchmark.run(show_progress=False)
        assert not any(r.solved for r in results)
        assert all(r.extra["aborted"] for r in results)

    def test_default_solvers_are_unbounded(self, puzzles):
        benchmark = Benchmark(puzzles)
        assert not hasattr(benchmark, "max_iterations")
        assert all(s.max_iterations is None for s in benchmark.solvers.values())

    def test_unsolved_result_is_reported(self):
        """A clashing puzzle counts as unsolved."""
        clash = "1100" + "0" * 12
        benchmark = Benchmark(parse_puzzle_lines([clash]), solvers={"DLX": DLXSolver()})
        results = benchmark.run(show_progress=False)
        assert not results[0].solved
        assert benchmark.get_summary()["results_by_algorithm"]["DLX"]["accuracy"] == 0

    def test_save_results(self, puzzles, tmp_path):
        benchmark = Benchmark(puzzles)
        benchmark.run(show_progress=False)
        benchmark.save_results(str(tmp_path))

        with open(tmp_path / "benchmark_results.json") as f:
            raw = json.load(f)
        assert len(raw) == 4
        assert raw[0]["clues"] == 32
        assert (tmp_path / "benchmark_summary.json").exists()


class TestVisualizer:
    """Tests for chart and table output."""

    def test_generate_all(self, puzzles, tmp_path):
        results = Benchmark(puzzles).run(show_progress=False)
        visualizer = Visualizer(results, str(tmp_path))

        charts = visualizer.generate_all()

        assert len(charts) == 4
        assert all(os.path.exists(path) for path in charts)

    def test_summary_table(self, puzzles, tmp_path):
        results = Benchmark(puzzles).run(show_progress=False)
        path = Visualizer(results, str(tmp_path)).generate_summary_table()

        with open(path) as f:
            content = f.read()
        assert "| DLX | 100.0%" in content
        assert "| Backtracking | 100.0%" in content


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
