"""Benchmark module for comparing Sudoku solvers."""

from .benchmark import Benchmark, BenchmarkResult, load_puzzles, parse_puzzle_lines
from .visualizer import Visualizer

__all__ = ["Benchmark", "BenchmarkResult", "load_puzzles", "parse_puzzle_lines", "Visualizer"]
