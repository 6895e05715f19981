"""Visualization utilities for benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Visualization generator for Sudoku solver benchmark results.

    Creates charts comparing algorithm performance across various metrics.
    """

    # Color palette for algorithms
    COLORS = {
        "DLX": "#9b59b6",           # Purple
        "Backtracking": "#2ecc71"   # Green
    }

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        # Set style
        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def _algorithms(self) -> List[str]:
        return sorted(set(r.algorithm for r in self.results))

    def _color(self, algo: str) -> str:
        return self.COLORS.get(algo, "#95a5a6")

    def _save(self, name: str) -> str:
        plt.tight_layout()
        path = os.path.join(self.output_dir, name)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()
        return path

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_comparison(),
            self.plot_time_distribution(),
            self.plot_iterations_comparison(),
            self.plot_time_by_clues(),
        ]

    def plot_time_comparison(self) -> str:
        """Create bar chart comparing average solve times."""
        fig, ax = plt.subplots(figsize=(10, 6))

        algorithms = self._algorithms()
        avg_times = []
        colors = []

        for algo in algorithms:
            times = [r.time_seconds for r in self.results if r.algorithm == algo]
            avg_times.append(np.mean(times))
            colors.append(self._color(algo))

        bars = ax.bar(algorithms, avg_times, color=colors, edgecolor='black', linewidth=0.5)

        # Add value labels on bars
        for bar, time in zip(bars, avg_times):
            height = bar.get_height()
            ax.annotate(f'{time:.4f}s',
                        xy=(bar.get_x() + bar.get_width() / 2, height),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Algorithm', fontsize=12)
        ax.set_ylabel('Average Time (seconds)', fontsize=12)
        ax.set_title('Average Solve Time by Algorithm', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        return self._save("time_comparison.png")

    def plot_time_distribution(self) -> str:
        """Create box plot showing time distribution."""
        fig, ax = plt.subplots(figsize=(12, 6))

        algorithms = self._algorithms()
        data = [
            [r.time_seconds for r in self.results if r.algorithm == algo]
            for algo in algorithms
        ]

        bp = ax.boxplot(data, patch_artist=True)
        ax.set_xticks(range(1, len(algorithms) + 1))
        ax.set_xticklabels(algorithms)

        # Color boxes
        for patch, algo in zip(bp['boxes'], algorithms):
            patch.set_facecolor(self._color(algo))
            patch.set_alpha(0.7)

        ax.set_xlabel('Algorithm', fontsize=12)
        ax.set_ylabel('Time (seconds)', fontsize=12)
        ax.set_title('Solve Time Distribution by Algorithm', fontsize=14, fontweight='bold')

        return self._save("time_distribution.png")

    def plot_iterations_comparison(self) -> str:
        """Create bar chart comparing average search iterations."""
        fig, ax = plt.subplots(figsize=(10, 6))

        algorithms = self._algorithms()
        avg_iters = [
            np.mean([r.iterations for r in self.results if r.algorithm == algo])
            for algo in algorithms
        ]

        ax.bar(algorithms, avg_iters,
               color=[self._color(algo) for algo in algorithms],
               edgecolor='black', linewidth=0.5)

        ax.set_xlabel('Algorithm', fontsize=12)
        ax.set_ylabel('Average Iterations (Log Scale)', fontsize=12)
        ax.set_title('Average Search Iterations by Algorithm', fontsize=14, fontweight='bold')

        # Iteration counts differ by orders of magnitude between the solvers
        ax.set_yscale('log')

        return self._save("iterations_comparison.png")

    def plot_time_by_clues(self) -> str:
        """Create scatter plot of solve time against the number of givens."""
        fig, ax = plt.subplots(figsize=(10, 6))

        algorithms = self._algorithms()
        sns.scatterplot(
            x=[r.clues for r in self.results],
            y=[r.time_seconds for r in self.results],
            hue=[r.algorithm for r in self.results],
            hue_order=algorithms,
            palette={algo: self._color(algo) for algo in algorithms},
            ax=ax,
        )

        ax.set_xlabel('Givens', fontsize=12)
        ax.set_ylabel('Time (seconds)', fontsize=12)
        ax.set_title('Solve Time by Number of Givens', fontsize=14, fontweight='bold')
        ax.legend(title='Algorithm')

        return self._save("time_by_clues.png")

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Benchmark Summary\n",
            "| Algorithm | Accuracy | Total Time | Avg Time | Avg Memory | Avg Iterations |",
            "|-----------|----------|------------|----------|------------|----------------|"
        ]

        for algo in self._algorithms():
            algo_results = [r for r in self.results if r.algorithm == algo]

            solved = sum(1 for r in algo_results if r.solved)
            accuracy = (solved / len(algo_results)) * 100 if algo_results else 0

            total_time = sum(r.time_seconds for r in algo_results)
            avg_time = np.mean([r.time_seconds for r in algo_results])
            avg_memory = np.mean([r.memory_bytes / (1024 * 1024) for r in algo_results])
            avg_iters = np.mean([r.iterations for r in algo_results])

            lines.append(
                f"| {algo} | {accuracy:.1f}% | {total_time:.4f}s | {avg_time:.4f}s "
                f"| {avg_memory:.2f} MB | {int(avg_iters):,} |"
            )

        content = "\n".join(lines)

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path
