"""Knuth's Algorithm X over a dancing-links structure."""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .links import DancingLinks, ROOT

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """One level of the search: the branch taken and what it covered."""
    header: int
    node: int
    covered: Tuple[int, ...]


class AlgorithmX:
    """
    Depth-first exact-cover search with the minimum remaining values rule.

    The search keeps an explicit stack of frames instead of recursing, so
    large boards do not hit the interpreter's recursion limit. Frame ``k``
    holds the node chosen at depth ``k`` and the headers its row covered;
    backtracking replays that record in reverse.

    After :meth:`search` returns True, :attr:`solution` holds the chosen
    candidate nodes, one per depth. After it returns False the structure is
    back in the state it was in on entry (unless the search was aborted).
    """

    def __init__(self, links: DancingLinks, max_iterations: Optional[int] = None):
        """
        Args:
            links: The structure to search. It is modified during the search.
            max_iterations: Give up after this many search steps. None means
                            search exhaustively.
        """
        self.links = links
        self.max_iterations = max_iterations
        self.solution: List[int] = []
        self.iterations = 0
        self.nodes_explored = 0
        self.backtracks = 0
        self.aborted = False

    def choose_header(self) -> int:
        """
        Pick the live header with the fewest candidate nodes.

        Ties go to the header met first walking right from the root.
        """
        right, size = self.links.right, self.links.size
        best = right[ROOT]
        min_size = size[best]
        c = right[best]
        while c != ROOT:
            if size[c] < min_size:
                min_size = size[c]
                best = c
            c = right[c]
        return best

    def search(self) -> bool:
        """
        Run Algorithm X until a cover is found or every branch fails.

        Returns:
            True if every constraint was covered.
        """
        links = self.links
        down = links.down
        frames: List[_Frame] = []

        while True:
            self.iterations += 1
            if self.max_iterations is not None and self.iterations > self.max_iterations:
                self.aborted = True
                logger.debug("Search aborted after %d iterations", self.max_iterations)
                return False

            if links.is_empty():
                self.solution = [frame.node for frame in frames]
                logger.debug(
                    "Exact cover found at depth %d (%d iterations, %d backtracks)",
                    len(frames), self.iterations, self.backtracks,
                )
                return True

            header = self.choose_header()
            links.cover(header)
            self.nodes_explored += 1
            node = down[header]

            # Exhausted rows: undo this header and resume the parent frame
            while node == header:
                links.uncover(header)
                if not frames:
                    logger.debug(
                        "No exact cover exists (%d iterations, %d backtracks)",
                        self.iterations, self.backtracks,
                    )
                    return False
                self.backtracks += 1
                frame = frames.pop()
                for covered in reversed(frame.covered):
                    links.uncover(covered)
                header = frame.header
                node = down[frame.node]

            covered = tuple(links.column[j] for j in links.row_nodes(node))
            for c in covered:
                links.cover(c)
            frames.append(_Frame(header, node, covered))
