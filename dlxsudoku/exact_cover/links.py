"""Toroidal doubly-linked structure for Knuth's dancing links."""

from __future__ import annotations
from typing import Iterator, List, NamedTuple, Optional, Tuple

from ..core.exceptions import CorruptStructureError
from .constraints import Constraint

ROOT = 0


class LinkNode(NamedTuple):
    """Read-only view of one arena slot."""
    index: int
    left: int
    right: int
    up: int
    down: int
    column: int
    size: int
    constraint: Optional[Constraint]


class DancingLinks:
    """
    Arena of ring nodes addressed by integer index.

    Slot 0 is the root header, which represents no constraint and anchors
    the ring of headers. Every other slot is either a constraint header
    (``column[i] == i``, carries a constraint and a live size) or a candidate
    node (``column[i]`` is its header, no constraint, size unused).

    Left/right links of headers form the header ring; left/right links of
    candidate nodes form the four-node ring of one placement. Up/down links
    form the vertical ring of each header.
    """

    __slots__ = ['left', 'right', 'up', 'down', 'column', 'size', 'constraint']

    def __init__(self):
        self.left: List[int] = [ROOT]
        self.right: List[int] = [ROOT]
        self.up: List[int] = [ROOT]
        self.down: List[int] = [ROOT]
        self.column: List[int] = [ROOT]
        self.size: List[int] = [0]
        self.constraint: List[Optional[Constraint]] = [None]

    def __len__(self) -> int:
        return len(self.column)

    def _allocate(self, column: Optional[int], constraint: Optional[Constraint]) -> int:
        index = len(self.column)
        self.left.append(index)
        self.right.append(index)
        self.up.append(index)
        self.down.append(index)
        self.column.append(index if column is None else column)
        self.size.append(0)
        self.constraint.append(constraint)
        return index

    def add_header(self, constraint: Constraint) -> int:
        """Create a header for ``constraint`` at the end of the header ring."""
        header = self._allocate(None, constraint)
        last = self.left[ROOT]
        self.left[header] = last
        self.right[header] = ROOT
        self.right[last] = header
        self.left[ROOT] = header
        return header

    def add_node(self, header: int, left: Optional[int] = None) -> int:
        """
        Create a candidate node at the bottom of ``header``'s vertical ring.

        Args:
            header: Header the node satisfies.
            left: Node to splice the new node after in its horizontal ring.
                  If None, the node starts a ring of its own.

        Returns:
            Index of the new node.
        """
        if not self.is_header(header) or header == ROOT:
            raise ValueError(f"Slot {header} is not a constraint header")
        node = self._allocate(header, None)

        bottom = self.up[header]
        self.up[node] = bottom
        self.down[node] = header
        self.down[bottom] = node
        self.up[header] = node
        self.size[header] += 1

        if left is not None:
            right = self.right[left]
            self.left[node] = left
            self.right[node] = right
            self.right[left] = node
            self.left[right] = node
        return node

    def cover(self, header: int) -> None:
        """
        Remove a header from the header ring together with every row that
        would satisfy it from all other vertical rings.

        The header's own vertical ring is left intact so the caller can
        still branch over it.
        """
        left, right, up, down = self.left, self.right, self.up, self.down
        column, size = self.column, self.size

        right[left[header]] = right[header]
        left[right[header]] = left[header]

        row = down[header]
        while row != header:
            j = right[row]
            while j != row:
                up[down[j]] = up[j]
                down[up[j]] = down[j]
                col = column[j]
                if size[col] <= 0:
                    raise CorruptStructureError(
                        f"Size of header {self.constraint[col]} would drop below zero"
                    )
                size[col] -= 1
                j = right[j]
            row = down[row]

    def uncover(self, header: int) -> None:
        """
        Undo :meth:`cover` for the same header.

        Walks the rings upward and leftward, the reverse of the order used by
        cover, so every link and size is restored exactly. The header goes
        back into the header ring last.
        """
        left, right, up, down = self.left, self.right, self.up, self.down
        column, size = self.column, self.size

        row = up[header]
        while row != header:
            j = left[row]
            while j != row:
                size[column[j]] += 1
                up[down[j]] = j
                down[up[j]] = j
                j = left[j]
            row = up[row]

        right[left[header]] = header
        left[right[header]] = header

    def is_header(self, index: int) -> bool:
        return self.column[index] == index

    def is_empty(self) -> bool:
        """True when every constraint has been covered."""
        return self.right[ROOT] == ROOT

    def headers(self) -> Iterator[int]:
        """Headers still in the header ring, in ring order."""
        c = self.right[ROOT]
        while c != ROOT:
            yield c
            c = self.right[c]

    def column_nodes(self, header: int) -> Iterator[int]:
        """Candidate nodes in a header's vertical ring, top to bottom."""
        node = self.down[header]
        while node != header:
            yield node
            node = self.down[node]

    def row_nodes(self, node: int) -> Iterator[int]:
        """The other nodes of ``node``'s horizontal ring, left to right."""
        j = self.right[node]
        while j != node:
            yield j
            j = self.right[j]

    def node(self, index: int) -> LinkNode:
        return LinkNode(
            index,
            self.left[index],
            self.right[index],
            self.up[index],
            self.down[index],
            self.column[index],
            self.size[index],
            self.constraint[index],
        )

    def snapshot(self) -> Tuple[Tuple[int, ...], ...]:
        """Copy of every link and size, for comparing structure states."""
        return (
            tuple(self.left),
            tuple(self.right),
            tuple(self.up),
            tuple(self.down),
            tuple(self.size),
        )

    def check_sizes(self) -> None:
        """
        Verify that every live header's size matches its vertical ring.

        Raises:
            CorruptStructureError: On the first mismatch found.
        """
        for header in self.headers():
            count = sum(1 for _ in self.column_nodes(header))
            if count != self.size[header]:
                raise CorruptStructureError(
                    f"Header {self.constraint[header]} has size {self.size[header]} "
                    f"but {count} linked nodes"
                )
