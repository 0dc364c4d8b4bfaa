"""
Site percolation on an n-by-n square grid.

Sites are addressed by 1-indexed (row, col). Each site is either blocked or
open; opening is one-way. Connectivity between open sites is tracked
incrementally in a union-find over n*n + 2 elements: one per site plus a
virtual top node (joined to every open site in row 1) and a virtual bottom
node (joined to every open site in row n). The system percolates exactly
when the two virtual nodes are connected.
"""

from typing import Tuple

import numpy as np

from .union_find import WeightedQuickUnionUF


# Up, down, left, right
NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def site_index(n: int, row: int, col: int) -> int:
    """
    Map a 1-indexed grid coordinate to its union-find element.

    Args:
        n: Grid dimension
        row: Row in [1, n]
        col: Column in [1, n]

    Returns:
        Index in [0, n*n)
    """
    return n * (row - 1) + (col - 1)


def site_coords(n: int, index: int) -> Tuple[int, int]:
    """Inverse of :func:`site_index`."""
    row, col = divmod(index, n)
    return row + 1, col + 1


class Percolation:
    """
    n-by-n site percolation system.

    Example:
        perc = Percolation(3)
        perc.open(1, 2)
        perc.open(2, 2)
        perc.open(3, 2)
        perc.percolates()   # True
    """

    def __init__(self, n: int):
        """
        Create an n-by-n grid with every site blocked.

        Args:
            n: Grid dimension (>= 1)
        """
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n <= 0:
            raise ValueError(f"grid dimension must be a positive integer, got {n!r}")

        self.n = int(n)
        self.grid = np.zeros((self.n, self.n), dtype=bool)
        self.virtual_top = self.n * self.n
        self.virtual_bottom = self.n * self.n + 1
        self.uf = WeightedQuickUnionUF(self.n * self.n + 2)
        self._open_sites = 0

    def _validate(self, row: int, col: int, op: str) -> None:
        if not (1 <= row <= self.n and 1 <= col <= self.n):
            raise IndexError(
                f"{op}: site ({row}, {col}) out of bounds for {self.n}x{self.n} grid"
            )

    def _index(self, row: int, col: int) -> int:
        return site_index(self.n, row, col)

    def open(self, row: int, col: int) -> None:
        """Open site (row, col) if it is not open already."""
        self._validate(row, col, "open")
        if self.grid[row - 1, col - 1]:
            return

        self.grid[row - 1, col - 1] = True
        self._open_sites += 1

        site = self._index(row, col)
        for d_row, d_col in NEIGHBOR_OFFSETS:
            nb_row, nb_col = row + d_row, col + d_col
            if 1 <= nb_row <= self.n and 1 <= nb_col <= self.n and self.grid[nb_row - 1, nb_col - 1]:
                self.uf.union(site, self._index(nb_row, nb_col))

        # For n == 1 both of these fire
        if row == 1:
            self.uf.union(site, self.virtual_top)
        if row == self.n:
            self.uf.union(site, self.virtual_bottom)

    def is_open(self, row: int, col: int) -> bool:
        """Return True if site (row, col) is open."""
        self._validate(row, col, "is_open")
        return bool(self.grid[row - 1, col - 1])

    def is_full(self, row: int, col: int) -> bool:
        """
        Return True if site (row, col) is full.

        A full site is open and connected to the top row through a chain of
        open neighbouring sites.
        """
        self._validate(row, col, "is_full")
        if not self.grid[row - 1, col - 1]:
            return False
        if row == 1:
            return True
        return self.uf.connected(self._index(row, col), self.virtual_top)

    def number_of_open_sites(self) -> int:
        return self._open_sites

    def percolates(self) -> bool:
        """Return True if some open site in the bottom row is full."""
        return self.uf.connected(self.virtual_top, self.virtual_bottom)
