"""
Weighted quick-union with path compression.

Maintains a partition of the integers 0..size-1 into disjoint sets. Both
union and connected run in near-constant amortized time (inverse Ackermann),
which keeps a full n-by-n grid fill at O(n^2 log* n).
"""

import numpy as np


class WeightedQuickUnionUF:
    """
    Disjoint-set forest over a fixed universe of integer elements.

    Trees are linked by size (smaller root under larger root) and paths are
    compressed on every find.

    Example:
        uf = WeightedQuickUnionUF(4)
        uf.union(0, 1)
        uf.union(1, 2)
        uf.connected(0, 2)   # True
        uf.connected(0, 3)   # False
    """

    def __init__(self, size: int):
        """
        Create ``size`` singleton sets.

        Args:
            size: Number of elements in the universe (>= 0)
        """
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 0:
            raise ValueError(f"size must be a non-negative integer, got {size!r}")

        self._n = int(size)
        # parent[i] = parent of element i; roots point at themselves
        self.parent = np.arange(self._n, dtype=np.int64)
        # size[i] = number of elements in the tree rooted at i (valid for roots)
        self.size = np.ones(self._n, dtype=np.int64)
        self.count = self._n

    def __len__(self) -> int:
        return self._n

    def _validate(self, p: int) -> None:
        if p < 0 or p >= self._n:
            raise IndexError(f"index {p} is not between 0 and {self._n - 1}")

    def find(self, p: int) -> int:
        """Return the root of the set containing ``p``."""
        self._validate(p)
        parent = self.parent

        root = p
        while root != parent[root]:
            root = parent[root]

        # Path compression
        while p != root:
            next_p = parent[p]
            parent[p] = root
            p = next_p

        return int(root)

    def connected(self, p: int, q: int) -> bool:
        """Return True if ``p`` and ``q`` belong to the same set."""
        self._validate(p)
        self._validate(q)
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        """Merge the sets containing ``p`` and ``q``."""
        self._validate(p)
        self._validate(q)

        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return

        if self.size[root_p] < self.size[root_q]:
            self.parent[root_p] = root_q
            self.size[root_q] += self.size[root_p]
        else:
            self.parent[root_q] = root_p
            self.size[root_p] += self.size[root_q]

        self.count -= 1
