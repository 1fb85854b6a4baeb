"""Union-find over integer ids with path compression and union by size."""

from __future__ import annotations

import numpy as np


class DisjointSet:
    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be >= 0")
        self.parent = np.arange(n, dtype=np.int64)
        self.size = np.ones(n, dtype=np.int64)
        self._num_sets = int(n)

    def __len__(self) -> int:
        return int(self.parent.shape[0])

    @property
    def num_sets(self) -> int:
        return self._num_sets

    def find(self, i: int) -> int:
        parent = self.parent
        root = int(i)
        while parent[root] != root:
            root = int(parent[root])
        # Compress the path walked above
        node = int(i)
        while parent[node] != root:
            nxt = int(parent[node])
            parent[node] = root
            node = nxt
        return root

    def union(self, a: int, b: int) -> bool:
        """Join the sets holding a and b. Returns False if already joined."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.size[ra] < self.size[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        self.size[ra] += self.size[rb]
        self._num_sets -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)
