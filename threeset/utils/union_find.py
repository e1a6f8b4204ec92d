"""Union-Find data structure for grouping near-duplicate labels."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class DisjointSet:
    """Union-Find with union by rank and path compression."""

    def __init__(self) -> None:
        self.parent: dict[Any, Any] = {}
        self.rank: dict[Any, int] = {}
        self._count = 0

    def make_set(self, x: Any) -> None:
        """Create a new singleton set for x (no-op if x already exists)."""
        if x not in self.parent:
            self.parent[x] = x
            self.rank[x] = 0
            self._count += 1

    def find(self, x: Any) -> Any:
        """Find the representative of the set containing x.

        Raises:
            ValueError: If x was never added

        """
        if x not in self.parent:
            raise ValueError(f"Element {x} not found in disjoint set")

        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # Path compression
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: Any, y: Any) -> bool:
        """Merge the sets containing x and y.

        Returns:
            True if the sets were merged, False if already joined

        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            root_x, root_y = root_y, root_x

        self.parent[root_y] = root_x
        if self.rank[root_x] == self.rank[root_y]:
            self.rank[root_x] += 1

        self._count -= 1
        return True

    def groups(self) -> list[list[Any]]:
        """Return all sets, members in insertion order, sets ordered by first member."""
        by_root: dict[Any, list[Any]] = {}
        for member in self.parent:
            by_root.setdefault(self.find(member), []).append(member)
        return list(by_root.values())

    def get_set_count(self) -> int:
        """Get the total number of disjoint sets."""
        return self._count

    def __len__(self) -> int:
        return len(self.parent)

    def __contains__(self, x: Any) -> bool:
        return x in self.parent
