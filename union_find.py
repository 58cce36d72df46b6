"""
Weighted quick-union with path compression by halving
Used by the optimality checker to rebuild forest components
"""


class DisjointSet:
    """Union-find over the sites 0..n-1, tracking the number of components"""

    def __init__(self, n):
        if n < 0:
            raise ValueError(f"number of sites must be non-negative, got {n}")
        self.parent = list(range(n))
        self.rank = [0] * n
        self._count = n

    def __len__(self):
        return len(self.parent)

    def validate(self, p):
        """Raise IndexError unless p is a site of this structure"""
        if p < 0 or p >= len(self.parent):
            raise IndexError(f"site {p} is not between 0 and {len(self.parent) - 1}")

    def find(self, p):
        """Return the root of the component containing p"""
        self.validate(p)
        parent = self.parent
        while p != parent[p]:
            parent[p] = parent[parent[p]]  # halving
            p = parent[p]
        return p

    def count(self):
        return self._count

    def connected(self, p, q):
        return self.find(p) == self.find(q)

    def union(self, p, q):
        """
        Merge the components of p and q.
        Returns False when they were already connected.
        """
        i = self.find(p)
        j = self.find(q)
        if i == j:
            return False

        # Root of smaller rank points to root of larger rank
        if self.rank[i] < self.rank[j]:
            self.parent[i] = j
        elif self.rank[i] > self.rank[j]:
            self.parent[j] = i
        else:
            self.parent[j] = i
            self.rank[i] += 1
        self._count -= 1
        return True
