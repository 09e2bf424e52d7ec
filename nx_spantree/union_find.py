class UnionFind:
    """
    Disjoint sets over the integers [0, size)
    Path compression on find, union by rank
    """

    def __init__(self, size: int):
        self.parent = list(range(size))
        self.rank = [0] * size

    def __len__(self):
        return len(self.parent)

    def find(self, vertex: int) -> int:
        root = vertex
        while self.parent[root] != root:
            root = self.parent[root]
        # second pass points every visited node at the root
        while self.parent[vertex] != root:
            self.parent[vertex], vertex = root, self.parent[vertex]
        return root

    def union(self, first: int, second: int) -> bool:
        """
        Merge the sets of first and second
        Returns False when they already share a set (the edge would close a cycle)
        """
        first_root = self.find(first)
        second_root = self.find(second)
        if first_root == second_root:
            return False

        if self.rank[first_root] > self.rank[second_root]:
            self.parent[second_root] = first_root
        elif self.rank[first_root] < self.rank[second_root]:
            self.parent[first_root] = second_root
        else:
            self.parent[second_root] = first_root
            self.rank[first_root] += 1
        return True

    def connected(self, first: int, second: int) -> bool:
        return self.find(first) == self.find(second)
