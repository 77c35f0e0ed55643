"""Classic data structures and algorithms: queues, heaps, stacks, hash tables,
graphs with BFS/DFS, binary trees, tries, sorting, permutations, dynamic
programming and the fractional knapsack."""

__version__ = "0.1.0"