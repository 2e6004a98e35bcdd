import networkx as nx
import numpy as np

import puzzlegraph as pg


class AdjacencyBFSGraph(pg.BreadthFirstSearchGraph):
    """
    Breadth-first graph over an explicit adjacency dict, recording every call to
    ``mark`` and every expansion.
    """

    def __init__(self, adjacency):
        self.adjacency = adjacency
        self.marked = pg.MarkSet()
        self.successful_marks = []
        self.expanded = []

    def mark(self, node):
        result = self.marked.mark(node)
        if result:
            self.successful_marks.append(node)
        return result

    def neighbours(self, node):
        self.expanded.append(node)
        return self.adjacency.get(node, [])


class AdjacencyWeightedGraph(pg.WeightedSearchGraph):
    """
    Weighted graph over an explicit ``node -> [(cost, neighbour)]`` dict.
    """

    def __init__(self, adjacency, ends):
        self.adjacency = adjacency
        self.ends = set(ends)
        self.costs = pg.BestCostTable()

    def is_end(self, node):
        return node in self.ends

    def neighbours(self, node):
        return self.adjacency.get(node, [])

    def try_improve(self, node, cost):
        return self.costs.try_improve(node, cost)


def random_digraph(seed, num_nodes=15, edge_probability=0.15, max_weight=9):
    """
    A random directed graph as a weighted adjacency dict, plus the same graph in
    networkx.
    """
    rng = np.random.RandomState(seed)
    adjacency = {node: [] for node in range(num_nodes)}
    g = nx.DiGraph()
    g.add_nodes_from(range(num_nodes))
    for u in range(num_nodes):
        for v in range(num_nodes):
            if u != v and rng.rand() < edge_probability:
                weight = int(rng.randint(0, max_weight + 1))
                adjacency[u].append((weight, v))
                g.add_edge(u, v, weight=weight)
    return adjacency, g
