import unittest
from dataclasses import dataclass

import networkx as nx
from parameterized import parameterized

import puzzlegraph as pg

from .utils import AdjacencyWeightedGraph, random_digraph

EXAMPLE_HEAT_LOSS = """
2413432311323
3215453535623
3255245654254
3446585845452
4546657867536
1438598798454
4457876987766
3637877979653
4654967986887
4564679986453
1224686865563
2546548887735
4322674655533
""".strip().split("\n")

UNFORTUNATE_HEAT_LOSS = """
111111111111
999999999991
999999999991
999999999991
999999999991
""".strip().split("\n")


@dataclass(frozen=True)
class Crucible:
    point: pg.Point
    last_direction: pg.Direction
    steps: int


class CrucibleSearch(pg.WeightedSearchGraph):
    """
    A crucible moves at least ``min_steps`` and at most ``max_steps`` in a straight
    line before it must turn, and it can never reverse.
    """

    def __init__(self, tiles, min_steps, max_steps):
        self.tiles = tiles
        self.min_steps = min_steps
        self.max_steps = max_steps
        self.end = pg.Point(tiles.width - 1, tiles.height - 1)
        self.costs = pg.BestCostTable()

    def is_end(self, node):
        return node.point == self.end and node.steps >= self.min_steps

    def neighbours(self, node):
        for direction in pg.Direction.all():
            if direction == node.last_direction.opposite():
                continue
            if direction != node.last_direction and node.steps < self.min_steps:
                continue
            steps = node.steps + 1 if direction == node.last_direction else 1
            point = node.point + direction
            if steps <= self.max_steps and self.tiles.is_in_bounds(point):
                yield self.tiles[point], Crucible(point, direction, steps)

    def try_improve(self, node, cost):
        return self.costs.try_improve(node, cost)


def crucible_starts():
    # nothing has moved yet, so both directions out of the corner are open
    return [
        Crucible(pg.Point(0, 0), direction, 0)
        for direction in (pg.Direction.EAST, pg.Direction.SOUTH)
    ]


class TestDijkstra(unittest.TestCase):

    def test_diamond(self):
        g = AdjacencyWeightedGraph(
            {
                "a": [(1, "b"), (4, "c")],
                "b": [(1, "c")],
                "c": [(1, "d")],
            },
            ends=["d"],
        )
        self.assertEqual(g.search(["a"]), 3)
        self.assertEqual(g.costs.get("c"), 2)

    def test_start_is_end(self):
        g = AdjacencyWeightedGraph({"a": [(5, "b")]}, ends=["a", "b"])
        self.assertEqual(pg.dijkstra(g, ["a"]), 0)

    def test_zero_cost_edges(self):
        g = AdjacencyWeightedGraph(
            {"a": [(0, "b"), (1, "d")], "b": [(0, "c")], "c": [(0, "d")]},
            ends=["d"],
        )
        self.assertEqual(g.search(["a"]), 0)

    def test_multiple_starts(self):
        adjacency = {
            "a": [(10, "end")],
            "b": [(2, "c")],
            "c": [(3, "end")],
        }
        self.assertEqual(AdjacencyWeightedGraph(adjacency, ["end"]).search(["a"]), 10)
        self.assertEqual(AdjacencyWeightedGraph(adjacency, ["end"]).search(["b"]), 5)
        self.assertEqual(
            AdjacencyWeightedGraph(adjacency, ["end"]).search(["a", "b"]), 5
        )

    def test_duplicate_start(self):
        g = AdjacencyWeightedGraph({"a": [(1, "b")]}, ends=["b"])
        self.assertEqual(g.search(["a", "a"]), 1)

    def test_starts_sharing_cost_slot(self):
        adjacency = {("s", 0): [(10, ("end", 0))], ("s", 1): [(1, ("end", 0))]}
        g = AdjacencyWeightedGraph(adjacency, [("end", 0)])
        g.costs = pg.BestCostTable(key=lambda node: node[0])
        self.assertEqual(g.search([("s", 0), ("s", 1)]), 1)

    def test_start_already_in_cost_table(self):
        g = AdjacencyWeightedGraph({"a": [(2, "b")]}, ends=["b"])
        g.costs.try_improve("a", 0)
        self.assertEqual(g.search(["a"]), 2)

    def test_no_starts(self):
        g = AdjacencyWeightedGraph({}, ends=["a"])
        with self.assertRaises(ValueError):
            g.search([])

    def test_unreachable(self):
        g = AdjacencyWeightedGraph(
            {"a": [(1, "b")], "b": [(1, "a")], "c": [(1, "d")]}, ends=["d"]
        )
        with self.assertRaises(pg.UnreachableGoalError):
            g.search(["a"])

    def test_negative_edge(self):
        g = AdjacencyWeightedGraph(
            {"a": [(5, "b"), (1, "c")], "c": [(-3, "b")], "b": [(1, "d")]},
            ends=["d"],
        )
        with self.assertRaises(ValueError):
            g.search(["a"])

    def test_crucible_example(self):
        tiles = pg.Grid.parse(EXAMPLE_HEAT_LOSS, int)
        self.assertEqual(CrucibleSearch(tiles, 1, 3).search(crucible_starts()), 102)

    def test_ultra_crucible_example(self):
        tiles = pg.Grid.parse(EXAMPLE_HEAT_LOSS, int)
        self.assertEqual(CrucibleSearch(tiles, 4, 10).search(crucible_starts()), 94)

    def test_ultra_crucible_must_run_before_stopping(self):
        tiles = pg.Grid.parse(UNFORTUNATE_HEAT_LOSS, int)
        self.assertEqual(CrucibleSearch(tiles, 4, 10).search(crucible_starts()), 71)

    def test_shared_cost_slot(self):
        # states that agree on the key compete for one best cost
        adjacency = {
            ("a", 0): [(1, ("b", 0)), (5, ("b", 1))],
            ("b", 0): [(10, ("end", 0))],
            ("b", 1): [(1, ("end", 0))],
        }

        class ByLabel(AdjacencyWeightedGraph):
            def __init__(self):
                super().__init__(adjacency, [("end", 0)])
                self.costs = pg.BestCostTable(key=lambda node: node[0])

        self.assertEqual(ByLabel().search([("a", 0)]), 11)
        self.assertEqual(
            AdjacencyWeightedGraph(adjacency, [("end", 0)]).search([("a", 0)]), 6
        )

    @parameterized.expand(range(10))
    def test_matches_networkx(self, seed):
        adjacency, nx_graph = random_digraph(seed, edge_probability=0.25)
        end = 14
        lengths = nx.single_source_dijkstra_path_length(nx_graph, 0, weight="weight")
        g = AdjacencyWeightedGraph(adjacency, [end])
        if end not in lengths:
            with self.assertRaises(pg.UnreachableGoalError):
                g.search([0])
            return
        self.assertEqual(g.search([0]), lengths[end])

    @parameterized.expand(range(10))
    def test_multi_start_is_min_of_single_starts(self, seed):
        adjacency, _ = random_digraph(seed, edge_probability=0.3)
        end = 14
        single = []
        for start in (0, 1):
            try:
                single.append(AdjacencyWeightedGraph(adjacency, [end]).search([start]))
            except pg.UnreachableGoalError:
                pass
        g = AdjacencyWeightedGraph(adjacency, [end])
        if not single:
            with self.assertRaises(pg.UnreachableGoalError):
                g.search([0, 1])
            return
        self.assertEqual(g.search([0, 1]), min(single))
