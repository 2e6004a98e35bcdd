from puzzlegraph.geometry.direction import Direction
from puzzlegraph.geometry.grid import Grid
from puzzlegraph.geometry.point import Point
from puzzlegraph.mincut.contraction_graph import (
    CompositeNode,
    ContractionGraph,
    node_leaves,
    node_size,
    parse_adjacency_list,
)
from puzzlegraph.mincut.stoer_wagner import (
    MinCut,
    NoCutBelowThresholdError,
    minimum_cut_phase,
    stoer_wagner,
)
from puzzlegraph.search_graph.marking import BestCostTable, MarkSet
from puzzlegraph.utils.input import assert_single, read_lines, split_in_two

from . import geometry, mincut, search
from .search.bfs import bfs
from .search.dijkstra import UnreachableGoalError, dijkstra
from .search.longest_path import longest_path
from .search.topological_sort import CycleError, topological_sort
from .search_graph.search_graph import BreadthFirstSearchGraph, WeightedSearchGraph
