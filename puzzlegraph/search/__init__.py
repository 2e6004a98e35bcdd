from .bfs import bfs
from .dijkstra import UnreachableGoalError, dijkstra
from .longest_path import longest_path
from .topological_sort import CycleError, topological_sort
