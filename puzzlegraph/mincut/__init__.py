from .contraction_graph import (
    CompositeNode,
    ContractionGraph,
    node_leaves,
    node_size,
    parse_adjacency_list,
)
from .stoer_wagner import MinCut, NoCutBelowThresholdError, minimum_cut_phase, stoer_wagner
