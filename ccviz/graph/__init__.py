"""Graph store, layout and edge input."""

from ccviz.graph.edges import (
    GraphSpec,
    build_store,
    clamp_node_count,
    load_graph_spec,
    parse_edge_text,
    spec_from_mapping,
)
from ccviz.graph.layout import place_nodes
from ccviz.graph.store import Edge, GraphStore, VertexSnapshot

__all__ = [
    "Edge",
    "GraphSpec",
    "GraphStore",
    "VertexSnapshot",
    "build_store",
    "clamp_node_count",
    "load_graph_spec",
    "parse_edge_text",
    "place_nodes",
    "spec_from_mapping",
]
