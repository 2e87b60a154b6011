"""
Undirected friendship graph backed by an adjacency list.

Representation:

    adj_list: dict[int, list[int]]

Every inserted edge is recorded in both endpoint lists. Parallel edges and
self-loops are kept as-is, so a node's degree is the number of entries in
its list (multigraph counting), not the number of distinct friends.
"""

from typing import Dict, Iterable, List, Tuple

import networkx as nx


Adjacency = Dict[int, List[int]]


class Graph:
    """
    Undirected graph over non-negative integer node ids.

    The graph is built once (create -> add_edge / add_node) and then only
    read by the analysis functions.
    """

    def __init__(self) -> None:
        self.adj_list: Adjacency = {}

    # -----------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------

    def add_node(self, u: int) -> None:
        """Register u as a node, with no neighbors if it is new."""
        self.adj_list.setdefault(u, [])

    def add_edge(self, u: int, v: int) -> None:
        """
        Add the undirected edge u-v.

        Not idempotent: adding the same edge twice raises both degrees twice.
        """
        self.adj_list.setdefault(u, []).append(v)
        self.adj_list.setdefault(v, []).append(u)

    # -----------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------

    def degree(self, node: int) -> int:
        neighbors = self.adj_list.get(node)
        return len(neighbors) if neighbors is not None else 0

    def num_nodes(self) -> int:
        return len(self.adj_list)

    def num_edges(self) -> int:
        return sum(len(neigh) for neigh in self.adj_list.values()) // 2

    def neighbors(self, node: int) -> Tuple[int, ...]:
        return tuple(self.adj_list.get(node, ()))

    def nodes(self) -> List[int]:
        return list(self.adj_list.keys())

    def __contains__(self, node: object) -> bool:
        return node in self.adj_list

    def __len__(self) -> int:
        return len(self.adj_list)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.num_nodes()}, edges={self.num_edges()})"

    # -----------------------------------------------------------------
    # Conversion
    # -----------------------------------------------------------------

    def to_networkx(self) -> nx.MultiGraph:
        """
        Convert to a networkx MultiGraph.

        Parallel edges and self-loops survive the conversion. Each edge is
        emitted once, from the endpoint that comes first in node order.
        """
        G = nx.MultiGraph()
        G.add_nodes_from(self.adj_list.keys())

        order = {u: i for i, u in enumerate(self.adj_list)}
        for u, neigh in self.adj_list.items():
            loops = 0
            for v in neigh:
                if v == u:
                    loops += 1
                elif order[u] < order[v]:
                    G.add_edge(u, v)
            # a self-loop is stored twice in u's own list
            for _ in range(loops // 2):
                G.add_edge(u, u)

        return G


def graph_from_edges(edges: Iterable[Tuple[int, int]]) -> Graph:
    """Build a Graph from (u, v) pairs, in order."""
    graph = Graph()
    for u, v in edges:
        graph.add_edge(u, v)
    return graph
