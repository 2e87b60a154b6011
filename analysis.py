"""
Structural statistics for a loaded friendship graph.

All algorithms are implemented from scratch over network.Graph and never
modify it:

    - BFS shortest paths from a single source
    - average shortest-path length from a source
    - degree distribution + summary statistics
    - connected components
    - text histogram, CSV export and plot of the degree distribution
"""

import csv
import logging
from collections import deque, defaultdict
from math import inf
from typing import Dict, List, Set

import matplotlib.pyplot as plt
import numpy as np

from network import Graph

log = logging.getLogger(__name__)

# Distance value for nodes with no path from the source.
UNREACHABLE = inf

HISTOGRAM_WIDTH = 50


class UnknownNodeError(ValueError):
    """Raised when a traversal starts from a node that is not in the graph."""

    def __init__(self, node: int):
        super().__init__(f"User {node} not in graph")
        self.node = node


class NonContiguousNodeError(ValueError):
    """Raised when a node id cannot index a distance vector of num_nodes() entries."""

    def __init__(self, node: int, num_nodes: int):
        super().__init__(
            f"User {node} has no slot in a distance vector of {num_nodes} users "
            "(node ids must be 0..n-1); use bfs_distances instead"
        )
        self.node = node
        self.num_nodes = num_nodes


# ---------------------------------------------------------------------
# Shortest paths (BFS)
# ---------------------------------------------------------------------

def bfs_distances(graph: Graph, start: int) -> Dict[int, int]:
    """
    Hop-count distance from start to every reachable node.

    Neighbors are explored in the order they appear in each adjacency list.
    """
    if start not in graph:
        raise UnknownNodeError(start)

    adj = graph.adj_list
    dist = {start: 0}
    visited: Set[int] = {start}
    q = deque([start])

    while q:
        u = q.popleft()
        for v in adj[u]:
            if v not in visited:
                visited.add(v)
                dist[v] = dist[u] + 1
                q.append(v)

    return dist


def bfs_shortest_paths(graph: Graph, start: int) -> List[float]:
    """
    Distance vector from start, indexed by node id.

    Entry i is the number of edges on a shortest path from start to node i,
    or UNREACHABLE. The vector has num_nodes() entries, so node ids must be
    0..n-1 for every node reachable from start.

    Raises:
        UnknownNodeError: start is not a node of the graph.
        NonContiguousNodeError: a reachable node id has no slot in the vector.
    """
    dist = bfs_distances(graph, start)

    size = graph.num_nodes()
    for v in dist:
        if v >= size:
            raise NonContiguousNodeError(v, size)

    distances: List[float] = [UNREACHABLE] * size
    for v, d in dist.items():
        distances[v] = d

    return distances


def average_shortest_path_length(graph: Graph, start: int) -> float:
    """
    Mean distance from start to every other reachable node.

    Returns 0.0 when no other node is reachable, which covers the empty
    graph and a start node that is not in the graph.
    """
    if start not in graph:
        return 0.0

    dist = bfs_distances(graph, start)
    reachable = [d for v, d in dist.items() if v != start]
    if not reachable:
        return 0.0

    return sum(reachable) / len(reachable)


# ---------------------------------------------------------------------
# Connectivity
# ---------------------------------------------------------------------

def compute_connectivity(graph: Graph) -> Dict[str, object]:
    """
    Connected components and basic connectivity stats.

    Returns:
        {
            "num_components": int,
            "component_sizes": List[int] (sorted desc),
            "giant_component_size": int,
            "isolated_nodes": int,
        }
    """
    visited: Set[int] = set()
    sizes: List[int] = []

    for node in graph.adj_list:
        if node in visited:
            continue
        comp = bfs_distances(graph, node)
        visited.update(comp)
        sizes.append(len(comp))

    sizes.sort(reverse=True)

    return {
        "num_components": len(sizes),
        "component_sizes": sizes,
        "giant_component_size": sizes[0] if sizes else 0,
        "isolated_nodes": sum(1 for s in sizes if s == 1),
    }


# ---------------------------------------------------------------------
# Degree distribution / basic stats
# ---------------------------------------------------------------------

def compute_degree_distribution(graph: Graph) -> Dict[int, int]:
    """Map each degree value to the number of nodes with that degree."""
    freq: Dict[int, int] = defaultdict(int)
    for neighbors in graph.adj_list.values():
        freq[len(neighbors)] += 1

    return dict(sorted(freq.items()))


def degree_statistics(graph: Graph) -> Dict[str, float]:
    degrees = np.fromiter(
        (len(neigh) for neigh in graph.adj_list.values()),
        dtype=np.int64,
        count=graph.num_nodes(),
    )
    if degrees.size == 0:
        return {
            "avg_degree": 0.0,
            "min_degree": 0,
            "max_degree": 0,
            "median_degree": 0.0,
            "variance": 0.0,
        }

    return {
        "avg_degree": float(degrees.mean()),
        "min_degree": int(degrees.min()),
        "max_degree": int(degrees.max()),
        "median_degree": float(np.median(degrees)),
        "variance": float(degrees.var()),
    }


def format_degree_histogram(
    distribution: Dict[int, int],
    width: int = HISTOGRAM_WIDTH,
) -> List[str]:
    """
    Render a degree distribution as text bars made of '*'.

    One line per degree, ascending:  "<degree:>3>: <count>  <bar>".
    Bars are scaled so the most common degree gets `width` characters;
    every bar is at least one character long.
    """
    if not distribution:
        return []

    max_count = max(distribution.values())
    lines = []
    for degree, count in sorted(distribution.items()):
        # half-up rounding
        bar_len = max(1, int(width * count / max_count + 0.5))
        lines.append(f"{degree:>3}: {count}  {'*' * bar_len}")

    return lines


def print_degree_distribution(graph: Graph) -> None:
    for line in format_degree_histogram(compute_degree_distribution(graph)):
        print(line)


# ---------------------------------------------------------------------
# CSV export + plotting
# ---------------------------------------------------------------------

def export_degree_distribution_csv(path: str, distribution: Dict[int, int]) -> None:
    """Write the distribution as `degree,count` rows, degrees ascending."""
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["degree", "count"])
        for degree, count in sorted(distribution.items()):
            writer.writerow([degree, count])
    print(f"Saved degree distribution to {path}")


def plot_degree_distribution(
    distribution: Dict[int, int],
    out_path: str,
    log_scale: bool = True,
) -> None:
    """
    Bar chart of the degree distribution.

    With log_scale the count axis is logarithmic, which suits the heavy
    tail of real friendship networks.
    """
    degrees = sorted(distribution)
    counts = [distribution[d] for d in degrees]

    plt.figure(figsize=(8, 4))
    plt.bar(degrees, counts, width=1.0)
    if log_scale and counts:
        plt.yscale("log")
    plt.xlabel("Degree (number of friends)")
    plt.ylabel("Number of users")
    plt.title("Friendship degree distribution")
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()
    log.info("Degree plot written to %s", out_path)
    print(f"Saved degree distribution plot to {out_path}")
