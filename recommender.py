"""
Jaccard neighborhood similarity between users.

    Jaccard(a, b) = |N(a) ∩ N(b)| / |N(a) ∪ N(b)|

Neighbor lists are treated as sets here (parallel edges collapse), even
though the graph itself counts them for degree.

Queries:
    - top-k most similar users to a target
    - the most similar pair of users in the whole network (O(n^2) pairs)
"""

from typing import Dict, List, Optional, Set, Tuple

from network import Graph


# ------------------------------------------------------------
# Pair score
# ------------------------------------------------------------

def _jaccard(A: Set[int], B: Set[int]) -> float:
    if not (A or B):
        return 0.0
    return len(A & B) / len(A | B)


def jaccard_similarity(graph: Graph, a: int, b: int) -> float:
    adj = graph.adj_list
    if a not in adj or b not in adj:
        return 0.0
    return _jaccard(set(adj[a]), set(adj[b]))


# ------------------------------------------------------------
# Queries
# ------------------------------------------------------------

def top_jaccard_similarities(graph: Graph, target: int, k: int) -> List[Tuple[int, float]]:
    """
    The k users most similar to target, best first.

    Every other node is a candidate (friends included). Equal scores keep
    node order. Returns fewer than k entries on small graphs.
    """
    if k < 0:
        raise ValueError("k must be non-negative")

    scores = [
        (v, jaccard_similarity(graph, target, v))
        for v in graph.adj_list
        if v != target
    ]
    return sorted(scores, key=lambda x: x[1], reverse=True)[:k]


def most_similar_pair(graph: Graph) -> Optional[Tuple[int, int, float]]:
    """
    The pair of distinct users with the highest Jaccard similarity.

    Pairs are visited in node order and only a strictly higher score
    replaces the current best, so the first pair seen wins ties.

    Returns:
        (a, b, score), or None when the graph has fewer than two nodes.
    """
    nodes = graph.nodes()
    if len(nodes) < 2:
        return None

    neighbor_sets: Dict[int, Set[int]] = {u: set(neigh) for u, neigh in graph.adj_list.items()}

    best_pair = (nodes[0], nodes[1])
    best_score = _jaccard(neighbor_sets[nodes[0]], neighbor_sets[nodes[1]])

    for i in range(len(nodes)):
        a = nodes[i]
        A = neighbor_sets[a]
        for j in range(i + 1, len(nodes)):
            b = nodes[j]
            score = _jaccard(A, neighbor_sets[b])
            if score > best_score:
                best_score = score
                best_pair = (a, b)

    return best_pair[0], best_pair[1], best_score


# ------------------------------------------------------------
# Display
# ------------------------------------------------------------

def print_top_similarities(graph: Graph, target: int, k: int) -> None:
    print(f"\nTop {k} users most similar to User {target} (based on Jaccard similarity):")
    top = top_jaccard_similarities(graph, target, k)
    if not top:
        print("No other users in the graph.")
        return
    for v, score in top:
        print(f"User {v:>4} has similarity {score:.3f}")


def print_most_similar_pair(graph: Graph) -> None:
    result = most_similar_pair(graph)
    if result is None:
        print("No pair of users found (the graph has fewer than two users).")
        return
    a, b, score = result
    print(
        "The most similar pair of users in the entire network "
        f"(with most overlap in friends) is User {a} & User {b} "
        f"with similarity {score:.3f}"
    )
