"""
Friendship statistics for the Facebook ego-network edge list.

Loads facebook_combined.txt (one "u v" edge per line) and prints:
    - number of users and the degree of the chosen user
    - average shortest-path length from that user
    - the degree distribution as a '*' histogram
    - the top-k users most similar to that user (Jaccard)
    - the most similar pair of users in the network
    - connectivity and degree summary statistics

Run with:
    python real_fb_analysis.py
    python real_fb_analysis.py --edges other.txt --user 10 --top-k 3 --out-plot degrees.png
"""

import argparse
import logging
import sys
from typing import List, Optional

from analysis import (
    average_shortest_path_length,
    compute_connectivity,
    compute_degree_distribution,
    degree_statistics,
    export_degree_distribution_csv,
    plot_degree_distribution,
    print_degree_distribution,
)
from data_loader import EdgeListParseError, load_graph_from_file
from recommender import print_most_similar_pair, print_top_similarities


DATA_FILE = "facebook_combined.txt"
DEFAULT_USER = 0
DEFAULT_TOP_K = 5


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Friendship graph statistics for an edge list")
    parser.add_argument("--edges", type=str, default=DATA_FILE, help="Path to the edge-list file")
    parser.add_argument("--user", type=int, default=DEFAULT_USER, help="User id to report on")
    parser.add_argument("--top-k", type=int, default=DEFAULT_TOP_K, help="Number of similar users to list")
    parser.add_argument("--out-csv", type=str, help="Path to CSV for exporting the degree distribution")
    parser.add_argument("--out-plot", type=str, help="Path to PNG for the degree distribution plot")
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG-level logging")
    args = parser.parse_args(argv)
    if args.top_k < 0:
        parser.error("--top-k must be non-negative")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        graph = load_graph_from_file(args.edges)
    except OSError as exc:
        print(f"Error: cannot read edge list {args.edges}: {exc}", file=sys.stderr)
        return 1
    except EdgeListParseError as exc:
        print(f"Error: malformed edge list: {exc}", file=sys.stderr)
        return 1

    user = args.user

    print(f"Number of users (nodes): {graph.num_nodes()}")
    print(f"User {user} has {graph.degree(user)} direct friends")

    avg_path_length = average_shortest_path_length(graph, user)
    print(f"On average, User {user} is {avg_path_length:.2f} connections away from other users in the graph")

    print("\nFriendship degree distribution - number of users with X friends")
    print_degree_distribution(graph)

    print_top_similarities(graph, user, args.top_k)

    print_most_similar_pair(graph)

    connectivity = compute_connectivity(graph)
    print("\n=== CONNECTIVITY ===")
    print("Components:", connectivity["num_components"])
    print("Giant component size:", connectivity["giant_component_size"])
    print("Isolated users:", connectivity["isolated_nodes"])

    deg_stats = degree_statistics(graph)
    print("\n=== DEGREE STATISTICS ===")
    print(f"Average degree: {deg_stats['avg_degree']:.2f}")
    print(f"Median degree: {deg_stats['median_degree']:.1f}")
    print("Min degree:", deg_stats["min_degree"])
    print("Max degree:", deg_stats["max_degree"])
    print(f"Variance: {deg_stats['variance']:.2f}")

    if args.out_csv or args.out_plot:
        distribution = compute_degree_distribution(graph)
        if args.out_csv:
            export_degree_distribution_csv(args.out_csv, distribution)
        if args.out_plot:
            plot_degree_distribution(distribution, args.out_plot)

    return 0


if __name__ == "__main__":
    sys.exit(main())
