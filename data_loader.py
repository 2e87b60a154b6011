"""
Edge-list loader.

Input format: plain text, one edge per line, two whitespace-separated
non-negative integers ("u v"). Lines that do not split into exactly two
tokens (blank lines, headers, comments) are skipped.
"""

import logging
from typing import Optional, Tuple

from network import Graph

log = logging.getLogger(__name__)


class EdgeListParseError(ValueError):
    """A two-token line whose tokens are not non-negative integers."""

    def __init__(self, message: str, path: Optional[str] = None, lineno: Optional[int] = None):
        if path is not None and lineno is not None:
            message = f"{path}:{lineno}: {message}"
        super().__init__(message)
        self.path = path
        self.lineno = lineno


def _parse_node_id(token: str) -> int:
    # int() would also accept "+3", "-1" or "1_000"
    if not (token.isascii() and token.isdigit()):
        raise EdgeListParseError(f"invalid node id {token!r}")
    try:
        return int(token)
    except ValueError as exc:
        # digit strings past the interpreter's int conversion limit
        raise EdgeListParseError(f"node id too long ({len(token)} digits)") from exc


def parse_edge_line(line: str) -> Optional[Tuple[int, int]]:
    """
    Parse one edge-list line.

    Returns:
        (u, v) for a two-token line, None for any other token count.

    Raises:
        EdgeListParseError: a token is not a non-negative integer.
    """
    parts = line.split()
    if len(parts) != 2:
        return None
    return _parse_node_id(parts[0]), _parse_node_id(parts[1])


def load_graph_from_file(path: str) -> Graph:
    """
    Load an undirected graph from an edge-list file.

    Args:
        path: Path to the edge list (e.g. facebook_combined.txt).

    Returns:
        Graph with every parsed edge added, in file order.

    Raises:
        FileNotFoundError / OSError: the file cannot be opened or read.
        EdgeListParseError: a two-token line holds a non-integer token, or a
            line is not valid UTF-8.
    """
    graph = Graph()
    skipped = 0

    with open(path, "rb") as f:
        for lineno, raw in enumerate(f, start=1):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise EdgeListParseError(
                    f"line is not valid UTF-8 ({exc.reason})", path=path, lineno=lineno
                ) from exc

            try:
                edge = parse_edge_line(line)
            except EdgeListParseError as exc:
                raise EdgeListParseError(str(exc), path=path, lineno=lineno) from exc

            if edge is None:
                skipped += 1
                log.debug("Skipping line %d of %s: %r", lineno, path, line.rstrip("\n"))
                continue

            graph.add_edge(*edge)

    log.info(
        "Loaded %s: %d nodes, %d edges (%d lines skipped)",
        path,
        graph.num_nodes(),
        graph.num_edges(),
        skipped,
    )
    return graph
