"""Tests for the edge-list loader."""

import logging
import sys

import pytest

from data_loader import EdgeListParseError, load_graph_from_file, parse_edge_line


class TestParseEdgeLine:
    """Single-line parsing."""

    def test_two_tokens(self) -> None:
        assert parse_edge_line("0 1\n") == (0, 1)

    def test_tabs_and_extra_whitespace(self) -> None:
        assert parse_edge_line("  12\t\t34  ") == (12, 34)

    @pytest.mark.parametrize("line", ["", "\n", "7", "1 2 3", "# source target weight"])
    def test_wrong_token_count_is_skipped(self, line) -> None:
        assert parse_edge_line(line) is None

    @pytest.mark.parametrize("line", ["a b", "1 x", "-1 2", "1.5 2", "+3 4"])
    def test_bad_integer_raises(self, line) -> None:
        with pytest.raises(EdgeListParseError):
            parse_edge_line(line)

    @pytest.mark.skipif(
        not hasattr(sys, "get_int_max_str_digits"),
        reason="interpreter has no int string conversion limit",
    )
    def test_overlong_digit_string_raises(self) -> None:
        with pytest.raises(EdgeListParseError):
            parse_edge_line("0 " + "9" * 5000)

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_edge_line("one two")


class TestLoadGraphFromFile:
    """Whole-file loading."""

    def test_loads_edges(self, tmp_path) -> None:
        path = tmp_path / "edges.txt"
        path.write_text("0 1\n0 2\n1 2\n2 3\n")

        graph = load_graph_from_file(str(path))

        assert graph.num_nodes() == 4
        assert graph.degree(2) == 3
        assert graph.neighbors(0) == (1, 2)

    def test_skips_malformed_lines(self, tmp_path) -> None:
        path = tmp_path / "edges.txt"
        path.write_text("# header line\n0 1\n\n1 2 3\n2 3\n\n")

        graph = load_graph_from_file(str(path))

        assert graph.num_nodes() == 4
        assert graph.num_edges() == 2
        assert graph.degree(1) == 1

    def test_duplicate_lines_kept(self, tmp_path) -> None:
        path = tmp_path / "edges.txt"
        path.write_text("1 2\n1 2\n")

        graph = load_graph_from_file(str(path))
        assert graph.degree(1) == 2

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "edges.txt"
        path.write_text("")
        assert load_graph_from_file(str(path)).num_nodes() == 0

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_graph_from_file(str(tmp_path / "missing.txt"))

    def test_parse_error_reports_line(self, tmp_path) -> None:
        path = tmp_path / "edges.txt"
        path.write_text("0 1\n\n2 bad\n")

        with pytest.raises(EdgeListParseError) as excinfo:
            load_graph_from_file(str(path))

        assert excinfo.value.lineno == 3
        assert excinfo.value.path == str(path)
        assert ":3:" in str(excinfo.value)

    def test_invalid_utf8_reports_line(self, tmp_path) -> None:
        path = tmp_path / "edges.txt"
        path.write_bytes(b"0 1\n\xff\xfe 2\n")

        with pytest.raises(EdgeListParseError) as excinfo:
            load_graph_from_file(str(path))

        assert excinfo.value.lineno == 2

    def test_crlf_line_endings(self, tmp_path) -> None:
        path = tmp_path / "edges.txt"
        path.write_bytes(b"0 1\r\n1 2\r\n")

        graph = load_graph_from_file(str(path))
        assert graph.num_edges() == 2

    def test_logs_summary(self, tmp_path, caplog) -> None:
        path = tmp_path / "edges.txt"
        path.write_text("0 1\nnoise\n")

        with caplog.at_level(logging.INFO, logger="data_loader"):
            load_graph_from_file(str(path))

        assert "1 lines skipped" in caplog.text
