"""Tests for tagged mutation results and fail-soft behaviour."""
import logging

import pytest


class TestOpResult:
    def test_success_is_truthy(self, lib):
        result = lib.OpResult(True)
        assert result
        assert result.reason is None

    def test_failure_is_falsy(self, lib):
        result = lib.OpResult(False, lib.EDGE_EXISTS)
        assert not result
        assert result.reason == "edge_exists"


class TestReasons:
    def test_add_vertex_reasons(self, lib, undirected):
        assert undirected.try_add_vertex("A").success is True
        assert undirected.try_add_vertex("A").reason == lib.VERTEX_EXISTS
        assert undirected.try_add_vertex("  ").reason == lib.INVALID_NAME
        assert undirected.try_add_vertex(None).reason == lib.INVALID_NAME

    def test_add_edge_reasons(self, lib, directed):
        assert directed.try_add_edge("A", "B")
        assert directed.try_add_edge("A", "B").reason == lib.EDGE_EXISTS
        assert directed.try_add_edge("", "B").reason == lib.INVALID_NAME

    def test_remove_edge_reasons(self, lib, directed):
        directed.add_edge("A", "B")
        assert directed.try_remove_edge("A", "Z").reason == lib.VERTEX_NOT_FOUND
        assert directed.try_remove_edge("B", "A").reason == lib.EDGE_NOT_FOUND
        assert directed.try_remove_edge("A", "B").success is True

    def test_remove_vertex_reasons(self, lib, directed):
        directed.add_vertex("A")
        assert directed.try_remove_vertex("Z").reason == lib.VERTEX_NOT_FOUND
        assert directed.try_remove_vertex("A").success is True


class TestFailSoft:
    @pytest.mark.parametrize("bad", [None, "", "   ", "missing"])
    def test_no_operation_raises(self, seeded_directed, bad):
        g = seeded_directed
        before = g.edges()
        g.remove_vertex(bad)
        g.remove_edge(bad, "A")
        g.remove_edge("A", bad)
        assert g.neighbors(bad) == ()
        assert g.bfs(bad) == []
        assert g.dfs(bad) == []
        assert g.shortest_path(bad, "A") == []
        assert g.shortest_path("A", bad) == []
        assert g.edges() == before

    def test_rejection_is_logged(self, undirected, caplog):
        undirected.add_vertex("A")
        with caplog.at_level(logging.DEBUG, logger="adjgraph.graph"):
            undirected.add_vertex("A")
        assert any("vertex_exists" in record.getMessage() for record in caplog.records)
