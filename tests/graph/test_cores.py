"""Tests for core candidate discovery."""

import pytest

from avatargraph import AvatarGraph, UnknownCoreCandidate
from avatargraph.config import CheckConfig


def _build_square(bidirectional: bool) -> AvatarGraph:
    graph = AvatarGraph()
    a, b, c, d = (graph.add_node() for _ in range(4))
    for u, v in ((a, b), (a, c), (b, d), (c, d)):
        graph.add_edge(v, u)
        if bidirectional:
            graph.add_edge(u, v)
    return graph


def _build_triangle() -> AvatarGraph:
    graph = AvatarGraph()
    a, b, c = (graph.add_node() for _ in range(3))
    graph.add_edge(a, b)
    graph.add_edge(b, c)
    graph.add_edge(c, a)
    return graph


def test_every_corner_of_a_symmetric_square_is_a_core() -> None:
    graph = _build_square(bidirectional=True)

    assert graph.corify() == {0: 3, 1: 2, 2: 1, 3: 0}


def test_directed_square_has_a_single_core() -> None:
    graph = _build_square(bidirectional=False)

    assert graph.corify() == {0: 3}


def test_triangle_has_no_core() -> None:
    assert _build_triangle().corify() == {}


def test_corify_restricted_to_configured_candidates() -> None:
    graph = _build_square(bidirectional=True)

    assert graph.corify(CheckConfig(cores=[2, 1])) == {1: 2, 2: 1}

    with pytest.raises(UnknownCoreCandidate):
        graph.corify(CheckConfig(cores=[8]))


def test_corify_leaves_graph_untouched() -> None:
    graph = _build_square(bidirectional=True)
    before = (graph.nodes(), graph.edges(), [graph.node_attributes(n) for n in graph.nodes()])

    graph.corify()

    assert (graph.nodes(), graph.edges(), [graph.node_attributes(n) for n in graph.nodes()]) == before
