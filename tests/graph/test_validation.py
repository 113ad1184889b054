"""Tests for the Avatar Graph invariant checks."""

import pytest

from avatargraph import (
    AvatarGraph,
    Invalid,
    NoReachableNodes,
    InvalidNode,
    UnknownCoreCandidate,
    Valid,
)
from avatargraph.config import CheckConfig
from avatargraph.graph import (
    check_avatar_connectivity,
    check_non_contractability,
    check_universal_reachability,
)


def _build_star() -> AvatarGraph:
    graph = AvatarGraph()
    c, x, y, z = (graph.add_node() for _ in range(4))
    graph.add_edge(z, x)
    graph.add_edge(z, y)
    graph.add_edge(x, c)
    graph.add_edge(y, c)
    return graph


def _build_same_level_pair() -> AvatarGraph:
    """p (3) and q (4) share level 2 and p points at q."""
    graph = AvatarGraph()
    core, x, y, p, q = (graph.add_node() for _ in range(5))
    graph.add_edge(x, core)
    graph.add_edge(y, core)
    graph.add_edge(p, x)
    graph.add_edge(p, y)
    graph.add_edge(q, x)
    graph.add_edge(q, y)
    graph.add_edge(p, q)
    return graph


def test_two_node_graph_is_valid() -> None:
    graph = AvatarGraph()
    a, b = graph.add_node(), graph.add_node()
    graph.add_edge(b, a)

    report = graph.validate(a)

    assert report.highest_avatar == b
    assert report.non_contractability == Valid()
    assert report.avatar_connectivity == Valid()
    assert report.universal_reachability == Valid()
    assert report.is_valid


def test_star_is_valid() -> None:
    graph = _build_star()
    distances = graph.avatar_distances(0)

    report = graph.validate(0, distances)

    assert report.highest_avatar == 3
    assert report.is_valid
    assert set(report.checks()) == {
        "non_contractability",
        "avatar_connectivity",
        "universal_reachability",
    }


def test_single_child_avatar_is_contractible() -> None:
    graph = AvatarGraph()
    c, x, w = graph.add_node(), graph.add_node(), graph.add_node()
    graph.add_edge(x, c)
    graph.add_edge(w, x)

    report = graph.validate(c)

    assert report.non_contractability == Invalid((w,))
    assert report.avatar_connectivity.is_valid
    assert report.universal_reachability.is_valid
    assert not report.is_valid


def test_core_child_does_not_count_for_contractability() -> None:
    graph = AvatarGraph()
    c, x, y, a, v = (graph.add_node() for _ in range(5))
    graph.add_edge(x, c)
    graph.add_edge(y, c)
    graph.add_edge(a, c)
    graph.add_edge(a, x)
    graph.add_edge(a, y)
    graph.add_edge(v, c)
    graph.add_edge(v, a)

    distances = graph.avatar_distances(c)

    assert (distances[a], distances[v]) == (2, 2)
    assert check_non_contractability(graph, c, distances) == Invalid((v,))


def test_one_avatars_are_exempt() -> None:
    graph = AvatarGraph()
    c, x, z = graph.add_node(), graph.add_node(), graph.add_node()
    graph.add_edge(x, c)
    graph.add_edge(z, c)
    graph.add_edge(z, x)

    distances = graph.avatar_distances(c)

    assert distances[z] == 1
    assert check_non_contractability(graph, c, distances).is_valid
    assert check_avatar_connectivity(graph, c, distances) == Invalid(((z, x),))


def test_duplicate_children_count_once() -> None:
    graph = AvatarGraph()
    c, x, w = graph.add_node(), graph.add_node(), graph.add_node()
    graph.add_edge(x, c)
    graph.add_edge(w, x)
    graph.add_edge(w, x)

    assert check_non_contractability(graph, c) == Invalid((w,))


def test_same_level_child_breaks_connectivity() -> None:
    graph = _build_same_level_pair()
    distances = graph.avatar_distances(0)
    assert distances[3] == distances[4] == 2

    result = check_avatar_connectivity(graph, 0, distances)

    assert result == Invalid(((3, 4),))


def test_one_avatars_may_not_point_at_each_other() -> None:
    graph = AvatarGraph()
    c, x, y, z = (graph.add_node() for _ in range(4))
    graph.add_edge(x, c)
    graph.add_edge(y, c)
    graph.add_edge(y, x)
    graph.add_edge(z, x)
    graph.add_edge(z, y)

    distances = graph.avatar_distances(c)
    report = graph.validate(c, distances)

    assert distances == {c: 0, x: 1, y: 1, z: 2}
    assert report.non_contractability.is_valid
    assert report.avatar_connectivity == Invalid(((y, x),))
    assert not report.is_valid
    assert not graph.is_avatar_graph(c)


def test_one_avatar_may_point_up_a_level() -> None:
    graph = AvatarGraph()
    c, x, y, z = (graph.add_node() for _ in range(4))
    graph.add_edge(x, c)
    graph.add_edge(y, c)
    graph.add_edge(z, x)
    graph.add_edge(z, y)
    graph.add_edge(x, z)

    distances = graph.avatar_distances(c)

    assert (distances[x], distances[z]) == (1, 2)
    assert check_avatar_connectivity(graph, c, distances).is_valid


def test_offenders_follow_node_order_for_any_distance_map() -> None:
    graph = AvatarGraph()
    c, x, y, w = (graph.add_node() for _ in range(4))
    graph.add_edge(x, c)
    graph.add_edge(y, c)
    graph.add_edge(y, x)
    graph.add_edge(w, c)
    graph.add_edge(w, x)

    distances = graph.avatar_distances(c)
    reversed_distances = dict(reversed(list(distances.items())))

    assert check_avatar_connectivity(graph, c, reversed_distances) == Invalid(
        ((y, x), (w, x))
    )

    graph = AvatarGraph()
    c, x, v, w = (graph.add_node() for _ in range(4))
    graph.add_edge(x, c)
    graph.add_edge(v, x)
    graph.add_edge(w, x)

    distances = graph.avatar_distances(c)
    reversed_distances = dict(reversed(list(distances.items())))

    assert check_non_contractability(graph, c, reversed_distances) == Invalid((v, w))


def test_siblings_may_share_a_level() -> None:
    graph = _build_star()

    assert check_avatar_connectivity(graph, 0).is_valid


def test_unreachable_node_fails_reachability() -> None:
    graph = AvatarGraph()
    c, b, isolated = graph.add_node(), graph.add_node(), graph.add_node()
    graph.add_edge(b, c)

    distances = graph.avatar_distances(c)
    result = check_universal_reachability(graph, c, distances)

    assert isolated not in distances
    assert result == Invalid((isolated,))


def test_node_off_the_descent_fails_reachability() -> None:
    graph = _build_same_level_pair()

    report = graph.validate(0)

    assert report.highest_avatar == 3
    assert report.universal_reachability == Invalid((4,))


def test_validate_requires_avatars() -> None:
    graph = AvatarGraph()
    core = graph.add_node()

    with pytest.raises(NoReachableNodes):
        graph.validate(core)
    with pytest.raises(UnknownCoreCandidate):
        graph.validate(5)


def test_supplied_distances_must_place_the_core_at_zero() -> None:
    graph = AvatarGraph()
    c, b = graph.add_node(), graph.add_node()
    graph.add_edge(b, c)

    with pytest.raises(InvalidNode):
        graph.validate(c, {b: 1})
    with pytest.raises(InvalidNode):
        graph.validate(c, {c: 1, b: 1})
    with pytest.raises(InvalidNode):
        check_universal_reachability(graph, c, {b: 1}, highest=b)


def test_validation_does_not_mutate_graph() -> None:
    graph = _build_star()
    before = (graph.nodes(), graph.edges())

    graph.validate(0)
    graph.is_avatar_graph(0)

    assert (graph.nodes(), graph.edges()) == before


def test_is_avatar_graph_as_graph_grows() -> None:
    graph = AvatarGraph()
    a = graph.add_node()
    b = graph.add_node()
    assert not graph.is_avatar_graph(a)

    graph.add_edge(b, a)
    assert graph.is_avatar_graph(a)

    c = graph.add_node()
    assert not graph.is_avatar_graph(a)

    graph.add_edge(c, a)
    assert not graph.is_avatar_graph(a)

    d = graph.add_node()
    graph.add_edge(d, c)
    assert not graph.is_avatar_graph(a)

    graph.add_edge(d, b)
    assert graph.is_avatar_graph(a)


def test_is_avatar_graph_config_relaxations() -> None:
    graph = AvatarGraph()
    core, b, isolated = graph.add_node(), graph.add_node(), graph.add_node()
    graph.add_edge(b, core)

    assert not graph.is_avatar_graph(core)
    assert graph.is_avatar_graph(core, CheckConfig(require_connected=False))

    # A second maximum can never be reached from the chosen highest avatar.
    c = graph.add_node()
    graph.add_edge(c, core)
    relaxed = CheckConfig(require_connected=False, require_unique_maximum=False)
    assert not graph.is_avatar_graph(core, relaxed)
    assert isolated not in graph.avatar_distances(core)


def test_single_node_is_never_an_avatar_graph() -> None:
    graph = AvatarGraph()
    core = graph.add_node()

    assert not graph.is_avatar_graph(core)
