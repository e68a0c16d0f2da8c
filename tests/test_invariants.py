"""Check graph invariants after randomized sequences of operations.

After every step, the incrementally maintained state is compared to a
brute-force recomputation from the edge list.
"""

import random

import pytest

from dagkit import CycleDetected, DirectedAcyclicGraph, GraphError

OPERATIONS = {
    "add_vertex": 1,
    "add_edge": 2,
    "remove_edge": 2,
    "remove_vertex": 1,
}


def _state(graph):
    edges = frozenset((e.source, e.target) for e in graph.iter_edges())
    return frozenset(graph), edges, graph.roots


def _reachable(edges, start):
    seen = {start}
    frontier = [start]
    while frontier:
        current = frontier.pop()
        for f, t in edges:
            if f == current and t not in seen:
                seen.add(t)
                frontier.append(t)
    return seen


def _check(graph):
    values, edges, roots = _state(graph)

    for f, t in edges:
        assert f in values and t in values
        assert f not in _reachable(edges, t)

    for value in values:
        vertex = graph[value]
        for key, edge in vertex.outgoing.items():
            assert edge.source == value
            assert graph[edge.target].id == key
            assert graph[edge.target].incoming[vertex.id] is edge
        for key, edge in vertex.incoming.items():
            assert edge.target == value
            assert graph[edge.source].id == key
            assert graph[edge.source].outgoing[vertex.id] is edge

    assert roots == {v for v in values if all(t != v for _, t in edges)}

    for value in values:
        assert graph.get_descendants(value) == _reachable(edges, value)
        assert graph.get_ancestors(value) == {
            v for v in values if value in _reachable(edges, v)
        }


def _step(graph, rng, universe):
    op = rng.choice(list(OPERATIONS))
    args = [rng.choice(universe) for _ in range(OPERATIONS[op])]
    before = _state(graph)
    try:
        getattr(graph, op)(*args)
    except CycleDetected as exc:
        assert exc.target in exc.ancestors
        assert exc.source in graph.get_descendants(exc.target)
        assert _state(graph) == before
    except GraphError:
        assert _state(graph) == before


@pytest.mark.parametrize("seed", range(20))
def test_random_operations(seed):
    rng = random.Random(seed)
    universe = list(range(8))
    graph = DirectedAcyclicGraph()
    for _ in range(150):
        _step(graph, rng, universe)
        _check(graph)
