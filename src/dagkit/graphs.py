from __future__ import annotations

import itertools
import operator
from typing import Callable, Generic, Iterator, Mapping

from .exceptions import (
    CycleDetected,
    DuplicateEdge,
    DuplicateVertex,
    EdgeNotFound,
    VertexNotFound,
)
from .reporters import BaseReporter
from .structs import VT, Edge, Vertex

_graph_keys = itertools.count()

_parents = operator.attrgetter("incoming")
_children = operator.attrgetter("outgoing")


def _iter_reachable(
    vertices: Mapping[int, Vertex[VT]],
    start: Vertex[VT],
    neighbours: Callable[[Vertex[VT]], Mapping[int, Edge[VT]]],
) -> Iterator[Vertex[VT]]:
    """Walk the graph from a vertex, yielding each reachable vertex once.

    `neighbours` returns the adjacency to follow, `_parents` to walk towards
    ancestors or `_children` towards descendants. The walk uses an explicit
    stack, so its depth is not limited by the interpreter's recursion limit.
    Since the graph is always acyclic, the visited set only serves to avoid
    walking shared ancestors (or descendants) more than once.
    """
    visited = {start.id}
    stack = [start]
    while stack:
        vertex = stack.pop()
        yield vertex
        for key in neighbours(vertex):
            if key in visited:
                continue
            visited.add(key)
            stack.append(vertices[key])


class DirectedAcyclicGraph(Generic[VT]):
    """A mutable graph with directed edges that can never form a cycle.

    Vertices are identified by arbitrary hashable values. Any edge that would
    close a cycle is rejected when added, so the graph is acyclic at every
    point in time. The set of roots (vertices without incoming edges) is kept
    up to date on every mutation.

    Every mutating method checks all of its preconditions before touching any
    state. If it raises, the graph is left exactly as it was.

    .. note::
        Instances are not thread-safe. Wrap access in a lock if the graph is
        shared between threads.
    """

    def __init__(self, reporter: BaseReporter[VT] | None = None) -> None:
        if reporter is None:
            reporter = BaseReporter()
        self.reporter = reporter
        self._key = next(_graph_keys)
        self._ids = itertools.count()
        self._vertices: dict[int, Vertex[VT]] = {}  # <id> -> Vertex
        self._index: dict[VT, int] = {}  # <value> -> <id>
        self._roots: dict[int, Vertex[VT]] = {}  # <id> -> Vertex

    def __repr__(self) -> str:
        return "<{} with {} vertices, {} edges>".format(
            type(self).__name__,
            len(self._vertices),
            sum(len(v.outgoing) for v in self._vertices.values()),
        )

    def __iter__(self) -> Iterator[VT]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, value: object) -> bool:
        return value in self._index

    def __getitem__(self, value: VT) -> Vertex[VT]:
        return self.get_vertex(value)

    @property
    def roots(self) -> frozenset[VT]:
        """Values of all vertices that have no incoming edges."""
        return frozenset(v.value for v in self._roots.values())

    def is_root(self, value: VT) -> bool:
        return self.get_vertex(value).id in self._roots

    def get_vertex(self, value: VT) -> Vertex[VT]:
        """Look up the vertex record of a value.

        :raises VertexNotFound: if the value is not in the graph.
        """
        try:
            key = self._index[value]
        except KeyError:
            raise VertexNotFound(value) from None
        return self._vertices[key]

    def copy(self) -> DirectedAcyclicGraph[VT]:
        """Return a copy of this graph sharing the same reporter.

        The copy owns new vertex and edge records, so mutating either graph
        does not affect the other. Edges of the copy never compare equal to
        edges of this graph. The reporter is not notified.
        """
        other = type(self)(self.reporter)
        for vertex in self._vertices.values():
            other._insert(vertex.value)
        for edge in self.iter_edges():
            other._connect(
                other.get_vertex(edge.source),
                other.get_vertex(edge.target),
            )
        return other

    def _insert(self, value: VT) -> Vertex[VT]:
        vertex = Vertex(value, next(self._ids))
        self._vertices[vertex.id] = vertex
        self._index[value] = vertex.id
        self._roots[vertex.id] = vertex
        return vertex

    def _connect(self, source: Vertex[VT], target: Vertex[VT]) -> Edge[VT]:
        edge = Edge(self._key, source.value, target.value)
        source._outgoing[target.id] = edge
        target._incoming[source.id] = edge
        self._roots.pop(target.id, None)
        return edge

    def _disconnect(self, source: Vertex[VT], target: Vertex[VT]) -> Edge[VT]:
        edge = source._outgoing.pop(target.id)
        del target._incoming[source.id]
        if not target._incoming:
            self._roots[target.id] = target
        return edge

    def add_vertex(self, value: VT) -> Vertex[VT]:
        """Add a new, unconnected vertex to the graph.

        The new vertex is a root until an edge pointing to it is added.

        :raises DuplicateVertex: if the value is already in the graph.
        """
        if value in self._index:
            raise DuplicateVertex(value)
        vertex = self._insert(value)
        self.reporter.adding_vertex(vertex)
        return vertex

    def remove_vertex(self, value: VT) -> Vertex[VT]:
        """Remove a vertex from the graph, disconnecting all edges from/to it.

        Children left without incoming edges become roots. The detached
        vertex record is returned, with its adjacency emptied.

        :raises VertexNotFound: if the value is not in the graph.
        """
        vertex = self.get_vertex(value)
        for key in list(vertex.outgoing):
            edge = self._disconnect(vertex, self._vertices[key])
            self.reporter.removing_edge(edge)
        for key in list(vertex.incoming):
            edge = self._disconnect(self._vertices[key], vertex)
            self.reporter.removing_edge(edge)

        # With every incoming edge gone, the vertex itself is a root.
        del self._roots[vertex.id]
        del self._vertices[vertex.id]
        del self._index[vertex.value]
        self.reporter.removing_vertex(vertex)
        return vertex

    def has_edge(self, source: VT, target: VT) -> bool:
        try:
            source_vertex = self.get_vertex(source)
            target_vertex = self.get_vertex(target)
        except VertexNotFound:
            return False
        return target_vertex.id in source_vertex.outgoing

    def get_edge(self, source: VT, target: VT) -> Edge[VT]:
        """Look up the edge connecting two values.

        :raises VertexNotFound: if either value is not in the graph.
        :raises EdgeNotFound: if the values are not connected.
        """
        source_vertex = self.get_vertex(source)
        target_vertex = self.get_vertex(target)
        try:
            return source_vertex.outgoing[target_vertex.id]
        except KeyError:
            raise EdgeNotFound(source, target) from None

    def add_edge(self, source: VT, target: VT) -> Edge[VT]:
        """Connect two existing vertices.

        :raises VertexNotFound: if either value is not in the graph.
        :raises DuplicateEdge: if the vertices are already connected.
        :raises CycleDetected: if `target` is an ancestor of `source` (or is
            `source` itself), so the new edge would close a cycle.
        """
        source_vertex = self.get_vertex(source)
        target_vertex = self.get_vertex(target)

        # The reverse edge needs no check. If it existed, target would be an
        # ancestor of source and the cycle check below would catch it.
        if target_vertex.id in source_vertex.outgoing:
            raise DuplicateEdge(source, target)

        ancestors = self.get_ancestors(source)
        if target_vertex.value in ancestors:
            self.reporter.rejecting_edge(source, target, ancestors)
            raise CycleDetected(source, target, ancestors)

        edge = self._connect(source_vertex, target_vertex)
        self.reporter.adding_edge(edge)
        return edge

    def remove_edge(self, source: VT, target: VT) -> None:
        """Disconnect two vertices.

        If `target` is left without incoming edges, it becomes a root.

        :raises VertexNotFound: if either value is not in the graph.
        :raises EdgeNotFound: if the values are not connected.
        """
        source_vertex = self.get_vertex(source)
        target_vertex = self.get_vertex(target)
        if target_vertex.id not in source_vertex.outgoing:
            raise EdgeNotFound(source, target)
        edge = self._disconnect(source_vertex, target_vertex)
        self.reporter.removing_edge(edge)

    def iter_edges(self) -> Iterator[Edge[VT]]:
        for vertex in self._vertices.values():
            yield from vertex.outgoing.values()

    def iter_children(self, value: VT) -> Iterator[VT]:
        vertex = self.get_vertex(value)
        return (edge.target for edge in vertex.outgoing.values())

    def iter_parents(self, value: VT) -> Iterator[VT]:
        vertex = self.get_vertex(value)
        return (edge.source for edge in vertex.incoming.values())

    def get_ancestors(self, value: VT) -> set[VT]:
        """Collect every value this value is reachable from, itself included.

        :raises VertexNotFound: if the value is not in the graph.
        """
        start = self.get_vertex(value)
        return {
            v.value for v in _iter_reachable(self._vertices, start, _parents)
        }

    def get_descendants(self, value: VT) -> set[VT]:
        """Collect every value reachable from this value, itself included.

        :raises VertexNotFound: if the value is not in the graph.
        """
        start = self.get_vertex(value)
        return {
            v.value for v in _iter_reachable(self._vertices, start, _children)
        }
