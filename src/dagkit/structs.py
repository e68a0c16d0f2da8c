from __future__ import annotations

import types
from typing import Generic, Hashable, Mapping, TypeVar

VT = TypeVar("VT", bound=Hashable)  # Vertex value.


class Vertex(Generic[VT]):
    """A vertex record owned by a graph.

    This holds three attributes besides the integer ``id`` the owning graph
    indexes it by:

    * `value` is the externally supplied value this vertex represents.
    * `outgoing` maps the id of each child vertex to the connecting `Edge`.
    * `incoming` maps the id of each parent vertex to the connecting `Edge`.

    All of these are read-only. The adjacency mappings are live views that
    only the owning graph can change.
    """

    __slots__ = ("_value", "_id", "_outgoing", "_incoming")

    def __init__(self, value: VT, id: int) -> None:
        self._value = value
        self._id = id
        self._outgoing: dict[int, Edge[VT]] = {}
        self._incoming: dict[int, Edge[VT]] = {}

    def __repr__(self) -> str:
        return f"Vertex({self._value!r})"

    @property
    def value(self) -> VT:
        return self._value

    @property
    def id(self) -> int:
        return self._id

    @property
    def outgoing(self) -> Mapping[int, Edge[VT]]:
        return types.MappingProxyType(self._outgoing)

    @property
    def incoming(self) -> Mapping[int, Edge[VT]]:
        return types.MappingProxyType(self._incoming)


class Edge(Generic[VT]):
    """A directed edge between two values of one graph.

    Two edges are equal only if they connect the same values *and* were
    created by the same graph instance. Edges are immutable.
    """

    __slots__ = ("_graph_key", "_source", "_target")

    def __init__(self, graph_key: int, source: VT, target: VT) -> None:
        self._graph_key = graph_key
        self._source = source
        self._target = target

    def __repr__(self) -> str:
        return f"Edge({self._source!r}, {self._target!r})"

    @property
    def source(self) -> VT:
        return self._source

    @property
    def target(self) -> VT:
        return self._target

    def _identity(self) -> tuple[int, VT, VT]:
        return (self._graph_key, self._source, self._target)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())
