from __future__ import annotations

from typing import Collection, Hashable


class GraphError(Exception):
    """A base class for all exceptions raised by this package.

    Every one of these signals a violated precondition, and is raised before
    the graph is changed in any way.
    """


class VertexNotFound(GraphError, LookupError):
    def __init__(self, value: Hashable) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"vertex not found: {self.value!r}"


class DuplicateVertex(GraphError, ValueError):
    def __init__(self, value: Hashable) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"vertex already exists: {self.value!r}"


class DuplicateEdge(GraphError, ValueError):
    def __init__(self, source: Hashable, target: Hashable) -> None:
        super().__init__(source, target)
        self.source = source
        self.target = target

    def __str__(self) -> str:
        return f"duplicate edge: {self.source!r} -> {self.target!r}"


class EdgeNotFound(GraphError, LookupError):
    def __init__(self, source: Hashable, target: Hashable) -> None:
        super().__init__(source, target)
        self.source = source
        self.target = target

    def __str__(self) -> str:
        return f"edge not found: {self.source!r} -> {self.target!r}"


class CycleDetected(GraphError, ValueError):
    """Adding an edge would close a cycle.

    `ancestors` holds every value `source` was reachable from when the edge
    was rejected, `target` among them.
    """

    def __init__(
        self,
        source: Hashable,
        target: Hashable,
        ancestors: Collection[Hashable],
    ) -> None:
        super().__init__(source, target, ancestors)
        self.source = source
        self.target = target
        self.ancestors = ancestors

    def __str__(self) -> str:
        return "cycle detected: {!r} -> {!r}, found {!r} in ancestors {!r}".format(
            self.source,
            self.target,
            self.target,
            self.ancestors,
        )
