from __future__ import annotations

from typing import TYPE_CHECKING, Collection, Generic

from .structs import VT

if TYPE_CHECKING:
    from .structs import Edge, Vertex


class BaseReporter(Generic[VT]):
    """Delegate class to provide progress reporting for the graph.

    Hooks for successful mutations are called after the change is applied.
    """

    def adding_vertex(self, vertex: Vertex[VT]) -> None:
        """Called when a vertex has been added. It is always a root."""

    def removing_vertex(self, vertex: Vertex[VT]) -> None:
        """Called when a vertex has been removed.

        Each edge it had is reported via `removing_edge` before this.
        """

    def adding_edge(self, edge: Edge[VT]) -> None:
        """Called when an edge has been added."""

    def removing_edge(self, edge: Edge[VT]) -> None:
        """Called when an edge has been removed."""

    def rejecting_edge(
        self,
        source: VT,
        target: VT,
        ancestors: Collection[VT],
    ) -> None:
        """Called before an edge is rejected for closing a cycle.

        :param ancestors: Values `source` is reachable from, including
            `target` (which is why the edge is rejected).
        """
