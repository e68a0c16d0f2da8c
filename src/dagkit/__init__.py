__all__ = [
    "BaseReporter",
    "CycleDetected",
    "DirectedAcyclicGraph",
    "DuplicateEdge",
    "DuplicateVertex",
    "Edge",
    "EdgeNotFound",
    "GraphError",
    "Vertex",
    "VertexNotFound",
    "__version__",
]

__version__ = "0.1.0.dev0"


from .exceptions import (
    CycleDetected,
    DuplicateEdge,
    DuplicateVertex,
    EdgeNotFound,
    GraphError,
    VertexNotFound,
)
from .graphs import DirectedAcyclicGraph
from .reporters import BaseReporter
from .structs import Edge, Vertex
