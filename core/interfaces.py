"""
TOPOFORGE INTERFACES - What the engine consumes but does not implement.

The generators only ever talk to these four capabilities. GraphStore
(core/graph_store.py) implements all of them in memory; a database-backed
deployment would provide its own.

- GraphCatalog:        graph existence and creation
- LabelCatalog:        label existence, creation and id resolution
- IdentifierAllocator: unique, increasing sequence values per (graph, label)
- GraphSink:           vertex/edge persistence
"""
from dataclasses import dataclass
from typing import Any, Dict, Protocol, runtime_checkable

from core.ontology import LabelKind
from core.schemas import ElementId


@runtime_checkable
class GraphCatalog(Protocol):
    def exists(self, name: str) -> bool: ...

    def ensure(self, name: str) -> int: ...


@runtime_checkable
class LabelCatalog(Protocol):
    def exists(self, graph: str, name: str, kind: LabelKind) -> bool: ...

    def ensure(self, graph: str, name: str, kind: LabelKind) -> int: ...

    def resolve(self, graph: str, name: str, kind: LabelKind) -> int: ...


@runtime_checkable
class IdentifierAllocator(Protocol):
    def next(self, graph: str, label: str) -> int: ...


@runtime_checkable
class GraphSink(Protocol):
    def insert_vertex(
        self, graph: str, label: str, id: ElementId, properties: Dict[str, Any]
    ) -> None: ...

    def insert_edge(
        self,
        graph: str,
        label: str,
        id: ElementId,
        src_id: ElementId,
        dst_id: ElementId,
        properties: Dict[str, Any],
    ) -> None: ...


@dataclass(frozen=True)
class GraphServices:
    """
    The already-initialized collaborators handed to every generator call.

    Usage:
        store = GraphStore()
        services = GraphServices.from_store(store)
    """
    graphs: GraphCatalog
    labels: LabelCatalog
    allocator: IdentifierAllocator
    sink: GraphSink

    @classmethod
    def from_store(cls, store) -> "GraphServices":
        """Bundle a single object implementing every capability."""
        return cls(
            graphs=store.graphs,
            labels=store.labels,
            allocator=store.allocator,
            sink=store,
        )
