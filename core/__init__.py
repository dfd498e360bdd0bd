"""
TOPOFORGE CORE - Central exports for the data model and the reference store.

This module provides access to:
- Element ids and records (ElementId, VertexRecord, EdgeRecord)
- The error taxonomy (InvalidParameter, AllocationError, SinkError, ...)
- Collaborator interfaces and the in-memory GraphStore
"""

from core.errors import (
    GenerationError,
    InvalidParameter,
    AllocationError,
    SinkError,
    CatalogError,
)
from core.ontology import LabelKind, GenerationState
from core.schemas import ElementId, VertexId, EdgeId, VertexRecord, EdgeRecord
from core.interfaces import (
    GraphCatalog,
    LabelCatalog,
    IdentifierAllocator,
    GraphSink,
    GraphServices,
)
from core.graph_store import GraphStore

__all__ = [
    # Errors
    "GenerationError",
    "InvalidParameter",
    "AllocationError",
    "SinkError",
    "CatalogError",
    # Vocabulary
    "LabelKind",
    "GenerationState",
    # Records
    "ElementId",
    "VertexId",
    "EdgeId",
    "VertexRecord",
    "EdgeRecord",
    # Collaborators
    "GraphCatalog",
    "LabelCatalog",
    "IdentifierAllocator",
    "GraphSink",
    "GraphServices",
    "GraphStore",
]
