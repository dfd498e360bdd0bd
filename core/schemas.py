"""
TOPOFORGE SCHEMAS - The Grammar of the System

If ontology.py is the Dictionary (defining the words we can use),
schemas.py is the Grammar (defining how we structure records).

This module defines the data structures that flow from the generators into
the store:
- ElementId: composite (label id, sequence value) identifier for vertices/edges
- VertexRecord / EdgeRecord: the payloads the store keeps per element
- GraphInfo / LabelInfo: catalog entries
- Serialization helpers for persistence and IPC

Design Principles:
1. STRICT TYPING: msgspec.Struct with no silent type coercion
2. IMMUTABLE IDS: Element ids are frozen and hashable
3. OPAQUE PROPERTIES: property maps are passed through untouched
"""
import msgspec
from typing import Any, Dict, List, Optional

from core.ontology import (
    LabelKind,
    ENTRY_ID_BITS,
    ENTRY_ID_MAX,
    ENTRY_ID_MIN,
    LABEL_ID_MAX,
)


# =============================================================================
# ELEMENT IDENTIFIERS
# =============================================================================

class ElementId(msgspec.Struct, frozen=True, order=True):
    """
    Composite identifier of a vertex or edge.

    Unique within a graph. The label id occupies the upper 16 bits of the
    packed form and the sequence value the lower 48, so ordering by fields
    equals ordering by packed integer.
    """
    label_id: int
    entry_id: int

    def __post_init__(self):
        if not (0 <= self.label_id <= LABEL_ID_MAX):
            raise ValueError(f"label_id out of range: {self.label_id}")
        if not (ENTRY_ID_MIN <= self.entry_id <= ENTRY_ID_MAX):
            raise ValueError(f"entry_id out of range: {self.entry_id}")

    def as_int(self) -> int:
        """Pack into a single 64-bit integer."""
        return (self.label_id << ENTRY_ID_BITS) | self.entry_id

    @classmethod
    def from_int(cls, value: int) -> "ElementId":
        """Inverse of as_int()."""
        return cls(label_id=value >> ENTRY_ID_BITS, entry_id=value & ENTRY_ID_MAX)

    def __str__(self) -> str:
        return f"{self.label_id}.{self.entry_id}"


# Readability aliases; both share the same layout.
VertexId = ElementId
EdgeId = ElementId


# =============================================================================
# CATALOG ENTRIES
# =============================================================================

class GraphInfo(msgspec.Struct, kw_only=True, frozen=True):
    """A graph registered in the catalog."""
    name: str
    graph_oid: int


class LabelInfo(msgspec.Struct, kw_only=True, frozen=True):
    """A label registered in a graph, with the id stamped into its elements."""
    graph_name: str
    name: str
    kind: LabelKind
    label_id: int


# =============================================================================
# ELEMENT RECORDS
# =============================================================================

class VertexRecord(msgspec.Struct, kw_only=True):
    """Payload attached to every vertex in the store."""
    id: ElementId
    label: str
    properties: Dict[str, Any] = msgspec.field(default_factory=dict)


class EdgeRecord(msgspec.Struct, kw_only=True):
    """Payload attached to every edge in the store."""
    id: ElementId
    label: str
    start_id: ElementId
    end_id: ElementId
    properties: Dict[str, Any] = msgspec.field(default_factory=dict)

    @property
    def is_self_loop(self) -> bool:
        return self.start_id == self.end_id


# =============================================================================
# SERIALIZATION HELPERS
# =============================================================================

_json_encoder = msgspec.json.Encoder()
_msgpack_encoder = msgspec.msgpack.Encoder()


def serialize_vertices(vertices: List[VertexRecord], fmt: str = "json") -> bytes:
    """Serialize vertex records to JSON or msgpack bytes."""
    if fmt == "msgpack":
        return _msgpack_encoder.encode(vertices)
    return _json_encoder.encode(vertices)


def serialize_edges(edges: List[EdgeRecord], fmt: str = "json") -> bytes:
    """Serialize edge records to JSON or msgpack bytes."""
    if fmt == "msgpack":
        return _msgpack_encoder.encode(edges)
    return _json_encoder.encode(edges)


def deserialize_vertices(data: bytes, fmt: str = "json") -> List[VertexRecord]:
    """Inverse of serialize_vertices()."""
    if fmt == "msgpack":
        return msgspec.msgpack.decode(data, type=List[VertexRecord])
    return msgspec.json.decode(data, type=List[VertexRecord])


def deserialize_edges(data: bytes, fmt: str = "json") -> List[EdgeRecord]:
    """Inverse of serialize_edges()."""
    if fmt == "msgpack":
        return msgspec.msgpack.decode(data, type=List[EdgeRecord])
    return msgspec.json.decode(data, type=List[EdgeRecord])


def copy_properties(properties: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Fresh property map per element so stored records never alias the caller's dict."""
    if not properties:
        return {}
    return dict(properties)
