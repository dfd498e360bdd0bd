"""
Unit tests for core/graph_store.py - GraphStore

Tests the in-memory backend including:
- Graph and label catalogs
- Per-label identifier sequences
- Vertex and edge persistence (and every rejected write)
- Queries and Polars exports
"""
import polars as pl
import pytest

from core.errors import AllocationError, CatalogError, SinkError
from core.graph_store import GraphStore
from core.interfaces import (
    GraphCatalog,
    GraphServices,
    GraphSink,
    IdentifierAllocator,
    LabelCatalog,
)
from core.ontology import LabelKind
from core.schemas import ElementId


def seeded_store():
    """Store with graph "g", vertex label "Person" (id 1) and edge label "KNOWS" (id 2)."""
    store = GraphStore()
    store.graphs.ensure("g")
    store.labels.ensure("g", "Person", LabelKind.VERTEX)
    store.labels.ensure("g", "KNOWS", LabelKind.EDGE)
    return store


# =============================================================================
# CATALOG TESTS
# =============================================================================

def test_store_implements_every_capability(fresh_store):
    """
    Validate that GraphStore satisfies the collaborator protocols.

    Verifies:
    - Each facet is an instance of its runtime-checkable protocol
    - GraphServices.from_store wires the facets together
    """
    assert isinstance(fresh_store.graphs, GraphCatalog)
    assert isinstance(fresh_store.labels, LabelCatalog)
    assert isinstance(fresh_store.allocator, IdentifierAllocator)
    assert isinstance(fresh_store, GraphSink)

    services = GraphServices.from_store(fresh_store)
    assert services.sink is fresh_store
    assert services.allocator is fresh_store.allocator


def test_graph_ensure_is_idempotent(fresh_store):
    """
    Validate graph creation.

    Verifies:
    - exists() is False before ensure()
    - ensure() returns the same oid on repeat calls
    - Different graphs get different oids
    """
    assert not fresh_store.graphs.exists("a")

    oid = fresh_store.graphs.ensure("a")

    assert fresh_store.graphs.exists("a")
    assert fresh_store.graphs.ensure("a") == oid
    assert fresh_store.graphs.ensure("b") != oid
    assert fresh_store.graph_names() == ["a", "b"]


def test_label_ids_are_assigned_in_order():
    """Validate that label ids start at 1 and increase per graph."""
    store = seeded_store()

    assert store.labels.resolve("g", "Person", LabelKind.VERTEX) == 1
    assert store.labels.resolve("g", "KNOWS", LabelKind.EDGE) == 2
    assert store.labels.ensure("g", "Person", LabelKind.VERTEX) == 1


def test_label_exists_checks_kind():
    """Validate that a label only exists for the kind it was created with."""
    store = seeded_store()

    assert store.labels.exists("g", "Person", LabelKind.VERTEX)
    assert not store.labels.exists("g", "Person", LabelKind.EDGE)
    assert not store.labels.exists("missing", "Person", LabelKind.VERTEX)


def test_label_ensure_kind_conflict():
    """Validate that a vertex label name can't be reused as an edge label."""
    store = seeded_store()

    with pytest.raises(CatalogError) as exc_info:
        store.labels.ensure("g", "Person", LabelKind.EDGE)

    assert exc_info.value.name == "Person"


def test_label_resolve_missing():
    """Validate resolve() on unknown labels and graphs."""
    store = seeded_store()

    with pytest.raises(CatalogError):
        store.labels.resolve("g", "Company", LabelKind.VERTEX)
    with pytest.raises(CatalogError):
        store.labels.resolve("nope", "Person", LabelKind.VERTEX)


# =============================================================================
# ALLOCATOR TESTS
# =============================================================================

def test_allocator_sequences_are_per_label():
    """
    Validate identifier sequences.

    Verifies:
    - Values start at 1 and increase by one
    - Each label has its own counter
    """
    store = seeded_store()
    alloc = store.allocator

    assert [alloc.next("g", "Person") for _ in range(3)] == [1, 2, 3]
    assert alloc.next("g", "KNOWS") == 1
    assert alloc.next("g", "Person") == 4


def test_allocator_exhaustion():
    """Validate that an exhausted sequence raises AllocationError."""
    store = GraphStore(max_entry_id=2)
    store.graphs.ensure("g")
    store.labels.ensure("g", "Person", LabelKind.VERTEX)

    store.allocator.next("g", "Person")
    store.allocator.next("g", "Person")
    with pytest.raises(AllocationError):
        store.allocator.next("g", "Person")


def test_allocator_unknown_label():
    store = seeded_store()

    with pytest.raises(CatalogError):
        store.allocator.next("g", "Company")


# =============================================================================
# SINK TESTS
# =============================================================================

def test_insert_vertex_and_edge():
    """
    Validate the write path.

    Verifies:
    - Vertices and edges are stored with their labels and properties
    - Endpoints of an edge resolve to the stored vertices
    """
    store = seeded_store()
    a, b = ElementId(1, 1), ElementId(1, 2)
    store.insert_vertex("g", "Person", a, {"name": "ada"})
    store.insert_vertex("g", "Person", b, {})
    store.insert_edge("g", "KNOWS", ElementId(2, 1), a, b, {"since": 2020})

    assert store.vertex_count("g") == 2
    assert store.edge_count("g") == 1
    assert store.get_vertex("g", a).properties == {"name": "ada"}
    assert store.edge_pairs("g") == [(a, b)]
    assert store.has_edge("g", a, b)
    assert not store.has_edge("g", b, a)
    assert store.successors("g", a) == [b]

    edge = store.get_edges("g")[0]
    assert edge.properties == {"since": 2020}
    assert not edge.is_self_loop


def test_insert_copies_properties():
    """Validate that the store never aliases a caller's property map."""
    store = seeded_store()
    props = {"name": "ada"}
    store.insert_vertex("g", "Person", ElementId(1, 1), props)

    props["name"] = "changed"

    assert store.get_vertex("g", ElementId(1, 1)).properties == {"name": "ada"}


def test_insert_vertex_rejections():
    """
    Validate every refused vertex write.

    Verifies:
    - Unknown graph, unknown label and edge label all raise SinkError
    - An id stamped with another label's id raises SinkError
    - A duplicate id raises SinkError and leaves one vertex
    """
    store = seeded_store()
    vid = ElementId(1, 1)

    with pytest.raises(SinkError):
        store.insert_vertex("other", "Person", vid, {})
    with pytest.raises(SinkError):
        store.insert_vertex("g", "Company", vid, {})
    with pytest.raises(SinkError):
        store.insert_vertex("g", "KNOWS", ElementId(2, 1), {})
    with pytest.raises(SinkError):
        store.insert_vertex("g", "Person", ElementId(2, 1), {})

    store.insert_vertex("g", "Person", vid, {})
    with pytest.raises(SinkError) as exc_info:
        store.insert_vertex("g", "Person", vid, {})

    assert exc_info.value.graph_name == "g"
    assert store.vertex_count("g") == 1


def test_insert_edge_rejections():
    """
    Validate every refused edge write.

    Verifies:
    - Missing endpoints raise SinkError
    - Vertex labels can't carry edges
    - Duplicate edge ids raise SinkError
    """
    store = seeded_store()
    a, b = ElementId(1, 1), ElementId(1, 2)
    store.insert_vertex("g", "Person", a, {})

    with pytest.raises(SinkError):
        store.insert_edge("g", "KNOWS", ElementId(2, 1), a, b, {})
    with pytest.raises(SinkError):
        store.insert_edge("g", "Person", ElementId(1, 5), a, a, {})

    store.insert_vertex("g", "Person", b, {})
    store.insert_edge("g", "KNOWS", ElementId(2, 1), a, b, {})
    with pytest.raises(SinkError):
        store.insert_edge("g", "KNOWS", ElementId(2, 1), b, a, {})

    assert store.edge_count("g") == 1


def test_parallel_and_self_loop_edges_are_storable():
    """Validate that the store itself accepts multigraph shapes."""
    store = seeded_store()
    a = ElementId(1, 1)
    store.insert_vertex("g", "Person", a, {})
    store.insert_edge("g", "KNOWS", ElementId(2, 1), a, a, {})
    store.insert_edge("g", "KNOWS", ElementId(2, 2), a, a, {})

    assert store.edge_count("g") == 2
    assert all(e.is_self_loop for e in store.get_edges("g"))


# =============================================================================
# QUERY / EXPORT TESTS
# =============================================================================

def test_counts_on_unknown_graph(fresh_store):
    assert fresh_store.vertex_count("nope") == 0
    assert fresh_store.edge_count("nope") == 0
    assert "nope" not in fresh_store


def test_counts_by_label():
    """Validate label-filtered counts."""
    store = seeded_store()
    store.labels.ensure("g", "Company", LabelKind.VERTEX)
    store.insert_vertex("g", "Person", ElementId(1, 1), {})
    store.insert_vertex("g", "Company", ElementId(3, 1), {})

    assert store.vertex_count("g", label="Person") == 1
    assert store.vertex_count("g", label="Company") == 1
    assert store.vertex_count("g") == 2


def test_polars_export():
    """
    Validate Polars exports.

    Verifies:
    - One row per element
    - Ids are packed into unsigned 64-bit integers
    """
    store = seeded_store()
    a, b = ElementId(1, 1), ElementId(1, 2)
    store.insert_vertex("g", "Person", a, {})
    store.insert_vertex("g", "Person", b, {})
    store.insert_edge("g", "KNOWS", ElementId(2, 1), a, b, {})

    vertices = store.to_polars_vertices("g")
    edges = store.to_polars_edges("g")

    assert vertices.height == 2
    assert vertices.schema["id"] == pl.UInt64
    assert vertices["id"].to_list() == [a.as_int(), b.as_int()]
    assert edges.height == 1
    assert edges["start_id"].to_list() == [a.as_int()]
    assert edges["end_id"].to_list() == [b.as_int()]
    assert edges["label"].to_list() == ["KNOWS"]


def test_label_info():
    store = seeded_store()

    info = store.label_info("g", "KNOWS")

    assert info.kind == LabelKind.EDGE
    assert info.label_id == 2
    assert info.graph_name == "g"
    with pytest.raises(CatalogError):
        store.label_info("g", "missing")
