"""
TOPOFORGE GRAPH STORE - In-memory reference backend for generated graphs.

Implements every collaborator the generators consume (see core/interfaces.py)
on top of rustworkx, so generated topologies can be inspected with
Rust-native algorithms and exported to Polars.

Architecture (The Bridge Pattern):
  Engine Layer
  - Uses composite ElementIds: ElementId(label_id=3, entry_id=17)
  - Calls: store.insert_vertex(...), store.insert_edge(...)

  Bridge Layer (This File)
  - node_map: Dict[ElementId, int]   (ElementId -> rustworkx index)
  - inv_map:  Dict[int, ElementId]   (rustworkx index -> ElementId)

  Rust Layer (rustworkx.PyDiGraph, one per graph)
  - Integer indices, multigraph so parallel edges are representable

Catalog facets:
  store.graphs     GraphCatalog  (exists / ensure)
  store.labels     LabelCatalog  (exists / ensure / resolve)
  store.allocator  IdentifierAllocator (next)
  store            GraphSink     (insert_vertex / insert_edge)

Thread Safety:
    NOT thread-safe. Generation is single-threaded by contract.
"""
import logging
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

import polars as pl
import rustworkx as rx

from core.errors import AllocationError, CatalogError, SinkError
from core.ontology import ENTRY_ID_MAX, LABEL_ID_MAX, LabelKind
from core.schemas import (
    EdgeRecord,
    ElementId,
    GraphInfo,
    LabelInfo,
    VertexRecord,
    copy_properties,
)

logger = logging.getLogger(__name__)


# =============================================================================
# PER-GRAPH STATE
# =============================================================================

class _GraphState:
    """Everything the store keeps for one named graph."""

    def __init__(self, info: GraphInfo):
        self.info = info

        # Core storage: Rust-native directed multigraph
        self.graph: rx.PyDiGraph = rx.PyDiGraph(multigraph=True)

        # The Bridge: bidirectional ElementId <-> index mapping
        self.node_map: Dict[ElementId, int] = {}
        self.inv_map: Dict[int, ElementId] = {}
        self.edge_ids: Set[ElementId] = set()

        # Catalog: label name -> LabelInfo, plus last issued sequence value
        self.labels: Dict[str, LabelInfo] = {}
        self.sequences: Dict[str, int] = {}
        self._next_label_id = 1

    def add_label(self, name: str, kind: LabelKind) -> LabelInfo:
        if self._next_label_id > LABEL_ID_MAX:
            raise CatalogError(name, f"Label id space exhausted in graph {self.info.name}")
        label = LabelInfo(
            graph_name=self.info.name,
            name=name,
            kind=kind,
            label_id=self._next_label_id,
        )
        self._next_label_id += 1
        self.labels[name] = label
        self.sequences[name] = 0
        return label


# =============================================================================
# CATALOG FACETS
# =============================================================================

class GraphCatalogView:
    """GraphCatalog over a GraphStore."""

    def __init__(self, store: "GraphStore"):
        self._store = store

    def exists(self, name: str) -> bool:
        return name in self._store._graphs

    def ensure(self, name: str) -> int:
        """Return the graph's oid, creating the graph on first use."""
        state = self._store._graphs.get(name)
        if state is None:
            state = self._store._create_graph(name)
        return state.info.graph_oid


class LabelCatalogView:
    """LabelCatalog over a GraphStore."""

    def __init__(self, store: "GraphStore"):
        self._store = store

    def exists(self, graph: str, name: str, kind: LabelKind) -> bool:
        state = self._store._graphs.get(graph)
        if state is None:
            return False
        label = state.labels.get(name)
        return label is not None and label.kind == kind

    def ensure(self, graph: str, name: str, kind: LabelKind) -> int:
        """
        Return the label id, creating the label on first use.

        Raises:
            CatalogError: If the graph doesn't exist or the name is taken by
                          a label of the other kind
        """
        state = self._store._state(graph)
        label = state.labels.get(name)
        if label is None:
            label = state.add_label(name, kind)
            logger.debug("Created %s label %s in graph %s", kind.name.lower(), name, graph)
        elif label.kind != kind:
            raise CatalogError(
                name,
                f"Label {name} in graph {graph} is a {label.kind.name.lower()} label",
            )
        return label.label_id

    def resolve(self, graph: str, name: str, kind: LabelKind) -> int:
        """
        Return the id of an existing label.

        Raises:
            CatalogError: If the graph or label doesn't exist with that kind
        """
        state = self._store._state(graph)
        label = state.labels.get(name)
        if label is None or label.kind != kind:
            raise CatalogError(name, f"No {kind.name.lower()} label {name} in graph {graph}")
        return label.label_id


class SequenceAllocator:
    """IdentifierAllocator over a GraphStore: one counter per (graph, label)."""

    def __init__(self, store: "GraphStore"):
        self._store = store

    def next(self, graph: str, label: str) -> int:
        """
        Issue the next sequence value for a label. Values start at 1 and are
        never reused, even if the element they were meant for is never written.

        Raises:
            CatalogError: If the graph or label doesn't exist
            AllocationError: If the sequence is exhausted
        """
        state = self._store._state(graph)
        if label not in state.sequences:
            raise CatalogError(label, f"No label {label} in graph {graph}")
        value = state.sequences[label] + 1
        if value > self._store.max_entry_id:
            raise AllocationError(
                f"Sequence for label {label} in graph {graph} exhausted at {value - 1}"
            )
        state.sequences[label] = value
        return value


# =============================================================================
# GRAPH STORE
# =============================================================================

class GraphStore:
    """
    In-memory store of labeled graphs backed by rustworkx.

    Usage:
        store = GraphStore()
        services = GraphServices.from_store(store)
        create_complete_graph(services, "k4", num_vertices=4)

        store.vertex_count("k4")    # 4
        store.edge_pairs("k4")      # [(v1, v2), (v1, v3), ...]
    """

    def __init__(self, max_entry_id: int = ENTRY_ID_MAX):
        """
        Initialize an empty store.

        Args:
            max_entry_id: Largest sequence value any label may issue.
                          Lower it to exercise allocator exhaustion.
        """
        self.max_entry_id = max_entry_id
        self._graphs: Dict[str, _GraphState] = {}
        self._next_oid = 1

        self.graphs = GraphCatalogView(self)
        self.labels = LabelCatalogView(self)
        self.allocator = SequenceAllocator(self)

    # =========================================================================
    # INTERNAL UTILITIES
    # =========================================================================

    def _create_graph(self, name: str) -> _GraphState:
        state = _GraphState(GraphInfo(name=name, graph_oid=self._next_oid))
        self._next_oid += 1
        self._graphs[name] = state
        logger.debug("Created graph %s (oid=%d)", name, state.info.graph_oid)
        return state

    def _state(self, graph: str) -> _GraphState:
        state = self._graphs.get(graph)
        if state is None:
            raise CatalogError(graph, f"Graph not found: {graph}")
        return state

    def _sink_label(self, state: _GraphState, label: str, kind: LabelKind, id: ElementId) -> None:
        info = state.labels.get(label)
        if info is None or info.kind != kind:
            raise SinkError(
                f"No {kind.name.lower()} label {label} in graph {state.info.name}",
                graph_name=state.info.name,
            )
        if id.label_id != info.label_id:
            raise SinkError(
                f"Element {id} does not belong to label {label} (id {info.label_id})",
                graph_name=state.info.name,
            )

    # =========================================================================
    # SINK OPERATIONS
    # =========================================================================

    def insert_vertex(
        self, graph: str, label: str, id: ElementId, properties: Dict[str, Any]
    ) -> None:
        """
        Persist one vertex.

        Raises:
            SinkError: If the graph/label is unknown or the id already exists
        """
        state = self._graphs.get(graph)
        if state is None:
            raise SinkError(f"Graph not found: {graph}", graph_name=graph)
        self._sink_label(state, label, LabelKind.VERTEX, id)
        if id in state.node_map:
            raise SinkError(f"Vertex already exists: {id}", graph_name=graph)

        record = VertexRecord(id=id, label=label, properties=copy_properties(properties))
        idx = state.graph.add_node(record)
        state.node_map[id] = idx
        state.inv_map[idx] = id

    def insert_edge(
        self,
        graph: str,
        label: str,
        id: ElementId,
        src_id: ElementId,
        dst_id: ElementId,
        properties: Dict[str, Any],
    ) -> None:
        """
        Persist one directed edge.

        Raises:
            SinkError: If the graph/label is unknown, the id already exists,
                       or an endpoint is not a stored vertex
        """
        state = self._graphs.get(graph)
        if state is None:
            raise SinkError(f"Graph not found: {graph}", graph_name=graph)
        self._sink_label(state, label, LabelKind.EDGE, id)
        if id in state.edge_ids:
            raise SinkError(f"Edge already exists: {id}", graph_name=graph)
        for endpoint in (src_id, dst_id):
            if endpoint not in state.node_map:
                raise SinkError(f"Endpoint vertex not found: {endpoint}", graph_name=graph)

        record = EdgeRecord(
            id=id,
            label=label,
            start_id=src_id,
            end_id=dst_id,
            properties=copy_properties(properties),
        )
        state.graph.add_edge(state.node_map[src_id], state.node_map[dst_id], record)
        state.edge_ids.add(id)

    # =========================================================================
    # QUERIES
    # =========================================================================

    def graph_names(self) -> List[str]:
        """Names of all graphs, in creation order."""
        return list(self._graphs)

    def label_info(self, graph: str, name: str) -> LabelInfo:
        """Catalog entry for a label."""
        state = self._state(graph)
        if name not in state.labels:
            raise CatalogError(name, f"No label {name} in graph {graph}")
        return state.labels[name]

    def vertex_count(self, graph: str, label: Optional[str] = None) -> int:
        """Number of vertices, optionally restricted to one label. 0 for unknown graphs."""
        state = self._graphs.get(graph)
        if state is None:
            return 0
        if label is None:
            return state.graph.num_nodes()
        return sum(1 for v in state.graph.nodes() if v.label == label)

    def edge_count(self, graph: str, label: Optional[str] = None) -> int:
        """Number of edges, optionally restricted to one label. 0 for unknown graphs."""
        state = self._graphs.get(graph)
        if state is None:
            return 0
        if label is None:
            return state.graph.num_edges()
        return sum(1 for e in state.graph.edges() if e.label == label)

    def iter_vertices(self, graph: str) -> Iterator[VertexRecord]:
        """Vertices in insertion order."""
        state = self._state(graph)
        for idx in sorted(state.graph.node_indices()):
            yield state.graph[idx]

    def get_vertices(self, graph: str) -> List[VertexRecord]:
        return list(self.iter_vertices(graph))

    def get_vertex(self, graph: str, id: ElementId) -> VertexRecord:
        state = self._state(graph)
        if id not in state.node_map:
            raise CatalogError(str(id), f"Vertex not found: {id}")
        return state.graph[state.node_map[id]]

    def iter_edges(self, graph: str) -> Iterator[EdgeRecord]:
        """Edges in insertion order."""
        state = self._state(graph)
        index_map = state.graph.edge_index_map()
        for edge_idx in sorted(index_map):
            yield index_map[edge_idx][2]

    def get_edges(self, graph: str) -> List[EdgeRecord]:
        return list(self.iter_edges(graph))

    def edge_pairs(self, graph: str) -> List[Tuple[ElementId, ElementId]]:
        """(start, end) of every edge, in insertion order."""
        return [(e.start_id, e.end_id) for e in self.iter_edges(graph)]

    def has_edge(self, graph: str, src_id: ElementId, dst_id: ElementId) -> bool:
        state = self._state(graph)
        if src_id not in state.node_map or dst_id not in state.node_map:
            return False
        return state.graph.has_edge(state.node_map[src_id], state.node_map[dst_id])

    def successors(self, graph: str, id: ElementId) -> List[ElementId]:
        """Distinct out-neighbors of a vertex."""
        state = self._state(graph)
        if id not in state.node_map:
            raise CatalogError(str(id), f"Vertex not found: {id}")
        return sorted(
            state.inv_map[idx] for idx in state.graph.successor_indices(state.node_map[id])
        )

    def rx_graph(self, graph: str) -> rx.PyDiGraph:
        """The underlying rustworkx graph, for algorithms."""
        return self._state(graph).graph

    # =========================================================================
    # PERSISTENCE (Polars-Compatible)
    # =========================================================================

    def to_polars_vertices(self, graph: str) -> pl.DataFrame:
        """Export vertices to a Polars DataFrame (ids packed as integers)."""
        vertices = self.get_vertices(graph)
        return pl.DataFrame(
            {
                "id": [v.id.as_int() for v in vertices],
                "label": [v.label for v in vertices],
            },
            schema={"id": pl.UInt64, "label": pl.Utf8},
        )

    def to_polars_edges(self, graph: str) -> pl.DataFrame:
        """Export edges to a Polars DataFrame (ids packed as integers)."""
        edges = self.get_edges(graph)
        return pl.DataFrame(
            {
                "id": [e.id.as_int() for e in edges],
                "label": [e.label for e in edges],
                "start_id": [e.start_id.as_int() for e in edges],
                "end_id": [e.end_id.as_int() for e in edges],
            },
            schema={
                "id": pl.UInt64,
                "label": pl.Utf8,
                "start_id": pl.UInt64,
                "end_id": pl.UInt64,
            },
        )

    def __contains__(self, graph: str) -> bool:
        return graph in self._graphs

    def __repr__(self) -> str:
        return f"GraphStore(graphs={len(self._graphs)})"
