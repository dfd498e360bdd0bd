"""
TOPOFORGE.FORGE.TOPOLOGIST - Canonical Topology Synthesis

Generates graphs of known structure and writes them, vertex by vertex and
edge by edge, into a graph store through the collaborator interfaces in
core/interfaces.py.

Architecture:
- TopologyConfig (forge/params.py) is validated before anything is written
- Labels are resolved (created on demand) through the LabelCatalog
- Vertex ids come from the IdentifierAllocator, one per vertex, in creation order
- Edges are enumerated or sampled with an explicit RandomSource
- Every write goes through the GraphSink; failures are surfaced, never retried

Topology Types:
1. Complete: one edge per unordered pair, lower index -> higher index
2. Erdos-Renyi G(n, p): each pair kept independently with probability p
3. Erdos-Renyi G(n, m): exactly m distinct pairs, sampled without replacement
4. Tadpole: cycle of m vertices plus a pendant path of n vertices
5. Watts-Strogatz: ring lattice of degree k, each edge rewired with probability p

State machine (per generate() call):
    VALIDATING -> ALLOCATING_VERTICES -> EMITTING_EDGES -> DONE
    any state  -> FAILED

Example Usage:
    from core.graph_store import GraphStore
    from forge.topologist import GraphGenerator, TopologyConfig, Topologies

    store = GraphStore()
    gen = GraphGenerator(store, seed=42)
    result = gen.generate(TopologyConfig(
        topology_type=Topologies.ERDOS_RENYI_GNP,
        graph_name="random",
        num_vertices=1000,
        edge_probability=0.01,
    ))

    # Or use factory functions
    from forge.topologist import create_watts_strogatz
    create_watts_strogatz(store, "small_world", num_vertices=1000, k_neighbors=6,
                          rewire_prob=0.1, seed=42)
"""

import logging
from typing import Any, Dict, List, Optional, Tuple, Union

import msgspec
import rustworkx as rx

from core.errors import AllocationError, GenerationError, InvalidParameter
from core.graph_store import GraphStore
from core.interfaces import GraphServices
from core.ontology import GenerationState, LabelKind, can_transition
from core.schemas import ElementId, copy_properties
from forge.buffers import WorkingVertexArray
from forge.params import Topologies, TopologyConfig, max_simple_edges
from forge.random_source import RandomSource
from forge.sampling import iter_pairs, sample_pairs
from infrastructure.config import GeneratorSettings, get_settings
from infrastructure.logger import GenerationLogger, get_logger

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT SCHEMA
# =============================================================================

class GenerationResult(msgspec.Struct, kw_only=True, frozen=True):
    """Outcome of a successful generator call."""
    graph_name: str
    topology: str
    vertex_ids: List[ElementId]
    edge_count: int
    bidirectional: bool
    state: str = GenerationState.DONE.value
    seed: Optional[int] = None

    @property
    def vertex_count(self) -> int:
        return len(self.vertex_ids)


# =============================================================================
# PURE TOPOLOGY BUILDERS
# =============================================================================

def tadpole_pairs(cycle_size: int, path_size: int) -> List[Tuple[int, int]]:
    """
    Edges of the tadpole graph T(m, n) over vertex indices.

    A path runs through all m + n vertices in creation order; one closing
    edge (m-1) -> 0 turns the first m of them into a cycle, leaving the
    remaining n hanging off vertex m-1.
    """
    total = cycle_size + path_size
    pairs = [(i - 1, i) for i in range(1, total)]
    pairs.append((cycle_size - 1, 0))
    return pairs


def watts_strogatz_pairs(
    num_vertices: int, k_neighbors: int, rewire_prob: float, rng: RandomSource
) -> List[Tuple[int, int]]:
    """
    Ring lattice of degree k with each edge's target rewired with probability p.

    Algorithm:
    1. Connect every vertex i to (i + 1) % n ... (i + k/2) % n
    2. For each lattice edge (u, v), in construction order, draw r; if r < p,
       replace v with a vertex chosen uniformly among those that are neither
       u nor already adjacent to u
    3. A vertex adjacent to every other vertex keeps its edge unchanged

    The edge count n*k/2 never changes. Adjacency is tracked without regard
    to direction, so the result has no self-loops and no pair appears twice
    in either orientation.
    """
    n = num_vertices
    edges: List[List[int]] = []
    adjacency = [set() for _ in range(n)]

    for i in range(n):
        for offset in range(1, k_neighbors // 2 + 1):
            j = (i + offset) % n
            edges.append([i, j])
            adjacency[i].add(j)
            adjacency[j].add(i)

    for edge in edges:
        u, v = edge
        if not rng.uniform_float() < rewire_prob:
            continue
        if len(adjacency[u]) >= n - 1:
            continue
        w = rng.uniform_int(n)
        while w == u or w in adjacency[u]:
            w = rng.uniform_int(n)
        adjacency[u].discard(v)
        adjacency[v].discard(u)
        adjacency[u].add(w)
        adjacency[w].add(u)
        edge[1] = w

    return [(u, v) for u, v in edges]


# =============================================================================
# EDGE EMITTER
# =============================================================================

class _EdgeEmitter:
    """Allocates edge ids and writes edges for one run."""

    def __init__(
        self,
        services: GraphServices,
        config: TopologyConfig,
        edge_label_id: int,
        vertices: WorkingVertexArray,
        run: "_Run",
    ):
        self._services = services
        self._graph = config.graph_name
        self._label = config.edge_label
        self._label_id = edge_label_id
        self._properties = config.edge_properties
        self._bidirectional = config.bidirectional
        self._vertices = vertices
        self._run = run

    def emit(self, src: int, dst: int) -> None:
        """Write one directed edge between vertex indices src and dst."""
        entry = self._services.allocator.next(self._graph, self._label)
        edge_id = _make_id(self._label_id, entry, self._label)
        self._services.sink.insert_edge(
            self._graph,
            self._label,
            edge_id,
            self._vertices[src],
            self._vertices[dst],
            copy_properties(self._properties),
        )
        self._run.edges += 1

    def emit_pair(self, src: int, dst: int) -> None:
        """Write src -> dst, and dst -> src with its own id when bidirectional."""
        self.emit(src, dst)
        if self._bidirectional:
            self.emit(dst, src)


def _make_id(label_id: int, entry: int, label: str) -> ElementId:
    try:
        return ElementId(label_id=label_id, entry_id=entry)
    except ValueError as e:
        raise AllocationError(f"Identifier {entry} for label {label} is out of range: {e}") from e


class _Run:
    """Mutable bookkeeping of one generate() call."""

    def __init__(self, graph_name: str, topology: str, seed: Optional[int]):
        self.graph_name = graph_name
        self.topology = topology
        self.seed = seed
        self.state = GenerationState.VALIDATING
        self.vertices = 0
        self.edges = 0


# =============================================================================
# GRAPH GENERATOR CLASS
# =============================================================================

class GraphGenerator:
    """
    Writes canonical topologies into a graph store.

    Supports deterministic generation via seeding for reproducible datasets:
    with a fixed seed every generate() call starts from a fresh RandomSource,
    so two calls with the same seed and config write identical structures.

    Example:
        gen = GraphGenerator(store, seed=42)
        config = TopologyConfig(
            topology_type=Topologies.TADPOLE,
            graph_name="tadpole",
            cycle_size=5,
            path_size=3,
        )
        result = gen.generate(config)
    """

    def __init__(
        self,
        services: Union[GraphServices, GraphStore],
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
        settings: Optional[GeneratorSettings] = None,
        event_logger: Optional[GenerationLogger] = None,
    ):
        """
        Initialize the graph generator.

        Args:
            services: Collaborators to write through (or a GraphStore)
            rng: Caller-owned random source, shared across calls
            seed: Seed for a fresh RandomSource per call. Ignored if rng is given.
                  If both are None, each call seeds from OS entropy.
            settings: Defaults and limits; loaded from config if None
            event_logger: Generation event log; the global one if None
        """
        if not isinstance(services, GraphServices):
            services = GraphServices.from_store(services)
        self.services = services
        self.rng = rng
        self.seed = seed
        self.settings = settings if settings is not None else get_settings()
        self.event_logger = event_logger if event_logger is not None else get_logger()

    def _random_source(self, rng: Optional[RandomSource]) -> RandomSource:
        if rng is not None:
            return rng
        if self.rng is not None:
            return self.rng
        return RandomSource(self.seed)

    # =========================================================================
    # STATE MACHINE
    # =========================================================================

    def _transition(self, run: _Run, target: GenerationState) -> None:
        if not can_transition(run.state, target):
            raise GenerationError(f"Illegal state transition {run.state.value} -> {target.value}")
        old = run.state
        run.state = target
        logger.debug("%s/%s: %s -> %s", run.graph_name, run.topology, old.value, target.value)
        self.event_logger.log_state_changed(run.graph_name, run.topology, old.value, target.value)

    def _fail(self, run: _Run, error: BaseException) -> None:
        failed_in = run.state
        if isinstance(error, GenerationError) and error.state is None:
            error.state = failed_in
        logger.warning(
            "Generation of %s (%s) failed while %s after %d vertices, %d edges: %s",
            run.graph_name, run.topology, failed_in.value, run.vertices, run.edges, error,
        )
        self.event_logger.log_generation_failed(
            run.graph_name,
            run.topology,
            failed_in.value,
            error,
            vertices=run.vertices,
            edges=run.edges,
            seed=run.seed,
        )
        if can_transition(run.state, GenerationState.FAILED):
            self._transition(run, GenerationState.FAILED)

    # =========================================================================
    # ENTRY POINT
    # =========================================================================

    def generate(
        self, config: TopologyConfig, rng: Optional[RandomSource] = None
    ) -> GenerationResult:
        """
        Generate a graph based on the provided configuration.

        Args:
            config: Topology configuration (msgspec.Struct)
            rng: Random source for this call only

        Returns:
            GenerationResult with the created vertex ids and edge count

        Raises:
            InvalidParameter: Before any write, if the configuration is invalid
            AllocationError: If an identifier or the working array can't be allocated
            SinkError: If the store rejects a write (earlier writes stay)
        """
        source = self._random_source(rng)
        topology = getattr(config.topology_type, "value", config.topology_type)
        run = _Run(str(config.graph_name), str(topology), source.seed)

        try:
            config = config.validate(self.settings)
            run.graph_name, run.topology = config.graph_name, config.topology_type
            self._check_label_kinds(config)

            with WorkingVertexArray(
                config.vertex_total(), limit=self.settings.max_working_vertices
            ) as vertices:
                self._transition(run, GenerationState.ALLOCATING_VERTICES)
                vertex_label_id, edge_label_id = self._resolve_labels(config)
                self._allocate_vertices(config, vertex_label_id, vertices, run)

                self._transition(run, GenerationState.EMITTING_EDGES)
                emitter = _EdgeEmitter(self.services, config, edge_label_id, vertices, run)
                self._ALGORITHMS[config.topology](self, config, emitter, source)

                vertex_ids = vertices.snapshot()

            self._transition(run, GenerationState.DONE)
        except Exception as e:
            self._fail(run, e)
            raise

        logger.info(
            "Generated %s graph %s: %d vertices, %d edges",
            run.topology, run.graph_name, run.vertices, run.edges,
        )
        self.event_logger.log_generation_completed(
            run.graph_name, run.topology, run.vertices, run.edges, seed=run.seed
        )
        return GenerationResult(
            graph_name=config.graph_name,
            topology=config.topology_type,
            vertex_ids=vertex_ids,
            edge_count=run.edges,
            bidirectional=config.bidirectional,
            seed=run.seed,
        )

    # =========================================================================
    # LABELS AND VERTICES
    # =========================================================================

    def _check_label_kinds(self, config: TopologyConfig) -> None:
        """Reject label names already used for the other kind, before any write."""
        graphs, labels = self.services.graphs, self.services.labels
        if not graphs.exists(config.graph_name):
            return
        if labels.exists(config.graph_name, config.vertex_label, LabelKind.EDGE):
            raise InvalidParameter(
                "vertex_label", f"{config.vertex_label} is an edge label in {config.graph_name}"
            )
        if labels.exists(config.graph_name, config.edge_label, LabelKind.VERTEX):
            raise InvalidParameter(
                "edge_label", f"{config.edge_label} is a vertex label in {config.graph_name}"
            )

    def _resolve_labels(self, config: TopologyConfig) -> Tuple[int, int]:
        """Ensure graph and labels exist; return (vertex label id, edge label id)."""
        self.services.graphs.ensure(config.graph_name)
        labels = self.services.labels
        vertex_label_id = labels.ensure(config.graph_name, config.vertex_label, LabelKind.VERTEX)
        edge_label_id = labels.ensure(config.graph_name, config.edge_label, LabelKind.EDGE)
        return vertex_label_id, edge_label_id

    def _allocate_vertices(
        self,
        config: TopologyConfig,
        vertex_label_id: int,
        vertices: WorkingVertexArray,
        run: _Run,
    ) -> None:
        allocator, sink = self.services.allocator, self.services.sink
        for _ in range(vertices.capacity):
            entry = allocator.next(config.graph_name, config.vertex_label)
            vertex_id = _make_id(vertex_label_id, entry, config.vertex_label)
            sink.insert_vertex(
                config.graph_name,
                config.vertex_label,
                vertex_id,
                copy_properties(config.vertex_properties),
            )
            vertices.append(vertex_id)
            run.vertices += 1
        logger.debug("Allocated %d vertices in %s", run.vertices, config.graph_name)

    # =========================================================================
    # EDGE ALGORITHMS
    # =========================================================================

    def _generate_complete(
        self, config: TopologyConfig, emitter: _EdgeEmitter, rng: RandomSource
    ) -> None:
        """
        Complete graph K_n.

        One edge per unordered pair (i, j), i < j, from the lower to the
        higher index, i ascending then j ascending: n(n-1)/2 edges.
        """
        for i, j in iter_pairs(config.num_vertices):
            emitter.emit(i, j)

    def _generate_erdos_renyi_gnp(
        self, config: TopologyConfig, emitter: _EdgeEmitter, rng: RandomSource
    ) -> None:
        """
        Erdos-Renyi G(n, p).

        One uniform draw per unordered pair, in pair order; the pair becomes
        an edge when the draw is <= p. p = 0 never creates an edge.
        Expected edge count: p * n(n-1)/2, doubled if bidirectional.
        """
        p = config.edge_probability
        for i, j in iter_pairs(config.num_vertices):
            r = rng.uniform_float()
            if p > 0.0 and r <= p:
                emitter.emit_pair(i, j)

    def _generate_erdos_renyi_gnm(
        self, config: TopologyConfig, emitter: _EdgeEmitter, rng: RandomSource
    ) -> None:
        """
        Erdos-Renyi G(n, m).

        Draws m distinct pair ranks uniformly from the n(n-1)/2 possible ones
        and writes them in rank order. Only the chosen pairs are decoded.
        """
        for i, j in sample_pairs(config.num_vertices, config.num_edges, rng):
            emitter.emit_pair(i, j)

    def _generate_tadpole(
        self, config: TopologyConfig, emitter: _EdgeEmitter, rng: RandomSource
    ) -> None:
        """Tadpole graph T(m, n): m + n edges, doubled if bidirectional."""
        for i, j in tadpole_pairs(config.cycle_size, config.path_size):
            emitter.emit_pair(i, j)

    def _generate_watts_strogatz(
        self, config: TopologyConfig, emitter: _EdgeEmitter, rng: RandomSource
    ) -> None:
        """Watts-Strogatz small-world graph: n*k/2 edges, doubled if bidirectional."""
        pairs = watts_strogatz_pairs(
            config.num_vertices, config.k_neighbors, config.rewire_prob, rng
        )
        for u, v in pairs:
            emitter.emit_pair(u, v)

    _ALGORITHMS = {
        Topologies.COMPLETE: _generate_complete,
        Topologies.ERDOS_RENYI_GNP: _generate_erdos_renyi_gnp,
        Topologies.ERDOS_RENYI_GNM: _generate_erdos_renyi_gnm,
        Topologies.TADPOLE: _generate_tadpole,
        Topologies.WATTS_STROGATZ: _generate_watts_strogatz,
    }


# =============================================================================
# FACTORY FUNCTIONS (Public operations, one per topology)
# =============================================================================

def create_complete_graph(
    services: Union[GraphServices, GraphStore],
    graph_name: str,
    num_vertices: int,
    vertex_label: Optional[str] = None,
    edge_label: Optional[str] = None,
    vertex_properties: Optional[Dict[str, Any]] = None,
    edge_properties: Optional[Dict[str, Any]] = None,
    settings: Optional[GeneratorSettings] = None,
    event_logger: Optional[GenerationLogger] = None,
) -> GenerationResult:
    """
    Create the complete graph K_n.

    Args:
        services: Collaborators to write through (or a GraphStore)
        graph_name: Target graph, created if missing
        num_vertices: n >= 0

    Returns:
        GenerationResult (n vertices, n(n-1)/2 edges)

    Example:
        create_complete_graph(store, "k4", num_vertices=4)   # 4 vertices, 6 edges
    """
    config = TopologyConfig(
        topology_type=Topologies.COMPLETE,
        graph_name=graph_name,
        num_vertices=num_vertices,
        vertex_label=vertex_label,
        edge_label=edge_label,
        vertex_properties=vertex_properties,
        edge_properties=edge_properties,
    )
    gen = GraphGenerator(services, settings=settings, event_logger=event_logger)
    return gen.generate(config)


def create_erdos_renyi_gnp(
    services: Union[GraphServices, GraphStore],
    graph_name: str,
    num_vertices: int,
    edge_probability: float,
    vertex_label: Optional[str] = None,
    edge_label: Optional[str] = None,
    vertex_properties: Optional[Dict[str, Any]] = None,
    edge_properties: Optional[Dict[str, Any]] = None,
    bidirectional: Optional[bool] = None,
    seed: Optional[int] = None,
    rng: Optional[RandomSource] = None,
    settings: Optional[GeneratorSettings] = None,
    event_logger: Optional[GenerationLogger] = None,
) -> GenerationResult:
    """
    Create an Erdos-Renyi G(n, p) random graph.

    Args:
        num_vertices: n >= 0
        edge_probability: p in [0, 1]
        bidirectional: Two opposite edges per kept pair (default True)
        seed: Seed for reproducibility; ignored if rng is given

    Example:
        create_erdos_renyi_gnp(store, "er", num_vertices=100, edge_probability=0.05, seed=42)
    """
    config = TopologyConfig(
        topology_type=Topologies.ERDOS_RENYI_GNP,
        graph_name=graph_name,
        num_vertices=num_vertices,
        edge_probability=edge_probability,
        vertex_label=vertex_label,
        edge_label=edge_label,
        vertex_properties=vertex_properties,
        edge_properties=edge_properties,
        bidirectional=bidirectional,
    )
    gen = GraphGenerator(services, rng=rng, seed=seed, settings=settings, event_logger=event_logger)
    return gen.generate(config)


def create_erdos_renyi_gnm(
    services: Union[GraphServices, GraphStore],
    graph_name: str,
    num_vertices: int,
    num_edges: int,
    vertex_label: Optional[str] = None,
    edge_label: Optional[str] = None,
    vertex_properties: Optional[Dict[str, Any]] = None,
    edge_properties: Optional[Dict[str, Any]] = None,
    bidirectional: Optional[bool] = None,
    seed: Optional[int] = None,
    rng: Optional[RandomSource] = None,
    settings: Optional[GeneratorSettings] = None,
    event_logger: Optional[GenerationLogger] = None,
) -> GenerationResult:
    """
    Create an Erdos-Renyi G(n, m) random graph.

    Args:
        num_vertices: n >= 0
        num_edges: m in [0, n(n-1)/2]
        bidirectional: Two opposite edges per chosen pair (default True)
        seed: Seed for reproducibility; ignored if rng is given

    Example:
        create_erdos_renyi_gnm(store, "gnm", num_vertices=5, num_edges=10)  # all pairs
    """
    config = TopologyConfig(
        topology_type=Topologies.ERDOS_RENYI_GNM,
        graph_name=graph_name,
        num_vertices=num_vertices,
        num_edges=num_edges,
        vertex_label=vertex_label,
        edge_label=edge_label,
        vertex_properties=vertex_properties,
        edge_properties=edge_properties,
        bidirectional=bidirectional,
    )
    gen = GraphGenerator(services, rng=rng, seed=seed, settings=settings, event_logger=event_logger)
    return gen.generate(config)


def create_tadpole_graph(
    services: Union[GraphServices, GraphStore],
    graph_name: str,
    cycle_size: int,
    path_size: int,
    vertex_label: Optional[str] = None,
    edge_label: Optional[str] = None,
    vertex_properties: Optional[Dict[str, Any]] = None,
    edge_properties: Optional[Dict[str, Any]] = None,
    bidirectional: Optional[bool] = None,
    settings: Optional[GeneratorSettings] = None,
    event_logger: Optional[GenerationLogger] = None,
) -> GenerationResult:
    """
    Create the tadpole graph T(m, n).

    Args:
        cycle_size: m >= 3
        path_size: n >= 1
        bidirectional: Two opposite edges per connection (default True)

    Example:
        create_tadpole_graph(store, "t", cycle_size=3, path_size=2, bidirectional=False)
        # 5 vertices, 5 edges
    """
    config = TopologyConfig(
        topology_type=Topologies.TADPOLE,
        graph_name=graph_name,
        cycle_size=cycle_size,
        path_size=path_size,
        vertex_label=vertex_label,
        edge_label=edge_label,
        vertex_properties=vertex_properties,
        edge_properties=edge_properties,
        bidirectional=bidirectional,
    )
    gen = GraphGenerator(services, settings=settings, event_logger=event_logger)
    return gen.generate(config)


def create_watts_strogatz(
    services: Union[GraphServices, GraphStore],
    graph_name: str,
    num_vertices: int,
    k_neighbors: int,
    rewire_prob: float,
    vertex_label: Optional[str] = None,
    edge_label: Optional[str] = None,
    vertex_properties: Optional[Dict[str, Any]] = None,
    edge_properties: Optional[Dict[str, Any]] = None,
    bidirectional: Optional[bool] = None,
    seed: Optional[int] = None,
    rng: Optional[RandomSource] = None,
    settings: Optional[GeneratorSettings] = None,
    event_logger: Optional[GenerationLogger] = None,
) -> GenerationResult:
    """
    Create a Watts-Strogatz small-world graph.

    Args:
        num_vertices: n > k
        k_neighbors: Lattice degree k >= 2, even
        rewire_prob: p in [0, 1]
        bidirectional: Two opposite edges per connection (default True)
        seed: Seed for reproducibility; ignored if rng is given

    Example:
        create_watts_strogatz(store, "ws", num_vertices=1000, k_neighbors=6,
                              rewire_prob=0.3, seed=42)
    """
    config = TopologyConfig(
        topology_type=Topologies.WATTS_STROGATZ,
        graph_name=graph_name,
        num_vertices=num_vertices,
        k_neighbors=k_neighbors,
        rewire_prob=rewire_prob,
        vertex_label=vertex_label,
        edge_label=edge_label,
        vertex_properties=vertex_properties,
        edge_properties=edge_properties,
        bidirectional=bidirectional,
    )
    gen = GraphGenerator(services, rng=rng, seed=seed, settings=settings, event_logger=event_logger)
    return gen.generate(config)


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def graph_stats(store: GraphStore, graph_name: str) -> dict:
    """
    Compute basic statistics for a generated graph.

    Args:
        store: GraphStore holding the graph
        graph_name: Graph to inspect

    Returns:
        Dictionary with graph statistics. "degree" counts in + out edges;
        "unordered_pairs" counts distinct vertex pairs regardless of direction.
    """
    graph = store.rx_graph(graph_name)
    num_vertices = graph.num_nodes()
    num_edges = graph.num_edges()

    degrees = [graph.in_degree(idx) + graph.out_degree(idx) for idx in graph.node_indices()]

    directed_pairs = set()
    unordered_pairs = set()
    self_loops = 0
    duplicate_edges = 0
    for src, dst in graph.edge_list():
        if src == dst:
            self_loops += 1
        if (src, dst) in directed_pairs:
            duplicate_edges += 1
        directed_pairs.add((src, dst))
        unordered_pairs.add((min(src, dst), max(src, dst)))

    return {
        "num_vertices": num_vertices,
        "num_edges": num_edges,
        "avg_degree": sum(degrees) / len(degrees) if degrees else 0,
        "min_degree": min(degrees) if degrees else 0,
        "max_degree": max(degrees) if degrees else 0,
        "self_loops": self_loops,
        "duplicate_edges": duplicate_edges,
        "unordered_pairs": len(unordered_pairs),
        "density": len(unordered_pairs) / max_simple_edges(num_vertices) if num_vertices > 1 else 0,
        "weakly_connected": rx.is_weakly_connected(graph) if num_vertices > 0 else False,
    }
