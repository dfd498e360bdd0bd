"""
Topology parameters and their validation.

TopologyConfig is the per-call input of every generator. validate() checks
it and returns a normalized copy (default labels, empty property maps,
bidirectional flag resolved) or raises InvalidParameter naming the offending
field. Nothing here touches a catalog, an allocator or a sink, so a rejected
config can never leave partial state behind.
"""
import math
from enum import Enum
from typing import Any, Dict, Optional

import msgspec

from core.errors import InvalidParameter


# =============================================================================
# TOPOLOGY TYPES ENUM
# =============================================================================

class Topologies(str, Enum):
    """
    Supported graph topology types.

    - COMPLETE: every unordered pair connected once
    - ERDOS_RENYI_GNP: each pair connected independently with probability p
    - ERDOS_RENYI_GNM: exactly m distinct pairs chosen uniformly
    - TADPOLE: cycle of m vertices with a pendant path of n vertices
    - WATTS_STROGATZ: ring lattice with random rewiring (small-world)
    """
    COMPLETE = "complete"
    ERDOS_RENYI_GNP = "erdos_renyi_gnp"
    ERDOS_RENYI_GNM = "erdos_renyi_gnm"
    TADPOLE = "tadpole"
    WATTS_STROGATZ = "watts_strogatz"


# =============================================================================
# COMBINATORICS
# =============================================================================

def combination(n: int, k: int) -> int:
    """
    Binomial coefficient C(n, k) by a running multiply-then-divide product.

    After step i the accumulator equals C(n - k + i, i), so every division is
    exact and intermediate values never exceed the final result times k.
    """
    if k < 0 or n < 0 or k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(1, k + 1):
        result = result * (n - k + i) // i
    return result


def max_simple_edges(num_vertices: int) -> int:
    """Number of unordered vertex pairs, n(n-1)/2."""
    return combination(num_vertices, 2)


# =============================================================================
# CONFIGURATION SCHEMA
# =============================================================================

class TopologyConfig(msgspec.Struct, kw_only=True, frozen=True):
    """
    Configuration for one generator invocation.

    All parameters are keyword-only to prevent positional errors. Optional
    fields left as None are either defaulted by validate() or rejected when
    the topology requires them.

    Attributes:
        topology_type: Type of topology to generate (see Topologies enum)
        graph_name: Target graph; created if it doesn't exist

        # Size / probability parameters (which ones apply depends on the type)
        num_vertices: n for complete, G(n,p), G(n,m) and Watts-Strogatz
        edge_probability: p for G(n,p)
        num_edges: m for G(n,m)
        cycle_size: m for tadpole (cycle length)
        path_size: n for tadpole (pendant path length)
        k_neighbors: k for Watts-Strogatz (even, lattice degree)
        rewire_prob: p for Watts-Strogatz

        # Labels and payloads
        vertex_label / edge_label: default to the store's default labels
        vertex_properties / edge_properties: copied onto every element
        bidirectional: store each relationship as two opposite edges
                       (not available for complete graphs)

    Example:
        config = TopologyConfig(
            topology_type=Topologies.WATTS_STROGATZ,
            graph_name="small_world",
            num_vertices=1000,
            k_neighbors=6,
            rewire_prob=0.3,
        )
    """
    topology_type: str
    graph_name: Optional[str] = None

    num_vertices: Optional[int] = None
    edge_probability: Optional[float] = None
    num_edges: Optional[int] = None
    cycle_size: Optional[int] = None
    path_size: Optional[int] = None
    k_neighbors: Optional[int] = None
    rewire_prob: Optional[float] = None

    vertex_label: Optional[str] = None
    edge_label: Optional[str] = None
    vertex_properties: Optional[Dict[str, Any]] = None
    edge_properties: Optional[Dict[str, Any]] = None
    bidirectional: Optional[bool] = None

    @property
    def topology(self) -> Topologies:
        return Topologies(self.topology_type)

    def vertex_total(self) -> int:
        """Vertices this config creates (after validation)."""
        if self.topology_type == Topologies.TADPOLE:
            return self.cycle_size + self.path_size
        return self.num_vertices

    def expected_edge_count(self) -> Optional[int]:
        """
        Exact edge count this config creates, or None for G(n,p) where the
        count is random (expected value p * n(n-1)/2, doubled if bidirectional).
        """
        factor = 2 if self.bidirectional else 1
        t = self.topology_type
        if t == Topologies.COMPLETE:
            return max_simple_edges(self.num_vertices)
        if t == Topologies.ERDOS_RENYI_GNM:
            return self.num_edges * factor
        if t == Topologies.TADPOLE:
            return (self.cycle_size + self.path_size) * factor
        if t == Topologies.WATTS_STROGATZ:
            return self.num_vertices * self.k_neighbors // 2 * factor
        return None

    def validate(self, settings=None) -> "TopologyConfig":
        """
        Validate and normalize configuration parameters.

        Args:
            settings: GeneratorSettings supplying default labels and the
                      default bidirectional flag. Loaded if None.

        Returns:
            A new TopologyConfig with every optional field resolved

        Raises:
            InvalidParameter: If any parameter is missing or invalid
        """
        return validate_config(self, settings)


# =============================================================================
# FIELD CHECKS
# =============================================================================

def _require(value: Any, field: str) -> Any:
    if value is None:
        raise InvalidParameter(field, "can not be NULL")
    return value


def _check_int(value: Any, field: str) -> int:
    _require(value, field)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameter(field, f"must be an integer, got {type(value).__name__}")
    return value


def _check_probability(value: Any, field: str) -> float:
    _require(value, field)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameter(field, f"must be a number, got {type(value).__name__}")
    value = float(value)
    if math.isnan(value) or not (0.0 <= value <= 1.0):
        raise InvalidParameter(field, f"must be between 0.0 and 1.0, got {value}")
    return value


def _check_name(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidParameter(field, f"must be a non-empty string, got {value!r}")
    return value


def _check_properties(value: Any, field: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidParameter(field, f"must be a map, got {type(value).__name__}")
    return value


# =============================================================================
# PARAMETER VALIDATOR
# =============================================================================

def validate_config(config: TopologyConfig, settings=None) -> TopologyConfig:
    """
    Check every field of a config and return its normalized form.

    Rules shared by all topologies:
    - graph name and the primary size parameters are required
    - omitted labels default to the store's default vertex/edge label
    - vertex and edge label must differ

    Raises:
        InvalidParameter: With .field naming the first offending parameter
    """
    if settings is None:
        from infrastructure.config import get_settings
        settings = get_settings()

    valid_types = [t.value for t in Topologies]
    if config.topology_type not in valid_types:
        raise InvalidParameter(
            "topology_type",
            f"must be one of {valid_types}, got {config.topology_type!r}",
        )
    topology = Topologies(config.topology_type)

    graph_name = _check_name(_require(config.graph_name, "graph_name"), "graph_name")

    numbers: Dict[str, Any] = {}

    if topology == Topologies.COMPLETE:
        n = _check_int(config.num_vertices, "num_vertices")
        if n < 0:
            raise InvalidParameter("num_vertices", f"must be >= 0, got {n}")
        numbers["num_vertices"] = n

    elif topology == Topologies.ERDOS_RENYI_GNP:
        n = _check_int(config.num_vertices, "num_vertices")
        if n < 0:
            raise InvalidParameter("num_vertices", f"must be >= 0, got {n}")
        numbers["num_vertices"] = n
        numbers["edge_probability"] = _check_probability(
            config.edge_probability, "edge_probability"
        )

    elif topology == Topologies.ERDOS_RENYI_GNM:
        n = _check_int(config.num_vertices, "num_vertices")
        if n < 0:
            raise InvalidParameter("num_vertices", f"must be >= 0, got {n}")
        m = _check_int(config.num_edges, "num_edges")
        limit = max_simple_edges(n)
        if not (0 <= m <= limit):
            raise InvalidParameter(
                "num_edges",
                f"must be between 0 and n(n-1)/2 = {limit}, got {m}",
            )
        numbers["num_vertices"] = n
        numbers["num_edges"] = m

    elif topology == Topologies.TADPOLE:
        cycle = _check_int(config.cycle_size, "cycle_size")
        if cycle < 3:
            raise InvalidParameter("cycle_size", f"must be >= 3, got {cycle}")
        path = _check_int(config.path_size, "path_size")
        if path < 1:
            raise InvalidParameter("path_size", f"must be >= 1, got {path}")
        numbers["cycle_size"] = cycle
        numbers["path_size"] = path

    elif topology == Topologies.WATTS_STROGATZ:
        n = _check_int(config.num_vertices, "num_vertices")
        k = _check_int(config.k_neighbors, "k_neighbors")
        if k < 2:
            raise InvalidParameter("k_neighbors", f"must be >= 2, got {k}")
        if k % 2 != 0:
            raise InvalidParameter("k_neighbors", f"must be even, got {k}")
        if n <= k:
            raise InvalidParameter(
                "num_vertices", f"must be > k_neighbors, got {n} <= {k}"
            )
        numbers["num_vertices"] = n
        numbers["k_neighbors"] = k
        numbers["rewire_prob"] = _check_probability(config.rewire_prob, "rewire_prob")

    vertex_label = (
        settings.default_vertex_label
        if config.vertex_label is None
        else _check_name(config.vertex_label, "vertex_label")
    )
    edge_label = (
        settings.default_edge_label
        if config.edge_label is None
        else _check_name(config.edge_label, "edge_label")
    )
    if vertex_label == edge_label:
        raise InvalidParameter("edge_label", "vertex and edge label can not be same")

    vertex_properties = _check_properties(config.vertex_properties, "vertex_properties")
    edge_properties = _check_properties(config.edge_properties, "edge_properties")

    if topology == Topologies.COMPLETE:
        # One edge record per unordered pair; no reverse edges.
        if config.bidirectional:
            raise InvalidParameter(
                "bidirectional", "complete graphs are generated with one edge per pair"
            )
        bidirectional = False
    elif config.bidirectional is None:
        bidirectional = settings.default_bidirectional
    elif isinstance(config.bidirectional, bool):
        bidirectional = config.bidirectional
    else:
        raise InvalidParameter(
            "bidirectional",
            f"must be a boolean, got {type(config.bidirectional).__name__}",
        )

    return msgspec.structs.replace(
        config,
        topology_type=topology.value,
        graph_name=graph_name,
        vertex_label=vertex_label,
        edge_label=edge_label,
        vertex_properties=vertex_properties,
        edge_properties=edge_properties,
        bidirectional=bidirectional,
        **numbers,
    )
