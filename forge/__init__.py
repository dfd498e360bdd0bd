"""
TopoForge.Forge - Canonical Graph Topology Synthesis

The Forge writes graphs of known structure into a graph store, for seeding
test and benchmark datasets.

Components:
- params: TopologyConfig, Topologies and parameter validation
- random_source: seedable RandomSource passed into every run
- sampling: unordered pair ranking and sampling without replacement
- buffers: the working vertex array owned by one run
- topologist: GraphGenerator and one public operation per topology

Design Philosophy:
1. NO PYDANTIC: All schemas use msgspec.Struct
2. VALIDATE FIRST: Nothing is written for a rejected configuration
3. DETERMINISTIC: Reproducible via explicit seeds, never global random state
"""

from forge.params import (
    Topologies,
    TopologyConfig,
    combination,
    max_simple_edges,
    validate_config,
)
from forge.random_source import RandomSource
from forge.topologist import (
    GraphGenerator,
    GenerationResult,
    create_complete_graph,
    create_erdos_renyi_gnp,
    create_erdos_renyi_gnm,
    create_tadpole_graph,
    create_watts_strogatz,
    graph_stats,
)

__all__ = [
    # Params exports
    "Topologies",
    "TopologyConfig",
    "combination",
    "max_simple_edges",
    "validate_config",
    # Random source
    "RandomSource",
    # Topologist exports
    "GraphGenerator",
    "GenerationResult",
    "create_complete_graph",
    "create_erdos_renyi_gnp",
    "create_erdos_renyi_gnm",
    "create_tadpole_graph",
    "create_watts_strogatz",
    "graph_stats",
]
