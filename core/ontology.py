"""
TOPOFORGE ONTOLOGY - The Dictionary of the System

If schemas.py is the Grammar (how we structure records),
ontology.py is the Dictionary (the words we can use).

This module defines:
- Enums: The vocabulary (LabelKind, GenerationState)
- Store defaults: label names used when a caller omits them
- Element id layout: how (label id, sequence value) packs into one integer

Key Principle: a generated graph is nothing more than labeled vertices and
labeled edges. Every element belongs to exactly one label, and every label
owns exactly one identifier sequence.
"""
from enum import Enum


# =============================================================================
# ENUMS (The Vocabulary)
# =============================================================================

class LabelKind(str, Enum):
    """Namespaces a label can live in. Vertex and edge labels never mix."""
    VERTEX = "v"
    EDGE = "e"


class GenerationState(str, Enum):
    """
    Lifecycle of one generator invocation.

    VALIDATING -> ALLOCATING_VERTICES -> EMITTING_EDGES -> DONE,
    with FAILED reachable from every non-terminal state.
    """
    VALIDATING = "validating"
    ALLOCATING_VERTICES = "allocating_vertices"
    EMITTING_EDGES = "emitting_edges"
    DONE = "done"
    FAILED = "failed"


# Legal forward transitions; FAILED is handled separately.
STATE_TRANSITIONS = {
    GenerationState.VALIDATING: GenerationState.ALLOCATING_VERTICES,
    GenerationState.ALLOCATING_VERTICES: GenerationState.EMITTING_EDGES,
    GenerationState.EMITTING_EDGES: GenerationState.DONE,
}

TERMINAL_STATES = frozenset({GenerationState.DONE, GenerationState.FAILED})


def can_transition(current: GenerationState, target: GenerationState) -> bool:
    """True if the state machine allows moving from current to target."""
    if current in TERMINAL_STATES:
        return False
    if target == GenerationState.FAILED:
        return True
    return STATE_TRANSITIONS.get(current) == target


# =============================================================================
# STORE DEFAULTS
# =============================================================================

DEFAULT_VERTEX_LABEL = "_ag_label_vertex"
DEFAULT_EDGE_LABEL = "_ag_label_edge"


# =============================================================================
# ELEMENT ID LAYOUT
# =============================================================================

# Upper 16 bits carry the label id, lower 48 bits the sequence value.
ENTRY_ID_BITS = 48
LABEL_ID_BITS = 16
ENTRY_ID_MAX = (1 << ENTRY_ID_BITS) - 1
LABEL_ID_MAX = (1 << LABEL_ID_BITS) - 1
ENTRY_ID_MIN = 1
