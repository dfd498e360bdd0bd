"""
Unit tests for core/schemas.py and core/ontology.py

Tests:
- ElementId packing, ordering and range checks
- Record serialization
- The generation state machine
"""
import pytest

from core.ontology import (
    ENTRY_ID_MAX,
    LABEL_ID_MAX,
    GenerationState,
    can_transition,
)
from core.schemas import (
    EdgeRecord,
    ElementId,
    VertexRecord,
    copy_properties,
    deserialize_edges,
    deserialize_vertices,
    serialize_edges,
    serialize_vertices,
)


# =============================================================================
# ELEMENT ID TESTS
# =============================================================================

def test_element_id_packing():
    """
    Validate the 16/48-bit packed form.

    Verifies:
    - Label id sits in the upper 16 bits
    - from_int() inverts as_int()
    """
    eid = ElementId(label_id=3, entry_id=17)

    assert eid.as_int() == (3 << 48) | 17
    assert ElementId.from_int(eid.as_int()) == eid
    assert str(eid) == "3.17"


def test_element_id_extremes():
    eid = ElementId(label_id=LABEL_ID_MAX, entry_id=ENTRY_ID_MAX)

    assert eid.as_int() == (1 << 64) - 1
    assert ElementId.from_int(eid.as_int()) == eid


def test_element_id_ordering_matches_packed_order():
    """Validate that field order equals packed integer order."""
    ids = [ElementId(2, 1), ElementId(1, 9), ElementId(1, 2)]

    assert sorted(ids) == sorted(ids, key=ElementId.as_int)
    assert sorted(ids)[0] == ElementId(1, 2)


def test_element_id_is_hashable():
    assert len({ElementId(1, 1), ElementId(1, 1), ElementId(1, 2)}) == 2


@pytest.mark.parametrize("label_id,entry_id", [
    (-1, 1),
    (LABEL_ID_MAX + 1, 1),
    (1, 0),
    (1, ENTRY_ID_MAX + 1),
])
def test_element_id_out_of_range(label_id, entry_id):
    """Validate that sequence value 0 and oversize fields are rejected."""
    with pytest.raises(ValueError):
        ElementId(label_id=label_id, entry_id=entry_id)


# =============================================================================
# RECORD TESTS
# =============================================================================

def test_record_serialization():
    """
    Validate JSON and msgpack persistence of records.

    Verifies:
    - Vertices and edges survive encode/decode in both formats
    """
    a, b = ElementId(1, 1), ElementId(1, 2)
    vertices = [VertexRecord(id=a, label="Person", properties={"name": "ada"})]
    edges = [EdgeRecord(id=ElementId(2, 1), label="KNOWS", start_id=a, end_id=b)]

    for fmt in ("json", "msgpack"):
        assert deserialize_vertices(serialize_vertices(vertices, fmt), fmt) == vertices
        assert deserialize_edges(serialize_edges(edges, fmt), fmt) == edges


def test_copy_properties():
    original = {"k": 1}

    copied = copy_properties(original)

    assert copied == original
    assert copied is not original
    assert copy_properties(None) == {}


# =============================================================================
# STATE MACHINE TESTS
# =============================================================================

def test_forward_transitions():
    """Validate the only legal forward path."""
    assert can_transition(GenerationState.VALIDATING, GenerationState.ALLOCATING_VERTICES)
    assert can_transition(GenerationState.ALLOCATING_VERTICES, GenerationState.EMITTING_EDGES)
    assert can_transition(GenerationState.EMITTING_EDGES, GenerationState.DONE)

    assert not can_transition(GenerationState.VALIDATING, GenerationState.EMITTING_EDGES)
    assert not can_transition(GenerationState.EMITTING_EDGES, GenerationState.ALLOCATING_VERTICES)


@pytest.mark.parametrize("state", [
    GenerationState.VALIDATING,
    GenerationState.ALLOCATING_VERTICES,
    GenerationState.EMITTING_EDGES,
])
def test_failed_reachable_from_running_states(state):
    assert can_transition(state, GenerationState.FAILED)


def test_terminal_states_are_final():
    """Validate that DONE and FAILED have no outgoing transitions."""
    for terminal in (GenerationState.DONE, GenerationState.FAILED):
        for target in GenerationState:
            assert not can_transition(terminal, target)
