"""
Unit tests for infrastructure/logger.py - GenerationLogger

Tests:
- Event creation for state changes, completions and failures
- Buffer queries and state trails
- Subscribers
- JSONL file persistence
"""
from datetime import datetime, timezone

from core.errors import SinkError
from infrastructure.config import GeneratorSettings
from infrastructure.logger import (
    EventBuffer,
    GenerationEventType,
    GenerationLogger,
    LoggerConfig,
    configure_logger,
    get_logger,
    reset_logger,
)


# =============================================================================
# EVENT TESTS
# =============================================================================

def test_state_changes_are_recorded(event_logger):
    """
    Validate STATE_CHANGED events.

    Verifies:
    - Sequence numbers increase
    - get_state_trail reconstructs the path for one graph only
    """
    event_logger.log_state_changed("a", "complete", "validating", "allocating_vertices")
    event_logger.log_state_changed("b", "tadpole", "validating", "allocating_vertices")
    event_logger.log_state_changed("a", "complete", "allocating_vertices", "emitting_edges")

    events = event_logger.get_recent_events()
    assert [e.sequence for e in events] == [1, 2, 3]
    assert event_logger.get_state_trail("a") == [
        "validating", "allocating_vertices", "emitting_edges",
    ]
    assert event_logger.get_state_trail("missing") == []


def test_completion_and_failure_events(event_logger):
    event_logger.log_generation_completed("g", "complete", vertices=4, edges=6, seed=None)
    event_logger.log_generation_failed(
        "g", "tadpole", "emitting_edges", SinkError("disk full"), vertices=5, edges=2, seed=7,
    )

    completed = event_logger.get_events_by_type(GenerationEventType.GENERATION_COMPLETED.value)
    failed = event_logger.get_events_by_type(GenerationEventType.GENERATION_FAILED.value)

    assert completed[0].vertex_count == 4
    assert completed[0].edge_count == 6
    assert failed[0].old_state == "emitting_edges"
    assert failed[0].error_type == "SinkError"
    assert failed[0].error_message == "disk full"
    assert failed[0].seed == 7
    assert len(event_logger.get_events_for_graph("g")) == 2


def test_subscribers(event_logger):
    received = []
    event_logger.subscribe(received.append)

    event_logger.log_generation_completed("g", "complete", vertices=1, edges=0)
    event_logger.unsubscribe(received.append)
    event_logger.log_generation_completed("g", "complete", vertices=1, edges=0)

    assert len(received) == 1


def test_buffer_is_bounded():
    buffer_logger = GenerationLogger(LoggerConfig(buffer_size=3))
    for i in range(5):
        buffer_logger.log_generation_completed(f"g{i}", "complete", vertices=i, edges=0)

    names = [e.graph_name for e in buffer_logger.get_recent_events()]
    assert names == ["g2", "g3", "g4"]


def test_event_buffer_get_last():
    buffer = EventBuffer(max_size=10)

    assert buffer.get_last(5) == []
    assert buffer.next_sequence() == 1
    assert buffer.next_sequence() == 2


# =============================================================================
# FILE LOG TESTS
# =============================================================================

def test_file_log_round_trip(tmp_path):
    """
    Validate JSONL persistence.

    Verifies:
    - Events are appended to generations_<date>.jsonl
    - read_log decodes them and skips malformed lines
    """
    with GenerationLogger(LoggerConfig(enable_file_log=True, log_path=tmp_path)) as file_logger:
        file_logger.log_state_changed("g", "complete", "validating", "allocating_vertices")
        file_logger.log_generation_completed("g", "complete", vertices=3, edges=3)

    today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    path = tmp_path / f"generations_{today}.jsonl"
    assert path.exists()

    with open(path, "a", encoding="utf-8") as f:
        f.write("{not json}\n")

    events = file_logger._file_logger.read_log(today)
    assert [e.event_type for e in events] == ["STATE_CHANGED", "GENERATION_COMPLETED"]
    assert events[1].edge_count == 3
    assert file_logger._file_logger.read_log("1999-01-01") == []


# =============================================================================
# GLOBAL LOGGER TESTS
# =============================================================================

def test_global_logger_lifecycle():
    configured = configure_logger(LoggerConfig(buffer_size=5))
    assert get_logger() is configured

    reset_logger()
    assert get_logger() is not configured


def test_logger_config_from_settings(tmp_path):
    settings = GeneratorSettings(event_buffer_size=12, log_path=str(tmp_path))

    config = LoggerConfig.from_settings(settings)

    assert config.buffer_size == 12
    assert config.log_path == tmp_path
    assert config.enable_file_log is False
