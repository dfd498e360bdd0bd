"""
TOPOFORGE GENERATION LOGGER - Structured record of every generator run.

Every state transition of a generator invocation, and the summary of each
finished (or failed) run, becomes a GenerationEvent. Events are kept in an
in-memory ring buffer and can be appended to daily JSONL files for later
inspection of how a benchmark dataset was seeded.

Architecture:
- GenerationLogger: Core logging interface
- FileLogger: JSONL persistence (msgspec-encoded)
- EventBuffer: In-memory ring buffer for recent events

Usage:
    logger = GenerationLogger()
    logger.log_state_changed("social", "watts_strogatz", "validating", "allocating_vertices")
    logger.log_generation_completed("social", "watts_strogatz", vertices=100, edges=400, seed=7)

    for event in logger.get_events_for_graph("social"):
        print(f"{event.timestamp}: {event.event_type}")
"""
import msgspec
from typing import Optional, List, Callable
from datetime import datetime, timezone
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from collections import deque
import io
import logging
import threading

_log = logging.getLogger(__name__)


# =============================================================================
# EVENT SCHEMA
# =============================================================================

class GenerationEventType(str, Enum):
    """Types of generation events."""
    STATE_CHANGED = "STATE_CHANGED"
    GENERATION_COMPLETED = "GENERATION_COMPLETED"
    GENERATION_FAILED = "GENERATION_FAILED"


class GenerationEvent(msgspec.Struct, kw_only=True):
    """One entry of the generation log."""
    timestamp: str
    sequence: int
    event_type: str                     # GenerationEventType value
    graph_name: str
    topology: str
    old_state: Optional[str] = None
    new_state: Optional[str] = None
    vertex_count: int = 0
    edge_count: int = 0
    seed: Optional[int] = None
    error_type: Optional[str] = None
    error_message: Optional[str] = None


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class LoggerConfig:
    """Configuration for the generation logger."""
    enable_file_log: bool = False       # Enable file-based logging
    log_path: Optional[Path] = None     # Path for log files
    buffer_size: int = 10000            # In-memory buffer size

    def __post_init__(self):
        if self.log_path is None:
            self.log_path = Path("./workspace/logs")

    @classmethod
    def from_settings(cls, settings) -> "LoggerConfig":
        """Build from infrastructure.config.GeneratorSettings."""
        return cls(
            enable_file_log=settings.enable_file_log,
            log_path=Path(settings.log_path),
            buffer_size=settings.event_buffer_size,
        )


# =============================================================================
# EVENT BUFFER
# =============================================================================

class EventBuffer:
    """
    Thread-safe ring buffer for recent generation events.

    Provides O(1) append and O(n) query for filtering.
    """

    def __init__(self, max_size: int = 10000):
        self._buffer: deque[GenerationEvent] = deque(maxlen=max_size)
        self._lock = threading.RLock()
        self._sequence = 0

    def append(self, event: GenerationEvent) -> None:
        with self._lock:
            self._buffer.append(event)

    def get_last(self, n: int) -> List[GenerationEvent]:
        """Get the last n events."""
        with self._lock:
            items = list(self._buffer)
            return items[-n:] if len(items) >= n else items

    def get_by_graph(self, graph_name: str) -> List[GenerationEvent]:
        with self._lock:
            return [e for e in self._buffer if e.graph_name == graph_name]

    def get_by_type(self, event_type: str) -> List[GenerationEvent]:
        with self._lock:
            return [e for e in self._buffer if e.event_type == event_type]

    def next_sequence(self) -> int:
        with self._lock:
            self._sequence += 1
            return self._sequence

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)


# =============================================================================
# FILE LOGGER
# =============================================================================

class FileLogger:
    """
    File-based event logger.

    Writes events as newline-delimited JSON. One file per UTC day.
    """

    def __init__(self, log_path: Path):
        self._log_path = log_path
        self._current_file: Optional[io.TextIOWrapper] = None
        self._current_date: Optional[str] = None
        self._lock = threading.Lock()
        self._encoder = msgspec.json.Encoder()

        log_path.mkdir(parents=True, exist_ok=True)

    def write(self, event: GenerationEvent) -> None:
        """Append an event to today's file."""
        with self._lock:
            self._ensure_file()
            line = self._encoder.encode(event).decode("utf-8") + "\n"
            self._current_file.write(line)
            self._current_file.flush()

    def _ensure_file(self) -> None:
        today = datetime.now(timezone.utc).strftime("%Y-%m-%d")

        if self._current_date != today:
            if self._current_file:
                self._current_file.close()

            filepath = self._log_path / f"generations_{today}.jsonl"
            self._current_file = open(filepath, "a", encoding="utf-8")
            self._current_date = today

    def close(self) -> None:
        with self._lock:
            if self._current_file:
                self._current_file.close()
                self._current_file = None

    def read_log(self, date: str) -> List[GenerationEvent]:
        """Read events from a specific date's log. Malformed lines are skipped."""
        filepath = self._log_path / f"generations_{date}.jsonl"

        if not filepath.exists():
            return []

        events = []
        decoder = msgspec.json.Decoder(type=GenerationEvent)

        with open(filepath, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    events.append(decoder.decode(line.encode()))
                except msgspec.DecodeError as e:
                    _log.warning("Skipping malformed event at %s:%d: %s", filepath, lineno, e)

        return events


# =============================================================================
# GENERATION LOGGER (Main Interface)
# =============================================================================

class GenerationLogger:
    """
    Main logging interface for generator runs.

    Events always go to the in-memory buffer; file logging is optional.
    """

    def __init__(self, config: Optional[LoggerConfig] = None):
        self.config = config or LoggerConfig()

        self._buffer = EventBuffer(self.config.buffer_size)
        self._file_logger: Optional[FileLogger] = None

        if self.config.enable_file_log and self.config.log_path:
            self._file_logger = FileLogger(Path(self.config.log_path))

        self._subscribers: List[Callable[[GenerationEvent], None]] = []

    def _now(self) -> str:
        return datetime.now(timezone.utc).isoformat()

    def _emit(self, event: GenerationEvent) -> None:
        self._buffer.append(event)

        if self._file_logger:
            self._file_logger.write(event)

        for subscriber in self._subscribers:
            subscriber(event)

    # =========================================================================
    # LOGGING METHODS
    # =========================================================================

    def log_state_changed(
        self,
        graph_name: str,
        topology: str,
        old_state: str,
        new_state: str,
    ) -> GenerationEvent:
        """Log a generator state transition."""
        event = GenerationEvent(
            timestamp=self._now(),
            sequence=self._buffer.next_sequence(),
            event_type=GenerationEventType.STATE_CHANGED.value,
            graph_name=graph_name,
            topology=topology,
            old_state=old_state,
            new_state=new_state,
        )
        self._emit(event)
        return event

    def log_generation_completed(
        self,
        graph_name: str,
        topology: str,
        vertices: int,
        edges: int,
        seed: Optional[int] = None,
    ) -> GenerationEvent:
        """Log the summary of a successful run."""
        event = GenerationEvent(
            timestamp=self._now(),
            sequence=self._buffer.next_sequence(),
            event_type=GenerationEventType.GENERATION_COMPLETED.value,
            graph_name=graph_name,
            topology=topology,
            vertex_count=vertices,
            edge_count=edges,
            seed=seed,
        )
        self._emit(event)
        return event

    def log_generation_failed(
        self,
        graph_name: str,
        topology: str,
        state: str,
        error: BaseException,
        vertices: int = 0,
        edges: int = 0,
        seed: Optional[int] = None,
    ) -> GenerationEvent:
        """Log a failed run, with what had been written before the failure."""
        event = GenerationEvent(
            timestamp=self._now(),
            sequence=self._buffer.next_sequence(),
            event_type=GenerationEventType.GENERATION_FAILED.value,
            graph_name=graph_name,
            topology=topology,
            old_state=state,
            vertex_count=vertices,
            edge_count=edges,
            seed=seed,
            error_type=type(error).__name__,
            error_message=str(error),
        )
        self._emit(event)
        return event

    # =========================================================================
    # QUERY METHODS
    # =========================================================================

    def get_recent_events(self, n: int = 100) -> List[GenerationEvent]:
        return self._buffer.get_last(n)

    def get_events_for_graph(self, graph_name: str) -> List[GenerationEvent]:
        return self._buffer.get_by_graph(graph_name)

    def get_events_by_type(self, event_type: str) -> List[GenerationEvent]:
        return self._buffer.get_by_type(event_type)

    def get_state_trail(self, graph_name: str) -> List[str]:
        """
        States a graph's generator runs passed through, in order.

        Starts with the first old_state so the trail reads
        ["validating", "allocating_vertices", "emitting_edges", "done"].
        """
        trail: List[str] = []
        for event in self.get_events_by_type(GenerationEventType.STATE_CHANGED.value):
            if event.graph_name != graph_name:
                continue
            if not trail:
                trail.append(event.old_state)
            trail.append(event.new_state)
        return trail

    # =========================================================================
    # SUBSCRIPTION
    # =========================================================================

    def subscribe(self, callback: Callable[[GenerationEvent], None]) -> None:
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[GenerationEvent], None]) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def clear(self) -> None:
        self._buffer.clear()

    def close(self) -> None:
        if self._file_logger:
            self._file_logger.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

# Global logger instance
_global_logger: Optional[GenerationLogger] = None


def get_logger() -> GenerationLogger:
    """Get or create the global logger instance, configured from settings."""
    global _global_logger
    if _global_logger is None:
        from infrastructure.config import get_settings
        _global_logger = GenerationLogger(LoggerConfig.from_settings(get_settings()))
    return _global_logger


def configure_logger(config: LoggerConfig) -> GenerationLogger:
    """Configure and return a new global logger."""
    global _global_logger
    if _global_logger:
        _global_logger.close()
    _global_logger = GenerationLogger(config)
    return _global_logger


def reset_logger() -> None:
    """Close and drop the global logger."""
    global _global_logger
    if _global_logger:
        _global_logger.close()
    _global_logger = None
