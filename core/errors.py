"""
TOPOFORGE ERRORS - The failure taxonomy shared by engine and store.

InvalidParameter  - caught before any mutation, never leaves partial state
AllocationError   - identifier source exhausted or scratch buffer refused
SinkError         - the store rejected a write
CatalogError      - a graph or label lookup failed

The engine never retries and never rolls back. Whatever was written before a
failure stays written; the caller's enclosing transaction decides its fate.
"""
from typing import Optional


class GenerationError(Exception):
    """Base exception for topology generation."""

    def __init__(self, message: str):
        super().__init__(message)
        # Filled in by the generator with the GenerationState the error surfaced in.
        self.state = None


class InvalidParameter(GenerationError, ValueError):
    """Raised when a generation parameter is missing or out of range."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class AllocationError(GenerationError):
    """Raised when an identifier or scratch buffer cannot be allocated."""
    pass


class SinkError(GenerationError):
    """Raised by a graph sink that refuses to persist a vertex or edge."""

    def __init__(self, message: str, graph_name: Optional[str] = None):
        self.graph_name = graph_name
        super().__init__(message)


class CatalogError(GenerationError):
    """Raised when a graph or label cannot be found in the catalog."""

    def __init__(self, name: str, message: Optional[str] = None):
        self.name = name
        super().__init__(message or f"Not found in catalog: {name}")
