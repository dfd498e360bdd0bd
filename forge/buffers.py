"""
Working vertex array owned by one generator invocation.

Generators record the id of every vertex they create, in creation order, so
edges can refer to vertices by index. The array is a context manager: it is
released on every exit path, including an exception raised halfway through
filling it.

Usage:
    with WorkingVertexArray(capacity=n, limit=settings.max_working_vertices) as vertices:
        for _ in range(n):
            vertices.append(allocate_vertex())
        emit_edges(vertices)
    # vertices is empty and closed here
"""
from typing import Iterator, List, Optional

from core.errors import AllocationError
from core.schemas import ElementId


class WorkingVertexArray:
    """Bounded, append-only sequence of vertex ids."""

    def __init__(self, capacity: int, limit: Optional[int] = None):
        """
        Args:
            capacity: Number of vertex ids the caller will append
            limit: Largest capacity allowed; None means unbounded

        Raises:
            AllocationError: If capacity exceeds limit
        """
        if capacity < 0:
            raise AllocationError(f"Negative working array capacity: {capacity}")
        if limit is not None and capacity > limit:
            raise AllocationError(
                f"Working vertex array of {capacity} exceeds limit of {limit}"
            )
        self.capacity = capacity
        self._items: List[ElementId] = []
        self._released = False

    def append(self, vertex_id: ElementId) -> None:
        if self._released:
            raise AllocationError("Working vertex array already released")
        if len(self._items) >= self.capacity:
            raise AllocationError(f"Working vertex array full ({self.capacity})")
        self._items.append(vertex_id)

    def release(self) -> None:
        """Drop all ids. Safe to call more than once."""
        self._items.clear()
        self._released = True

    @property
    def released(self) -> bool:
        return self._released

    @property
    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def snapshot(self) -> List[ElementId]:
        """Copy of the ids collected so far, outliving release()."""
        return list(self._items)

    def __getitem__(self, index: int) -> ElementId:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ElementId]:
        return iter(self._items)

    def __enter__(self) -> "WorkingVertexArray":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()
        return False
