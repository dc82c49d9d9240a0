"""Base class for engine objects that can be marked for destruction."""

from __future__ import annotations

__all__ = ["Object"]


class Object:
    """An engine object that can be flagged for removal."""

    def __init__(self) -> None:
        self._pending_destroy = False

    def destroy(self) -> None:
        """Mark the object for removal at the next cleanup."""
        self._pending_destroy = True

    def is_pending_destroy(self) -> bool:
        """Return whether the object has been marked for removal."""
        return self._pending_destroy