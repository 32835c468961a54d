from __future__ import annotations


class TaskStoreError(Exception):
    """Base class for failures reported by the task store."""


class ValidationError(TaskStoreError, ValueError):
    """Caller supplied a value the store refuses to persist."""


class StorageUnavailable(TaskStoreError):
    """The database could not complete a write."""
