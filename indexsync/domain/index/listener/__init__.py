"""Index domain listeners."""

from indexsync.domain.index.listener.lifecycle_hook import IndexLifecycleHook, IndexOutcome

__all__ = [
    "IndexLifecycleHook",
    "IndexOutcome",
]
