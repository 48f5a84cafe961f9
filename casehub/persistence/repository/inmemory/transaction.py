"""Request-level rollback for the in-memory repositories."""

from typing import Any, Protocol


class Snapshottable(Protocol):
    def snapshot(self) -> Any: ...

    def restore(self, state: Any) -> None: ...


class InMemoryTransaction:
    """Snapshot of several in-memory repositories taken at request start.

    Gives the in-memory store the same all-or-nothing request semantics
    as the database session. Not safe for overlapping requests.
    """

    def __init__(self, repositories: list[Snapshottable]) -> None:
        self._repositories = repositories
        self._states = [repo.snapshot() for repo in repositories]

    def rollback(self) -> None:
        """Restore every repository to its state at request start."""
        for repo, state in zip(self._repositories, self._states):
            repo.restore(state)
