"""Task store interface."""

from typing import Protocol

from tally.core.tasks import TaskList


class TaskStore(Protocol):
    """Interface for persisting the task list between runs."""

    def load(self) -> TaskList:
        """Load every readable task. Missing storage means an empty list."""
        ...

    def save(self, tasks: TaskList) -> None:
        """Rewrite storage with the full task list."""
        ...
