"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Iterator

DISPLAY_FORMAT = "%d %b %Y, %H:%M"


class TaskKind(Enum):
    """Task variant tag, as written in the save file."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


class _Completable:
    """Done-flag behaviour shared by every task variant."""

    done: bool
    description: str
    kind: TaskKind

    def __post_init__(self) -> None:
        if not self.description:
            raise ValueError("Task description must not be empty")

    def __setattr__(self, name: str, value) -> None:
        # description is set once, by __init__
        if name == "description" and "description" in self.__dict__:
            raise AttributeError("Task description cannot be changed")
        super().__setattr__(name, value)

    def mark(self) -> None:
        self.done = True

    def unmark(self) -> None:
        self.done = False

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def _prefix(self) -> str:
        return f"[{self.kind.value}][{self.status_icon}] {self.description}"


@dataclass
class Todo(_Completable):
    """A plain to-do with no time attached."""

    description: str
    done: bool = False

    @property
    def kind(self) -> TaskKind:
        return TaskKind.TODO

    def falls_on(self, day: date) -> bool:
        return False

    def __str__(self) -> str:
        return self._prefix()


@dataclass
class Deadline(_Completable):
    """A task that must be done by a given time."""

    description: str
    due: datetime
    done: bool = False

    @property
    def kind(self) -> TaskKind:
        return TaskKind.DEADLINE

    def falls_on(self, day: date) -> bool:
        return self.due.date() == day

    def __str__(self) -> str:
        return f"{self._prefix()} (by: {self.due.strftime(DISPLAY_FORMAT)})"


@dataclass
class Event(_Completable):
    """A task occupying a time range."""

    description: str
    start: datetime
    end: datetime
    done: bool = False

    @property
    def kind(self) -> TaskKind:
        return TaskKind.EVENT

    def falls_on(self, day: date) -> bool:
        """True if any part of the event happens on the given day."""
        return self.start.date() <= day <= self.end.date()

    def __str__(self) -> str:
        return (
            f"{self._prefix()} (from: {self.start.strftime(DISPLAY_FORMAT)}"
            f" to: {self.end.strftime(DISPLAY_FORMAT)})"
        )


Task = Todo | Deadline | Event


class TaskList:
    """
    The in-memory task list owned by the command loop.

    Indices are 0-based. Out-of-range indices raise IndexError; negative
    indices are never accepted.
    """

    def __init__(self, tasks: list[Task] | None = None):
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self._tasks == other._tasks

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise IndexError(f"No task at index {index}")

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def add(self, task: Task) -> Task:
        self._tasks.append(task)
        return task

    def delete(self, index: int) -> Task:
        """Remove and return the task at index."""
        self._check_index(index)
        return self._tasks.pop(index)

    def mark(self, index: int) -> Task:
        task = self.get(index)
        task.mark()
        return task

    def unmark(self, index: int) -> Task:
        task = self.get(index)
        task.unmark()
        return task

    def numbered(self) -> list[tuple[int, Task]]:
        """Tasks paired with their 1-based position."""
        return list(enumerate(self._tasks, start=1))

    def find_by_keyword(self, keyword: str) -> list[tuple[int, Task]]:
        """
        Tasks whose description contains keyword (case-insensitive).

        Pure function - no I/O. Positions refer to the full list.
        """
        needle = keyword.lower()
        return [(n, t) for n, t in self.numbered() if needle in t.description.lower()]

    def find_by_date(self, day: date) -> list[tuple[int, Task]]:
        """Deadlines due on day and events spanning day."""
        return [(n, t) for n, t in self.numbered() if t.falls_on(day)]
