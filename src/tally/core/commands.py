"""Command values produced by the parser and consumed by the executor."""

from dataclasses import dataclass
from datetime import date, datetime

from .notices import Notice


@dataclass(frozen=True)
class AddTodo:
    description: str


@dataclass(frozen=True)
class AddDeadline:
    description: str
    due: datetime


@dataclass(frozen=True)
class AddEvent:
    description: str
    start: datetime
    end: datetime


@dataclass(frozen=True)
class Delete:
    index: int  # 0-based


@dataclass(frozen=True)
class Mark:
    index: int


@dataclass(frozen=True)
class Unmark:
    index: int


@dataclass(frozen=True)
class List:
    pass


@dataclass(frozen=True)
class FindByDate:
    day: date


@dataclass(frozen=True)
class FindByKeyword:
    keyword: str


@dataclass(frozen=True)
class Goodbye:
    pass


@dataclass(frozen=True)
class Incorrect:
    """Input that could not be turned into a runnable command."""

    reason: Notice | None = None


Command = (
    AddTodo
    | AddDeadline
    | AddEvent
    | Delete
    | Mark
    | Unmark
    | List
    | FindByDate
    | FindByKeyword
    | Goodbye
    | Incorrect
)

MUTATING = (AddTodo, AddDeadline, AddEvent, Delete, Mark, Unmark)
