"""
Save-file codec - one task per line.

    T | 1 | read book
    D | 0 | submit report | 2024-10-10T18:00
    E | 0 | trip | 2024-01-01T00:00 | 2024-01-05T00:00

Fields are separated by '|' and trimmed. DONE is 0 or 1; date-times are
ISO-8601. Pure functions - no I/O.
"""

import re
from datetime import datetime
from typing import Iterable, Iterator

from .tasks import Deadline, Event, Task, TaskKind, Todo

SEPARATOR = "|"

TIMESTAMP_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d{1,6})?)?", re.ASCII)

# Number of fields each task type occupies on a line
FIELD_COUNTS = {
    TaskKind.TODO.value: 3,
    TaskKind.DEADLINE.value: 4,
    TaskKind.EVENT.value: 5,
}


def can_store(description: str) -> bool:
    """True if description survives a write and read of the save file unchanged."""
    return (
        bool(description)
        and description == description.strip()
        and SEPARATOR not in description
        and "\n" not in description
    )


def parse_timestamp(text: str) -> datetime:
    """Strict ISO-8601 date-time; raises ValueError for anything else."""
    if not TIMESTAMP_PATTERN.fullmatch(text):
        raise ValueError(f"Not an ISO-8601 date-time: {text!r}")
    return datetime.fromisoformat(text)


def format_timestamp(value: datetime) -> str:
    """ISO-8601 to the minute, keeping seconds only when present."""
    if value.second or value.microsecond:
        return value.isoformat()
    return value.isoformat(timespec="minutes")


def encode(task: Task) -> str:
    """Serialize a task into one save-file line.

    Raises ValueError for a description the file format cannot hold and
    TypeError for anything that is not a task.
    """
    match task:
        case Todo():
            times = []
        case Deadline():
            times = [format_timestamp(task.due)]
        case Event():
            times = [format_timestamp(task.start), format_timestamp(task.end)]
        case _:
            raise TypeError(f"Cannot encode {type(task).__name__}")
    if not can_store(task.description):
        raise ValueError(f"Cannot store description {task.description!r}")
    fields = [task.kind.value, "1" if task.done else "0", task.description, *times]
    return f" {SEPARATOR} ".join(fields)


def decode(line: str) -> Task | None:
    """
    Parse one save-file line.

    Returns None for anything unrecognized: a DONE flag other than 0/1, an
    unknown type, the wrong number of fields, an empty description or an
    unparsable date-time. Never raises.
    """
    fields = [f.strip() for f in line.split(SEPARATOR)]
    task_type = fields[0]

    if FIELD_COUNTS.get(task_type) != len(fields):
        return None

    done_flag, description = fields[1], fields[2]
    if done_flag not in ("0", "1") or not description:
        return None
    done = done_flag == "1"

    try:
        match task_type:
            case "T":
                return Todo(description, done=done)
            case "D":
                return Deadline(description, parse_timestamp(fields[3]), done=done)
            case "E":
                return Event(
                    description,
                    parse_timestamp(fields[3]),
                    parse_timestamp(fields[4]),
                    done=done,
                )
    except ValueError:
        return None
    return None


def decode_lines(lines: Iterable[str]) -> Iterator[tuple[int, Task | None]]:
    """Decode a whole save file, yielding (1-based line number, task or None). Blank lines are skipped."""
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        yield number, decode(line)


def encode_all(tasks: Iterable[Task]) -> str:
    """Serialize tasks into save-file content, newline-terminated."""
    return "".join(f"{encode(t)}\n" for t in tasks)
