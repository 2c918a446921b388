"""Command execution layer between the parser and the CLI.

execute() applies one command to the task list, persists the list after
every mutating command, and returns the reply to show the user.
"""

import logging
from dataclasses import dataclass

from .core.commands import (
    MUTATING,
    AddDeadline,
    AddEvent,
    AddTodo,
    Command,
    Delete,
    FindByDate,
    FindByKeyword,
    Goodbye,
    Incorrect,
    List,
    Mark,
    Unmark,
)
from .core.parser import COMMAND_WORDS
from .core.tasks import Deadline, Event, Task, TaskList, Todo
from .ports.task_store import TaskStore

logger = logging.getLogger(__name__)

HELP_TEXT = "Sorry, I don't know what that means. Commands: " + ", ".join(COMMAND_WORDS)


@dataclass
class Reply:
    """What the assistant says back, and whether the session ends."""

    message: str
    exit: bool = False


def format_numbered(entries: list[tuple[int, Task]]) -> str:
    """Render tasks as a numbered list."""
    return "\n".join(f"{n}. {task}" for n, task in entries)


def _count_line(tasks: TaskList) -> str:
    noun = "task" if len(tasks) == 1 else "tasks"
    return f"Now you have {len(tasks)} {noun} in the list."


def _added(task: Task, tasks: TaskList) -> str:
    tasks.add(task)
    return f"Got it. I've added this task:\n  {task}\n{_count_line(tasks)}"


def _missing(index: int) -> Reply:
    return Reply(f"There is no task numbered {index + 1}.")


def execute(command: Command, tasks: TaskList, store: TaskStore | None = None) -> Reply:
    """Apply a command to the task list, saving afterwards if it changed anything."""
    try:
        reply = _apply(command, tasks)
    except IndexError:
        logger.debug(f"Index out of range for {command}")
        return _missing(command.index)

    if store is not None and isinstance(command, MUTATING):
        store.save(tasks)
    return reply


def _apply(command: Command, tasks: TaskList) -> Reply:
    match command:
        case AddTodo(description):
            return Reply(_added(Todo(description), tasks))
        case AddDeadline(description, due):
            return Reply(_added(Deadline(description, due), tasks))
        case AddEvent(description, start, end):
            return Reply(_added(Event(description, start, end), tasks))
        case Delete(index):
            task = tasks.delete(index)
            return Reply(f"Noted. I've removed this task:\n  {task}\n{_count_line(tasks)}")
        case Mark(index):
            task = tasks.mark(index)
            return Reply(f"Nice! I've marked this task as done:\n  {task}")
        case Unmark(index):
            task = tasks.unmark(index)
            return Reply(f"OK, I've marked this task as not done yet:\n  {task}")
        case List():
            if not len(tasks):
                return Reply("Your list is empty.")
            return Reply("Here are the tasks in your list:\n" + format_numbered(tasks.numbered()))
        case FindByKeyword(keyword):
            found = tasks.find_by_keyword(keyword)
            if not found:
                return Reply(f"No tasks match '{keyword}'.")
            return Reply("Here are the matching tasks in your list:\n" + format_numbered(found))
        case FindByDate(day):
            found = tasks.find_by_date(day)
            label = day.strftime("%d %b %Y")
            if not found:
                return Reply(f"Nothing scheduled on {label}.")
            return Reply(f"Here are the tasks on {label}:\n" + format_numbered(found))
        case Goodbye():
            return Reply("Bye. Hope to see you again soon!", exit=True)
        case Incorrect():
            return Reply(HELP_TEXT)
        case _:
            raise TypeError(f"Unknown command {type(command).__name__}")
