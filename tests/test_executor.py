"""Tests for command execution."""

from datetime import date, datetime
from unittest.mock import MagicMock

import pytest

from tally.core.commands import (
    AddDeadline,
    AddEvent,
    AddTodo,
    Delete,
    FindByDate,
    FindByKeyword,
    Goodbye,
    Incorrect,
    List,
    Mark,
    Unmark,
)
from tally.core.notices import Notice
from tally.core.tasks import Deadline, Event, TaskList, Todo
from tally.executor import execute


@pytest.fixture
def tasks():
    return TaskList(
        [
            Todo("read book"),
            Deadline("return book", datetime(2025, 1, 15, 17, 0)),
        ]
    )


@pytest.fixture
def store():
    return MagicMock()


class TestAddCommands:
    def test_add_todo(self, tasks, store):
        reply = execute(AddTodo("water plants"), tasks, store)

        assert len(tasks) == 3
        assert tasks.get(2) == Todo("water plants")
        assert "[T][ ] water plants" in reply.message
        assert "Now you have 3 tasks" in reply.message
        store.save.assert_called_once_with(tasks)

    def test_add_deadline(self, tasks, store):
        execute(AddDeadline("submit", datetime(2024, 10, 10)), tasks, store)
        assert tasks.get(2) == Deadline("submit", datetime(2024, 10, 10))

    def test_add_event(self, tasks, store):
        execute(AddEvent("trip", datetime(2024, 1, 1), datetime(2024, 1, 5)), tasks, store)
        assert tasks.get(2) == Event("trip", datetime(2024, 1, 1), datetime(2024, 1, 5))

    def test_singular_count(self, store):
        reply = execute(AddTodo("only one"), TaskList(), store)
        assert "Now you have 1 task in the list." in reply.message


class TestIndexCommands:
    def test_delete(self, tasks, store):
        reply = execute(Delete(0), tasks, store)
        assert len(tasks) == 1
        assert "read book" in reply.message
        store.save.assert_called_once_with(tasks)

    def test_mark(self, tasks, store):
        reply = execute(Mark(1), tasks, store)
        assert tasks.get(1).done is True
        assert "[D][X] return book" in reply.message
        store.save.assert_called_once()

    def test_unmark(self, tasks, store):
        tasks.mark(0)
        execute(Unmark(0), tasks, store)
        assert tasks.get(0).done is False

    @pytest.mark.parametrize("command", [Delete(5), Mark(2), Unmark(-1)])
    def test_out_of_range_leaves_list_unchanged(self, tasks, store, command):
        reply = execute(command, tasks, store)
        assert f"no task numbered {command.index + 1}" in reply.message
        assert len(tasks) == 2
        store.save.assert_not_called()


class TestQueryCommands:
    def test_list(self, tasks, store):
        reply = execute(List(), tasks, store)
        assert reply.message.splitlines()[1:] == [
            "1. [T][ ] read book",
            "2. [D][ ] return book (by: 15 Jan 2025, 17:00)",
        ]
        store.save.assert_not_called()

    def test_list_empty(self, store):
        assert execute(List(), TaskList(), store).message == "Your list is empty."

    def test_find_by_keyword(self, tasks):
        reply = execute(FindByKeyword("RETURN"), tasks)
        assert "2. [D][ ] return book" in reply.message
        assert "read book" not in reply.message

    def test_find_by_keyword_no_match(self, tasks):
        assert "No tasks match 'gym'" in execute(FindByKeyword("gym"), tasks).message

    def test_find_by_date(self, tasks):
        reply = execute(FindByDate(date(2025, 1, 15)), tasks)
        assert "15 Jan 2025" in reply.message
        assert "2. [D][ ] return book" in reply.message

    def test_find_by_date_nothing(self, tasks):
        assert "Nothing scheduled" in execute(FindByDate(date(2025, 2, 1)), tasks).message


class TestSessionCommands:
    def test_goodbye_ends_session(self, tasks, store):
        reply = execute(Goodbye(), tasks, store)
        assert reply.exit is True
        store.save.assert_not_called()

    def test_incorrect_shows_help(self, tasks, store):
        reply = execute(Incorrect(Notice.NON_INTEGER_INDEX), tasks, store)
        assert reply.exit is False
        assert "deadline" in reply.message
        store.save.assert_not_called()

    def test_works_without_store(self, tasks):
        execute(AddTodo("no store"), tasks)
        assert len(tasks) == 3
