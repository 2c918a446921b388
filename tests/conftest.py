"""Shared fixtures."""

import pytest

from tally.core.notices import Notice


class RecordingSink:
    """MessageSink that remembers every notice it receives."""

    def __init__(self):
        self.notices: list[Notice] = []

    def notify(self, notice: Notice) -> None:
        self.notices.append(notice)


@pytest.fixture
def sink():
    return RecordingSink()
