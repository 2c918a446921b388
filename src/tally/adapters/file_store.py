"""File-based task storage adapter."""

import logging
from pathlib import Path

from tally.core.codec import decode_lines, encode_all
from tally.core.notices import Notice
from tally.core.tasks import TaskList
from tally.ports.message_sink import MessageSink

logger = logging.getLogger(__name__)


class FileTaskStore:
    """
    Save-file task storage.

    Implements TaskStore protocol. The whole file is read at startup and
    rewritten after every change. Lines that cannot be decoded are skipped.
    """

    def __init__(self, path: Path | str, sink: MessageSink | None = None):
        self.path = Path(path).expanduser()
        self.sink = sink

    def load(self) -> TaskList:
        """Load all readable tasks. Returns an empty list if the file is missing."""
        if not self.path.exists():
            logger.debug(f"No save file at {self.path}, starting empty")
            return TaskList()

        tasks = TaskList()
        for number, task in decode_lines(self.path.read_text().splitlines()):
            if task is None:
                logger.warning(f"Skipping unrecognized save file entry at {self.path}:{number}")
                if self.sink is not None:
                    self.sink.notify(Notice.UNRECOGNIZED_SAVE_FILE_ENTRY)
                continue
            tasks.add(task)

        logger.debug(f"Loaded {len(tasks)} tasks from {self.path}")
        return tasks

    def save(self, tasks: TaskList) -> None:
        """Rewrite the save file with the full task list."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(encode_all(tasks))
        logger.debug(f"Saved {len(tasks)} tasks to {self.path}")
