"""Console message sink adapter."""

import click

from tally.core.notices import Notice

MESSAGES = {
    Notice.MALFORMED_COMMAND_ARGUMENTS: (
        "That command is missing something. Try 'deadline <task> /by <date>' "
        "or 'event <task> /from <date> /to <date>'."
    ),
    Notice.NON_INTEGER_INDEX: "Task numbers must be whole numbers, e.g. 'mark 2'.",
    Notice.INVALID_DATE_FORMAT: "Dates must look like dd-mm-yyyy, e.g. 10-10-2024.",
    Notice.INVALID_DATETIME_FORMAT: "Times must look like dd-mm-yyyy HH:MM, e.g. 10-10-2024 18:00.",
    Notice.UNRECOGNIZED_SAVE_FILE_ENTRY: "Skipped a line in the save file that could not be read.",
}


class ConsoleMessageSink:
    """
    Prints notices to stderr.

    Implements MessageSink protocol.
    """

    def __init__(self, err: bool = True):
        self.err = err

    def notify(self, notice: Notice) -> None:
        click.echo(MESSAGES[notice], err=self.err)
