"""Tally CLI - Personal task tracker."""

import json
import logging
from pathlib import Path

import click

from .adapters.console_sink import ConsoleMessageSink
from .adapters.file_store import FileTaskStore
from .config import Config, load_config
from .core.parser import parse_command
from .core.codec import format_timestamp
from .core.tasks import Deadline, Event, Task, TaskList
from .executor import execute

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Session:
    """Everything one invocation needs: config, sink and store."""

    def __init__(self, config: Config, data_file: Path | None = None):
        self.config = config
        self.sink = ConsoleMessageSink()
        self.store = FileTaskStore(data_file or config.save_path(), sink=self.sink)

    def run_line(self, line: str, tasks: TaskList) -> bool:
        """Parse and execute one line, echoing the reply. Returns False once the user says bye."""
        command = parse_command(line, self.sink)
        reply = execute(command, tasks, self.store)
        click.echo(reply.message)
        return not reply.exit


def _task_json(task: Task) -> dict:
    data = {"kind": task.kind.name.lower(), "description": task.description, "done": task.done}
    if isinstance(task, Deadline):
        data["due"] = format_timestamp(task.due)
    elif isinstance(task, Event):
        data["start"] = format_timestamp(task.start)
        data["end"] = format_timestamp(task.end)
    return data


def _read_lines():
    while True:
        try:
            yield click.prompt(">", default="", show_default=False, prompt_suffix=" ")
        except click.exceptions.Abort:
            return


@click.group(invoke_without_command=True)
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Save file to use instead of the configured one",
)
@click.pass_context
def main(ctx, debug: bool, data_file: Path | None):
    """Tally - Personal task tracker."""
    config = load_config()
    logging.basicConfig(
        format=LOG_FORMAT,
        level=logging.DEBUG if debug else config.logging_level(),
    )
    ctx.obj = Session(config, data_file)

    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


@main.command()
@click.pass_obj
def chat(session: Session):
    """Start an interactive session (the default)."""
    tasks = session.store.load()
    click.echo(f"Hello! I'm {session.config.assistant_name}. What can I do for you?")

    for line in _read_lines():
        if not line.strip():
            continue
        if not session.run_line(line, tasks):
            return
    logger.debug("Input closed, ending session")


@main.command()
@click.argument("words", nargs=-1, required=True)
@click.pass_obj
def run(session: Session, words: tuple[str, ...]):
    """Run a single command, e.g. tally run todo read book."""
    tasks = session.store.load()
    session.run_line(" ".join(words), tasks)


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def list_tasks(session: Session, as_json: bool):
    """List saved tasks."""
    tasks = session.store.load()

    if as_json:
        click.echo(json.dumps([_task_json(t) for t in tasks], indent=2))
        return

    if not len(tasks):
        click.echo("Your list is empty.")
        return

    for number, task in tasks.numbered():
        click.echo(f"{number}. {task}")


if __name__ == "__main__":
    main()
