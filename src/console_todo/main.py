"""Main entry point for the console to-do list."""
import logging

import click

from . import theme
from .cli import CLI
from .logging_setup import setup_logging
from .storage import TASKS_FILE
from .store import TaskStore

logger = logging.getLogger(__name__)


@click.command()
def main():
    """Interactive to-do list; tasks are kept in ./tasks.json."""
    setup_logging()
    click.echo(theme.header("Welcome to the Simple Console To-Do List!"))
    click.echo(theme.header("======================================="))
    store = TaskStore()
    existed = TASKS_FILE.exists()
    store.load_from(TASKS_FILE)
    if not existed:
        click.echo(f"No existing task file found ({TASKS_FILE}). Starting with an empty list.")
    elif store.load_failure is not None:
        click.echo(theme.error(f"Warning: {TASKS_FILE} could not be read. Starting with an empty list."))
    else:
        click.echo(f"Tasks loaded successfully from {TASKS_FILE} ({len(store)} tasks).")
    logger.info("Session started: %s", store)
    CLI(store, TASKS_FILE).run()
    logger.info("Session finished: %s", store)
    click.echo("Application finished.")


if __name__ == "__main__":
    main()
