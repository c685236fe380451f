"""Command loop for the console to-do list.

One menu choice per iteration; every command finishes (prompt, action,
confirmation) before the menu is shown again. Only Exit leaves the loop,
and it saves the tasks on the way out.
"""
from pathlib import Path
from typing import Callable, Dict

import click

from . import theme
from .errors import InvalidDescription, InvalidPosition, MalformedInput, StorageWriteFailure
from .storage import TASKS_FILE, PathLike
from .store import TaskStore

MENU = (
    "1. View Tasks",
    "2. Add Task",
    "3. Mark Task as Complete",
    "4. Remove Task",
    "0. Save and Exit",
)
EXIT_CHOICE = 0


def _parse_int(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise MalformedInput(f"Not a number: {raw!r}") from None


def _prompt(text: str) -> str:
    # default="" lets an empty line through instead of re-prompting
    return click.prompt(text, default="", show_default=False, prompt_suffix=": ")


class CLI:
    def __init__(self, store: TaskStore, data_file: PathLike = TASKS_FILE):
        self.store: TaskStore = store
        self.data_file: Path = Path(data_file)
        self._commands: Dict[int, Callable[[], None]] = {
            1: self._view,
            2: self._add,
            3: self._complete,
            4: self._remove,
        }

    def run(self) -> None:
        """Main REPL loop; returns once the tasks have been saved."""
        try:
            while True:
                self._menu()
                try:
                    choice = _parse_int(_prompt("Enter your choice"))
                except MalformedInput:
                    click.echo(theme.error("Invalid input. Please enter a number between 0 and 4."))
                    continue
                if choice == EXIT_CHOICE:
                    self._save("Exiting application. Tasks saved.")
                    break
                handler = self._commands.get(choice)
                if handler is None:
                    click.echo(theme.error("Invalid choice. Please try again."))
                    continue
                handler()
        except (KeyboardInterrupt, EOFError, click.Abort):
            click.echo()
            self._save("Interrupted. Tasks saved.")

    def _save(self, message: str) -> None:
        try:
            self.store.save_to(self.data_file)
        except StorageWriteFailure as e:
            click.echo(theme.error(f"Error saving tasks to file: {e}"))
            return
        click.echo(message)

    # -------------------- rendering --------------------
    def _menu(self) -> None:
        click.echo()
        click.echo(theme.header("--- To-Do List Menu ---"))
        for line in MENU:
            click.echo(line)
        click.echo(theme.header("-----------------------"))

    def _view(self) -> None:
        click.echo()
        click.echo(theme.header("--- Your Tasks ---"))
        entries = self.store.list_tasks()
        if not entries:
            click.echo("Your to-do list is empty!")
        for position, task in entries:
            click.echo(f"{position}. {task.render()}")
        click.echo(theme.header("------------------"))

    # -------------------- user-interactive flows --------------------
    def _add(self) -> None:
        raw = _prompt("Enter the description for the new task")
        try:
            task = self.store.add(raw)
        except InvalidDescription as e:
            click.echo(theme.error(f"Error adding task: {e}"))
            return
        click.echo(theme.success(f'Task "{task.description}" added successfully!'))

    def _complete(self) -> None:
        self._view()
        if not len(self.store):
            return
        try:
            position = _parse_int(_prompt("Enter the number of the task to mark as complete"))
            task, already_done = self.store.complete(position)
        except MalformedInput:
            click.echo(theme.error("Invalid input. Please enter a number."))
            return
        except InvalidPosition:
            click.echo(theme.error("Invalid task number."))
            return
        if already_done:
            click.echo(f'Task "{task.description}" is already complete.')
        else:
            click.echo(theme.success(f'Task "{task.description}" marked as complete.'))

    def _remove(self) -> None:
        self._view()
        if not len(self.store):
            return
        try:
            position = _parse_int(_prompt("Enter the number of the task to remove"))
            task = self.store.remove(position)
        except MalformedInput:
            click.echo(theme.error("Invalid input. Please enter a number."))
            return
        except InvalidPosition:
            click.echo(theme.error("Invalid task number."))
            return
        click.echo(theme.success(f'Task "{task.description}" removed successfully.'))
