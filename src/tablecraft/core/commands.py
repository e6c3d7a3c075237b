"""Command registry and processor.

:class:`CommandProcessor` maps one raw input line to at most one
:class:`~tablecraft.core.table_state.TableState` mutation and returns a
:class:`~tablecraft.core.models.CommandResult`.  User mistakes are
reported as ``ERROR`` results, never raised.

Commands form a closed set (:class:`Command`); the name → handler
mapping is built once when the processor is constructed.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from tablecraft.core.models import BorderStyle, CommandResult
from tablecraft.core.parsing import (
    is_integer,
    resolve_save_filename,
    split_command,
    tokenize,
)
from tablecraft.core.protocols import TableWriter
from tablecraft.core.table_state import TableState
from tablecraft.exceptions import TableSaveError


class Command(str, Enum):
    """Every command understood by the session, keyed by its typed name."""

    HELP = "help"
    EXIT = "exit"
    TABLE = "table"
    CLEAR = "clear"
    SAVE = "save"
    ADD = "add"
    REMOVE = "remove"
    SET_TITLE = "set_title"
    SET_HEADINGS = "set_headings"
    SET_BORDER_STYLE = "set_border_style"
    SET_ALL_SEPARATORS = "set_all_separators"


@dataclass(frozen=True, slots=True)
class CommandHelp:
    """Usage line shown by ``help``."""

    arguments: str
    description: str


COMMAND_HELP: dict[Command, CommandHelp] = {
    Command.HELP: CommandHelp("[command]", "Displays this help message, or the usage of one command"),
    Command.EXIT: CommandHelp("", "Exits the program"),
    Command.TABLE: CommandHelp("", "Displays the current table"),
    Command.CLEAR: CommandHelp("", "Removes every row from the table"),
    Command.SAVE: CommandHelp("<filename>", "Saves the current table to a file (.txt is appended when missing)"),
    Command.ADD: CommandHelp(
        "[index] <cells...>",
        "Adds a row to the table at the specified index. If no index is specified, the row is added at the end",
    ),
    Command.REMOVE: CommandHelp(
        "[index]",
        "Removes the row at the specified index from the table. If no index is specified, the last row is removed",
    ),
    Command.SET_TITLE: CommandHelp(
        "[title]", "Sets the title of the table. If no title is specified, the title is disabled",
    ),
    Command.SET_HEADINGS: CommandHelp(
        "[headings...]",
        "Sets the headings of the table. If no headings are specified, the headings are disabled",
    ),
    Command.SET_BORDER_STYLE: CommandHelp(
        "<style>",
        "Sets the border style of the table. The style can be one of the following: "
        + ", ".join(BorderStyle.names()),
    ),
    Command.SET_ALL_SEPARATORS: CommandHelp(
        "<true|false>", "Enables/disables the separator between every row",
    ),
}

_COMMANDS_BY_NAME: dict[str, Command] = {command.value: command for command in Command}

_HELP_HINT = "Type 'help' for a list of commands."

_BOOLEAN_LITERALS: dict[str, bool] = {"true": True, "false": False}


def format_usage(command: Command) -> str:
    """Render the one-line usage of *command*: ``name args - description``."""
    entry = COMMAND_HELP[command]
    usage = f"{command.value} {entry.arguments}".rstrip()
    return f"  {usage} - {entry.description}"


# ---------------------------------------------------------------------------
# Processor
# ---------------------------------------------------------------------------

class CommandProcessor:
    """Parse input lines and apply them to a :class:`TableState`.

    Parameters
    ----------
    writer:
        Any object satisfying the :class:`TableWriter` protocol; used by
        ``save``.
    state:
        The table to operate on.  A fresh one is created when omitted.
    """

    def __init__(self, writer: TableWriter, state: TableState | None = None) -> None:
        self._writer: TableWriter = writer
        self.state: TableState = state if state is not None else TableState()
        self._handlers: dict[Command, Callable[[str], CommandResult]] = {
            Command.HELP: self._help,
            Command.EXIT: self._exit,
            Command.TABLE: self._table,
            Command.CLEAR: self._clear,
            Command.SAVE: self._save,
            Command.ADD: self._add,
            Command.REMOVE: self._remove,
            Command.SET_TITLE: self._set_title,
            Command.SET_HEADINGS: self._set_headings,
            Command.SET_BORDER_STYLE: self._set_border_style,
            Command.SET_ALL_SEPARATORS: self._set_all_separators,
        }

    def execute(self, line: str) -> CommandResult:
        """Process one raw input line.

        A blank line is a no-op that yields an empty message.
        """
        name, rest = split_command(line)
        if not name:
            return CommandResult.message("")

        command = _COMMANDS_BY_NAME.get(name)
        if command is None:
            return CommandResult.error(f"Unknown command: {name}", hint=_HELP_HINT)
        return self._handlers[command](rest)

    def _rendered(self) -> CommandResult:
        return CommandResult.table(self.state.render())

    # ------------------------------------------------------------------
    # Queries and session control
    # ------------------------------------------------------------------

    def _help(self, args: str) -> CommandResult:
        tokens = args.split()
        if not tokens:
            lines = [
                "tablecraft helps you create ASCII tables right on your terminal!",
                "Available commands:",
            ]
            lines.extend(format_usage(command) for command in Command)
            return CommandResult.message("\n".join(lines))

        command = _COMMANDS_BY_NAME.get(tokens[0])
        if command is None:
            return CommandResult.error(f"Unknown command: {tokens[0]}", hint=_HELP_HINT)
        return CommandResult.message(format_usage(command))

    def _exit(self, args: str) -> CommandResult:
        return CommandResult.message("Goodbye!", exit_session=True)

    def _table(self, args: str) -> CommandResult:
        return self._rendered()

    def _save(self, args: str) -> CommandResult:
        tokens = args.split()
        if not tokens:
            return CommandResult.error("Please specify a filename.", hint="Usage: save <filename>")

        filename = resolve_save_filename(tokens[0])
        try:
            self._writer.write(filename, self.state.render())
        except TableSaveError as exc:
            return CommandResult.error(str(exc), hint=exc.hint)
        return CommandResult.message(f"File saved successfully as {filename}")

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    def _clear(self, args: str) -> CommandResult:
        self.state.clear()
        return self._rendered()

    def _add(self, args: str) -> CommandResult:
        tokens = tokenize(args)
        if tokens and is_integer(tokens[0]):
            self.state.insert_row(tokens[1:], int(tokens[0]))
        else:
            self.state.insert_row(tokens)
        return self._rendered()

    def _remove(self, args: str) -> CommandResult:
        tokens = args.split()
        if not tokens:
            self.state.remove_row()
        elif is_integer(tokens[0]):
            self.state.remove_row(int(tokens[0]))
        else:
            return CommandResult.error(
                f"The row index must be an integer, got '{tokens[0]}'.",
                hint=format_usage(Command.REMOVE).strip(),
            )
        return self._rendered()

    # ------------------------------------------------------------------
    # Title, headings and style
    # ------------------------------------------------------------------

    def _set_title(self, args: str) -> CommandResult:
        self.state.set_title(args)
        return self._rendered()

    def _set_headings(self, args: str) -> CommandResult:
        self.state.set_headings(tokenize(args))
        return self._rendered()

    def _set_border_style(self, args: str) -> CommandResult:
        tokens = args.split()
        name = tokens[0] if tokens else ""
        if name not in BorderStyle.names():
            listing = "\n".join(f"  {value}" for value in BorderStyle.names())
            return CommandResult.error(
                f"The border_style value can only be one of the following:\n{listing}",
            )
        self.state.set_style_option("border", BorderStyle(name))
        return self._rendered()

    def _set_all_separators(self, args: str) -> CommandResult:
        tokens = args.split()
        value = _BOOLEAN_LITERALS.get(tokens[0]) if tokens else None
        if value is None:
            return CommandResult.error("The all_separators value can only be true or false")
        self.state.set_style_option("all_separators", value)
        return self._rendered()
