# commands/__init__.py

from typing import Callable, Dict

from . import filesystem
from .registry import Command, CommandLine
from .result import CommandResult, Outcome

Handler = Callable[[CommandLine], CommandResult]

class Dispatcher:
    """
    Routes a submitted command line to the operation registered for it.

    Each member of `Command` maps to exactly one handler. `clear` and
    `exit` only report themselves back; acting on them is left to the
    session that owns the transcript and the terminal.
    """

    def __init__(self, logger=None):
        self.logger = logger
        self._handlers: Dict[Command, Handler] = {
            Command.LS: lambda line: filesystem.list_directory(),
            Command.PWD: lambda line: filesystem.current_directory(),
            Command.CAT: lambda line: filesystem.read_file(line.target),
            Command.ECHO: lambda line: filesystem.echo(line.args),
            Command.TOUCH: lambda line: filesystem.create_file(line.target, " ".join(line.rest)),
            Command.CLEAR: lambda line: CommandResult("", Outcome.SUCCESS, Command.CLEAR),
            Command.MKDIR: lambda line: filesystem.create_directory(line.target),
            Command.RM: lambda line: filesystem.delete_file(line.target),
            Command.RMDIR: lambda line: filesystem.remove_directory(line.target),
            Command.CD: lambda line: filesystem.change_directory(line.target),
            Command.EXIT: lambda line: CommandResult("", Outcome.SUCCESS, Command.EXIT),
        }

    @property
    def commands(self) -> frozenset:
        """Commands that have a handler registered."""
        return frozenset(self._handlers)

    def dispatch(self, raw_line: str) -> CommandResult:
        """Parse `raw_line` and run the matching command once."""
        line = CommandLine.parse(raw_line)
        command = Command.lookup(line.name)
        if command is None:
            self._log("warning", f"Unknown command: {line.name}")
            return CommandResult(f"Unknown command: {line.name}", Outcome.UNKNOWN_COMMAND)

        result = self._handlers[command](line)
        if result.outcome.is_error:
            self._log("warning", f"{command.value} failed: {result.text}")
        else:
            self._log("debug", f"{command.value} -> {result.outcome.value}")
        return result

    def _log(self, level: str, msg: str) -> None:
        if self.logger:
            getattr(self.logger, level)(msg)


__all__ = ['Dispatcher', 'Command', 'CommandLine', 'CommandResult', 'Outcome']
