# commands/registry.py

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

class Command(Enum):
    """Every command name the shell understands."""
    LS = "ls"
    PWD = "pwd"
    CAT = "cat"
    ECHO = "echo"
    TOUCH = "touch"
    CLEAR = "clear"
    MKDIR = "mkdir"
    RM = "rm"
    RMDIR = "rmdir"
    CD = "cd"
    EXIT = "exit"

    @classmethod
    def lookup(cls, name: str) -> Optional["Command"]:
        """Return the command called `name`, or None if there is none."""
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True)
class CommandLine:
    """A submitted line split into its command token and arguments."""
    name: str
    args: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, raw_line: str) -> "CommandLine":
        """Split on runs of whitespace, ignoring leading and trailing blanks."""
        tokens = raw_line.split()
        if not tokens:
            raise ValueError("Cannot parse a blank command line")
        return cls(name=tokens[0], args=tuple(tokens[1:]))

    @property
    def target(self) -> str:
        """First argument, or an empty string when there is none."""
        return self.args[0] if self.args else ""

    @property
    def rest(self) -> Tuple[str, ...]:
        """Arguments after the first."""
        return self.args[1:]
