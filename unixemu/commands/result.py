# commands/result.py

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .registry import Command

class Outcome(Enum):
    """How a command ended, used to pick the color of its result line."""
    OUTPUT = "output"
    SUCCESS = "success"
    FAILURE = "failure"
    MISSING_ARGUMENT = "missing_argument"
    UNKNOWN_COMMAND = "unknown_command"

    @property
    def is_error(self) -> bool:
        return self in (Outcome.FAILURE, Outcome.MISSING_ARGUMENT, Outcome.UNKNOWN_COMMAND)


@dataclass(frozen=True)
class CommandResult:
    """Text produced by a command plus how it ended."""
    text: str
    outcome: Outcome = Outcome.OUTPUT
    command: Optional[Command] = None

    def __str__(self) -> str:
        return self.text
