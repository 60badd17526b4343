# commands/filesystem.py

import os
from typing import Iterable

from .registry import Command
from .result import CommandResult, Outcome

FILE_NAME_REQUIRED = "Error: File name is required."
DIRECTORY_NAME_REQUIRED = "Error: Directory name is required."

def describe_error(error: Exception) -> str:
    """Return the system's description of an error, without errno noise."""
    strerror = getattr(error, "strerror", None)
    return strerror if strerror else str(error)

def _missing(message: str, command: Command) -> CommandResult:
    return CommandResult(message, Outcome.MISSING_ARGUMENT, command)

def _failed(message: str, command: Command) -> CommandResult:
    return CommandResult(message, Outcome.FAILURE, command)

def _succeeded(message: str, command: Command) -> CommandResult:
    return CommandResult(message, Outcome.SUCCESS, command)

def strip_quotes(content: str) -> str:
    """Strip one double quote from each end of the content, if present."""
    if content.startswith('"'):
        content = content[1:]
    if content.endswith('"'):
        content = content[:-1]
    return content

def list_directory() -> CommandResult:
    """List the current directory's entries sorted by name, one per line."""
    try:
        names = sorted(os.listdir("."))
    except OSError as e:
        return _failed(f"Error: {describe_error(e)}", Command.LS)
    return CommandResult("\n".join(names), Outcome.OUTPUT, Command.LS)

def current_directory() -> CommandResult:
    try:
        return CommandResult(os.getcwd(), Outcome.OUTPUT, Command.PWD)
    except OSError as e:
        return _failed(f"Error: {describe_error(e)}", Command.PWD)

def read_file(name: str) -> CommandResult:
    if not name:
        return _missing(FILE_NAME_REQUIRED, Command.CAT)
    try:
        with open(name, encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        return _failed(f"Error reading file '{name}': {describe_error(e)}", Command.CAT)
    return CommandResult(content, Outcome.OUTPUT, Command.CAT)

def create_file(name: str, content: str = "") -> CommandResult:
    """
    Create (or truncate) a file, writing optional content.

    Non-empty content is written with a trailing newline after one layer of
    surrounding double quotes has been stripped.
    """
    if not name:
        return _missing(FILE_NAME_REQUIRED, Command.TOUCH)
    content = strip_quotes(content)
    try:
        f = open(name, "w", encoding="utf-8")
    except OSError as e:
        return _failed(f"Error creating file '{name}': {describe_error(e)}", Command.TOUCH)
    with f:
        if content:
            try:
                f.write(content + "\n")
            except OSError as e:
                return _failed(f"Error writing to file '{name}': {describe_error(e)}", Command.TOUCH)
    return _succeeded(f"File '{name}' created.", Command.TOUCH)

def create_directory(name: str) -> CommandResult:
    if not name:
        return _missing(DIRECTORY_NAME_REQUIRED, Command.MKDIR)
    try:
        os.mkdir(name)
    except OSError as e:
        return _failed(f"Error creating directory '{name}': {describe_error(e)}", Command.MKDIR)
    return _succeeded(f"Directory '{name}' created.", Command.MKDIR)

def delete_file(name: str) -> CommandResult:
    if not name:
        return _missing(FILE_NAME_REQUIRED, Command.RM)
    try:
        os.remove(name)
    except OSError as e:
        return _failed(f"Error deleting file '{name}': {describe_error(e)}", Command.RM)
    return _succeeded(f"File '{name}' deleted.", Command.RM)

def remove_directory(name: str) -> CommandResult:
    """Remove an empty directory."""
    if not name:
        return _missing(DIRECTORY_NAME_REQUIRED, Command.RMDIR)
    try:
        os.rmdir(name)
    except OSError as e:
        return _failed(f"Error removing directory '{name}': {describe_error(e)}", Command.RMDIR)
    return _succeeded(f"Directory '{name}' removed.", Command.RMDIR)

def change_directory(name: str) -> CommandResult:
    if not name:
        return _missing(DIRECTORY_NAME_REQUIRED, Command.CD)
    try:
        os.chdir(name)
    except OSError as e:
        return _failed(f"Error changing directory to '{name}': {describe_error(e)}", Command.CD)
    return _succeeded(f"Changed directory to '{name}'.", Command.CD)

def echo(args: Iterable[str]) -> CommandResult:
    return CommandResult(" ".join(args), Outcome.OUTPUT, Command.ECHO)
