# workdir.py

import os
from pathlib import Path

UNKNOWN_DIRECTORY = "Unknown Directory"

def current_working_directory() -> str:
    """Snapshot the process's working directory for display."""
    try:
        return os.getcwd()
    except OSError:
        return UNKNOWN_DIRECTORY

def set_to_home_directory() -> str:
    """
    Change into the invoking user's home directory.

    Raises RuntimeError when no home directory can be determined and
    OSError when it cannot be entered.
    """
    home = Path.home()
    os.chdir(home)
    return str(home)
