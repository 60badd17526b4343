# __init__.py

from .logger import Logger
from .interface import Shell

__all__ = ["Shell", "Logger"]
