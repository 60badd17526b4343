# display/__init__.py

from .style import DisplayStyle
from .renderer import Renderer, Frame, TerminalSize
from .terminal import DisplayTerminal
from .keys import KeyEvent, KeyKind

class Display:
    """
    Coordinates display components in a hierarchical structure.

    Component Hierarchy:
    DisplayStyle (base) → Renderer → DisplayTerminal
    """
    def __init__(self, stdin=None, stdout=None):
        """Initialize components in dependency order."""
        self.style = DisplayStyle()
        self.renderer = Renderer(style=self.style)
        self.terminal = DisplayTerminal(style=self.style, stdin=stdin, stdout=stdout)

__all__ = ['Display', 'DisplayStyle', 'DisplayTerminal', 'Renderer', 'Frame',
           'TerminalSize', 'KeyEvent', 'KeyKind']
