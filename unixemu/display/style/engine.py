# display/style/engine.py

from io import StringIO
from typing import Optional

from rich.console import Console
from rich.style import Style
from rich.text import Text

from .definitions import StyleDefinitions

class StyleEngine:
    """
    Turns named colors into rich styles and styled rows into ANSI strings.
    """
    def __init__(self, definitions: StyleDefinitions):
        self.definitions = definitions

        # Rows are already cropped to the terminal, so the console must never wrap them
        self._rich_console = Console(
            force_terminal=True,
            color_system="truecolor",
            file=StringIO(),
            highlight=False,
            width=10_000
        )
        self.rich_style = {
            name: Style(color=color)
            for name, color in self.definitions.colors.items()
        }

    def get_rich_style(self, name: Optional[str]) -> Style:
        """Return Rich style by name; unknown or missing names give the default style."""
        if not name:
            return Style()
        return self.rich_style.get(name, Style())

    def stylize(self, text: str, name: Optional[str] = None) -> Text:
        """Wrap plain text in a rich Text carrying the named color."""
        return Text(text, style=self.get_rich_style(name), end="")

    def to_ansi(self, text: Text) -> str:
        """Render a rich Text to a string of ANSI escape codes."""
        with self._rich_console.capture() as capture:
            self._rich_console.print(text, end="", soft_wrap=True)
        return capture.get()
