# display/style/definitions.py

from typing import Dict, Optional

class StyleDefinitions:
    """
    Named formats and colors used across the display. Has no external dependencies.
    """

    # ANSI format utility
    FMT = staticmethod(lambda x: f'\033[{x}m')

    def __init__(
        self,
        formats: Optional[Dict[str, str]] = None,
        colors: Optional[Dict[str, str]] = None,
    ):
        self._default_formats = {
            'RESET': self.FMT('0'),
        }

        # Color name -> rich color
        self._default_colors = {
            'GREEN': 'green',
            'CYAN': 'cyan',
            'RED': 'red',
        }

        self.formats = formats if formats is not None else self._default_formats.copy()
        self.colors = colors if colors is not None else self._default_colors.copy()

    def get_format(self, name: str) -> str:
        """Get a format code by name."""
        return self.formats.get(name, '')
