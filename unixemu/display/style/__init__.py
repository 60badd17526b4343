# display/style/__init__.py

from .definitions import StyleDefinitions
from .engine import StyleEngine as BaseStyleEngine

class DisplayStyle:
    """
    Style coordination layer used by the renderer and the terminal.

    Component Hierarchy:
    DisplayStyle → BaseStyleEngine → StyleDefinitions
    """
    def __init__(self, definitions: StyleDefinitions = None):
        self.definitions = definitions or StyleDefinitions()
        self._engine = BaseStyleEngine(definitions=self.definitions)

    def __getattr__(self, name):
        """Delegate unknown attribute access to the style engine instance."""
        return getattr(self._engine, name)

__all__ = ['DisplayStyle', 'StyleDefinitions']
