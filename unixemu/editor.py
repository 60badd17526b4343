# editor.py

class LineEditor:
    """
    Owns the command line that is being typed but not yet submitted.

    Characters are appended verbatim; there is no cursor movement, so every
    edit happens at the end of the buffer.
    """

    def __init__(self):
        self._chars: list[str] = []

    @property
    def text(self) -> str:
        """Return the current buffer contents."""
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def insert(self, char: str) -> None:
        """Append a character to the end of the buffer."""
        self._chars.append(char)

    def delete_last(self) -> None:
        """Remove the last character; no-op on an empty buffer."""
        if self._chars:
            self._chars.pop()

    def reset(self) -> None:
        """Clear the buffer."""
        self._chars.clear()

    def is_blank(self) -> bool:
        """Return True if the buffer holds nothing but whitespace."""
        return not self.text.strip()
