# display/terminal.py
import os
import sys
import select
import shutil
import termios
import tty
from typing import Optional, TextIO

from .keys import KeyDecoder, KeyEvent
from .renderer import Frame, TerminalSize
from .style import DisplayStyle

READ_CHUNK = 1024
# Seconds to wait for the rest of an escape sequence
ESCAPE_TIMEOUT = 0.05

class DisplayTerminal:
    """
    Low-level terminal operations and I/O.

    Used as a context manager, the terminal switches to raw mode and the
    alternate screen on entry and always restores both on exit, whether the
    session ended normally or an exception is propagating.
    """

    def __init__(self, style: DisplayStyle, stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None):
        self.style = style
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._saved_settings = None
        self._in_alternate_screen = False
        self._decoder = KeyDecoder()
        self._reset_style = self.style.definitions.get_format('RESET')

    def get_size(self) -> TerminalSize:
        """Get terminal dimensions."""
        size = shutil.get_terminal_size()
        return TerminalSize(columns=size.columns, lines=size.lines)

    def write(self, text: str = "", newline: bool = False) -> None:
        """Write text to stdout; append newline if requested."""
        self._stdout.write(text)
        if newline:
            self._stdout.write("\n")
        self._stdout.flush()

    def write_line(self, text: str = "") -> None:
        """Write text with newline."""
        self.write(text, newline=True)

    def enter_raw_mode(self) -> None:
        """Save terminal settings, switch to raw input and the alternate screen."""
        fd = self._stdin.fileno()
        self._saved_settings = termios.tcgetattr(fd)
        tty.setraw(fd, termios.TCSANOW)
        self.write("\033[?1049h")
        self._in_alternate_screen = True

    def restore(self) -> None:
        """Leave the alternate screen and put back the saved terminal settings."""
        if self._in_alternate_screen:
            self.write(self._reset_style + "\033[?25h\033[?1049l")
            self._in_alternate_screen = False
        if self._saved_settings is not None:
            termios.tcsetattr(self._stdin.fileno(), termios.TCSADRAIN, self._saved_settings)
            self._saved_settings = None

    def _input_ready(self, fd: int, timeout: float) -> bool:
        """Check whether more input arrives within the timeout."""
        return select.select([fd], [], [], timeout)[0] != []

    def read_key(self) -> KeyEvent:
        """
        Block until one key event is available and return it.

        Several keys read in one chunk are queued and handed out one per call.
        An escape sequence split across reads is completed if the rest comes
        within ESCAPE_TIMEOUT; otherwise the ESC is taken as the escape key.
        Raises EOFError when the input stream is closed.
        """
        fd = self._stdin.fileno()
        while not self._decoder.has_pending():
            if self._decoder.awaiting_sequence and not self._input_ready(fd, ESCAPE_TIMEOUT):
                self._decoder.flush()
                continue
            data = os.read(fd, READ_CHUNK)
            if not data:
                raise EOFError("Terminal input closed")
            self._decoder.feed(data)
        return self._decoder.next_event()

    def paint(self, frame: Frame) -> None:
        """
        Redraw the whole screen from a frame.

        The frame is built into a single buffer and written at once to
        minimize flicker. Rows below the bottom of the terminal are skipped.
        """
        size = self.get_size()
        output_buffer = ["\033[?25l", "\033[2J"]
        for frame_row in frame.rows:
            if frame_row.row >= size.lines:
                continue
            output_buffer.append(f"\033[{frame_row.row + 1};1H")
            output_buffer.append(self.style.to_ansi(frame_row.text))
            output_buffer.append(self._reset_style)

        row, column = frame.cursor
        row = min(row, max(size.lines - 1, 0))
        output_buffer.append(f"\033[{row + 1};{column + 1}H")
        output_buffer.append("\033[?25h")
        self.write("".join(output_buffer))

    def __enter__(self):
        """Context manager enter: raw mode and alternate screen."""
        try:
            self.enter_raw_mode()
        except BaseException:
            self.restore()
            raise
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit: restore the terminal."""
        self.restore()
        return False  # Don't suppress exceptions
