# session.py

from enum import Enum
from typing import Optional

from .commands import Command, CommandResult, Dispatcher, Outcome
from .display import Display, KeyEvent, KeyKind
from .display.renderer import format_prompt
from .editor import LineEditor
from .transcript import MAX_LINES, Transcript, TranscriptEntry
from .workdir import current_working_directory

FAREWELL = "Exiting Unix Emulator. Goodbye!"

OUTCOME_STYLES = {
    Outcome.OUTPUT: None,
    Outcome.SUCCESS: 'GREEN',
    Outcome.FAILURE: 'RED',
    Outcome.MISSING_ARGUMENT: 'RED',
    Outcome.UNKNOWN_COMMAND: 'RED',
}

class SessionState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class Session:
    """
    Drives the shell: render, wait for one key, apply it, repeat.

    The session owns the line editor and the transcript. The working
    directory is read again before every frame because a dispatched
    command may have changed it.
    """

    def __init__(self, display: Display, dispatcher: Dispatcher, logger,
                 max_lines: int = MAX_LINES):
        self.display = display
        self.terminal = display.terminal
        self.renderer = display.renderer
        self.dispatcher = dispatcher
        self.logger = logger
        self.editor = LineEditor()
        self.transcript = Transcript(max_lines)
        self.state = SessionState.RUNNING
        self._cwd: Optional[str] = None

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    def run(self) -> None:
        """Run until escape or `exit`, then restore the terminal and say goodbye."""
        with self.terminal:
            while self.running:
                self.refresh()
                self.handle_key(self.terminal.read_key())
        self.terminal.write_line(FAREWELL)
        self.logger.debug("Session terminated")

    def refresh(self) -> None:
        """Redraw the screen from the current state."""
        self._cwd = current_working_directory()
        frame = self.renderer.render(
            self.transcript.entries(),
            self.editor.text,
            self._cwd,
            self.terminal.get_size()
        )
        self.terminal.paint(frame)

    def handle_key(self, event: KeyEvent) -> None:
        """Apply one key event to the session state."""
        if event.kind is KeyKind.CHARACTER:
            self.editor.insert(event.char)
        elif event.kind is KeyKind.BACKSPACE:
            self.editor.delete_last()
        elif event.kind is KeyKind.ENTER:
            if not self.editor.is_blank():
                self.submit(self.editor.text)
        elif event.kind is KeyKind.ESCAPE:
            self.terminate()

    def submit(self, raw_line: str) -> CommandResult:
        """
        Echo a command line into the transcript, run it, and record the result.

        `clear` empties the transcript instead of adding a result line and
        `exit` ends the session.
        """
        cwd = self._cwd if self._cwd is not None else current_working_directory()
        self._append(TranscriptEntry(format_prompt(cwd, raw_line)))

        result = self.dispatcher.dispatch(raw_line)
        if result.command is Command.CLEAR:
            self.transcript.clear()
            self.logger.debug("Transcript cleared")
        elif result.command is Command.EXIT:
            self.terminate()
        else:
            self._append(TranscriptEntry(result.text, OUTCOME_STYLES[result.outcome]))
        self.editor.reset()
        return result

    def terminate(self) -> None:
        self.state = SessionState.TERMINATED

    def _append(self, entry: TranscriptEntry) -> None:
        evicted = self.transcript.append(entry)
        if evicted is not None:
            self.logger.debug(f"Evicted transcript entry: {evicted.text!r}")
