# interface.py

import sys
from typing import Optional

from .logger import Logger
from .display import Display
from .commands import Dispatcher
from .session import Session
from .transcript import MAX_LINES
from .workdir import set_to_home_directory

class Shell:
    """
    Main entry point that assembles our Display, Dispatcher, and Session.
    """

    def __init__(self, logging_enabled: bool = False,
                 log_file: Optional[str] = None,
                 max_lines: int = MAX_LINES,
                 use_home_directory: bool = True):
        """
        Initialize components with optional logging.

        Args:
            logging_enabled: Enable detailed logging.
            log_file: Path to log file. Use "-" for stderr.
            max_lines: Number of transcript lines kept on screen.
            use_home_directory: Start in the user's home directory.
        """
        self.use_home_directory = use_home_directory
        self._init_components(logging_enabled, log_file, max_lines)

    def _init_components(self, logging_enabled: bool,
                         log_file: Optional[str],
                         max_lines: int) -> None:
        try:
            self.logger = Logger(__name__, logging_enabled, log_file)
            self.display = Display()
            self.dispatcher = Dispatcher(logger=self.logger)
            self.session = Session(
                display=self.display,
                dispatcher=self.dispatcher,
                logger=self.logger,
                max_lines=max_lines
            )
            self.logger.debug(f"Initialized with a {max_lines}-line transcript")
        except Exception as e:
            if hasattr(self, 'logger'):
                self.logger.error(f"Init error: {e}")
            raise

    def _enter_home_directory(self) -> None:
        try:
            home = set_to_home_directory()
        except (OSError, RuntimeError) as e:
            # Not fatal: keep whatever directory we were started in
            print(f"Failed to set home directory: {e}", file=sys.stderr)
            self.logger.error(f"Failed to set home directory: {e}")
            return
        self.logger.debug(f"Working directory set to {home}")

    def start(self) -> None:
        """Run the interactive session until the user leaves."""
        if self.use_home_directory:
            self._enter_home_directory()
        try:
            self.session.run()
        except KeyboardInterrupt:
            print("\nExiting...")
        except Exception as e:
            self.logger.error(f"Session aborted: {e}", exc_info=True)
            raise
