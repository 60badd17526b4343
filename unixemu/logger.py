# logger.py

import os, sys, logging
from typing import Optional
from functools import partial

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

class Logger:
    """Thin wrapper over a stdlib logger that stays silent unless enabled."""

    def __init__(self, name: str, logging_enabled: bool = False,
                 log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        self.log_file = None
        # The stdlib logger is shared by name, so only the first instance attaches a handler
        if not self._logger.handlers:
            if logging_enabled:
                self._logger.setLevel(logging.DEBUG)
                self._logger.addHandler(self._create_handler(log_file))
            else:
                self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _create_handler(self, log_file: Optional[str]) -> logging.Handler:
        if log_file == "-":
            # stdout belongs to the full-screen display
            handler = logging.StreamHandler(sys.stderr)
        else:
            if log_file is None:
                log_dir = os.path.join(os.getcwd(), 'logs')
                os.makedirs(log_dir, exist_ok=True)
                log_file = os.path.join(log_dir, 'unixemu_debug.log')
            self.log_file = log_file
            handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        return handler

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
