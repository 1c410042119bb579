"""
Hybrid logging - one stdlib logger shared by many tagged class loggers

Every record carries the name of the component that wrote it, so a single
log file (and optionally the console) reads as an interleaved game trace.
"""

import logging
import sys
import traceback
from contextlib import suppress
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

RECORD_FORMAT = '[%(asctime)s] [%(levelname)s] [%(class_name)s] %(message)s'
RESET_COLOR = '\033[0m'
LEVEL_COLORS = {
    'DEBUG': '\033[94m',
    'INFO': '\033[92m',
    'WARNING': '\033[93m',
    'ERROR': '\033[91m',
    'CRITICAL': '\033[95m',
}


class ColoredFormatter(logging.Formatter):
    """Bracketed record format, ANSI-colored by level when writing to a terminal"""

    def __init__(self, use_colors: bool = False):
        self.use_colors = use_colors
        super().__init__(RECORD_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        # Records from plain logging calls have no component tag
        if not hasattr(record, 'class_name'):
            record.class_name = 'Main'

        text = super().format(record)
        if not self.use_colors:
            return text
        return f"{LEVEL_COLORS.get(record.levelname, RESET_COLOR)}{text}{RESET_COLOR}"


class ClassLogger:
    """
    Tags records with a component name and drops those below its own level.

    The underlying logger stays at DEBUG, so two components sharing it can
    log at different verbosity.
    """

    def __init__(self, main_logger: logging.Logger, class_name: str, level: int):
        self.main_logger = main_logger
        self.class_name = class_name
        self.level = level

    def _emit(self, level: int, message: str, with_traceback: bool = False) -> None:
        if level < self.level:
            return
        record = self.main_logger.makeRecord(
            self.main_logger.name, level, "", 0, message, (),
            sys.exc_info() if with_traceback else None
        )
        record.class_name = self.class_name
        self.main_logger.handle(record)

    def create_class_logger(self, class_name: str, level: Optional[int] = None) -> 'ClassLogger':
        """
        Derive a logger for a collaborating component on the same handlers.

        Args:
            class_name: Component tag for the new logger
            level: Minimum level, inherited from this logger when omitted
        """
        return ClassLogger(self.main_logger, class_name, self.level if level is None else level)

    def debug(self, message: str) -> None:
        self._emit(logging.DEBUG, message)

    def info(self, message: str) -> None:
        self._emit(logging.INFO, message)

    def warning(self, message: str) -> None:
        self._emit(logging.WARNING, message)

    def error(self, message: str, exception: Optional[Exception] = None) -> None:
        """Log an error; with an exception, append its type and raising line"""
        if exception is None:
            self._emit(logging.ERROR, message)
            return

        frames = traceback.extract_tb(exception.__traceback__)
        filename, lineno = (frames[-1].filename, frames[-1].lineno) if frames else ("unknown", 0)
        self._emit(
            logging.ERROR,
            f"{message} | Type: {type(exception).__name__} | File: {filename} | Line: {lineno}",
            with_traceback=True
        )

    def critical(self, message: str) -> None:
        self._emit(logging.CRITICAL, message)


class HybridLogger:
    """
    Owns the shared logger and hands out one ClassLogger per component.

    Args:
        name: Logger name and log file prefix
        log_dir: Where the timestamped log file goes; None disables the file
        console: Also print colored records to stdout
    """

    def __init__(self, name: str = "memory_game", log_dir: Optional[str] = "logs", console: bool = True):
        self.name = name
        self.log_dir = log_dir
        self.console = console
        self.class_loggers: Dict[str, ClassLogger] = {}
        self.main_logger = self._build_logger()

    def _build_logger(self) -> logging.Logger:
        logger = logging.getLogger(self.name)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        # A second HybridLogger with the same name replaces the first one's handlers
        logger.handlers.clear()

        if self.console:
            stdout_handler = logging.StreamHandler(sys.stdout)
            stdout_handler.setFormatter(ColoredFormatter(use_colors=True))
            logger.addHandler(stdout_handler)

        if self.log_dir is not None:
            folder = Path(self.log_dir)
            folder.mkdir(parents=True, exist_ok=True)
            stamp = datetime.now().strftime('%Y-%m-%d_%H-%M-%S')
            file_handler = logging.FileHandler(folder / f"{self.name}_{stamp}.log", encoding="utf-8")
            file_handler.setFormatter(ColoredFormatter())
            logger.addHandler(file_handler)

        if not logger.handlers:
            logger.addHandler(logging.NullHandler())
        return logger

    def get_class_logger(self, class_name: str, level: int = logging.INFO) -> ClassLogger:
        """
        Return the logger for a component, creating it on first use.

        The level only applies on creation; later calls return the cached logger.
        """
        if class_name not in self.class_loggers:
            self.class_loggers[class_name] = ClassLogger(self.main_logger, class_name, level)
        return self.class_loggers[class_name]

    def get_main_logger(self, level: int = logging.INFO) -> ClassLogger:
        return self.get_class_logger("Main", level)

    def cleanup(self) -> None:
        """Flush and close every handler, then detach them"""
        for handler in self.main_logger.handlers:
            with suppress(OSError, ValueError):
                handler.flush()
                handler.close()
        self.main_logger.handlers.clear()
