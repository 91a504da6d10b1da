"""
Logging for Alien Invasion.

Every module logs under the `alien_invasion` namespace:

    from src.utils.logger import get_logger

    logger = get_logger(__name__)   # -> alien_invasion.game.progression
    logger.info("Wave 3 reached")

Verbosity comes from Config.LOG_LEVEL or --log-level:
    DEBUG    kills and escapes, one line each
    INFO     phase changes, wave advances, session summaries (default)
    WARNING  missing assets, audio problems
    ERROR    failures only

The console gets colored level names when attached to a terminal. With
file output on, a plain-text copy of everything (DEBUG included) goes to
<log_dir>/alien_invasion_YYYYMMDD_HHMMSS.log.
"""

import logging
import sys
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional


class LogLevel(Enum):
    """Supported verbosity levels."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR

    @classmethod
    def from_name(cls, name: str) -> 'LogLevel':
        """Look up a level by (case-insensitive) name, defaulting to INFO."""
        return cls.__members__.get(name.upper(), cls.INFO)


ROOT_LOGGER_NAME = 'alien_invasion'
LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
DATE_FORMAT = '%H:%M:%S'

_configured = False
_file_handler: Optional[logging.FileHandler] = None


class ColoredFormatter(logging.Formatter):
    """Wraps the level name in an ANSI color when writing to a terminal."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[35m',
    }
    RESET = '\033[0m'

    def __init__(self, fmt: str, datefmt: Optional[str] = None, stream=None):
        super().__init__(fmt, datefmt)
        stream = stream or sys.stdout
        self.enabled = hasattr(stream, 'isatty') and stream.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if not self.enabled:
            return super().format(record)
        # Color a copy so other handlers still see the plain level name
        colored = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(record.levelno, '')
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


def _close_file_handler(root: logging.Logger) -> None:
    global _file_handler
    if _file_handler is not None:
        root.removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None


def setup_logging(
    log_dir: str = 'logs',
    level: LogLevel = LogLevel.INFO,
    console_output: bool = True,
    file_output: bool = False,
    log_filename: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Configure the project's loggers.

    Args:
        log_dir: Where log files are written (created on demand)
        level: Console verbosity; files always capture DEBUG
        console_output: Log to stdout
        file_output: Also log to a file under log_dir
        log_filename: File name to use instead of the timestamped default
        force: Replace an earlier configuration, including the automatic one
            made by the first get_logger() call
    """
    global _configured, _file_handler

    if _configured and not force:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    _close_file_handler(root)
    root.handlers.clear()
    root.setLevel(logging.DEBUG if file_output else level.value)

    if console_output:
        console = logging.StreamHandler(sys.stdout)
        console.setLevel(level.value)
        console.setFormatter(ColoredFormatter(LOG_FORMAT, DATE_FORMAT, sys.stdout))
        root.addHandler(console)

    if file_output:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        name = log_filename or f"{ROOT_LOGGER_NAME}_{datetime.now():%Y%m%d_%H%M%S}.log"
        _file_handler = logging.FileHandler(directory / name, encoding='utf-8')
        _file_handler.setLevel(logging.DEBUG)
        _file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_file_handler)

    _configured = True
    root.debug(f"Logging configured (level={level.name}, file={file_output})")


def get_logger(name: str) -> logging.Logger:
    """
    Return the project logger for a module.

    'src.game.session' becomes 'alien_invasion.game.session'. Logging is
    configured with defaults on first use.
    """
    if not _configured:
        setup_logging()

    if name.startswith('src.'):
        name = name[len('src.'):]
    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')


def get_log_path() -> Optional[Path]:
    """Path of the active log file, or None when file output is off."""
    if _file_handler is None:
        return None
    return Path(_file_handler.baseFilename)


def log_session_summary(
    score: int,
    wave: int,
    ticks: int,
    kills: Optional[int] = None,
    escapes: Optional[int] = None,
) -> None:
    """
    Log one line describing a finished (or interrupted) session.

    Example:
        score=-120 | wave=2 | ticks=900 | kills=4 | escapes=8
    """
    parts = [f"score={score}", f"wave={wave}", f"ticks={ticks}"]
    if kills is not None:
        parts.append(f"kills={kills}")
    if escapes is not None:
        parts.append(f"escapes={escapes}")

    get_logger('session').info(" | ".join(parts))
