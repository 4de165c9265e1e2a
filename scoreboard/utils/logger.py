"""
Logger factory for engine services.

Modules that only emit detail use logging.getLogger(__name__) and inherit
whatever the host application configured. Long-running services call
setup_logger so their summary lines reach stdout (and, when enabled, a
dated log file) even when the host configured nothing.
"""

import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional

from scoreboard.config import Config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def log_file_path(log_dir: Path, day: Optional[date] = None) -> Path:
    """Dated log file inside log_dir, e.g. logs/scoreboard_20261019.log"""
    day = day or date.today()
    return log_dir / f'scoreboard_{day:%Y%m%d}.log'


def setup_logger(name: str, log_dir: Optional[str] = None) -> logging.Logger:
    """
    Attach scoreboard handlers to a named logger once.

    Args:
        name: Logger name, normally the calling module's __name__
        log_dir: Directory for the dated log file; defaults to Config.LOG_DIR.
            Only used when Config.LOG_TO_FILE is set.

    Returns:
        The configured logger (unchanged if it already has handlers)
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = getattr(logging, Config.get_log_level(), logging.INFO)
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    stream = logging.StreamHandler(sys.stdout)
    stream.setLevel(level)
    stream.setFormatter(formatter)
    logger.addHandler(stream)

    if Config.LOG_TO_FILE:
        target = Path(log_dir or Config.LOG_DIR)
        target.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file_path(target), encoding='utf-8')
        # The file keeps everything; the console follows LOG_LEVEL
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
