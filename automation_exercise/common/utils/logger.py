import logging
import sys
from typing import Optional

from automation_exercise.common.config import Config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(
    name: str = "automation_exercise",
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    ) -> logging.Logger:
    """
    Setup logging for the suite.

    Attaches a stdout handler and, when a log file is configured, a file
    handler. Calling it again for the same name replaces the handlers
    instead of stacking duplicates.

    Args:
        name: Logger name; child loggers created with logging.getLogger(__name__)
            inside the package propagate here
        level: Level name, defaults to Config.LOG_LEVEL
        log_file: File path, defaults to Config.LOG_FILE (empty disables it)
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, (level or Config.LOG_LEVEL).upper(), logging.INFO))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler
    path = log_file if log_file is not None else Config.LOG_FILE
    if path:
        file_handler = logging.FileHandler(path, encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
