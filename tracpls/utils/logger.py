import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

from tracpls.config import Config
from tracpls.core.errors import ConfigurationError

def setup_logger(name: str, level: int = logging.INFO,
                 log_dir: Optional[Path] = None) -> logging.Logger:
    """Configure logging, console output always goes to stderr"""
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Drop handlers from a previous run in the same process
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console, attached first so later failures are still reported
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(console)

    # File
    if log_dir is not None:
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_dir / f'{name}_{timestamp}.log')
        except OSError as e:
            raise ConfigurationError(
                f"{Config.LOG_DIR_ENV} points at an unusable log directory '{log_dir}': {e}"
            )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        logger.addHandler(file_handler)

    return logger
