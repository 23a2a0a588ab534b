"""
Logging setup for the Word Scramble game.
Level is controlled by the LOG_LEVEL env var (default INFO).
"""

import os
import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: Optional[str] = None, log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Configure the root logger once for the app.

    Args:
        level: Level name; falls back to LOG_LEVEL, then INFO
        log_dir: If given, also write to <log_dir>/game.log

    Returns:
        The package logger
    """
    level_name = (level or os.getenv('LOG_LEVEL', 'INFO')).strip().upper()
    log_level = getattr(logging, level_name, logging.INFO)

    handlers = [logging.StreamHandler()]
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir / 'game.log'))

    # Force reconfigure root logger so Streamlit's defaults don't suppress DEBUG
    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=handlers, force=True)
    logging.getLogger('wordscramble').setLevel(log_level)
    return logging.getLogger('wordscramble')
