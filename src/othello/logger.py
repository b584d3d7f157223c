"""
Logging utilities for Othello.
"""
import os
import logging
from typing import Optional

from .config import Config

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(config: Config, level: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger.

    Args:
        config: Configuration object
        level: Log level name overriding config.logging.log_level

    Returns:
        The root logger
    """
    level = (level or config.logging.log_level).upper()
    formatter = logging.Formatter(FORMAT)

    root = logging.getLogger()
    root.setLevel(level)

    # Remove handlers to prevent duplicate logging
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    if config.logging.log_file:
        log_dir = os.path.dirname(os.path.abspath(config.logging.log_file))
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(config.logging.log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return root
