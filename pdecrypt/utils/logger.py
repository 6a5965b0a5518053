"""
Logging utilities for pdecrypt.
"""

import logging
import os
import sys
from typing import Optional


class Logger:
    """Logger setup shared by the CLI and the core classes"""

    def __init__(self, name: str = "pdecrypt", log_file: Optional[str] = None,
                 level: int = logging.INFO, console: bool = True):
        """Initialize the logger

        Args:
            name: Logger name
            log_file: Optional file to log to
            level: Logging level
            console: Whether to log to console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self.logger.propagate = False

        # Clear any existing handlers
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        if console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        # Keep records from reaching the root logger's lastResort handler
        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def get_logger(self) -> logging.Logger:
        """Get the logger instance"""
        return self.logger


def get_default_logger(name: str = "pdecrypt") -> logging.Logger:
    """Return the named logger, configuring it only if nobody has yet"""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    return Logger(name=name).get_logger()
