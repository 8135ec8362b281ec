"""
Centralized logging configuration for networksetup.

Library modules only ask for named loggers; handlers are installed by the
command line tool through setup_logging(), so importing the package never
touches the host application's logging.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from . import config


class NetworkSetupLogger:
    """Centralized logger configuration for networksetup."""

    _initialized = False
    _debug_enabled = False
    _log_file: Optional[Path] = None

    @classmethod
    def setup(
        cls,
        debug: bool = False,
        log_file: Optional[str] = None,
        force_reinit: bool = False,
    ) -> None:
        """
        Set up logging handlers on the root logger.

        Args:
            debug: If True, enable DEBUG level logging
            log_file: Optional path of a file that receives all log records
            force_reinit: If True, reinitialize even if already set up
        """
        if cls._initialized and not force_reinit:
            return

        # Clear any existing handlers to avoid duplication
        root_logger = logging.getLogger()
        if root_logger.hasHandlers():
            root_logger.handlers.clear()

        cls._debug_enabled = debug
        cls._log_file = Path(log_file).expanduser() if log_file else None
        root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

        formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)

        if cls._log_file:
            cls._add_file_handler(root_logger, formatter)
        cls._add_console_handler(root_logger, formatter)

        cls._initialized = True

        logger = logging.getLogger(__name__)
        logger.debug(f"networksetup logging initialized (debug={'on' if debug else 'off'})")

    @classmethod
    def _add_file_handler(cls, logger: logging.Logger, formatter: logging.Formatter) -> None:
        """Add file handler for persistent logging."""
        try:
            cls._log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(cls._log_file)
            file_handler.setFormatter(formatter)
            file_handler.setLevel(logging.DEBUG)  # File always gets debug
            logger.addHandler(file_handler)
        except OSError as e:
            print(f"Warning: Could not set up file logging: {e}", file=sys.stderr)

    @classmethod
    def _add_console_handler(cls, logger: logging.Logger, formatter: logging.Formatter) -> None:
        """Add console handler for interactive feedback."""
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(logging.DEBUG if cls._debug_enabled else logging.INFO)
        logger.addHandler(console_handler)

    @classmethod
    def get_logger(cls, name: Optional[str] = None) -> logging.Logger:
        """
        Get a logger instance.

        Args:
            name: Logger name (typically __name__)

        Returns:
            Logger instance, configured once setup() has run
        """
        return logging.getLogger(name)

    @classmethod
    def is_debug_enabled(cls) -> bool:
        """Check if debug logging is currently enabled."""
        return cls._debug_enabled

    @classmethod
    def set_debug(cls, debug: bool) -> None:
        """
        Change debug level at runtime.

        Args:
            debug: If True, enable DEBUG level logging
        """
        if debug != cls._debug_enabled:
            log_file = str(cls._log_file) if cls._log_file else None
            cls.setup(debug=debug, log_file=log_file, force_reinit=True)


# Convenience functions for easy import
def setup_logging(
    debug: bool = False, log_file: Optional[str] = None, force_reinit: bool = False
) -> None:
    """Set up centralized logging. Wrapper for NetworkSetupLogger.setup()."""
    NetworkSetupLogger.setup(debug=debug, log_file=log_file, force_reinit=force_reinit)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance. Wrapper for NetworkSetupLogger.get_logger()."""
    return NetworkSetupLogger.get_logger(name)


def is_debug_enabled() -> bool:
    """Check if debug logging is enabled. Wrapper for NetworkSetupLogger.is_debug_enabled()."""
    return NetworkSetupLogger.is_debug_enabled()


def set_debug(debug: bool) -> None:
    """Change debug level at runtime. Wrapper for NetworkSetupLogger.set_debug()."""
    NetworkSetupLogger.set_debug(debug)
