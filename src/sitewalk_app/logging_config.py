"""Logging configuration for the client."""
import logging
import sys
import os


class ColorFormatter(logging.Formatter):
    """Color-coded formatter for console output."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        # Color a copy so other handlers still see the plain level name
        color = self.COLORS.get(record.levelname)
        if color:
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(stream=None):
    """Setup console logging for the client.

    LOG_LEVEL selects the level, LOG_COLORS=false disables colors. Colors
    are only used when the stream is a terminal.
    """
    stream = stream or sys.stdout
    log_level_str = os.getenv('LOG_LEVEL', 'INFO').upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(log_level)

    use_colors = os.getenv('LOG_COLORS', 'true').lower() in ('true', '1', 'yes')
    handler = logging.StreamHandler(stream)
    handler.setLevel(log_level)
    if use_colors and hasattr(stream, 'isatty') and stream.isatty():
        handler.setFormatter(ColorFormatter('%(asctime)s %(levelname)s %(name)-25s %(message)s'))
    else:
        handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)-8s %(name)-25s %(message)s'))

    # Clear existing handlers to avoid duplicates
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)

    logging.getLogger('urllib3').setLevel(logging.WARNING)

    logger.info(f"Client logging initialized (level: {log_level_str})")
    return logger
