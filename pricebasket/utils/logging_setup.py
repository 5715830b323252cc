"""Centralized logging configuration for pricebasket."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_obj = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'line': record.lineno,
            'message': record.getMessage(),
        }

        # Add extra fields if present
        if hasattr(record, 'extra_fields'):
            log_obj.update(record.extra_fields)

        if record.exc_info:
            log_obj['exception'] = self.formatException(record.exc_info)

        if hasattr(record, 'operation'):
            log_obj['operation'] = record.operation

        return json.dumps(log_obj, ensure_ascii=False, default=str)


class ConsoleFormatter(logging.Formatter):
    """Colored console formatter for terminals."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        """Format with colors for console output."""
        message = super().format(record)
        color = self.COLORS.get(record.levelname)
        if color is None:
            return message
        return message.replace(record.levelname, f"{color}{record.levelname}{self.RESET}", 1)


def setup_logging(
    name: str = 'pricebasket',
    level: str = 'WARNING',
    stream: Optional[TextIO] = None,
    json_format: bool = False,
) -> logging.Logger:
    """
    Setup centralized logging configuration.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream: Stream to log to (default: stderr)
        json_format: Emit one JSON object per record instead of text

    Returns:
        Configured logger instance
    """
    stream = stream or sys.stderr

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()  # Clear any existing handlers

    handler = logging.StreamHandler(stream)
    handler.setLevel(getattr(logging, level.upper()))

    if json_format:
        handler.setFormatter(JSONFormatter())
    elif hasattr(stream, 'isatty') and stream.isatty():
        handler.setFormatter(ConsoleFormatter(
            '%(asctime)s - %(levelname)s - [%(module)s:%(lineno)d] - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
    else:
        handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger within the pricebasket hierarchy.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    if name != 'pricebasket' and not name.startswith('pricebasket.'):
        name = f'pricebasket.{name}'
    return logging.getLogger(name)


def log_operation(logger: logging.Logger, operation: str, **context):
    """
    Log an operation with context.

    Args:
        logger: Logger instance
        operation: Operation name
        **context: Additional context to log
    """
    logger.info(f"Starting operation: {operation}", extra={'operation': operation, 'extra_fields': context})
