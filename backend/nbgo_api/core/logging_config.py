"""
Centralized logging configuration for the NBGO HTTP API.

Records logged through the ``log_*`` helpers keep their key/value fields
in ``record.fields``; every other record gets an empty mapping so
handlers can rely on the attribute.
"""
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .config import LOG_LEVEL

CONSOLE_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(threadName)s - %(message)s'

# Third-party loggers and the level they are pinned to
LIBRARY_LOG_LEVELS = {
    "uvicorn": logging.INFO,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.WARNING,  # RequestLoggingMiddleware already logs requests
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
}


class FieldsFilter(logging.Filter):
    """Give records logged without the helpers an empty ``fields`` mapping."""
    
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "fields"):
            record.fields = {}
        return True


def setup_logging(
    log_level: str = LOG_LEVEL,
    log_file: Optional[str] = None,
    enable_file_logging: bool = False
) -> None:
    """
    Configure root logging for the gateway process.
    
    uvicorn runs with ``log_config=None``, so its loggers propagate to the
    handlers installed here.
    
    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file (defaults to logs/nbgo-api.log)
        enable_file_logging: Whether to enable file logging
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    
    handlers = [_console_handler(numeric_level)]
    if enable_file_logging:
        handlers.append(_file_handler(Path(log_file) if log_file else Path("logs") / "nbgo-api.log"))
    
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()
    for handler in handlers:
        handler.addFilter(FieldsFilter())
        root_logger.addHandler(handler)
    
    for name, level in LIBRARY_LOG_LEVELS.items():
        logging.getLogger(name).setLevel(level)


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    return handler


def _file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding='utf-8')
    handler.setLevel(logging.DEBUG)  # File gets all logs
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    return handler


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.
    
    Args:
        name: Logger name (typically __name__)
    
    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def format_fields(fields: Dict[str, Any]) -> str:
    """Render structured fields as a ``key=value`` suffix for log messages."""
    return " ".join(f"{key}={value}" for key, value in fields.items())


def log_info(logger: logging.Logger, msg: str, **fields: Any) -> None:
    """Log at INFO with structured fields kept in ``extra`` and appended to the message."""
    _log(logger, logging.INFO, msg, fields)


def log_warning(logger: logging.Logger, msg: str, **fields: Any) -> None:
    _log(logger, logging.WARNING, msg, fields)


def log_error(logger: logging.Logger, msg: str, **fields: Any) -> None:
    """Log at ERROR with structured fields kept in ``extra`` and appended to the message."""
    _log(logger, logging.ERROR, msg, fields)


def _log(logger: logging.Logger, level: int, msg: str, fields: Dict[str, Any]) -> None:
    if fields:
        logger.log(level, "%s %s", msg, format_fields(fields), extra={"fields": fields})
    else:
        logger.log(level, msg)
