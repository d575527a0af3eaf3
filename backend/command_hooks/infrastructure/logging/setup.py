# File: backend/command_hooks/infrastructure/logging/setup.py
# Purpose: Structured JSON logging setup with optional rotated log files
import structlog
import logging
import logging.handlers
from pathlib import Path
from pythonjsonlogger import jsonlogger
from typing import Optional

from command_hooks.config import get_settings


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[str] = None,
    app_name: str = "command_hooks"
) -> structlog.BoundLogger:
    """
    Setup structured logging with:
    - JSON formatting for machine parsing
    - Console output always, file rotation only when log_dir is given
      (daily for app logs, size-based for errors)
    - Context variables support for hook tracking

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory to store log files, None for console only
        app_name: Application name for logger identification

    Returns:
        Configured structlog logger instance
    """
    structlog.configure(
        processors=[
            # Add context variables (like hook_id)
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level.upper())

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    json_formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(name)s %(levelname)s %(message)s",
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger"
        }
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(json_formatter)
    console_handler.setLevel(logging.DEBUG)
    root_logger.addHandler(console_handler)
    handlers = ["console"]

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        # Application logs (rotated daily, keep 30 days)
        app_handler = logging.handlers.TimedRotatingFileHandler(
            filename=log_path / f"{app_name}.log",
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8"
        )
        app_handler.setFormatter(json_formatter)
        app_handler.setLevel(logging.DEBUG)
        app_handler.suffix = "%Y-%m-%d"
        root_logger.addHandler(app_handler)

        # Error logs (rotated by size, keep 10 files)
        error_handler = logging.handlers.RotatingFileHandler(
            filename=log_path / f"{app_name}_error.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=10,
            encoding="utf-8"
        )
        error_handler.setFormatter(json_formatter)
        error_handler.setLevel(logging.ERROR)
        root_logger.addHandler(error_handler)
        handlers.extend(["app_file", "error_file"])

    logger = structlog.get_logger(app_name)
    logger.info(
        "logging_initialized",
        log_level=log_level,
        log_dir=log_dir,
        handlers=handlers
    )

    return logger


def setup_logging_from_settings() -> structlog.BoundLogger:
    """Configure logging from the cached Settings instance."""
    settings = get_settings()
    return setup_logging(
        log_level=settings.effective_log_level,
        log_dir=settings.LOG_DIR,
        app_name=settings.APP_NAME,
    )


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Optional logger name. If None, returns the root logger.

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def is_debug_enabled() -> bool:
    """True when OPENCODE_HOOKS_DEBUG is switched on."""
    return get_settings().OPENCODE_HOOKS_DEBUG
