import functools
import inspect
import logging
import logging.handlers
import sys
import time
from pathlib import Path
from typing import Optional

from ..config import settings


ROOT_LOGGER_NAME = "design_scraper"


class ColoredFormatter(logging.Formatter):
    """Custom formatter that adds colors to console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
        'RESET': '\033[0m'      # Reset
    }

    def format(self, record):
        """Format log record with colors for console output."""
        # Work on a copy so file handlers never see the escape codes
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        record.levelname = f"{color}{record.levelname}{self.COLORS['RESET']}"
        return super().format(record)


class RunContextFilter(logging.Filter):
    """Filter to add analysis run context to log records."""

    def filter(self, record):
        """Add run ID and target URL to log records if available."""
        # These are passed through `extra=` by the pipeline
        record.run_id = getattr(record, 'run_id', 'N/A')
        record.url = getattr(record, 'url', 'N/A')
        return True


def setup_logging(
    app_name: str = ROOT_LOGGER_NAME,
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    enable_console: bool = True,
    enable_file: Optional[bool] = None
) -> logging.Logger:
    """
    Set up centralized logging configuration.

    Args:
        app_name: Name of the application/logger
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (defaults to logs/{app_name}.log)
        enable_console: Whether to enable console logging
        enable_file: Whether to enable file logging (defaults to settings)

    Returns:
        Configured logger instance
    """
    # Determine log level
    if log_level is None:
        log_level = settings.log_level or ("DEBUG" if settings.debug else "INFO")
    if enable_file is None:
        enable_file = settings.enable_file_logging
    if log_file is None:
        log_file = settings.log_file

    logger = logging.getLogger(app_name)
    logger.setLevel(getattr(logging, log_level.upper()))

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        fmt='%(asctime)s | %(levelname)-8s | %(name)s | '
            'run:%(run_id)s | url:%(url)s | '
            '%(filename)s:%(lineno)d | %(funcName)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    simple_formatter = ColoredFormatter(
        fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    )

    context_filter = RunContextFilter()

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG if settings.debug else logging.INFO)
        console_handler.setFormatter(simple_formatter)
        console_handler.addFilter(context_filter)
        logger.addHandler(console_handler)

    if enable_file:
        log_path = Path(log_file) if log_file else Path("logs") / f"{app_name}.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # Rotating file handler (10MB max, keep 5 backups)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        file_handler.addFilter(context_filter)
        logger.addHandler(file_handler)

        # Separate file for errors
        error_handler = logging.handlers.RotatingFileHandler(
            filename=log_path.with_name(f"{log_path.stem}_errors.log"),
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding='utf-8'
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(detailed_formatter)
        error_handler.addFilter(context_filter)
        logger.addHandler(error_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    logger.debug(f"Logging configured for {app_name} (level: {log_level}, file logging: {enable_file})")

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with proper configuration.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    # If this is the first time getting a logger, set up the main logger
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not root_logger.handlers:
        setup_logging()

    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def log_performance(func):
    """
    Decorator to log function performance metrics.

    Works for both coroutine functions and plain callables.

    Usage:
        @log_performance
        async def slow_function():
            ...
    """
    if inspect.iscoroutinefunction(func):
        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)
            start_time = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{func.__name__} failed after {time.perf_counter() - start_time:.3f}s: {str(e)}")
                raise
            logger.info(f"{func.__name__} executed in {time.perf_counter() - start_time:.3f}s")
            return result

        return async_wrapper

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        start_time = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(f"{func.__name__} failed after {time.perf_counter() - start_time:.3f}s: {str(e)}")
            raise
        logger.info(f"{func.__name__} executed in {time.perf_counter() - start_time:.3f}s")
        return result

    return wrapper


class LoggerMixin:
    """Mixin class to add logging capabilities to any class."""

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class."""
        return get_logger(self.__class__.__module__)
