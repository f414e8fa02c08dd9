"""
Structured Logging System for Order Consolidator
Provides rotating file logs with immediate flush for real-time monitoring
"""
import logging
import threading
from pathlib import Path
from logging.handlers import RotatingFileHandler

import config


class OrderLogger:
    """Centralized logging for Order Consolidator with rotation and formatting"""

    def __init__(self, name="Order-Consolidator", log_dir=None, log_level="INFO",
                 file_logging=None):
        """
        Initialize logger with rotating file handlers

        Args:
            name: Logger name
            log_dir: Directory for log files (defaults to config.LOG_DIR)
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            file_logging: Write log files (defaults to config.ENABLE_FILE_LOGGING)
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, log_level.upper()))

        # Clear any existing handlers
        self.logger.handlers.clear()

        log_format = logging.Formatter(
            '[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        if file_logging is None:
            file_logging = config.ENABLE_FILE_LOGGING

        if file_logging:
            log_path = Path(log_dir or config.LOG_DIR)
            log_path.mkdir(parents=True, exist_ok=True)

            # 1. Main rotating file handler
            main_handler = RotatingFileHandler(
                log_path / 'order_consolidator.log',
                maxBytes=config.LOG_FILE_MAX_MB * 1024 * 1024,
                backupCount=config.LOG_FILE_BACKUP_COUNT,
                encoding='utf-8'
            )
            main_handler.setLevel(logging.DEBUG)
            main_handler.setFormatter(log_format)
            self.logger.addHandler(main_handler)

            # 2. Error-only log file (5MB per file, keep 3 files)
            error_handler = RotatingFileHandler(
                log_path / 'errors.log',
                maxBytes=5 * 1024 * 1024,
                backupCount=3,
                encoding='utf-8'
            )
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(log_format)
            self.logger.addHandler(error_handler)

        # 3. Console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(log_format)
        self.logger.addHandler(console_handler)

    def debug(self, message, component=""):
        """Log debug message"""
        self._log(logging.DEBUG, message, component)

    def info(self, message, component=""):
        """Log info message"""
        self._log(logging.INFO, message, component)

    def warning(self, message, component=""):
        """Log warning message"""
        self._log(logging.WARNING, message, component)

    def error(self, message, component="", exc_info=False):
        """Log error message"""
        self._log(logging.ERROR, message, component, exc_info=exc_info)

    def _log(self, level, message, component="", exc_info=False):
        """Internal logging method with component prefix"""
        if component:
            message = f"[{component}] {message}"

        self.logger.log(level, message, exc_info=exc_info)

        # Force immediate flush
        for handler in self.logger.handlers:
            handler.flush()

    def log_source_loaded(self, source_name, row_count):
        """Log a spreadsheet decoded into raw rows"""
        self.info(
            f"Source '{source_name}' - Loaded {row_count} data row(s)",
            component="Ingestion"
        )

    def log_row_rejected(self, source_name, row_number, reasons):
        """Log a row left out of the consolidated list"""
        self.debug(
            f"Source '{source_name}' row {row_number} - Rejected: {', '.join(reasons)}",
            component="Consolidator"
        )

    def log_consolidation_complete(self, source_count, row_count, record_count, elapsed):
        """Log one full consolidation pass"""
        self.info(
            f"Consolidated {source_count} source(s), {row_count} row(s) -> "
            f"{record_count} record(s) in {elapsed:.3f}s "
            f"({row_count - record_count} omitted)",
            component="Consolidator"
        )


# Global logger instance
_global_logger = None
_global_logger_lock = threading.Lock()

def get_logger(log_level=None):
    """Get or create global logger instance (safe to call from worker threads)"""
    global _global_logger
    if _global_logger is None:
        with _global_logger_lock:
            if _global_logger is None:
                _global_logger = OrderLogger(log_level=log_level or config.LOG_LEVEL)
    return _global_logger
