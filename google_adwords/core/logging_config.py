"""
Structured logging configuration for google-adwords.

The library itself only creates module loggers; host applications that want
JSON output call setup_structured_logging() once at startup.
"""
import logging
import sys
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

# Loggers owned by the Google Ads client library and its transport
GOOGLE_ADS_LOGGERS = (
    "google.ads.googleads.client",
    "google.ads.googleads.interceptors.logging_interceptor",
)
NOISY_LOGGERS = ("grpc", "google.auth", "urllib3")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter that adds operation context to log messages.
    """

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any]
    ) -> None:
        """
        Add custom fields to the log record.

        Args:
            log_record: The log record dictionary to modify
            record: The original logging.LogRecord object
            message_dict: Additional message context
        """
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = self.formatTime(record, self.datefmt)
        log_record['level'] = record.levelname
        log_record['logger'] = record.name

        # Set through extra= by the services
        if hasattr(record, 'operation'):
            log_record['operation'] = record.operation
        if hasattr(record, 'attempt'):
            log_record['attempt'] = record.attempt


def set_google_ads_log_level(level: str = "ERROR") -> None:
    """
    Set the level of the Google Ads client library loggers.

    Args:
        level: The logging level name
    """
    for name in GOOGLE_ADS_LOGGERS:
        logging.getLogger(name).setLevel(getattr(logging, level.upper()))


def setup_structured_logging(
    level: str = "INFO",
    log_format: str = "json",
    google_ads_level: Optional[str] = None
) -> None:
    """
    Configure structured logging for the host process.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: The log format ('json' or 'text')
        google_ads_level: Level for the Google Ads client loggers, if given
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)

    if log_format.lower() == "json":
        formatter = CustomJsonFormatter(
            fmt='%(timestamp)s %(level)s %(logger)s %(message)s',
            rename_fields={
                'timestamp': '@timestamp',
                'level': 'severity',
                'logger': 'logger_name'
            }
        )
    else:
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if google_ads_level:
        set_google_ads_log_level(google_ads_level)


def configure_logging(settings=None) -> None:
    """
    Configure logging from LOG_LEVEL, LOG_FORMAT and GOOGLE_ADWORDS_API_LOG_LEVEL.

    Args:
        settings: Settings instance; defaults to get_settings()
    """
    from google_adwords.core.config import get_settings

    settings = settings or get_settings()
    setup_structured_logging(
        level=settings.LOG_LEVEL,
        log_format=settings.LOG_FORMAT,
        google_ads_level=settings.GOOGLE_ADWORDS_API_LOG_LEVEL,
    )
