"""
Logging configuration for the hostel management API.
Provides structured logging with different handlers and formatters.
"""

import logging
import logging.config
import os
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

from hostelmanix.config.settings import settings

# Request id of the request currently being served, set by RequestIDMiddleware
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class RequestContextFilter(logging.Filter):
    """Attach the current request id to every record"""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = request_id_var.get() or "-"
        return True


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with additional fields"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]):
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['environment'] = settings.ENVIRONMENT

        if hasattr(record, 'request_id'):
            log_record['request_id'] = record.request_id

        if hasattr(record, 'user_id'):
            log_record['user_id'] = record.user_id

        if record.exc_info:
            log_record['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': self.formatException(record.exc_info)
            }


def build_logging_config() -> Dict[str, Any]:
    """Create the dictConfig for the current settings"""
    handlers: Dict[str, Dict[str, Any]] = {
        'console': {
            'level': 'DEBUG' if settings.DEBUG else 'INFO',
            'class': 'logging.StreamHandler',
            'formatter': 'colored' if settings.is_development() else 'standard',
            'filters': ['request_context'],
        },
    }

    if settings.LOG_TO_FILE:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        rotating = {
            'class': 'logging.handlers.RotatingFileHandler',
            'maxBytes': 10485760,  # 10MB
            'backupCount': 10,
            'encoding': 'utf8',
            'filters': ['request_context'],
        }
        handlers['file'] = {
            **rotating,
            'level': 'INFO',
            'filename': os.path.join(settings.LOG_DIR, 'app.log'),
            'formatter': 'standard',
        }
        handlers['error_file'] = {
            **rotating,
            'level': 'ERROR',
            'filename': os.path.join(settings.LOG_DIR, 'error.log'),
            'formatter': 'standard',
        }
        handlers['json_file'] = {
            **rotating,
            'level': 'INFO',
            'filename': os.path.join(settings.LOG_DIR, 'app.json.log'),
            'formatter': 'json',
        }

    handler_names = list(handlers)

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'filters': {
            'request_context': {'()': RequestContextFilter},
        },
        'formatters': {
            'standard': {
                'format': '%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s'
            },
            'json': {
                '()': CustomJsonFormatter,
                'format': '%(timestamp)s %(level)s %(logger)s %(message)s'
            },
            'colored': {
                '()': 'colorlog.ColoredFormatter',
                'format': '%(log_color)s%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s',
                'log_colors': {
                    'DEBUG': 'cyan',
                    'INFO': 'green',
                    'WARNING': 'yellow',
                    'ERROR': 'red',
                    'CRITICAL': 'red,bg_white',
                }
            }
        },
        'handlers': handlers,
        'loggers': {
            '': {
                'handlers': handler_names,
                'level': settings.LOG_LEVEL,
            },
            'hostelmanix': {
                'handlers': handler_names,
                'level': settings.LOG_LEVEL,
                'propagate': False
            },
            'sqlalchemy.engine': {
                'handlers': ['console'],
                'level': 'WARNING',
                'propagate': False
            },
            'uvicorn.access': {
                'handlers': ['console'],
                'level': 'INFO',
                'propagate': False
            }
        }
    }


def _init_sentry() -> None:
    import sentry_sdk
    from sentry_sdk.integrations.logging import LoggingIntegration

    sentry_logging = LoggingIntegration(
        level=logging.INFO,  # Log INFO and above to Sentry
        event_level=logging.ERROR  # Send errors as events
    )

    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        integrations=[sentry_logging],
        traces_sample_rate=0.2,
        send_default_pii=False
    )


def setup_logging() -> logging.Logger:
    """Configure application logging"""
    logging.config.dictConfig(build_logging_config())
    if settings.SENTRY_DSN:
        _init_sentry()
    logger = logging.getLogger("hostelmanix")
    logger.info(f"Logging initialized with level: {settings.LOG_LEVEL}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get logger with context"""
    return logging.getLogger(name)
