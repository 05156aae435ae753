"""Logging configuration for backend."""
import logging
import os
import json
from logging.handlers import RotatingFileHandler
from flask import has_request_context, request
from shared.models import now


class StructuredFormatter(logging.Formatter):
    """Structured JSON formatter for log shipping.

    Records emitted while handling a request carry its method, path and
    route arguments (project and entity ids) so one edit can be traced
    across the equipment and report endpoints.
    """

    def format(self, record):
        log_entry = {
            'timestamp': now().isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        if has_request_context():
            log_entry['request'] = {
                'method': request.method,
                'path': request.path,
            }
            if request.view_args:
                log_entry['request']['args'] = dict(request.view_args)

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        # Extra fields passed as extra={'extra_fields': {...}}
        if hasattr(record, 'extra_fields'):
            log_entry.update(record.extra_fields)

        return json.dumps(log_entry, default=str)


def setup_logging(app=None, log_dir=None):
    """Setup logging configuration for the backend.

    Level comes from LOG_LEVEL, the log directory from the ``log_dir``
    argument, then SITEWALK_LOG_DIR, then ``logs/`` next to the backend.

    Args:
        app: Flask app instance; its logger follows the root level (optional)
        log_dir: Directory for the rotating JSON log file (optional)
    """
    log_level_str = os.getenv('LOG_LEVEL', 'INFO').upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    logs_dir = log_dir or os.getenv('SITEWALK_LOG_DIR') or os.path.join(os.path.dirname(__file__), '..', 'logs')
    os.makedirs(logs_dir, exist_ok=True)

    logger = logging.getLogger()
    logger.setLevel(log_level)

    structured_formatter = StructuredFormatter()
    simple_formatter = logging.Formatter(
        '%(asctime)s %(levelname)-8s %(name)-20s %(message)s'
    )

    log_file = os.path.join(logs_dir, 'sitewalk-backend.log')
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(structured_formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(simple_formatter)

    # Clear existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logging.getLogger('werkzeug').setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    logging.getLogger('urllib3').setLevel(logging.WARNING)

    if app is not None:
        app.logger.setLevel(log_level)

    logger.info("Logging initialized", extra={
        'extra_fields': {
            'log_level': log_level_str,
            'log_file': log_file,
            'structured_logging': True
        }
    })

    return logger
