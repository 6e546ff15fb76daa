"""
Process-wide logging setup.

One stdout handler on the root logger; every line carries the request's
correlation ID (or "-" outside a request).

Dependencies: logging (stdlib), mindmenu.observability.correlation
System role: Logging bootstrap, called from the app lifespan
"""

import logging
import sys

from mindmenu.observability.correlation import get_correlation_id

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(correlation_id)s] %(name)s: %(message)s"
NOISY_LOGGERS = ("botocore", "boto3", "urllib3", "httpx", "httpcore")


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    """
    Replace root handlers with a single correlation-aware stdout handler.

    Args:
        level: Root level name, e.g. "DEBUG"
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z"))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level.upper())

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
