import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | service=%(service)s | %(message)s"

# uvicorn installs its own handlers; route them through ours instead
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class _ServiceFilter(logging.Filter):
    def __init__(self, service_name: str) -> None:
        super().__init__()
        self.service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = self.service_name
        return True


def configure_logging(service_name: str, level: str) -> logging.Handler:
    """Send every record to stdout tagged with `service_name`; replaces earlier setup."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(_ServiceFilter(service_name))

    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(level.upper())

    for name in UVICORN_LOGGERS:
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.propagate = True

    logging.getLogger(__name__).info("Logging configured (level=%s)", level.upper())
    return handler
