import logging
import os
import sys

from pythonjsonlogger import jsonlogger

ACCESS_LOGGERS = ["uvicorn", "uvicorn.access", "uvicorn.error"]


def setup_logging(level: str | None = None):
    """
    Configures structured JSON logging for the review service.

    Every record carries timestamp, level, logger name, message, trace_id
    and span_id. The root logger and the Uvicorn loggers write through one
    stdout handler so request logs and repository logs share a format.
    The level comes from `level`, else LOG_LEVEL, else INFO.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for name in ACCESS_LOGGERS:
        access_logger = logging.getLogger(name)
        access_logger.setLevel(level)
        access_logger.handlers = [handler]
        access_logger.propagate = False

    return root_logger
