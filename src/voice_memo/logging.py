import logging
import os
import sys

from pythonjsonlogger.json import JsonFormatter


def setup_logging():
    """
    Configures and sets up structured JSON logging for the application.

    Installs a single JSON stream handler on the root logger, writing to
    stderr so that stdout stays reserved for command output. The level is
    read from the LOG_LEVEL environment variable. The httpx request logger
    is capped at WARNING so that poll requests do not flood the output.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in ["httpx", "httpcore"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    return root_logger
