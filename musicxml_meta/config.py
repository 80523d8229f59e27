"""
Configuration Module.

Settings are read from the environment when the module is imported.

Environment variables:
    MUSICXML_META_LOG_LEVEL: Root log level name (default INFO)
    MUSICXML_META_LOG_FILE: Optional path of a log file
    MUSICXML_META_MAX_UPLOAD_MB: Upload size cap for the web service (default 16)
    SECRET_KEY: Secret key for the web service sessions
"""

from typing import List, Optional
import logging
import os

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

LOG_LEVEL = os.environ.get('MUSICXML_META_LOG_LEVEL', 'INFO').upper()
LOG_FILE: Optional[str] = os.environ.get('MUSICXML_META_LOG_FILE') or None
MAX_UPLOAD_BYTES = int(os.environ.get('MUSICXML_META_MAX_UPLOAD_MB', '16')) * 1024 * 1024
SECRET_KEY = os.environ.get('SECRET_KEY') or os.urandom(24)


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure root logging for the console driver and the web service.

    Args:
        level (Optional[str]): Log level name, defaults to LOG_LEVEL
        log_file (Optional[str]): Log file path, defaults to LOG_FILE
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    log_file = log_file or LOG_FILE
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level or LOG_LEVEL, logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers
    )
