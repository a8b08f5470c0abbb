"""
Logging Configuration

라이브러리 모듈은 logging.getLogger(__name__) 만 사용하고,
핸들러 설정은 스크립트 진입점에서 setup_logger()로 합니다.
"""

import logging
import sys
from typing import Optional, Union

# Log formats
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = "whirlpool",
    level: Optional[Union[int, str]] = None,
    console: bool = True,
    detailed: bool = False,
) -> logging.Logger:
    """
    Setup a logger with a console handler.

    Args:
        name: Logger name (typically the package name)
        level: Logging level; defaults to settings.LOG_LEVEL
        console: Whether to log to console
        detailed: Whether to use detailed format (includes file/line)

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logger("whirlpool", level=logging.DEBUG)
        >>> logger.debug("Fetching 3 tick arrays")
    """
    if level is None:
        from .config import settings
        level = settings.LOG_LEVEL

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    log_format = DETAILED_FORMAT if detailed else SIMPLE_FORMAT
    formatter = logging.Formatter(log_format, datefmt=DATE_FORMAT)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
