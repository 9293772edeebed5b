"""Constants for the logging system."""

import logging


class LogConstants:
    """Constants for the logging system."""

    DEFAULT_FORMAT: str = "[%(asctime)s] [%(levelname).1s] %(message)s"
    DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    # Message column width before extra fields are appended
    DEFAULT_RULE_WIDTH: int = 50

    TRACE: int = 5

    LEVEL_NAMES: dict[str, int] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
        "trace": TRACE,
    }
