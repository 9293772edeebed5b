"""Formatter rendering structured extra fields after the message."""

import logging
from typing import Any

from .constants import LogConstants
from .logger import EXTRA_ATTR


def _format_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    if isinstance(value, Exception):
        return value.__class__.__name__
    return str(value)


class LogFormatter(logging.Formatter):
    """
    Plain-text formatter: "[time] [L] message   [key:value] ... [name]".

    Extra fields are sorted by key so output is stable across runs. They are
    added to the message line, so any traceback follows them.
    """

    def __init__(self, rule_width: int = LogConstants.DEFAULT_RULE_WIDTH) -> None:
        super().__init__(LogConstants.DEFAULT_FORMAT, LogConstants.DATE_FORMAT)
        self._rule_width = rule_width

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        extra = getattr(record, EXTRA_ATTR, None) or {}
        if extra:
            line += " " * max(1, self._rule_width - len(line))
            line += " ".join(
                f"[{key}:{_format_value(extra[key])}]" for key in sorted(extra)
            )
        return f"{line} [{record.name}]"
