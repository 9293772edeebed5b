"""
Logger class with a TRACE level and structured extra fields.

Extra fields passed with a log call are kept together on the record so the
formatter can render them as "[key:value]" after the message.
"""

import logging
from typing import Any

from .constants import LogConstants

EXTRA_ATTR = "_repro_extra"


class Logger(logging.Logger):
    """
    Logger with trace() and pre-populated extra fields.

    Example:
        lg = create_lg("repro", "trace")
        lg.trace("route rejected", extra={"route": "bad route!"})
    """

    def __init__(
        self,
        name: str,
        level: int = logging.NOTSET,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize the logger.

        Args:
            name: Logger name
            level: Numeric log level
            extra: Fields included in every record from this logger
        """
        super().__init__(name, level)
        self._extra = dict(extra or {})

    def makeRecord(  # type: ignore[override]
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: object,
        args: Any,
        exc_info: Any,
        func: str | None = None,
        extra: dict[str, Any] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        """Create a record carrying the merged extra fields."""
        merged = {**self._extra, **(extra or {})}
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func, merged, sinfo
        )
        setattr(record, EXTRA_ATTR, merged)
        return record

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """
        Log a TRACE level message.

        Args:
            msg: Log message
            *args: Message format arguments
            **kwargs: Additional keyword arguments including 'extra' for structured data
        """
        if self.isEnabledFor(LogConstants.TRACE):
            self._log(LogConstants.TRACE, msg, args, **kwargs)
