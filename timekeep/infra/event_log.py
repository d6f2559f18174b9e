"""
Event Log - Leveled log messages relayed to the backend.

Architecture Decision: Explicit interface instead of patched globals
Views get an EventLog instance and call info/warn/error/debug on it. Each
accepted message becomes a LogEvent that is emitted on a Qt signal (the
bridge to the backend log) and written to the standard logging module.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Sequence

from PySide6.QtCore import QObject, Signal

from timekeep.domain.models import LogEvent

logger = logging.getLogger(__name__)

DEBUG = "DEBUG"
INFO = "INFO"
WARN = "WARN"
ERROR = "ERROR"

_LOGGING_LEVELS = {
    DEBUG: logging.DEBUG,
    INFO: logging.INFO,
    WARN: logging.WARNING,
    ERROR: logging.ERROR,
}


def _arg_text(arg: Any) -> str:
    if arg is None:
        return "<nil>"
    if isinstance(arg, bool):
        return "true" if arg else "false"
    if isinstance(arg, float) and arg.is_integer():
        return str(int(arg))
    return str(arg)


def assemble_values(args: Sequence[Any]) -> Dict[str, str]:
    """
    Pair up alternating key/value arguments.

    A single list or tuple argument is unpacked first. A trailing key
    without a value is dropped. Keys and values render the same way:
    None as "<nil>", booleans as "true"/"false", whole floats without ".0".
    """
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        return assemble_values(args[0])

    values: Dict[str, str] = {}
    for i in range(0, len(args) - 1, 2):
        values[_arg_text(args[i])] = _arg_text(args[i + 1])
    return values


class EventLog(QObject):
    """
    Leveled log interface for the presentation layer.

    Debug messages are dropped unless debug is enabled.
    """

    log_event = Signal(object)  # LogEvent

    def __init__(self, debug_enabled: bool = False, parent=None):
        super().__init__(parent)
        self.debug_enabled = debug_enabled

    def set_debug(self, enabled: bool):
        self.debug_enabled = enabled

    def info(self, message: str, *args: Any):
        self._log(INFO, message, args)

    def warn(self, message: str, *args: Any):
        self._log(WARN, message, args)

    def error(self, message: str, *args: Any):
        self._log(ERROR, message, args)

    def debug(self, message: str, *args: Any):
        self._log(DEBUG, message, args)

    def _log(self, level: str, message: str, args: Sequence[Any]):
        if level == DEBUG and not self.debug_enabled:
            return

        event = LogEvent(
            time=datetime.now(),
            level=level,
            message=message,
            values=assemble_values(args),
        )
        logger.log(_LOGGING_LEVELS[level], "%s %s", message, event.values or "")
        self.log_event.emit(event)
