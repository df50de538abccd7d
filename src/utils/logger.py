"""
Console logger for the configurator

One process-wide Logger prints a header line per message and an optional
tree of key/value details below it:

    [14:23:45] ORDER     ✓ Component order updated
               ├─ source: sms
               └─ target: passkey

Modules bind a category once at import time:

    log = get_logger().for_category(LogCategory.STATE)
    log.info("Config updated", version=3)
"""

import sys
from datetime import datetime
from typing import Dict, List, Optional, TextIO, Tuple

from models.enums import LogCategory, LogLevel

RESET = '\033[0m'
DIM = '\033[2m'

# level -> (symbol, ANSI color, rank)
LEVEL_STYLES: Dict[LogLevel, Tuple[str, str, int]] = {
    LogLevel.DEBUG: ('·', DIM, 0),
    LogLevel.INFO: ('✓', '\033[32m', 1),
    LogLevel.WARN: ('⚠', '\033[33m', 2),
    LogLevel.ERROR: ('✗', '\033[31m', 3),
}

CATEGORY_COLORS: Dict[LogCategory, str] = {
    LogCategory.CONFIG: '\033[36m',
    LogCategory.STATE: '\033[96m',
    LogCategory.COLOR: '\033[95m',
    LogCategory.ORDER: '\033[93m',
    LogCategory.EXPORT: '\033[92m',
    LogCategory.EVENT: '\033[35m',
    LogCategory.API: '\033[94m',
    LogCategory.SYSTEM: '\033[97m',
}

CATEGORY_WIDTH = 9
DETAIL_INDENT = " " * 11


class Logger:
    """
    Category logger with level filtering

    Args:
        min_level: Messages below this level are dropped
        use_colors: Wrap parts of the line in ANSI codes
        stream: Output stream (stdout when None, resolved per call so test
                capture keeps working)
    """

    def __init__(self, min_level: LogLevel = LogLevel.INFO, use_colors: bool = True, stream: Optional[TextIO] = None):
        self.min_level = min_level
        self.use_colors = use_colors
        self.stream = stream

    def enabled_for(self, level: LogLevel) -> bool:
        return LEVEL_STYLES[level][2] >= LEVEL_STYLES[self.min_level][2]

    def _paint(self, text: str, color: Optional[str]) -> str:
        if not self.use_colors or not color:
            return text
        return f"{color}{text}{RESET}"

    def render(self, category: LogCategory, message: str, level: LogLevel, **details) -> List[str]:
        """Build the output lines for one message (no level filtering)"""
        symbol, color, _ = LEVEL_STYLES[level]
        header = " ".join((
            datetime.now().strftime('[%H:%M:%S]'),
            self._paint(category.name.ljust(CATEGORY_WIDTH), CATEGORY_COLORS.get(category)),
            self._paint(symbol, color),
            self._paint(message, color),
        ))

        lines = [header]
        items = list(details.items())
        for index, (key, value) in enumerate(items):
            branch = "└─" if index == len(items) - 1 else "├─"
            lines.append(f"{DETAIL_INDENT}{self._paint(branch, DIM)} {key}: {value}")
        return lines

    def log(self, category: LogCategory, message: str, level: LogLevel = LogLevel.INFO, **details) -> None:
        if not self.enabled_for(level):
            return
        out = self.stream or sys.stdout
        for line in self.render(category, message, level, **details):
            print(line, file=out)

    def debug(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.DEBUG, **kw)
    def info(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.INFO, **kw)
    def warn(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.WARN, **kw)
    def error(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.ERROR, **kw)

    def for_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self, category)


class BoundLogger:
    """Logger view with a fixed category"""

    def __init__(self, base: Logger, category: LogCategory):
        self._base = base
        self._category = category

    @property
    def category(self) -> LogCategory:
        return self._category

    def log(self, message: str, level: LogLevel = LogLevel.INFO, **details) -> None:
        self._base.log(self._category, message, level, **details)

    def debug(self, message: str, **kw): self.log(message, LogLevel.DEBUG, **kw)
    def info(self, message: str, **kw): self.log(message, LogLevel.INFO, **kw)
    def warn(self, message: str, **kw): self.log(message, LogLevel.WARN, **kw)
    def error(self, message: str, **kw): self.log(message, LogLevel.ERROR, **kw)

    def with_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self._base, category)


_logger = Logger()


def get_logger() -> Logger:
    return _logger


def configure_logger(min_level: LogLevel = LogLevel.INFO, use_colors: bool = True, stream: Optional[TextIO] = None) -> Logger:
    """
    Reconfigure the shared logger in place

    Bound loggers created at import time hold a reference to the same
    instance, so they pick up the new settings immediately.
    """
    _logger.min_level = min_level
    _logger.use_colors = use_colors
    _logger.stream = stream
    return _logger
