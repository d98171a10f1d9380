import logging
import re
from typing import Iterable, Iterator, Optional

# Colour and style escapes, e.g. uvicorn's coloured status codes
ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


class StripAnsiFilter(logging.Filter):
    """
    Render the record's message without ANSI escapes.

    The message is rendered first so escapes carried in ``%`` arguments
    are removed too; ``args`` is then cleared so handlers do not
    format it a second time.
    """

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        message = record.getMessage()
        if ANSI_ESCAPE_RE.search(message):
            record.msg = strip_ansi(message)
            record.args = None
        return True


def _configured_loggers(names: Optional[Iterable[str]]) -> Iterator[logging.Logger]:
    yield logging.getLogger()
    if names is None:
        names = [
            name for name, logger in logging.root.manager.loggerDict.items()
            if isinstance(logger, logging.Logger)
        ]
    for name in names:
        yield logging.getLogger(name)


def attach_strip_ansi_to_file_handlers(logger_names: Optional[Iterable[str]] = None) -> int:
    """
    Attach StripAnsiFilter to the FileHandlers of the root logger and of
    every named logger (all configured loggers when no names are given).

    Run after logging.config.fileConfig(...). Handlers already carrying
    the filter are skipped. Returns how many handlers got a new filter.
    """
    attached = 0
    for logger in _configured_loggers(logger_names):
        for handler in logger.handlers:
            if not isinstance(handler, logging.FileHandler):
                continue
            if any(isinstance(f, StripAnsiFilter) for f in handler.filters):
                continue
            handler.addFilter(StripAnsiFilter())
            attached += 1
    return attached
