# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import logging
import os
from datetime import datetime
from logging import LogRecord

from rich.console import Console, ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text
from rich.traceback import Traceback

from .config import CFG


class SingleLineRichHandler(RichHandler):
    """
    RichHandler printing each record without a traceback on a single line,
    regardless of the width of the terminal.
    """

    def render(
        self,
        *,
        record: LogRecord,
        traceback: Traceback | None,
        message_renderable: ConsoleRenderable,
    ) -> ConsoleRenderable:
        if traceback is not None or not isinstance(message_renderable, Text):
            return super().render(
                record=record,
                traceback=traceback,
                message_renderable=message_renderable,
            )

        line = Text()
        if self._log_render.show_time:
            log_time = datetime.fromtimestamp(record.created)
            line.append(log_time.strftime(CFG.date_formats.standard), style="log.time")
            line.append(" ")
        line.append_text(self.get_level_text(record))
        line.append(" ")
        line.append_text(message_renderable)
        return line


def get_logger(name: str, show_time: bool = False) -> logging.Logger:
    """
    Return a batchelor logger writing colored messages to stderr.

    Progress messages and error diagnostics of a run are printed one record per line,
    so that they can be filtered line by line. Debug level and timestamps are enabled
    if the environment variable named by `CFG.env_vars.debug_mode` is set.
    """
    logger = logging.getLogger(name)

    debug_mode = os.environ.get(CFG.env_vars.debug_mode) is not None
    logger.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    # avoid duplicated output when a logger is requested repeatedly
    if logger.handlers:
        return logger

    # soft wrapping leaves long lines to the terminal
    console = Console(stderr=True, soft_wrap=True)
    handler = SingleLineRichHandler(
        console=console,
        rich_tracebacks=True,
        show_path=False,
        show_level=True,
        show_time=show_time or debug_mode,
        log_time_format=CFG.date_formats.standard,
        tracebacks_width=None,
        tracebacks_code_width=None,
    )

    handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)
    logger.addHandler(handler)
    logger.propagate = False

    return logger
