from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_HANDLER_NAME = "notice_engine_console"


def configure_logging(level: str = "INFO", stream=None) -> logging.Logger:
    """Attach a single console handler (stdout by default) to the root logger.

    Safe to call repeatedly (app factory, CLI, tests); the handler is only
    added once and the level is updated each time.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in root_logger.handlers):
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root_logger.addHandler(handler)

    return root_logger
