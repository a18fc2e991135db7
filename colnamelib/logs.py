#!/usr/bin/env python
# colnamelib/logs.py

"""
===============================================================================

    Copyright (C) 2026 the colnamelib authors.

    This file is part of colnamelib.

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

        https://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.

===============================================================================

**Support functions for logging.**

LIBRARY CODE in this package does this, and adds no other handlers:

.. code-block:: python

    import logging
    log = logging.getLogger(__name__)
    log.addHandler(logging.NullHandler())

Command-line entry points (and only they) configure the root logger:

.. code-block:: python

    from colnamelib.logs import main_only_quicksetup_rootlogger
    main_only_quicksetup_rootlogger(level=logging.INFO)

DO NOT call this module "logging"!

"""

from inspect import Parameter, signature
import logging
from typing import Any, Dict, TextIO, Tuple

from colorlog import ColoredFormatter

# =============================================================================
# Log format
# =============================================================================

LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "bold_yellow",
    "ERROR": "bold_red",
    "CRITICAL": "bold_white,bg_red",
}

LOGLEVEL_NAMES = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "fatal": logging.CRITICAL,
}


def get_colour_handler(stream: TextIO = None) -> logging.StreamHandler:
    """
    Gets a colour log handler using a standard format.

    Args:
        stream: ``TextIO`` stream to send log output to (default: stderr)

    Returns:
        the :class:`logging.StreamHandler`

    """
    fmt = "%(white)s%(asctime)s.%(msecs)03d"  # dim white = grey
    fmt += " %(name)s:%(levelname)s: "
    fmt += "%(reset)s%(log_color)s%(message)s"
    cf = ColoredFormatter(
        fmt,
        datefmt=LOG_DATEFMT,
        reset=True,
        log_colors=LOG_COLORS,
        secondary_log_colors={},
        style="%",
    )
    ch = logging.StreamHandler(stream)
    ch.setFormatter(cf)
    return ch


def configure_logger_for_colour(logger: logging.Logger,
                                level: int = logging.INFO,
                                remove_existing: bool = False,
                                stream: TextIO = None) -> None:
    """
    Applies a preconfigured datetime/colour scheme to a logger.

    Should ONLY be called from the ``if __name__ == '__main__'`` script.

    Args:
        logger: logger to modify
        level: log level to set
        remove_existing: remove existing handlers from logger first?
        stream: ``TextIO`` stream to send log output to
    """
    if remove_existing:
        logger.handlers = []
    handler = get_colour_handler(stream=stream)
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)


def main_only_quicksetup_rootlogger(level: int = logging.DEBUG,
                                    stream: TextIO = None) -> None:
    """
    Quick function to set up the root logger for colour.

    Should ONLY be called from the ``if __name__ == '__main__'`` script.

    Args:
        level: log level to set
        stream: ``TextIO`` stream to send log output to
    """
    rootlogger = logging.getLogger()
    configure_logger_for_colour(rootlogger, level, remove_existing=True,
                                stream=stream)


def set_rootlogger_level(level: int) -> None:
    """
    Changes the level of the root logger and all its handlers, e.g. once a
    config file has been read.
    """
    rootlogger = logging.getLogger()
    rootlogger.setLevel(level)
    for h in rootlogger.handlers:
        h.setLevel(level)


# =============================================================================
# Brace-style logging
# =============================================================================

class BraceMessage(object):
    """
    A message including braces (``{}``) and a set of ``args``/``kwargs``.
    When converted to a ``str``, the message is realized via
    ``fmt.format(*args, **kwargs)``, so formatting is deferred until (and
    unless) the message is actually emitted.
    """
    def __init__(self,
                 fmt: str,
                 args: Tuple[Any, ...],
                 kwargs: Dict[str, Any]) -> None:
        self.fmt = fmt
        self.args = args
        self.kwargs = kwargs

    def __str__(self) -> str:
        return self.fmt.format(*self.args, **self.kwargs)


class BraceStyleAdapter(logging.LoggerAdapter):
    """
    Wraps a logger so we can use ``{}``-style string formatting.

    .. code-block:: python

        import logging
        from colnamelib.logs import BraceStyleAdapter

        log = BraceStyleAdapter(logging.getLogger(__name__))
        log.info("Column {} is called {name}", 26, name="AA")
    """
    def __init__(self, logger: logging.Logger) -> None:
        super().__init__(logger=logger, extra=None)
        # e.g. ['level', 'msg', 'args', 'exc_info', 'extra', 'stack_info']
        # noinspection PyProtectedMember
        sig = signature(self.logger._log)
        self.logargnames = [p.name for p in sig.parameters.values()
                            if p.kind == Parameter.POSITIONAL_OR_KEYWORD]

    def log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(level):
            msg, log_kwargs = self.process(msg, kwargs)
            # noinspection PyProtectedMember
            self.logger._log(level, BraceMessage(msg, args, kwargs), (),
                             **log_kwargs)

    def process(self, msg: str,
                kwargs: Dict[str, Any]) -> Tuple[str, Dict[str, Any]]:
        log_kwargs = {k: kwargs[k] for k in kwargs.keys()
                      if k in self.logargnames}
        return msg, log_kwargs
