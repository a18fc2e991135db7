#!/usr/bin/env python
# colnamelib/exceptions.py

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

**Exceptions, and functions for exception handling.**

"""

import logging
import sys
import traceback
from typing import Any

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())


# =============================================================================
# Exceptions
# =============================================================================

class ColumnNameError(ValueError):
    """
    A column name was malformed, or a column name or number was outside the
    signed 64-bit range.

    The offending name or number is available as ``value``.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


# =============================================================================
# Exception handling
# =============================================================================

def die(exc: Exception = None, exit_code: int = 1) -> None:
    """
    Logs the stack trace of ``exc`` (if given) as a critical error, then exits
    with the specified exit code.

    Python will exit with a non-zero code upon an unhandled exception, but we
    want control over which code, and want the traceback to go to the log.

    Args:
        exc: the exception, or ``None``
        exit_code: the process exit code
    """
    if exc:
        lines = traceback.format_exception(
            type(exc), exc, exc.__traceback__
        )
        log.critical("".join(lines))
    log.critical("Exiting with exit code {}".format(exit_code))
    sys.exit(exit_code)
