#!/usr/bin/env python
# colnamelib/argparse_func.py

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

**Functions to help with argparse.**

"""

from argparse import (
    ArgumentDefaultsHelpFormatter,
    ArgumentTypeError,
    RawDescriptionHelpFormatter,
)

from colnamelib.colnames import INT64_MAX, INT64_MIN


# =============================================================================
# Argparse formatters
# =============================================================================

class RawDescriptionArgumentDefaultsHelpFormatter(
        ArgumentDefaultsHelpFormatter,
        RawDescriptionHelpFormatter):
    """
    Combines the features of

    - :class:`RawDescriptionHelpFormatter` -- don't mangle the description
    - :class:`ArgumentDefaultsHelpFormatter` -- print argument defaults
    """
    pass


# =============================================================================
# Argparse types/checkers
# =============================================================================

def int64(value: str) -> int:
    """
    ``argparse`` argument type that checks that its value is an integer in
    the signed 64-bit range.
    """
    try:
        ivalue = int(value)
    except (TypeError, ValueError):
        raise ArgumentTypeError(f"{value!r} is an invalid int")
    if not INT64_MIN <= ivalue <= INT64_MAX:
        raise ArgumentTypeError(
            f"{value!r} is outside the signed 64-bit range")
    return ivalue


def positive_int(value: str) -> int:
    """
    ``argparse`` argument type that checks that its value is a positive
    integer.
    """
    try:
        ivalue = int(value)
    except (TypeError, ValueError):
        ivalue = 0
    if ivalue <= 0:
        raise ArgumentTypeError(
            "{!r} is an invalid positive int".format(value))
    return ivalue
