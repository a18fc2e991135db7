#!/usr/bin/env python
# colnamelib/colnames.py

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

**Spreadsheet-style column names for signed 64-bit column numbers.**

Column numbers map to names like this:

.. code-block:: none

    ...  -28   -27  -26  ...  -2   -1    0    1  ...  25   26   27  ...
    ...  nAB   nAA  nZ   ...  nB   nA    A    B  ...  Z    AA   AB  ...

Non-negative numbers use "bijective base 26": A is zero, but AA is 26, not
"10". There is no zero digit, and so no name has a shorter equivalent (as
there are no leading zeros).

Negative numbers mirror non-negative ones: ``-1`` is ``nA`` (mirroring ``0``,
which is ``A``), ``-2`` is ``nB``, and so on. We use ``-(n + 1)`` rather than
``-n`` as there is no negative zero.

The domain is that of a signed 64-bit integer, from ``-2 ** 63`` (``nCRPX...``)
to ``2 ** 63 - 1`` (``CRPX...``).

"""

import logging
from typing import Iterable, Optional, Tuple

from colnamelib.exceptions import ColumnNameError

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())


# =============================================================================
# Constants
# =============================================================================

BASE = 26
ZERO_CHAR = "A"
LAST_CHAR = "Z"
NEGATIVE_PREFIX = "n"

INT64_MAX = 2 ** 63 - 1
INT64_MIN = -(2 ** 63)

MAX_COLUMN_NAME = "CRPXNLSKVLJFHH"  # column_name(INT64_MAX)
MIN_COLUMN_NAME = NEGATIVE_PREFIX + MAX_COLUMN_NAME  # column_name(INT64_MIN)


# =============================================================================
# Number -> name
# =============================================================================

def column_name(n: int) -> str:
    """
    Returns a column's name from its (zero-based, signed) number.

    Args:
        n: column number, in the signed 64-bit range

    Returns:
        the name, e.g. ``"A"`` for 0, ``"AA"`` for 26, ``"nA"`` for -1

    Raises:
        TypeError: if ``n`` is not an integer
        ColumnNameError: if ``n`` is outside the signed 64-bit range

    """
    # bool is a subclass of int, but True is not a column
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"Column number must be an int, not {n!r}")
    if not INT64_MIN <= n <= INT64_MAX:
        raise ColumnNameError(
            f"Column number {n} is outside the signed 64-bit range", value=n
        )
    negative = n < 0
    if negative:
        n = -(n + 1)
    zero = ord(ZERO_CHAR)
    reversed_chars = []
    while True:
        n, small = divmod(n, BASE)
        reversed_chars.append(chr(zero + small))
        if n <= 0:
            break
        n -= 1
    name = "".join(reversed(reversed_chars))
    if negative:
        return NEGATIVE_PREFIX + name
    return name


def gen_column_names(first: int, last: int) -> Iterable[Tuple[int, str]]:
    """
    Generates ``(column_number, column_name)`` tuples for every column number
    from ``first`` to ``last`` inclusive.

    .. code-block:: python

        list(gen_column_names(24, 27))
        # [(24, 'Y'), (25, 'Z'), (26, 'AA'), (27, 'AB')]

    Raises:
        ColumnNameError: at once (not on iteration) if ``first`` or ``last``
            is outside the signed 64-bit range
    """
    for n in (first, last):
        if not INT64_MIN <= n <= INT64_MAX:
            raise ColumnNameError(
                f"Column number {n} is outside the signed 64-bit range",
                value=n,
            )

    def gen() -> Iterable[Tuple[int, str]]:
        for i in range(first, last + 1):
            yield i, column_name(i)

    return gen()


# =============================================================================
# Name -> number
# =============================================================================

def _digit(char: str) -> Optional[int]:
    """
    Value of a single letter (0 for A, 25 for Z), or ``None`` if it isn't an
    uppercase ASCII letter.
    """
    if ZERO_CHAR <= char <= LAST_CHAR:
        return ord(char) - ord(ZERO_CHAR)
    return None


def column_from_name(name: str) -> Optional[int]:
    """
    Reverses :func:`column_name`: returns a column number from its name, or
    ``None`` if the name is invalid or out of the signed 64-bit range.

    Only a single leading ``n`` is accepted (so ``nnB`` is invalid), and only
    the letters A-Z after it (so ``a``, ``AnZ`` and ``93`` are invalid).
    """
    if not isinstance(name, str):
        return None
    negative = name.startswith(NEGATIVE_PREFIX)
    if negative:
        name = name[len(NEGATIVE_PREFIX):]
    if not name:
        return None
    total = _digit(name[0])
    if total is None:
        return None
    for char in name[1:]:
        digit = _digit(char)
        if digit is None:
            return None
        total = (total + 1) * BASE + digit
        # Python ints don't overflow, so check the 64-bit limit by hand at
        # every step.
        if total > INT64_MAX:
            return None
    if negative:
        # Can't underflow: the most negative result is -INT64_MAX - 1.
        return -total - 1
    return total


def column_from_name_strict(name: str) -> int:
    """
    As for :func:`column_from_name`, but raises :exc:`ColumnNameError`
    rather than returning ``None`` for a bad name.
    """
    n = column_from_name(name)
    if n is None:
        raise ColumnNameError(
            f"Invalid or out-of-range column name: {name!r}", value=name
        )
    return n
