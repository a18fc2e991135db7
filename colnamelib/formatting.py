#!/usr/bin/env python
# colnamelib/formatting.py

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

**Formatting simple Python objects for humans.**

"""

from typing import Any, Callable, Iterable, Type

EMPTY_LIST_PLACEHOLDER = "(none)"


# =============================================================================
# Lists of things
# =============================================================================

def join_with_conjunction(conjunction: str,
                          items: Iterable[Any],
                          empty: str = EMPTY_LIST_PLACEHOLDER) -> str:
    """
    Returns a human-friendly list of things, joined at the end by the given
    conjunction. Each item is converted with :func:`str`.

    Args:
        conjunction: e.g. ``"and"``, ``"or"``
        items: the things to list
        empty: what to return if there aren't any things

    Returns:
        the phrase

    Examples:

    .. code-block:: python

        join_with_conjunction("and", [])  # '(none)'
        join_with_conjunction("and", ["x"])  # 'x'
        join_with_conjunction("or", ["x", "y"])  # 'x or y'
        join_with_conjunction("and", ["x", "y", "z"])  # 'x, y, and z'

    """
    strings = [str(x) for x in items]
    if not strings:
        return empty
    if len(strings) == 1:
        return strings[0]
    if len(strings) == 2:
        return f"{strings[0]} {conjunction} {strings[1]}"
    all_but_last = "".join(f"{s}, " for s in strings[:-1])
    return f"{all_but_last}{conjunction} {strings[-1]}"


# =============================================================================
# Making classes displayable
# =============================================================================

def str_from_format(fmt: str, *attrnames: str) -> Callable[[Type], Type]:
    """
    Class decorator to give a class a ``__str__`` method that formats the
    named attributes, in order, into ``fmt``.

    .. code-block:: python

        from colnamelib.formatting import str_from_format

        @str_from_format("{}:{}", "sheet", "col")
        class SheetColumn(object):
            def __init__(self, sheet: str, col: str) -> None:
                self.sheet = sheet
                self.col = col

        str(SheetColumn("Data", "B"))  # 'Data:B'
    """
    def __str__(self: Any) -> str:
        return fmt.format(*(getattr(self, a) for a in attrnames))

    def decorator(cls: Type) -> Type:
        cls.__str__ = __str__
        return cls

    return decorator
