#!/usr/bin/env python
# colnamelib/reprfunc.py

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

**Functions to assist making repr() methods for Python objects.**

"""

from typing import Any, List


def simple_repr(obj: Any, attrnames: List[str]) -> str:
    """
    Convenience function for :func:`__repr__`.
    Works its way through a list of attribute names, and creates a ``repr()``
    representation assuming that parameters to the constructor have the same
    names.

    Args:
        obj: object to display
        attrnames: names of attributes to include

    Returns:
        string: :func:`repr`-style representation, e.g. ``Thing(a=1, b='x')``

    """
    elements = [f"{name}={getattr(obj, name)!r}" for name in attrnames]
    return "{qualname}({elements})".format(
        qualname=obj.__class__.__qualname__,
        elements=", ".join(elements))
