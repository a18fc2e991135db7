#!/usr/bin/env python
# colnamelib/__init__.py

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

**Spreadsheet-style column names for signed 64-bit column numbers, and
human-friendly lists.**

"""

import logging

from colnamelib.colnames import (  # noqa: F401
    column_from_name,
    column_from_name_strict,
    column_name,
    gen_column_names,
    INT64_MAX,
    INT64_MIN,
)
from colnamelib.exceptions import ColumnNameError  # noqa: F401
from colnamelib.formatting import (  # noqa: F401
    join_with_conjunction,
    str_from_format,
)
from colnamelib.version_string import VERSION_STRING

__version__ = VERSION_STRING

logging.getLogger(__name__).addHandler(logging.NullHandler())
