#!/usr/bin/env python
# colnamelib/tests/logs_tests.py

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

**Unit tests.**

"""

import io
import logging
import unittest

from colnamelib.logs import (
    BraceStyleAdapter,
    configure_logger_for_colour,
    get_colour_handler,
)


class TestBraceStyleLogging(unittest.TestCase):
    def test_brace_formatting(self) -> None:
        log = BraceStyleAdapter(logging.getLogger("colnamelib.test.brace"))
        with self.assertLogs("colnamelib.test.brace", logging.INFO) as cm:
            log.info("Column {} is called {name}", 26, name="AA")
            log.debug("not shown")
        self.assertEqual([r.getMessage() for r in cm.records],
                         ["Column 26 is called AA"])

    def test_colour_handler(self) -> None:
        stream = io.StringIO()
        logger = logging.getLogger("colnamelib.test.colour")
        logger.propagate = False
        handler = get_colour_handler(stream=stream)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        try:
            BraceStyleAdapter(logger).warning("bad name {!r}", "nnB")
        finally:
            logger.removeHandler(handler)
        output = stream.getvalue()
        self.assertIn("colnamelib.test.colour:WARNING: ", output)
        self.assertIn("bad name 'nnB'", output)

    def test_configure_logger_for_colour(self) -> None:
        stream = io.StringIO()
        logger = logging.getLogger("colnamelib.test.configure")
        logger.propagate = False
        configure_logger_for_colour(logger, logging.WARNING,
                                    remove_existing=True, stream=stream)
        try:
            logger.info("not shown")
            logger.error("column %s", "nA")
        finally:
            logger.handlers = []
        output = stream.getvalue()
        self.assertIn(" colnamelib.test.configure:ERROR: ", output)
        self.assertIn("column nA", output)
        self.assertNotIn("not shown", output)
