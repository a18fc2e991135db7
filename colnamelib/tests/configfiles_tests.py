#!/usr/bin/env python
# colnamelib/tests/configfiles_tests.py

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

from configparser import ConfigParser
import logging
import os
import tempfile
import unittest

from colnamelib.configfiles import (
    ColnamesConfig,
    get_config_parameter,
    get_config_parameter_loglevel,
    get_config_string_option,
)


def parser_from_string(text: str) -> ConfigParser:
    parser = ConfigParser()
    parser.read_string(text)
    return parser


class TestConfigParameters(unittest.TestCase):
    def setUp(self) -> None:
        self.parser = parser_from_string(
            "[s]\n"
            "word = hello\n"
            "number = 42\n"
            "notnumber = xyz\n"
            "level = Debug\n"
            "badlevel = loud\n"
        )

    def test_string(self) -> None:
        self.assertEqual(
            get_config_string_option(self.parser, "s", "word"), "hello")
        self.assertEqual(
            get_config_string_option(self.parser, "s", "absent", "dflt"),
            "dflt")
        self.assertRaises(ValueError, get_config_string_option,
                          self.parser, "nosection", "word")

    def test_parameter(self) -> None:
        self.assertEqual(
            get_config_parameter(self.parser, "s", "number", int, 1), 42)
        with self.assertLogs("colnamelib.configfiles", logging.WARNING):
            self.assertEqual(
                get_config_parameter(self.parser, "s", "notnumber", int, 1),
                1)
        with self.assertLogs("colnamelib.configfiles", logging.WARNING):
            self.assertIsNone(
                get_config_parameter(self.parser, "s", "absent", int, None))

    def test_loglevel(self) -> None:
        self.assertEqual(
            get_config_parameter_loglevel(self.parser, "s", "level",
                                          logging.INFO),
            logging.DEBUG)
        with self.assertLogs("colnamelib.configfiles", logging.WARNING):
            self.assertEqual(
                get_config_parameter_loglevel(self.parser, "s", "badlevel",
                                              logging.INFO),
                logging.INFO)


class TestColnamesConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        config = ColnamesConfig()
        self.assertEqual(config.conjunction, "and")
        self.assertEqual(config.empty_placeholder, "(none)")
        self.assertEqual(config.loglevel, logging.INFO)
        self.assertEqual(
            repr(config),
            "ColnamesConfig(conjunction='and', empty_placeholder='(none)', "
            "loglevel=20)")

    def test_no_section(self) -> None:
        config = ColnamesConfig.from_parser(
            parser_from_string("[other]\nx = 1\n"))
        self.assertEqual(config.conjunction, "and")

    def test_from_parser(self) -> None:
        config = ColnamesConfig.from_parser(parser_from_string(
            "[colnames]\n"
            "conjunction = or\n"
            "empty_placeholder = (nothing)\n"
            "loglevel = warning\n"
        ))
        self.assertEqual(config.conjunction, "or")
        self.assertEqual(config.empty_placeholder, "(nothing)")
        self.assertEqual(config.loglevel, logging.WARNING)

    def test_blank_conjunction_falls_back(self) -> None:
        with self.assertLogs("colnamelib.configfiles", logging.WARNING):
            config = ColnamesConfig.from_parser(parser_from_string(
                "[colnames]\nconjunction =\nloglevel = info\n"))
        self.assertEqual(config.conjunction, "and")

    def test_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            filename = os.path.join(tmpdir, "colnames.ini")
            with open(filename, "w", encoding="utf-8") as f:
                f.write("[colnames]\nconjunction = plus\nloglevel = error\n")
            config = ColnamesConfig.from_file(filename)
            self.assertEqual(config.conjunction, "plus")
            self.assertEqual(config.loglevel, logging.ERROR)
            self.assertRaises(FileNotFoundError, ColnamesConfig.from_file,
                              os.path.join(tmpdir, "absent.ini"))
