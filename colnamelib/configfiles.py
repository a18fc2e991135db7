#!/usr/bin/env python
# colnamelib/configfiles.py

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

**Config (.INI) file reading for the column-name tools.**

A config file looks like this; all settings are optional.

.. code-block:: ini

    [colnames]
    conjunction = or
    empty_placeholder = (nothing)
    loglevel = debug

"""

from configparser import ConfigParser, NoOptionError, NoSectionError
import logging
import os
from typing import Any, Callable

from colnamelib.formatting import EMPTY_LIST_PLACEHOLDER
from colnamelib.logs import BraceStyleAdapter, LOGLEVEL_NAMES
from colnamelib.reprfunc import simple_repr

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())
log = BraceStyleAdapter(log)

CONFIG_SECTION = "colnames"
DEFAULT_CONJUNCTION = "and"
DEFAULT_LOGLEVEL = logging.INFO


# =============================================================================
# Reading individual parameters
# =============================================================================

def get_config_string_option(parser: ConfigParser,
                             section: str,
                             option: str,
                             default: str = None) -> str:
    """
    Retrieves a string value from a parser.

    Args:
        parser: instance of :class:`ConfigParser`
        section: section name within config file
        option: option (variable) name within that section
        default: value to return if option is absent

    Returns:
        string value

    Raises:
        ValueError: if the section is absent

    """
    if not parser.has_section(section):
        raise ValueError("config missing section: " + section)
    return parser.get(section, option, fallback=default)


def get_config_parameter(config: ConfigParser,
                         section: str,
                         param: str,
                         fn: Callable[[Any], Any],
                         default: Any) -> Any:
    """
    Fetch parameter from ``configparser`` ``.INI`` file.

    Args:
        config: :class:`ConfigParser` object
        section: section name within config file
        param: name of parameter within section
        fn: function to apply to string parameter (e.g. ``int``)
        default: default value

    Returns:
        parameter value, or ``None`` if ``default is None``, or ``fn(default)``
    """
    try:
        value = fn(config.get(section, param))
    except (TypeError, ValueError, NoOptionError, NoSectionError):
        log.warning("Configuration variable {} not found or improper; "
                    "using default of {!r}", param, default)
        if default is None:
            value = default
        else:
            value = fn(default)
    return value


def get_config_parameter_loglevel(config: ConfigParser,
                                  section: str,
                                  param: str,
                                  default: int) -> int:
    """
    Get ``loglevel`` parameter from ``configparser`` ``.INI`` file, e.g.
    mapping ``'debug'`` to ``logging.DEBUG``.

    Args:
        config: :class:`ConfigParser` object
        section: section name within config file
        param: name of parameter within section
        default: default value
    Returns:
        parameter value, or default
    """
    try:
        value = config.get(section, param).strip().lower()
        return LOGLEVEL_NAMES[value]
    except (KeyError, NoOptionError, NoSectionError):
        log.warning("Configuration variable {} not found or improper; "
                    "using default of {}", param,
                    logging.getLevelName(default))
        return default


def _nonblank(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("blank value")
    return value


# =============================================================================
# Config object
# =============================================================================

class ColnamesConfig(object):
    """
    Settings for the column-name tools.
    """
    def __init__(self,
                 conjunction: str = DEFAULT_CONJUNCTION,
                 empty_placeholder: str = EMPTY_LIST_PLACEHOLDER,
                 loglevel: int = DEFAULT_LOGLEVEL) -> None:
        self.conjunction = conjunction
        self.empty_placeholder = empty_placeholder
        self.loglevel = loglevel

    def __repr__(self) -> str:
        return simple_repr(
            self, ["conjunction", "empty_placeholder", "loglevel"]
        )

    @classmethod
    def from_parser(cls, parser: ConfigParser) -> "ColnamesConfig":
        """
        Reads settings from the ``[colnames]`` section of a parser. If the
        section is absent, all settings take their defaults.
        """
        if not parser.has_section(CONFIG_SECTION):
            log.debug("No [{}] section in config; using defaults",
                      CONFIG_SECTION)
            return cls()
        return cls(
            conjunction=get_config_parameter(
                parser, CONFIG_SECTION, "conjunction", _nonblank,
                DEFAULT_CONJUNCTION),
            empty_placeholder=get_config_string_option(
                parser, CONFIG_SECTION, "empty_placeholder",
                default=EMPTY_LIST_PLACEHOLDER),
            loglevel=get_config_parameter_loglevel(
                parser, CONFIG_SECTION, "loglevel", DEFAULT_LOGLEVEL),
        )

    @classmethod
    def from_file(cls, filename: str) -> "ColnamesConfig":
        """
        Reads settings from an ``.INI`` file.

        Raises:
            FileNotFoundError: if the file doesn't exist
        """
        if not os.path.isfile(filename):
            raise FileNotFoundError(f"No such config file: {filename!r}")
        log.debug("Reading config file: {!r}", filename)
        parser = ConfigParser()
        with open(filename, encoding="utf-8") as f:
            parser.read_file(f)
        return cls.from_parser(parser)
