#!/usr/bin/env python
# colnamelib/tools/colnames.py

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

**Command-line tool to convert between column numbers and column names.**

Examples:

.. code-block:: bash

    colnamelib_colnames encode 0 25 26 -1      # A, Z, AA, nA
    colnamelib_colnames decode AAA nZ          # 702, -26
    colnamelib_colnames join --conjunction or x y z   # x, y, or z
    colnamelib_colnames table 20 30

"""

import argparse
import configparser
import logging
import sys
from typing import List

from prettytable import PrettyTable

from colnamelib.argparse_func import (
    int64,
    positive_int,
    RawDescriptionArgumentDefaultsHelpFormatter,
)
from colnamelib.colnames import (
    column_from_name_strict,
    column_name,
    gen_column_names,
)
from colnamelib.configfiles import ColnamesConfig
from colnamelib.exceptions import ColumnNameError, die
from colnamelib.formatting import join_with_conjunction
from colnamelib.logs import (
    BraceStyleAdapter,
    main_only_quicksetup_rootlogger,
    set_rootlogger_level,
)

log = BraceStyleAdapter(logging.getLogger(__name__))

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2

DEFAULT_MAX_TABLE_ROWS = 1000


# =============================================================================
# Commands
# =============================================================================

def encode(indexes: List[int]) -> int:
    """
    Prints the name of each column number. Returns an exit code.
    """
    for n in indexes:
        print(column_name(n))
    return EXIT_SUCCESS


def decode(names: List[str]) -> int:
    """
    Prints the column number for each name. Bad names are reported and
    skipped. Returns an exit code.
    """
    exit_code = EXIT_SUCCESS
    for name in names:
        try:
            print(column_from_name_strict(name))
        except ColumnNameError as exc:
            log.error("{}", exc)
            exit_code = EXIT_FAILURE
    return exit_code


def join(items: List[str], conjunction: str, empty: str) -> int:
    """
    Prints the items as a human-friendly list. Returns an exit code.
    """
    print(join_with_conjunction(conjunction, items, empty=empty))
    return EXIT_SUCCESS


def make_table(first: int, last: int) -> PrettyTable:
    """
    Makes a table of column numbers and names from ``first`` to ``last``
    inclusive.
    """
    table = PrettyTable(["Index", "Name"])
    table.align["Index"] = "r"
    table.align["Name"] = "l"
    for n, name in gen_column_names(first, last):
        table.add_row([n, name])
    return table


# =============================================================================
# Command-line processing
# =============================================================================

def get_parser() -> argparse.ArgumentParser:
    """
    Returns the command-line parser.
    """
    parser = argparse.ArgumentParser(
        description="Convert between spreadsheet-style column numbers "
                    "(zero-based, signed 64-bit) and column names (A, B, "
                    "..., Z, AA, ...; negative numbers are nA, nB, ...).",
        formatter_class=RawDescriptionArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--config",
        help="Config (.INI) file; see colnamelib.configfiles")
    parser.add_argument(
        "--verbose", action="store_true",
        help="Be verbose (debug logging)")
    subparsers = parser.add_subparsers(
        dest="command", title="commands", required=True)

    encode_parser = subparsers.add_parser(
        "encode", help="Column numbers to names",
        formatter_class=RawDescriptionArgumentDefaultsHelpFormatter)
    encode_parser.add_argument(
        "indexes", nargs="+", type=int64, metavar="INDEX",
        help="Zero-based column number")

    decode_parser = subparsers.add_parser(
        "decode", help="Column names to numbers",
        formatter_class=RawDescriptionArgumentDefaultsHelpFormatter)
    decode_parser.add_argument(
        "names", nargs="+", metavar="NAME",
        help="Column name, e.g. AA or nB")

    join_parser = subparsers.add_parser(
        "join", help="Join items into a human-friendly list",
        formatter_class=RawDescriptionArgumentDefaultsHelpFormatter)
    join_parser.add_argument(
        "items", nargs="*", metavar="ITEM",
        help="Things to list")
    join_parser.add_argument(
        "--conjunction",
        help="Conjunction before the last item (default: from config, or "
             "'and')")

    table_parser = subparsers.add_parser(
        "table", help="Print a table of column numbers and names",
        formatter_class=RawDescriptionArgumentDefaultsHelpFormatter)
    table_parser.add_argument(
        "first", type=int64, help="First column number")
    table_parser.add_argument(
        "last", type=int64, help="Last column number (inclusive)")
    table_parser.add_argument(
        "--maxrows", type=positive_int, default=DEFAULT_MAX_TABLE_ROWS,
        help="Maximum number of rows to print")

    return parser


def main(argv: List[str] = None) -> None:
    """
    Command-line processor. See ``--help`` for details.
    """
    main_only_quicksetup_rootlogger(level=logging.INFO)
    parser = get_parser()
    args = parser.parse_args(argv)

    if args.config:
        try:
            config = ColnamesConfig.from_file(args.config)
        except (FileNotFoundError,
                configparser.Error,
                UnicodeDecodeError) as exc:
            log.critical("Bad config file {!r}: {}", args.config, exc)
            die(exit_code=EXIT_CONFIG_ERROR)
    else:
        config = ColnamesConfig()
    set_rootlogger_level(logging.DEBUG if args.verbose else config.loglevel)
    log.debug("Arguments: {!r}; config: {!r}", args, config)

    if args.command == "encode":
        exit_code = encode(args.indexes)
    elif args.command == "decode":
        exit_code = decode(args.names)
    elif args.command == "join":
        exit_code = join(args.items,
                         conjunction=args.conjunction or config.conjunction,
                         empty=config.empty_placeholder)
    elif args.command == "table":
        n_rows = args.last - args.first + 1
        if n_rows < 1:
            parser.error("LAST must not be less than FIRST")
        if n_rows > args.maxrows:
            parser.error(f"That would be {n_rows} rows; the maximum is "
                         f"{args.maxrows} (see --maxrows)")
        print(make_table(args.first, args.last).get_string())
        exit_code = EXIT_SUCCESS
    else:
        # argparse enforces a command, so this is a programming error
        raise AssertionError(f"Unknown command: {args.command!r}")
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
