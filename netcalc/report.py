"""Diagnostics and the usage text shown when option handling fails."""

import argparse
import sys
from typing import Sequence

from netcalc.errors import (
    ExtraPositionalArguments,
    HelpRequested,
    MissingOptionArgument,
    OptionsError,
    UnrecognizedOption,
)

VALUE_FLAGS = ("-n", "-p")
BANNER = "Net Calc - multithreaded network calculation server"


def print_error(message: str):
    """Write a one-line diagnostic to stderr."""
    print(f"Error: {message}", file=sys.stderr)


def report_invalid_option(option: str):
    """Raise the error for an unknown flag or a flag missing its value."""
    if option in VALUE_FLAGS:
        raise MissingOptionArgument(
            f"Option '{option}' requires an argument.", option=option
        )
    raise UnrecognizedOption(f"Unknown option '{option}'.", option=option)


def report_extra_arguments(extras: Sequence[str]):
    """Raise if any argument was left unconsumed."""
    if extras:
        raise ExtraPositionalArguments(extras)


def print_help_menu(parser: argparse.ArgumentParser):
    """Print the banner and the usage text to stdout."""
    print(BANNER)
    print("-" * len(BANNER))
    parser.print_help()


def report_failure(err: OptionsError, parser: argparse.ArgumentParser):
    """Print the cause of a failure, then the usage text.

    Every failure ends with the usage text, including a plain ``-h``.
    """
    if not isinstance(err, HelpRequested):
        print_error(str(err))
    print_help_menu(parser)
