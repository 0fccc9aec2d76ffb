"""Command-line option handling for the netcalc server.

Only three flags exist: ``-n NUM`` (worker threads), ``-p PORT`` (listen
port) and ``-h``. Each accepted value is folded into an immutable
:class:`~netcalc.config.Options` record carried on the argparse namespace, so
a flag given twice is seen by its validator and rejected.
"""

import argparse
import logging
import re
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from netcalc.config import (
    DEFAULT_PORT,
    DEFAULT_THREADS,
    MAX_PORT_SIZE,
    MAX_PORT_VALUE,
    MIN_NUM_THREADS,
    MIN_PORT_VALUE,
    PROG,
    Options,
)
from netcalc.convert import str_to_int32
from netcalc.errors import (
    ConversionFailure,
    DuplicateFlag,
    HelpRequested,
    NullInput,
    OptionsError,
    OutOfRange,
    TooLong,
)
from netcalc.report import (
    VALUE_FLAGS,
    report_extra_arguments,
    report_failure,
    report_invalid_option,
)

logger = logging.getLogger("netcalc")

DESCRIPTION = """\
Net Calc is a server application that performs a variety of operations.
It listens for incoming connections over network sockets, enqueues the data,
and processes the work in a queue with a thread pool."""

EPILOG = """\
examples:
  netcalc -p 8080 -n 8
  netcalc -h

For more information, see the documentation."""

# argparse leaves these to be consumed as values, not flags.
_NEGATIVE_NUMBER_RE = re.compile(r"^-\d+$|^-\d*\.\d+$")


def process_n_option(value: str, options: Options) -> Options:
    """Validate the ``-n`` thread count and return the updated record."""
    if options.thread_count_set:
        raise DuplicateFlag("'-n' flag given more than once.", option="-n")

    number = str_to_int32(value)
    if not number.ok:
        raise ConversionFailure(
            f"Unable to convert '-n' value {value!r} to a number.", option="-n"
        )
    if number.value < MIN_NUM_THREADS:
        raise OutOfRange(
            f"Number of threads must be {MIN_NUM_THREADS} or more.", option="-n"
        )

    logger.debug("Accepted -n %s", number.value)
    return replace(options, thread_count=number.value)


def process_p_option(value: str, options: Options) -> Options:
    """Validate the ``-p`` port and return the updated record.

    The raw text is stored, not the converted number. Length is checked
    first so that oversized input is rejected as too long whatever its
    numeric value.
    """
    if options.port_set:
        raise DuplicateFlag("'-p' flag given more than once.", option="-p")

    if len(value) > MAX_PORT_SIZE - 1:
        raise TooLong(f"Port string {value!r} is too long.", option="-p")

    number = str_to_int32(value)
    if not number.ok:
        raise ConversionFailure(
            f"Unable to convert '-p' value {value!r} to a number.", option="-p"
        )
    if not (MIN_PORT_VALUE <= number.value <= MAX_PORT_VALUE):
        raise OutOfRange(
            f"Port number must be between {MIN_PORT_VALUE} and {MAX_PORT_VALUE}.",
            option="-p",
        )

    logger.debug("Accepted -p %s", value)
    return replace(options, port=value)


class ValidateAction(argparse.Action):
    """Run a flag's validator against the record stored on the namespace."""

    def __init__(self, option_strings, dest, validator, **kwargs):
        super().__init__(option_strings, dest, default=argparse.SUPPRESS, **kwargs)
        self.validator = validator

    def __call__(self, parser, namespace, values, option_string=None):
        namespace.options = self.validator(values, namespace.options)


class HelpAction(argparse.Action):
    def __init__(self, option_strings, dest=argparse.SUPPRESS, **kwargs):
        super().__init__(
            option_strings, dest, nargs=0, default=argparse.SUPPRESS, **kwargs
        )

    def __call__(self, parser, namespace, values, option_string=None):
        raise HelpRequested()


class OptionParser(argparse.ArgumentParser):
    """Argument parser that raises :class:`OptionsError` instead of exiting."""

    def __init__(self):
        super().__init__(
            prog=PROG,
            description=DESCRIPTION,
            epilog=EPILOG,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            add_help=False,
            allow_abbrev=False,
            exit_on_error=False,
        )
        self.add_argument(
            "-p",
            metavar="PORT",
            action=ValidateAction,
            validator=process_p_option,
            help=(
                f"Port to listen on; (MIN: {MIN_PORT_VALUE}, MAX: {MAX_PORT_VALUE}) "
                f"defaults to {DEFAULT_PORT}."
            ),
        )
        self.add_argument(
            "-n",
            metavar="NUM",
            action=ValidateAction,
            validator=process_n_option,
            help=(
                f"Number of threads in the pool; (MIN: {MIN_NUM_THREADS}) "
                f"defaults to {DEFAULT_THREADS}."
            ),
        )
        self.add_argument(
            "-h", action=HelpAction, help="Print this help menu and exit."
        )

    def error(self, message):
        raise OptionsError(message)


def _is_flag(arg: str) -> bool:
    """Whether argparse reads ``arg`` as a flag rather than a value."""
    return (
        arg.startswith("-")
        and len(arg) > 1
        and " " not in arg
        and not _NEGATIVE_NUMBER_RE.match(arg)
    )


def _split_at_unknown(args: Sequence[str]) -> Tuple[List[str], Optional[str]]:
    """Return the arguments before the first unknown flag, and that flag.

    ``-n=5`` is passed on as ``-n`` and ``=5`` so the ``=`` reaches the
    validator instead of being dropped by argparse.
    """
    known: List[str] = []
    index = 0
    while index < len(args):
        arg = args[index]
        if arg == "--":
            known.extend(args[index:])
            break
        if not _is_flag(arg) or arg[:2] == "-h":
            known.append(arg)
        elif arg[:2] in VALUE_FLAGS:
            if arg[2:3] == "=":
                known.extend([arg[:2], arg[2:]])
            else:
                known.append(arg)
                if len(arg) == 2 and index + 1 < len(args) and not _is_flag(args[index + 1]):
                    index += 1
                    known.append(args[index])
        else:
            return known, arg
        index += 1
    return known, None


def _scan(parser: OptionParser, argv: Optional[Sequence[str]]) -> Options:
    if not argv:
        raise NullInput("No argument vector passed.")

    known, unknown = _split_at_unknown(list(argv[1:]))
    namespace = argparse.Namespace(options=Options())
    try:
        namespace, extras = parser.parse_known_args(known, namespace)
    except argparse.ArgumentError as err:
        # -h grouped with an unknown letter (-hz): help comes first.
        if err.argument_name == "-h":
            raise HelpRequested() from err
        report_invalid_option(err.argument_name)

    if unknown is not None:
        report_invalid_option(unknown)
    report_extra_arguments(extras)
    return namespace.options


def parse_options(argv: Optional[Sequence[str]]) -> Options:
    """Resolve ``argv`` (program name first) into an :class:`Options` record.

    The first failure stops processing. Its cause goes to stderr and the
    usage text to stdout, then the error is re-raised; the process is never
    exited from here.
    """
    parser = OptionParser()
    try:
        return _scan(parser, argv)
    except OptionsError as err:
        logger.debug("Option handling failed: %r", err)
        report_failure(err, parser)
        raise
