"""Errors raised while resolving netcalc's command-line options."""

from typing import Optional, Sequence


class OptionsError(ValueError):
    """Base class for every command-line option failure."""

    def __init__(self, message: str, option: Optional[str] = None):
        super().__init__(message)
        self.option = option


class NullInput(OptionsError):
    """No argument vector was given."""


class HelpRequested(OptionsError):
    """`-h` was passed; help always ends option processing unsuccessfully."""

    def __init__(self):
        super().__init__("Help requested.", option="-h")


class DuplicateFlag(OptionsError):
    """A flag was given more than once."""


class ConversionFailure(OptionsError):
    """A flag value is not a valid 32-bit integer."""


class OutOfRange(OptionsError):
    """A flag value converted but lies outside its accepted range."""


class TooLong(OptionsError):
    """A flag value has more characters than its field can hold."""


class UnrecognizedOption(OptionsError):
    """A flag other than -n, -p or -h was given."""


class MissingOptionArgument(OptionsError):
    """-n or -p was given without its value."""


class ExtraPositionalArguments(OptionsError):
    """Arguments were left over after all flags were consumed."""

    def __init__(self, arguments: Sequence[str]):
        self.arguments = list(arguments)
        super().__init__(
            "Invalid arguments encountered: " + " ".join(self.arguments)
        )
