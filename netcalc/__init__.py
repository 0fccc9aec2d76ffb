"""Net Calc: command-line option handling for the netcalc server."""

from netcalc.config import Options, ServerSettings, resolve_settings
from netcalc.errors import OptionsError
from netcalc.options import parse_options

__all__ = [
    "Options",
    "OptionsError",
    "ServerSettings",
    "parse_options",
    "resolve_settings",
]
