"""Configuration records and defaults for the netcalc server."""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger("netcalc")

PROG = "netcalc"

MIN_NUM_THREADS = 2
MIN_PORT_VALUE = 1025
MAX_PORT_VALUE = 65535
# Port field width, terminator included.
MAX_PORT_SIZE = 6

DEFAULT_THREADS = 4
DEFAULT_PORT = "31337"


@dataclass(frozen=True)
class Options:
    """Flags accepted from the command line; unset fields are None."""

    thread_count: Optional[int] = None
    port: Optional[str] = None

    @property
    def thread_count_set(self) -> bool:
        return self.thread_count is not None

    @property
    def port_set(self) -> bool:
        return self.port is not None


@dataclass(frozen=True)
class ServerSettings:
    """What the listener and thread pool start with."""

    port: str
    thread_count: int


def resolve_settings(options: Options) -> ServerSettings:
    """Fill in defaults for any flag that was not given."""
    settings = ServerSettings(
        port=options.port if options.port_set else DEFAULT_PORT,
        thread_count=(
            options.thread_count if options.thread_count_set else DEFAULT_THREADS
        ),
    )
    logger.debug(
        "Resolved settings: port=%s threads=%s", settings.port, settings.thread_count
    )
    return settings
