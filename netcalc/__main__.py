"""Entry point: resolve command-line options into server settings."""

import logging
import sys

from netcalc.config import ServerSettings, resolve_settings
from netcalc.errors import OptionsError
from netcalc.options import parse_options

logger = logging.getLogger("netcalc")


def load_settings(argv) -> ServerSettings:
    """Parse ``argv`` and fill in defaults; raises :class:`OptionsError`."""
    return resolve_settings(parse_options(argv))


def main(argv=None):
    """Return 0 once settings are resolved, 1 if option handling failed."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if argv is None:
        argv = sys.argv
    try:
        settings = load_settings(argv)
    except OptionsError:
        # Cause and usage have already been printed.
        return 1
    logger.info(
        "Handing off to listener on port %s with %s worker threads",
        settings.port,
        settings.thread_count,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
