"""String to signed 32-bit integer conversion."""

import re
from typing import NamedTuple, Optional

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


class Number(NamedTuple):
    ok: bool
    value: int = 0


def str_to_int32(text: Optional[str]) -> Number:
    """Convert decimal text to a signed 32-bit integer.

    Accepts an optional sign followed by ASCII digits; leading zeros are
    allowed, surrounding whitespace is not. Empty, non-numeric and
    overflowing input yields ``Number(ok=False)``.
    """
    if not text or not _DECIMAL_RE.fullmatch(text):
        return Number(False)
    value = int(text)
    if not (INT32_MIN <= value <= INT32_MAX):
        return Number(False)
    return Number(True, value)
