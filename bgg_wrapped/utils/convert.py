import math
import re
from typing import Any

_INT_PREFIX_RE = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# BGG counts and years never get near this; longer runs are garbage
MAX_INT_DIGITS = 18


def to_int(value: Any, default: int = 0) -> int:
    """Leading-integer parse of XML text ("12 min" -> 12, "3.9" -> 3).

    Negative results are clamped to the default; collection fields are counts.
    """

    if value is None:
        return default

    if isinstance(value, bool):
        return int(value)

    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return default
        number = int(value)
    else:
        match = _INT_PREFIX_RE.match(str(value))
        if not match:
            return default
        digits = match.group(1)
        if len(digits.lstrip("+-")) > MAX_INT_DIGITS:
            return default
        number = int(digits)

    return number if number >= 0 else default


def to_float(value: Any, default: float = 0.0) -> float:
    """Leading-decimal parse of XML text; NaN, infinities and negatives give the default."""

    if value is None:
        return default

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        number = float(value)
    else:
        match = _FLOAT_PREFIX_RE.match(str(value))
        if not match:
            return default
        try:
            number = float(match.group(1))
        except (OverflowError, ValueError):
            return default

    if not math.isfinite(number) or number < 0:
        return default
    return number if number else 0.0


def to_flag(value: Any) -> bool:
    """BGG status flags are "1"/"0" strings; only "1" counts as set."""

    if value is None:
        return False
    return str(value).strip() == "1"
