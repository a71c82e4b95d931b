"""Numeric conversions that report failure as ``None`` instead of raising."""

import math
import re
from decimal import Decimal

INT32_MAX = 2**31 - 1
INT64_MAX = 2**63 - 1

_FLOAT_EXACT_LIMIT = 2**53
_LEADING_DIGITS = re.compile(r"[0-9]*")


def _is_digit_run(s: str) -> bool:
    # int() also accepts signs, whitespace, underscores and non-ASCII digits.
    return bool(s) and s.isascii() and s.isdigit()


def try_to_int32(s: str) -> int | None:
    """Convert a digit run to an int that fits a signed 32-bit integer.

    Args:
        s: String expected to hold only ASCII digits.

    Returns:
        The value, or None if ``s`` is not a digit run or overflows.
    """
    value = try_to_bignum(s)
    if value is None or value > INT32_MAX:
        return None
    return value


def try_to_int64(s: str) -> int | None:
    """Convert a digit run to an int that fits a signed 64-bit integer.

    Args:
        s: String expected to hold only ASCII digits.

    Returns:
        The value, or None if ``s`` is not a digit run or overflows.
    """
    value = try_to_bignum(s)
    if value is None or value > INT64_MAX:
        return None
    return value


def try_to_bignum(s: str) -> int | None:
    """Convert a digit run to an arbitrary-precision int."""
    if not _is_digit_run(s):
        return None
    # Through Decimal to bypass sys.get_int_max_str_digits().
    return int(Decimal(s))


def try_to_float(s: str) -> float | None:
    """Convert a digit run to a finite float approximation."""
    if not _is_digit_run(s):
        return None
    value = float(s)
    if not math.isfinite(value):
        return None
    return value


def try_to_bignum_or_float(s: str, has_bignum: bool) -> int | float | None:
    """Convert a digit run using the widest numeric type available.

    Args:
        s: String expected to hold only ASCII digits.
        has_bignum: Whether arbitrary-precision integers may be used. When
            False the value is approximated with a float.

    Returns:
        The converted value, or None on failure.
    """
    if has_bignum:
        return try_to_bignum(s)
    return try_to_float(s)


def leading_digits(s: str) -> tuple[str, str]:
    """Split a string into its leading ASCII digit run and the remainder.

    Example:
        >>> leading_digits("42beta")
        ('42', 'beta')
    """
    match = _LEADING_DIGITS.match(s)
    digits = match.group() if match else ""
    return digits, s[len(digits) :]


def format_number(value: int | float) -> str:
    """Render a converted value for use in a leftover string."""
    if isinstance(value, float):
        if value.is_integer() and abs(value) < _FLOAT_EXACT_LIMIT:
            return str(int(value))
        return repr(value)
    return str(Decimal(value))
