"""
Parsing and bounds checking of caller-supplied addresses.

Transport layers hand over raw path parameters (usually strings). Everything
here raises FormatError when a value does not have the expected shape and
RangeError when it parses but is out of bounds.
"""

import re

from mushaf.exceptions import FormatError, RangeError
from mushaf.models import JUZ_COUNT, PAGE_COUNT, SURAH_COUNT

INTEGER_PATTERN = re.compile(r"\s*([+-]?)(\d+)\s*", re.ASCII)
AYAH_KEY_PATTERN = re.compile(r"(-?)(\d+):(-?)(\d+)", re.ASCII)

# Longer numbers are rejected before int() so huge inputs stay cheap
MAX_DIGITS = 9

INTEGER_EXPECTED = f"an integer of at most {MAX_DIGITS} digits"
AYAH_KEY_EXPECTED = 'format "surah:ayah" (e.g., "1:1")'


def parse_number(field: str, raw: str | int) -> int:
    """
    Parse a decimal integer address component.

    Examples:
        >>> parse_number("surah", "2")
        2
        >>> parse_number("surah", "2a")
        Traceback (most recent call last):
        ...
        mushaf.exceptions.FormatError: Invalid surah '2a': expected an integer of at most 9 digits
    """
    if isinstance(raw, bool):
        raise FormatError(field, raw, INTEGER_EXPECTED)
    if isinstance(raw, int):
        return raw
    match = INTEGER_PATTERN.fullmatch(raw) if isinstance(raw, str) else None
    if match is None:
        raise FormatError(field, raw, INTEGER_EXPECTED)
    return _to_int(field, raw, match.group(1), match.group(2))


def check_bounds(field: str, value: int, lower: int, upper: int, scope: str = "") -> int:
    if not lower <= value <= upper:
        raise RangeError(field, value, lower, upper, scope)
    return value


def parse_surah_number(raw: str | int) -> int:
    return check_bounds("surah", parse_number("surah", raw), 1, SURAH_COUNT)


def parse_juz_number(raw: str | int) -> int:
    return check_bounds("juz", parse_number("juz", raw), 1, JUZ_COUNT)


def parse_page_number(raw: str | int) -> int:
    return check_bounds("page", parse_number("page", raw), 1, PAGE_COUNT)


def parse_ayah_key(key: str) -> tuple[int, int]:
    """
    Split a combined "surah:ayah" identifier into its two numbers.

    Only the shape is checked here; bounds are the caller's concern so a
    well-formed but out-of-range key follows the same path as separate
    parameters.

    Examples:
        >>> parse_ayah_key("2:255")
        (2, 255)
    """
    if not isinstance(key, str):
        raise FormatError("ayah key", key, AYAH_KEY_EXPECTED)
    match = AYAH_KEY_PATTERN.fullmatch(key)
    if match is None:
        raise FormatError("ayah key", key, AYAH_KEY_EXPECTED)
    surah_sign, surah, ayah_sign, ayah = match.groups()
    return (
        _to_int("ayah key", key, surah_sign, surah, AYAH_KEY_EXPECTED),
        _to_int("ayah key", key, ayah_sign, ayah, AYAH_KEY_EXPECTED),
    )


def _to_int(
    field: str, raw: str, sign: str, digits: str, expected: str = INTEGER_EXPECTED
) -> int:
    digits = digits.lstrip("0") or "0"
    if len(digits) > MAX_DIGITS:
        raise FormatError(field, raw, expected)
    return int(sign + digits)
