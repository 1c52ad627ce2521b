"""Formatting policy shared by the node mapper.

Locale-free number formatting, permalink encoding and display initials.
"""

import unicodedata
from decimal import ROUND_HALF_EVEN, Decimal
from typing import Optional

import regex

MAXIMUM_PERMALINK_LENGTH = 2000

NOT_A_NUMBER = "NaN"
INFINITY = "∞"

NEGATIVE_PREFIX = "- "
POSITIVE_PREFIX = "+ "


def is_alphanumeric(char: str) -> bool:
    """Letters, digits and combining marks count as alphanumeric."""
    return unicodedata.category(char).startswith(("L", "M", "N"))


def format_number(value: float, maximum_fraction_digits: Optional[int] = None) -> str:
    """Format a number without grouping or exponent, trimming trailing zeros.

    Rounds half-even to ``maximum_fraction_digits`` when given. Negative
    zero, including values that round to zero, renders as ``"0"``. NaN and
    infinities render as "NaN" and "∞".
    """
    number = Decimal(repr(float(value)))
    if number.is_nan():
        return NOT_A_NUMBER
    if number.is_infinite():
        return "-" + INFINITY if number < 0 else INFINITY
    if maximum_fraction_digits is not None and number.as_tuple().exponent < -maximum_fraction_digits:
        number = number.quantize(Decimal(1).scaleb(-maximum_fraction_digits), rounding=ROUND_HALF_EVEN)

    text = format(number, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def percent_encode_alphanumerics(text: str) -> Optional[str]:
    """Percent-encode every non-alphanumeric character as UTF-8 bytes.

    Returns None when the text is not encodable (e.g. lone surrogates).
    """
    encoded = []
    for char in text:
        if is_alphanumeric(char):
            encoded.append(char)
            continue
        try:
            data = char.encode("utf-8")
        except UnicodeEncodeError:
            return None
        encoded.append("".join(f"%{byte:02X}" for byte in data))
    return "".join(encoded)


def character_count(text: str) -> int:
    """Number of user-perceived characters (extended grapheme clusters)."""
    return len(regex.findall(r"\X", text))


def make_permalink(raw: str) -> Optional[str]:
    """Encoded raw text, or None when encoding fails or it is too long to share."""
    encoded = percent_encode_alphanumerics(raw)
    if encoded is None or character_count(encoded) >= MAXIMUM_PERMALINK_LENGTH:
        return None
    return encoded


def initial_of(name: str) -> str:
    """First alphanumeric character of ``name``, upper-cased; "" if none."""
    for char in name:
        if is_alphanumeric(char):
            return char.upper()
    return ""
