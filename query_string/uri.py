"""percent-encoding of a single uri component, same character set as `encodeURIComponent`"""

import math
import re
from decimal import Decimal
from typing import Any
from urllib.parse import quote, unquote_to_bytes
from .constants import SAFE_CHARS
from .exceptions import DecodeError

_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def encode_component(text: str) -> str:
    return quote(text, safe=SAFE_CHARS)


def decode_component(text: str) -> str:
    if "%" not in text:
        return text

    m = _BAD_ESCAPE_RE.search(text)
    if m is not None:
        raise DecodeError(text, f"malformed escape at position {m.start()}")

    try:
        return unquote_to_bytes(text).decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(text, "escapes are not valid utf-8") from e


def to_text(value: Any) -> str:
    """Convert a scalar into the text that gets percent-encoded."""
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    # bool before int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _float_to_text(value)
    return str(value)


def _float_to_text(value: float) -> str:
    """shortest round-trip digits laid out like javascript's `String(number)`"""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    k = len(digits)
    # position of the decimal point relative to the first digit
    n = exponent + k

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + text
