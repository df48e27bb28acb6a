import json
import re
from typing import Any

TRUTHY = frozenset({"true", "1", "yes", "on"})
FALSY = frozenset({"false", "0", "no", "off", ""})

_INT_PREFIX = re.compile(r"[+-]?[0-9]+")

# Whitespace skipped before a base-10 scan: tab, VT, FF, space, NBSP, BOM,
# line terminators and the Unicode space separators.
SCAN_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Stays under the interpreter's int/str conversion limit.
_DIGIT_CHUNK = 1000


def _digits_to_int(digits: str) -> int:
    value = 0
    for i in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[i : i + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def parse_int_prefix(text: str) -> int | None:
    """
    Base-10 integer scan: leading whitespace, optional sign, then digits.
    Trailing characters after the digits are ignored ("42abc" -> 42).
    """
    m = _INT_PREFIX.match(text.lstrip(SCAN_WHITESPACE))
    if not m:
        return None
    token = m.group(0)
    sign = -1 if token[0] == "-" else 1
    return sign * _digits_to_int(token.lstrip("+-"))


def parse_bool_token(text: str) -> bool | None:
    """Case-insensitive boolean token; None when the token is not recognized."""
    v = text.lower()
    if v in TRUTHY:
        return True
    if v in FALSY:
        return False
    return None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_json(text: str) -> Any:
    """Strict JSON document parse. Raises ValueError on malformed input."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except RecursionError as e:
        raise ValueError("document nested too deeply") from e
