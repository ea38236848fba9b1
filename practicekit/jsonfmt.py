"""Pretty-printing of JSON text with sorted keys and two-space indentation."""

from __future__ import annotations

import json
import math
import re
import sys
from decimal import Decimal
from typing import Any, Optional, Sequence

_INDENT = "  "

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}

_NEEDS_ESCAPE = re.compile('[\x00-\x1f"\\\\<>&\u2028\u2029\ud800-\udfff]')


def _escape_char(match: "re.Match[str]") -> str:
    ch = match.group()
    if ch in _ESCAPES:
        return _ESCAPES[ch]
    if "\ud800" <= ch <= "\udfff":
        return "\ufffd"
    return f"\\u{ord(ch):04x}"


def _quote(text: str) -> str:
    return '"' + _NEEDS_ESCAPE.sub(_escape_char, text) + '"'


def _format_number(x: float) -> str:
    if x == 0:
        return "-0" if math.copysign(1.0, x) < 0 else "0"
    d = Decimal(repr(x))
    magnitude = abs(x)
    if magnitude < 1e-6 or magnitude >= 1e21:
        sign, digits, _ = d.as_tuple()
        text = "".join(map(str, digits)).rstrip("0") or "0"
        mantissa = text[0] + ("." + text[1:] if len(text) > 1 else "")
        return ("-" if sign else "") + mantissa + f"e{d.adjusted():+d}"
    text = format(d, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _dump(value: Any, depth: int) -> str:
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, float):
        return _format_number(value)
    if isinstance(value, str):
        return _quote(value)
    inner = _INDENT * (depth + 1)
    outer = _INDENT * depth
    if isinstance(value, list):
        if not value:
            return "[]"
        body = ",\n".join(inner + _dump(item, depth + 1) for item in value)
        return "[\n" + body + "\n" + outer + "]"
    if not value:
        return "{}"
    body = ",\n".join(
        f"{inner}{_quote(key)}: {_dump(value[key], depth + 1)}" for key in sorted(value)
    )
    return "{\n" + body + "\n" + outer + "}"


def _parse_number(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number {text} is out of range")
    return value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid literal {name}")


def format_json(text: str) -> str:
    """Reformat JSON text; numbers become double precision. Raises ValueError if invalid."""
    value = json.loads(
        text,
        parse_float=_parse_number,
        parse_int=_parse_number,
        parse_constant=_reject_constant,
    )
    return _dump(value, 0)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Pretty-print the JSON document given as the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: json_format <json-string>")
        return 0
    try:
        formatted = format_json(args[0])
    except ValueError as error:
        print("Invalid JSON:", error)
        return 0
    print(formatted)
    return 0


if __name__ == "__main__":
    sys.exit(main())