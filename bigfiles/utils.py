from __future__ import annotations
import math
from decimal import Decimal
from .models import SizeUnit

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}

def to_unit(size_bytes: int, unit: SizeUnit) -> float:
    return size_bytes / float(unit.divisor)

def format_number(value: float) -> str:
    """Shortest plain rendering of a float, never in exponent form.

    ``100.0`` -> ``100``, ``9.5367431640625e-06`` -> ``0.0000095367431640625``.
    """
    if not math.isfinite(value):
        return repr(value)
    if value == int(value):
        return str(int(value))
    return format(Decimal(repr(value)), "f")

def quote_path(text: str) -> str:
    """Double-quote ``text``, escaping quotes, backslashes and control characters."""
    out = []
    for ch in text:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif not ch.isprintable() and ch != " ":
            out.append("\\u{%x}" % ord(ch))
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'
