"""Coercion of raw query-string values.

Each parser returns a typed value, or ``None`` when the input is absent
or unusable. Callers treat ``None`` as "no constraint" or "use the
default", so bad input never turns into a crash or a NaN comparison.
"""

import math
import re

# Plain ASCII literals only; float()/int() also take "1_000" and non-ASCII digits
DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def parse_text(raw: str | None) -> str | None:
    """Return the value, or None for an absent or empty parameter."""
    if raw is None or raw == "":
        return None
    return raw


def parse_float(raw: str | None) -> float | None:
    """Parse a finite decimal number; "abc", "nan", "inf" and "1_000" are rejected."""
    text = parse_text(raw)
    if text is None:
        return None
    text = text.strip()
    if not DECIMAL_PATTERN.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def parse_positive_int(raw: str | None) -> int | None:
    """Parse a strictly positive integer; zero and negatives are rejected."""
    text = parse_text(raw)
    if text is None:
        return None
    text = text.strip()
    if not INTEGER_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if value > 0 else None


def parse_bool(raw: str | None) -> bool | None:
    """Parse a stock flag.

    Only the literal ``"true"`` is True; any other present value is False.
    """
    text = parse_text(raw)
    if text is None:
        return None
    return text == "true"
