"""Pixel value helpers: the only place raw value text becomes a number."""

from __future__ import annotations

import math
import re

PX_UNIT = "px"
UNITLESS_ZERO = "0"

# A CSS <number>: optional sign, digits with optional fraction, optional exponent.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def has_px_unit(value: str) -> bool:
    """Return True if *value* ends with the ``px`` unit."""
    return isinstance(value, str) and value.endswith(PX_UNIT)


def is_unitless_zero(value: str) -> bool:
    return value == UNITLESS_ZERO


def is_comparable(value: str) -> bool:
    """Return True if *value* has a form the matcher compares numerically."""
    return has_px_unit(value) or is_unitless_zero(value)


def read_px_value(value: str) -> float | None:
    """Extract the magnitude of a pixel value.

    ``"16px"`` gives ``16.0`` and the unitless ``"0"`` gives ``0.0``. Returns
    None for values without the ``px`` suffix. As with other CSS tooling, the
    longest leading number is read (``"12abcpx"`` gives ``12.0``); a suffixed
    value with no leading number (``"abcpx"``, ``"px"``) gives None.
    """
    if is_unitless_zero(value):
        return 0.0
    if not has_px_unit(value):
        return None
    match = _NUMBER_RE.match(value[: -len(PX_UNIT)].lstrip())
    if match is None:
        return None
    number = float(match.group())
    if not math.isfinite(number):
        return None
    return number
