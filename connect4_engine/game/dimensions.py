"""
dimensions.py - Normalisation of requested board dimensions

Whatever a caller passes for a width or height, these helpers turn it into a
usable board size instead of raising.
"""

import math
import numbers
import re
from typing import Any, Optional, Tuple

from connect4_engine.debug import debug
from connect4_engine.utils import DEFAULT_WIDTH, DEFAULT_HEIGHT, MIN_SIZE

DEFAULTS = {
    'width': DEFAULT_WIDTH,
    'height': DEFAULT_HEIGHT,
}

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


def parse_dimension(requested: Any) -> Optional[int]:
    """
    Parse the leading integer out of a requested dimension.

    Numbers are truncated toward zero and strings contribute their leading
    (optionally signed) run of digits, so both ``7.9`` and ``"7.9"`` give 7.

    Args:
        requested: Any value supplied by the caller

    Returns:
        The parsed integer, or None if nothing usable was found
    """
    if requested is None or isinstance(requested, bool):
        return None

    if isinstance(requested, numbers.Integral):
        return int(requested)

    if isinstance(requested, numbers.Number):
        # Decimal is a Number but not registered as Real; complex has no float()
        try:
            value = float(requested)
        except TypeError:
            return None
        if not math.isfinite(value):
            return None
        return math.trunc(value)

    if isinstance(requested, str):
        match = _LEADING_INT.match(requested)
        if match is None:
            return None
        return int(match.group(1))

    return None


def validate_dimension(requested: Any, kind: str) -> int:
    """
    Turn a requested width or height into a legal board dimension.

    Args:
        requested: The requested size, possibly missing or malformed
        kind: Either 'width' or 'height', selects the default

    Returns:
        The default for ``kind`` if the input is unparseable or zero, at
        least MIN_SIZE otherwise
    """
    if kind not in DEFAULTS:
        raise ValueError(f"Unknown dimension kind: {kind!r}")

    value = parse_dimension(requested)

    if not value:
        debug.trace(f"{kind} {requested!r} unusable, defaulting to {DEFAULTS[kind]}", "board")
        return DEFAULTS[kind]

    if value < MIN_SIZE:
        debug.trace(f"{kind} {value} below minimum, clamping to {MIN_SIZE}", "board")
        return MIN_SIZE

    return value


def validate_dimensions(width: Any = None, height: Any = None) -> Tuple[int, int]:
    """Validate a width and height pair."""
    return validate_dimension(width, 'width'), validate_dimension(height, 'height')
