"""Match resolved values against a query pattern."""

import logging
import math
import re
from typing import Any, Pattern, Union

logger = logging.getLogger(__name__)

MATCH_TYPES = (bool, int, float, str)

_EXPONENT_PADDING = re.compile(r"e([+-])0*(?=\d)")


def stringify(value: Any) -> str:
    """Render a scalar close to how it reads in JSON or JavaScript text.

    Booleans are lowercase, integral floats drop the fraction, infinities and
    NaN use their JavaScript names, and exponents lose zero padding. Other
    floats keep Python's shortest repr, so very small or large values may
    still differ (``1e-05`` is ``0.00001`` in JavaScript).

    Examples:
        >>> stringify(True)
        "true"
        >>> stringify(3.0)
        "3"
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return _EXPONENT_PADDING.sub(r"e\1", repr(value))
    return str(value)


def matches(candidate: Any, query: Union[str, Pattern[str]]) -> bool:
    """Check whether ``candidate`` contains a match for ``query``.

    The query is a regular expression used as-is: matching is case-sensitive
    and unanchored. Only booleans, numbers and strings can match.
    """
    if not isinstance(candidate, MATCH_TYPES):
        return False

    try:
        return re.search(query, stringify(candidate)) is not None
    except Exception as e:
        logger.warning("Could not match %r against %r: %s", candidate, query, e)
        return False
