"""
hiera.backend.interpolation
===========================

``%{name}`` placeholder expansion.

Variables resolve against the caller's *scope* first and an optional
*extra_data* mapping second; anything unresolved becomes the empty string.
After each substitution the working copy is scanned again from the start,
so a value that itself contains ``%{...}`` is expanded on the next pass.
Chained values can therefore keep producing placeholders; the number of
passes is capped at :data:`MAX_INTERPOLATION_PASSES` and the partially
expanded string is returned once the cap is hit.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from hiera.utils.patterns import INTERPOLATION_PATTERN

logger = logging.getLogger(__name__)

MAX_INTERPOLATION_PASSES = 100


def _resolve(source: Any, name: str) -> Any:
    if source is None:
        return None
    return source.get(name)


def parse_string(
    data: Any,
    scope: Any,
    extra_data: Optional[Mapping[str, Any]] = None,
) -> Any:
    """
    Expand ``%{var}`` placeholders in *data*.

    If both *scope* and *extra_data* define ``var`` the scope wins. A value
    missing from both (or empty in the scope and missing from *extra_data*)
    is replaced with an empty string. Non-string *data*, including ``None``,
    is returned as is.

    Args:
        data: Template to expand.
        scope: Anything with a ``get(name)`` method, usually a dict.
        extra_data: Fallback variables consulted after *scope*.

    Returns:
        The expanded string, or *data* unchanged when it is not a string.
    """
    if not isinstance(data, str):
        return data

    result = data
    passes = 0
    match = INTERPOLATION_PATTERN.search(result)
    while match:
        if passes >= MAX_INTERPOLATION_PASSES:
            logger.warning(
                "Stopped interpolating %r after %d passes", data, passes
            )
            break
        passes += 1

        var = match.group(1)
        value = _resolve(scope, var)
        if value is None or value == "":
            value = _resolve(extra_data, var)
        if value is None:
            value = ""

        result = result.replace(match.group(0), str(value))
        match = INTERPOLATION_PATTERN.search(result)

    return result


def parse_answer(
    data: Any,
    scope: Any,
    extra_data: Optional[Mapping[str, Any]] = None,
) -> Any:
    """Interpolate every string inside *data*, walking lists and dicts."""
    if isinstance(data, str):
        return parse_string(data, scope, extra_data)
    if isinstance(data, list):
        return [parse_answer(item, scope, extra_data) for item in data]
    if isinstance(data, dict):
        return {
            parse_answer(k, scope, extra_data): parse_answer(v, scope, extra_data)
            for k, v in data.items()
        }
    return data
