"""Wildcard matching of request paths for path-based access lists."""

from __future__ import annotations

import re
from typing import Optional

# Compiled patterns keyed by the original wildcard pattern. A ``None`` entry
# records a pattern that could not be compiled and therefore never matches.
_PATTERN_CACHE: dict[str, Optional[re.Pattern[str]]] = {}

_DEEP_WILDCARD = "[a-zA-Z0-9_/.~-]+"
_SEGMENT_WILDCARD = "[a-zA-Z0-9_.~-]+"


def _compile(pattern: str) -> Optional[re.Pattern[str]]:
    expression = pattern.replace("**", _DEEP_WILDCARD)
    expression = expression.replace("*", _SEGMENT_WILDCARD)
    try:
        return re.compile("^" + expression + r"\Z")
    except re.error:
        return None


def match_path_based_acl(pattern: str, uri: str) -> bool:
    """Return True when ``uri`` matches the wildcard ``pattern``.

    Without wildcards the pattern must equal the URI. ``*`` matches one path
    segment and ``**`` matches any number of segments. An empty pattern or
    one that cannot be compiled matches nothing.
    """
    if not pattern:
        return False
    if "*" not in pattern:
        return pattern == uri
    if pattern in _PATTERN_CACHE:
        regex = _PATTERN_CACHE[pattern]
    else:
        regex = _compile(pattern)
        _PATTERN_CACHE[pattern] = regex
    if regex is None:
        return False
    return regex.match(uri) is not None