"""Authorization bypass and header injection settings."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class ConfigError(ValueError):
    """Raised when a bypass or header injection entry is invalid."""


class BypassMatch(IntEnum):
    """How a bypass entry compares its URI with the request path."""

    UNKNOWN = 0
    EXACT = 1
    PARTIAL = 2
    PREFIX = 3
    SUFFIX = 4
    REGEX = 5


_MATCH_TYPES = {
    "exact": BypassMatch.EXACT,
    "partial": BypassMatch.PARTIAL,
    "prefix": BypassMatch.PREFIX,
    "suffix": BypassMatch.SUFFIX,
    "regex": BypassMatch.REGEX,
}


@dataclass
class BypassConfig:
    """A request path that skips authorization."""

    match_type: str = ""
    uri: str = ""
    _match: BypassMatch = field(default=BypassMatch.UNKNOWN, init=False, repr=False)
    _regex: Optional[re.Pattern[str]] = field(default=None, init=False, repr=False)

    @property
    def match(self) -> BypassMatch:
        """The match strategy; UNKNOWN until the entry is validated."""
        return self._match

    def validate(self) -> None:
        """Check the entry and prepare it for matching."""
        if self.match_type == "":
            raise ConfigError("undefined bypass match type")
        try:
            match = _MATCH_TYPES[self.match_type]
        except KeyError:
            raise ConfigError(
                f'invalid "{self.match_type}" bypass match type'
            ) from None
        self._match = match
        self.uri = self.uri.strip()
        if not self.uri:
            raise ConfigError("undefined bypass uri")
        if self._regex is None:
            try:
                self._regex = re.compile(self.uri)
            except re.error as exc:
                raise ConfigError(str(exc)) from exc

    def matches(self, path: str) -> bool:
        """Return True when ``path`` bypasses authorization under this entry."""
        match = self._match
        if match is BypassMatch.EXACT:
            return self.uri == path
        if match is BypassMatch.PARTIAL:
            return self.uri in path
        if match is BypassMatch.PREFIX:
            return path.startswith(self.uri)
        if match is BypassMatch.SUFFIX:
            return path.endswith(self.uri)
        if match is BypassMatch.REGEX and self._regex is not None:
            return self._regex.search(path) is not None
        return False


@dataclass
class HeaderInjectionConfig:
    """A mapping from a request header to a token claim field."""

    header: str = ""
    field: str = ""

    def validate(self) -> None:
        """Trim the names and check that both are present."""
        self.header = self.header.strip()
        self.field = self.field.strip()
        if not self.header:
            raise ConfigError("undefined header name")
        if not self.field:
            raise ConfigError("undefined field name")


def is_bypassed(configs: Iterable[BypassConfig], path: str) -> bool:
    """Return True when any bypass entry matches ``path``."""
    return any(cfg.matches(path) for cfg in configs)