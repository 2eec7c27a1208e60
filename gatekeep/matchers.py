"""Compiled access list conditions that match input values."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Union

from gatekeep.fields import DataType, MatchStrategy

_Comparator = Callable[[str, str], bool]

_COMPARATORS: dict[MatchStrategy, _Comparator] = {
    MatchStrategy.EXACT: lambda value, expected: value == expected,
    MatchStrategy.PARTIAL: lambda value, expected: expected in value,
    MatchStrategy.PREFIX: lambda value, expected: value.startswith(expected),
    MatchStrategy.SUFFIX: lambda value, expected: value.endswith(expected),
}

_SUPPORTED_STRATEGIES = frozenset(_COMPARATORS) | {
    MatchStrategy.REGEX,
    MatchStrategy.ALWAYS,
}

_TYPE_PARTS = {DataType.LIST_STR: "ListStr", DataType.STR: "Str"}


@dataclass(frozen=True)
class ConditionConfig:
    """Settings of one condition: the field, how it matches and its values."""

    field: str
    match_strategy: MatchStrategy
    values: tuple[str, ...]
    input_data_type: DataType

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        if not self.values:
            raise ValueError(f"condition on field {self.field!r} has no values")
        if self.match_strategy not in _SUPPORTED_STRATEGIES:
            raise ValueError(
                f"unsupported match strategy {self.match_strategy.name} "
                f"for field {self.field!r}"
            )
        if self.input_data_type not in _TYPE_PARTS:
            raise ValueError(
                f"unsupported input data type {self.input_data_type.name} "
                f"for field {self.field!r}"
            )

    @property
    def expr_data_type(self) -> DataType:
        """STR when the condition holds one value, LIST_STR otherwise."""
        return DataType.STR if len(self.values) == 1 else DataType.LIST_STR

    @property
    def regex_enabled(self) -> bool:
        return self.match_strategy is MatchStrategy.REGEX

    @property
    def always_true(self) -> bool:
        return self.match_strategy is MatchStrategy.ALWAYS

    @property
    def condition_type(self) -> str:
        """Name of the condition kind, e.g. ``ruleStrCondExactMatchListStrInput``."""
        strategy = self.match_strategy.name.capitalize()
        return (
            f"rule{_TYPE_PARTS[self.expr_data_type]}Cond{strategy}"
            f"Match{_TYPE_PARTS[self.input_data_type]}Input"
        )


@dataclass
class Condition:
    """A condition ready to test a string or a list of strings."""

    config: ConditionConfig
    _patterns: tuple[re.Pattern[str], ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.config.regex_enabled:
            self._patterns = tuple(re.compile(v) for v in self.config.values)
        else:
            self._patterns = ()

    @property
    def field(self) -> str:
        return self.config.field

    def _matches_one(self, value: str) -> bool:
        if self.config.regex_enabled:
            return any(p.search(value) for p in self._patterns)
        compare = _COMPARATORS[self.config.match_strategy]
        return any(compare(value, expected) for expected in self.config.values)

    def match(self, value: Union[str, Iterable[str]]) -> bool:
        """Return True when the input satisfies the condition.

        A list-typed field takes an iterable of strings and matches when any
        item matches; a string field takes a single string.
        """
        if self.config.input_data_type is DataType.LIST_STR:
            if isinstance(value, str):
                raise TypeError(
                    f"field {self.field!r} expects a list of strings, got a string"
                )
            items = list(value)
            if self.config.always_true:
                return True
            return any(self._matches_one(item) for item in items)
        if not isinstance(value, str):
            raise TypeError(
                f"field {self.field!r} expects a string, got {type(value).__name__}"
            )
        if self.config.always_true:
            return True
        return self._matches_one(value)