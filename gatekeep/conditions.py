"""Parsing of access list condition expressions."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Union

from gatekeep.fields import DataType, MatchStrategy, resolve_field
from gatekeep.matchers import Condition, ConditionConfig


class ConditionSyntaxError(ValueError):
    """Raised when a condition expression cannot be parsed."""


_STRATEGY_KEYWORDS: dict[str, MatchStrategy] = {
    "reserved": MatchStrategy.RESERVED,
    "exact": MatchStrategy.EXACT,
    "partial": MatchStrategy.PARTIAL,
    "prefix": MatchStrategy.PREFIX,
    "suffix": MatchStrategy.SUFFIX,
    "regex": MatchStrategy.REGEX,
    "always": MatchStrategy.ALWAYS,
}

_RESERVED_AFTER_MATCH = frozenset(
    {"exact", "partial", "prefix", "suffix", "regex", "always"}
)


def parse_condition(tokens: Union[str, Iterable[str]]) -> Condition:
    """Build a condition from tokens such as ``["exact", "match", "roles", "admin"]``.

    Keywords before ``match`` choose the match strategy (exact by default);
    the first token after it names the field and the rest are the values.
    A plain string is split on whitespace first.
    """
    token_list = tokens.split() if isinstance(tokens, str) else list(tokens)
    cond_input = " ".join(token_list)

    strategy = MatchStrategy.UNKNOWN
    match_found = False
    field_name: str | None = None
    input_type = DataType.UNKNOWN
    values: list[str] = []

    for raw in token_list:
        token = raw.strip()
        if not token:
            continue
        if not match_found:
            if token == "match":
                match_found = True
                if strategy is MatchStrategy.UNKNOWN:
                    strategy = MatchStrategy.EXACT
            elif token in _STRATEGY_KEYWORDS:
                strategy = _STRATEGY_KEYWORDS[token]
            continue
        if token in _RESERVED_AFTER_MATCH:
            raise ConditionSyntaxError(
                f'invalid condition syntax, use of reserved "{token}" keyword: {cond_input}'
            )
        if field_name is None:
            canonical, data_type = resolve_field(token)
            if data_type is DataType.UNKNOWN:
                raise ConditionSyntaxError(
                    "invalid condition syntax, unsupported field: "
                    f"{token}, condition: {cond_input}"
                )
            field_name, input_type = canonical, data_type
        else:
            values.append(token)

    if not match_found:
        raise ConditionSyntaxError(
            f"invalid condition syntax, match not found: {cond_input}"
        )
    if field_name is None:
        raise ConditionSyntaxError(
            f"invalid condition syntax, field name not found: {cond_input}"
        )
    if not values:
        raise ConditionSyntaxError(
            f"invalid condition syntax, not matching field values: {cond_input}"
        )
    if strategy in (MatchStrategy.UNKNOWN, MatchStrategy.RESERVED):
        raise ConditionSyntaxError(f"invalid condition syntax: {cond_input}")

    config = ConditionConfig(
        field=field_name,
        match_strategy=strategy,
        values=tuple(values),
        input_data_type=input_type,
    )
    try:
        return Condition(config)
    except re.error as exc:
        raise ConditionSyntaxError(
            f"invalid condition syntax, bad regular expression: {exc}"
        ) from exc