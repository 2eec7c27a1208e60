# gatekeep

This package provides building blocks for deciding whether a request may
reach a protected endpoint. It has four parts:

- **ACL conditions** (`gatekeep.conditions`, `gatekeep.matchers`). You write
  a condition as a short phrase, for example `exact match roles admin editor`
  or `regex match path ^/api/.*`. The condition is then tested against claim
  values.
- **Field names** (`gatekeep.fields`). This module holds the claim fields
  that conditions understand, their aliases, and their data types.
- **Path patterns** (`gatekeep.path`). In a pattern, `*` matches one path
  segment and `**` matches any depth.
- **Bypass and header injection settings** (`gatekeep.config`). Bypass rules
  let requests with matching paths skip authorization. Header injection
  settings map a request header name to a claim field.

The package uses only the standard library.

## Installation

```
pip install gatekeep
```

## Field names and data types

```python
from gatekeep.fields import DataType, get_field_data_type, resolve_field

resolve_field("email")          # ("mail", DataType.STR)
resolve_field("nosuchfield")    # ("nosuchfield", DataType.UNKNOWN)
get_field_data_type("groups")   # ("roles", "list_str")
get_field_data_type("unknown")  # ("unknown", "")
```

An alias resolves to its canonical field name. For example, `email` becomes
`mail`, and `role`, `group` and `groups` all become `roles`.

Each field holds either one string (`DataType.STR`) or a list of strings
(`DataType.LIST_STR`):

- **List fields:** `roles`, `aud`, `scopes`, `org`.
- **String fields:** `mail`, `origin`, `name`, `realm`, `jti`, `iss`, `sub`,
  `addr`, `method`, `path`.

## Conditions

A condition has this form:

```
[exact|partial|prefix|suffix|regex|always] match <field> <value> [<value> ...]
```

If you give no strategy, the match is exact. `parse_condition` accepts
either a list of tokens or a string. A string is split on whitespace.

```python
from gatekeep.conditions import ConditionSyntaxError, parse_condition

cond = parse_condition("partial match roles adm edit")
cond.match(["administrator", "viewer"])  # True

cond = parse_condition(["regex", "match", "path", "^/api/v[0-9]+/"])
cond.match("/api/v2/books")              # True

try:
    parse_condition("match nosuchfield foo")
except ConditionSyntaxError as exc:
    print(exc)
```

How a condition matches:

- A condition with several values matches when any one of them matches.
- For a list field, the input is an iterable of strings, and the condition
  matches when any item matches.
- For a string field, the input is a single string.
- If the input has the wrong shape, `match` raises `TypeError`.
- Regular expressions are searched anywhere in the value, so use `^` and `$`
  to anchor them.
- An `always` condition matches any input of the right shape, but it still
  needs at least one value.

`parse_condition` raises `ConditionSyntaxError` (a `ValueError`) when:

- `match` is missing;
- the field or the values are missing;
- the field is not supported;
- a strategy keyword appears after `match`;
- the strategy is `reserved`;
- a regular expression does not compile.

Each parsed `Condition` carries a frozen `ConditionConfig`. It holds these
fields:

- `field`
- `match_strategy`
- `values`
- `input_data_type`

It also has these derived properties:

- `expr_data_type`
- `regex_enabled`
- `always_true`
- `condition_type`, for example `ruleStrCondExactMatchListStrInput`

## Path patterns

```python
from gatekeep.path import match_path_based_acl

match_path_based_acl("/*/media/**", "/app/media/assets/icon.png")  # True
match_path_based_acl("/*/media/*", "/app/media/assets/icon.png")   # False
match_path_based_acl("/app/index.html", "/app/index.html")         # True
match_path_based_acl("", "/anything")                              # False
```

A pattern without a wildcard must equal the path exactly. A wildcard matches
letters, digits, `_`, `.`, `~` and `-`, and `**` also matches `/`.

The pattern may also contain regular-expression syntax. A pattern that does
not compile matches nothing. Compiled patterns are cached.

## Bypass and header injection

```python
from gatekeep.config import BypassConfig, HeaderInjectionConfig, is_bypassed

rules = [
    BypassConfig(match_type="prefix", uri="/health"),
    BypassConfig(match_type="regex", uri=r"^/static/.*\.css$"),
]
for rule in rules:
    rule.validate()

is_bypassed(rules, "/health/live")  # True
is_bypassed(rules, "/private")      # False

header = HeaderInjectionConfig(header=" X-User-Email ", field="email")
header.validate()                   # header becomes "X-User-Email"
```

The match types are `exact`, `partial`, `prefix`, `suffix` and `regex`.

Validate each bypass rule before you use it: a rule that has not been
validated matches no path. Validation strips the URI and always compiles it
as a regular expression, whatever the match type.

`validate()` raises `ConfigError` (a `ValueError`) when:

- the match type is missing or unknown;
- the URI is empty;
- the URI does not compile as a regular expression;
- the header name or the field name is empty.

## What this package does not do

This package only parses and evaluates the individual pieces listed above.
It does not:

- validate or sign tokens;
- combine conditions into rules with allow or deny actions, or evaluate
  access lists;
- cache users;
- provide HTTP middleware, redirects or a server.

## Running the tests

```
pip install "gatekeep[test]"
pytest
```