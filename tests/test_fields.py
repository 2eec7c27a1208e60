import pytest

from gatekeep.fields import (
    INPUT_DATA_ALIASES,
    INPUT_DATA_TYPES,
    DataType,
    get_field_data_type,
    resolve_field,
)


def test_resolved_data_types_have_expected_numeric_values():
    resolved = [int(resolve_field(name)[1]) for name in ("foobar", "roles", "mail")]
    assert resolved == [0, 1, 2]


def test_labels_reported_by_get_field_data_type():
    assert get_field_data_type("roles")[1] == DataType.LIST_STR.label == "list_str"
    assert get_field_data_type("mail")[1] == DataType.STR.label == "str"
    assert get_field_data_type("foobar")[1] == DataType.UNKNOWN.label == ""


@pytest.mark.parametrize(
    "name, expected",
    [
        ("email", ("mail", "str")),
        ("role", ("roles", "list_str")),
        ("roles", ("roles", "list_str")),
        ("ip", ("addr", "str")),
        ("http_path", ("path", "str")),
        ("scope", ("scopes", "list_str")),
    ],
)
def test_get_field_data_type_known(name, expected):
    assert get_field_data_type(name) == expected


def test_get_field_data_type_alias_without_type_keeps_name():
    assert get_field_data_type("expires") == ("expires", "")
    assert get_field_data_type("issued") == ("issued", "")


def test_get_field_data_type_unknown_field():
    assert get_field_data_type("foobar") == ("foobar", "")


def test_resolve_field_replaces_alias_even_without_type():
    assert resolve_field("expires") == ("exp", DataType.UNKNOWN)


def test_resolve_field_known():
    assert resolve_field("groups") == ("roles", DataType.LIST_STR)
    assert resolve_field("origin") == ("origin", DataType.STR)


def test_resolve_field_unknown():
    assert resolve_field("foobar") == ("foobar", DataType.UNKNOWN)


@pytest.mark.parametrize("name", sorted(INPUT_DATA_TYPES))
def test_canonical_fields_resolve_to_themselves(name):
    canonical, data_type = resolve_field(name)
    assert canonical == name
    assert data_type == INPUT_DATA_TYPES[name]
    assert get_field_data_type(name) == (name, data_type.label)


@pytest.mark.parametrize("alias", sorted(INPUT_DATA_ALIASES))
def test_aliases_agree_between_functions_when_typed(alias):
    canonical, data_type = resolve_field(alias)
    assert canonical == INPUT_DATA_ALIASES[alias]
    name, label = get_field_data_type(alias)
    if data_type is DataType.UNKNOWN:
        assert (name, label) == (alias, "")
    else:
        assert (name, label) == (canonical, data_type.label)