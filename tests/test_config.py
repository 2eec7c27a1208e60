import pytest

from gatekeep.config import (
    BypassConfig,
    BypassMatch,
    ConfigError,
    HeaderInjectionConfig,
    is_bypassed,
)


def _validated(match_type, uri):
    cfg = BypassConfig(match_type=match_type, uri=uri)
    cfg.validate()
    return cfg


@pytest.mark.parametrize(
    "match_type, expected",
    [
        ("exact", BypassMatch.EXACT),
        ("partial", BypassMatch.PARTIAL),
        ("prefix", BypassMatch.PREFIX),
        ("suffix", BypassMatch.SUFFIX),
        ("regex", BypassMatch.REGEX),
    ],
)
def test_validate_sets_match(match_type, expected):
    assert _validated(match_type, "/health").match is expected


def test_validate_empty_match_type():
    with pytest.raises(ConfigError, match="undefined bypass match type"):
        BypassConfig(match_type="", uri="/health").validate()


def test_validate_invalid_match_type():
    with pytest.raises(ConfigError) as info:
        BypassConfig(match_type="foobar", uri="/health").validate()
    assert str(info.value) == 'invalid "foobar" bypass match type'


def test_validate_empty_uri():
    with pytest.raises(ConfigError, match="undefined bypass uri"):
        BypassConfig(match_type="exact", uri="   ").validate()


def test_validate_strips_uri():
    cfg = _validated("exact", "  /health  ")
    assert cfg.uri == "/health"


def test_validate_bad_regex():
    with pytest.raises(ConfigError):
        BypassConfig(match_type="regex", uri="(.*!").validate()


def test_unvalidated_entry_never_matches():
    cfg = BypassConfig(match_type="exact", uri="/health")
    assert cfg.match is BypassMatch.UNKNOWN
    assert cfg.matches("/health") is False


@pytest.mark.parametrize(
    "match_type, uri, hit, miss",
    [
        ("exact", "/health", "/health", "/health/live"),
        ("partial", "media", "/app/media/icon.png", "/app/assets/icon.png"),
        ("prefix", "/public", "/public/index.html", "/app/public"),
        ("suffix", ".css", "/static/site.css", "/static/site.css.map"),
        ("regex", "^/api/v[0-9]+/status$", "/api/v2/status", "/api/vx/status"),
    ],
)
def test_matches(match_type, uri, hit, miss):
    cfg = _validated(match_type, uri)
    assert cfg.matches(hit) is True
    assert cfg.matches(miss) is False


def test_is_bypassed_any_entry():
    configs = [_validated("exact", "/health"), _validated("prefix", "/public")]
    assert is_bypassed(configs, "/public/a.js") is True
    assert is_bypassed(configs, "/health") is True
    assert is_bypassed(configs, "/private") is False


def test_is_bypassed_empty():
    assert is_bypassed([], "/health") is False


def test_header_injection_validate_strips():
    cfg = HeaderInjectionConfig(header=" X-User ", field=" email ")
    cfg.validate()
    assert (cfg.header, cfg.field) == ("X-User", "email")


def test_header_injection_missing_header():
    with pytest.raises(ConfigError, match="undefined header name"):
        HeaderInjectionConfig(header=" ", field="email").validate()


def test_header_injection_missing_field():
    with pytest.raises(ConfigError, match="undefined field name"):
        HeaderInjectionConfig(header="X-User", field="").validate()