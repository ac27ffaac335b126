"""Unit tests for environment-driven configuration loading."""

import json

import pytest

from sitecore_search_mcp.config import (
    ALL_SCOPES,
    DEFAULT_ACCESS_TOKEN_EXPIRY_MS,
    DEFAULT_AUTH_URL,
    AuthScope,
    DomainConfig,
    SearchConfig,
    clear_config_cache,
    load_config,
)

_ENV_VARS = (
    "SITECORE_DOMAIN_ID",
    "SITECORE_DEFAULT_DOMAIN",
    "SITECORE_DOMAINS_JSON",
    "SITECORE_SEARCH_BASE_URL",
    "SITECORE_INGESTION_BASE_URL",
    "SITECORE_EVENTS_BASE_URL",
    "SITECORE_API_KEY",
    "SITECORE_CLIENT_KEY",
    "SITECORE_ACCESS_TOKEN_EXPIRY",
    "SITECORE_REFRESH_TOKEN_EXPIRY",
    "SITECORE_AUTH_SCOPES",
    "SITECORE_AUTH_URL",
    "SITECORE_TIMEOUT_MS",
    "SITECORE_VERIFY_SSL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without Sitecore variables and with an empty cache."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_config_cache()


def test_single_domain_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Only the domain ID is required; everything else has defaults."""
    monkeypatch.setenv("SITECORE_DOMAIN_ID", "12345")

    config = SearchConfig.from_env()

    domain, domain_config = config.resolve()
    assert domain == "12345"
    assert domain_config.search_url_str == "https://discover.sitecorecloud.io"
    assert domain_config.auth_url_str == DEFAULT_AUTH_URL
    assert domain_config.access_token_expiry == DEFAULT_ACCESS_TOKEN_EXPIRY_MS
    assert domain_config.auth_scopes == ALL_SCOPES
    assert domain_config.api_key is None


def test_single_domain_from_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Every SITECORE_* variable feeds the single-domain configuration."""
    monkeypatch.setenv("SITECORE_DOMAIN_ID", "12345")
    monkeypatch.setenv("SITECORE_SEARCH_BASE_URL", "https://search.example.com/")
    monkeypatch.setenv("SITECORE_API_KEY", "01-key")
    monkeypatch.setenv("SITECORE_CLIENT_KEY", "ckey")
    monkeypatch.setenv("SITECORE_ACCESS_TOKEN_EXPIRY", "1000")
    monkeypatch.setenv("SITECORE_AUTH_SCOPES", "discover, event")
    monkeypatch.setenv("SITECORE_TIMEOUT_MS", "15000")
    monkeypatch.setenv("SITECORE_VERIFY_SSL", "false")

    _, domain_config = SearchConfig.from_env().resolve("12345")

    assert domain_config.search_url_str == "https://search.example.com"
    assert domain_config.api_key == "01-key"
    assert domain_config.client_key == "ckey"
    assert domain_config.access_token_expiry == 1000
    assert domain_config.auth_scopes == (AuthScope.DISCOVER, AuthScope.EVENT)
    assert domain_config.timeout_ms == 15000
    assert domain_config.verify_ssl is False


def test_blank_api_key_is_none(monkeypatch: pytest.MonkeyPatch) -> None:
    """An empty API key means no authentication."""
    monkeypatch.setenv("SITECORE_DOMAIN_ID", "12345")
    monkeypatch.setenv("SITECORE_API_KEY", "  ")

    _, domain_config = SearchConfig.from_env().resolve()
    assert domain_config.api_key is None


def test_domains_json_merges_with_single_domain(monkeypatch: pytest.MonkeyPatch) -> None:
    """Domains from SITECORE_DOMAINS_JSON are added next to the single domain."""
    monkeypatch.setenv("SITECORE_DOMAIN_ID", "primary")
    monkeypatch.setenv(
        "SITECORE_DOMAINS_JSON",
        json.dumps({"secondary": {"apiKey": "02-key", "authScopes": ["ingestion"], "searchBaseUrl": "https://other.example.com"}}),
    )

    config = SearchConfig.from_env()

    assert set(config.domains) == {"primary", "secondary"}
    assert config.default_domain == "primary"
    _, secondary = config.resolve("secondary")
    assert secondary.api_key == "02-key"
    assert secondary.auth_scopes == (AuthScope.INGESTION,)
    assert secondary.search_url_str == "https://other.example.com"


def test_default_domain_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """SITECORE_DEFAULT_DOMAIN selects the default among JSON domains."""
    monkeypatch.setenv("SITECORE_DOMAINS_JSON", json.dumps({"a": {}, "b": {}}))
    monkeypatch.setenv("SITECORE_DEFAULT_DOMAIN", "b")

    domain, _ = SearchConfig.from_env().resolve()
    assert domain == "b"


def test_invalid_domains_json_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    """Malformed JSON is reported instead of silently ignored."""
    monkeypatch.setenv("SITECORE_DOMAINS_JSON", "{not json")
    with pytest.raises(RuntimeError, match="not valid JSON"):
        SearchConfig.from_env()


def test_domains_json_must_be_object(monkeypatch: pytest.MonkeyPatch) -> None:
    """A JSON list is not a valid domain mapping."""
    monkeypatch.setenv("SITECORE_DOMAINS_JSON", "[1, 2]")
    with pytest.raises(RuntimeError, match="JSON object"):
        SearchConfig.from_env()


def test_no_domains_raises() -> None:
    """At least one domain must be configured."""
    with pytest.raises(RuntimeError, match="No Sitecore domains configured"):
        SearchConfig.from_env()


def test_invalid_values_raise_runtime_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Validation errors are wrapped into a readable RuntimeError."""
    monkeypatch.setenv("SITECORE_DOMAIN_ID", "12345")
    monkeypatch.setenv("SITECORE_TIMEOUT_MS", "10")
    with pytest.raises(RuntimeError, match="Invalid Sitecore configuration"):
        SearchConfig.from_env()


def test_empty_scopes_rejected() -> None:
    """A domain needs at least one authentication scope."""
    with pytest.raises(ValueError, match="at least 1"):
        DomainConfig(auth_scopes="")


def test_resolve_unknown_domain_raises() -> None:
    """Resolving a domain that is not configured fails."""
    config = SearchConfig(domains={"known": DomainConfig()}, default_domain="known")
    with pytest.raises(RuntimeError, match="Domain configuration not found for: missing"):
        config.resolve("missing")


def test_resolve_without_default_raises() -> None:
    """Omitting the domain without a default is an error."""
    config = SearchConfig(domains={"known": DomainConfig()})
    with pytest.raises(RuntimeError, match="No domain ID provided"):
        config.resolve(None)


def test_load_config_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    """load_config reads the environment once until the cache is cleared."""
    monkeypatch.setenv("SITECORE_DOMAIN_ID", "first")
    assert load_config() is load_config()

    monkeypatch.setenv("SITECORE_DOMAIN_ID", "second")
    assert load_config().default_domain == "first"

    clear_config_cache()
    assert load_config().default_domain == "second"
