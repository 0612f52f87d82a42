from typing import Dict

import pytest

from confluence_gateway.gateway.utilities.confluence.confluence_config import (
    ConfluenceConfig,
    ConfluenceConfigResolver,
)
from confluence_gateway.gateway.utilities.confluence.confluence_errors import (
    ConfluenceConfigError,
    InvalidSchemeError,
    MissingCredentialError,
    MissingEndpointError,
)
from confluence_gateway.gateway.utilities.environment_variables import (
    EnvironmentVariables,
)

CONFLUENCE_VARIABLES = [
    "CONFLUENCE_API_TOKEN",
    "CONFLUENCE_BASE_URL",
    "CONFLUENCE_API_BASE_PATH",
    "CONFLUENCE_HOST",
]


def resolve_with(
    monkeypatch: pytest.MonkeyPatch, env: Dict[str, str]
) -> ConfluenceConfig:
    for name in CONFLUENCE_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    return ConfluenceConfigResolver.resolve(EnvironmentVariables())


@pytest.mark.parametrize(
    "env, expected_url",
    [
        (
            {
                "CONFLUENCE_API_TOKEN": "test-token",
                "CONFLUENCE_BASE_URL": "https://example.atlassian.net",
            },
            "https://example.atlassian.net/rest/api",
        ),
        (
            {
                "CONFLUENCE_API_TOKEN": "test-token",
                "CONFLUENCE_HOST": "example.atlassian.net",
            },
            "https://example.atlassian.net/rest/api",
        ),
        (
            {
                "CONFLUENCE_API_TOKEN": "test-token",
                "CONFLUENCE_API_BASE_PATH": "https://example.com/confluence/rest/api",
            },
            "https://example.com/confluence/rest/api",
        ),
        (
            {
                "CONFLUENCE_API_TOKEN": "test-token",
                "CONFLUENCE_BASE_URL": "http://localhost:8090/confluence/",
            },
            "http://localhost:8090/confluence/rest/api",
        ),
    ],
)
def test_resolve_valid_config(
    monkeypatch: pytest.MonkeyPatch, env: Dict[str, str], expected_url: str
) -> None:
    config = resolve_with(monkeypatch, env)

    assert config.base_url == expected_url
    assert config.token == "test-token"


def test_resolve_prefers_base_url_over_api_path_and_host(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    config = resolve_with(
        monkeypatch,
        {
            "CONFLUENCE_API_TOKEN": "test-token",
            "CONFLUENCE_BASE_URL": "https://first.example.com",
            "CONFLUENCE_API_BASE_PATH": "https://second.example.com",
            "CONFLUENCE_HOST": "third.example.com",
        },
    )

    assert config.base_url == "https://first.example.com/rest/api"


def test_resolve_is_deterministic_and_does_not_append_api_root_twice(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    env = {
        "CONFLUENCE_API_TOKEN": "test-token",
        "CONFLUENCE_BASE_URL": "https://example.atlassian.net",
    }
    first = resolve_with(monkeypatch, env)
    second = resolve_with(monkeypatch, env)
    assert first == second

    again = resolve_with(
        monkeypatch,
        {"CONFLUENCE_API_TOKEN": "test-token", "CONFLUENCE_BASE_URL": first.base_url},
    )
    assert again.base_url == first.base_url
    assert again.base_url.count("/rest/api") == 1


@pytest.mark.parametrize(
    "env, expected_error",
    [
        ({"CONFLUENCE_BASE_URL": "https://example.atlassian.net"}, MissingCredentialError),
        ({"CONFLUENCE_API_TOKEN": ""}, MissingCredentialError),
        ({"CONFLUENCE_API_TOKEN": "test-token"}, MissingEndpointError),
        (
            {"CONFLUENCE_API_TOKEN": "test-token", "CONFLUENCE_BASE_URL": "://invalid-url"},
            ConfluenceConfigError,
        ),
        (
            {"CONFLUENCE_API_TOKEN": "test-token", "CONFLUENCE_BASE_URL": "ftp://example.com"},
            InvalidSchemeError,
        ),
    ],
)
def test_resolve_invalid_config(
    monkeypatch: pytest.MonkeyPatch,
    env: Dict[str, str],
    expected_error: type[ConfluenceConfigError],
) -> None:
    with pytest.raises(expected_error):
        resolve_with(monkeypatch, env)


def test_token_is_not_part_of_repr() -> None:
    config = ConfluenceConfig(base_url="https://example.com/rest/api", token="secret")

    assert "secret" not in repr(config)


def test_empty_base_url_falls_through_to_host(monkeypatch: pytest.MonkeyPatch) -> None:
    config = resolve_with(
        monkeypatch,
        {
            "CONFLUENCE_API_TOKEN": "test-token",
            "CONFLUENCE_BASE_URL": "",
            "CONFLUENCE_HOST": "wiki.example.org",
        },
    )

    assert config.base_url == "https://wiki.example.org/rest/api"
