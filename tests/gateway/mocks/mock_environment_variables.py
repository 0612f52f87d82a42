from typing import Optional

from typing_extensions import override

from confluence_gateway.gateway.utilities.environment_variables import (
    EnvironmentVariables,
)

CONFLUENCE_BASE_URL = "https://confluence.example.com"
CONFLUENCE_API_URL = f"{CONFLUENCE_BASE_URL}/rest/api"
CONFLUENCE_API_TOKEN = "test-token"


class MockEnvironmentVariables(EnvironmentVariables):
    @override
    @property
    def confluence_api_token(self) -> Optional[str]:
        return CONFLUENCE_API_TOKEN

    @override
    @property
    def confluence_base_url(self) -> Optional[str]:
        return CONFLUENCE_BASE_URL

    @override
    @property
    def confluence_api_base_path(self) -> Optional[str]:
        return None

    @override
    @property
    def confluence_host(self) -> Optional[str]:
        return None
