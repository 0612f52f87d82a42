import logging
from dataclasses import dataclass, field
from typing import Optional

import httpx

from confluence_gateway.gateway.utilities.confluence.confluence_errors import (
    InvalidSchemeError,
    InvalidUrlError,
    MissingCredentialError,
    MissingEndpointError,
)
from confluence_gateway.gateway.utilities.environment_variables import (
    EnvironmentVariables,
)

logger = logging.getLogger(__name__)

API_ROOT_PATH: str = "/rest/api"


@dataclass(frozen=True)
class ConfluenceConfig:
    base_url: str
    token: str = field(repr=False)


class ConfluenceConfigResolver:
    @staticmethod
    def resolve(environment_variables: EnvironmentVariables) -> ConfluenceConfig:
        """
        Builds the Confluence endpoint from environment variables.

        The endpoint is taken from the first non-empty of CONFLUENCE_BASE_URL,
        CONFLUENCE_API_BASE_PATH and CONFLUENCE_HOST. A missing scheme defaults
        to https and the REST API root is appended unless already present.

        :param environment_variables: source of the raw settings
        :return: validated configuration
        """
        token: Optional[str] = environment_variables.confluence_api_token
        if not token:
            raise MissingCredentialError()

        raw_url: Optional[str] = (
            environment_variables.confluence_base_url
            or environment_variables.confluence_api_base_path
            or environment_variables.confluence_host
        )
        if not raw_url:
            raise MissingEndpointError()

        return ConfluenceConfig(
            base_url=ConfluenceConfigResolver.normalize_base_url(raw_url), token=token
        )

    @staticmethod
    def normalize_base_url(raw_url: str) -> str:
        if "://" not in raw_url:
            raw_url = "https://" + raw_url

        try:
            url: httpx.URL = httpx.URL(raw_url)
        except httpx.InvalidURL as e:
            raise InvalidUrlError(raw_url, str(e)) from e

        if not url.scheme:
            raise InvalidUrlError(raw_url, "missing protocol scheme")
        if not url.scheme.startswith("http"):
            raise InvalidSchemeError(url.scheme)

        if API_ROOT_PATH not in url.path:
            url = url.copy_with(path=url.path.rstrip("/") + API_ROOT_PATH)

        logger.debug(f"Resolved Confluence base URL: {url}")
        return str(url)
