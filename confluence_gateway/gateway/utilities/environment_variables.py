import os
from typing import Optional


class EnvironmentVariables:
    @property
    def confluence_api_token(self) -> Optional[str]:
        return os.environ.get("CONFLUENCE_API_TOKEN")

    @property
    def confluence_base_url(self) -> Optional[str]:
        return os.environ.get("CONFLUENCE_BASE_URL")

    @property
    def confluence_api_base_path(self) -> Optional[str]:
        return os.environ.get("CONFLUENCE_API_BASE_PATH")

    @property
    def confluence_host(self) -> Optional[str]:
        return os.environ.get("CONFLUENCE_HOST")

    @property
    def log_level(self) -> str:
        return os.environ.get("LOG_LEVEL", "INFO").upper()
