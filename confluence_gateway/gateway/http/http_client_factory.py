import logging
from typing import Dict, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_LIMITS: httpx.Limits = httpx.Limits(
    max_connections=20, max_keepalive_connections=10
)


class HttpClientFactory:
    """
    Creates httpx clients with the connection limits of this factory.

    The caller owns the returned client and must close it with aclose().
    """

    def __init__(
        self,
        *,
        limits: httpx.Limits = DEFAULT_LIMITS,
        follow_redirects: bool = False,
    ) -> None:
        self.limits: httpx.Limits = limits
        self.follow_redirects: bool = follow_redirects

    def create_http_client(
        self,
        *,
        base_url: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = 5.0,
    ) -> httpx.AsyncClient:
        logger.debug(f"Creating HTTP client for {base_url} (timeout={timeout})")
        return httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            limits=self.limits,
            follow_redirects=self.follow_redirects,
        )
