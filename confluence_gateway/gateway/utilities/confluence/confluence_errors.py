"""Typed exception hierarchy for the Confluence gateway.

All exceptions inherit from ConfluenceGatewayError. Configuration errors are
fatal at startup; every other error is turned into an error result by the tool
that hit it.
"""

from typing import Optional


class ConfluenceGatewayError(Exception):
    """Base exception for all confluence-gateway errors."""

    pass


class ConfluenceConfigError(ConfluenceGatewayError):
    """Base exception for configuration errors. The process cannot start."""

    pass


class MissingCredentialError(ConfluenceConfigError):
    """Raised when no API token is configured."""

    def __init__(self) -> None:
        super().__init__("CONFLUENCE_API_TOKEN environment variable is required")


class MissingEndpointError(ConfluenceConfigError):
    """Raised when none of the endpoint variables is set."""

    def __init__(self) -> None:
        super().__init__(
            "CONFLUENCE_BASE_URL (or CONFLUENCE_HOST) environment variable is required"
        )


class InvalidUrlError(ConfluenceConfigError):
    """Raised when the endpoint cannot be parsed as a URL."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"invalid base URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class InvalidSchemeError(ConfluenceConfigError):
    """Raised when the endpoint scheme is not http or https."""

    def __init__(self, scheme: str):
        super().__init__(f"base URL must use http or https scheme, got {scheme!r}")
        self.scheme = scheme


class ArgumentsNotAnObjectError(ConfluenceGatewayError):
    """Raised when tool arguments are not a string-keyed mapping."""

    def __init__(self) -> None:
        super().__init__("arguments are not a JSON object")


class ConfluenceTransportError(ConfluenceGatewayError):
    """Base exception for failures talking to the Confluence REST API."""

    pass


class ConfluenceNetworkError(ConfluenceTransportError):
    """Raised on DNS, connection, timeout or truncated-body failures."""

    def __init__(self, method: str, url: str, reason: str):
        super().__init__(f"request failed ({method} {url}): {reason}")
        self.method = method
        self.url = url
        self.reason = reason


class ConfluenceEncodingError(ConfluenceTransportError):
    """Raised when a request body cannot be encoded as JSON."""

    def __init__(self, reason: str):
        super().__init__(f"failed to marshal request body: {reason}")
        self.reason = reason


class ConfluenceDecodeError(ConfluenceTransportError):
    """Raised when a response body does not decode into the expected shape."""

    def __init__(self, reason: str):
        super().__init__(f"failed to decode JSON: {reason}")
        self.reason = reason


class ConfluenceApiError(ConfluenceTransportError):
    """Raised when the API answers with a status code of 400 or above."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"API error (status {status_code}): {body}")
        self.status_code = status_code
        self.body = body


class ContentUpdateError(ConfluenceGatewayError):
    """Base exception for the phases of a content update."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class CurrentContentFetchError(ContentUpdateError):
    """Raised when the current content cannot be read before an update."""

    def __init__(self, cause: Exception):
        super().__init__(f"failed to retrieve current content: {cause}", cause)


class MissingVersionError(ContentUpdateError):
    """Raised when the fetched content carries no version and none was given."""

    def __init__(self) -> None:
        super().__init__("could not determine current version from API response")


class ContentSubmitError(ContentUpdateError):
    """Raised when the updated content is rejected or cannot be sent."""

    def __init__(self, cause: Exception):
        super().__init__(f"error updating content: {cause}", cause)
