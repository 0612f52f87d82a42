import logging
from logging import Logger
from typing import Dict, Optional

from confluence_gateway.gateway.utilities.confluence.confluence_arguments import (
    ConfluenceArguments,
)
from confluence_gateway.gateway.utilities.confluence.confluence_client import (
    ConfluenceClient,
)
from confluence_gateway.gateway.utilities.confluence.confluence_content import (
    ConfluenceContent,
    ContentBody,
    ContentVersion,
)
from confluence_gateway.gateway.utilities.confluence.confluence_errors import (
    ConfluenceTransportError,
    ContentSubmitError,
    CurrentContentFetchError,
    MissingVersionError,
)

CURRENT_CONTENT_EXPAND: str = "body.storage,version,space"


class ConfluenceContentUpdater:
    """
    Updates content with a read-modify-write sequence.

    Confluence requires the next version number on every update, so the
    current item is read first and the new version is derived from it. The
    read always completes before the write is sent. Nothing is retried; a
    stale version is rejected by Confluence and reported as a submit error.
    """

    def __init__(self, *, confluence_client: ConfluenceClient) -> None:
        self.confluence_client: ConfluenceClient = confluence_client
        self.logger: Logger = logging.getLogger(__name__)

    async def update_async(
        self,
        *,
        content_id: str,
        version: Optional[float] = None,
        title: Optional[str] = None,
        content: Optional[str] = None,
        version_comment: Optional[str] = None,
    ) -> bytes:
        current: ConfluenceContent = await self.fetch_current_async(
            content_id=content_id
        )
        update: ConfluenceContent = self.build_update(
            current=current,
            content_id=content_id,
            version=version,
            title=title,
            content=content,
            version_comment=version_comment,
        )
        return await self.submit_async(content_id=content_id, update=update)

    async def fetch_current_async(self, *, content_id: str) -> ConfluenceContent:
        query: Dict[str, str] = ConfluenceArguments.build_common_query()
        query["expand"] = CURRENT_CONTENT_EXPAND
        try:
            return await self.confluence_client.get_json(
                path=f"/content/{content_id}", query=query, target=ConfluenceContent
            )
        except ConfluenceTransportError as e:
            raise CurrentContentFetchError(e) from e

    @staticmethod
    def build_update(
        *,
        current: ConfluenceContent,
        content_id: str,
        version: Optional[float] = None,
        title: Optional[str] = None,
        content: Optional[str] = None,
        version_comment: Optional[str] = None,
    ) -> ConfluenceContent:
        new_version: int
        if version is not None:
            new_version = int(version)
        elif current.version is not None:
            new_version = current.version.number + 1
        else:
            raise MissingVersionError()

        return ConfluenceContent(
            id=content_id,
            type=current.type,
            title=title or current.title,
            space=current.space,
            body=ContentBody.from_storage_value(content) if content else current.body,
            version=ContentVersion(number=new_version, message=version_comment or None),
        )

    async def submit_async(
        self, *, content_id: str, update: ConfluenceContent
    ) -> bytes:
        self.logger.info(
            f"Updating Confluence content {content_id} to version "
            f"{update.version.number if update.version else None}"
        )
        try:
            return await self.confluence_client.do_request(
                method="PUT", path=f"/content/{content_id}", body=update
            )
        except ConfluenceTransportError as e:
            raise ContentSubmitError(e) from e
