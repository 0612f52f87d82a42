from typing import List, Literal, Optional

from pydantic import BaseModel

STORAGE_REPRESENTATION: Literal["storage"] = "storage"


class SpaceRef(BaseModel):
    """Reference to a Confluence space"""

    key: str
    """The space key"""


class BodyStorage(BaseModel):
    """Storage-format body of a content item"""

    value: str
    """Opaque storage-format markup"""

    representation: str = STORAGE_REPRESENTATION


class ContentBody(BaseModel):
    """Body of a content item"""

    storage: Optional[BodyStorage] = None

    @classmethod
    def from_storage_value(cls, value: str) -> "ContentBody":
        return cls(storage=BodyStorage(value=value))


class ContentVersion(BaseModel):
    """Version block of a content item"""

    number: int
    """Version number assigned by Confluence"""

    message: Optional[str] = None
    """Comment for the version"""


class Ancestor(BaseModel):
    """Ancestor reference of a content item"""

    id: str


class ConfluenceContent(BaseModel):
    """Wire shape of a Confluence page or blog post"""

    id: Optional[str] = None
    """Content id, absent on create"""

    type: Optional[str] = None
    """page or blogpost"""

    title: str = ""

    space: Optional[SpaceRef] = None

    body: Optional[ContentBody] = None

    version: Optional[ContentVersion] = None

    ancestors: Optional[List[Ancestor]] = None
    """Ancestor ids; omitted when empty"""
