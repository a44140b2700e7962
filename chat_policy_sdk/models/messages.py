from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Union
from enum import Enum


class MessageRole(str, Enum):
    """Chat message roles."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ImageUrl(BaseModel):
    url: Optional[str] = None


class ContentPart(BaseModel):
    """
    One part of a multimodal message.

    Parts are tagged by ``type``: ``"text"`` parts carry ``text`` and
    ``"image_url"`` parts carry ``image_url``. Other tags are accepted and
    ignored by extraction.
    """
    model_config = ConfigDict(extra="allow")

    type: str
    text: Optional[str] = None
    image_url: Optional[ImageUrl] = None


class WebSearchResult(BaseModel):
    """A single web search hit attached to a message."""
    title: str = ""
    url: str = ""
    content: str = ""


class WebSearchReferences(BaseModel):
    results: List[WebSearchResult] = Field(default_factory=list)


MessageContent = Union[str, List[ContentPart]]


class RequestMessage(BaseModel):
    """Message as handed to the request path before dispatch."""
    model_config = ConfigDict(populate_by_name=True)

    role: MessageRole = MessageRole.USER
    content: MessageContent = ""
    web_search_references: Optional[WebSearchReferences] = Field(None, alias="webSearchReferences")
