"""Message content and attachment models."""

import os
from abc import ABC, abstractmethod
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class TextPart(BaseModel):
    """Leaf content node: a single MIME part with its decoded payload.

    Only parts whose ``mime_type`` starts with ``text/`` contribute text.
    """

    kind: Literal["leaf"] = "leaf"
    mime_type: str = "text/plain"
    payload: bytes | str = b""
    charset: str = "utf-8"

    @property
    def is_text(self) -> bool:
        return self.mime_type.lower().startswith("text/")


class MultiPart(BaseModel):
    """Composite content node holding child nodes in message order."""

    kind: Literal["composite"] = "composite"
    mime_type: str = "multipart/mixed"
    children: list["ContentNode"] = []


ContentNode = Annotated[Union[TextPart, MultiPart], Field(discriminator="kind")]

MultiPart.model_rebuild()


class BaseAttachment(ABC):
    """Abstract interface for an attachment of the message being composed."""

    @abstractmethod
    def resolve_file(self) -> str | None:
        """Return the attachment's file reference, or None if it is not available.

        An attachment that is still being downloaded or generated has no file yet.
        """
        ...


def attachment_basename(file_ref: str) -> str:
    """Return the filename part of ``file_ref``, stripping both / and \\ directories."""
    return os.path.basename(file_ref.replace("\\", "/"))


class ComposerAttachment(BaseModel, BaseAttachment):
    """Attachment added in the composer, referencing a file on disk."""

    path: str | None = None
    mime_type: str = "application/octet-stream"

    def resolve_file(self) -> str | None:
        return self.path or None
