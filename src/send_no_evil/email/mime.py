"""Adapters from stdlib ``email.message.Message`` objects to content models."""

import logging
from email.message import EmailMessage, Message

from pydantic import BaseModel

from send_no_evil.email.models import BaseAttachment, ContentNode, MultiPart, TextPart

logger = logging.getLogger(__name__)


class MessageAttachment(BaseModel, BaseAttachment):
    """Attachment carried as a MIME part, identified by its filename parameter."""

    filename: str | None = None
    mime_type: str = "application/octet-stream"

    def resolve_file(self) -> str | None:
        return self.filename or None


def content_tree_from_message(message: Message) -> ContentNode:
    """Build a content tree mirroring the MIME structure of ``message``.

    Multipart and ``message/*`` containers become composite nodes; every other
    part becomes a leaf carrying its transfer-decoded payload.
    """
    mime_type = message.get_content_type()
    if message.is_multipart():
        payload = message.get_payload()
        return MultiPart(
            mime_type=mime_type,
            children=[content_tree_from_message(part) for part in payload],
        )

    data = message.get_payload(decode=True)
    return TextPart(
        mime_type=mime_type,
        payload=data if isinstance(data, bytes) else b"",
        charset=message.get_content_charset() or "utf-8",
    )


def attachments_from_message(message: Message) -> list[MessageAttachment]:
    """List the attachment parts of ``message`` in message order."""
    attachments: list[MessageAttachment] = []
    for part in message.walk():
        if part.is_multipart():
            continue
        if part.get_content_disposition() != "attachment":
            continue
        attachments.append(
            MessageAttachment(
                filename=part.get_filename(),
                mime_type=part.get_content_type(),
            )
        )
    return attachments


def body_text(message: Message) -> str | None:
    """Return the preferred body text of ``message``, or None if it has none.

    Uses ``EmailMessage.get_body`` when available, otherwise the first inline
    ``text/plain`` part. A body in an unknown charset yields no text.
    """
    if isinstance(message, EmailMessage):
        body = message.get_body(preferencelist=("plain", "html"))
        if body is None:
            return None
        try:
            content = body.get_content()
        except LookupError as e:
            logger.warning("Cannot decode %s body: %s", body.get_content_type(), e)
            return None
        return content if isinstance(content, str) else None

    for part in message.walk():
        if part.get_content_type() != "text/plain":
            continue
        if part.get_content_disposition() == "attachment":
            continue
        data = part.get_payload(decode=True)
        if not isinstance(data, bytes):
            continue
        charset = part.get_content_charset() or "utf-8"
        try:
            return data.decode(charset, errors="replace")
        except LookupError as e:
            logger.warning("Cannot decode text/plain part (charset=%s): %s", charset, e)
    return None
