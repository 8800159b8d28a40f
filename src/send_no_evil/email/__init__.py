"""Message content models and text extraction."""

from send_no_evil.email.extraction import extract_text, get_message_text
from send_no_evil.email.mime import (
    MessageAttachment,
    attachments_from_message,
    content_tree_from_message,
)
from send_no_evil.email.models import (
    BaseAttachment,
    ComposerAttachment,
    ContentNode,
    MultiPart,
    TextPart,
)

__all__ = [
    "BaseAttachment",
    "ComposerAttachment",
    "ContentNode",
    "MessageAttachment",
    "MultiPart",
    "TextPart",
    "attachments_from_message",
    "content_tree_from_message",
    "extract_text",
    "get_message_text",
]
