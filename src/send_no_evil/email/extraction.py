"""Text extraction from message content trees and composer text accessors."""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from send_no_evil.email.models import ContentNode, MultiPart, TextPart

if TYPE_CHECKING:
    from send_no_evil.composer.base import BaseComposer

logger = logging.getLogger(__name__)


def decode_payload(part: TextPart) -> str:
    """Decode a leaf payload to text using the part's charset.

    Undecodable payloads and unknown charsets contribute no text.
    """
    if isinstance(part.payload, str):
        return part.payload
    try:
        return part.payload.decode(part.charset or "utf-8")
    except (UnicodeDecodeError, LookupError) as e:
        logger.warning(
            "Cannot decode %s part (charset=%s): %s", part.mime_type, part.charset, e
        )
        return ""


def extract_text(node: ContentNode) -> str:
    """Flatten a content tree into text.

    Text leaves yield their decoded payload, other leaves nothing. Composite
    nodes join the non-empty text of their children with newlines.
    """
    match node:
        case TextPart():
            if not node.is_text:
                return ""
            return decode_payload(node)
        case MultiPart(children=children):
            logger.debug("Extracting %s with %d parts", node.mime_type, len(children))
            texts = (extract_text(child) for child in children)
            return "\n".join(text for text in texts if text)
        case _:
            raise TypeError(f"Unknown content node: {type(node).__name__}")


def _raw_message_text(composer: "BaseComposer") -> str:
    raw = composer.get_raw_message_text()
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    return raw or ""


def _structured_text(composer: "BaseComposer") -> str:
    message = composer.get_message()
    if message is None:
        return ""
    return extract_text(message)


def _property_text(composer: "BaseComposer") -> str:
    return composer.get_text() or ""


TextStage = Callable[["BaseComposer"], str]

# Tried in order, first non-empty result wins
MESSAGE_TEXT_STAGES: tuple[tuple[str, TextStage], ...] = (
    ("raw", _raw_message_text),
    ("structured", _structured_text),
    ("property", _property_text),
)


def get_message_text(
    composer: "BaseComposer",
    stages: tuple[tuple[str, TextStage], ...] = MESSAGE_TEXT_STAGES,
) -> str:
    """Return the body text of the message being composed.

    The raw composer buffer, the structured content tree and the flat text
    property can each be unpopulated at different points of the compose
    lifecycle, so they are tried in order.

    Args:
        composer: Composer handle exposing the text accessors.
        stages: Named extraction stages to try.

    Returns:
        The first non-empty text, or "" when no stage produced any.
    """
    for name, stage in stages:
        text = stage(composer)
        if text:
            logger.debug("Got message text from %s stage (length=%d)", name, len(text))
            return text
    logger.debug("No text found in message")
    return ""
