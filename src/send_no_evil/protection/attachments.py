"""Attachment filename scanning."""

from collections.abc import Iterable

import structlog

from send_no_evil.email.models import BaseAttachment, attachment_basename
from send_no_evil.protection.matcher import ForbiddenWordMatcher
from send_no_evil.protection.models import MatchResult

logger = structlog.get_logger()


def scan_attachment_names(
    attachments: Iterable[BaseAttachment],
    words: Iterable[str],
    case_sensitive: bool = False,
) -> MatchResult:
    """Scan attachment filenames for forbidden words.

    Attachments are checked in order and scanning stops at the first match.
    Attachments without a file reference are skipped.

    Args:
        attachments: Attachments of the message being composed.
        words: Forbidden words in priority order.
        case_sensitive: Compare exactly instead of case-folded.

    Returns:
        MatchResult with the matched word and filename, or an empty result.
    """
    matcher = ForbiddenWordMatcher(words, case_sensitive)
    if not matcher:
        return MatchResult()

    scanned = 0
    for attachment in attachments:
        file_ref = attachment.resolve_file()
        if not file_ref:
            continue
        filename = attachment_basename(file_ref)
        if not filename:
            continue

        scanned += 1
        result = matcher.match(filename)
        if result.matched:
            logger.info("Forbidden word in attachment name", word=result.word, filename=filename)
            return MatchResult(word=result.word, filename=filename)

    logger.debug("Attachment names clean", scanned=scanned)
    return MatchResult()
