"""Forbidden word detection."""

from send_no_evil.protection.attachments import scan_attachment_names
from send_no_evil.protection.matcher import ForbiddenWordMatcher, match_forbidden_word
from send_no_evil.protection.models import MatchResult, MatchSource, Verdict

__all__ = [
    "ForbiddenWordMatcher",
    "MatchResult",
    "MatchSource",
    "Verdict",
    "match_forbidden_word",
    "scan_attachment_names",
]
