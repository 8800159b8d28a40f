"""A pre-send gate that asks for confirmation before mail containing forbidden words goes out."""

from send_no_evil.composer.base import BaseComposer
from send_no_evil.composer.message import EmailMessageComposer
from send_no_evil.config import Settings
from send_no_evil.email.extraction import extract_text, get_message_text
from send_no_evil.email.models import ComposerAttachment, MultiPart, TextPart
from send_no_evil.gate import GateOutcome, GateState, SendGate, presend_hook
from send_no_evil.protection.attachments import scan_attachment_names
from send_no_evil.protection.matcher import match_forbidden_word
from send_no_evil.protection.models import MatchResult, Verdict
from send_no_evil.words.models import ForbiddenWordList, PolicyFlags
from send_no_evil.words.service import WordListStore
from send_no_evil.words.store import MemorySettingsStore, YamlSettingsStore

__version__ = "0.1.0"

__all__ = [
    "BaseComposer",
    "ComposerAttachment",
    "EmailMessageComposer",
    "ForbiddenWordList",
    "GateOutcome",
    "GateState",
    "MatchResult",
    "MemorySettingsStore",
    "MultiPart",
    "PolicyFlags",
    "SendGate",
    "Settings",
    "TextPart",
    "Verdict",
    "WordListStore",
    "YamlSettingsStore",
    "extract_text",
    "get_message_text",
    "match_forbidden_word",
    "presend_hook",
    "scan_attachment_names",
]
