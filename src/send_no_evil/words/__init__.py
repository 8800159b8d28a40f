"""Forbidden word list storage."""

from send_no_evil.words.models import ForbiddenWordList, PolicyFlags
from send_no_evil.words.service import WordListStore
from send_no_evil.words.store import (
    MemorySettingsStore,
    SettingsStore,
    YamlSettingsStore,
    open_store,
)

__all__ = [
    "ForbiddenWordList",
    "MemorySettingsStore",
    "PolicyFlags",
    "SettingsStore",
    "WordListStore",
    "YamlSettingsStore",
    "open_store",
]
