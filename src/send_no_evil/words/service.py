"""Word-list service: loads and saves the forbidden words and policy flags."""

import logging
from collections.abc import Sequence
from typing import Any

from send_no_evil.defaults import (
    DEFAULT_FORBIDDEN_WORDS,
    KEY_CASE_SENSITIVE,
    KEY_CHECK_ATTACHMENTS,
    KEY_CHECK_MESSAGE_BODY,
    KEY_FORBIDDEN_WORDS,
)
from send_no_evil.exceptions import SettingsStoreError
from send_no_evil.words.models import ForbiddenWordList, PolicyFlags, clean_words
from send_no_evil.words.store import SettingsStore, read_boolean, read_strv

logger = logging.getLogger(__name__)

# Store key for each PolicyFlags field
FLAG_KEYS: dict[str, str] = {
    "check_attachments": KEY_CHECK_ATTACHMENTS,
    "check_message_body": KEY_CHECK_MESSAGE_BODY,
    "case_sensitive": KEY_CASE_SENSITIVE,
}


class WordListStore:
    """Reads and writes the forbidden word list through a configuration store.

    Nothing is cached: every ``load`` reads the store again, so the store stays
    the source of truth between sends.
    """

    def __init__(
        self,
        store: SettingsStore | None,
        default_words: Sequence[str] = DEFAULT_FORBIDDEN_WORDS,
    ) -> None:
        """Initialize the word-list store.

        Args:
            store: Backing configuration store, or None when none could be opened.
            default_words: Words used when the store holds no forbidden words.
        """
        self._store = store
        self._default_words = tuple(default_words)

    def load(self) -> tuple[ForbiddenWordList, PolicyFlags]:
        """Load the forbidden words and policy flags.

        An unavailable store yields an empty word list and default flags, which
        lets the send through. A readable store with no usable words yields the
        default word list. The store is read once, so words and flags come from
        one snapshot.

        Returns:
            Tuple of the word list and the policy flags.
        """
        if self._store is None:
            logger.warning("No config store available, forbidden word check disabled")
            return ForbiddenWordList(), PolicyFlags()

        try:
            data = self._store.read_all()
        except SettingsStoreError as e:
            logger.warning("Config store unavailable, forbidden word check disabled: %s", e)
            return ForbiddenWordList(), PolicyFlags()

        stored_words = read_strv(data, KEY_FORBIDDEN_WORDS)
        flag_values = {field: read_boolean(data, key) for field, key in FLAG_KEYS.items()}
        flags = PolicyFlags(**{k: v for k, v in flag_values.items() if v is not None})

        words = clean_words(stored_words or [])
        if not words:
            logger.debug("No forbidden words stored, using %d defaults", len(self._default_words))
            return ForbiddenWordList.from_words(self._default_words, from_defaults=True), flags

        return ForbiddenWordList.from_words(words), flags

    def save(self, words: ForbiddenWordList, flags: PolicyFlags) -> None:
        """Persist the word list and flags as one update, then sync.

        Blank entries are dropped. An unedited default list leaves the stored
        word list untouched.

        Raises:
            SettingsStoreError: If there is no store or it cannot be written.
        """
        if self._store is None:
            raise SettingsStoreError("No config store available")

        values: dict[str, Any] = {
            key: getattr(flags, field) for field, key in FLAG_KEYS.items()
        }
        if not words.is_unedited_default:
            values[KEY_FORBIDDEN_WORDS] = words.cleaned()

        self._store.apply(values)
        self._store.sync()
        logger.info(
            "Saved forbidden word settings (words=%s, flags=%s)",
            len(values[KEY_FORBIDDEN_WORDS]) if KEY_FORBIDDEN_WORDS in values else "unchanged",
            flags.model_dump(),
        )
