"""Forbidden word list and policy flag models."""

from collections.abc import Iterable

from pydantic import BaseModel, Field, PrivateAttr

from send_no_evil.defaults import (
    DEFAULT_CASE_SENSITIVE,
    DEFAULT_CHECK_ATTACHMENTS,
    DEFAULT_CHECK_MESSAGE_BODY,
)


class PolicyFlags(BaseModel):
    """What the send gate checks and how it compares text.

    Attributes:
        check_attachments: Scan attachment filenames (default: True).
        check_message_body: Scan the message body text (default: True).
        case_sensitive: Compare words exactly instead of case-folded (default: False).
    """

    check_attachments: bool = DEFAULT_CHECK_ATTACHMENTS
    check_message_body: bool = DEFAULT_CHECK_MESSAGE_BODY
    case_sensitive: bool = DEFAULT_CASE_SENSITIVE


def clean_words(words: Iterable[str]) -> list[str]:
    """Trim every word and drop blank entries, keeping order and duplicates."""
    return [word.strip() for word in words if word and word.strip()]


class ForbiddenWordList(BaseModel):
    """Ordered list of forbidden words.

    Insertion order is the display and storage order; duplicates are kept.
    ``from_defaults`` is True while the list is the unedited built-in default,
    so saving it does not overwrite what the store holds.
    """

    entries: list[str] = Field(default_factory=list)
    from_defaults: bool = False

    _edited: bool = PrivateAttr(default=False)

    @classmethod
    def from_words(
        cls, words: Iterable[str], *, from_defaults: bool = False
    ) -> "ForbiddenWordList":
        return cls(entries=clean_words(words), from_defaults=from_defaults)

    @property
    def words(self) -> tuple[str, ...]:
        return tuple(self.entries)

    @property
    def is_unedited_default(self) -> bool:
        return self.from_defaults and not self._edited

    def __len__(self) -> int:
        return len(self.entries)

    def add(self, word: str) -> None:
        """Append a word to the end of the list.

        Raises:
            ValueError: If the word is blank.
        """
        word = word.strip()
        if not word:
            raise ValueError("Forbidden word must not be blank")
        self.entries.append(word)
        self._edited = True

    def remove(self, index: int) -> str:
        """Remove and return the word at ``index``.

        Raises:
            IndexError: If there is no word at ``index``.
        """
        word = self.entries.pop(index)
        self._edited = True
        return word

    def edit(self, index: int, text: str) -> None:
        """Replace the word at ``index``; blank text removes the entry instead.

        Raises:
            IndexError: If there is no word at ``index``.
        """
        text = text.strip()
        if not text:
            self.remove(index)
            return
        self.entries[index] = text
        self._edited = True

    def cleaned(self) -> list[str]:
        """Return the trimmed, non-blank words in order."""
        return clean_words(self.entries)
