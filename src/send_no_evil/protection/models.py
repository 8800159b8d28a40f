"""Forbidden word detection data models."""

from enum import Enum

from pydantic import BaseModel


class MatchResult(BaseModel):
    """Result of matching text against the forbidden word list.

    ``word`` is the list entry as configured, not its case-folded form.
    ``filename`` is set when the match came from an attachment name.
    """

    word: str | None = None
    filename: str | None = None

    @property
    def matched(self) -> bool:
        """Return True if a forbidden word was found."""
        return self.word is not None


class MatchSource(str, Enum):
    """Where a forbidden word was found."""

    ATTACHMENT = "attachment"
    BODY = "body"


class Verdict(BaseModel):
    """Outcome of a send check: clean, or a violation naming one word."""

    word: str | None = None
    source: MatchSource | None = None
    filename: str | None = None

    @property
    def is_violation(self) -> bool:
        return self.word is not None

    @classmethod
    def from_match(cls, result: MatchResult, source: MatchSource) -> "Verdict":
        if not result.matched:
            return cls()
        return cls(word=result.word, source=source, filename=result.filename)
