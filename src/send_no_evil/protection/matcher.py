"""Forbidden word matching by plain substring containment."""

from collections.abc import Iterable

import structlog

from send_no_evil.protection.models import MatchResult

logger = structlog.get_logger()


def normalize(text: str, case_sensitive: bool) -> str:
    """Return ``text`` as compared: unchanged, or Unicode case-folded."""
    return text if case_sensitive else text.casefold()


class ForbiddenWordMatcher:
    """Finds the first forbidden word contained in a text.

    Words are tested in list order and the earliest listed word wins, no matter
    where it occurs in the text. Containment has no word boundaries, so
    "secret" matches "secretly".
    """

    def __init__(self, words: Iterable[str], case_sensitive: bool = False) -> None:
        """Initialize the matcher.

        Args:
            words: Forbidden words in priority order. Blank entries are ignored.
            case_sensitive: Compare exactly instead of case-folded.
        """
        self._case_sensitive = case_sensitive
        self._words = [
            (word, normalize(word, case_sensitive)) for word in words if word
        ]

    def __bool__(self) -> bool:
        return bool(self._words)

    def match(self, text: str) -> MatchResult:
        """Match ``text`` against the word list.

        Args:
            text: Text to search.

        Returns:
            MatchResult naming the first listed word found, or an empty result.
        """
        if not text or not self._words:
            return MatchResult()

        haystack = normalize(text, self._case_sensitive)
        for word, needle in self._words:
            if needle in haystack:
                logger.debug(
                    "Forbidden word found",
                    word=word,
                    case_sensitive=self._case_sensitive,
                )
                return MatchResult(word=word)
        return MatchResult()


def match_forbidden_word(
    text: str,
    words: Iterable[str],
    case_sensitive: bool = False,
) -> MatchResult:
    """Convenience function to match text without keeping a matcher.

    Args:
        text: Text to search.
        words: Forbidden words in priority order.
        case_sensitive: Compare exactly instead of case-folded.

    Returns:
        MatchResult naming the first listed word found, or an empty result.
    """
    return ForbiddenWordMatcher(words, case_sensitive).match(text)
