"""Send gate: asks for confirmation before a message with forbidden words is sent."""

import logging
from enum import Enum

from pydantic import BaseModel, Field

from send_no_evil._error_handler import fail_open
from send_no_evil.composer.base import BaseComposer
from send_no_evil.config import Settings, get_settings_eager
from send_no_evil.defaults import DEFAULT_DIALOG_TITLE
from send_no_evil.email.extraction import get_message_text
from send_no_evil.protection.attachments import scan_attachment_names
from send_no_evil.protection.matcher import match_forbidden_word
from send_no_evil.protection.models import MatchSource, Verdict
from send_no_evil.words.service import WordListStore
from send_no_evil.words.store import SettingsStore, open_store

logger = logging.getLogger(__name__)

CONFIRM_MESSAGE = (
    "Forbidden word detected: '{word}'\n\nAre you sure you want to send this message?"
)


class GateState(str, Enum):
    """States a single send check passes through."""

    IDLE = "idle"
    POLICY_LOADED = "policy_loaded"
    ATTACHMENTS_CHECKED = "attachments_checked"
    BODY_CHECKED = "body_checked"
    DECIDED = "decided"
    CONFIRMED_SEND = "confirmed_send"
    CANCELLED = "cancelled"


class GateOutcome(BaseModel):
    """Result of a send check.

    Attributes:
        state: Final state, CONFIRMED_SEND or CANCELLED.
        verdict: Clean, or the one forbidden word that triggered the prompt.
        trail: Every state visited, in order.
    """

    state: GateState
    verdict: Verdict = Field(default_factory=Verdict)
    trail: list[GateState] = Field(default_factory=list)

    @property
    def send_allowed(self) -> bool:
        return self.state == GateState.CONFIRMED_SEND


class SendGate:
    """Checks an outgoing message for forbidden words before it is sent.

    Attachment names are checked first; an attachment violation skips the body
    check. On a violation the sender is asked once, showing the first word
    found, and a "no" blocks the send on the composer.
    """

    def __init__(
        self,
        word_store: WordListStore,
        dialog_title: str = DEFAULT_DIALOG_TITLE,
    ) -> None:
        """Initialize the send gate.

        Args:
            word_store: Source of the word list and policy flags, read on every check.
            dialog_title: Title of the confirmation dialog.
        """
        self._word_store = word_store
        self._dialog_title = dialog_title

    def check(self, composer: BaseComposer) -> GateOutcome:
        """Run the send check for one send attempt.

        Args:
            composer: Handle to the message being sent.

        Returns:
            GateOutcome with the final state and verdict.
        """
        trail = [GateState.IDLE]

        def advance(state: GateState) -> None:
            logger.debug("Send gate: %s -> %s", trail[-1].value, state.value)
            trail.append(state)

        words, flags = self._word_store.load()
        advance(GateState.POLICY_LOADED)

        if not words.words:
            logger.debug("No forbidden words configured, allowing send")
            advance(GateState.CONFIRMED_SEND)
            return GateOutcome(state=GateState.CONFIRMED_SEND, trail=trail)

        verdict = Verdict()
        if flags.check_attachments:
            attachments = composer.get_attachments()
            if attachments:
                result = scan_attachment_names(attachments, words.words, flags.case_sensitive)
                verdict = Verdict.from_match(result, MatchSource.ATTACHMENT)
        advance(GateState.ATTACHMENTS_CHECKED)

        if not verdict.is_violation and flags.check_message_body:
            text = get_message_text(composer)
            if text:
                result = match_forbidden_word(text, words.words, flags.case_sensitive)
                verdict = Verdict.from_match(result, MatchSource.BODY)
            advance(GateState.BODY_CHECKED)

        advance(GateState.DECIDED)

        if not verdict.is_violation:
            advance(GateState.CONFIRMED_SEND)
            return GateOutcome(state=GateState.CONFIRMED_SEND, verdict=verdict, trail=trail)

        logger.info(
            "Forbidden word detected (word=%r, source=%s, filename=%s)",
            verdict.word,
            verdict.source.value if verdict.source else None,
            verdict.filename,
        )
        if composer.confirm(CONFIRM_MESSAGE.format(word=verdict.word), self._dialog_title):
            logger.info("Sender confirmed send despite forbidden word %r", verdict.word)
            advance(GateState.CONFIRMED_SEND)
            return GateOutcome(state=GateState.CONFIRMED_SEND, verdict=verdict, trail=trail)

        composer.block_send()
        logger.info("Send cancelled by sender (word=%r)", verdict.word)
        advance(GateState.CANCELLED)
        return GateOutcome(state=GateState.CANCELLED, verdict=verdict, trail=trail)


@fail_open
def presend_hook(
    composer: BaseComposer,
    store: SettingsStore | None = None,
    settings: Settings | None = None,
) -> GateOutcome:
    """Entry point for the host's pre-send event.

    Loads settings and the configuration store fresh for this send and runs the
    send gate. The only effect on the host is ``composer.block_send()`` when the
    sender declines. Errors never propagate: configuration problems and
    unexpected failures are logged and the send proceeds (returns None).

    Args:
        composer: Handle to the message being sent.
        store: Configuration store to read; defaults to the YAML store named by settings.
        settings: Application settings; loaded from environment and YAML if omitted.
    """
    if settings is None:
        settings = get_settings_eager()
    if store is None:
        store = open_store(settings)

    gate = SendGate(
        WordListStore(store, settings.default_forbidden_words),
        dialog_title=settings.dialog_title,
    )
    return gate.check(composer)
