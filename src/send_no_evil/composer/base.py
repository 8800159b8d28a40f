"""Abstract base class for the host composer handle passed to the send check."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from send_no_evil.email.models import BaseAttachment, ContentNode

# Shows a modal yes/no question (message, title) and returns True for "yes"
ConfirmationDialog = Callable[[str, str], bool]


class BaseComposer(ABC):
    """Abstract interface for the message being composed.

    Hosts expose the attachments, up to three views of the body text, a modal
    confirmation dialog, and a "block send" indicator that the host checks
    after the send check returns.
    """

    def __init__(self) -> None:
        self._send_blocked = False

    @property
    def send_blocked(self) -> bool:
        """True once the send check has asked the host to abort sending."""
        return self._send_blocked

    def block_send(self) -> None:
        """Signal the host to abort the send."""
        self._send_blocked = True

    @abstractmethod
    def get_attachments(self) -> list[BaseAttachment]:
        """Return the attachments in the order they were added."""
        ...

    @abstractmethod
    def confirm(self, message: str, title: str) -> bool:
        """Ask the sender a yes/no question and block until answered.

        Returns:
            True only for an explicit "yes".
        """
        ...

    def get_raw_message_text(self) -> bytes | str | None:
        """Return the already-rendered composer buffer, if the host exposes one."""
        return None

    def get_message(self) -> ContentNode | None:
        """Return the structured content tree, if it has been built."""
        return None

    def get_text(self) -> str | None:
        """Return the flat text property, if the host exposes one."""
        return None
