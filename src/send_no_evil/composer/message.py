"""Composer backed by a stdlib ``email.message.Message``."""

from email.message import Message

from send_no_evil.composer.base import BaseComposer, ConfirmationDialog
from send_no_evil.email.mime import (
    attachments_from_message,
    body_text,
    content_tree_from_message,
)
from send_no_evil.email.models import BaseAttachment, ContentNode


class EmailMessageComposer(BaseComposer):
    """Exposes an outgoing ``Message`` to the send check.

    Hosts that build messages with the ``email`` package (for example just
    before handing them to ``smtplib``) can gate them with this adapter.
    """

    def __init__(self, message: Message, dialog: ConfirmationDialog) -> None:
        """Initialize the composer.

        Args:
            message: The message about to be sent.
            dialog: Callable showing a yes/no question (message, title).
        """
        super().__init__()
        self._message = message
        self._dialog = dialog

    @property
    def message(self) -> Message:
        return self._message

    def get_attachments(self) -> list[BaseAttachment]:
        return list(attachments_from_message(self._message))

    def confirm(self, message: str, title: str) -> bool:
        return bool(self._dialog(message, title))

    def get_message(self) -> ContentNode | None:
        return content_tree_from_message(self._message)

    def get_text(self) -> str | None:
        return body_text(self._message)
