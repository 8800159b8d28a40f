"""Host composer interfaces."""

from send_no_evil.composer.base import BaseComposer, ConfirmationDialog
from send_no_evil.composer.message import EmailMessageComposer

__all__ = ["BaseComposer", "ConfirmationDialog", "EmailMessageComposer"]
