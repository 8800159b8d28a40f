"""Default values and configuration keys shared across send-no-evil."""

# Keys of the key-value configuration store
KEY_FORBIDDEN_WORDS = "forbidden-words"
KEY_CHECK_ATTACHMENTS = "check-attachments"
KEY_CHECK_MESSAGE_BODY = "check-message-body"
KEY_CASE_SENSITIVE = "case-sensitive"

DEFAULT_FORBIDDEN_WORDS: tuple[str, ...] = (
    "confidential",
    "secret",
    "password",
    "private",
    "internal",
    "draft",
)

DEFAULT_CHECK_ATTACHMENTS = True
DEFAULT_CHECK_MESSAGE_BODY = True
DEFAULT_CASE_SENSITIVE = False

DEFAULT_DIALOG_TITLE = "Security check"

APP_NAME = "send-no-evil"
