"""Custom exceptions for send-no-evil."""


class SendNoEvilError(Exception):
    """Base exception for send-no-evil."""


class ConfigError(SendNoEvilError):
    """Raised when there is a configuration error.

    Carries the offending file location when one is known.
    """

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        line: int | None = None,
        col: int | None = None,
    ) -> None:
        self.file_path = file_path
        self.line = line
        self.col = col
        full_message = message
        if file_path:
            location = f" in {file_path}"
            if line is not None:
                location += f" at line {line}"
                if col is not None:
                    location += f", column {col}"
            full_message = f"Configuration error{location}: {message}"
        super().__init__(full_message)


class SettingsStoreError(ConfigError):
    """Raised when the configuration store cannot be read or written."""
