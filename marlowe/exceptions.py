"""Custom exception classes for Marlowe."""


class MarloweError(Exception):
    """Base exception for Marlowe errors."""

    pass


class DuplicateNetworkError(MarloweError, ValueError):
    """Raised when two network specs share the same name."""

    pass


class UnknownNetworkError(MarloweError, KeyError):
    """Raised when a requested network is not configured."""

    def __str__(self) -> str:
        # KeyError quotes its argument, keep the message readable
        return str(self.args[0]) if self.args else ""


class InvalidPrivateKeyError(MarloweError, ValueError):
    """Raised when a signing credential is not a 32-byte hex key."""

    pass


class EnvFileNotFoundError(MarloweError, FileNotFoundError):
    """Raised when an explicitly requested .env file does not exist."""

    pass


class OutputWriteError(MarloweError, OSError):
    """Raised when exported configuration cannot be written."""

    pass
