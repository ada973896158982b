"""
get-private-key Core - Errors

Every failure the resolver raises on purpose derives from PrivateKeyError.
I/O errors from reading an explicitly configured file are not wrapped.
"""

from typing import List

MESSAGE_PREFIX = "[get-private-key]"


class PrivateKeyError(Exception):
    """Base class for resolver errors."""

    # Error Codes
    ERROR_INVALID_KEY = "INVALID_KEY"
    ERROR_NOT_FOUND = "NOT_FOUND"
    ERROR_AMBIGUOUS_SOURCE = "AMBIGUOUS_SOURCE"

    code = "PRIVATE_KEY_ERROR"


class ValidationError(PrivateKeyError, ValueError):
    """Raised when env.PRIVATE_KEY is not a recognizable RSA private key."""

    code = PrivateKeyError.ERROR_INVALID_KEY

    def __init__(self, source: str = "env.PRIVATE_KEY"):
        self.source = source
        super().__init__(
            f'{MESSAGE_PREFIX} The contents of "{source}" could not be validated. '
            "Please check to ensure you have copied the contents of the .pem file correctly."
        )


class NotFoundError(PrivateKeyError, FileNotFoundError):
    """Raised when env.PRIVATE_KEY_PATH points at a missing file."""

    code = PrivateKeyError.ERROR_NOT_FOUND

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f'{MESSAGE_PREFIX} Private key does not exist at path: "{path}". '
            'Please check to ensure that "env.PRIVATE_KEY_PATH" is correct.'
        )


class AmbiguousSourceError(PrivateKeyError, ValueError):
    """Raised when directory fallback finds more than one *.pem file."""

    code = PrivateKeyError.ERROR_AMBIGUOUS_SOURCE

    def __init__(self, filenames: List[str]):
        self.filenames = list(filenames)
        paths = ", ".join(self.filenames)
        super().__init__(
            f'{MESSAGE_PREFIX} More than one file found: "{paths}". '
            "Pass filepath or set one of the environment variables: "
            "PRIVATE_KEY, PRIVATE_KEY_PATH"
        )
