"""
get-private-key

Locates the private key of an application and normalizes PEM text that was
mangled on its way through environment variables.
"""

from get_private_key.version import __version__
from get_private_key.core import (
    AmbiguousSourceError,
    KeyFormat,
    KeyResolver,
    NotFoundError,
    PrivateKeyError,
    ResolverConfig,
    ValidationError,
    get_private_key,
)

__all__ = [
    "__version__",
    "AmbiguousSourceError",
    "KeyFormat",
    "KeyResolver",
    "NotFoundError",
    "PrivateKeyError",
    "ResolverConfig",
    "ValidationError",
    "get_private_key",
]
