"""Core package initialization."""
from .errors import PrivateKeyError, ValidationError, NotFoundError, AmbiguousSourceError
from .formats import KeyFormat
from .interfaces import IFileSystem, IKeyProvider
from .config import ResolverConfig
from .resolver import KeyResolver, ResolvedKey, get_private_key

__all__ = [
    'PrivateKeyError', 'ValidationError', 'NotFoundError', 'AmbiguousSourceError',
    'KeyFormat', 'IFileSystem', 'IKeyProvider', 'ResolverConfig',
    'KeyResolver', 'ResolvedKey', 'get_private_key',
]
