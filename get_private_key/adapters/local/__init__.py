"""Local disk adapters."""
from .local_filesystem import LocalFileSystem
from .file_key_provider import LocalFileKeyProvider

__all__ = ['LocalFileSystem', 'LocalFileKeyProvider']
