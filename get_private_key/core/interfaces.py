"""
get-private-key Core - Abstract Interfaces

This module defines the pluggable interfaces used by the key resolver.
The resolver only talks to the filesystem through IFileSystem, so it can run
against the local disk or against a test double without changing core logic.
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class IFileSystem(ABC):
    """
    Interface for the read-only filesystem operations the resolver needs.

    Implementations:
    - LocalFileSystem: Backed by os / os.path
    """

    @abstractmethod
    def read_text(self, path: str) -> str:
        """
        Read a file as UTF-8 text.

        Args:
            path: Absolute path of the file

        Returns:
            The raw file contents

        Raises:
            OSError if the file cannot be read. Errors are not translated.
        """
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """
        Check whether a path exists.

        Args:
            path: Absolute path to check

        Returns:
            True if something exists at the path.
        """
        pass

    @abstractmethod
    def list_dir(self, path: str) -> List[str]:
        """
        List entry names of a directory.

        Args:
            path: Directory path

        Returns:
            Entry names in the order the directory reports them.
        """
        pass

    @abstractmethod
    def resolve(self, base: str, path: str) -> str:
        """
        Resolve a possibly relative path against a base directory.

        Args:
            base: Base directory
            path: Absolute or relative path

        Returns:
            Absolute, normalized path
        """
        pass


class IKeyProvider(ABC):
    """
    Interface for private key loading.

    Implementations:
    - KeyResolver: Full resolution (filepath, env, directory fallback)
    - LocalFileKeyProvider: Reads one PEM file from disk
    """

    @abstractmethod
    def load_private_key(self) -> Optional[str]:
        """
        Load the private key.

        Returns:
            PEM text, or None if no key is configured

        Raises:
            PrivateKeyError if the configured source is invalid
        """
        pass
