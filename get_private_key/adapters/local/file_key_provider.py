"""
Local File-Based Private Key Provider

Loads a private key from a single PEM file on disk.
"""

import logging
from typing import Optional

from get_private_key.core.config import ResolverConfig
from get_private_key.core.interfaces import IKeyProvider
from get_private_key.core.resolver import KeyResolver
from get_private_key.adapters.local.local_filesystem import LocalFileSystem

logger = logging.getLogger(__name__)


class LocalFileKeyProvider(IKeyProvider):
    """
    File-based private key provider.

    Wraps KeyResolver with an explicit filepath, so the file is read verbatim
    and no environment variable can override it.
    """

    def __init__(self, key_file: str, cwd: Optional[str] = None):
        """
        Initialize the local key provider.

        Args:
            key_file: Path to the PEM file containing the private key
            cwd: Base directory for a relative key_file
        """
        self.fs = LocalFileSystem()
        self.config = ResolverConfig.from_options(filepath=key_file, env={}, cwd=cwd)
        self.key_file = self.fs.resolve(self.config.cwd, key_file)
        self._private_key: Optional[str] = None

        if not self.fs.exists(self.key_file):
            raise FileNotFoundError(f"Private key file not found: {self.key_file}")

        logger.info(f"Using private key file {self.key_file}")

    def load_private_key(self) -> str:
        """
        Load the private key from the PEM file.

        Returns:
            Raw file contents

        Raises:
            OSError if the file cannot be read
        """
        if self._private_key is None:
            self._private_key = KeyResolver(self.config, self.fs).resolve()
        return self._private_key
