"""
Local Filesystem

Reads key files and lists directories on the local disk.
This is the default filesystem for the resolver.
"""

import logging
import os
from typing import List

from get_private_key.core.interfaces import IFileSystem

logger = logging.getLogger(__name__)


class LocalFileSystem(IFileSystem):
    """
    os-backed filesystem.

    Errors from the operating system (missing file, permission denied) are
    passed through as-is.
    """

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize the local filesystem.

        Args:
            encoding: Text encoding used when reading key files
        """
        self.encoding = encoding

    def read_text(self, path: str) -> str:
        logger.debug(f"Reading {path}")
        with open(path, "r", encoding=self.encoding) as f:
            return f.read()

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def list_dir(self, path: str) -> List[str]:
        return os.listdir(path)

    def resolve(self, base: str, path: str) -> str:
        return os.path.abspath(os.path.join(base, path))
