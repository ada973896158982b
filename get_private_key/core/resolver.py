"""
get-private-key Core - Key Resolver

Finds the private key for an application.

Resolution order:
1. filepath option -> raw file contents
2. env.PRIVATE_KEY -> normalized PEM text
3. env.PRIVATE_KEY_PATH -> raw file contents
4. A single *.pem file in the working directory -> raw file contents
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from get_private_key.version import __version__
from get_private_key.core.config import PEM_SUFFIX, ResolverConfig
from get_private_key.core.errors import AmbiguousSourceError, NotFoundError
from get_private_key.core.formats import KeyFormat
from get_private_key.core.interfaces import IFileSystem, IKeyProvider
from get_private_key.core.normalizer import normalize_candidate

logger = logging.getLogger(__name__)

# Key sources
SOURCE_FILEPATH = "filepath"
SOURCE_ENV_PRIVATE_KEY = "env.PRIVATE_KEY"
SOURCE_ENV_PRIVATE_KEY_PATH = "env.PRIVATE_KEY_PATH"
SOURCE_CWD = "cwd"


@dataclass
class ResolvedKey:
    """A resolved private key and where it came from."""

    pem: str
    source: str
    path: Optional[str] = None
    key_format: Optional[KeyFormat] = None


class KeyResolver(IKeyProvider):
    """
    Resolves a private key from a ResolverConfig.

    Only env.PRIVATE_KEY is normalized. Files are returned verbatim.
    """

    VERSION = __version__

    def __init__(self, config: ResolverConfig, fs: Optional[IFileSystem] = None):
        """
        Initialize the resolver.

        Args:
            config: Resolution inputs
            fs: Filesystem to read from (defaults to LocalFileSystem)
        """
        if fs is None:
            from get_private_key.adapters.local.local_filesystem import LocalFileSystem
            fs = LocalFileSystem()
        self.config = config
        self.fs = fs

    def resolve(self) -> Optional[str]:
        """
        Resolve the private key.

        Returns:
            PEM text, or None if no key is configured and none was found

        Raises:
            ValidationError: env.PRIVATE_KEY is not a PKCS1/PKCS8 key
            NotFoundError: env.PRIVATE_KEY_PATH does not exist
            AmbiguousSourceError: More than one *.pem file in the working directory
            OSError: Reading a configured file failed
        """
        resolved = self.resolve_source()
        return resolved.pem if resolved else None

    def load_private_key(self) -> Optional[str]:
        return self.resolve()

    def resolve_source(self) -> Optional[ResolvedKey]:
        """Resolve the private key, keeping track of its source."""
        config = self.config

        if config.filepath:
            return self._read_file(config.filepath, SOURCE_FILEPATH)

        if config.private_key:
            logger.debug("Using env.PRIVATE_KEY")
            pem, key_format = normalize_candidate(config.private_key)
            logger.info(f"Loaded {key_format.name} private key from env.PRIVATE_KEY")
            return ResolvedKey(pem=pem, source=SOURCE_ENV_PRIVATE_KEY, key_format=key_format)

        if config.private_key_path:
            path = self.fs.resolve(config.cwd, config.private_key_path)
            if not self.fs.exists(path):
                logger.error(f"env.PRIVATE_KEY_PATH does not exist: {path}")
                raise NotFoundError(config.private_key_path)
            return self._read_file(config.private_key_path, SOURCE_ENV_PRIVATE_KEY_PATH)

        pem_files = [
            name for name in self.fs.list_dir(config.cwd) if name.endswith(PEM_SUFFIX)
        ]
        if len(pem_files) > 1:
            logger.error(f"Found {len(pem_files)} *.pem files in {config.cwd}")
            raise AmbiguousSourceError(pem_files)
        if pem_files:
            return self._read_file(pem_files[0], SOURCE_CWD)

        logger.warning(f"No private key configured and no *.pem file found in {config.cwd}")
        return None

    def _read_file(self, filepath: str, source: str) -> ResolvedKey:
        path = self.fs.resolve(self.config.cwd, filepath)
        pem = self.fs.read_text(path)
        logger.info(f"Loaded private key from {path} ({source})")
        return ResolvedKey(pem=pem, source=source, path=path)


def get_private_key(
    filepath: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    cwd: Optional[str] = None,
    fs: Optional[IFileSystem] = None,
) -> Optional[str]:
    """
    Find the private key.

    Args:
        filepath: Explicit key file, relative to cwd unless absolute
        env: Environment mapping (defaults to os.environ)
        cwd: Working directory (defaults to the process working directory)
        fs: Filesystem to read from (defaults to the local disk)

    Returns:
        PEM text, or None if no key could be found

    Examples:
        # Explicit file
        pem = get_private_key(filepath="app.private-key.pem")

        # Injected environment
        pem = get_private_key(env={"PRIVATE_KEY": os.environ["GITHUB_APP_KEY"]})
    """
    config = ResolverConfig.from_options(filepath=filepath, env=env, cwd=cwd)
    return KeyResolver(config, fs).resolve()


get_private_key.VERSION = __version__
