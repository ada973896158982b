"""
Resolver configuration.

The environment and working directory are plain inputs here. Process-global
defaults are applied once, in ResolverConfig.from_options.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

# Environment variable names
PRIVATE_KEY_ENV = "PRIVATE_KEY"
PRIVATE_KEY_PATH_ENV = "PRIVATE_KEY_PATH"

# Directory fallback
PEM_SUFFIX = ".pem"


@dataclass(frozen=True)
class ResolverConfig:
    """Inputs for a single key resolution."""

    filepath: Optional[str] = None
    env: Mapping[str, str] = field(default_factory=dict)
    cwd: str = "."

    @classmethod
    def from_options(
        cls,
        filepath: Optional[str] = None,
        env: Optional[Mapping[str, str]] = None,
        cwd: Optional[str] = None,
    ) -> "ResolverConfig":
        """
        Build a config, falling back to the process environment and the
        current working directory for anything not given.
        """
        return cls(
            filepath=filepath or None,
            env=os.environ if env is None else env,
            cwd=cwd or os.getcwd(),
        )

    @property
    def private_key(self) -> Optional[str]:
        """env.PRIVATE_KEY, with empty values treated as unset."""
        return self.env.get(PRIVATE_KEY_ENV) or None

    @property
    def private_key_path(self) -> Optional[str]:
        """env.PRIVATE_KEY_PATH, with empty values treated as unset."""
        return self.env.get(PRIVATE_KEY_PATH_ENV) or None
