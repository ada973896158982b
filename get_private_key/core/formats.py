"""
Private key container formats recognized by the resolver.
"""

from enum import Enum
from typing import Optional


class KeyFormat(Enum):
    """PEM armor labels, in classification order."""
    PKCS1 = "RSA PRIVATE KEY"
    PKCS8 = "PRIVATE KEY"

    @property
    def begin(self) -> str:
        return f"-----BEGIN {self.value}-----"

    @property
    def end(self) -> str:
        return f"-----END {self.value}-----"

    def matches(self, text: str) -> bool:
        """True if both markers of this format appear in the text."""
        return self.begin in text and self.end in text

    @classmethod
    def detect(cls, text: str) -> Optional["KeyFormat"]:
        """
        Classify text by its PEM markers.

        PKCS1 is checked first, so a value carrying both marker pairs is
        reported as PKCS1.

        Args:
            text: Candidate key text

        Returns:
            The first matching format, or None
        """
        for key_format in cls:
            if key_format.matches(text):
                return key_format
        return None
