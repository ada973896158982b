"""
get-private-key Core - Normalization

Pure key-text normalization without any I/O.
Environment variable systems tend to mangle multi-line secrets: they collapse
them onto one line, escape the newlines, or require base64 wrapping. This
module undoes all of those and returns canonical PEM text.
"""

import base64
import binascii
import logging
import re
from typing import Tuple

from get_private_key.core.errors import ValidationError
from get_private_key.core.formats import KeyFormat

logger = logging.getLogger(__name__)

ESCAPED_NEWLINE = "\\n"
_WHITESPACE_RUN = re.compile(r"\s+")


def is_base64(value: str) -> bool:
    """
    Check whether a string is canonical base64.

    The value is decoded with strict alphabet validation and encoded again;
    only an exact round trip counts.

    Args:
        value: Candidate string

    Returns:
        True if the value is base64
    """
    if not value:
        return False
    try:
        decoded = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        return False
    return base64.b64encode(decoded).decode("ascii") == value


def decode_base64(value: str) -> str:
    """Decode base64 text to a UTF-8 string, replacing undecodable bytes."""
    return base64.b64decode(value).decode("utf-8", errors="replace")


def rebuild_line_breaks(value: str, key_format: KeyFormat) -> str:
    """
    Rebuild PEM line structure for a key collapsed onto a single line.

    Everything between the markers is split on whitespace runs and every
    token is put on its own line.
    """
    start = value.index(key_format.begin) + len(key_format.begin)
    stop = value.find(key_format.end, start)
    if stop == -1:
        # end marker only appears before the begin marker
        raise ValidationError()
    body = value[start:stop].strip()
    if not body:
        raise ValidationError()
    body = _WHITESPACE_RUN.sub("\n", body)
    return f"{key_format.begin}\n{body}\n{key_format.end}"


classify = KeyFormat.detect


def normalize_candidate(value: str) -> Tuple[str, KeyFormat]:
    """
    Normalize a private key candidate and report its format.

    Steps:
    1. Decode base64 if the value round-trips as base64
    2. Replace escaped newlines with real ones
    3. Classify as PKCS1 or PKCS8 (PKCS1 first)
    4. Rebuild line breaks if the key has none

    Args:
        value: Raw key text, e.g. the PRIVATE_KEY environment variable

    Returns:
        (pem, key_format)

    Raises:
        ValidationError: If no known marker pair is present
    """
    if is_base64(value):
        logger.debug("Private key is base64 encoded, decoding")
        value = decode_base64(value)

    if ESCAPED_NEWLINE in value:
        logger.debug("Private key contains escaped newlines, unescaping")
        value = value.replace(ESCAPED_NEWLINE, "\n")

    key_format = classify(value)
    if key_format is None:
        raise ValidationError()

    if "\n" not in value:
        logger.debug(f"Private key ({key_format.name}) has no line breaks, rebuilding")
        value = rebuild_line_breaks(value, key_format)

    return value, key_format


def normalize_private_key(value: str) -> str:
    """
    Normalize a private key candidate to canonical PEM text.

    Raises:
        ValidationError: If the value is not a PKCS1 or PKCS8 private key
    """
    pem, _ = normalize_candidate(value)
    return pem
