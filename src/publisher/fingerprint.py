"""Content fingerprints used for idempotent change detection."""

import hashlib
from typing import BinaryIO, Union

CONTENT_HASH_PROPERTY_KEY = "content-hash"
INITIAL_PAGE_VERSION = 1

_CHUNK_SIZE = 65536


def content_hash(content: str) -> str:
    """Return the SHA-256 hex digest of the UTF-8 encoded page content."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def stream_digest(stream: Union[bytes, BinaryIO], chunk_size: int = _CHUNK_SIZE) -> str:
    """Return the SHA-256 hex digest over the full byte stream.

    Args:
        stream: Raw bytes or a binary file object, read until exhausted
        chunk_size: Number of bytes read per iteration

    Returns:
        Hex digest of every byte in the stream
    """
    digest = hashlib.sha256()
    if isinstance(stream, (bytes, bytearray)):
        digest.update(stream)
        return digest.hexdigest()

    for chunk in iter(lambda: stream.read(chunk_size), b""):
        digest.update(chunk)
    return digest.hexdigest()
