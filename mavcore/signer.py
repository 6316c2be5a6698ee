"""SHA-256/48 signer for `MAVLink 2` message signing."""

from __future__ import annotations

import hashlib

from mavcore.types import SIGNATURE_VALUE_LENGTH

__all__ = ["MavSha256"]


class MavSha256:
    """Computes ``sha256_48``: SHA-256 truncated to its first 48 bits."""

    def __init__(self) -> None:
        self._hasher = hashlib.sha256()

    def reset(self) -> None:
        """Forget all digested data."""
        self._hasher = hashlib.sha256()

    def digest(self, data: bytes) -> None:
        """Consume a chunk of bytes."""
        self._hasher.update(data)

    def produce(self) -> bytes:
        """Return the signature of the data digested so far.

        The internal state is kept, so more data may be digested afterwards.
        """
        return self._hasher.copy().digest()[:SIGNATURE_VALUE_LENGTH]