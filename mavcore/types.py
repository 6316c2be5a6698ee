"""Common protocol types."""

from __future__ import annotations

from typing import Generic, TypeVar

__all__ = [
    "SIGNATURE_VALUE_LENGTH",
    "Behold",
    "Checksum",
    "ComponentId",
    "MavLinkId",
    "PayloadLength",
    "Sequence",
    "SignatureValue",
    "SignedLinkId",
    "SystemId",
]

#: Length in bytes of a `MAVLink 2` signature value (the first 48 bits of SHA-256).
SIGNATURE_VALUE_LENGTH = 6

#: MAVLink system identifier.
SystemId = int
#: MAVLink component identifier.
ComponentId = int
#: MAVLink identifier of a system or a component.
MavLinkId = int
#: Packet sequence number.
Sequence = int
#: Payload length.
PayloadLength = int
#: Packet checksum, encoded on the wire as little endian.
Checksum = int
#: Identifier of a signed communication channel.
SignedLinkId = int
#: Signature value bytes.
SignatureValue = bytes

T = TypeVar("T")


class Behold(Generic[T]):
    """Wraps a result whose use needs the caller's attention.

    The caller either accepts the consequences with :meth:`unwrap`
    or drops the value with :meth:`discard`.
    """

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Behold({self._value!r})"

    def unwrap(self) -> T:
        """Accept the consequences and return the wrapped value."""
        return self._value

    def discard(self) -> None:
        """Drop the wrapped value."""