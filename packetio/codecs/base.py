"""Base codec interface and payload capabilities for packetio."""

from abc import ABC, abstractmethod
from typing import Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Encodable(Protocol):
    """A value that knows its own payload representation."""

    def to_bytes(self) -> bytes: ...


@runtime_checkable
class Decodable(Protocol):
    """A type that can rebuild an instance from payload bytes."""

    @classmethod
    def from_bytes(cls, data: bytes) -> "Decodable": ...


class Codec(ABC, Generic[T]):
    """Base interface for packetio codecs.

    Implementations must be deterministic and must consume exactly the bytes
    they are given: trailing bytes after a well-formed value are an error.
    """

    @abstractmethod
    def encode(self, value: T) -> bytes:
        """Encode a value to payload bytes.

        Raises:
            EncodingError: If the value cannot be represented
        """

    @abstractmethod
    def decode(self, data: bytes) -> T:
        """Decode payload bytes to a value.

        Raises:
            DecodingError: If the bytes are not exactly one well-formed value
        """
