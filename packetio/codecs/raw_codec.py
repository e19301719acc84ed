"""Passthrough and capability-based codecs for packetio."""

import struct
from typing import Generic, TypeVar

from ..errors import DecodingError, EncodingError
from .base import Codec, Decodable, Encodable

R = TypeVar("R", bound=Decodable)


class BytesCodec(Codec[bytes]):
    """Identity codec: the payload is the value."""

    def encode(self, value: bytes) -> bytes:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise EncodingError(f"Expected a bytes-like value, got {type(value).__name__}")
        return bytes(value)

    def decode(self, data: bytes) -> bytes:
        return bytes(data)


class RecordCodec(Codec[R], Generic[R]):
    """Codec for types implementing ``to_bytes`` / ``from_bytes``.

    The record class owns its wire layout; this codec only checks the value's
    type and translates failures into :class:`EncodingError` and
    :class:`DecodingError`. ``from_bytes`` should reject trailing bytes.
    """

    def __init__(self, record_cls: type[R]):
        if not isinstance(record_cls, type) or not callable(getattr(record_cls, "from_bytes", None)):
            raise TypeError(f"{record_cls!r} does not implement from_bytes()")
        self.record_cls = record_cls

    def encode(self, value: R) -> bytes:
        if not isinstance(value, self.record_cls) or not isinstance(value, Encodable):
            raise EncodingError(f"Expected an encodable {self.record_cls.__name__}, got {type(value).__name__}")
        try:
            data = value.to_bytes()
        except EncodingError:
            raise
        except (TypeError, ValueError, OverflowError, struct.error) as exc:
            raise EncodingError(f"Cannot encode {self.record_cls.__name__}: {exc}") from exc
        return bytes(data)

    def decode(self, data: bytes) -> R:
        try:
            return self.record_cls.from_bytes(bytes(data))  # type: ignore[return-value]
        except DecodingError:
            raise
        except (TypeError, ValueError, IndexError, struct.error) as exc:
            raise DecodingError(f"Cannot decode {self.record_cls.__name__}: {exc}") from exc
