"""Protobuf codec implementation for packetio."""

from typing import Generic, TypeVar

from google.protobuf.message import DecodeError, EncodeError, Message

from ..errors import DecodingError, EncodingError
from .base import Codec

M = TypeVar("M", bound=Message)


class ProtobufCodec(Codec[M], Generic[M]):
    """Protobuf codec for messages of a single generated type."""

    def __init__(self, message_cls: type[M]):
        """Initialize codec.

        Args:
            message_cls: Generated protobuf message class to decode into
        """
        self.message_cls = message_cls

    def encode(self, value: M) -> bytes:
        """Encode a message to Protobuf bytes.

        Args:
            value: Message instance of ``message_cls``

        Returns:
            Serialized Protobuf bytes with deterministic map ordering
        """
        if not isinstance(value, self.message_cls):
            raise EncodingError(f"Expected {self.message_cls.__name__}, got {type(value).__name__}")
        try:
            return value.SerializeToString(deterministic=True)
        except EncodeError as exc:
            # Raised for messages with unset required fields (proto2)
            raise EncodingError(f"Cannot serialize {self.message_cls.__name__}: {exc}") from exc

    def decode(self, data: bytes) -> M:
        """Decode Protobuf bytes to a message.

        Args:
            data: Serialized Protobuf bytes

        Returns:
            Parsed message instance
        """
        try:
            return self.message_cls.FromString(bytes(data))
        except DecodeError as exc:
            raise DecodingError(f"Invalid {self.message_cls.__name__} payload: {exc}") from exc
