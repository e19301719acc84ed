"""Manual parsing utilities.

For callers that do their own buffered or vectored I/O but still want the
packetio length and payload rules::

    prefix = sock.recv(4, socket.MSG_WAITALL)
    payload = sock.recv(parse_length(prefix), socket.MSG_WAITALL)
    value = decode_payload(payload, codec)

None of these functions touch a stream.
"""

from typing import Any

from .codecs import Codec, JSONCodec
from .frames import encode_length, pack_frame, parse_length

__all__ = ["parse_length", "decode_payload", "encode_length", "encode_packet"]


def decode_payload(data: bytes, codec: Codec[Any] | None = None) -> Any:
    """Decode the payload of one frame (without its length prefix)."""
    codec = codec or JSONCodec()
    return codec.decode(data)


def encode_packet(value: Any, codec: Codec[Any] | None = None) -> bytes:
    """Encode value as a complete frame, length prefix included."""
    codec = codec or JSONCodec()
    return pack_frame(codec.encode(value))
