# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
r"""packetio - Length-prefixed packets over blocking and asyncio byte streams.

Every packet travels as one frame::

    [4-byte big-endian unsigned length N][N bytes of codec-encoded payload]

with no magic, version or checksum. The package provides:
- Frame read/write helpers for sockets and binary files
- A blocking adapter (``PacketStream``) and an asyncio adapter
  (``AsyncPacketStream``) producing byte-identical frames
- Pluggable codecs: bytes, JSON, struct records, ``to_bytes``/``from_bytes``
  records, pydantic models and protobuf messages
- Manual parsing utilities for callers doing their own I/O
"""

from . import parsing
from .aio import (
    AsyncPacketStream,
    read_frame_async,
    recv_packet_async,
    send_packet_async,
    write_frame_async,
)
from .codecs import (
    BytesCodec,
    Codec,
    Decodable,
    Encodable,
    JSONCodec,
    ModelCodec,
    ProtobufCodec,
    RecordCodec,
    StructCodec,
    get_codec,
    list_codecs,
    register_codec,
)
from .constants import (
    DEFAULT_MAX_FRAME_BYTES,
    LAN_MAX_FRAME_BYTES,
    LENGTH_PREFIX_SIZE,
    MAX_PAYLOAD_LENGTH,
    WAN_MAX_FRAME_BYTES,
)
from .errors import (
    DecodingError,
    EncodingError,
    FrameTooLargeError,
    IncompleteFrameError,
    PacketIOError,
    ShortWriteError,
)
from .frames import (
    encode_length,
    pack_frame,
    parse_length,
    read_frame,
    write_frame,
)
from .parsing import decode_payload, encode_packet
from .transport import PacketStream, recv_packet, send_packet

# Public API exports
__all__ = [
    # Adapters
    "PacketStream",
    "AsyncPacketStream",
    "send_packet",
    "recv_packet",
    "send_packet_async",
    "recv_packet_async",
    # Frame utilities
    "write_frame",
    "read_frame",
    "write_frame_async",
    "read_frame_async",
    "pack_frame",
    "encode_length",
    "parse_length",
    # Manual parsing
    "parsing",
    "decode_payload",
    "encode_packet",
    # Codecs
    "Codec",
    "Encodable",
    "Decodable",
    "BytesCodec",
    "JSONCodec",
    "ModelCodec",
    "ProtobufCodec",
    "RecordCodec",
    "StructCodec",
    "get_codec",
    "list_codecs",
    "register_codec",
    # Constants
    "LENGTH_PREFIX_SIZE",
    "MAX_PAYLOAD_LENGTH",
    "DEFAULT_MAX_FRAME_BYTES",
    "WAN_MAX_FRAME_BYTES",
    "LAN_MAX_FRAME_BYTES",
    # Errors
    "PacketIOError",
    "EncodingError",
    "DecodingError",
    "FrameTooLargeError",
    "IncompleteFrameError",
    "ShortWriteError",
]
