"""packetio length-prefix frame format over blocking streams.

A frame is a 4-byte big-endian unsigned payload length followed by exactly
that many payload bytes. The helpers here accept either a socket-like object
(``sendall``/``recv``) or a binary file-like object (``write``/``read``).
"""

import logging
import socket
import struct
from typing import BinaryIO, Union

from .constants import LENGTH_FORMAT, LENGTH_PREFIX_SIZE, MAX_PAYLOAD_LENGTH, READ_CHUNK_SIZE
from .errors import DecodingError, EncodingError, FrameTooLargeError, IncompleteFrameError, ShortWriteError

logger = logging.getLogger(__name__)

Stream = Union[socket.socket, BinaryIO]

_LENGTH = struct.Struct(LENGTH_FORMAT)

# ----------------------------------------------------------------------------
# Length prefix
# ----------------------------------------------------------------------------


def encode_length(length: int) -> bytes:
    """Encode a payload length as the 4-byte frame prefix.

    Raises:
        EncodingError: If length does not fit in an unsigned 32-bit integer
    """
    if not 0 <= length <= MAX_PAYLOAD_LENGTH:
        raise EncodingError(f"Payload length {length} outside 0..{MAX_PAYLOAD_LENGTH}")
    return _LENGTH.pack(length)


def parse_length(prefix: bytes | bytearray | memoryview) -> int:
    """Interpret a 4-byte frame prefix as a payload length.

    Raises:
        DecodingError: If prefix is not exactly 4 bytes
    """
    if len(prefix) != LENGTH_PREFIX_SIZE:
        raise DecodingError(f"Length prefix must be {LENGTH_PREFIX_SIZE} bytes, got {len(prefix)}")
    return _LENGTH.unpack(prefix)[0]


def check_frame_limit(max_frame_bytes: int | None) -> int | None:
    """Validate a ``max_frame_bytes`` setting and return it."""
    if max_frame_bytes is not None and max_frame_bytes < 0:
        raise ValueError(f"max_frame_bytes must be non-negative, got {max_frame_bytes}")
    return max_frame_bytes


def pack_frame(payload: bytes) -> bytes:
    """Build a complete frame (prefix + payload) as one bytes object."""
    return encode_length(len(payload)) + payload


# ----------------------------------------------------------------------------
# Blocking stream primitives
# ----------------------------------------------------------------------------


def write_all(stream: Stream, data: bytes) -> None:
    """Write every byte of data to stream.

    Raises:
        ShortWriteError: If the stream accepts no bytes
        OSError: If the stream fails
    """
    if hasattr(stream, "sendall"):
        stream.sendall(data)
        return

    view = memoryview(data)
    written = 0
    while written < len(view):
        n = stream.write(view[written:])
        if not n:
            raise ShortWriteError(len(view), written)
        written += n


def recv_exact(stream: Stream, n: int) -> bytes:
    """Receive exactly n bytes from stream.

    Args:
        stream: Socket or binary file to receive from
        n: Number of bytes to receive

    Returns:
        Received bytes

    Raises:
        IncompleteFrameError: If the stream ends before n bytes arrive
    """
    read = stream.recv if hasattr(stream, "recv") else stream.read
    buf = bytearray()
    while len(buf) < n:
        chunk = read(min(n - len(buf), READ_CHUNK_SIZE))
        if not chunk:
            raise IncompleteFrameError(n, bytes(buf))
        buf.extend(chunk)
    return bytes(buf)


# ----------------------------------------------------------------------------
# Frame read/write
# ----------------------------------------------------------------------------


def write_frame(payload: bytes, stream: Stream) -> None:
    """Write one frame to a blocking stream.

    Args:
        payload: Encoded payload bytes
        stream: Socket or binary file to write to

    Raises:
        EncodingError: If payload is longer than the prefix can express
        ShortWriteError: If the stream stops accepting bytes
    """
    prefix = encode_length(len(payload))
    write_all(stream, prefix)
    write_all(stream, payload)
    flush = getattr(stream, "flush", None)
    if flush is not None:
        flush()
    logger.debug("Wrote frame with %d byte payload", len(payload))


def read_frame(stream: Stream, max_frame_bytes: int | None = None) -> bytes:
    """Read one frame from a blocking stream.

    Args:
        stream: Socket or binary file positioned at a frame boundary
        max_frame_bytes: Reject frames advertising more payload than this

    Returns:
        Payload bytes

    Raises:
        IncompleteFrameError: If the stream ends mid-frame
        FrameTooLargeError: If the advertised length exceeds max_frame_bytes
        ValueError: If max_frame_bytes is negative
    """
    check_frame_limit(max_frame_bytes)
    try:
        prefix = recv_exact(stream, LENGTH_PREFIX_SIZE)
    except IncompleteFrameError as exc:
        if exc.partial:
            raise
        raise IncompleteFrameError(LENGTH_PREFIX_SIZE, b"", at_boundary=True) from None

    length = parse_length(prefix)
    if max_frame_bytes is not None and length > max_frame_bytes:
        raise FrameTooLargeError(length, max_frame_bytes)

    payload = recv_exact(stream, length)
    logger.debug("Read frame with %d byte payload", length)
    return payload
