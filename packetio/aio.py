"""packetio asyncio transport adapter.

Frames are byte-identical to the blocking adapter in :mod:`packetio.transport`,
so a blocking peer and an asyncio peer can share one connection. Every write
and read below is a suspension point; the length prefix always completes
before the payload starts.

Cancelling a send or receive part way through leaves a partial frame on the
stream. Nothing is rolled back, so the connection should be closed afterwards.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from typing import Any

from .codecs import Codec, JSONCodec
from .constants import LENGTH_PREFIX_SIZE, READ_CHUNK_SIZE
from .errors import FrameTooLargeError, IncompleteFrameError
from .frames import check_frame_limit, encode_length, parse_length

logger = logging.getLogger(__name__)


async def _read_exact(reader: asyncio.StreamReader, n: int) -> bytes:
    """Read exactly n bytes, in chunks, translating EOF into IncompleteFrameError."""
    buf = bytearray()
    while len(buf) < n:
        try:
            chunk = await reader.readexactly(min(n - len(buf), READ_CHUNK_SIZE))
        except asyncio.IncompleteReadError as exc:
            raise IncompleteFrameError(n, bytes(buf) + exc.partial) from exc
        buf.extend(chunk)
    return bytes(buf)


async def write_frame_async(payload: bytes, writer: asyncio.StreamWriter) -> None:
    """Write one frame to an asyncio stream.

    Args:
        payload: Encoded payload bytes
        writer: Stream writer to send on
    """
    writer.write(encode_length(len(payload)))
    await writer.drain()
    writer.write(payload)
    await writer.drain()
    logger.debug("Wrote frame with %d byte payload", len(payload))


async def read_frame_async(reader: asyncio.StreamReader, max_frame_bytes: int | None = None) -> bytes:
    """Read one frame from an asyncio stream.

    Args:
        reader: Stream reader positioned at a frame boundary
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
        prefix = await _read_exact(reader, LENGTH_PREFIX_SIZE)
    except IncompleteFrameError as exc:
        if exc.partial:
            raise
        raise IncompleteFrameError(LENGTH_PREFIX_SIZE, b"", at_boundary=True) from None

    length = parse_length(prefix)
    if max_frame_bytes is not None and length > max_frame_bytes:
        raise FrameTooLargeError(length, max_frame_bytes)

    payload = await _read_exact(reader, length)
    logger.debug("Read frame with %d byte payload", length)
    return payload


async def send_packet_async(value: Any, writer: asyncio.StreamWriter, codec: Codec[Any] | None = None) -> None:
    """Encode value and write it to writer as one frame."""
    codec = codec or JSONCodec()
    await write_frame_async(codec.encode(value), writer)


async def recv_packet_async(
    reader: asyncio.StreamReader, codec: Codec[Any] | None = None, max_frame_bytes: int | None = None
) -> Any:
    """Read one frame from reader and decode its payload."""
    codec = codec or JSONCodec()
    return codec.decode(await read_frame_async(reader, max_frame_bytes))


class AsyncPacketStream:
    """Asyncio packet adapter wrapping a stream reader/writer pair.

    Either side may be ``None`` for a receive-only or send-only adapter.
    """

    def __init__(
        self,
        reader: asyncio.StreamReader | None,
        writer: asyncio.StreamWriter | None,
        codec: Codec[Any] | None = None,
        max_frame_bytes: int | None = None,
    ):
        """Initialize adapter.

        Args:
            reader: Stream reader frames are received from
            writer: Stream writer frames are sent on
            codec: Codec for payloads (JSON if omitted)
            max_frame_bytes: Optional hard limit on received payload size
        """
        self.reader = reader
        self.writer = writer
        self.codec = codec or JSONCodec()
        self.max_frame_bytes = check_frame_limit(max_frame_bytes)

    @classmethod
    async def connect(cls, host: str, port: int, **kwargs: Any) -> "AsyncPacketStream":
        """Open a TCP connection and wrap it."""
        reader, writer = await asyncio.open_connection(host, port)
        return cls(reader, writer, **kwargs)

    async def send(self, value: Any) -> None:
        """Send one value as a frame."""
        if self.writer is None:
            raise RuntimeError("AsyncPacketStream has no writer")
        await send_packet_async(value, self.writer, self.codec)

    async def receive(self) -> Any:
        """Receive one frame and return its decoded value."""
        if self.reader is None:
            raise RuntimeError("AsyncPacketStream has no reader")
        return await recv_packet_async(self.reader, self.codec, self.max_frame_bytes)

    async def __aiter__(self) -> AsyncIterator[Any]:
        """Yield received values until the peer closes on a frame boundary."""
        while True:
            try:
                yield await self.receive()
            except IncompleteFrameError as exc:
                if not exc.at_boundary:
                    raise
                logger.debug("Stream closed on frame boundary")
                return

    async def close(self) -> None:
        """Close the writer and wait for the transport to shut down."""
        if self.writer is None:
            return
        self.writer.close()
        try:
            await self.writer.wait_closed()
        except ConnectionError as exc:
            logger.debug("Connection closed with error: %s", exc)

    async def __aenter__(self) -> "AsyncPacketStream":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
