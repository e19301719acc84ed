"""packetio blocking transport adapter."""

import logging
from collections.abc import Iterator
from typing import Any

from .codecs import Codec, JSONCodec
from .errors import IncompleteFrameError
from .frames import Stream, check_frame_limit, read_frame, write_frame

logger = logging.getLogger(__name__)


def send_packet(value: Any, stream: Stream, codec: Codec[Any] | None = None) -> None:
    """Encode value and write it to stream as one frame.

    Args:
        value: Value to send
        stream: Socket or binary file to write to
        codec: Codec used to encode value (JSON if omitted)
    """
    codec = codec or JSONCodec()
    write_frame(codec.encode(value), stream)


def recv_packet(stream: Stream, codec: Codec[Any] | None = None, max_frame_bytes: int | None = None) -> Any:
    """Read one frame from stream and decode its payload.

    Args:
        stream: Socket or binary file positioned at a frame boundary
        codec: Codec used to decode the payload (JSON if omitted)
        max_frame_bytes: Reject frames advertising more payload than this

    Returns:
        Decoded value
    """
    codec = codec or JSONCodec()
    return codec.decode(read_frame(stream, max_frame_bytes))


class PacketStream:
    """Blocking packet adapter wrapping a socket or binary file.

    Each ``send``/``receive`` call moves exactly one frame. The adapter keeps
    no state besides its configuration, so callers that share one stream
    between threads must serialize sends and receives themselves.
    """

    def __init__(self, stream: Stream, codec: Codec[Any] | None = None, max_frame_bytes: int | None = None):
        """Initialize adapter.

        Args:
            stream: Socket or binary file carrying the frames
            codec: Codec for payloads (JSON if omitted)
            max_frame_bytes: Optional hard limit on received payload size
        """
        self.stream = stream
        self.codec = codec or JSONCodec()
        self.max_frame_bytes = check_frame_limit(max_frame_bytes)

    def send(self, value: Any) -> None:
        """Send one value as a frame."""
        send_packet(value, self.stream, self.codec)

    def receive(self) -> Any:
        """Receive one frame and return its decoded value."""
        return recv_packet(self.stream, self.codec, self.max_frame_bytes)

    def __iter__(self) -> Iterator[Any]:
        """Yield received values until the peer closes on a frame boundary."""
        while True:
            try:
                yield self.receive()
            except IncompleteFrameError as exc:
                if not exc.at_boundary:
                    raise
                logger.debug("Stream closed on frame boundary")
                return

    def close(self) -> None:
        """Close the wrapped stream."""
        self.stream.close()

    def __enter__(self) -> "PacketStream":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
