"""Exceptions raised by packetio.

Every error derives from :class:`PacketIOError` and from the builtin exception
kind callers would catch without knowing about this package (``ValueError`` for
payload problems, ``OSError``/``ConnectionError`` for stream problems).
"""


class PacketIOError(Exception):
    """Base class for all packetio errors."""


class EncodingError(PacketIOError, ValueError):
    """A value could not be turned into payload bytes."""


class DecodingError(PacketIOError, ValueError):
    """Payload bytes (or a length prefix) could not be decoded."""


class FrameTooLargeError(PacketIOError, ValueError):
    """The peer advertised a payload larger than the configured limit."""

    def __init__(self, length: int, limit: int):
        super().__init__(f"Frame length {length} exceeds limit of {limit} bytes")
        self.length = length
        self.limit = limit


class IncompleteFrameError(PacketIOError, ConnectionError):
    """The stream ended before a full length prefix or payload was read.

    ``at_boundary`` is true when the stream ended cleanly between frames,
    i.e. before any byte of the next length prefix arrived.
    """

    def __init__(self, expected: int, partial: bytes, at_boundary: bool = False):
        super().__init__(f"Unexpected EOF from peer: expected {expected} bytes, got {len(partial)}")
        self.expected = expected
        self.partial = partial
        self.at_boundary = at_boundary


class ShortWriteError(PacketIOError, OSError):
    """The stream stopped accepting bytes before the whole frame was written."""

    def __init__(self, expected: int, written: int):
        super().__init__(f"Short write: {written} of {expected} bytes accepted")
        self.expected = expected
        self.written = written
