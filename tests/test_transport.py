"""Tests for the blocking packetio transport adapter."""

import io
import socket
import threading
from dataclasses import dataclass

import pytest

from packetio import (
    DEFAULT_MAX_FRAME_BYTES,
    LAN_MAX_FRAME_BYTES,
    WAN_MAX_FRAME_BYTES,
    BytesCodec,
    DecodingError,
    EncodingError,
    FrameTooLargeError,
    IncompleteFrameError,
    JSONCodec,
    PacketStream,
    StructCodec,
    pack_frame,
    recv_packet,
    send_packet,
)


@dataclass
class Reading:
    field1: int
    field2: int


def test_record_on_the_wire() -> None:
    """A u8/u16 record travels as a 3-byte payload behind its length."""
    print("Testing record framing...")
    codec = StructCodec(">BH", Reading)
    stream = io.BytesIO()

    send_packet(Reading(field1=1, field2=2), stream, codec)
    assert stream.getvalue() == b"\x00\x00\x00\x03\x01\x00\x02"

    stream.seek(0)
    assert recv_packet(stream, codec) == Reading(field1=1, field2=2)
    print("✓ Record framing test passed")


def test_default_codec_is_json() -> None:
    """Without a codec, values are framed as JSON."""
    stream = io.BytesIO()
    send_packet({"op": "ping", "seq": 7}, stream)
    assert stream.getvalue() == b'\x00\x00\x00\x15{"op":"ping","seq":7}'

    stream.seek(0)
    assert recv_packet(stream) == {"op": "ping", "seq": 7}


def test_encoding_error_writes_nothing() -> None:
    """A value the codec rejects never reaches the stream."""
    stream = io.BytesIO()
    with pytest.raises(EncodingError):
        send_packet({"bad": object()}, stream)
    assert stream.getvalue() == b""


def test_decoding_error_consumes_frame() -> None:
    """A malformed payload fails after its whole frame has been read."""
    stream = io.BytesIO(pack_frame(b"{broken") + pack_frame(b'"next"'))

    with pytest.raises(DecodingError):
        recv_packet(stream)
    assert recv_packet(stream) == "next"


def test_truncated_frame_is_not_decoded() -> None:
    """EOF mid-payload raises IncompleteFrameError, never a partial value."""
    codec = StructCodec(">BH", Reading)
    stream = io.BytesIO(b"\x00\x00\x00\x03\x01")

    with pytest.raises(IncompleteFrameError):
        recv_packet(stream, codec)


def test_packet_stream_limit() -> None:
    """PacketStream enforces its max_frame_bytes on receive."""
    packets = PacketStream(io.BytesIO(pack_frame(b"x" * 64)), BytesCodec(), max_frame_bytes=32)
    with pytest.raises(FrameTooLargeError):
        packets.receive()

    with pytest.raises(ValueError):
        PacketStream(io.BytesIO(), max_frame_bytes=-1)


def test_frame_size_presets() -> None:
    """The WAN, default and LAN presets accept frames up to their own size."""
    assert WAN_MAX_FRAME_BYTES < DEFAULT_MAX_FRAME_BYTES < LAN_MAX_FRAME_BYTES

    frame = pack_frame(b"\x00" * (WAN_MAX_FRAME_BYTES + 1))

    wan = PacketStream(io.BytesIO(frame), BytesCodec(), max_frame_bytes=WAN_MAX_FRAME_BYTES)
    with pytest.raises(FrameTooLargeError) as excinfo:
        wan.receive()
    assert excinfo.value.limit == WAN_MAX_FRAME_BYTES

    default = PacketStream(io.BytesIO(frame), BytesCodec(), max_frame_bytes=DEFAULT_MAX_FRAME_BYTES)
    assert len(default.receive()) == WAN_MAX_FRAME_BYTES + 1


def test_packet_stream_iteration() -> None:
    """Iteration stops when the peer closes between frames."""
    stream = io.BytesIO()
    writer = PacketStream(stream)
    for value in ["a", {"b": 1}, [2, 3], None]:
        writer.send(value)

    stream.seek(0)
    assert list(PacketStream(stream)) == ["a", {"b": 1}, [2, 3], None]


def test_packet_stream_iteration_truncated() -> None:
    """Iteration still raises when the stream ends inside a frame."""
    stream = io.BytesIO(pack_frame(b"1") + b"\x00\x00\x00\x09[1,")
    received = []

    with pytest.raises(IncompleteFrameError):
        for value in PacketStream(stream):
            received.append(value)

    assert received == [1]


def test_socket_exchange() -> None:
    """Two PacketStreams exchange values over a socket pair."""
    print("Testing socket exchange...")
    left, right = socket.socketpair()
    right.settimeout(5.0)

    with PacketStream(left, JSONCodec()) as client, PacketStream(right, JSONCodec()) as server:
        client.send({"method": "add", "params": [1, 2]})
        request = server.receive()
        server.send({"result": sum(request["params"])})
        assert client.receive() == {"result": 3}

    assert left.fileno() == -1
    assert right.fileno() == -1
    print("✓ Socket exchange test passed")


def test_large_payload_across_threads() -> None:
    """Payloads larger than the socket buffer arrive whole and in order."""
    left, right = socket.socketpair()
    right.settimeout(10.0)
    payloads = [bytes([i]) * (300 << 10) for i in range(3)]

    def _send() -> None:
        sender = PacketStream(left, BytesCodec())
        for payload in payloads:
            sender.send(payload)

    thread = threading.Thread(target=_send, daemon=True)
    thread.start()
    try:
        receiver = PacketStream(right, BytesCodec())
        assert [receiver.receive() for _ in payloads] == payloads
    finally:
        thread.join(timeout=10.0)
        left.close()
        right.close()
