#!/usr/bin/env python3
"""packetio demo: blocking and asyncio peers sharing one connection."""

import asyncio
import logging
import socket
from dataclasses import dataclass

from packetio import WAN_MAX_FRAME_BYTES, AsyncPacketStream, JSONCodec, PacketStream, StructCodec, parsing


@dataclass
class Reading:
    sensor: int
    value: int


def demo_blocking() -> None:
    """Exchange JSON packets over a socket pair."""
    print("Blocking exchange")
    print("-" * 40)
    left, right = socket.socketpair()
    client = PacketStream(left, JSONCodec())
    server = PacketStream(right, JSONCodec(), max_frame_bytes=WAN_MAX_FRAME_BYTES)
    with client, server:
        client.send({"method": "greet", "name": "packetio"})
        request = server.receive()
        print(f"Server received: {request}")
        server.send({"greeting": f"Hello, {request['name']}!"})
        print(f"Client received: {client.receive()}")


async def demo_async() -> None:
    """Send a binary record from asyncio and read it with blocking I/O."""
    print("\nasyncio -> blocking exchange")
    print("-" * 40)
    codec = StructCodec(">BH", Reading)
    async_sock, sync_sock = socket.socketpair()

    reader, writer = await asyncio.open_connection(sock=async_sock)
    async with AsyncPacketStream(reader, writer, codec) as packets:
        await packets.send(Reading(sensor=1, value=2))
        raw = sync_sock.recv(7, socket.MSG_WAITALL)
        print(f"Wire bytes: {raw.hex(' ')}")
        print(f"Decoded: {parsing.decode_payload(raw[4:], codec)}")

    sync_sock.close()


def main() -> None:
    """Main entry point for the demo."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    demo_blocking()
    asyncio.run(demo_async())
    print("\nDemo completed!")


if __name__ == "__main__":
    main()
