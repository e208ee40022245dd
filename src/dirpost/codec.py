"""Framing primitives for the directory stream.

Three frame kinds travel on the wire:

- u64: 8 bytes, big-endian unsigned
- string: u64 length followed by that many UTF-8 bytes (length < 4096,
  a zero length is the end-of-transfer marker)
- content: a raw byte run with no inner framing, moved in chunks of at most
  ``BUFFER_SIZE`` bytes

Readers are ``asyncio.StreamReader`` instances. Writers are anything with
``write(bytes)`` and an awaitable ``drain()``, normally ``asyncio.StreamWriter``.
"""
from __future__ import annotations

import asyncio
from typing import Protocol

from .constants import MAX_NAME_LEN, U64
from .errors import ProtocolError


class FrameWriter(Protocol):
    def write(self, data: bytes) -> None: ...

    async def drain(self) -> None: ...


async def write_u64(writer: FrameWriter, value: int) -> None:
    writer.write(U64.pack(value))
    await writer.drain()


async def read_u64(reader: asyncio.StreamReader) -> int:
    raw = await reader.readexactly(U64.size)
    (value,) = U64.unpack(raw)
    return value


async def write_string(writer: FrameWriter, s: str) -> None:
    try:
        data = s.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ProtocolError(f"string is not valid UTF-8: {e}") from e
    if not data:
        raise ProtocolError("writing empty string is not allowed")
    if len(data) >= MAX_NAME_LEN:
        raise ProtocolError(f"string should not be longer than {MAX_NAME_LEN} ({len(data)})")
    writer.write(U64.pack(len(data)) + data)
    await writer.drain()


async def read_string(reader: asyncio.StreamReader) -> str:
    """Read a string frame; an empty result means end of transfer."""
    length = await read_u64(reader)
    if length == 0:
        return ""
    # checked before touching the payload so a bad prefix cannot force a huge read
    if length >= MAX_NAME_LEN:
        raise ProtocolError(f"string should not be longer than {MAX_NAME_LEN} ({length})")
    raw = await read_chunk(reader, length)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ProtocolError(f"string is not valid UTF-8: {e}") from e


async def read_chunk(reader: asyncio.StreamReader, n: int) -> bytes:
    if n == 0:
        raise ProtocolError("reading zero buffer is not allowed")
    return await reader.readexactly(n)


async def write_buffer(writer: FrameWriter, buffer: bytes | bytearray | memoryview, n: int) -> None:
    if n == 0:
        raise ProtocolError("writing zero buffer is not allowed")
    writer.write(bytes(buffer[:n]))
    await writer.drain()
