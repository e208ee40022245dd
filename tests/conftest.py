from __future__ import annotations

import asyncio
import os

from dirpost.constants import U64


class BufferWriter:
    """In-memory stand-in for a stream writer."""

    def __init__(self) -> None:
        self.data = bytearray()

    def write(self, data: bytes) -> None:
        self.data.extend(data)

    async def drain(self) -> None:
        pass


def feed(data: bytes) -> asyncio.StreamReader:
    # must be called with a running loop
    reader = asyncio.StreamReader()
    reader.feed_data(data)
    reader.feed_eof()
    return reader


def frame(name: str, content: bytes) -> bytes:
    raw = name.encode("utf-8")
    return U64.pack(len(raw)) + raw + U64.pack(len(content)) + content


def read_tree(root) -> dict[str, bytes]:
    tree = {}
    for dirpath, _, filenames in os.walk(root):
        for name in filenames:
            full = os.path.join(dirpath, name)
            rel = os.path.relpath(full, root).replace(os.sep, "/")
            with open(full, "rb") as f:
                tree[rel] = f.read()
    return tree
