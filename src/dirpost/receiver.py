from __future__ import annotations

import asyncio
import enum
import logging
import os
from dataclasses import dataclass

import aiofiles
import aiofiles.os

from .codec import read_chunk, read_string, read_u64
from .constants import BUFFER_SIZE
from .paths import denormalize, destination
from .stats import TransferStats

log = logging.getLogger(__name__)


class ReceiveState(enum.Enum):
    AWAIT_NAME = "await_name"
    CREATE_PATH = "create_path"
    STREAM_CONTENT = "stream_content"
    DONE = "done"


@dataclass(slots=True)
class DirectoryReceiver:
    """Rebuild a directory tree from a frame stream.

    Files are written as they arrive. A failure leaves whatever was already
    written on disk.
    """

    root: str
    reader: asyncio.StreamReader
    state: ReceiveState = ReceiveState.AWAIT_NAME

    async def run(self) -> TransferStats:
        stats = TransferStats()
        path = ""

        while self.state is not ReceiveState.DONE:
            if self.state is ReceiveState.AWAIT_NAME:
                wire_name = await read_string(self.reader)
                if not wire_name:
                    self.state = ReceiveState.DONE
                    continue
                path = destination(self.root, denormalize(wire_name))
                self.state = ReceiveState.CREATE_PATH

            elif self.state is ReceiveState.CREATE_PATH:
                parent = os.path.dirname(path)
                if not await aiofiles.os.path.isdir(parent):
                    await aiofiles.os.makedirs(parent, exist_ok=True)
                self.state = ReceiveState.STREAM_CONTENT

            elif self.state is ReceiveState.STREAM_CONTENT:
                size = await read_u64(self.reader)
                log.info("writing: %s", path)
                await self.save_content(path, size)
                stats.add_file(size)
                self.state = ReceiveState.AWAIT_NAME

        stats.finish()
        log.info("receiving done; %s", stats.summary())
        return stats

    async def save_content(self, path: str, size: int) -> None:
        async with aiofiles.open(path, "wb") as f:
            remaining = size
            while remaining > 0:
                chunk = await read_chunk(self.reader, min(BUFFER_SIZE, remaining))
                await f.write(chunk)
                remaining -= len(chunk)
