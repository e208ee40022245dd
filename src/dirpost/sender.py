from __future__ import annotations

import asyncio
import logging
import os
import stat
from dataclasses import dataclass

import aiofiles
import aiofiles.os

from .codec import FrameWriter, write_buffer, write_string, write_u64
from .constants import BUFFER_SIZE, END_OF_TRANSFER
from .paths import normalize, strip_root
from .stats import TransferStats

log = logging.getLogger(__name__)


def wire_safe(relative: str) -> str:
    """Return ``relative`` as valid UTF-8 text, replacing undecodable bytes."""
    try:
        relative.encode("utf-8")
    except UnicodeEncodeError:
        lossy = os.fsencode(relative).decode("utf-8", "replace")
        log.warning("file name is not valid UTF-8, sending as %r", lossy)
        return lossy
    return relative


def list_files(root: str) -> list[tuple[str, str]]:
    """Walk ``root`` and return ``(full_path, relative_name)`` for each regular file.

    Symbolic links and other non-regular entries are skipped, and linked
    directories are not descended into. Blocking; run it off the event loop.
    """
    found: list[tuple[str, str]] = []
    for dirpath, dirnames, filenames in os.walk(root, followlinks=False):
        dirnames.sort()
        for name in sorted(filenames):
            full = os.path.join(dirpath, name)
            try:
                mode = os.lstat(full).st_mode
            except FileNotFoundError:
                continue
            if not stat.S_ISREG(mode):
                continue
            relative = strip_root(root, full)
            if relative:
                found.append((full, wire_safe(relative)))
    return found


@dataclass(slots=True)
class DirectorySender:
    root: str
    writer: FrameWriter

    async def run(self) -> TransferStats:
        stats = TransferStats()
        files = await asyncio.to_thread(list_files, self.root)
        log.debug("found %d files under %s", len(files), self.root)

        for full, relative in files:
            log.info("sending: %s", relative)
            size = await self.send_file(full, relative)
            stats.add_file(size)

        await write_u64(self.writer, END_OF_TRANSFER)
        stats.finish()
        log.info("sending done; %s", stats.summary())
        return stats

    async def send_file(self, full: str, relative: str) -> int:
        async with aiofiles.open(full, "rb") as f:
            size = (await aiofiles.os.stat(full)).st_size
            await write_string(self.writer, normalize(relative))
            await write_u64(self.writer, size)

            # the size announced above governs the loop even if the file changes
            remaining = size
            while remaining > 0:
                chunk = await f.read(min(BUFFER_SIZE, remaining))
                await write_buffer(self.writer, chunk, len(chunk))
                remaining -= len(chunk)
                log.debug("sent %d bytes of %s, %d remaining", len(chunk), relative, remaining)
        return size
