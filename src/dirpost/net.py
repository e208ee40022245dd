from __future__ import annotations

import asyncio
import enum
import logging

from .constants import LISTEN_HOST
from .paths import validate_directory
from .receiver import DirectoryReceiver
from .sender import DirectorySender
from .stats import TransferStats

log = logging.getLogger(__name__)


class Role(enum.Enum):
    LISTEN_SEND = (True, True)
    LISTEN_RECEIVE = (True, False)
    CONNECT_SEND = (False, True)
    CONNECT_RECEIVE = (False, False)

    @classmethod
    def resolve(cls, remote_host: str, reverse: bool) -> "Role":
        """Pick the role from the command-line inputs.

        With no remote host we listen. A listener receives and a connector
        sends unless ``reverse`` flips the direction.
        """
        listening = not remote_host
        sending = listening == reverse
        return cls((listening, sending))

    @property
    def listening(self) -> bool:
        return self.value[0]

    @property
    def sending(self) -> bool:
        return self.value[1]

    @property
    def label(self) -> str:
        side = "server" if self.listening else "client"
        direction = "sending" if self.sending else "receiving"
        return f"{side} {direction}"


async def run_session(
    sending: bool,
    root: str,
    reader: asyncio.StreamReader,
    writer: asyncio.StreamWriter,
) -> TransferStats:
    if sending:
        return await DirectorySender(root, writer).run()
    return await DirectoryReceiver(root, reader).run()


async def _close(writer: asyncio.StreamWriter) -> None:
    writer.close()
    try:
        await writer.wait_closed()
    except OSError as e:
        log.debug("error while closing connection: %s", e)


async def connect(role: Role, directory: str, host: str, port: int) -> TransferStats:
    """Run one transfer over a single outbound connection."""
    if role.listening:
        raise ValueError(f"{role.name} is not a connecting role")
    root = validate_directory(directory)
    reader, writer = await asyncio.open_connection(host, port)
    log.info("connected to %s:%d", host, port)
    log.info("%s directory: %s", "sending" if role.sending else "receiving", root)
    try:
        return await run_session(role.sending, root, reader, writer)
    finally:
        await _close(writer)


async def start_listener(
    role: Role,
    directory: str,
    port: int,
    host: str = LISTEN_HOST,
) -> asyncio.Server:
    """Bind and start accepting; each connection gets its own session task.

    A failing session is logged and its connection closed. Other sessions
    and the listener keep running.
    """
    if not role.listening:
        raise ValueError(f"{role.name} is not a listening role")
    root = validate_directory(directory)

    async def handle_connection(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        peer = writer.get_extra_info("peername")
        log.info("new connection from: %s", peer)
        try:
            stats = await run_session(role.sending, root, reader, writer)
        except Exception:
            log.exception("session with %s failed", peer)
        else:
            log.info("session with %s done; %s", peer, stats.summary())
        finally:
            await _close(writer)

    server = await asyncio.start_server(handle_connection, host, port)
    bound = server.sockets[0].getsockname()
    log.info("start listening on: %s", bound[1])
    log.info("%s directory: %s", "sending" if role.sending else "receiving", root)
    return server


async def listen(role: Role, directory: str, port: int, host: str = LISTEN_HOST) -> None:
    server = await start_listener(role, directory, port, host)
    async with server:
        await server.serve_forever()
