from __future__ import annotations

import argparse
import asyncio
import logging

from .config import RunConfig
from .constants import DEFAULT_DIRECTORY, DEFAULT_PORT
from .net import connect, listen

USAGE_MODES = """\
server mode (receiving): -d DIR -p PORT
client mode (  sending): -d DIR -p PORT -i HOST
server mode (  sending): -d DIR -p PORT -r
client mode (receiving): -d DIR -p PORT -r -i HOST
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirpost",
        description="Post directory content to another host over TCP.",
        epilog=USAGE_MODES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-d", "--directory", default=DEFAULT_DIRECTORY, help="directory to send from or receive to")
    parser.add_argument("-i", "--ip-host", default="", help="ip/host name to connect to; listen when empty")
    parser.add_argument("-p", "--port", default=DEFAULT_PORT, type=int, help="port to listen on or connect to")
    parser.add_argument("-r", "--reverse", action="store_true", help="reverse the transfer direction")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    return parser


async def run(config: RunConfig) -> None:
    role = config.role
    logging.info("mode: %s", role.label)
    logging.info("port: %d", config.port)
    logging.info(" dir: %s", config.directory)

    if role.listening:
        await listen(role, config.directory, config.port)
    else:
        stats = await connect(role, config.directory, config.ip_host, config.port)
        logging.info("done; %s", stats.summary())


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = RunConfig.from_args(args)
    logging.basicConfig(level=getattr(logging, config.log_level), format="%(asctime)s [%(levelname)s] %(message)s")

    try:
        asyncio.run(run(config))
    except KeyboardInterrupt:
        logging.info("interrupted; shutting down")
    except Exception as e:
        print(f"ERROR: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
