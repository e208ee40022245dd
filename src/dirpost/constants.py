from __future__ import annotations

import struct

U64 = struct.Struct("!Q")  # big-endian unsigned 64-bit

BUFFER_SIZE = 1024
MAX_NAME_LEN = 4096

WIRE_SEPARATOR = "\0"
END_OF_TRANSFER = 0

DEFAULT_PORT = 5555
DEFAULT_DIRECTORY = "."
LISTEN_HOST = "0.0.0.0"
