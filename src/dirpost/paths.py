from __future__ import annotations

import os

from .constants import WIRE_SEPARATOR
from .errors import ConfigurationError


def normalize(relative_path: str, sep: str = os.sep) -> str:
    """Replace the local path separator with the wire separator."""
    return relative_path.replace(sep, WIRE_SEPARATOR)


def denormalize(wire_name: str, sep: str = os.sep) -> str:
    """Replace the wire separator with the receiving host's separator."""
    return wire_name.replace(WIRE_SEPARATOR, sep)


def validate_directory(path: str) -> str:
    """Return the canonical absolute form of ``path``, which must be a directory."""
    if not os.path.isdir(path):
        raise ConfigurationError(f"Not a directory: {path}")
    return os.path.realpath(path)


def strip_root(root: str, path: str) -> str:
    # the leading separator stays; it is part of the wire name peers expect
    if not path.startswith(root):
        raise ValueError(f"{path!r} is not under {root!r}")
    return path[len(root):]


def destination(root: str, relative_path: str, sep: str = os.sep) -> str:
    """Join a received relative path under ``root``.

    Names with and without a leading separator land in the same place.
    """
    return os.path.join(root, relative_path.lstrip(sep))
