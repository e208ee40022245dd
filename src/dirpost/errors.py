from __future__ import annotations


class DirPostError(Exception):
    pass


class ConfigurationError(DirPostError):
    """Raised before any network activity when the directory is unusable."""


class ProtocolError(DirPostError, ValueError):
    """Raised when a frame violates the wire format."""
