"""Directory post (dirpost)

Copy a directory tree from one host to another over a single TCP stream.

Either end may listen or connect, and either end may send or receive:
- no remote host: listen (receive by default, send with ``--reverse``)
- remote host given: connect (send by default, receive with ``--reverse``)

Framing lives in ``codec``, the sending and receiving engines in ``sender``
and ``receiver``, and socket setup plus role selection in ``net``.
"""

from .net import Role

__all__ = ["Role"]
