from __future__ import annotations

import argparse
from dataclasses import dataclass

from .constants import DEFAULT_DIRECTORY, DEFAULT_PORT
from .net import Role


@dataclass(frozen=True, slots=True)
class RunConfig:
    directory: str = DEFAULT_DIRECTORY
    ip_host: str = ""
    port: int = DEFAULT_PORT
    reverse: bool = False
    log_level: str = "INFO"

    @property
    def role(self) -> Role:
        return Role.resolve(self.ip_host, self.reverse)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RunConfig":
        return cls(
            directory=args.directory,
            ip_host=args.ip_host,
            port=args.port,
            reverse=args.reverse,
            log_level=args.log_level,
        )
