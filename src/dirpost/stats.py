from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass(slots=True)
class TransferStats:
    files: int = 0
    bytes_transferred: int = 0
    start_ts: float = field(default_factory=time.monotonic)
    end_ts: float | None = None

    def add_file(self, size: int) -> None:
        self.files += 1
        self.bytes_transferred += size

    def finish(self) -> "TransferStats":
        self.end_ts = time.monotonic()
        return self

    @property
    def duration_s(self) -> float:
        if self.end_ts is None:
            return 0.0
        return max(0.0, self.end_ts - self.start_ts)

    @property
    def throughput_mib_s(self) -> float:
        if self.duration_s <= 0:
            return 0.0
        return self.bytes_transferred / self.duration_s / (1024 * 1024)

    def summary(self) -> str:
        return (
            f"{self.files} files, {self.bytes_transferred} bytes "
            f"in {self.duration_s:.2f}s ({self.throughput_mib_s:.2f} MiB/s)"
        )
