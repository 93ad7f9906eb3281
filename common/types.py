"""Shared data type definitions (TransferTarget, TransferReport)."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class TransferTarget:
    """
    Network endpoint the firmware is streamed to.
    """
    host: str
    port: int

    @property
    def address(self) -> Tuple[str, int]:
        return (self.host, self.port)

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class TransferReport:
    """
    Outcome of a completed transfer.

    read_error is only set when a lenient run stopped on a read failure
    instead of a clean end of stream.
    """
    file_path: str
    target: TransferTarget
    bytes_sent: int
    chunks_sent: int
    elapsed: float
    read_error: Optional[OSError] = None

    @property
    def complete(self) -> bool:
        return self.read_error is None
