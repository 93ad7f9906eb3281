"""Command request data types for the CLI."""

from dataclasses import dataclass
from typing import Literal, Optional


@dataclass(frozen=True)
class SendCommand:
    """Send one firmware file to the configured target."""

    file_path: str
    host: Optional[str] = None
    port: Optional[int] = None
    chunk_size: Optional[int] = None
    timeout: Optional[float] = None
    lenient_reads: bool = False
    strict_reads: bool = False
    config_path: Optional[str] = None
    progress: bool = False
    debug: bool = False
    command: Literal["send"] = "send"


@dataclass(frozen=True)
class HelpCommand:
    """Show help text."""

    command: Literal["help"] = "help"


CommandRequest = SendCommand | HelpCommand
