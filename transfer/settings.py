"""Pydantic model for validated transfer settings."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from common.constants import (
    CHUNK_SIZE_BYTES,
    MAX_CHUNK_SIZE_BYTES,
    MAX_TIMEOUT_SECONDS,
    DEFAULT_TARGET_HOST,
    DEFAULT_TARGET_PORT,
    READ_ERRORS_STRICT,
)
from common.types import TransferTarget


class TransferSettings(BaseModel):
    """Settings for a single firmware transfer."""
    host: str = Field(default=DEFAULT_TARGET_HOST, min_length=1)
    port: int = Field(default=DEFAULT_TARGET_PORT, ge=1, le=65535)
    chunk_size: int = Field(default=CHUNK_SIZE_BYTES, ge=1, le=MAX_CHUNK_SIZE_BYTES)
    timeout: Optional[float] = Field(default=None, gt=0, le=MAX_TIMEOUT_SECONDS, allow_inf_nan=False)
    read_errors: Literal["strict", "lenient"] = READ_ERRORS_STRICT

    @property
    def target(self) -> TransferTarget:
        return TransferTarget(self.host, self.port)

    @property
    def strict_reads(self) -> bool:
        return self.read_errors == READ_ERRORS_STRICT
