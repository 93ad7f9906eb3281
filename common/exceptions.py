"""Custom exception classes for firmware transfers."""

from typing import Optional


class TransferError(Exception):
    """
    Base exception class for all transfer errors.

    Keeps the underlying OS error as ``cause`` and the number of bytes
    delivered before the failure.
    """

    description = "Transfer failed"

    def __init__(self, cause: Optional[BaseException] = None, bytes_sent: int = 0):
        self.cause = cause
        self.bytes_sent = bytes_sent
        super().__init__(f"{self.description} - {cause}")


class ConnectionError(TransferError):
    """
    Raised when the target cannot be reached or refuses the connection.
    """
    description = "Connection failed"


class FileOpenError(TransferError):
    """
    Raised when the firmware file is missing or unreadable.
    """
    description = "File opening failed"


class ReadError(TransferError):
    """
    Raised when reading the firmware file fails before end of stream.
    """
    description = "Failed to read firmware"


class SendError(TransferError):
    """
    Raised when writing a chunk to the connection fails.
    """
    description = "Failed to send data"
