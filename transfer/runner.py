"""Transfer runner: streams a firmware file to a target over one TCP connection."""

import socket
import time
from os import PathLike
from typing import Callable, Optional, Union

from common.constants import CHUNK_SIZE_BYTES, READ_ERRORS_STRICT
from common.exceptions import ConnectionError, FileOpenError, ReadError, SendError
from common.logging_config import get_logger
from common.types import TransferReport, TransferTarget
from transfer.settings import TransferSettings

logger = get_logger(__name__)

FilePath = Union[str, PathLike]


class TransferRunner:
    """
    Streams one file to one target as a raw byte stream.

    The connection is opened first, then the source file. Both are held in
    nested ``with`` blocks, so each is closed exactly once whichever step
    fails. No framing is added: the peer receives the file bytes in order
    and infers completion from the connection closing.
    """

    def __init__(
        self,
        settings: TransferSettings,
        connection_factory: Optional[Callable] = None,
        opener: Optional[Callable] = None,
        on_chunk: Optional[Callable[[int], None]] = None,
    ):
        """
        Initialize the runner.

        Args:
            settings: Validated transfer settings
            connection_factory: Called as factory((host, port), timeout); defaults to socket.create_connection
            opener: Called as opener(path, 'rb'); defaults to the builtin open
            on_chunk: Called with the running byte total after every chunk written
        """
        self.settings = settings
        self.connection_factory = connection_factory or socket.create_connection
        self.opener = opener or open
        self.on_chunk = on_chunk

    def run(self, file_path: FilePath) -> TransferReport:
        """
        Send the file and return a report.

        Raises:
            ConnectionError: Target unreachable; the file is never opened
            FileOpenError: File missing or unreadable; the connection is closed
            ReadError: Read failed before end of stream (strict mode only)
            SendError: Writing a chunk failed
        """
        target = self.settings.target
        started = time.monotonic()

        with self._connect(target) as connection:
            with self._open_source(file_path) as source:
                bytes_sent, chunks_sent, read_error = self._stream(source, connection)

        elapsed = time.monotonic() - started
        logger.info(
            f"Sent {bytes_sent} bytes in {chunks_sent} chunk(s) to {target} "
            f"[file={file_path}, elapsed={elapsed:.3f}s]"
        )
        return TransferReport(
            file_path=str(file_path),
            target=target,
            bytes_sent=bytes_sent,
            chunks_sent=chunks_sent,
            elapsed=elapsed,
            read_error=read_error,
        )

    def _connect(self, target: TransferTarget):
        logger.info(f"Connecting to {target} [timeout={self.settings.timeout}]")
        try:
            return self.connection_factory(target.address, self.settings.timeout)
        except (OSError, UnicodeError) as e:
            logger.debug(f"Connection to {target} failed: {e!r}")
            raise ConnectionError(e) from e

    def _open_source(self, file_path: FilePath):
        try:
            source = self.opener(file_path, 'rb')
        except OSError as e:
            logger.debug(f"Cannot open {file_path}: {e!r}")
            raise FileOpenError(e) from e
        logger.info(f"Opened firmware source {file_path}")
        return source

    def _stream(self, source, connection) -> tuple[int, int, Optional[OSError]]:
        """
        Copy source to connection one chunk at a time.

        Returns:
            Tuple of (bytes_sent, chunks_sent, read_error); read_error is set
            only when a lenient run stopped on a failed read
        """
        buffer = bytearray(self.settings.chunk_size)
        view = memoryview(buffer)
        bytes_sent = 0
        chunks_sent = 0

        while True:
            try:
                count = source.readinto(buffer)
            except OSError as e:
                if self.settings.strict_reads:
                    raise ReadError(e, bytes_sent=bytes_sent) from e
                logger.warning(f"Read failed after {bytes_sent} bytes, treating as end of file: {e}")
                return bytes_sent, chunks_sent, e

            if not count:
                return bytes_sent, chunks_sent, None

            try:
                connection.sendall(view[:count])
            except OSError as e:
                raise SendError(e, bytes_sent=bytes_sent) from e

            bytes_sent += count
            chunks_sent += 1
            logger.debug(f"Chunk {chunks_sent}: {count} bytes (total {bytes_sent})")

            if self.on_chunk is not None:
                self.on_chunk(bytes_sent)


def run(
    file_path: FilePath,
    host: str,
    port: int,
    chunk_size: int = CHUNK_SIZE_BYTES,
    timeout: Optional[float] = None,
    read_errors: str = READ_ERRORS_STRICT,
) -> TransferReport:
    """
    Stream file_path to host:port with default connection and file handling.

    Raises:
        pydantic.ValidationError: If the settings are out of range
        TransferError: See TransferRunner.run
    """
    settings = TransferSettings(
        host=host,
        port=port,
        chunk_size=chunk_size,
        timeout=timeout,
        read_errors=read_errors,
    )
    return TransferRunner(settings).run(file_path)
