"""Utility functions for CLI output."""

import os
import sys
from typing import Optional, TextIO

from cli.constants import GREEN, RESET


class ProgressReporter:
    """Chunk callback that displays send progress on stderr."""

    def __init__(self, file_path: str, stream: Optional[TextIO] = None):
        """
        Initialize the progress reporter.

        Args:
            file_path: Path of the file being sent; its size is read on the first chunk
            stream: Output stream (defaults to stderr)
        """
        self.file_path = file_path
        self.filename = os.path.basename(file_path)
        self.stream = stream if stream is not None else sys.stderr
        self.file_size: Optional[int] = None
        self._sent = 0

    def __call__(self, bytes_sent: int) -> None:
        """
        Record the running byte total and redraw the progress line.

        Args:
            bytes_sent: Total bytes written to the connection so far
        """
        if self.file_size is None:
            try:
                self.file_size = os.path.getsize(self.file_path)
            except OSError:
                self.file_size = 0
        self._sent = bytes_sent
        self._display_progress()

    def _display_progress(self) -> None:
        """Display current send progress."""
        sent_str = format_file_size(self._sent)
        if self.file_size:
            progress = (self._sent / self.file_size) * 100
            total_str = format_file_size(self.file_size)
            self.stream.write(
                f"\rSending {self.filename}: {sent_str} / {total_str} ({GREEN}{progress:.1f}%{RESET})"
            )
        else:
            self.stream.write(f"\rSending {self.filename}: {sent_str}")
        self.stream.flush()

    def finish(self) -> None:
        """Finalize progress display with newline if anything was drawn."""
        if self._sent:
            self.stream.write('\n')
            self.stream.flush()


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in bytes to human-readable format with appropriate unit.

    Uses binary units (1024-based) and automatically selects the most
    appropriate unit (B, KiB, MiB, GiB, TiB).

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string with size and unit (e.g., "1.50 MiB", "512 B")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"

    units = ['KiB', 'MiB', 'GiB', 'TiB']
    size = size_bytes / 1024.0

    for unit in units:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0

    return f"{size:.2f} PiB"
