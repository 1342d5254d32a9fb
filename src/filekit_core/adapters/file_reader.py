"""
Reader stream operator.

Bytes-first: every read returns raw bytes. Callers decode as needed.
"""

import fcntl
from typing import Optional

from ..domain.exceptions import FileReaderError
from .stream_operator import FileOperatorBase


class FileReader(FileOperatorBase):
    """Reads from a file opened by File.open_for_read(). Locks are shared."""

    LOCK_MODE = fcntl.LOCK_SH
    ERROR_CLASS = FileReaderError

    def read(self, length: int) -> bytes:
        """
        Read up to ``length`` bytes.

        Returns:
            The bytes read; empty bytes at end-of-data
        """
        fh = self._handle(FileReaderError)
        if length <= 0:
            raise ValueError(f"Length parameter must be greater than 0: {length}")
        try:
            data = fh.read(length)
        except OSError as e:
            raise FileReaderError(f"Failed to read file: {self._file}", file=self._file) from e
        if len(data) < length:
            self._eof = True
        return data

    def get_char(self) -> Optional[bytes]:
        """Read a single byte, or None at end-of-data."""
        fh = self._handle(FileReaderError)
        try:
            data = fh.read(1)
        except OSError as e:
            raise FileReaderError(f"Failed to read file: {self._file}", file=self._file) from e
        if not data:
            self._eof = True
            return None
        return data

    def get_line(self, max_length: Optional[int] = None) -> Optional[bytes]:
        """
        Read one line including its terminator.

        Args:
            max_length: Stop after this many bytes even without a newline

        Returns:
            The line, or None at end-of-data
        """
        fh = self._handle(FileReaderError)
        if max_length is not None and max_length <= 0:
            raise ValueError(f"Length parameter must be greater than 0: {max_length}")
        try:
            line = fh.readline() if max_length is None else fh.readline(max_length)
        except OSError as e:
            raise FileReaderError(f"Failed to read file: {self._file}", file=self._file) from e
        if not line:
            self._eof = True
            return None
        # A last line without terminator means the read ran into the end
        if not line.endswith(b"\n") and (max_length is None or len(line) < max_length):
            self._eof = True
        return line
