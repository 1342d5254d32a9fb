"""
Writer stream operator.
"""

import fcntl
from typing import Optional, Union

from ..domain.exceptions import FileWriterError
from .stream_operator import FileOperatorBase


class FileWriter(FileOperatorBase):
    """Writes to a file opened by File.open_for_write(). Locks are exclusive."""

    LOCK_MODE = fcntl.LOCK_EX
    ERROR_CLASS = FileWriterError

    def flush(self) -> None:
        """Flush buffered data to the OS."""
        fh = self._handle(FileWriterError)
        try:
            fh.flush()
        except OSError as e:
            raise FileWriterError(f"Failed to flush file: {self._file}", file=self._file) from e

    def write(self, data: Union[bytes, str], length: Optional[int] = None) -> int:
        """
        Write data at the current position.

        Args:
            data: Bytes, or text encoded with the file's configured encoding
            length: Write at most this many bytes of ``data``

        Returns:
            Number of bytes written
        """
        fh = self._handle(FileWriterError)
        if length is not None and length <= 0:
            raise ValueError(f"Length parameter must be greater than 0: {length}")

        try:
            if isinstance(data, str):
                data = data.encode(self._file.config.encoding)
            if length is not None:
                data = data[:length]
            written = fh.write(data)
        except (OSError, UnicodeEncodeError, TypeError) as e:
            raise FileWriterError(f"Failed to write file: {self._file}", file=self._file) from e
        return written if written is not None else len(data)
