"""
Stream operator base.

Wraps an open binary handle owned exclusively by the operator and
provides close/lock/unlock/seek/tell. Closed is a terminal state.

Locks are fcntl advisory locks: they coordinate with other processes
holding a handle on the same file, not with other operators in this
library.
"""

import fcntl
import os
from typing import TYPE_CHECKING, BinaryIO, Optional, Type

import structlog

from ..domain.exceptions import FileOperatorError

if TYPE_CHECKING:
    from .local_file import File

logger = structlog.get_logger()


class FileOperatorBase:
    """
    Base class for FileReader and FileWriter.

    Use as a context manager to guarantee the handle is released:

        with file.open_for_read() as reader:
            data = reader.read(1024)
    """

    # Subclasses choose the flock mode and the error kind they raise
    LOCK_MODE: int = fcntl.LOCK_SH
    ERROR_CLASS: Type[FileOperatorError] = FileOperatorError

    def __init__(self, fh: BinaryIO, file: "File"):
        """
        Initialize the operator.

        Args:
            fh: Open binary handle; the operator takes ownership
            file: The file the handle was opened on
        """
        self._fh: Optional[BinaryIO] = fh
        self._file = file
        self._locked = False
        self._eof = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.is_closed() else "open"
        return f"{type(self).__name__}({self._file.get_path()!r}, {state})"

    def get_file(self) -> "File":
        """File this operator was opened on."""
        return self._file

    def is_closed(self) -> bool:
        return self._fh is None

    def is_locked(self) -> bool:
        return self._locked

    def is_eof(self) -> bool:
        """True if closed, or if a read has reached end-of-data."""
        return self.is_closed() or self._eof

    def _handle(self, error_class: Optional[Type[FileOperatorError]] = None) -> BinaryIO:
        """Return the open handle, raising if the operator is closed."""
        if self._fh is None:
            error_class = error_class or FileOperatorError
            raise error_class(f"File operator is already closed: {self._file}", file=self._file)
        return self._fh

    def lock(self, blocking: bool = False) -> None:
        """
        Acquire an advisory lock on the file.

        Args:
            blocking: Wait for a contended lock instead of failing at once
        """
        fh = self._handle(self.ERROR_CLASS)
        if self._locked:
            raise FileOperatorError(f"File is already locked: {self._file}", file=self._file)

        operation = self.LOCK_MODE if blocking else self.LOCK_MODE | fcntl.LOCK_NB
        try:
            fcntl.flock(fh.fileno(), operation)
        except OSError as e:
            raise self.ERROR_CLASS(f"Failed to lock file: {self._file}", file=self._file) from e

        self._locked = True
        logger.debug("file.lock.acquired", path=str(self._file), blocking=blocking)

    def unlock(self) -> None:
        """Release the lock. No-op when not locked."""
        if not self._locked:
            return
        fh = self._handle()
        try:
            fcntl.flock(fh.fileno(), fcntl.LOCK_UN)
        except OSError as e:
            raise FileOperatorError(f"Failed to unlock file: {self._file}", file=self._file) from e
        self._locked = False
        logger.debug("file.lock.released", path=str(self._file))

    def close(self) -> None:
        """
        Close the handle. Closing also drops any lock held.

        The operator is closed afterwards even if flushing buffered data
        fails; that failure is raised as the reader/writer error.
        """
        if self._fh is None:
            return
        fh = self._fh
        self._fh = None
        self._locked = False
        try:
            fh.close()
        except OSError as e:
            raise self.ERROR_CLASS(f"Failed to close file: {self._file}", file=self._file) from e

    def tell(self) -> int:
        """Current position in bytes."""
        fh = self._handle()
        try:
            return fh.tell()
        except OSError as e:
            raise FileOperatorError(f"Failed to tell file: {self._file}", file=self._file) from e

    def rewind(self) -> None:
        """Move to the beginning of the file."""
        self._seek(0, os.SEEK_SET, "Failed to rewind file")

    def seek_to_start(self, offset: int = 0) -> None:
        """Move to ``offset`` bytes from the start."""
        self._seek(offset, os.SEEK_SET, "Failed to seek file to start")

    def seek(self, offset: int) -> None:
        """Move ``offset`` bytes relative to the current position."""
        self._seek(offset, os.SEEK_CUR, "Failed to seek file from current")

    def seek_to_end(self, offset: int = 0) -> None:
        """Move to ``offset`` bytes relative to the end."""
        self._seek(offset, os.SEEK_END, "Failed to seek file to end")

    def _seek(self, offset: int, whence: int, failure: str) -> None:
        fh = self._handle()
        try:
            fh.seek(offset, whence)
        except (OSError, ValueError) as e:
            raise FileOperatorError(f"{failure}: {self._file}", file=self._file) from e
        self._eof = False
