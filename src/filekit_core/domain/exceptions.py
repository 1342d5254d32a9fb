"""
Filesystem Exceptions

One exception kind per failure scenario. Each kind binds the involved
path(s) into a human-readable message at construction time; the causing
OS error is chained with ``raise ... from err``.

Hierarchy:
    FileSystemError (Base)
    ├── FileInputError
    ├── FileOutputError
    ├── FileRenameError
    ├── FileCopyError
    ├── MakeDirectoryError
    ├── MakeFileError
    ├── NotDirectoryError
    ├── NotFileError
    ├── FileIsNotReadableError
    ├── FileOpenError
    └── FileOperatorError
        ├── FileReaderError
        └── FileWriterError
"""

from typing import Any, Dict, Optional


class FileSystemError(Exception):
    """
    Base exception for all filekit errors.

    Attributes:
        message: Human-readable error description
        file: Path entity associated with the error (if applicable)
        context: Bound values, for programmatic handling
    """

    def __init__(
        self,
        message: str,
        file: Any = None,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.file = file
        self.context = context or {}
        if file is not None:
            self.context["path"] = str(file)

    def __str__(self) -> str:
        return self.message


class FileInputError(FileSystemError):
    """Reading a file failed."""

    def __init__(self, file: Any, message: str) -> None:
        super().__init__(f"{message} at file: {file}", file=file)


class FileOutputError(FileSystemError):
    """Writing a file failed, or the payload could not be turned into text."""

    def __init__(self, file: Any) -> None:
        super().__init__(f"Output to file[{file}] failed", file=file)


class FileRenameError(FileSystemError):
    """
    Renaming a file or directory failed.

    Example:
        >>> raise FileRenameError(File("a.txt"), File("b/a.txt"))
    """

    def __init__(self, old_file: Any, new_file: Any) -> None:
        super().__init__(
            f"File renaming failed: {old_file} to {new_file}",
            file=old_file,
            context={"to_path": str(new_file)},
        )
        self.to_file = new_file


class FileCopyError(FileSystemError):
    """Copying or moving a file failed."""

    def __init__(self, from_file: Any, to_file: Any) -> None:
        super().__init__(
            f"Copying file failed: {from_file} to {to_file}",
            file=from_file,
            context={"to_path": str(to_file)},
        )
        self.to_file = to_file


class MakeDirectoryError(FileSystemError):
    """Creating a directory failed, or the path exists as something else."""

    def __init__(self, file: Any) -> None:
        super().__init__(f"Making directory failed: {file}", file=file)


class MakeFileError(FileSystemError):
    """Creating a file failed."""

    def __init__(self, file: Any) -> None:
        super().__init__(f"Making file failed: {file}", file=file)


class NotDirectoryError(FileSystemError):
    """A directory was required."""

    def __init__(self, file: Any) -> None:
        super().__init__(f"Not directory: {file}", file=file)


class NotFileError(FileSystemError):
    """A regular file was required."""

    def __init__(self, file: Any) -> None:
        super().__init__(f"Not file: {file}", file=file)


class FileIsNotReadableError(FileSystemError):
    """The file or directory cannot be read by this process."""

    def __init__(self, file: Any) -> None:
        super().__init__(f"Specified file is not readable: {file}", file=file)


class FileOpenError(FileSystemError):
    """Opening a handle on the file failed."""

    def __init__(self, file: Any) -> None:
        super().__init__(f"File[{file}] could not be opened", file=file)


class FileOperatorError(FileSystemError):
    """
    Misuse or failure of an open stream operator.

    Raised for operations on a closed operator, double locking and
    failed seek/tell/unlock calls.
    """

    def __init__(self, message: str, file: Any = None) -> None:
        super().__init__(message, file=file)


class FileReaderError(FileOperatorError):
    """A reader failed to lock or read."""


class FileWriterError(FileOperatorError):
    """A writer failed to lock, write or flush."""
