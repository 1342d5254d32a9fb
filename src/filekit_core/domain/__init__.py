"""
Domain models for filekit.

Contains configuration, enums and the exception taxonomy.
"""

from .models import FSConfig, DEFAULT_CONFIG
from .enums import (
    FileType,
    WriteMode,
    ReadFlag,
    ImageType,
)
from .exceptions import (
    FileSystemError,
    FileInputError,
    FileOutputError,
    FileRenameError,
    FileCopyError,
    MakeDirectoryError,
    MakeFileError,
    NotDirectoryError,
    NotFileError,
    FileIsNotReadableError,
    FileOpenError,
    FileOperatorError,
    FileReaderError,
    FileWriterError,
)

__all__ = [
    # Models
    "FSConfig",
    "DEFAULT_CONFIG",
    # Enums
    "FileType",
    "WriteMode",
    "ReadFlag",
    "ImageType",
    # Exceptions
    "FileSystemError",
    "FileInputError",
    "FileOutputError",
    "FileRenameError",
    "FileCopyError",
    "MakeDirectoryError",
    "MakeFileError",
    "NotDirectoryError",
    "NotFileError",
    "FileIsNotReadableError",
    "FileOpenError",
    "FileOperatorError",
    "FileReaderError",
    "FileWriterError",
]
