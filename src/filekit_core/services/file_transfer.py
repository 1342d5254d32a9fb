"""
File transfer helpers.

Copy and move check their preconditions before touching the
filesystem, so a bad call fails with a precise error kind instead of
whatever the OS reports.
"""

import os
import shutil
from typing import Iterable

import structlog

from ..adapters.local_file import File
from ..domain.exceptions import (
    FileCopyError,
    FileIsNotReadableError,
    FileOutputError,
    FileWriterError,
    NotDirectoryError,
    NotFileError,
)

logger = structlog.get_logger()


def _check_transfer(src: File, dest: File) -> None:
    if not src.is_file():
        raise NotFileError(src)
    if not src.is_readable():
        raise FileIsNotReadableError(src)

    dest_dir = dest.get_parent()
    if not dest_dir.is_dir():
        raise NotDirectoryError(dest_dir)


def copy_file(src: File, dest: File) -> None:
    """
    Copy the contents of a regular file.

    Args:
        src: Existing, readable regular file
        dest: Target path; its parent directory must exist
    """
    _check_transfer(src, dest)
    try:
        shutil.copyfile(src.get_path(), dest.get_path())
    except OSError as e:
        raise FileCopyError(src, dest) from e
    logger.debug("file.copy", path=src.get_path(), to_path=dest.get_path())


def move_file(src: File, dest: File) -> None:
    """
    Move a regular file, replacing an existing file at ``dest``.

    Args:
        src: Existing, readable regular file
        dest: Target path; its parent directory must exist
    """
    _check_transfer(src, dest)
    try:
        os.replace(src.get_path(), dest.get_path())
    except OSError as e:
        raise FileCopyError(src, dest) from e
    logger.debug("file.move", path=src.get_path(), to_path=dest.get_path())


def output_file(file: File, lines: Iterable[str]) -> None:
    """Write each line followed by the configured line terminator."""
    terminator = file.config.line_terminator
    with file.open_for_write() as writer:
        for line in lines:
            try:
                writer.write(f"{line}{terminator}")
            except FileWriterError as e:
                raise FileOutputError(file) from e
