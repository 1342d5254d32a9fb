"""
Local File entity.

A File is a value object wrapping a path string. Queries and mutations
delegate one-to-one to OS calls and translate failures into the
filekit exception taxonomy.
"""

import dataclasses
import fcntl
import hashlib
import json
import os
import time
import zlib
from typing import Any, List, Optional, Union

import structlog

from ..domain.enums import FileType, ReadFlag, WriteMode
from ..domain.exceptions import (
    FileInputError,
    FileIsNotReadableError,
    FileOpenError,
    FileOutputError,
    FileRenameError,
    MakeDirectoryError,
    MakeFileError,
)
from ..domain.models import DEFAULT_CONFIG, FSConfig
from ..ports.filter_port import FilterLike, as_filter
from .file_reader import FileReader
from .file_writer import FileWriter

logger = structlog.get_logger()

PathLike = Union[str, "os.PathLike[str]"]


class File:
    """
    A file or directory path.

    Equality and hashing follow the path string only. Trailing
    separators are dropped on construction, so a child's parent is
    always equal to the File it was derived from. A File never changes
    after construction; rename() returns the same object still pointing
    at the old path.
    """

    __slots__ = ("_path", "_config")

    def __init__(
        self,
        name: PathLike,
        parent: Optional[Union["File", PathLike]] = None,
        config: Optional[FSConfig] = None,
    ):
        """
        Initialize the file.

        Args:
            name: Path of the file, or its name when ``parent`` is given
            parent: Directory the name is relative to
            config: Host conventions; inherited from ``parent`` when omitted
        """
        if config is None:
            config = parent.config if isinstance(parent, File) else DEFAULT_CONFIG
        self._config = config

        sep = config.separator
        name = os.fspath(name)
        parent_path = os.fspath(parent) if parent is not None else ""
        path = parent_path.rstrip(sep) + sep + name if parent_path else name

        # Trailing separators are dropped; the root keeps a single one
        self._path = path.rstrip(sep) or path[:len(sep)]

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def path(self) -> str:
        return self._path

    @property
    def config(self) -> FSConfig:
        return self._config

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, File):
            return self._path == other._path
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._path)

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"File({self._path!r})"

    def __fspath__(self) -> str:
        return self._path

    def _derive(self, path: str) -> "File":
        return File(path, config=self._config)

    # ------------------------------------------------------------------
    # Path derivation (no OS calls)
    # ------------------------------------------------------------------

    def get_path(self) -> str:
        return self._path

    def get_absolute_path(self) -> str:
        """Canonical absolute path, or an empty string if the path does not exist."""
        if not os.path.exists(self._path):
            return ""
        return os.path.realpath(self._path)

    def get_name(self, suffix: Optional[str] = None) -> str:
        """
        Base name of the path.

        Args:
            suffix: Removed from the end of the name when present
        """
        sep = self._config.separator
        name = self._path.rstrip(sep).rpartition(sep)[2]
        if suffix and name.endswith(suffix) and name != suffix:
            name = name[:-len(suffix)]
        return name

    def get_dir_name(self) -> str:
        """Path of the parent directory ("." for a bare name)."""
        sep = self._config.separator
        stripped = self._path.rstrip(sep)
        if not stripped:
            return sep if self._path else "."
        head, found, _ = stripped.rpartition(sep)
        if not found:
            return "."
        return head.rstrip(sep) or sep

    def get_extension(self) -> str:
        """Text after the last dot of the name, without the dot."""
        name = self.get_name()
        if "." not in name:
            return ""
        return name.rpartition(".")[2]

    def get_child(self, name: str) -> "File":
        return File(name, self)

    def get_parent(self) -> "File":
        return self._derive(self.get_dir_name())

    # ------------------------------------------------------------------
    # Probes
    # ------------------------------------------------------------------

    def exists(self) -> bool:
        return os.path.exists(self._path)

    def is_file(self) -> bool:
        return os.path.isfile(self._path)

    def is_dir(self) -> bool:
        return os.path.isdir(self._path)

    is_directory = is_dir

    def can_read(self) -> bool:
        return os.access(self._path, os.R_OK)

    def can_write(self) -> bool:
        return os.access(self._path, os.W_OK)

    is_readable = can_read
    is_writeable = can_write

    def _stat(self, follow_symlinks: bool = True) -> os.stat_result:
        try:
            return os.stat(self._path, follow_symlinks=follow_symlinks)
        except OSError as e:
            raise FileInputError(self, f"stat failed ({e.strerror})") from e

    def get_file_size(self) -> int:
        """Size in bytes."""
        return self._stat().st_size

    def get_file_perms(self) -> int:
        """Full st_mode, including the type bits."""
        return self._stat().st_mode

    def get_file_type(self) -> FileType:
        return FileType.from_mode(self._stat(follow_symlinks=False).st_mode)

    def get_last_modified_time(self) -> int:
        """Modification time as a UNIX timestamp."""
        return int(self._stat().st_mtime)

    def get_last_access_time(self) -> int:
        """Access time as a UNIX timestamp."""
        return int(self._stat().st_atime)

    def get_file_owner(self) -> int:
        """Owner user id."""
        return self._stat().st_uid

    def hash(self, algorithm: str = "sha1") -> str:
        """
        Hex digest of the file contents.

        Args:
            algorithm: Any hashlib algorithm name, or "crc32b"

        Returns:
            Lowercase hex digest
        """
        if algorithm.lower() == "crc32b":
            crc = 0
            for chunk in self._iter_chunks():
                crc = zlib.crc32(chunk, crc)
            return f"{crc & 0xFFFFFFFF:08x}"

        try:
            digest = hashlib.new(algorithm)
        except ValueError as e:
            raise ValueError(f"Unsupported hash algorithm: {algorithm}") from e
        for chunk in self._iter_chunks():
            digest.update(chunk)
        return digest.hexdigest()

    def _iter_chunks(self):
        try:
            with open(self._path, "rb") as f:
                while True:
                    chunk = f.read(self._config.chunk_size)
                    if not chunk:
                        return
                    yield chunk
        except OSError as e:
            raise FileInputError(self, "Hashing file failed") from e

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def get(self) -> str:
        """Whole file contents, decoded with the configured encoding."""
        try:
            with open(self._path, "r", encoding=self._config.encoding, newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileInputError(self, "Reading file failed") from e

    def get_as_array(self, flags: ReadFlag = ReadFlag.IGNORE_NEW_LINES) -> List[str]:
        """
        File contents as a list of lines.

        Lines are split on "\\n" only. With IGNORE_NEW_LINES the "\\n" or
        "\\r\\n" terminator is removed; SKIP_EMPTY_LINES drops lines that
        end up empty.
        """
        text = self.get()
        if not text:
            return []

        lines = [line + "\n" for line in text.split("\n")]
        lines[-1] = lines[-1][:-1]
        if not lines[-1]:
            lines.pop()

        if flags & ReadFlag.IGNORE_NEW_LINES:
            lines = [line[:-1].rstrip("\r") if line.endswith("\n") else line for line in lines]
        if flags & ReadFlag.SKIP_EMPTY_LINES:
            lines = [line for line in lines if line]
        return lines

    def put(self, contents: Any, exclusive_lock: bool = False) -> "File":
        """
        Save a value as the file contents.

        Args:
            contents: Text, bytes, a list of lines, another File, or any
                value that can be serialized or converted to text
            exclusive_lock: Hold a blocking exclusive lock while writing

        Returns:
            self
        """
        data = self._to_bytes(contents)
        try:
            if exclusive_lock:
                # Truncate only once the lock is held
                with open(self._path, "ab") as f:
                    fcntl.flock(f.fileno(), fcntl.LOCK_EX)
                    f.truncate(0)
                    f.write(data)
            else:
                with open(self._path, "wb") as f:
                    f.write(data)
        except OSError as e:
            raise FileOutputError(self) from e
        logger.debug("file.put", path=self._path, size=len(data), locked=exclusive_lock)
        return self

    def _to_bytes(self, contents: Any) -> bytes:
        text = self._to_text(contents)
        if isinstance(text, bytes):
            return text
        try:
            return text.encode(self._config.encoding)
        except UnicodeEncodeError as e:
            raise FileOutputError(self) from e

    def _to_text(self, contents: Any) -> Union[str, bytes]:
        if isinstance(contents, (str, bytes)):
            return contents
        if isinstance(contents, bytearray):
            return bytes(contents)
        if isinstance(contents, (int, float)):
            return str(contents)
        if isinstance(contents, (list, tuple)):
            return self._config.line_terminator.join(str(line) for line in contents)
        if isinstance(contents, File):
            return contents.get()

        serialize = getattr(contents, "serialize", None)
        if callable(serialize):
            result = serialize()
            if isinstance(result, (str, bytes)):
                return result
            raise FileOutputError(self)

        if isinstance(contents, dict) or (
            dataclasses.is_dataclass(contents) and not isinstance(contents, type)
        ):
            value = contents if isinstance(contents, dict) else dataclasses.asdict(contents)
            try:
                return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
            except (TypeError, ValueError) as e:
                raise FileOutputError(self) from e

        if contents is not None and type(contents).__str__ is not object.__str__:
            return str(contents)

        raise FileOutputError(self)

    def open_for_read(self) -> FileReader:
        """Open a reader positioned at the start of the file."""
        try:
            fh = open(self._path, "rb")
        except OSError as e:
            raise FileOpenError(self) from e
        return FileReader(fh, self)

    def open_for_write(self, mode: WriteMode = WriteMode.TRUNCATE) -> FileWriter:
        """
        Open a writer.

        Args:
            mode: TRUNCATE empties the file first, APPEND writes at the end
        """
        try:
            fh = open(self._path, WriteMode(mode).value)
        except OSError as e:
            raise FileOpenError(self) from e
        return FileWriter(fh, self)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def rename(self, new_file: Union["File", PathLike]) -> "File":
        """Move this path to ``new_file``, replacing an existing file there."""
        if not isinstance(new_file, File):
            new_file = self._derive(os.fspath(new_file))
        try:
            os.replace(self._path, new_file.get_path())
        except OSError as e:
            raise FileRenameError(self, new_file) from e
        logger.debug("file.rename", path=self._path, to_path=new_file.get_path())
        return self

    def mkfile(self, contents: Union[str, bytes], mode: Optional[int] = None) -> "File":
        """
        Create the file, making missing parent directories first.

        Args:
            contents: Initial contents
            mode: Mode for created directories (defaults to config.dir_mode)
        """
        self.get_parent().mkdir(mode)
        data = contents if isinstance(contents, bytes) else contents.encode(self._config.encoding)
        try:
            with open(self._path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise MakeFileError(self) from e
        logger.debug("file.mkfile", path=self._path)
        return self

    def mkdir(self, mode: Optional[int] = None) -> "File":
        """
        Create the directory and any missing ancestors.

        Does nothing if the directory already exists.
        """
        if mode is None:
            mode = self._config.dir_mode

        if os.path.exists(self._path):
            if not os.path.isdir(self._path):
                raise MakeDirectoryError(self)
            return self

        parent = self.get_parent()
        if not parent.exists():
            parent.mkdir(mode)

        try:
            os.mkdir(self._path, mode)
        except FileExistsError as e:
            if not os.path.isdir(self._path):
                raise MakeDirectoryError(self) from e
        except OSError as e:
            raise MakeDirectoryError(self) from e
        logger.debug("file.mkdir", path=self._path, mode=oct(mode))
        return self

    def delete(self, recursive: bool = False) -> "File":
        """
        Delete the file or directory.

        Without ``recursive`` a directory is only removed when empty.
        Failures are logged and otherwise ignored. Symlinks are removed,
        never followed.
        """
        if not os.path.lexists(self._path):
            return self

        if os.path.islink(self._path) or not os.path.isdir(self._path):
            _remove_quietly(os.unlink, self._path)
        elif recursive:
            _remove_tree(self._path)
        else:
            _remove_quietly(os.rmdir, self._path)
        return self

    def list_files(self, file_filter: Optional[FilterLike] = None) -> List["File"]:
        """
        Direct children of this directory.

        Args:
            file_filter: FileFilter or callable selecting entries; all
                entries are returned when omitted

        Returns:
            Children in OS iteration order; empty when the path is absent
            or not a directory
        """
        if not os.path.isdir(self._path):
            return []
        if not os.access(self._path, os.R_OK):
            raise FileIsNotReadableError(self)

        accept = as_filter(file_filter) if file_filter is not None else None

        try:
            with os.scandir(self._path) as entries:
                names = [entry.name for entry in entries]
        except OSError as e:
            raise FileIsNotReadableError(self) from e

        files = []
        for name in names:
            child = File(name, self)
            if accept is None or accept(child):
                files.append(child)
        return files

    def touch(self, timestamp: Optional[float] = None) -> "File":
        """
        Set access and modification time, creating the file if absent.

        Args:
            timestamp: UNIX time to set (defaults to now)
        """
        if timestamp is None:
            timestamp = time.time()
        try:
            if not os.path.exists(self._path):
                open(self._path, "ab").close()
            os.utime(self._path, (timestamp, timestamp))
        except OSError as e:
            raise FileOutputError(self) from e
        return self


def _remove_quietly(remove, path: str) -> None:
    try:
        remove(path)
    except OSError as e:
        logger.warning("file.delete.failed", path=path, error=str(e))


def _remove_tree(path: str) -> None:
    """Depth-first removal: files, then subdirectories, then the directory."""
    subdirs = []
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(entry.path)
                else:
                    _remove_quietly(os.unlink, entry.path)
    except OSError as e:
        logger.warning("file.delete.scan_failed", path=path, error=str(e))

    for subdir in subdirs:
        _remove_tree(subdir)
    _remove_quietly(os.rmdir, path)
