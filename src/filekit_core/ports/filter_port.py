"""
File filter port interface.

Defines the contract for selecting directory entries.
A filter is anything that maps a File to a bool.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Union

if TYPE_CHECKING:
    from ..adapters.local_file import File


class FileFilter(ABC):
    """
    Abstract predicate over a File.

    Instances are callable, so a FileFilter can be used anywhere a
    plain ``Callable[[File], bool]`` is expected.
    """

    @abstractmethod
    def accept(self, file: "File") -> bool:
        """
        Check if the filter selects the given file.

        Args:
            file: Target file to be tested

        Returns:
            True if the file is selected
        """
        pass

    def __call__(self, file: "File") -> bool:
        return self.accept(file)


FilterLike = Union[FileFilter, Callable[["File"], bool]]


class _CallableFileFilter(FileFilter):
    """Adapts a bare function to the FileFilter interface."""

    def __init__(self, func: Callable[["File"], bool]):
        self._func = func

    def accept(self, file: "File") -> bool:
        return bool(self._func(file))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._func!r})"


def as_filter(obj: FilterLike) -> FileFilter:
    """Normalize a filter object or a callable into a FileFilter."""
    if isinstance(obj, FileFilter):
        return obj
    if callable(obj):
        return _CallableFileFilter(obj)
    raise TypeError(f"Expected a FileFilter or callable, got {type(obj).__name__}")
