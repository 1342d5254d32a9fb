"""
filekit Core - Object-oriented layer over native filesystem calls.

Provides a File value object, locking reader/writer stream operators,
filters for directory listing and a typed exception hierarchy.
"""

__version__ = "0.1.0"

_EXPORTS = {
    "File": ".adapters.local_file",
    "FileOperatorBase": ".adapters.stream_operator",
    "FileReader": ".adapters.file_reader",
    "FileWriter": ".adapters.file_writer",
    "FSConfig": ".domain.models",
    "DEFAULT_CONFIG": ".domain.models",
    "FileType": ".domain.enums",
    "WriteMode": ".domain.enums",
    "ReadFlag": ".domain.enums",
    "ImageType": ".domain.enums",
    "FileFilter": ".ports.filter_port",
    "ExtensionFileFilter": ".filters.extension",
    "IsDirectoryFileFilter": ".filters.type_filters",
    "IsFileFileFilter": ".filters.type_filters",
    "ImageFileFilter": ".filters.image",
    "RegExFileFilter": ".filters.regex",
    "CombinedFileFilter": ".filters.combined",
    "copy_file": ".services.file_transfer",
    "move_file": ".services.file_transfer",
    "output_file": ".services.file_transfer",
    "IniFileWriter": ".services.ini_writer",
    **{name: ".domain.exceptions" for name in (
        "FileSystemError", "FileInputError", "FileOutputError", "FileRenameError",
        "FileCopyError", "MakeDirectoryError", "MakeFileError", "NotDirectoryError",
        "NotFileError", "FileIsNotReadableError", "FileOpenError",
        "FileOperatorError", "FileReaderError", "FileWriterError",
    )},
}


# Lazy imports to avoid loading everything at once
def __getattr__(name):
    module_name = _EXPORTS.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    from importlib import import_module
    return getattr(import_module(module_name, __name__), name)


__all__ = ["__version__", *_EXPORTS]
