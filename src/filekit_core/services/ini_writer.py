"""
INI file writer.

Writes nested mappings as a key/value text file:

    [Section1]
    Key1 = Value1
    Key2 = Value2

    [Section2]
    Key3 = {"a":1,"b":2}

Scalars are written directly; lists, tuples and mappings are encoded
as compact JSON.
"""

import json
from typing import Any, Mapping, Union

from ..adapters.local_file import File
from ..domain.exceptions import FileOutputError, FileWriterError


class IniFileWriter:
    """Serializes ``{section: {key: value}}`` data to an INI file."""

    @staticmethod
    def format_value(value: Any) -> str:
        """Text written after "Key = " for a single value."""
        if isinstance(value, bool):
            return "1" if value else ""
        if value is None:
            return ""
        if isinstance(value, (str, int, float)):
            return str(value)
        return json.dumps(value, separators=(",", ":"))

    @classmethod
    def write(
        cls,
        filename: Union[str, File],
        data: Mapping[str, Any],
        line_end: str = "\r\n",
    ) -> None:
        """
        Write the INI file, replacing any existing content.

        Args:
            filename: Target path
            data: Section name -> mapping of key -> value. A section whose
                value is not a mapping is written as a bare header.
            line_end: Line terminator
        """
        file = filename if isinstance(filename, File) else File(filename)

        with file.open_for_write() as writer:
            try:
                for index, (section, entries) in enumerate(data.items()):
                    if index:
                        writer.write(line_end)
                    writer.write(f"[{section}]{line_end}")
                    if not isinstance(entries, Mapping):
                        continue
                    for key, value in entries.items():
                        writer.write(f"{key} = {cls.format_value(value)}{line_end}")
            except (FileWriterError, TypeError, ValueError) as e:
                raise FileOutputError(file) from e
