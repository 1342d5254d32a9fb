"""
Tests for IniFileWriter.
"""

import configparser
from pathlib import Path

import pytest

from filekit_core.adapters.local_file import File
from filekit_core.domain.exceptions import FileOpenError
from filekit_core.services import IniFileWriter


DATA = {
    "Section1": {
        "Key1": "Value1",
        "Key2": 2,
    },
    "Section2": {
        "Key3": [1, 2],
        "Key4": {"a": 1},
    },
}


class TestWrite:

    def test_layout(self, tmp_path):
        path = tmp_path / "settings.ini"
        IniFileWriter.write(str(path), DATA, line_end="\n")

        assert path.read_text() == (
            "[Section1]\n"
            "Key1 = Value1\n"
            "Key2 = 2\n"
            "\n"
            "[Section2]\n"
            "Key3 = [1,2]\n"
            'Key4 = {"a":1}\n'
        )

    def test_default_line_end(self, tmp_path):
        path = tmp_path / "settings.ini"
        IniFileWriter.write(str(path), {"S": {"k": "v"}})
        assert path.read_bytes() == b"[S]\r\nk = v\r\n"

    def test_readable_by_configparser(self, tmp_path):
        path = tmp_path / "settings.ini"
        IniFileWriter.write(File(str(path)), DATA)

        parser = configparser.ConfigParser(interpolation=None)
        parser.optionxform = str
        parser.read(path)

        assert parser.sections() == ["Section1", "Section2"]
        assert parser["Section1"]["Key1"] == "Value1"
        assert parser["Section2"]["Key4"] == '{"a":1}'

    def test_section_without_entries(self, tmp_path):
        path = tmp_path / "settings.ini"
        IniFileWriter.write(str(path), {"Empty": None, "S": {"k": "v"}}, line_end="\n")
        assert path.read_text() == "[Empty]\n\n[S]\nk = v\n"

    def test_replaces_content(self, a_txt):
        IniFileWriter.write(a_txt, {"S": {}}, line_end="\n")
        assert a_txt.get() == "[S]\n"

    def test_empty_data(self, tmp_path):
        path = tmp_path / "settings.ini"
        IniFileWriter.write(str(path), {})
        assert Path(path).read_bytes() == b""

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileOpenError):
            IniFileWriter.write(str(tmp_path / "missing" / "settings.ini"), DATA)


class TestFormatValue:

    @pytest.mark.parametrize("value, expected", [
        ("text", "text"),
        (10, "10"),
        (1.5, "1.5"),
        (True, "1"),
        (False, ""),
        (None, ""),
        ([1, "a"], '[1,"a"]'),
        ({"k": [True]}, '{"k":[true]}'),
    ])
    def test_format(self, value, expected):
        assert IniFileWriter.format_value(value) == expected
