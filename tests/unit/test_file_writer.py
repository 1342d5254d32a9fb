"""
Tests for FileWriter.
"""

import threading
from pathlib import Path

import pytest

from filekit_core.adapters.local_file import File
from filekit_core.domain.enums import WriteMode
from filekit_core.domain.exceptions import FileOpenError, FileWriterError
from filekit_core.domain.models import FSConfig


class TestWrite:

    def test_truncate(self, a_txt):
        with a_txt.open_for_write() as writer:
            assert writer.write("Hello") == 5
        assert a_txt.get() == "Hello"

    def test_append(self, files):
        target = File("c.sql", files)
        with target.open_for_write(WriteMode.APPEND) as writer:
            writer.write("SELECT 2;\n")
        assert target.get() == "SELECT 1;\nSELECT 2;\n"

    def test_append_by_value(self, files):
        target = File("c.sql", files)
        with target.open_for_write("ab") as writer:
            writer.write(b"--")
        assert target.get().endswith("--")

    def test_creates_file(self, files):
        target = File("new.txt", files)
        with target.open_for_write() as writer:
            writer.write(b"\x01\x02")
        assert Path(target).read_bytes() == b"\x01\x02"

    def test_length(self, a_txt):
        with a_txt.open_for_write() as writer:
            assert writer.write("Hello, World", 5) == 5
            assert writer.write(b"!", 100) == 1
        assert a_txt.get() == "Hello!"

    def test_length_counts_bytes(self, a_txt):
        with a_txt.open_for_write() as writer:
            assert writer.write("ねこ", 3) == 3
        assert a_txt.get() == "ね"

    @pytest.mark.parametrize("length", [0, -5])
    def test_invalid_length(self, a_txt, length):
        with a_txt.open_for_write() as writer:
            with pytest.raises(ValueError):
                writer.write("x", length)

    def test_unencodable_text(self, files):
        target = File("ascii.txt", files, config=FSConfig(encoding="ascii"))
        with target.open_for_write() as writer:
            with pytest.raises(FileWriterError, match="Failed to write file") as exc_info:
                writer.write("ねこ")
        assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)

    @pytest.mark.parametrize("payload", [123, None, ["a"]])
    def test_non_bytes_payload(self, a_txt, payload):
        with a_txt.open_for_write() as writer:
            with pytest.raises(FileWriterError) as exc_info:
                writer.write(payload)
        assert isinstance(exc_info.value.__cause__, TypeError)

    def test_flush(self, a_txt):
        with a_txt.open_for_write() as writer:
            writer.write("flushed")
            writer.flush()
            assert a_txt.get() == "flushed"

    def test_append_position(self, files):
        target = File("seek.txt", files).put("0123456789")
        with target.open_for_write(WriteMode.APPEND) as writer:
            writer.write("ab")
            assert writer.tell() == 12
        assert target.get() == "0123456789ab"

    def test_open_in_missing_directory(self, files):
        with pytest.raises(FileOpenError):
            File("missing/new.txt", files).open_for_write()

    def test_open_invalid_mode(self, a_txt):
        with pytest.raises(ValueError):
            a_txt.open_for_write("r")


class TestWriterLocks:
    """Exclusive locks conflict across handles."""

    def test_second_writer_cannot_lock(self, a_txt):
        """Verify exclusive locks conflict across handles."""
        with a_txt.open_for_write() as first, a_txt.open_for_write(WriteMode.APPEND) as second:
            first.lock()
            with pytest.raises(FileWriterError, match="Failed to lock file"):
                second.lock()

    def test_blocking_lock_waits_for_release(self, a_txt):
        """Verify lock(blocking=True) returns only after the holder unlocks."""
        released = threading.Event()

        with a_txt.open_for_write() as holder, a_txt.open_for_write(WriteMode.APPEND) as waiter:
            holder.lock()

            def release():
                released.set()
                holder.unlock()

            timer = threading.Timer(0.2, release)
            timer.start()
            try:
                waiter.lock(blocking=True)
            finally:
                timer.join()

            assert released.is_set()
            assert waiter.is_locked()
            assert not holder.is_locked()

    def test_unlock_releases(self, a_txt):
        with a_txt.open_for_write() as first, a_txt.open_for_write(WriteMode.APPEND) as second:
            first.lock()
            first.unlock()
            assert not first.is_locked()

            second.lock()
            assert second.is_locked()

    def test_close_releases(self, a_txt):
        first = a_txt.open_for_write()
        first.lock()
        first.close()

        with a_txt.open_for_write(WriteMode.APPEND) as second:
            second.lock()
            assert second.is_locked()

    def test_blocked_by_reader(self, a_txt):
        with a_txt.open_for_read() as reader, a_txt.open_for_write(WriteMode.APPEND) as writer:
            reader.lock()
            with pytest.raises(FileWriterError):
                writer.lock()
