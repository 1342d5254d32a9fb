"""Test configuration and fixtures."""

import os
import shutil
import sys
from pathlib import Path

import pytest
from PIL import Image

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from filekit_core.adapters.local_file import File

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Reference digests of fixtures/a.txt
A_TXT_SIZE = 208
A_TXT_SHA1 = "ae1ee9b3697975a181ac41fb3d2b1703e33df179"
A_TXT_MD5 = "12d29e0edc6c68f84667e1bb51bd8225"


@pytest.fixture
def files_dir(tmp_path) -> Path:
    """
    Build the listing fixture: 6 files and 3 directories.

        files/
            a.txt  b.txt (empty)  c.sql
            dangohiyoko.png  neko.jpg  piyopiyo.gif
            x/ p/  x-1.txt
            y/ q/ r/  q-1.txt
            z/
    """
    root = tmp_path / "files"
    root.mkdir()

    shutil.copyfile(FIXTURES_DIR / "a.txt", root / "a.txt")
    (root / "b.txt").write_bytes(b"")
    (root / "c.sql").write_text("SELECT 1;\n")

    Image.new("RGB", (8, 8), "orange").save(root / "dangohiyoko.png", "PNG")
    Image.new("RGB", (8, 8), "white").save(root / "neko.jpg", "JPEG")
    Image.new("P", (8, 8)).save(root / "piyopiyo.gif", "GIF")

    (root / "x" / "p").mkdir(parents=True)
    (root / "x" / "x-1.txt").write_text("x-1")
    (root / "y" / "q" / "r").mkdir(parents=True)
    (root / "y" / "q" / "q-1.txt").write_text("q-1")
    (root / "z").mkdir()

    return root


@pytest.fixture
def files(files_dir) -> File:
    """The listing fixture as a File."""
    return File(str(files_dir))


@pytest.fixture
def a_txt(files) -> File:
    return File("a.txt", files)


def names(file_list) -> list:
    """Sorted base names, for order-independent comparisons."""
    return sorted(f.get_name() for f in file_list)


needs_non_root = pytest.mark.skipif(
    hasattr(os, "geteuid") and os.geteuid() == 0,
    reason="permission checks are bypassed for root",
)


@pytest.fixture
def camera_jpg(tmp_path) -> File:
    """A two-frame JPEG with Multi-Picture data, as saved by phone cameras."""
    path = tmp_path / "camera.jpg"
    Image.new("RGB", (8, 8), "red").save(
        path, "MPO", save_all=True, append_images=[Image.new("RGB", (8, 8), "blue")]
    )
    return File(str(path))
