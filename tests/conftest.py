"""
Pytest Configuration and Fixtures
"""

import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Smallest valid PNG: 1x1 transparent pixel
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c63000100000500010d0a2db40000000049454e44ae426082"
)


class RecordingLogger:
    """Stand-in for ConsoleLogger that keeps messages instead of printing them."""

    def __init__(self):
        self.messages = []

    def _record(self, level, message):
        self.messages.append((level, message))

    def debug(self, message):
        self._record("debug", message)

    def info(self, message):
        self._record("info", message)

    def warning(self, message):
        self._record("warning", message)

    def error(self, message):
        self._record("error", message)

    def success(self, message):
        self._record("success", message)

    def of_level(self, level):
        return [m for lvl, m in self.messages if lvl == level]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep user config, templates and MDPDF_* variables out of the tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("APPDATA", str(home))
    for name in ("MDPDF_TEMPLATE", "MDPDF_TEMPLATES_DIR", "MDPDF_OUTPUT_DIR", "MDPDF_LOGO",
                 "MDPDF_CSS", "MDPDF_TOC_START", "MDPDF_TOC_DEPTH", "MDPDF_TOC_TITLE",
                 "MDPDF_MARGINS"):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def png_file(temp_dir: Path) -> Path:
    path = temp_dir / "pixel.png"
    path.write_bytes(PNG_BYTES)
    return path
