"""Pytest configuration for hexsed tests."""

import sys
from pathlib import Path

import pytest

# Ensure src/hexsed is importable
src_path = str(Path(__file__).parent.parent / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)


@pytest.fixture
def write_source(tmp_path):
    """Factory writing bytes to a file under tmp_path and returning its path."""

    def _write(data: bytes, name: str = "source.bin") -> str:
        path = tmp_path / name
        path.write_bytes(data)
        return str(path)

    return _write
