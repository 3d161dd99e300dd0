from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_bytes(tmp_path: Path) -> Callable[[bytes, str], str]:
    """Return a helper that writes raw bytes to a file under tmp_path."""

    def _write(data: bytes, name: str = "input.csv") -> str:
        path = tmp_path / name
        path.write_bytes(data)
        return str(path)

    return _write
