from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path for package imports like `processes.*`
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


SAMPLE_LOG = "1, 1\n2, 2\n3, 3\n4, 1\n5, 1\n6, 2\n7, 2\n8, 3\n9, 2\n10, 2\n"


@pytest.fixture
def write_log(tmp_path: Path):
    def _write(content: str, name: str = "log_test.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_log(write_log) -> Path:
    return write_log(SAMPLE_LOG)
