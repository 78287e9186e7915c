import sys
from pathlib import Path
from typing import Generator

import pytest

from restbuilder import Request

# Ensure local source package (src/restbuilder) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture
def base_url() -> str:
    return "https://api.example/"


@pytest.fixture
def request_builder(base_url: str) -> Generator[Request, None, None]:
    """Provide an unbuilt request builder bound to the test base URL."""
    request = Request(base_url)
    yield request
    request.close()


@pytest.fixture
def upload_files(tmp_path: Path) -> tuple[Path, Path]:
    """Create two small files to attach as multipart parts."""
    first = tmp_path / "a.bin"
    first.write_bytes(b"first-file-bytes")
    second = tmp_path / "b.bin"
    second.write_bytes(b"second-file-bytes")
    return first, second
