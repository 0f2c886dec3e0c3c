"""Integration test fixtures for the mdview converter.

Run with:  pytest tests_integration/ -v
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent.resolve()
DATA_DIR = Path(__file__).parent / "data"

load_dotenv(PROJECT_ROOT / ".env")


@pytest.fixture(scope="session")
def release_notes_path() -> Path:
    return DATA_DIR / "release_notes.md"


@pytest.fixture(scope="session")
def release_notes(release_notes_path) -> str:
    return release_notes_path.read_text(encoding="utf-8")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every MDVIEW_* variable so the CLI runs with default options."""
    for name in ("MDVIEW_ESCAPE_TABLE_CELLS", "MDVIEW_PROTECT_CODE_BLOCKS", "MDVIEW_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
