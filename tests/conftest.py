"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every MDVIEW_* variable so option loading starts from defaults."""
    for name in ("MDVIEW_ESCAPE_TABLE_CELLS", "MDVIEW_PROTECT_CODE_BLOCKS", "MDVIEW_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
