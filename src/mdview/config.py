"""Configuration for the mdview converter and command line.

Environment variables (the command line also loads ``ROOT/.env`` into them):
  MDVIEW_ESCAPE_TABLE_CELLS    -- HTML-escape table cell text (default off)
  MDVIEW_PROTECT_CODE_BLOCKS   -- shield fenced code from later stages (default off)
  MDVIEW_LOG_LEVEL             -- logging level for the command line (default INFO)

The converter never reads these itself; ``to_html`` falls back to
``ConverterOptions()`` and only the command line calls ``load_options``.
"""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict

ROOT = Path(__file__).parent.parent.parent.resolve()

TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})

DEFAULT_LOG_LEVEL = "INFO"


class ConverterOptions(BaseModel):
    """Immutable switches for the two opt-in hardening behaviors.

    Both default to False, which reproduces the converter's documented
    behavior exactly: table cells are emitted verbatim and fenced code is
    reprocessed by the inline stages.
    """

    model_config = ConfigDict(frozen=True)

    escape_table_cells: bool = False
    protect_code_blocks: bool = False


def _env_flag(name: str) -> bool:
    """Return True if the environment variable holds a truthy value."""
    return os.getenv(name, "").strip().lower() in TRUTHY_VALUES


def load_options() -> ConverterOptions:
    """Build ConverterOptions from MDVIEW_* environment variables."""
    return ConverterOptions(
        escape_table_cells=_env_flag("MDVIEW_ESCAPE_TABLE_CELLS"),
        protect_code_blocks=_env_flag("MDVIEW_PROTECT_CODE_BLOCKS"),
    )


def log_level() -> str:
    """Logging level for the command line, from MDVIEW_LOG_LEVEL."""
    return os.getenv("MDVIEW_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
