"""Environment-variable-based configuration for the reporter."""

from __future__ import annotations

import os
from pathlib import Path

LOG_LEVEL: str = os.environ.get("TRAINING_CATALOG_LOG_LEVEL", "WARNING").upper()
CATALOG_PATH: Path | None = (
    Path(os.environ["TRAINING_CATALOG_PATH"]).expanduser()
    if os.environ.get("TRAINING_CATALOG_PATH")
    else None
)
