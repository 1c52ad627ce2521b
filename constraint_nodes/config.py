"""Environment-driven settings."""

import os
from pathlib import Path

PALETTE_DEFINITIONS_DIR = Path(
    os.environ.get(
        "CONSTRAINT_NODES_PALETTE_DIR",
        str(Path(__file__).parent / "palette" / "definitions"),
    )
)
DEFAULT_PALETTE_KEY = os.environ.get("CONSTRAINT_NODES_PALETTE", "standard")

# Prefixed to permalinks in rendered HTML, e.g. "https://example.com/?constraints="
PERMALINK_BASE = os.environ.get("CONSTRAINT_NODES_PERMALINK_BASE", "")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
HOST = os.environ.get("CONSTRAINT_NODES_HOST", "0.0.0.0")
PORT = int(os.environ.get("CONSTRAINT_NODES_PORT", "8001"))
