"""
Configuration constants for graphwalk.

Settings that scripts and tooling may tune are read from environment
variables here. Scripts load a project-level .env before importing this
module, so values placed there are picked up too.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of graphwalk/
PROJECT_ROOT = Path(__file__).parent.parent

# =============================================================================
# Search Configuration
# =============================================================================

def _read_max_depth() -> int | None:
    """Parse GRAPHWALK_MAX_DEPTH as a non-negative int, or None if unset."""
    raw = os.environ.get("GRAPHWALK_MAX_DEPTH")
    if not raw:
        return None
    try:
        depth = int(raw)
    except ValueError:
        raise ValueError(
            f"GRAPHWALK_MAX_DEPTH must be a non-negative integer, got {raw!r}"
        ) from None
    if depth < 0:
        raise ValueError(
            f"GRAPHWALK_MAX_DEPTH must be a non-negative integer, got {raw!r}"
        )
    return depth


# Default edge cap for shortest-path search in scripts (None = unlimited).
# The library itself never applies a cap unless one is passed explicitly.
SHORTEST_PATH_MAX_DEPTH = _read_max_depth()

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("GRAPHWALK_LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
