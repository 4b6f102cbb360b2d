"""Redis key naming conventions for route-tracer preferences."""
from __future__ import annotations

_PREFIX = "rt"


# ── Preferences ──────────────────────────────────────────────────────────

def preference(name: str) -> str:
    """Key for a single named preference, e.g. the "home" coordinate."""
    return f"{_PREFIX}:prefs:{name}"
