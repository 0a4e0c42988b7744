"""File utilities."""
from __future__ import annotations

import re
from pathlib import Path


def ensure_dir(path: str) -> Path:
    """Ensure directory exists and return Path."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def slugify(value: str, fallback: str = "story") -> str:
    """Turn a place name into a filesystem-safe stem.

    Non-ASCII names (Korean, Arabic, ...) collapse to ``fallback``.
    """
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")
    return slug or fallback
