"""Utility functions for translatable forms"""

import logging
import uuid
from pathlib import Path

logger = logging.getLogger(__name__)


def canonicalify(p: Path | str) -> Path:
    return Path(p).expanduser().resolve()


def ensure_path(p: Path | str) -> Path:
    path = canonicalify(p)
    path.mkdir(parents=True, exist_ok=True)
    return path


def unique_id(prefix: str = "") -> str:
    """Return ``prefix`` followed by a random hex suffix unique per call."""
    return f"{prefix}{uuid.uuid4().hex}"
