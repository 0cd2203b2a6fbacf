"""Index pattern generation entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class GeneratedIndexPattern:
    """One index pattern document and the file it was written to."""

    variant: str
    path: Path
    document: Mapping[str, Any]
