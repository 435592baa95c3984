"""Extractor protocol — all source extractors conform to this interface."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from inheritzoom.model import TypeDeclaration


class Extractor(Protocol):
    """Protocol for per-file type declaration extractors."""

    def can_handle(self, path: Path) -> bool:
        """Return True if this extractor applies to the given source file."""
        ...

    def extract(self, source: str) -> list[TypeDeclaration]:
        """Return the declarations found in *source*, methods populated."""
        ...
