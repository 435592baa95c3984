"""Java extractor — regex-based declaration and member extraction."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from inheritzoom.extractors.java.declarations import iter_declarations, scan_declarations
from inheritzoom.extractors.java.members import (
    DOC_SCOPE_DECLARATION,
    DOC_SCOPES,
    extract_methods,
)
from inheritzoom.extractors.java.normalize import normalize_source
from inheritzoom.model import TypeDeclaration

logger = logging.getLogger(__name__)

__all__ = [
    "JavaExtractor",
    "extract_methods",
    "find_java_files",
    "iter_declarations",
    "normalize_source",
    "scan_declarations",
]

# Files to skip when walking Java sources.
_SKIP_FILES = {"package-info.java", "module-info.java"}

# Directories never worth descending into.
_SKIP_DIRS = {
    ".git",
    ".gradle",
    ".idea",
    ".mvn",
    ".svn",
    ".vscode",
    "__pycache__",
    "build",
    "node_modules",
    "out",
    "target",
}


def find_java_files(root: Path, exclude: list[str] | None = None) -> list[Path]:
    """Return every ``.java`` file under *root*, sorted for reproducible output.

    *exclude* adds directory names to the built-in skip list.
    """
    skip = _SKIP_DIRS | set(exclude or ())
    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        # Prune ignored dirs in-place
        dirnames[:] = [d for d in dirnames if d not in skip]
        for filename in filenames:
            if filename.endswith(".java") and filename not in _SKIP_FILES:
                found.append(Path(dirpath) / filename)
    return sorted(found)


class JavaExtractor:
    """Extract type declarations, with methods, from one Java source text."""

    def __init__(self, doc_scope: str = DOC_SCOPE_DECLARATION) -> None:
        if doc_scope not in DOC_SCOPES:
            raise ValueError(f"Unknown doc scope: {doc_scope!r}")
        self.doc_scope = doc_scope

    def can_handle(self, path: Path) -> bool:
        return path.suffix.lower() == ".java" and path.name not in _SKIP_FILES

    def extract(self, source: str) -> list[TypeDeclaration]:
        declarations = scan_declarations(normalize_source(source))
        for decl in declarations:
            decl.methods = extract_methods(
                source, decl.name, decl.kind, doc_scope=self.doc_scope
            )
        return declarations
