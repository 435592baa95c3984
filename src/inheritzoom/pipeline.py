"""Orchestrator: discover → read → extract → assemble → render."""

from __future__ import annotations

import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from inheritzoom.analysis import find_cycles
from inheritzoom.assembler import build_graph
from inheritzoom.config import ExtractionConfig
from inheritzoom.extractors.base import Extractor
from inheritzoom.extractors.java import JavaExtractor, find_java_files
from inheritzoom.model import InheritanceGraph, TypeDeclaration
from inheritzoom.renderer.export import write_graph
from inheritzoom.renderer.html import render_html

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    """The assembled graph plus what happened along the way."""

    graph: InheritanceGraph
    files_scanned: int = 0
    failed_files: list[str] = field(default_factory=list)
    declaration_count: int = 0

    @property
    def is_empty(self) -> bool:
        return self.files_scanned == 0 or self.declaration_count == 0


def read_source(path: Path) -> str | None:
    """Read *path* as UTF-8, or return None (logged) if that is not possible."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return None


def extract_file(
    path: Path, source: str, extractor: Extractor
) -> list[TypeDeclaration] | None:
    """Extract declarations from one file, tagged with *path*.

    Returns None if extraction failed; the failure is logged and contained.
    """
    try:
        declarations = extractor.extract(source)
    except Exception as e:
        logger.warning("Could not extract declarations from %s: %s", path, e)
        return None
    for decl in declarations:
        decl.source_file = str(path)
    logger.debug("%s: %d declarations", path.name, len(declarations))
    return declarations


def extract_graph(
    paths_in: Iterable[Path], config: ExtractionConfig | None = None
) -> ExtractionResult:
    """Extract and assemble the inheritance graph of the Java files in *paths_in*.

    Files are read concurrently but processed in the given order, so the same
    paths always give the same graph. A file that cannot be read or extracted
    contributes nothing. No files or no declarations give an empty graph.
    """
    config = config or ExtractionConfig()
    extractor: Extractor = JavaExtractor(doc_scope=config.doc_scope)
    paths: list[Path] = []
    for path in paths_in:
        if extractor.can_handle(path):
            paths.append(path)
        else:
            logger.debug("Skipping %s: not a Java source file", path)

    with ThreadPoolExecutor(max_workers=config.workers) as pool:
        sources = list(pool.map(read_source, paths))

    declarations: list[TypeDeclaration] = []
    failed: list[str] = []
    for path, source in zip(paths, sources):
        file_decls = None if source is None else extract_file(path, source, extractor)
        if file_decls is None:
            failed.append(str(path))
            continue
        declarations.extend(file_decls)

    graph = build_graph(
        declarations,
        merge_policy=config.merge_policy,
        dangling_edges=config.dangling_edges,
    )
    logger.debug(
        "Extracted %d declarations from %d files (%d failed)",
        len(declarations),
        len(paths),
        len(failed),
    )
    return ExtractionResult(
        graph=graph,
        files_scanned=len(paths),
        failed_files=failed,
        declaration_count=len(declarations),
    )


def run(
    project_dir: Path,
    *,
    config: ExtractionConfig | None = None,
    output: Path | None = None,
    export: Path | None = None,
    open_browser: bool = False,
) -> ExtractionResult:
    """Run the full inheritzoom pipeline on *project_dir*."""
    project_dir = project_dir.resolve()
    config = config or ExtractionConfig()

    java_files = find_java_files(project_dir, exclude=config.exclude)
    logger.debug("Found %d Java files under %s", len(java_files), project_dir)
    if not java_files:
        logger.error("No Java files found in %s", project_dir)
        sys.exit(1)

    result = extract_graph(java_files, config)
    if result.is_empty:
        logger.error("No class or interface declarations found in %s", project_dir)
        sys.exit(1)

    cycles = find_cycles(result.graph)
    for cycle in cycles:
        logger.warning("Inheritance cycle: %s", " -> ".join(cycle))

    out_path = output or (project_dir / "inheritzoom.html")
    render_html(result.graph, out_path, title=project_dir.name)
    logger.info("Generated %s", out_path)

    if export is not None:
        write_graph(result.graph, export)
        logger.info("Exported graph data to %s", export)

    if open_browser:
        import webbrowser

        webbrowser.open(out_path.as_uri())

    return result
