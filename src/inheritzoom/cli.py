"""Command-line interface for inheritzoom."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from inheritzoom.analysis import neighborhood
from inheritzoom.assembler import DanglingPolicy, DuplicateTypeError, MergePolicy
from inheritzoom.config import ConfigError, load_config
from inheritzoom.extractors.java.members import DOC_SCOPES
from inheritzoom.model import InheritanceGraph
from inheritzoom.pipeline import run

logger = logging.getLogger(__name__)


def _print_neighborhood(graph: InheritanceGraph, focus: str, depth: int) -> None:
    try:
        reached = neighborhood(graph, focus, depth)
    except KeyError:
        logger.error("Type %s is not in the graph", focus)
        return

    print(f"{'Distance':<9} {'Type':<32} {'Relation':<32} Methods")
    for info in sorted(reached.values(), key=lambda i: (i.distance, i.name)):
        relation = "START" if info.relation is None else info.relation
        print(f"{info.distance:<9} {info.name:<32} {relation:<32} {info.method_count}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="inheritzoom",
        description="Java class/interface inheritance explorer — interactive HTML graph.",
    )
    parser.add_argument(
        "project_dir",
        type=Path,
        help="Path to the Java project to visualize",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output HTML file path (default: inheritzoom.html in the project)",
    )
    parser.add_argument(
        "--export",
        type=Path,
        default=None,
        help="Also write the graph data to this .json or .yaml file",
    )
    parser.add_argument(
        "--merge-policy",
        choices=MergePolicy.ALL,
        default=None,
        help="How to treat types declared in more than one file (default: first)",
    )
    parser.add_argument(
        "--keep-dangling",
        action="store_true",
        help="Keep edges to types that are not declared in the project",
    )
    parser.add_argument(
        "--doc-scope",
        choices=DOC_SCOPES,
        default=None,
        help="Where to look up method doc comments (default: declaration)",
    )
    parser.add_argument(
        "--focus",
        default=None,
        help="Print the types around this one, breadth-first",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=2,
        help="Maximum distance for --focus (default: 2)",
    )
    parser.add_argument(
        "--open",
        action="store_true",
        dest="open_browser",
        help="Open the generated HTML in a browser",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("inheritzoom").setLevel(logging.DEBUG)

    try:
        config = load_config(
            args.project_dir,
            merge_policy=args.merge_policy,
            dangling_edges=DanglingPolicy.KEEP if args.keep_dangling else None,
            doc_scope=args.doc_scope,
        )
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(2)

    try:
        result = run(
            args.project_dir,
            config=config,
            output=args.output,
            export=args.export,
            open_browser=args.open_browser,
        )
    except DuplicateTypeError as e:
        logger.error("%s", e)
        sys.exit(2)

    if args.focus:
        _print_neighborhood(result.graph, args.focus, args.depth)
