"""Reduce per-file type declarations into a single inheritance graph."""

from __future__ import annotations

import logging
from typing import Iterable

from inheritzoom.model import (
    GraphEdge,
    GraphNode,
    InheritanceGraph,
    RelationKind,
    TypeDeclaration,
)

logger = logging.getLogger(__name__)


class MergePolicy:
    """How to treat two declarations that share a type name."""

    FIRST = "first"
    LAST = "last"
    ERROR = "error"

    ALL = (FIRST, LAST, ERROR)


class DanglingPolicy:
    """What to do with edges whose target type was never declared."""

    DROP = "drop"
    KEEP = "keep"

    ALL = (DROP, KEEP)


class DuplicateTypeError(Exception):
    """Raised under ``MergePolicy.ERROR`` when a type name is declared twice."""

    def __init__(self, name: str, first_file: str | None, second_file: str | None):
        self.name = name
        self.first_file = first_file
        self.second_file = second_file
        super().__init__(
            f"Type {name} declared in both {first_file} and {second_file}"
        )


def _node_from(decl: TypeDeclaration) -> GraphNode:
    return GraphNode(
        id=decl.name,
        label=decl.name,
        kind=decl.kind,
        origin_file=decl.source_file,
        methods=tuple(decl.methods),
    )


def edges_of(decl: TypeDeclaration) -> list[GraphEdge]:
    """Return the outgoing edges declared by *decl*, in declaration order."""
    edges: list[GraphEdge] = []
    if decl.superclass:
        edges.append(GraphEdge(decl.name, decl.superclass, RelationKind.EXTENDS_CLASS))
    relation = (
        RelationKind.EXTENDS_INTERFACE
        if decl.is_interface
        else RelationKind.IMPLEMENTS_INTERFACE
    )
    for ref in decl.interface_refs:
        edges.append(GraphEdge(decl.name, ref, relation))
    return edges


def build_graph(
    declarations: Iterable[TypeDeclaration],
    *,
    merge_policy: str = MergePolicy.FIRST,
    dangling_edges: str = DanglingPolicy.DROP,
) -> InheritanceGraph:
    """Assemble *declarations* (file order, then in-file order) into a graph.

    Nodes are keyed by bare type name. Edges are neither deduplicated nor
    checked for cycles. With ``DanglingPolicy.DROP`` an edge survives only if
    its target is declared somewhere in *declarations*, so forward references
    across files are kept.
    """
    if merge_policy not in MergePolicy.ALL:
        raise ValueError(f"Unknown merge policy: {merge_policy!r}")
    if dangling_edges not in DanglingPolicy.ALL:
        raise ValueError(f"Unknown dangling edge policy: {dangling_edges!r}")

    nodes: dict[str, GraphNode] = {}
    edges: list[GraphEdge] = []

    for decl in declarations:
        existing = nodes.get(decl.name)
        if existing is None:
            nodes[decl.name] = _node_from(decl)
        elif merge_policy == MergePolicy.ERROR:
            raise DuplicateTypeError(decl.name, existing.origin_file, decl.source_file)
        elif merge_policy == MergePolicy.LAST:
            # Dict assignment keeps the key's original position.
            nodes[decl.name] = _node_from(decl)
        else:
            logger.debug(
                "Duplicate type %s in %s; keeping %s",
                decl.name,
                decl.source_file,
                existing.origin_file,
            )
        edges.extend(edges_of(decl))

    if dangling_edges == DanglingPolicy.DROP:
        kept = [e for e in edges if e.target in nodes]
        if len(kept) != len(edges):
            logger.debug("Dropped %d edges to undeclared types", len(edges) - len(kept))
        edges = kept

    logger.debug("Graph: %d nodes, %d edges", len(nodes), len(edges))
    return InheritanceGraph(nodes=nodes, edges=tuple(edges))
