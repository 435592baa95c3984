"""Data model for Java type declarations and the inheritance graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


class TypeKind:
    """Kinds of type declaration recognised in Java source."""

    CLASS = "class"
    ABSTRACT_CLASS = "abstract_class"
    INTERFACE = "interface"

    ALL = (CLASS, ABSTRACT_CLASS, INTERFACE)


class RelationKind:
    """Kinds of directed edge between two types."""

    EXTENDS_CLASS = "extends-class"
    IMPLEMENTS_INTERFACE = "implements-interface"
    EXTENDS_INTERFACE = "extends-interface"

    ALL = (EXTENDS_CLASS, IMPLEMENTS_INTERFACE, EXTENDS_INTERFACE)


@dataclass
class MethodSignature:
    """A method declared in a class or interface body."""

    name: str
    parameters: str  # raw parameter list text, e.g. "int a, String b"
    documentation: str = ""


@dataclass
class TypeDeclaration:
    """One class or interface found in a source file."""

    name: str
    kind: str
    superclass: str | None = None
    # Implemented interfaces for classes, extended interfaces for interfaces.
    interface_refs: list[str] = field(default_factory=list)
    methods: list[MethodSignature] = field(default_factory=list)
    source_file: str | None = None

    def __post_init__(self) -> None:
        if self.kind not in TypeKind.ALL:
            raise ValueError(f"Unknown type kind: {self.kind!r}")
        if self.kind == TypeKind.INTERFACE and self.superclass is not None:
            raise ValueError(f"Interface {self.name} cannot have a superclass")

    @property
    def is_interface(self) -> bool:
        return self.kind == TypeKind.INTERFACE


@dataclass(frozen=True)
class GraphNode:
    """A uniquely named type in the assembled graph."""

    id: str
    label: str
    kind: str
    origin_file: str | None = None
    methods: tuple[MethodSignature, ...] = ()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "label": self.label,
            "kind": self.kind,
            "originFile": self.origin_file,
            "methods": [
                {
                    "name": m.name,
                    "parameters": m.parameters,
                    "documentation": m.documentation,
                }
                for m in self.methods
            ],
        }


@dataclass(frozen=True)
class GraphEdge:
    """A directed, typed relationship between two types."""

    source: str
    target: str
    relation: str

    def to_dict(self) -> dict:
        return {"from": self.source, "to": self.target, "relationKind": self.relation}


@dataclass(frozen=True)
class InheritanceGraph:
    """Complete inheritance graph handed to renderers."""

    nodes: Mapping[str, GraphNode] = field(default_factory=dict)
    edges: tuple[GraphEdge, ...] = ()

    def __post_init__(self) -> None:
        # Freeze the node mapping; the graph is immutable once built.
        object.__setattr__(self, "nodes", MappingProxyType(dict(self.nodes)))
        object.__setattr__(self, "edges", tuple(self.edges))

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def to_dict(self) -> dict:
        return {
            "nodes": [node.to_dict() for node in self.nodes.values()],
            "edges": [edge.to_dict() for edge in self.edges],
        }
