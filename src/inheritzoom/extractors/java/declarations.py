"""Find class and interface declarations in normalized Java source."""

from __future__ import annotations

import heapq
import logging
import re
from typing import Iterator

from inheritzoom.extractors.java._patterns import (
    class_header,
    interface_header,
    simplify_type,
    split_type_list,
)
from inheritzoom.model import TypeDeclaration, TypeKind

logger = logging.getLogger(__name__)

_CLASS_RE = re.compile(class_header())
_INTERFACE_RE = re.compile(interface_header())


def _class_from_match(m: re.Match) -> TypeDeclaration:
    modifiers = m.group("modifiers").split()
    kind = TypeKind.ABSTRACT_CLASS if "abstract" in modifiers else TypeKind.CLASS
    superclass = simplify_type(m.group("superclass")) if m.group("superclass") else None
    return TypeDeclaration(
        name=m.group("name"),
        kind=kind,
        superclass=superclass or None,
        interface_refs=split_type_list(m.group("interfaces")),
    )


def _interface_from_match(m: re.Match) -> TypeDeclaration:
    return TypeDeclaration(
        name=m.group("name"),
        kind=TypeKind.INTERFACE,
        interface_refs=split_type_list(m.group("interfaces")),
    )


def iter_declarations(normalized: str) -> Iterator[TypeDeclaration]:
    """Yield declarations from *normalized* source in order of appearance.

    Each call runs fresh ``finditer`` sweeps, so the generator holds no state
    shared with other calls. Nested types come out as separate, unqualified
    declarations.
    """
    classes = ((m.start(), _class_from_match, m) for m in _CLASS_RE.finditer(normalized))
    interfaces = (
        (m.start(), _interface_from_match, m)
        for m in _INTERFACE_RE.finditer(normalized)
    )
    # A position can only start one kind of header, so the key never ties.
    for _, build, m in heapq.merge(classes, interfaces, key=lambda item: item[0]):
        yield build(m)


def scan_declarations(normalized: str) -> list[TypeDeclaration]:
    """Return all declarations in *normalized* source (methods not populated)."""
    declarations = list(iter_declarations(normalized))
    logger.debug("Scanned %d declarations", len(declarations))
    return declarations
