"""Extract method signatures and their doc comments from a declaration body."""

from __future__ import annotations

import bisect
import logging
import re

from inheritzoom.extractors.java._patterns import (
    GENERIC,
    class_header,
    interface_header,
)
from inheritzoom.extractors.java.normalize import literal_spans, normalize_source
from inheritzoom.model import MethodSignature, TypeKind

logger = logging.getLogger(__name__)

DOC_SCOPE_DECLARATION = "declaration"
DOC_SCOPE_FILE = "file"
DOC_SCOPES = (DOC_SCOPE_DECLARATION, DOC_SCOPE_FILE)

# Words that can precede "name(" in a statement but are never a return type.
_NOT_A_TYPE = frozenset(
    {
        "new", "return", "throw", "else", "case", "yield", "assert", "goto",
        "if", "for", "while", "switch", "catch", "synchronized", "do", "try",
        "public", "protected", "private", "static", "final", "abstract",
        "native", "default", "strictfp", "transient", "volatile", "class",
        "interface", "enum", "extends", "implements", "throws", "import",
        "package", "instanceof", "super", "this",
    }
)

_METHOD_HEADER = (
    r"(?<![\w$.])"
    r"(?P<modifiers>(?:(?:public|protected|private|static|final|abstract"
    r"|synchronized|native|default|strictfp)\s+)*)"
    rf"(?:{GENERIC}\s*)?"  # optional type parameters
    rf"(?P<return_type>[\w$]+(?:\.[\w$]+)*(?:\s*{GENERIC})?(?:\s*\[\s*\])*)\s+"
    r"(?P<name>[\w$]+)\s*\((?P<params>[^()]*)\)"
    r"(?:\s*\[\s*\])*"
    r"\s*(?:throws\s+[\w$.,\s]+?)?"
    r"\s*[{;]"
)
_METHOD_RE = re.compile(_METHOD_HEADER)

# Doc comment, then annotations, then a method header.
_DOC_METHOD_RE = re.compile(
    r"/\*\*(?P<doc>(?:[^*]|\*(?!/))*)\*/\s*"
    r"(?:@[\w$.]+(?:\s*\([^()]*\))?\s*)*"
    + _METHOD_HEADER
)

_DOC_LINE_PREFIX_RE = re.compile(r"^[ \t]*\*?[ \t]?", re.MULTILINE)


def _header_pattern(name: str, kind: str) -> re.Pattern:
    escaped = re.escape(name)
    if kind == TypeKind.INTERFACE:
        header = interface_header(escaped)
    else:
        header = class_header(escaped)
    # Anything up to the opening brace (permits clauses, odd spacing).
    return re.compile(header + r"[^{;]*\{")


def _first_code_match(pattern: re.Pattern, source: str) -> re.Match | None:
    # Skip matches that start inside a comment or literal.
    spans = literal_spans(source)
    starts = [s for s, _ in spans]
    pos = 0
    while True:
        m = pattern.search(source, pos)
        if m is None:
            return None
        i = bisect.bisect_right(starts, m.start()) - 1
        if i < 0 or m.start() >= spans[i][1]:
            return m
        # The rejected match may run past the literal; resume right after its start.
        pos = m.start() + 1


def find_body_span(source: str, name: str, kind: str) -> tuple[int, int] | None:
    """Return ``(start, end)`` of the declaration body, excluding its braces.

    Uses the first header for *name* in *source* that is not inside a comment
    or literal, then a plain brace-depth walk over the raw text.
    Returns None when the header or the matching closing brace is missing.
    """
    m = _first_code_match(_header_pattern(name, kind), source)
    if m is None:
        return None

    start = m.end()
    depth = 1
    for pos in range(start, len(source)):
        ch = source[pos]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return start, pos
    return None


def clean_doc_comment(raw: str) -> str:
    """Strip leading '*' decoration from the inside of a /** ... */ comment."""
    lines = _DOC_LINE_PREFIX_RE.sub("", raw).strip().splitlines()
    return "\n".join(line.rstrip() for line in lines)


def build_doc_lookup(text: str) -> dict[str, str]:
    """Map method names to the doc comment directly preceding them in *text*.

    The first documented overload of a name wins.
    """
    docs: dict[str, str] = {}
    for m in _DOC_METHOD_RE.finditer(text):
        if m.group("return_type") in _NOT_A_TYPE:
            continue
        docs.setdefault(m.group("name"), clean_doc_comment(m.group("doc")))
    return docs


def iter_method_headers(body: str):
    """Yield ``(name, params)`` for each method header in *body*."""
    for m in _METHOD_RE.finditer(body):
        return_type = m.group("return_type")
        if return_type in _NOT_A_TYPE or m.group("name") in _NOT_A_TYPE:
            continue
        yield m.group("name"), m.group("params")


def extract_methods(
    source: str,
    name: str,
    kind: str,
    doc_scope: str = DOC_SCOPE_DECLARATION,
) -> list[MethodSignature]:
    """Return the methods declared in the body of type *name* in *source*.

    Constructors are skipped. With ``doc_scope="file"`` documentation is
    looked up across the whole file, so same-named methods of different types
    in one file can share a comment; the default looks only inside the body.
    Any failure is logged and yields an empty list.
    """
    try:
        span = find_body_span(source, name, kind)
        if span is None:
            logger.debug("No balanced body found for %s", name)
            return []

        body = source[span[0]:span[1]]
        doc_text = source if doc_scope == DOC_SCOPE_FILE else body
        docs = build_doc_lookup(doc_text)

        methods: list[MethodSignature] = []
        for method_name, params in iter_method_headers(normalize_source(body)):
            if method_name == name:
                continue
            methods.append(
                MethodSignature(
                    name=method_name,
                    parameters=params,
                    documentation=docs.get(method_name, ""),
                )
            )
        return methods
    except Exception as e:
        logger.warning("Could not extract methods of %s: %s", name, e)
        return []
