"""Regex fragments shared by the Java declaration and member scanners."""

from __future__ import annotations

import re

# Type arguments with up to two levels of nesting: <K, List<V>>, <T extends Comparable<T>>.
GENERIC = r"<(?:[^<>{};]|<(?:[^<>{};]|<[^<>{};]*>)*>)*>"

# A possibly qualified, possibly parameterised type reference.
TYPE_REF = rf"[\w$]+(?:\.[\w$]+)*(?:\s*{GENERIC})?"

# Comma-separated list of type references (implements / interface extends).
TYPE_LIST = rf"{TYPE_REF}(?:\s*,\s*{TYPE_REF})*"

# Not preceded by an identifier character, a dot (Foo.class) or @ (@interface).
HEADER_START = r"(?<![\w$.@])"

CLASS_MODIFIERS = (
    r"(?P<modifiers>(?:(?:public|protected|private|abstract|final|static"
    r"|strictfp|sealed|non-sealed)\s+)*)"
)

INTERFACE_MODIFIERS = (
    r"(?:(?:public|protected|private|abstract|static|strictfp|sealed"
    r"|non-sealed)\s+)*"
)


def class_header(name: str = r"[\w$]+") -> str:
    """Build a class header pattern, optionally pinned to one type name."""
    return (
        HEADER_START
        + CLASS_MODIFIERS
        + rf"class\s+(?P<name>{name})(?![\w$])"
        + rf"(?:\s*{GENERIC})?"
        + rf"(?:\s+extends\s+(?P<superclass>{TYPE_REF}))?"
        + rf"(?:\s+implements\s+(?P<interfaces>{TYPE_LIST}))?"
    )


def interface_header(name: str = r"[\w$]+") -> str:
    """Build an interface header pattern, optionally pinned to one type name."""
    return (
        HEADER_START
        + INTERFACE_MODIFIERS
        + rf"interface\s+(?P<name>{name})(?![\w$])"
        + rf"(?:\s*{GENERIC})?"
        + rf"(?:\s+extends\s+(?P<interfaces>{TYPE_LIST}))?"
    )


def simplify_type(type_str: str) -> str:
    """Simplify a Java type like 'java.util.List<String>' to 'List'."""
    # Remove generics, innermost first
    result = type_str
    while True:
        stripped = re.sub(r"<[^<>]*>", "", result)
        if stripped == result:
            break
        result = stripped
    result = result.strip()
    # Take just the class name (last dot-segment)
    if "." in result:
        result = result.rsplit(".", 1)[1]
    return result


def split_type_list(text: str | None) -> list[str]:
    """Split 'A, b.B<X, Y>, C' into simple names, ignoring commas inside generics."""
    if not text:
        return []
    names: list[str] = []
    buf: list[str] = []
    depth = 0
    for ch in text:
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth = max(0, depth - 1)
        elif ch == "," and depth == 0:
            names.append("".join(buf))
            buf = []
            continue
        buf.append(ch)
    names.append("".join(buf))
    return [n for n in (simplify_type(part) for part in names) if n]
