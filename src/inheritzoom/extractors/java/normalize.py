"""Strip comments and neutralise literals in Java source before scanning."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# One alternation so that literals and comments are recognised in a single
# left-to-right pass: "http://x" is a string, '"' is a char literal.
# Text blocks go first so that """ is not read as "" followed by ".
_TOKEN_RE = re.compile(
    r'(?P<text_block>"""(?:\\.|[^\\])*?""")'
    r'|(?P<string>"(?:\\.|[^"\\\n])*")'
    r"|(?P<char>'(?:\\.|[^'\\\n])+')"
    r"|(?P<block>/\*.*?(?:\*/|\Z))"
    r"|(?P<line>//[^\n]*)",
    re.DOTALL,
)

STRING_PLACEHOLDER = '""'


def _replace(match: re.Match) -> str:
    kind = match.lastgroup
    if kind == "string":
        return STRING_PLACEHOLDER
    if kind == "text_block":
        return STRING_PLACEHOLDER + "\n" * match.group().count("\n")
    if kind == "char":
        return "' '"
    if kind == "block":
        # Keep the line count so later positions stay on the same line.
        return " " + "\n" * match.group().count("\n")
    return ""


def normalize_source(source: str) -> str:
    """Return *source* with comments removed and literal contents replaced.

    String literals and ``\"\"\"`` text blocks become ``""`` and character
    literals ``' '``, so braces, quotes and keywords inside them cannot confuse
    the pattern scanners. Block comments and text blocks keep the newlines
    they contained.
    An unterminated block comment runs to the end of the text.
    """
    try:
        return _TOKEN_RE.sub(_replace, source)
    except Exception as e:  # best-effort filter: never fail the caller
        logger.debug("Could not normalize source, using it as-is: %s", e)
        return source


def literal_spans(source: str) -> list[tuple[int, int]]:
    """Return the ``(start, end)`` offsets of every comment and literal in *source*."""
    return [m.span() for m in _TOKEN_RE.finditer(source)]
