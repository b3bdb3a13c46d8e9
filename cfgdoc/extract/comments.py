"""Doc comment recovery for Go declarations.

Comments are extras in the tree-sitter grammar, so they show up as sibling
nodes of the declarations they document. A node's doc comment is the group of
adjacent comments ending on the line right above it, the way ``go/parser``
assigns lead comments.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional

from tree_sitter import Node

from ..source_scanner import node_text

_COMMENT = "comment"
_DEFAULT_PREFIX = "default: "
_DIRECTIVE = re.compile(r"^[a-z0-9]+:[a-z0-9]")
_DIRECTIVE_PREFIXES = ("line ", "extern ", "export ")
_LINE_TERMINATORS = {"\n", "\r\n"}


def comment_group(node: Node) -> List[Node]:
    """Return the comment nodes documenting ``node``, in source order."""
    group: List[Node] = []
    expected_row = node.start_point[0]
    sibling = node.prev_named_sibling
    while sibling is not None and sibling.type == _COMMENT:
        end_row = sibling.end_point[0]
        if not group and end_row != expected_row - 1:
            break
        if end_row + 1 < expected_row:
            break
        group.append(sibling)
        expected_row = sibling.start_point[0]
        sibling = sibling.prev_named_sibling

    # A comment sharing a line with the preceding token, including an opening
    # brace or parenthesis, trails that line.
    if group:
        token = _preceding_token(group[-1])
        if token is not None and token.end_point[0] == group[-1].start_point[0]:
            group.pop()

    group.reverse()
    return group


def _preceding_token(node: Node) -> Optional[Node]:
    token = node.prev_sibling
    while token is not None and token.type in _LINE_TERMINATORS:
        token = token.prev_sibling
    return token


def lead_comment(node: Node, source_bytes: bytes) -> str:
    """Return the doc comment text attached directly to ``node``, or ""."""
    return comment_text(node_text(comment, source_bytes) for comment in comment_group(node))


def comment_text(comments: Iterable[str]) -> str:
    """Return comment text with markers removed, like ``ast.CommentGroup.Text``.

    Comment markers and the single space after ``//`` are removed, compiler
    directives are dropped, trailing whitespace is stripped from each line,
    blank line runs collapse to one, and leading and trailing blank lines are
    removed. Non-empty results end with a newline.
    """
    lines: List[str] = []
    for raw in comments:
        if raw.startswith("//"):
            text = raw[2:]
            if text.startswith(" "):
                text = text[1:]
            elif _is_directive(text):
                continue
        elif raw.startswith("/*"):
            text = raw[2:-2]
        else:
            text = raw
        lines.extend(line.rstrip() for line in text.split("\n"))

    kept: List[str] = []
    for line in lines:
        if line or (kept and kept[-1]):
            kept.append(line)
    if kept and kept[-1]:
        kept.append("")
    return "\n".join(kept)


def _is_directive(text: str) -> bool:
    if text.startswith(_DIRECTIVE_PREFIXES):
        return True
    return bool(_DIRECTIVE.match(text))


def default_value(doc: str) -> str:
    """Return the value declared by the first ``Default: `` line of ``doc``."""
    for line in doc.split("\n"):
        if line.lower().startswith(_DEFAULT_PREFIX):
            return line[len(_DEFAULT_PREFIX) :]
    return ""


class ProbableNames:
    """Maps a type name guessed from a free-standing comment to that comment.

    This is a heuristic for gochan's comment style: a comment block above a
    ``const``/``var`` group often starts with the name of a type declared
    later in the same file. The first word of the comment is taken as that
    name. It is only consulted for types without a comment of their own.
    """

    def __init__(self) -> None:
        self._docs: Dict[str, str] = {}

    def register(self, doc: str) -> None:
        first_space = doc.find(" ")
        if first_space > 0:
            self._docs[doc[:first_space]] = doc

    def lookup(self, name: str) -> str:
        return self._docs.get(name, "")


def resolve_type_doc(direct_doc: str, name: str, probable: ProbableNames) -> str:
    """Prefer the comment attached to the declaration, then the heuristic."""
    if direct_doc:
        return direct_doc
    return probable.lookup(name)


__all__ = [
    "ProbableNames",
    "comment_group",
    "comment_text",
    "default_value",
    "lead_comment",
    "resolve_type_doc",
]
