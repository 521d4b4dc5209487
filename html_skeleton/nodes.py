"""
Node kinds for a parsed BeautifulSoup tree.

BeautifulSoup already gives every kind of node its own class (Tag,
Comment, Doctype, ...). NodeKind is the discriminant used by the cleaner
so it never has to care which class a node happens to be.
"""

import enum

from bs4 import BeautifulSoup
from bs4.element import (
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)


class NodeKind(enum.Enum):
    DOCUMENT = "document"
    ELEMENT = "element"
    SCRIPT = "script"
    STYLE = "style"
    TEXT = "text"
    COMMENT = "comment"
    CDATA = "cdata"
    DOCTYPE = "doctype"
    DECLARATION = "declaration"
    PROCESSING_INSTRUCTION = "processing_instruction"


# Tag names that get their own kind instead of ELEMENT
_SPECIAL_TAGS = {
    'script': NodeKind.SCRIPT,
    'style': NodeKind.STYLE,
}

# Checked in order; Tag subclasses and string subclasses never overlap
_STRING_KINDS = (
    (Comment, NodeKind.COMMENT),
    (CData, NodeKind.CDATA),
    (Doctype, NodeKind.DOCTYPE),
    (Declaration, NodeKind.DECLARATION),
    (ProcessingInstruction, NodeKind.PROCESSING_INSTRUCTION),
)


def node_kind(node):
    """Return the NodeKind of a node from a BeautifulSoup tree."""
    if isinstance(node, BeautifulSoup):
        return NodeKind.DOCUMENT

    if isinstance(node, Tag):
        return _SPECIAL_TAGS.get((node.name or '').lower(), NodeKind.ELEMENT)

    for cls, kind in _STRING_KINDS:
        if isinstance(node, cls):
            return kind

    if isinstance(node, NavigableString):
        return NodeKind.TEXT

    raise TypeError(f"Not a document node: {type(node).__name__}")


def is_container(node):
    """True for nodes that carry an ordered list of children."""
    return isinstance(node, Tag)
