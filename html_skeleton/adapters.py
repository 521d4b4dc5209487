"""
Thin wrappers around BeautifulSoup: text -> tree and tree -> text.
"""

import re
import warnings

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

DEFAULT_PARSER = 'html.parser'

# html.parser keeps fragments as they are; lxml wraps them in <html><body>
PARSERS = ('html.parser', 'lxml')

_RE_NON_ASCII = re.compile(r'[^\x00-\x7f]')


class WhitespacePreservingSoup(BeautifulSoup):
    """
    A BeautifulSoup that keeps whitespace-only strings as they were.

    BeautifulSoup shrinks whitespace-only strings to a single space or
    newline unless they sit inside <pre> or <textarea>. Seeding the
    preserve-whitespace stack with the document itself makes the whole
    tree behave like <pre>.
    """

    def reset(self):
        super().reset()
        self.preserve_whitespace_tag_stack.append(self)


def substitute_skeleton(value):
    """Escapes &, < and > and writes non-ASCII characters as &#x..; references."""
    value = EntitySubstitution.substitute_xml(value)
    return _RE_NON_ASCII.sub(lambda m: f'&#x{ord(m.group()):x};', value)


# Write void elements as <br>, not <br/>
SKELETON_FORMATTER = HTMLFormatter(
    entity_substitution=substitute_skeleton,
    void_element_close_prefix=None,
)


def parse_document(html_content, parser=DEFAULT_PARSER):
    """Parses HTML text into a BeautifulSoup tree, whitespace untouched."""
    if parser not in PARSERS:
        raise ValueError(f"Unsupported parser '{parser}' (choose from: {', '.join(PARSERS)})")

    with warnings.catch_warnings():
        # Input is always markup, even when it looks like a path or URL
        warnings.simplefilter('ignore', MarkupResemblesLocatorWarning)
        return WhitespacePreservingSoup(html_content, parser)


def serialize(soup):
    """Serializes a BeautifulSoup tree back to HTML text."""
    return soup.decode(formatter=SKELETON_FORMATTER)
