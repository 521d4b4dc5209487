"""
The tree cleaner: drops <script> and <style> subtrees and clears the
attributes of every remaining element, keeping everything else in order.
"""

import logging

from html_skeleton.nodes import NodeKind, is_container, node_kind

logger = logging.getLogger(__name__)

DROPPED_KINDS = frozenset({NodeKind.SCRIPT, NodeKind.STYLE})


def strip_and_clean(nodes):
    """
    Cleans a sequence of sibling nodes, recursing into containers.

    Dropped nodes are extracted from their parent, so after the call the
    parent's children are exactly the returned survivors.

    Args:
        nodes: An ordered sequence of sibling nodes (e.g. ``soup.contents``).

    Returns:
        list: The surviving nodes, in their original order.
    """
    survivors = []

    # Iterate over a copy, extract() mutates the parent's contents list
    for node in list(nodes):
        kind = node_kind(node)

        if kind in DROPPED_KINDS:
            logger.debug("Dropping <%s> subtree", node.name)
            node.extract()
            continue

        if kind is NodeKind.ELEMENT:
            node.attrs = {}

        if is_container(node):
            strip_and_clean(node.contents)

        survivors.append(node)

    return survivors
