"""
Text-node collection and text matching

A text query resolves each matching text node to its nearest element
ancestor. The ancestor's full rendered text decides the match, so
``<p>Hello <b>world</b></p>`` is found by "Hello world" through its first
text node.
"""

import logging
from typing import Any, Iterator, List

from .adapters.base import DomAdapter, NodeKind

logger = logging.getLogger(__name__)


def _walk(adapter: DomAdapter, node: Any) -> Iterator[Any]:
    kind = adapter.node_kind(node)
    if kind is NodeKind.TEXT:
        yield node
    elif kind is NodeKind.ELEMENT:
        for child in adapter.child_nodes(node):
            yield from _walk(adapter, child)


def collect_text_nodes(adapter: DomAdapter, root: Any) -> 'TextNodes':
    """Collect every text node under root, pre-order, in document order.

    Only element nodes are descended into; comments and other node kinds are
    skipped along with anything below them. A document root is replaced by
    its document element first.
    """
    if adapter.node_kind(root) is NodeKind.DOCUMENT:
        root = adapter.root_element(root)
    return TextNodes(adapter, list(_walk(adapter, root)))


def unique_nodes(adapter: DomAdapter, nodes: List[Any]) -> List[Any]:
    """Drop repeated nodes, keeping the first occurrence"""
    unique = []
    for node in nodes:
        if not any(adapter.is_same_node(node, seen) for seen in unique):
            unique.append(node)
    return unique


class TextNodes:
    """An ordered set of text nodes and the text queries over it"""

    def __init__(self, adapter: DomAdapter, nodes: List[Any], dedupe: bool = True):
        self.adapter = adapter
        self.nodes = nodes
        self.dedupe = dedupe

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes)

    def texts(self) -> List[str]:
        return [self.adapter.node_text(node) for node in self.nodes]

    def join_text(self, separator: str = '') -> str:
        return separator.join(self.texts())

    def find_parents_exact(self, text: str) -> List[Any]:
        """Elements whose rendered text equals text exactly"""
        parents = []
        for node in self.nodes:
            parent = self.adapter.parent_element(node)
            if parent is not None and self.adapter.rendered_text(parent) == text:
                parents.append(parent)
        return self._finish(parents)

    def find_parents_containing(self, text: str) -> List[Any]:
        """Elements whose rendered text contains text, reached through a text node that contains it"""
        parents = []
        for node in self.nodes:
            if text not in self.adapter.node_text(node):
                continue
            parent = self.adapter.parent_element(node)
            if parent is not None and text in self.adapter.rendered_text(parent):
                parents.append(parent)
        return self._finish(parents)

    def _finish(self, parents: List[Any]) -> List[Any]:
        if not self.dedupe:
            return parents
        unique = unique_nodes(self.adapter, parents)
        if len(unique) != len(parents):
            logger.debug("Dropped %d repeated text match(es)", len(parents) - len(unique))
        return unique
