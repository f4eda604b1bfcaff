"""
Host adapters: how the query engine reads a document tree
"""

from lxml import etree
from playwright.sync_api import JSHandle, Page

from .base import DomAdapter, NodeKind, QueryPass, DISPLAY_VALUE_TAGS
from .lxml_adapter import LxmlAdapter, LxmlTextNode
from .playwright_adapter import PlaywrightAdapter

__all__ = [
    'DomAdapter',
    'NodeKind',
    'QueryPass',
    'DISPLAY_VALUE_TAGS',
    'LxmlAdapter',
    'LxmlTextNode',
    'PlaywrightAdapter',
    'adapter_for',
]


def adapter_for(node) -> DomAdapter:
    """Pick the host adapter that can read node"""
    if isinstance(node, (etree._Element, etree._ElementTree, LxmlTextNode)):
        return LxmlAdapter()
    if isinstance(node, (Page, JSHandle)):
        return PlaywrightAdapter()
    raise TypeError(f"No adapter for {type(node).__name__}; pass one explicitly")
