"""
DOM Testing

Find elements in a rendered document the way a user does: by visible text,
label, displayed value, ARIA role, placeholder or id. Every strategy comes in
a get_by_* form that expects exactly one match and a get_all_by_* form that
returns every match.
"""

from .adapters import DomAdapter, NodeKind, LxmlAdapter, PlaywrightAdapter, adapter_for
from .base import QueryContext, QueryStrategy, SelectorStrategy
from .config import QueryConfig
from .errors import GetOneError, NotFound, MoreThanOne, HostContractError, QueryDescriptor
from .reducer import get_one
from .text_nodes import collect_text_nodes, TextNodes
from .finder import QueryEngine
from .dom_query import HoldsElement, DomQuery, ElementWrapper, DocumentWrapper
from .element import TestElement
from .render import TestRender, render_html, render_page

__all__ = [
    'DomAdapter',
    'NodeKind',
    'LxmlAdapter',
    'PlaywrightAdapter',
    'adapter_for',
    'QueryContext',
    'QueryStrategy',
    'SelectorStrategy',
    'QueryConfig',
    'GetOneError',
    'NotFound',
    'MoreThanOne',
    'HostContractError',
    'QueryDescriptor',
    'get_one',
    'collect_text_nodes',
    'TextNodes',
    'QueryEngine',
    'HoldsElement',
    'DomQuery',
    'ElementWrapper',
    'DocumentWrapper',
    'TestElement',
    'TestRender',
    'render_html',
    'render_page',
]
