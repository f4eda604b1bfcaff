"""
Query facade - every get_by_* / get_all_by_* operation, for anything that holds a root

A class gains the whole query surface by implementing ``HoldsElement.element``
and mixing in ``DomQuery``::

    class CheckoutPage(DomQuery):
        def __init__(self, page):
            self.page = page

        def element(self):
            return DocumentWrapper(self.page)

    CheckoutPage(page).get_by_label("Card number")
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, List, Optional

from .adapters import DomAdapter, adapter_for
from .config import QueryConfig
from .finder import QueryEngine, default_engine

if TYPE_CHECKING:
    from .element import TestElement


class HoldsElement(ABC):
    """Anything that can hand out a root to query against"""

    @abstractmethod
    def element(self) -> 'ElementWrapper':
        pass


class DomQuery(HoldsElement):
    """The get_by_X series tries to get exactly one element by method of X.
    They raise NotFound when nothing matches and MoreThanOne when several do.
    The get_all_by_X series returns a list of zero or more elements and never raises.
    """

    def get_by_text(self, text: str) -> 'TestElement':
        """Get the element whose rendered text matches text exactly.
        See get_by_text_contains for a non-exact matching method."""
        return self.element().find_one('by_text', text)

    def get_all_by_text(self, text: str) -> List['TestElement']:
        """Get all elements whose rendered text matches text exactly"""
        return self.element().find_all('by_text', text)

    def get_by_text_contains(self, text: str) -> 'TestElement':
        """Get the element whose rendered text contains text, i.e. "abc" contains "a".
        See get_by_text for an exact matcher."""
        return self.element().find_one('by_text_contains', text)

    def get_all_by_text_contains(self, text: str) -> List['TestElement']:
        return self.element().find_all('by_text_contains', text)

    def get_by_id(self, id: str) -> 'TestElement':
        """Get an element by its id, matches exactly. See get_by_id_contains for non-exact matching."""
        return self.element().find_one('by_id', id)

    def get_all_by_id(self, id: str) -> List['TestElement']:
        return self.element().find_all('by_id', id)

    def get_by_id_contains(self, id: str) -> 'TestElement':
        """Get the element whose id contains id"""
        return self.element().find_one('by_id_contains', id)

    def get_all_by_id_contains(self, id: str) -> List['TestElement']:
        return self.element().find_all('by_id_contains', id)

    def get_by_label(self, text: str) -> 'TestElement':
        """Get the element a label with exactly this text points to.

        For ``<label for="field">Name</label><input id="field"/>`` the input is
        returned for "Name". A label whose target id is missing or shared
        raises the by_id error of that id. To find the label itself use
        get_by_text.
        """
        return self.element().find_one('by_label', text)

    def get_all_by_label(self, text: str) -> List['TestElement']:
        """Get every element pointed to by a label with exactly this text.
        Labels whose target cannot be resolved to one element are skipped."""
        return self.element().find_all('by_label', text)

    def get_by_label_contains(self, text: str) -> 'TestElement':
        return self.element().find_one('by_label_contains', text)

    def get_all_by_label_contains(self, text: str) -> List['TestElement']:
        return self.element().find_all('by_label_contains', text)

    def get_by_display_value(self, value: str) -> 'TestElement':
        """Get the input, textarea or select element whose display value is value.
        Elements with a non-display value attribute (option, progress, li, ...) never match."""
        return self.element().find_one('by_display_value', value)

    def get_all_by_display_value(self, value: str) -> List['TestElement']:
        return self.element().find_all('by_display_value', value)

    def get_by_display_value_contains(self, value: str) -> 'TestElement':
        return self.element().find_one('by_display_value_contains', value)

    def get_all_by_display_value_contains(self, value: str) -> List['TestElement']:
        return self.element().find_all('by_display_value_contains', value)

    def get_by_role(self, role: str) -> 'TestElement':
        """Get the element with this ARIA role attribute"""
        return self.element().find_one('by_role', role)

    def get_all_by_role(self, role: str) -> List['TestElement']:
        return self.element().find_all('by_role', role)

    def get_by_placeholder(self, placeholder: str) -> 'TestElement':
        """Get the input or textarea whose placeholder matches exactly"""
        return self.element().find_one('by_placeholder', placeholder)

    def get_all_by_placeholder(self, placeholder: str) -> List['TestElement']:
        return self.element().find_all('by_placeholder', placeholder)

    def get_by_placeholder_contains(self, placeholder: str) -> 'TestElement':
        """Get the input or textarea whose placeholder contains placeholder"""
        return self.element().find_one('by_placeholder_contains', placeholder)

    def get_all_by_placeholder_contains(self, placeholder: str) -> List['TestElement']:
        return self.element().find_all('by_placeholder_contains', placeholder)


class ElementWrapper(DomQuery):
    """Queries the subtree under one element"""

    def __init__(self, node: Any, adapter: Optional[DomAdapter] = None,
                 config: Optional[QueryConfig] = None, engine: Optional[QueryEngine] = None):
        self.node = node
        self.adapter = adapter or adapter_for(node)
        self.config = config or QueryConfig()
        self.engine = engine or default_engine

    def element(self) -> 'ElementWrapper':
        return self

    def find_one(self, strategy: str, query: str) -> 'TestElement':
        node = self.engine.find_one(strategy, self.adapter, self.node, query, self.config)
        return self.wrap(node)

    def find_all(self, strategy: str, query: str) -> List['TestElement']:
        nodes = self.engine.find_all(strategy, self.adapter, self.node, query, self.config)
        return [self.wrap(node) for node in nodes]

    def wrap(self, node: Any) -> 'TestElement':
        from .element import TestElement
        return TestElement(node, self.adapter, self.config, self.engine)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.node!r})"


class DocumentWrapper(ElementWrapper):
    """Queries a whole document"""

    def body(self) -> 'TestElement':
        bodies = self.adapter.select(self.node, 'body')
        if not bodies:
            raise ValueError("Document has no <body>")
        return self.wrap(bodies[0])

    def body_string(self) -> str:
        """Markup of the body, handy in failure messages"""
        return self.body().as_html_string()
