"""
TestElement - the handle returned by every query
"""

from typing import Callable, Optional, TypeVar

from .dom_query import ElementWrapper
from .text_nodes import collect_text_nodes

T = TypeVar('T')


class TestElement(ElementWrapper):
    """A found element.

    Equality is identity of the underlying host node. A TestElement is itself
    queryable, so ``form.get_by_label("Name")`` only searches inside ``form``.
    """

    # Keep pytest from collecting this class
    __test__ = False

    def __eq__(self, other):
        if not isinstance(other, TestElement):
            return NotImplemented
        return self.adapter.is_same_node(self.node, other.node)

    __hash__ = None

    @property
    def tag_name(self) -> str:
        return self.adapter.tag_name(self.node)

    def get_attribute(self, name: str) -> Optional[str]:
        return self.adapter.get_attribute(self.node, name)

    def parent(self) -> Optional['TestElement']:
        parent = self.adapter.parent_element(self.node)
        return self.wrap(parent) if parent is not None else None

    def display_text(self) -> str:
        """The text the user would see, across every text node of the element"""
        with self.adapter.query_pass():
            return collect_text_nodes(self.adapter, self.node).join_text()

    def parse(self, convert: Callable[[str], T]) -> T:
        """Convert the display text, e.g. ``counter.parse(int)``. Conversion errors propagate."""
        return convert(self.display_text())

    @property
    def display_value(self) -> str:
        return self.adapter.display_value(self.node)

    def set_display_value(self, value: str) -> None:
        """Set the value of an input, textarea or select element.

        Any other element raises HostContractError; use the host API to set a
        non-display value attribute.
        """
        self.adapter.set_display_value(self.node, value)

    def as_html_string(self) -> str:
        return self.adapter.outer_html(self.node)

    def __repr__(self):
        return f"TestElement(<{self.tag_name}>)"
