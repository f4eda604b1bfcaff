"""
Host adapter interface - the tree-read API the query engine consumes
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from enum import Enum
from typing import Any, Iterator, List, Optional

from ..errors import HostContractError


class NodeKind(Enum):
    """Node kinds the engine distinguishes"""
    ELEMENT = 'element'
    TEXT = 'text'
    DOCUMENT = 'document'
    OTHER = 'other'


# Elements that carry a user-editable display value
DISPLAY_VALUE_TAGS = ('input', 'textarea', 'select')


class QueryPass:
    """Node references created while one query runs, and the ones handed back to the caller"""

    def __init__(self):
        self.created: List[Any] = []
        self.kept: List[Any] = []

    def keep(self, nodes: List[Any]) -> List[Any]:
        self.kept.extend(nodes)
        return nodes

    def discarded(self) -> List[Any]:
        return [node for node in self.created if not any(node is kept for kept in self.kept)]


class DomAdapter(ABC):
    """Read access to a host document tree.

    The engine never creates, mutates or destroys nodes through this
    interface, with the single exception of ``set_display_value`` which is
    only reachable from ``TestElement``.
    """

    name = 'adapter'
    _pass: Optional[QueryPass] = None

    @abstractmethod
    def node_kind(self, node: Any) -> NodeKind:
        """Classify a node"""
        pass

    @abstractmethod
    def child_nodes(self, node: Any) -> List[Any]:
        """Ordered children of a node, text nodes included"""
        pass

    @abstractmethod
    def parent_element(self, node: Any) -> Optional[Any]:
        """Nearest element ancestor of a node, or None"""
        pass

    @abstractmethod
    def node_text(self, node: Any) -> str:
        """Own content of a text node"""
        pass

    @abstractmethod
    def tag_name(self, element: Any) -> str:
        """Lower-case tag name"""
        pass

    @abstractmethod
    def get_attribute(self, element: Any, name: str) -> Optional[str]:
        pass

    @abstractmethod
    def root_element(self, root: Any) -> Any:
        """Document element of a document root, the root itself otherwise"""
        pass

    @abstractmethod
    def select(self, root: Any, selector: str) -> List[Any]:
        """querySelectorAll: elements under root matching a CSS selector"""
        pass

    @abstractmethod
    def display_value(self, element: Any) -> str:
        pass

    @abstractmethod
    def set_display_value(self, element: Any, value: str) -> None:
        pass

    @abstractmethod
    def outer_html(self, element: Any) -> str:
        pass

    @abstractmethod
    def is_same_node(self, a: Any, b: Any) -> bool:
        pass

    @contextmanager
    def query_pass(self) -> Iterator[QueryPass]:
        """Scope of one query. Nested passes join the outer one; on exit the
        adapter may free every node reference the pass created and did not keep."""
        if self._pass is not None:
            yield self._pass
            return
        self._pass = QueryPass()
        try:
            yield self._pass
        finally:
            finished, self._pass = self._pass, None
            self.release(finished)

    def track(self, node: Any) -> Any:
        """Record a node reference created during the current pass"""
        if self._pass is not None:
            self._pass.created.append(node)
        return node

    def release(self, finished: QueryPass) -> None:
        """Free the references a finished pass discarded. Hosts with plain
        in-process nodes have nothing to free."""
        pass

    def iter_elements(self, root: Any) -> List[Any]:
        """Every element under root in document order"""
        return self.select(root, '*')

    def rendered_text(self, element: Any) -> str:
        """Text of an element as a user reads it"""
        from ..text_nodes import collect_text_nodes
        return collect_text_nodes(self, element).join_text()

    def require_display_element(self, element: Any) -> str:
        """Return the tag name, or fail if the element has no display value"""
        tag_name = self.tag_name(element)
        if tag_name not in DISPLAY_VALUE_TAGS:
            raise HostContractError(
                f"Expecting an input, textarea, or select element to use the display value, got <{tag_name}>. "
                "If you want a non-display value attribute read it with get_attribute()."
            )
        return tag_name
