"""
Host adapter for a live browser through Playwright's sync API
"""

from typing import Any, List, Optional

from playwright.sync_api import ElementHandle, JSHandle, Page

from .base import DomAdapter, NodeKind, QueryPass
from ..errors import HostContractError


# DOM nodeType constants
_NODE_KINDS = {
    1: NodeKind.ELEMENT,
    3: NodeKind.TEXT,
    9: NodeKind.DOCUMENT,
}

_SET_VALUE_SCRIPT = '''(el, value) => {
    el.value = value;
    el.dispatchEvent(new Event('input', { bubbles: true }));
    el.dispatchEvent(new Event('change', { bubbles: true }));
}'''


class PlaywrightAdapter(DomAdapter):
    """Reads a Page or ElementHandle. Every node read is a round trip to the browser."""

    name = 'playwright'

    def node_kind(self, node: Any) -> NodeKind:
        if isinstance(node, Page):
            return NodeKind.DOCUMENT
        if not isinstance(node, JSHandle):
            raise HostContractError(f"Not a Playwright handle: {node!r}")
        return _NODE_KINDS.get(node.evaluate('n => n.nodeType'), NodeKind.OTHER)

    def child_nodes(self, node: Any) -> List[Any]:
        if isinstance(node, Page):
            return [self.root_element(node)]

        array = node.evaluate_handle('n => Array.from(n.childNodes)')
        try:
            properties = array.get_properties()
            keys = sorted((key for key in properties if key.isdigit()), key=int)
            return [self._as_node(properties[key]) for key in keys]
        finally:
            array.dispose()

    def parent_element(self, node: Any) -> Optional[Any]:
        if isinstance(node, Page):
            return None
        handle = node.evaluate_handle('n => n.parentElement')
        element = handle.as_element()
        if element is None:
            handle.dispose()
            return None
        return self.track(element)

    def node_text(self, node: Any) -> str:
        if self.node_kind(node) is not NodeKind.TEXT:
            raise HostContractError(f"Expected a text node, got {node!r}")
        return node.evaluate('n => n.textContent') or ''

    def tag_name(self, element: Any) -> str:
        return element.evaluate('el => el.tagName.toLowerCase()')

    def get_attribute(self, element: Any, name: str) -> Optional[str]:
        return element.get_attribute(name)

    def root_element(self, root: Any) -> Any:
        if isinstance(root, Page):
            return self._as_node(root.evaluate_handle('() => document.documentElement'))
        return root

    def select(self, root: Any, selector: str) -> List[Any]:
        return [self.track(element) for element in root.query_selector_all(selector)]

    def rendered_text(self, element: Any) -> str:
        return element.inner_text()

    def display_value(self, element: Any) -> str:
        self.require_display_element(element)
        return element.input_value()

    def set_display_value(self, element: Any, value: str) -> None:
        self.require_display_element(element)
        element.evaluate(_SET_VALUE_SCRIPT, value)

    def release(self, finished: QueryPass) -> None:
        """Dispose every handle the pass created but did not return"""
        for handle in finished.discarded():
            handle.dispose()

    def outer_html(self, element: Any) -> str:
        return element.evaluate('el => el.outerHTML')

    def is_same_node(self, a: Any, b: Any) -> bool:
        if isinstance(a, Page) or isinstance(b, Page):
            return a is b
        return a.evaluate('(a, b) => a === b', b)

    def _as_node(self, handle: JSHandle) -> ElementHandle:
        node = handle.as_element()
        if node is None:
            handle.dispose()
            raise HostContractError(f"Handle does not reference a DOM node: {handle!r}")
        return self.track(node)
