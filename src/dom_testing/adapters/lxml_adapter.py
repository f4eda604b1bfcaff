"""
Host adapter for lxml.html trees

lxml keeps character data in ``.text``/``.tail`` slots instead of text-node
objects, so this adapter hands out ``LxmlTextNode`` values addressing those
slots. Comment and processing-instruction children are OTHER nodes whose tails
still belong to the parent element.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, List, Optional

import lxml.html
from lxml import etree
from lxml.cssselect import CSSSelector

from .base import DomAdapter, NodeKind
from ..errors import HostContractError


@dataclass(frozen=True)
class LxmlTextNode:
    """A text node: ``owner.text`` or, when ``is_tail``, ``owner.tail``"""
    owner: Any
    is_tail: bool = False

    @property
    def text(self) -> str:
        return (self.owner.tail if self.is_tail else self.owner.text) or ''


@lru_cache(maxsize=256)
def _compile(selector: str) -> CSSSelector:
    return CSSSelector(selector, translator='html')


def _collapse(text: str) -> str:
    return ' '.join(text.split())


class LxmlAdapter(DomAdapter):
    """Reads documents parsed by lxml.html"""

    name = 'lxml'

    @staticmethod
    def parse(markup: str):
        """Parse a full HTML document into an element tree"""
        return lxml.html.document_fromstring(markup).getroottree()

    @staticmethod
    def parse_fragment(markup: str, container: str = 'div'):
        """Parse an HTML fragment into a fresh container element"""
        return lxml.html.fragment_fromstring(markup, create_parent=container)

    def node_kind(self, node: Any) -> NodeKind:
        if isinstance(node, LxmlTextNode):
            return NodeKind.TEXT
        if isinstance(node, etree._ElementTree):
            return NodeKind.DOCUMENT
        if isinstance(node, etree._Element):
            # Comments, PIs and entities carry a non-string tag
            return NodeKind.ELEMENT if isinstance(node.tag, str) else NodeKind.OTHER
        raise HostContractError(f"Not an lxml node: {node!r}")

    def child_nodes(self, node: Any) -> List[Any]:
        kind = self.node_kind(node)
        if kind is NodeKind.DOCUMENT:
            return [node.getroot()]
        if kind is not NodeKind.ELEMENT:
            return []

        children = []
        if node.text:
            children.append(LxmlTextNode(node))
        for child in node:
            children.append(child)
            if child.tail:
                children.append(LxmlTextNode(child, is_tail=True))
        return children

    def parent_element(self, node: Any) -> Optional[Any]:
        if isinstance(node, LxmlTextNode):
            return node.owner.getparent() if node.is_tail else node.owner
        if isinstance(node, etree._ElementTree):
            return None
        return node.getparent()

    def node_text(self, node: Any) -> str:
        if not isinstance(node, LxmlTextNode):
            raise HostContractError(f"Expected a text node, got {node!r}")
        return node.text

    def rendered_text(self, element: Any) -> str:
        """Joined text with whitespace runs collapsed and trimmed, as innerText reads it"""
        return _collapse(super().rendered_text(element))

    def tag_name(self, element: Any) -> str:
        if self.node_kind(element) is not NodeKind.ELEMENT:
            raise HostContractError(f"Expected an element, got {element!r}")
        return element.tag.lower()

    def get_attribute(self, element: Any, name: str) -> Optional[str]:
        return element.get(name)

    def root_element(self, root: Any) -> Any:
        if isinstance(root, etree._ElementTree):
            return root.getroot()
        return root

    def select(self, root: Any, selector: str) -> List[Any]:
        matcher = _compile(selector)
        if isinstance(root, etree._ElementTree):
            return matcher(root.getroot())
        # The compiled XPath starts at descendant-or-self; querySelectorAll excludes the root
        return [element for element in matcher(root) if element is not root]

    def iter_elements(self, root: Any) -> List[Any]:
        if isinstance(root, etree._ElementTree):
            return list(root.getroot().iter(etree.Element))
        return list(root.iterdescendants(etree.Element))

    def display_value(self, element: Any) -> str:
        tag_name = self.require_display_element(element)
        if tag_name == 'textarea':
            return element.text or ''
        if tag_name == 'select':
            option = self._selected_option(element)
            if option is None:
                return ''
            value = option.get('value')
            return value if value is not None else _collapse(option.text_content())

        value = element.get('value')
        if value is None:
            input_type = (element.get('type') or 'text').lower()
            return 'on' if input_type in ('checkbox', 'radio') else ''
        return value

    def set_display_value(self, element: Any, value: str) -> None:
        tag_name = self.require_display_element(element)
        if tag_name == 'textarea':
            element.text = value
        elif tag_name == 'select':
            for option in element.iter('option'):
                option_value = option.get('value')
                if option_value is None:
                    option_value = _collapse(option.text_content())
                if option_value == value:
                    option.set('selected', 'selected')
                elif 'selected' in option.attrib:
                    del option.attrib['selected']
        else:
            element.set('value', value)

    def outer_html(self, element: Any) -> str:
        return lxml.html.tostring(element, encoding='unicode', with_tail=False)

    def is_same_node(self, a: Any, b: Any) -> bool:
        if isinstance(a, LxmlTextNode):
            return a == b
        return a is b

    def _selected_option(self, select: Any) -> Optional[Any]:
        options = list(select.iter('option'))
        selected = [option for option in options if 'selected' in option.attrib]
        if 'multiple' in select.attrib:
            return selected[0] if selected else None
        # A single select shows the last option marked selected
        if selected:
            return selected[-1]
        enabled = [option for option in options if not self._is_disabled(option)]
        return enabled[0] if enabled else None

    def _is_disabled(self, option: Any) -> bool:
        if 'disabled' in option.attrib:
            return True
        group = option.getparent()
        return group is not None and group.tag == 'optgroup' and 'disabled' in group.attrib
