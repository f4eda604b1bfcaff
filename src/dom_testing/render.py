"""
Scoped rendering helpers

Mounting markup and tearing it down again belongs to the host, not to the
query engine. These context managers pair the two around a test body and
hand out a ``TestRender`` that carries the full query surface.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from .adapters import DomAdapter, LxmlAdapter, PlaywrightAdapter
from .config import QueryConfig
from .dom_query import DocumentWrapper, DomQuery, ElementWrapper

logger = logging.getLogger(__name__)


class TestRender(DomQuery):
    """A rendered tree under test"""

    __test__ = False

    def __init__(self, root: Any, adapter: DomAdapter, config: Optional[QueryConfig] = None,
                 is_document: bool = False):
        self.root = root
        self.adapter = adapter
        self.config = config or QueryConfig()
        self.is_document = is_document

    def element(self) -> ElementWrapper:
        wrapper_class = DocumentWrapper if self.is_document else ElementWrapper
        return wrapper_class(self.root, self.adapter, self.config)

    def html(self) -> str:
        root = self.adapter.root_element(self.root)
        return self.adapter.outer_html(root)


def _is_document(markup: str) -> bool:
    head = markup.lstrip()[:64].lower()
    return head.startswith('<!doctype') or head.startswith('<html')


@contextmanager
def render_html(markup: str, config: Optional[QueryConfig] = None) -> Iterator[TestRender]:
    """Parse markup with lxml and query it for the duration of the block.

    A full document (``<!doctype`` or ``<html``) is queried as a document;
    anything else is mounted into a fresh ``<div>`` container.
    """
    adapter = LxmlAdapter()
    is_document = _is_document(markup)
    root = adapter.parse(markup) if is_document else adapter.parse_fragment(markup)
    logger.debug("Rendered %s with %s", 'document' if is_document else 'fragment', adapter.name)
    try:
        yield TestRender(root, adapter, config, is_document=is_document)
    finally:
        adapter.root_element(root).clear()


@contextmanager
def render_page(page: Any, markup: str, config: Optional[QueryConfig] = None) -> Iterator[TestRender]:
    """Load markup into a Playwright page and query the page document.

    The page content is reset when the block exits.
    """
    page.set_content(markup)
    logger.debug("Rendered markup into %s", page.url)
    try:
        yield TestRender(page, PlaywrightAdapter(), config, is_document=True)
    finally:
        page.set_content('')
