import pytest

from dom_testing import ElementWrapper, LxmlAdapter, QueryConfig


@pytest.fixture
def adapter():
    return LxmlAdapter()


@pytest.fixture
def render(adapter):
    """Mount a fragment into a fresh container and return a query root over it"""
    def _render(markup, config=None):
        container = LxmlAdapter.parse_fragment(markup)
        return ElementWrapper(container, adapter, config or QueryConfig())
    return _render
