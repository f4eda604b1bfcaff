import pytest

from dom_testing import (
    DocumentWrapper, DomQuery, ElementWrapper, LxmlAdapter, NotFound, QueryConfig, QueryEngine, get_one,
)

PAGE = '''<!DOCTYPE html>
<html><body>
<form id="login"><label for="user">User</label><input id="user" placeholder="name"></form>
<div role="alert">Saved</div>
</body></html>'''


class LoginPage(DomQuery):
    """A test-harness wrapper that only knows how to hand out its root"""

    def __init__(self, document):
        self.document = document

    def element(self):
        return DocumentWrapper(self.document, LxmlAdapter())


@pytest.fixture
def document():
    return LxmlAdapter.parse(PAGE)


def test_any_holder_gains_every_query(document):
    page = LoginPage(document)

    assert page.get_by_label('User').get_attribute('id') == 'user'
    assert page.get_by_placeholder('name') == page.get_by_id('user')
    assert page.get_by_role('alert').display_text() == 'Saved'
    assert page.get_all_by_text('Nothing') == []


def test_document_wrapper_exposes_body(document):
    wrapper = DocumentWrapper(document)

    assert wrapper.body().tag_name == 'body'
    assert 'id="login"' in wrapper.body_string()


def test_results_scope_further_queries(render):
    renderer = render(
        '<section id="a"><button>Save</button></section>'
        '<section id="b"><button>Save</button></section>'
    )

    section = renderer.get_by_id('b')

    assert section.get_by_text('Save').parent() == section
    assert len(renderer.get_all_by_text('Save')) == 2


@pytest.mark.parametrize('strategy, query', [
    ('by_text', 'Go'),
    ('by_text_contains', 'G'),
    ('by_id', 'go'),
    ('by_id_contains', 'g'),
    ('by_label', 'Go'),
    ('by_label_contains', 'G'),
    ('by_display_value', 'v'),
    ('by_display_value_contains', 'v'),
    ('by_role', 'button'),
    ('by_placeholder', 'p'),
    ('by_placeholder_contains', 'p'),
])
def test_singular_form_is_plural_form_reduced(strategy, query):
    root = LxmlAdapter.parse_fragment(
        '<label for="go">Go</label><input id="go" role="button" value="v" placeholder="p">'
    )
    adapter = LxmlAdapter()
    engine = QueryEngine()

    every = engine.find_all(strategy, adapter, root, query)
    one = engine.find_one(strategy, adapter, root, query)

    assert one is get_one(every, strategy, query)


def test_unknown_strategy_is_rejected():
    with pytest.raises(ValueError):
        QueryEngine().strategy('by_color')


def test_debug_config_logs_strategy_passes(render, caplog):
    renderer = render('<p>hi</p>', config=QueryConfig(debug=True))

    with caplog.at_level('DEBUG', logger='dom_testing'):
        renderer.get_all_by_text('hi')

    assert 'by_text' in caplog.text


def test_not_found_message_names_query(render):
    renderer = render('<p>hi</p>')

    with pytest.raises(NotFound, match="'bye'"):
        renderer.get_by_text('bye')


def test_wrapper_picks_adapter_from_node():
    root = LxmlAdapter.parse_fragment('<p id="x"></p>')

    assert isinstance(ElementWrapper(root).adapter, LxmlAdapter)
    with pytest.raises(TypeError):
        ElementWrapper(object())
