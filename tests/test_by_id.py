import pytest

from dom_testing import MoreThanOne, NotFound, QueryDescriptor


def test_by_id(render):
    renderer = render('<div id="div_1"></div><div id="div_2"></div>')

    with pytest.raises(MoreThanOne) as exc_info:
        renderer.get_by_id_contains('div')
    assert exc_info.value == MoreThanOne(QueryDescriptor('by_id_contains', 'div', exact=False))

    div_1 = renderer.get_by_id('div_1')
    assert div_1.get_attribute('id') == 'div_1'
    assert div_1 != renderer.get_by_id('div_2')

    with pytest.raises(NotFound) as exc_info:
        renderer.get_by_id('div_3')
    assert exc_info.value.strategy == 'by_id'
    assert exc_info.value.query == 'div_3'

    assert len(renderer.get_all_by_id_contains('div')) == 2


def test_single_contains_match(render):
    renderer = render('<div id="div_1"></div><span id="other"></span>')

    assert renderer.get_by_id_contains('div') == renderer.get_by_id('div_1')


def test_exact_match_is_full_string(render):
    renderer = render('<div id="div_10"></div>')

    assert renderer.get_all_by_id('div_1') == []
    assert len(renderer.get_all_by_id_contains('div_1')) == 1


def test_duplicate_ids_are_all_returned_in_document_order(render):
    renderer = render('<p id="dup">first</p><section><p id="dup">second</p></section>')

    matches = renderer.get_all_by_id('dup')

    assert [match.display_text() for match in matches] == ['first', 'second']
    with pytest.raises(MoreThanOne):
        renderer.get_by_id('dup')


def test_root_element_itself_is_not_a_candidate(adapter):
    from dom_testing import ElementWrapper, LxmlAdapter

    root = LxmlAdapter.parse_fragment('<span id="inner"></span>')
    root.set('id', 'outer')

    assert ElementWrapper(root, adapter).get_all_by_id('outer') == []
