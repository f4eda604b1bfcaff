import pytest


def test_display_text_joins_every_text_node(render):
    renderer = render('<p id="p">Hello <b>big</b> world</p>')

    assert renderer.get_by_id('p').display_text() == 'Hello big world'


def test_parse_converts_display_text(render):
    renderer = render('<span id="count">42</span><span id="name">abc</span>')

    assert renderer.get_by_id('count').parse(int) == 42
    with pytest.raises(ValueError):
        renderer.get_by_id('name').parse(int)


def test_equality_is_node_identity(render):
    renderer = render('<i id="a">x</i><i id="b">x</i>')

    assert renderer.get_by_id('a') == renderer.get_all_by_text('x')[0]
    assert renderer.get_by_id('a') != renderer.get_by_id('b')


def test_as_html_string(render):
    renderer = render('<a id="home" href="/">Home</a> tail')

    assert renderer.get_by_id('home').as_html_string() == '<a id="home" href="/">Home</a>'


def test_parent_of_top_level_element_is_container(render):
    renderer = render('<em id="e">x</em>')

    parent = renderer.get_by_id('e').parent()

    assert parent.tag_name == 'div'
    assert parent.parent() is None
