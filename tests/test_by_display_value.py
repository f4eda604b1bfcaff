import pytest

from dom_testing import HostContractError, MoreThanOne, NotFound


def test_input_and_textarea_match_but_value_attributes_do_not(render):
    renderer = render(
        '<input value="1234">'
        '<textarea>1234</textarea>'
        '<progress value="1234" max="9999"></progress>'
        '<ol><li value="1234">item</li></ol>'
        '<select><option value="1234">Option</option></select>'
    )

    tags = [element.tag_name for element in renderer.get_all_by_display_value('1234')]

    # The select shows its first option, so it displays "1234" as well
    assert tags == ['input', 'textarea', 'select']
    with pytest.raises(MoreThanOne):
        renderer.get_by_display_value('1234')


def test_progress_and_list_items_are_never_candidates(render):
    renderer = render('<progress value="7"></progress><ol><li value="7">seven</li></ol>')

    assert renderer.get_all_by_display_value('7') == []
    with pytest.raises(NotFound) as exc_info:
        renderer.get_by_display_value('7')
    assert exc_info.value.strategy == 'by_display_value'


def test_select_uses_selected_option(render):
    renderer = render(
        '<select id="size">'
        '<option value="s">Small</option>'
        '<option value="m" selected>Medium</option>'
        '</select>'
    )

    assert renderer.get_by_display_value('m').get_attribute('id') == 'size'
    assert renderer.get_all_by_display_value('s') == []


def test_option_without_value_falls_back_to_text(render):
    renderer = render('<select><option>  Red\n apple </option></select>')

    assert renderer.get_by_display_value('Red apple').tag_name == 'select'


def test_contains_variant(render):
    renderer = render('<input value="jane@example.com"><input value="john@example.org">')

    assert len(renderer.get_all_by_display_value_contains('@example')) == 2
    assert renderer.get_by_display_value_contains('.org').display_value == 'john@example.org'


def test_set_display_value_is_seen_by_next_query(render):
    renderer = render('<input id="name" value=""><textarea id="bio"></textarea>')

    renderer.get_by_id('name').set_display_value('Ada')
    renderer.get_by_id('bio').set_display_value('Mathematician')

    assert renderer.get_by_display_value('Ada').get_attribute('id') == 'name'
    assert renderer.get_by_display_value('Mathematician').get_attribute('id') == 'bio'


def test_set_display_value_on_select_picks_option(render):
    renderer = render('<select><option value="a">A</option><option value="b">B</option></select>')
    select = renderer.get_by_display_value('a')

    select.set_display_value('b')

    assert select.display_value == 'b'


def test_display_value_of_other_elements_is_a_contract_error(render):
    renderer = render('<div id="box"></div>')

    with pytest.raises(HostContractError):
        renderer.get_by_id('box').set_display_value('x')


def test_single_select_shows_last_selected_option(render):
    renderer = render(
        '<select><option value="a" selected>A</option><option value="b" selected>B</option></select>'
    )

    assert renderer.get_by_display_value('b').tag_name == 'select'
    assert renderer.get_all_by_display_value('a') == []


def test_multiple_select_shows_first_selected_option(render):
    renderer = render(
        '<select multiple><option value="a">A</option>'
        '<option value="b" selected>B</option><option value="c" selected>C</option></select>'
    )

    assert renderer.get_by_display_value('b').tag_name == 'select'


def test_default_option_skips_disabled_options(render):
    renderer = render(
        '<select id="plan">'
        '<optgroup label="Legacy" disabled><option value="old">Old</option></optgroup>'
        '<option value="none" disabled>Pick one</option>'
        '<option value="free">Free</option>'
        '</select>'
    )

    assert renderer.get_by_display_value('free').get_attribute('id') == 'plan'
    assert renderer.get_all_by_display_value('old') == []
