import pytest
from bs4 import BeautifulSoup

from soupview import ErrorType, MatchCriteria, NodeView, SoupConfig, SoupError, element_matching, parse


class TestShallowText:
    def test_first_direct_text_is_returned_raw(self, root):
        assert root.find('p').unwrap().text().unwrap() == 'Hello '

    def test_whitespace_only_text_is_skipped(self):
        root = parse('<p>  \n <b>x</b>tail</p>').unwrap()
        assert root.text().unwrap() == 'tail'

    def test_nested_text_is_not_used(self):
        root = parse('<p>  <b>x</b></p>').unwrap()
        result = root.text()
        assert not result.ok
        assert result.error.error_type == ErrorType.NOT_FOUND
        assert result.error.message == 'no text node found'

    def test_comments_are_not_text(self):
        root = parse('<p><!-- hidden -->shown</p>').unwrap()
        assert root.text().unwrap() == 'shown'

    def test_childless_element_fails(self):
        root = parse('<div><br></div>').unwrap()
        assert not root.find('br').unwrap().text().ok

    def test_debug_mode_raises(self):
        root = parse('<p>  <b>x</b></p>', SoupConfig(debug=True)).unwrap()
        with pytest.raises(SoupError, match='no text node found'):
            root.text()


class TestFullText:
    def test_nested_text_is_concatenated(self):
        root = parse('<p>  <b>x</b></p>').unwrap()
        assert root.full_text() == 'x'
        assert root.find('b').unwrap().full_text() == 'x'

    def test_whitespace_between_elements_is_kept(self):
        root = parse('<p><b>New</b> <i>York</i></p>').unwrap()
        assert root.full_text() == 'New York'

    def test_only_outer_whitespace_nodes_are_dropped(self):
        root = parse('<div>\n  <b>a</b>\n  <i>b</i>\n</div>').unwrap()
        assert root.full_text() == 'a\n  b'

    def test_document_order_without_separators(self, root):
        assert root.find('p').unwrap().full_text() == 'Hello world'

    def test_comments_are_skipped(self):
        root = parse('<div>a<!-- c -->b<span>c<i>d</i></span>e</div>').unwrap()
        assert root.full_text() == 'abcde'

    def test_empty_element_is_empty_string(self):
        root = parse('<div><br></div>').unwrap()
        assert root.find('br').unwrap().full_text() == ''

    def test_text_node_has_no_full_text(self, root):
        text = root.find('title').unwrap().children(include_non_elements=True)[0]
        assert text.full_text() == ''

    def test_never_fails_in_debug_mode(self):
        root = parse('<div></div>', SoupConfig(debug=True)).unwrap()
        assert root.full_text() == ''


class TestAttributes:
    def test_attrs_mapping(self, root):
        main = root.find('div', 'id', 'main').unwrap()
        assert main.attrs().unwrap() == {'id': 'main', 'class': 'content wide'}

    def test_element_without_attributes(self, root):
        assert root.find('body').unwrap().attrs().unwrap() == {}

    def test_first_duplicate_wins(self):
        root = parse('<div><a href="/first" href="/second">x</a></div>').unwrap()
        assert root.find('a').unwrap().attrs().unwrap() == {'href': '/first'}
        assert root.find_strict('a', 'href', '/first').ok
        assert not root.find_strict('a', 'href', '/second').ok

    def test_attrs_on_text_node(self, root):
        text = root.find('title').unwrap().children(include_non_elements=True)[0]
        result = text.attrs()
        assert result.error.error_type == ErrorType.WRONG_NODE_KIND
        assert result.error.message == 'not an element node'

    def test_attrs_on_text_node_in_debug_mode(self, debug_root):
        text = debug_root.find('title').unwrap().children(include_non_elements=True)[0]
        with pytest.raises(SoupError) as excinfo:
            text.attrs()
        assert excinfo.value.error_type == ErrorType.WRONG_NODE_KIND

    def test_absent_and_empty_are_told_apart_by_has_attribute(self):
        root = parse('<form><input disabled="" name="q"></form>').unwrap()
        field = root.find('input').unwrap()
        assert field.has_attribute('disabled')
        assert field.get_attribute('disabled') == ''
        assert not field.has_attribute('value')
        assert field.get_attribute('value') == ''
        assert field.get_attribute('name') == 'q'

    def test_lookups_on_text_node(self, root):
        text = root.find('title').unwrap().children(include_non_elements=True)[0]
        assert not text.has_attribute('class')
        assert text.get_attribute('class') == ''


def test_view_over_externally_built_soup():
    # default BeautifulSoup settings split class into a list
    soup = BeautifulSoup('<section><p class="a b" id="x">t</p></section>', 'html.parser')
    view = NodeView(soup.section)
    p = view.find('p').unwrap()

    assert p.get_attribute('class') == 'a b'
    assert p.attrs().unwrap() == {'class': 'a b', 'id': 'x'}
    assert element_matching(p, MatchCriteria('p', 'class', 'b'))
    assert element_matching(p, MatchCriteria('p', 'class', 'a b', strict=True))


def test_document_view():
    soup = BeautifulSoup('<!DOCTYPE html><p>x</p>', 'html.parser')
    document = NodeView(soup)

    assert document.is_document
    assert not element_matching(document, MatchCriteria())
    assert document.find('p').unwrap().full_text() == 'x'
    assert document.children(include_non_elements=True)[0].kind.value == 'doctype'
    assert document.attrs().error.error_type == ErrorType.WRONG_NODE_KIND
    assert not document.find_parent().ok
