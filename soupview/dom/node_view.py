"""
Node View - read-only handle onto one node of a parsed BeautifulSoup tree
"""

import dataclasses
from enum import Enum
from typing import Dict, List, Optional

from bs4 import BeautifulSoup, Comment, Doctype, NavigableString, Tag
from bs4.element import PreformattedString

from ..config import SoupConfig
from ..error_handler import ErrorHandler, ErrorType
from ..result import QueryResult
from .matcher import MatchCriteria, attribute_value
from .search import find_every, find_first, iter_descendants


class NodeKind(Enum):
    """Kind of the underlying tree node"""
    DOCUMENT = 'document'
    DOCTYPE = 'doctype'
    COMMENT = 'comment'
    TEXT = 'text'
    ELEMENT = 'element'
    OTHER = 'other'


def node_kind(node) -> NodeKind:
    # BeautifulSoup is a Tag and Doctype/Comment are strings, so order matters
    if isinstance(node, BeautifulSoup):
        return NodeKind.DOCUMENT
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    if isinstance(node, Doctype):
        return NodeKind.DOCTYPE
    if isinstance(node, Comment):
        return NodeKind.COMMENT
    if isinstance(node, PreformattedString):
        return NodeKind.OTHER
    if isinstance(node, NavigableString):
        return NodeKind.TEXT
    return NodeKind.OTHER


class NodeView:
    """
    Wraps a bs4 node without owning it. Every navigation or search returns new
    views over the same tree; nothing here writes to the tree.

    The parent link is read from the tree itself, so a derived view always
    points at its real parent. A node directly under the document (the parsed
    root) has no parent link.
    """

    def __init__(self, node, config: SoupConfig = None):
        self.node = node
        self.config = config or SoupConfig()
        self.kind = node_kind(node)
        if self.kind in (NodeKind.ELEMENT, NodeKind.DOCUMENT):
            self.node_value = node.name
        else:
            self.node_value = str(node)
        self._errors = ErrorHandler(debug=self.config.debug)

    def __repr__(self):
        if self.kind == NodeKind.ELEMENT:
            return f"<NodeView <{self.node_value}>>"
        return f"<NodeView {self.kind.value} {self.node_value!r}>"

    def __eq__(self, other):
        if not isinstance(other, NodeView):
            return NotImplemented
        return self.node is other.node

    def __hash__(self):
        return id(self.node)

    def _derive(self, node) -> 'NodeView':
        return NodeView(node, self.config)

    @property
    def is_element(self) -> bool:
        return self.kind == NodeKind.ELEMENT

    @property
    def is_text(self) -> bool:
        return self.kind == NodeKind.TEXT

    @property
    def is_document(self) -> bool:
        return self.kind == NodeKind.DOCUMENT

    @property
    def parent(self) -> Optional['NodeView']:
        tree_parent = self.node.parent
        if tree_parent is None or isinstance(tree_parent, BeautifulSoup):
            return None
        return self._derive(tree_parent)

    # Search

    def _criteria(self, args, strict: bool) -> MatchCriteria:
        if len(args) == 1 and isinstance(args[0], MatchCriteria):
            return dataclasses.replace(args[0], strict=strict or args[0].strict)
        return MatchCriteria.from_args(args, strict=strict)

    def _find(self, criteria: MatchCriteria) -> QueryResult['NodeView']:
        match = find_first(self, criteria)
        if match is None:
            return self._errors.fail(ErrorType.NOT_FOUND, f"{criteria.describe()} not found")
        return QueryResult(match)

    def find(self, *args) -> QueryResult['NodeView']:
        """First descendant matching (tag) or (tag, attr_name, attr_value).

        Attribute values match loosely: every whitespace separated word of the
        expected value must appear in the element's value, so
        find('div', 'class', 'b') finds <div class="a b">. The view itself is
        never a candidate.
        """
        return self._find(self._criteria(args, strict=False))

    def find_strict(self, *args) -> QueryResult['NodeView']:
        """Like find, but the attribute value must be exactly equal"""
        return self._find(self._criteria(args, strict=True))

    def find_all(self, *args) -> List['NodeView']:
        """Every matching descendant in document order; empty when nothing matches"""
        return find_every(self, self._criteria(args, strict=False))

    def find_all_strict(self, *args) -> List['NodeView']:
        return find_every(self, self._criteria(args, strict=True))

    # Structure

    def children(self, include_non_elements: bool = False) -> List['NodeView']:
        """Direct children in order, elements only unless include_non_elements"""
        contents = getattr(self.node, 'contents', None) or []
        views = [self._derive(child) for child in contents]
        if include_non_elements:
            return views
        return [view for view in views if view.is_element]

    def siblings(self, include_non_elements: bool = False) -> List['NodeView']:
        """All following siblings in order (preceding siblings are not included)"""
        views = [self._derive(sibling) for sibling in self.node.next_siblings]
        if include_non_elements:
            return views
        return [view for view in views if view.is_element]

    def find_next_sibling(self) -> QueryResult['NodeView']:
        sibling = self.node.next_sibling
        if sibling is None:
            return self._errors.fail(ErrorType.NOT_FOUND, "no next sibling found")
        return QueryResult(self._derive(sibling))

    def find_prev_sibling(self) -> QueryResult['NodeView']:
        sibling = self.node.previous_sibling
        if sibling is None:
            return self._errors.fail(ErrorType.NOT_FOUND, "no previous sibling found")
        return QueryResult(self._derive(sibling))

    def find_next_element_sibling(self) -> QueryResult['NodeView']:
        """Nearest following sibling that is an element, skipping text and comments"""
        sibling = self.node.next_sibling
        while sibling is not None:
            view = self._derive(sibling)
            if view.is_element:
                return QueryResult(view)
            sibling = sibling.next_sibling
        return self._errors.fail(ErrorType.NOT_FOUND, "no next element sibling found")

    def find_prev_element_sibling(self) -> QueryResult['NodeView']:
        """Nearest preceding sibling that is an element, skipping text and comments"""
        sibling = self.node.previous_sibling
        while sibling is not None:
            view = self._derive(sibling)
            if view.is_element:
                return QueryResult(view)
            sibling = sibling.previous_sibling
        return self._errors.fail(ErrorType.NOT_FOUND, "no previous element sibling found")

    def find_parent(self) -> QueryResult['NodeView']:
        parent = self.parent
        if parent is None:
            return self._errors.fail(ErrorType.NOT_FOUND, "no parent found")
        return QueryResult(parent)

    # Attributes

    def attrs(self) -> QueryResult[Dict[str, str]]:
        """All attributes of an element as a name -> value mapping"""
        if not self.is_element:
            return self._errors.fail(ErrorType.WRONG_NODE_KIND, "not an element node")
        return QueryResult({name: attribute_value(self.node, name) for name in self.node.attrs})

    def has_attribute(self, name: str) -> bool:
        return self.is_element and name in self.node.attrs

    def get_attribute(self, name: str) -> str:
        """Attribute value, or "" when absent; use has_attribute to tell the two apart"""
        if not self.is_element:
            return ''
        value = attribute_value(self.node, name)
        return '' if value is None else value

    # Text

    def text(self) -> QueryResult[str]:
        """First direct text child that is not only whitespace.

        Nested elements are not searched: <p>  <b>x</b></p> has no usable text.
        """
        for child in self.children(include_non_elements=True):
            if child.is_text and not child.node_value.isspace():
                return QueryResult(child.node_value)
        return self._errors.fail(ErrorType.NOT_FOUND, "no text node found")

    def full_text(self) -> str:
        """Text of every descendant text node concatenated in document order.

        Whitespace-only text nodes at either end are dropped so indentation
        around the content does not leak in: <p>  <b>x</b></p> gives "x".
        Whitespace between content is kept: <b>New</b> <i>York</i> gives
        "New York".
        """
        texts = [d.node_value for d in iter_descendants(self) if d.is_text]
        start, end = 0, len(texts)
        while start < end and texts[start].isspace():
            start += 1
        while end > start and texts[end - 1].isspace():
            end -= 1
        return ''.join(texts[start:end])
