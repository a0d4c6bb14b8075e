import logging

from bs4 import BeautifulSoup, Tag

from .config import SoupConfig
from .dom import NodeKind, NodeView
from .dom.node_view import node_kind
from .error_handler import ErrorHandler, ErrorType
from .result import QueryResult

logger = logging.getLogger(__name__)


class HTMLParser:
    def __init__(self, config: SoupConfig = None):
        self.config = config or SoupConfig()
        self.errors = ErrorHandler(debug=self.config.debug)

    def build_soup(self, html_content) -> BeautifulSoup:
        """Parse markup into a BeautifulSoup tree with raw, first-wins attributes"""
        options = {'multi_valued_attributes': None}
        if self.config.features == 'html.parser':
            options['on_duplicate_attribute'] = 'ignore'
        return BeautifulSoup(html_content, self.config.features, **options)

    def parse(self, html_content) -> QueryResult[NodeView]:
        """Parse HTML and return a view on its root.

        Doctype, comments and whitespace around a single top-level element are
        skipped; that element becomes the root, which has no parent link. A
        fragment with several top-level elements, or with text outside its
        element, is rooted at the document itself so nothing in it is lost.
        """
        try:
            soup = self.build_soup(html_content)
        except Exception as e:
            return self.errors.from_exception(e, "unable to parse the HTML",
                                              error_type=ErrorType.PARSE_FAILURE)

        elements = [node for node in soup.contents if isinstance(node, Tag)]
        if not elements:
            return self.errors.fail(ErrorType.PARSE_FAILURE, "unable to parse the HTML")

        if len(elements) == 1 and not self._has_stray_text(soup):
            logger.debug(f"Parsed document rooted at <{elements[0].name}>")
            return QueryResult(NodeView(elements[0], self.config))

        logger.debug(f"Parsed fragment with {len(elements)} top-level elements, rooted at the document")
        return QueryResult(NodeView(soup, self.config))

    @staticmethod
    def _has_stray_text(soup: BeautifulSoup) -> bool:
        return any(node_kind(node) == NodeKind.TEXT and not node.isspace()
                   for node in soup.contents)


def parse(html_content, config: SoupConfig = None) -> QueryResult[NodeView]:
    """Parse HTML with a one-off HTMLParser"""
    return HTMLParser(config).parse(html_content)
