import logging
from typing import Iterator, List, Optional

from .matcher import MatchCriteria, element_matching

logger = logging.getLogger(__name__)


def iter_descendants(view) -> Iterator:
    """Yield every descendant of a view in document order, excluding the view itself"""
    stack = list(reversed(view.children(include_non_elements=True)))
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children(include_non_elements=True)))


def find_first(view, criteria: MatchCriteria) -> Optional[object]:
    """First matching descendant in document order, or None.

    The starting view itself is never tested: a search always looks inside it.
    Stops at the first hit without walking the rest of the tree.
    """
    logger.debug(f"find {criteria.describe()} strict={criteria.strict} under <{view.node_value}>")
    for descendant in iter_descendants(view):
        if element_matching(descendant, criteria):
            return descendant
    return None


def find_every(view, criteria: MatchCriteria) -> List:
    """All matching descendants in document order, possibly empty"""
    logger.debug(f"find_all {criteria.describe()} strict={criteria.strict} under <{view.node_value}>")
    return [d for d in iter_descendants(view) if element_matching(d, criteria)]
