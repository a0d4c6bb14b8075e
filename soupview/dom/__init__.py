"""
Tree queries over parsed HTML documents
"""

from .matcher import MatchCriteria, element_matching
from .node_view import NodeKind, NodeView
from .search import iter_descendants

__all__ = [
    'MatchCriteria',
    'NodeKind',
    'NodeView',
    'element_matching',
    'iter_descendants'
]
