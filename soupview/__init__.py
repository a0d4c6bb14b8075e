"""
soupview - query parsed HTML trees by tag and attribute, and fetch documents to query
"""

from .config import ConfigBuilder, SoupConfig
from .dom import MatchCriteria, NodeKind, NodeView, element_matching
from .error_handler import ErrorType, InvalidArgumentShape, SoupError
from .fetch import Fetcher, get
from .parser import HTMLParser, parse
from .result import QueryResult

__all__ = [
    'ConfigBuilder',
    'ErrorType',
    'Fetcher',
    'HTMLParser',
    'InvalidArgumentShape',
    'MatchCriteria',
    'NodeKind',
    'NodeView',
    'QueryResult',
    'SoupConfig',
    'SoupError',
    'element_matching',
    'get',
    'parse'
]
