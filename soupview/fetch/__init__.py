"""
HTTP retrieval of documents
"""

from .fetcher import Fetcher, get

__all__ = ['Fetcher', 'get']
