"""
Element matching by tag name and attribute constraint
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from bs4 import Tag

from ..error_handler import InvalidArgumentShape


@dataclass(frozen=True)
class MatchCriteria:
    """Tag name (empty matches any tag) plus an optional attribute name/value pair"""
    tag: str = ''
    attr_name: Optional[str] = None
    attr_value: Optional[str] = None
    strict: bool = False

    def __post_init__(self):
        if (self.attr_name is None) != (self.attr_value is None):
            raise InvalidArgumentShape(
                "attribute name and attribute value must be given together"
            )

    @classmethod
    def from_args(cls, args: Sequence[str], strict: bool = False) -> 'MatchCriteria':
        """Build criteria from (), (tag,) or (tag, attr_name, attr_value)"""
        if len(args) == 0:
            return cls(strict=strict)
        if len(args) == 1:
            return cls(args[0], strict=strict)
        if len(args) == 3:
            return cls(args[0], args[1], args[2], strict=strict)
        raise InvalidArgumentShape(
            f"expected a tag, or a tag with attribute name and value; got {len(args)} arguments"
        )

    @property
    def has_attribute(self) -> bool:
        return self.attr_name is not None

    def describe(self) -> str:
        attributes = f"{self.attr_name} {self.attr_value}" if self.has_attribute else ""
        return f"element `{self.tag}` with attributes `{attributes}`"


def attribute_value(node, name: str) -> Optional[str]:
    """Raw attribute value, with bs4 multi-valued attributes joined back into one string"""
    value = node.attrs.get(name)
    if value is None or isinstance(value, str):
        return value
    return ' '.join(value)


def value_matches(actual: str, expected: str, strict: bool) -> bool:
    """Strict: exact equality. Loose: every word of expected is a word of actual."""
    if strict:
        return actual == expected
    return set(expected.split()) <= set(actual.split())


def element_matching(view, criteria: MatchCriteria) -> bool:
    """True iff the view wraps an element satisfying the criteria"""
    node = view.node
    if not isinstance(node, Tag) or view.is_document:
        return False
    if criteria.tag and criteria.tag != node.name:
        return False
    if not criteria.has_attribute:
        return True

    actual = attribute_value(node, criteria.attr_name)
    if actual is None:
        return False
    return value_matches(actual, criteria.attr_value, criteria.strict)
