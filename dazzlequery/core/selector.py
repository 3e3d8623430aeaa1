"""Selector resolution for DazzleQuery.

A selector can be omitted, an exact type name, a compiled regular
expression tested against the type name, or any callable taking an
OverlayNode. Each kind is resolved once, at the start of a Selection
call, into one of the predicate classes below; the traversal code then
calls it uniformly for every node.

Anything that is not one of the recognized kinds matches every node.
"""

import re
from typing import Any, Callable, Pattern, Union

Selector = Union[None, str, Pattern, Callable[[Any], Any]]


class MatchAll:
    """Predicate used when no (recognized) selector is given."""

    def __call__(self, node) -> bool:
        return True

    def __repr__(self) -> str:
        return "MatchAll()"


class TypeSelector:
    """Match nodes whose type equals a name exactly."""

    def __init__(self, type_name: str):
        self.type_name = type_name

    def __call__(self, node) -> bool:
        return node.adapter.get_type(node.raw) == self.type_name

    def __repr__(self) -> str:
        return f"TypeSelector({self.type_name!r})"


class PatternSelector:
    """Match nodes whose type is matched by a regular expression (``re.search``)."""

    def __init__(self, pattern: Pattern):
        self.pattern = pattern

    def __call__(self, node) -> bool:
        type_name = node.adapter.get_type(node.raw)
        return type_name is not None and self.pattern.search(str(type_name)) is not None

    def __repr__(self) -> str:
        return f"PatternSelector({self.pattern.pattern!r})"


class PredicateSelector:
    """Match nodes for which a user callable returns a truthy value."""

    def __init__(self, predicate: Callable[[Any], Any]):
        self.predicate = predicate

    def __call__(self, node) -> bool:
        return bool(self.predicate(node))

    def __repr__(self) -> str:
        return f"PredicateSelector({self.predicate!r})"


def compile_selector(selector: Selector = None):
    """Resolve a selector argument into a predicate over OverlayNode.

    Args:
        selector: None, a type name, a compiled pattern or a callable

    Returns:
        A callable ``predicate(node) -> bool``
    """
    if isinstance(selector, (MatchAll, TypeSelector, PatternSelector, PredicateSelector)):
        return selector
    if isinstance(selector, str):
        return TypeSelector(selector)
    if isinstance(selector, re.Pattern):
        return PatternSelector(selector)
    if callable(selector):
        return PredicateSelector(selector)
    return MatchAll()


def is_type_selector(value: Any) -> bool:
    """Check if ``value`` selects by type (a name or a pattern)."""
    return isinstance(value, (str, re.Pattern))
