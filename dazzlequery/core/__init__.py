"""Core abstractions for DazzleQuery.

This package contains the pieces the Selection engine is built on: the
adapter contract, the node overlay, selector resolution and the walking
helpers.
"""

from .adapter import NodeAdapter, DefaultAdapter, FunctionAdapter
from .node import OverlayNode
from .selector import (
    Selector,
    MatchAll,
    TypeSelector,
    PatternSelector,
    PredicateSelector,
    compile_selector,
)
from .traversal import walk, descendants, ancestors, sibling_index, sibling_list

__all__ = [
    "NodeAdapter",
    "DefaultAdapter",
    "FunctionAdapter",
    "OverlayNode",
    "Selector",
    "MatchAll",
    "TypeSelector",
    "PatternSelector",
    "PredicateSelector",
    "compile_selector",
    "walk",
    "descendants",
    "ancestors",
    "sibling_index",
    "sibling_list",
]
