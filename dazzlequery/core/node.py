"""OverlayNode abstraction for DazzleQuery.

Raw trees usually do not know their parents. The OverlayNode wraps a raw
node and materializes both directions of the tree once, up front: a
``parent`` reference and a ``children`` list of wrapped children. After
construction the overlay is the single source of truth for ancestry;
mutations splice ``children`` lists in place instead of rebuilding.
"""

import logging
from typing import Any, Callable, List, Optional

from .adapter import NodeAdapter
from .traversal import walk, sibling_index

logger = logging.getLogger(__name__)


class OverlayNode:
    """A raw tree node plus synthesized parent/children links.

    Attributes:
        raw: The caller's node. Never modified by the engine.
        adapter: NodeAdapter used to read and rebuild ``raw``
        parent: Enclosing OverlayNode, or None for a root
        children: Wrapped children, or None when the adapter reports
            that ``raw`` has no children
    """

    def __init__(self, raw: Any, adapter: NodeAdapter, parent: Optional['OverlayNode'] = None):
        """Wrap ``raw`` and, recursively, all of its children.

        Args:
            raw: Raw node to wrap
            adapter: NodeAdapter for the raw tree format
            parent: Enclosing overlay node (None for a root)
        """
        self.raw = raw
        self.adapter = adapter
        self.parent = parent
        if adapter.has_children(raw):
            self.children: Optional[List[OverlayNode]] = [
                OverlayNode(child, adapter, self) for child in adapter.get_children(raw)
            ]
        else:
            self.children = None

    @staticmethod
    def create(value: Any, adapter: NodeAdapter, parent: Optional['OverlayNode'] = None) -> 'OverlayNode':
        """Wrap a raw node, or return ``value`` unchanged if it is already wrapped."""
        if isinstance(value, OverlayNode):
            return value
        return OverlayNode(value, adapter, parent)

    @staticmethod
    def is_node(value: Any) -> bool:
        return isinstance(value, OverlayNode)

    @classmethod
    def build(cls, raw: Any, adapter: NodeAdapter) -> 'OverlayNode':
        """Build the overlay for a whole tree and log its size."""
        root = cls.create(raw, adapter)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Built overlay with {root.count()} nodes")
        return root

    @property
    def has_children(self) -> bool:
        return self.children is not None

    @property
    def type(self) -> str:
        """Type name of the raw node, as reported by the adapter."""
        return self.adapter.get_type(self.raw)

    def index(self) -> int:
        """Position among siblings, or -1 for a root or detached node."""
        return sibling_index(self)

    def attach(self, value: Any) -> 'OverlayNode':
        """Wrap ``value`` as a child of this node, ready to be spliced in.

        Raw values get a fresh wrapper. A detached overlay node is adopted
        as-is; an overlay node that already has a parent is cloned so the
        same wrapper never sits in two children lists.
        """
        node = OverlayNode.create(value, self.adapter, self)
        if node.parent is None:
            node.parent = self
        elif node.parent is not self or any(child is node for child in self.children or ()):
            node = node.clone(self)
        return node

    def clone(self, parent: Optional['OverlayNode'] = None) -> 'OverlayNode':
        """Copy the overlay structure of this subtree, sharing raw nodes."""
        copy = OverlayNode.__new__(OverlayNode)
        copy.raw = self.raw
        copy.adapter = self.adapter
        copy.parent = parent
        copy.children = (
            [child.clone(copy) for child in self.children]
            if self.children is not None else None
        )
        return copy

    def to_json(self) -> Any:
        """Serialize this subtree back into the raw tree format.

        Children are serialized first and handed to the adapter's
        ``to_json``; leaves pass None so the original value is kept.
        """
        children = (
            [child.to_json() for child in self.children]
            if self.children is not None else None
        )
        return self.adapter.to_json(self.raw, children)

    def walk(self, order: str = "post"):
        """Iterate over this subtree (this node included)."""
        return walk(self, order)

    def reduce(self, fn: Callable[[Any, 'OverlayNode'], Any], acc: Any) -> Any:
        """Fold ``fn`` over this subtree in post-order.

        Every child subtree is reduced (left to right) before ``fn`` is
        applied to this node.
        """
        for node in walk(self, "post"):
            acc = fn(acc, node)
        return acc

    def count(self) -> int:
        """Number of nodes in this subtree."""
        return self.reduce(lambda total, _: total + 1, 0)

    def __repr__(self) -> str:
        size = len(self.children) if self.children is not None else None
        return f"{self.__class__.__name__}(type={self.type!r}, children={size})"
