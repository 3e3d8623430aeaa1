"""Chainable selections over the node overlay.

A Selection is an ordered set of OverlayNodes plus a reference to the
Selection that produced it. Traversal methods never touch the tree and
always return a new Selection; mutation methods splice the overlay's
``children`` lists in place and return the receiver so calls can be
chained.
"""

import logging
from functools import reduce as fold
from typing import Any, Callable, Iterable, Iterator, List, Optional, Union

from .core.node import OverlayNode
from .core.selector import Selector, compile_selector
from .core.traversal import ancestors, descendants, sibling_index, sibling_list, unique, walk
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Selection:
    """An ordered set of overlay nodes with jQuery-style traversal and mutation.

    Not-found conditions never raise: a missing parent, an empty
    selection, an out-of-range index or an unmatched selector produce an
    empty Selection (or -1 from index()). Arguments of the wrong kind
    raise InvalidArgumentError.

    Example:
        >>> query = create_query(tree)
        >>> query().find('rule').eq(1).find('class').value()
        'g'
    """

    def __init__(self,
                 nodes: Union[OverlayNode, Iterable[OverlayNode]] = (),
                 prev: Optional['Selection'] = None):
        """Create a selection.

        Args:
            nodes: An OverlayNode or an iterable of them
            prev: The selection this one was derived from

        Raises:
            InvalidArgumentError: If a member is not an OverlayNode, or
                ``prev`` is not a Selection
        """
        if isinstance(nodes, OverlayNode):
            nodes = [nodes]
        nodes = list(nodes)
        for node in nodes:
            if not isinstance(node, OverlayNode):
                raise InvalidArgumentError(
                    f"Only OverlayNode instances can be placed in a Selection, got {type(node).__name__}"
                )
        if prev is not None and not isinstance(prev, Selection):
            raise InvalidArgumentError("prev must be a Selection")
        self._nodes = nodes
        self.prev = prev

    def _derive(self, nodes: Iterable[OverlayNode], selector: Selector = None) -> 'Selection':
        """Return a new Selection of ``nodes`` filtered by ``selector``."""
        predicate = compile_selector(selector)
        return Selection([node for node in nodes if predicate(node)], self)

    @property
    def nodes(self) -> tuple:
        return tuple(self._nodes)

    # Reading results

    def get(self, index: Optional[int] = None) -> Any:
        """Return the selection as serialized raw nodes.

        Args:
            index: Position of a single node (negative counts from the end)

        Returns:
            A list of serialized nodes, or a single one when ``index`` is given
        """
        if index is None:
            return [node.to_json() for node in self._nodes]
        if not _is_integer(index):
            raise InvalidArgumentError(f"get() index must be an integer, got {index!r}")
        return self._nodes[index].to_json()

    def length(self) -> int:
        return len(self._nodes)

    def value(self) -> str:
        """Concatenate the text of every node and its descendants, in post-order."""
        return ''.join(
            node.adapter.to_string(current.raw)
            for node in self._nodes
            for current in walk(node, "post")
        )

    def index(self, target: Any = None) -> int:
        """Search for a node in the selection or among siblings.

        With no argument, return the position of the first node among its
        siblings. With an OverlayNode, return that node's position within
        this selection. With a selector, return the position of the first
        node among its siblings that match the selector.

        Returns:
            The position, or -1 when there is nothing to find
        """
        if target is None:
            return sibling_index(self._nodes[0]) if self._nodes else -1

        if isinstance(target, OverlayNode):
            for i, node in enumerate(self._nodes):
                if node is target:
                    return i
            return -1

        if not self._nodes:
            return -1
        first = self._nodes[0]
        siblings = sibling_list(first)
        if siblings is None:
            return -1
        return self._derive(siblings, target).index(first)

    # Sequence helpers

    def map(self, fn: Callable[[OverlayNode], Any]) -> List[Any]:
        return [fn(node) for node in self._nodes]

    def reduce(self, fn: Callable[[Any, OverlayNode], Any], acc: Any) -> Any:
        return fold(fn, self._nodes, acc)

    def concat(self, other: Union['Selection', OverlayNode, Iterable[OverlayNode]]) -> 'Selection':
        """Return a new Selection holding this selection's nodes followed by ``other``'s."""
        if not isinstance(other, Selection):
            other = Selection(other)
        return Selection(self._nodes + other._nodes, self)

    # Filtering

    def filter(self, selector: Selector = None) -> 'Selection':
        """Reduce the selection to the nodes that match the selector."""
        return self._derive(self._nodes, selector)

    def eq(self, index: int) -> 'Selection':
        """Reduce the selection to the node at ``index``.

        An index outside ``0 <= index < length()`` (negative indices
        included) gives an empty Selection.

        Raises:
            InvalidArgumentError: If ``index`` is not an integer
        """
        if not _is_integer(index):
            raise InvalidArgumentError(f"eq() requires an integer index, got {index!r}")
        if 0 <= index < len(self._nodes):
            return Selection(self._nodes[index], self)
        return Selection([], self)

    def first(self) -> 'Selection':
        return self.eq(0)

    def last(self) -> 'Selection':
        return self.eq(self.length() - 1)

    def has(self, selector: Selector = None) -> 'Selection':
        """Reduce the selection to nodes with a descendant matching the selector."""
        predicate = compile_selector(selector)
        return Selection(
            [node for node in self._nodes if any(predicate(d) for d in descendants(node))],
            self,
        )

    def has_parent(self, selector: Selector = None) -> 'Selection':
        """Reduce the selection to nodes whose immediate parent matches the selector."""
        predicate = compile_selector(selector)
        return Selection(
            [node for node in self._nodes if node.parent is not None and predicate(node.parent)],
            self,
        )

    def has_parents(self, selector: Selector = None) -> 'Selection':
        """Reduce the selection to nodes with any ancestor matching the selector."""
        predicate = compile_selector(selector)
        return Selection(
            [node for node in self._nodes if any(predicate(a) for a in ancestors(node))],
            self,
        )

    # Traversal

    def children(self, selector: Selector = None) -> 'Selection':
        """Get the direct children of every node, optionally filtered."""
        nodes = [
            child
            for node in self._nodes if node.children is not None
            for child in node.children
        ]
        return self._derive(nodes, selector)

    def find(self, selector: Selector = None) -> 'Selection':
        """Get the descendants of every node that match the selector.

        Descendants are collected in post-order, so a nested match comes
        before a matching ancestor. The nodes themselves are not included.
        """
        predicate = compile_selector(selector)
        nodes = unique(
            descendant
            for node in self._nodes
            for descendant in descendants(node)
            if predicate(descendant)
        )
        return Selection(nodes, self)

    def closest(self, selector: Selector = None) -> 'Selection':
        """For each node, get the first of itself and its ancestors that matches."""
        predicate = compile_selector(selector)
        nodes = []
        for node in self._nodes:
            current = node
            while current is not None and not predicate(current):
                current = current.parent
            if current is not None:
                nodes.append(current)
        return Selection(unique(nodes), self)

    def parent(self, selector: Selector = None) -> 'Selection':
        """Get the immediate parent of every node, optionally filtered."""
        nodes = [node.parent for node in self._nodes if node.parent is not None]
        return self._derive(nodes, selector)

    def parents(self, selector: Selector = None) -> 'Selection':
        """Get all ancestors of every node, innermost first, optionally filtered."""
        nodes = unique(
            ancestor
            for node in self._nodes
            for ancestor in ancestors(node)
        )
        return self._derive(nodes, selector)

    def parents_until(self, selector: Selector = None) -> 'Selection':
        """Get the ancestors of every node up to, but not including, a match."""
        predicate = compile_selector(selector)
        nodes = []
        for node in self._nodes:
            for ancestor in ancestors(node):
                if predicate(ancestor):
                    break
                nodes.append(ancestor)
        return Selection(unique(nodes), self)

    def next(self, selector: Selector = None) -> 'Selection':
        """Get the immediately following sibling of every node, optionally filtered."""
        nodes = []
        for node in self._nodes:
            siblings = sibling_list(node)
            i = sibling_index(node)
            if siblings is not None and 0 <= i < len(siblings) - 1:
                nodes.append(siblings[i + 1])
        return self._derive(nodes, selector)

    def next_all(self, selector: Selector = None) -> 'Selection':
        """Get all following siblings of every node, in document order."""
        nodes = []
        for node in self._nodes:
            siblings = sibling_list(node)
            i = sibling_index(node)
            if siblings is not None and i >= 0:
                nodes.extend(siblings[i + 1:])
        return self._derive(unique(nodes), selector)

    def prev(self, selector: Selector = None) -> 'Selection':
        """Get the immediately preceding sibling of every node, optionally filtered."""
        nodes = []
        for node in self._nodes:
            siblings = sibling_list(node)
            i = sibling_index(node)
            if siblings is not None and i > 0:
                nodes.append(siblings[i - 1])
        return self._derive(nodes, selector)

    def prev_all(self, selector: Selector = None) -> 'Selection':
        """Get all preceding siblings of every node, nearest first."""
        nodes = []
        for node in self._nodes:
            siblings = sibling_list(node)
            i = sibling_index(node)
            if siblings is not None and i > 0:
                nodes.extend(reversed(siblings[:i]))
        return self._derive(unique(nodes), selector)

    # Mutation

    def after(self, value: Any) -> 'Selection':
        """Insert a node immediately after every node in the selection.

        ``value`` may be a raw node or an OverlayNode. Roots are skipped.
        """
        for node in self._nodes:
            i = sibling_index(node)
            if i < 0:
                logger.debug(f"after() skipped {node!r}: not attached to a parent")
                continue
            node.parent.children.insert(i + 1, node.parent.attach(value))
        return self

    def before(self, value: Any) -> 'Selection':
        """Insert a node immediately before every node in the selection.

        ``value`` may be a raw node or an OverlayNode. Roots are skipped.
        """
        for node in self._nodes:
            i = sibling_index(node)
            if i < 0:
                logger.debug(f"before() skipped {node!r}: not attached to a parent")
                continue
            node.parent.children.insert(i, node.parent.attach(value))
        return self

    def remove(self) -> 'Selection':
        """Remove every node in the selection from its parent."""
        for node in self._nodes:
            i = sibling_index(node)
            if i < 0:
                logger.debug(f"remove() skipped {node!r}: not attached to a parent")
                continue
            del node.parent.children[i]
        return self

    def replace(self, fn: Callable[[OverlayNode], Any]) -> 'Selection':
        """Replace every node with the node returned by ``fn(node)``.

        ``fn`` receives the OverlayNode and may return a raw node or an
        OverlayNode. Roots are skipped.

        Raises:
            InvalidArgumentError: If ``fn`` is not callable
        """
        if not callable(fn):
            raise InvalidArgumentError("replace() requires a callable")
        for node in self._nodes:
            if sibling_index(node) < 0:
                logger.debug(f"replace() skipped {node!r}: not attached to a parent")
                continue
            replacement = node.parent.attach(fn(node))
            # fn may have moved things around; look the node up again
            i = sibling_index(node)
            if i >= 0:
                node.parent.children[i] = replacement
        return self

    # Python protocol

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[OverlayNode]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        types = [node.type for node in self._nodes[:5]]
        more = ", ..." if len(self._nodes) > 5 else ""
        return f"Selection({len(self._nodes)} nodes: {types!r}{more})"
