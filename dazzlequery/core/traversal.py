"""Walking helpers over the node overlay.

These functions only rely on the ``parent`` and ``children`` attributes
of OverlayNode, so they are shared by the node itself and by every
Selection operation.
"""

from collections import deque
from typing import Iterator, List, Optional


def walk(node, order: str = "post") -> Iterator:
    """Walk an overlay subtree, including ``node`` itself.

    Args:
        node: Root of the subtree
        order: "post" (children before parent), "pre" (parent first)
            or "bfs" (level by level)

    Yields:
        Overlay nodes in the requested order
    """
    if order == "post":
        if node.children is not None:
            for child in node.children:
                yield from walk(child, order)
        yield node
    elif order == "pre":
        yield node
        if node.children is not None:
            for child in node.children:
                yield from walk(child, order)
    elif order == "bfs":
        queue = deque([node])
        while queue:
            current = queue.popleft()
            yield current
            if current.children is not None:
                queue.extend(current.children)
    else:
        raise ValueError(f"Unknown order: {order}")


def descendants(node) -> Iterator:
    """Yield every descendant of ``node`` in post-order, excluding ``node``."""
    if node.children is None:
        return
    for child in node.children:
        yield from walk(child, "post")


def ancestors(node) -> Iterator:
    """Yield ancestors from the parent up to the root."""
    current = node.parent
    while current is not None:
        yield current
        current = current.parent


def sibling_list(node) -> Optional[List]:
    """Return the children list that holds ``node``, or None for a root."""
    parent = node.parent
    if parent is None or parent.children is None:
        return None
    return parent.children


def sibling_index(node) -> int:
    """Return the position of ``node`` among its siblings, or -1.

    -1 is returned for a root, and for a node that has been removed from
    its parent's children.
    """
    siblings = sibling_list(node)
    if siblings is None:
        return -1
    for i, sibling in enumerate(siblings):
        if sibling is node:
            return i
    return -1


def unique(nodes) -> List:
    """Drop repeated nodes (by identity), keeping the first occurrence."""
    seen = set()
    result = []
    for node in nodes:
        if id(node) in seen:
            continue
        seen.add(id(node))
        result.append(node)
    return result
