"""Test helpers for DazzleQuery consumers.

These helpers build ``{type, value}`` trees by hand and verify that an
overlay is still consistent after a sequence of mutations.
"""

from collections.abc import Mapping
from typing import Any, Dict, List

from ..core.node import OverlayNode
from ..core.traversal import walk


def make_node(type_name: str, value: Any = None) -> Dict[str, Any]:
    """Build a ``{type, value}`` node.

    Args:
        type_name: Node type
        value: A string for leaves, or a list of child nodes

    Example:
        make_node('declaration', [make_node('property', 'color')])
    """
    return {'type': type_name, 'value': [] if value is None else value}


def clean_node(node: Any) -> Any:
    """Strip a ``{type, value}`` tree down to those two keys, recursively.

    Useful for comparing serialized output against trees whose nodes carry
    extra keys (positions, comments, ...).
    """
    if not isinstance(node, Mapping):
        return node
    value = node.get('value')
    if isinstance(value, (list, tuple)):
        value = [clean_node(child) for child in value]
    return {'type': node.get('type'), 'value': value}


def check_overlay_consistency(root: OverlayNode) -> List[str]:
    """Check that every node reachable from ``root`` points back at its parent.

    Returns:
        List of problems found (empty if the overlay is consistent)
    """
    problems = []
    seen = set()
    for node in walk(root, "pre"):
        if id(node) in seen:
            problems.append(f"{node!r} is reachable more than once")
            continue
        seen.add(id(node))
        if node.children is None:
            continue
        for i, child in enumerate(node.children):
            if child.parent is not node:
                problems.append(f"{child!r} at index {i} of {node!r} has a different parent")
            elif child.index() != i:
                problems.append(f"{child!r} reports index {child.index()}, expected {i}")
    return problems
