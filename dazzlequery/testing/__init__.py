"""Testing utilities for DazzleQuery consumers."""

from .fixtures import make_node, clean_node, check_overlay_consistency

__all__ = ['make_node', 'clean_node', 'check_overlay_consistency']
