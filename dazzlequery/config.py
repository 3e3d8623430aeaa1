"""Configuration system for DazzleQuery.

This module defines how users describe their tree format to the query
engine. A tree format is described by five adapter functions; every one
of them has a default that understands the common ``{type, value}`` node
shape, where ``value`` is either a list of child nodes or a string.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, List, Optional

from .errors import InvalidConfigError


def default_has_children(node: Any) -> bool:
    """A node has children when it is a mapping whose ``value`` is a list."""
    return isinstance(node, Mapping) and isinstance(node.get('value'), (list, tuple))


def default_get_children(node: Mapping) -> List[Any]:
    return node.get('value')


def default_get_type(node: Any) -> Optional[str]:
    return node.get('type') if isinstance(node, Mapping) else None


def default_to_json(node: Any, children: Optional[List[Any]] = None) -> Any:
    """Merge (possibly mutated) children back into a copy of the node.

    ``children`` is None for nodes without children, meaning the original
    value is kept. Values that are not mappings are returned unchanged.
    """
    if not isinstance(node, Mapping):
        return node
    merged = dict(node)
    if children is not None:
        merged['value'] = children
    return merged


def default_to_string(node: Any) -> str:
    value = node.get('value') if isinstance(node, Mapping) else None
    return value if isinstance(value, str) else ''


# Names from the language-neutral adapter contract, accepted as aliases
OPTION_ALIASES = {
    'hasChildren': 'has_children',
    'getChildren': 'get_children',
    'getType': 'get_type',
    'toJSON': 'to_json',
    'toString': 'to_string',
}


@dataclass
class QueryOptions:
    """Adapter functions describing how to read and rebuild raw nodes.

    This is the primary way users plug a tree format into the engine.
    Options are validated once when a query is created; the resolved
    functions are then bound into a FunctionAdapter and threaded through
    every OverlayNode and Selection built for that query.
    """

    # Return True if the node has children
    has_children: Callable[[Any], bool] = default_has_children

    # Return the ordered children of a node (only called when has_children is True)
    get_children: Callable[[Any], List[Any]] = default_get_children

    # Return the node type used for selector matching
    get_type: Callable[[Any], str] = default_get_type

    # Rebuild a node from its children (None means "use the original value")
    to_json: Callable[[Any, Optional[List[Any]]], Any] = default_to_json

    # Return the text of a leaf node ('' for anything else)
    to_string: Callable[[Any], str] = default_to_string

    @classmethod
    def option_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> 'QueryOptions':
        """Create options from a plain mapping of overrides.

        Keys may use either the snake_case field names or the camelCase
        names of the adapter contract (``hasChildren``, ``toJSON``, ...).

        Args:
            mapping: Overrides for any subset of the five options

        Returns:
            QueryOptions with the overrides applied over the defaults

        Raises:
            InvalidConfigError: If a key does not name an option
        """
        return cls().merged(**mapping)

    def merged(self, **overrides) -> 'QueryOptions':
        """Return a copy of these options with ``overrides`` applied."""
        names = self.option_names()
        changes = {}
        for key, value in overrides.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in names:
                raise InvalidConfigError(f"Unknown option: {key!r}")
            changes[name] = value
        return replace(self, **changes)

    def validate(self) -> List[str]:
        """Validate that every option is callable.

        Returns:
            List of validation errors (empty if valid)
        """
        aliases = {name: alias for alias, name in OPTION_ALIASES.items()}
        errors = []
        for name in self.option_names():
            if not callable(getattr(self, name)):
                errors.append(f"options.{name} ({aliases[name]}) must be callable")
        return errors
