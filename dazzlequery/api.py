"""High-level API for DazzleQuery.

``create_query`` validates the adapter options, builds the node overlay
for a tree once, and returns a Query: a callable that turns its argument
into a Selection.

Example:
    >>> query = create_query(tree)
    >>> query().find('number').get()
    [{'type': 'number', 'value': '1'}, ...]
    >>> query('number').length()   # shorthand for query().find('number')
    3
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from .config import QueryOptions
from .core.adapter import FunctionAdapter, NodeAdapter
from .core.node import OverlayNode
from .core.selector import is_type_selector
from .errors import InvalidConfigError, InvalidInputError
from .selection import Selection

logger = logging.getLogger(__name__)


class Query:
    """Callable entry point bound to one overlay root.

    Calling the query with:
    - nothing returns a Selection holding the root
    - a type name or compiled pattern returns ``query().find(selector)``
    - an OverlayNode, a raw node, or a list/tuple of either returns a
      Selection of exactly those nodes (raw nodes are wrapped as new,
      detached roots)

    A bare ``str`` is always read as a type name. With an adapter whose
    raw nodes are strings, select such a node by passing it in a list:
    ``query([raw_leaf])``.
    """

    def __init__(self, root: OverlayNode, adapter: NodeAdapter):
        self.root = root
        self.adapter = adapter

    def __call__(self, target: Any = None) -> Selection:
        if target is None:
            return Selection(self.root)
        if is_type_selector(target):
            return Selection(self.root).find(target)
        if isinstance(target, Selection):
            return Selection(target.nodes, target)
        if isinstance(target, (list, tuple)):
            return Selection([self.wrap(item) for item in target])
        return Selection(self.wrap(target))

    def wrap(self, value: Any) -> OverlayNode:
        """Wrap a raw node with this query's adapter (OverlayNodes pass through)."""
        return OverlayNode.create(value, self.adapter)

    def __repr__(self) -> str:
        return f"Query(root={self.root!r}, adapter={self.adapter!r})"


def _resolve_adapter(options: Union[None, QueryOptions, Mapping, NodeAdapter],
                     overrides: dict) -> NodeAdapter:
    """Turn the user's options into a validated adapter.

    Raises:
        InvalidConfigError: If the options are of an unknown kind, name an
            unknown option, or any resolved option is not callable
    """
    if isinstance(options, NodeAdapter):
        if overrides:
            raise InvalidConfigError(
                "Option overrides cannot be combined with a NodeAdapter instance"
            )
        return options

    if options is None:
        options = QueryOptions()
    elif isinstance(options, Mapping):
        options = QueryOptions.from_mapping(options)
    elif not isinstance(options, QueryOptions):
        raise InvalidConfigError(
            f"options must be a QueryOptions, a mapping or a NodeAdapter, got {type(options).__name__}"
        )

    if overrides:
        options = options.merged(**overrides)

    errors = options.validate()
    if errors:
        raise InvalidConfigError(f"Invalid configuration: {'; '.join(errors)}")

    return FunctionAdapter(options)


def create_query(tree: Mapping,
                 options: Optional[Union[QueryOptions, Mapping, NodeAdapter]] = None,
                 **overrides) -> Query:
    """Create a query function over a tree.

    The overlay for ``tree`` is built once, here. It is kept consistent by
    the Selection mutation methods and is never rebuilt; changing ``tree``
    directly afterwards leaves the overlay stale.

    Args:
        tree: Root of the raw tree; must be a mapping
        options: QueryOptions, a mapping of option overrides, or a
            NodeAdapter instance
        **overrides: Option overrides applied on top of ``options``

    Returns:
        Query callable

    Raises:
        InvalidInputError: If ``tree`` is not a mapping
        InvalidConfigError: If any adapter option is not callable

    Example:
        >>> query = create_query(ast, get_type=lambda node: node['kind'])
        >>> query().find('rule').eq(1).remove()
    """
    if not isinstance(tree, Mapping):
        raise InvalidInputError(
            f'"tree" must be a plain object (mapping), got {type(tree).__name__}'
        )

    adapter = _resolve_adapter(options, overrides)
    root = OverlayNode.build(tree, adapter)
    logger.debug(f"Created query with {adapter!r}")
    return Query(root, adapter)
