"""NodeAdapter abstraction for DazzleQuery.

The NodeAdapter is what makes the query engine format-agnostic. The
engine never looks inside a raw node itself; every question about a
node (does it have children, what are they, what type is it, how is it
rebuilt, what text does it hold) goes through the adapter.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..config import (
    QueryOptions,
    default_has_children,
    default_get_children,
    default_get_type,
    default_to_json,
    default_to_string,
)


class NodeAdapter(ABC):
    """Abstract adapter for reading and rebuilding raw tree nodes.

    Subclass this to support a tree format whose nodes do not follow the
    ``{type, value}`` shape, or pass plain functions through QueryOptions
    and let FunctionAdapter bind them.
    """

    @abstractmethod
    def has_children(self, node: Any) -> bool:
        """Check if a raw node has a list of children.

        Args:
            node: The raw node

        Returns:
            True if get_children() can be called for this node
        """
        pass

    @abstractmethod
    def get_children(self, node: Any) -> List[Any]:
        """Get the ordered raw children of a node.

        Only called when has_children() returned True.

        Args:
            node: The raw parent node

        Returns:
            Ordered sequence of raw child nodes
        """
        pass

    @abstractmethod
    def get_type(self, node: Any) -> str:
        """Get the type name used for selector matching.

        Args:
            node: The raw node

        Returns:
            Type name (e.g. "rule", "declaration")
        """
        pass

    @abstractmethod
    def to_json(self, node: Any, children: Optional[List[Any]]) -> Any:
        """Rebuild a raw node from its serialized children.

        Args:
            node: The original raw node
            children: Serialized children, or None to keep the original value

        Returns:
            A node in the original raw format
        """
        pass

    @abstractmethod
    def to_string(self, node: Any) -> str:
        """Get the text held directly by a node.

        Args:
            node: The raw node

        Returns:
            Leaf text, or '' for nodes that hold no string value
        """
        pass


class DefaultAdapter(NodeAdapter):
    """Adapter for ``{type, value}`` nodes where ``value`` is a list or a string."""

    def has_children(self, node: Any) -> bool:
        return default_has_children(node)

    def get_children(self, node: Any) -> List[Any]:
        return default_get_children(node)

    def get_type(self, node: Any) -> str:
        return default_get_type(node)

    def to_json(self, node: Any, children: Optional[List[Any]]) -> Any:
        return default_to_json(node, children)

    def to_string(self, node: Any) -> str:
        return default_to_string(node)


class FunctionAdapter(NodeAdapter):
    """Adapter that delegates to the functions held by a QueryOptions.

    The options are expected to have been validated already; this class
    only binds them so the rest of the engine has a single interface.
    """

    def __init__(self, options: QueryOptions):
        """Initialize adapter from resolved options.

        Args:
            options: Validated QueryOptions
        """
        self.options = options

    def has_children(self, node: Any) -> bool:
        return bool(self.options.has_children(node))

    def get_children(self, node: Any) -> List[Any]:
        return self.options.get_children(node)

    def get_type(self, node: Any) -> str:
        return self.options.get_type(node)

    def to_json(self, node: Any, children: Optional[List[Any]]) -> Any:
        return self.options.to_json(node, children)

    def to_string(self, node: Any) -> str:
        return self.options.to_string(node)

    def __repr__(self) -> str:
        overridden = [
            name for name in QueryOptions.option_names()
            if getattr(self.options, name) is not getattr(QueryOptions, name)
        ]
        return f"{self.__class__.__name__}(overrides={overridden!r})"
