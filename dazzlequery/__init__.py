"""DazzleQuery - jQuery-style querying and rewriting of arbitrary trees.

DazzleQuery wraps any tree (most often an abstract syntax tree) in a node
overlay with parent links, and exposes a chainable Selection API for
finding, filtering, traversing and mutating nodes.

Usage:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from dazzlequery import create_query

    query = create_query(ast)
    query().find('rule').eq(1).after(new_rule)
    query().find('class').value()
━━━━━━━━━━━━━━━━━━━━━━━━━━

The tree format is described by five adapter functions (see QueryOptions).
The defaults understand ``{type, value}`` nodes.
"""

__version__ = "0.1.0"

from .api import create_query, Query
from .config import QueryOptions
from .core import (
    NodeAdapter,
    DefaultAdapter,
    FunctionAdapter,
    OverlayNode,
    compile_selector,
)
from .errors import (
    QueryError,
    InvalidInputError,
    InvalidConfigError,
    InvalidArgumentError,
)
from .selection import Selection

__all__ = [
    "__version__",
    # API
    "create_query",
    "Query",
    "Selection",
    # Config
    "QueryOptions",
    # Core
    "NodeAdapter",
    "DefaultAdapter",
    "FunctionAdapter",
    "OverlayNode",
    "compile_selector",
    # Errors
    "QueryError",
    "InvalidInputError",
    "InvalidConfigError",
    "InvalidArgumentError",
]
