#!/usr/bin/env python3
"""
Querying and rewriting a Python syntax tree with DazzleQuery.

Python's ``ast`` nodes are objects, not mappings, so this example first
converts them into ``{type, value}`` dictionaries that the default
adapter options understand, then runs a few queries and a rewrite.
"""

import ast
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from dazzlequery import create_query


SOURCE = '''
def greet(name):
    print("hello", name)

def shout(name):
    print(name.upper())
    return name
'''

# Leaf nodes and the attribute holding their text
LEAF_TEXT = {
    ast.Name: "id",
    ast.arg: "arg",
    ast.Constant: "value",
}


def to_tree(node: ast.AST) -> dict:
    """Convert an ast node into a {type, value} dictionary."""
    for leaf_type, attr in LEAF_TEXT.items():
        if isinstance(node, leaf_type):
            return {"type": leaf_type.__name__, "value": str(getattr(node, attr))}
    return {
        "type": type(node).__name__,
        "value": [to_tree(child) for child in ast.iter_child_nodes(node)],
    }


def main():
    tree = to_tree(ast.parse(SOURCE))
    query = create_query(tree)

    # Every function that calls print()
    printers = query("FunctionDef").has(
        lambda node: node.type == "Call" and query(node).children().first().value() == "print"
    )
    print(f"Functions calling print(): {printers.length()}")

    # Arguments of the second function
    print("Arguments of shout():", query("FunctionDef").eq(1).find("arg").value())

    # The function each Return statement belongs to
    returns = query("Return").closest("FunctionDef")
    print(f"Functions with a return: {returns.length()}")

    # Rewrite print -> log everywhere
    query("Name").filter(lambda node: node.raw["value"] == "print").replace(
        lambda node: {"type": "Name", "value": "log"}
    )
    print("Names after rewrite:", query("Name").map(lambda node: query(node).value()))


if __name__ == "__main__":
    main()
