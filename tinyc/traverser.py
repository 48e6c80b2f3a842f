"""
Depth-first AST walker driven by a visitor mapping.

A visitor maps node type tags to optional `enter` / `exit` callbacks:

    traverse(program, {
        "CallExpression": {
            "enter": lambda node, parent: ...,
            "exit": lambda node, parent: ...,
        },
    })

`enter` fires before a node's children are visited, `exit` after all of
them. Both receive `(node, parent)`; the root's parent is None. The walker
knows the child layout of source and target trees alike.
"""

from tinyc import ast, target
from tinyc.errors import TraverseError, node_type_of


def children(node):
    """Return the child nodes of `node` in visiting order."""
    if isinstance(node, (ast.Program, target.Program)):
        return node.body
    if isinstance(node, ast.CallExpression):
        return node.params
    if isinstance(node, target.CallExpression):
        return [node.callee, *node.arguments]
    if isinstance(node, target.ExpressionStatement):
        return [node.expression]
    if isinstance(node, (ast.NumberLiteral, ast.StringLiteral, target.Identifier)):
        return []
    raise TraverseError(node_type_of(node))


def traverse(root, visitor):
    """Walk the tree under `root`, calling visitor hooks on every node."""
    # (node, parent, entered) entries; a node is pushed again to fire its exit
    stack = [(root, None, False)]

    while stack:
        node, parent, entered = stack.pop()

        if entered:
            exit_ = (visitor.get(node.type) or {}).get("exit")
            if exit_:
                exit_(node, parent)
            continue

        nodes = children(node)
        methods = visitor.get(node.type) or {}

        enter = methods.get("enter")
        if enter:
            enter(node, parent)

        stack.append((node, parent, True))
        for child in reversed(nodes):
            stack.append((child, node, False))
