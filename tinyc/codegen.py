"""
Code generator - prints a target AST as C-like call expressions.

Dispatch is by node type tag: each target node type has a method of the
same name on `CodeGenerator`, called with the node and the already
generated text of its children.
"""

from tinyc import target
from tinyc.errors import CodegenError, node_type_of
from tinyc.traverser import children


class CodeGenerator:
    """Turns target AST nodes into source text, children before parents."""

    def generate(self, node):
        parts = []
        # (node, expanded) entries; an expanded node has its children's text on `parts`
        stack = [(node, False)]

        while stack:
            current, expanded = stack.pop()
            if not isinstance(current, target.TARGET_NODES):
                raise CodegenError(node_type_of(current))

            nodes = children(current)
            if expanded:
                start = len(parts) - len(nodes)
                text = getattr(self, current.type)(current, parts[start:])
                del parts[start:]
                parts.append(text)
                continue

            stack.append((current, True))
            for child in reversed(nodes):
                stack.append((child, False))

        return parts[0]

    def Program(self, node, body):
        return "\n".join(body)

    def ExpressionStatement(self, node, body):
        return body[0] + ";"

    def CallExpression(self, node, body):
        callee, *args = body
        return f"{callee}({', '.join(args)})"

    def Identifier(self, node, body):
        return node.name

    def NumberLiteral(self, node, body):
        return node.value

    def StringLiteral(self, node, body):
        return f'"{node.value}"'


def generate(node):
    """Generate output text for any target AST node."""
    return CodeGenerator().generate(node)
