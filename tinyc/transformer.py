"""
AST Transformer - rebuilds the source AST as a target AST.

    Program                         Program
      CallExpression add     ->       ExpressionStatement
        NumberLiteral 2                 CallExpression
        CallExpression subtract           callee: Identifier add
          NumberLiteral 4                 arguments:
          NumberLiteral 2                   NumberLiteral 2
                                            CallExpression
                                              callee: Identifier subtract
                                              arguments: [4, 2]

The target tree is built in a single traversal. Each source node that has
children is mapped to the list in the target tree where those children
must be appended (its "sink"), so a nested call appends into the
`arguments` of the call that encloses it.
"""

from tinyc import ast, target
from tinyc.errors import TransformError, node_type_of
from tinyc.traverser import traverse


class AstTransformer:
    """
    Transforms a source `Program` into a target `Program`.

    The sink table is keyed by `id()` of the source node and only lives for
    one `transform()` call; source nodes are never modified.
    """

    def __init__(self):
        self._sinks = {}

    def transform(self, program):
        if not isinstance(program, ast.Program):
            raise TransformError(
                f"Expected a source Program, got {node_type_of(program)}",
                node_type=node_type_of(program),
            )

        new_program = target.Program()
        self._sinks = {id(program): new_program.body}
        try:
            traverse(program, self.visitor())
        finally:
            self._sinks = {}
        return new_program

    def visitor(self):
        return {
            "NumberLiteral": {"enter": self.number_literal},
            "StringLiteral": {"enter": self.string_literal},
            "CallExpression": {"enter": self.call_expression},
        }

    def number_literal(self, node, parent):
        self._sink_for(node, parent).append(ast.NumberLiteral(value=node.value))

    def string_literal(self, node, parent):
        self._sink_for(node, parent).append(ast.StringLiteral(value=node.value))

    def call_expression(self, node, parent):
        expression = target.CallExpression(callee=target.Identifier(name=node.name))
        # Children of this call go into its own arguments, not the parent's sink
        self._sinks[id(node)] = expression.arguments

        if isinstance(parent, ast.CallExpression):
            self._sinks[id(parent)].append(expression)
        else:
            self._sinks[id(parent)].append(target.ExpressionStatement(expression=expression))

    def _sink_for(self, node, parent):
        """Return where a literal's translation goes; literals only appear as call arguments."""
        if not isinstance(parent, ast.CallExpression):
            raise TransformError(
                f"{node.type} must be a call argument, found under {node_type_of(parent)}",
                node_type=node.type,
            )
        return self._sinks[id(parent)]


def transform(program):
    """Transform a source `Program` into a target `Program`."""
    return AstTransformer().transform(program)
