"""
Target AST produced by the transformer and printed by the code generator.

    Program
      body: [ExpressionStatement, ...]
    ExpressionStatement
      expression: CallExpression
    CallExpression
      callee: Identifier
      arguments: [NumberLiteral | StringLiteral | CallExpression, ...]

Literal leaves have the same shape in both trees and are shared with
`tinyc.ast`.
"""

from typing import Annotated, List, Literal, Union

from pydantic import Field

from tinyc.ast import Node, NumberLiteral, StringLiteral


class Identifier(Node):
    type: Literal["Identifier"] = "Identifier"
    name: str


class CallExpression(Node):
    type: Literal["CallExpression"] = "CallExpression"
    callee: Identifier
    arguments: List["Argument"] = Field(default_factory=list)


Argument = Annotated[
    Union[NumberLiteral, StringLiteral, CallExpression],
    Field(discriminator="type"),
]


class ExpressionStatement(Node):
    type: Literal["ExpressionStatement"] = "ExpressionStatement"
    expression: CallExpression


class Program(Node):
    type: Literal["Program"] = "Program"
    body: List[ExpressionStatement] = Field(default_factory=list)


CallExpression.model_rebuild()
Program.model_rebuild()

TARGET_NODES = (Program, ExpressionStatement, CallExpression, Identifier, NumberLiteral, StringLiteral)
