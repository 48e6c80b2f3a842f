"""
Source AST produced by the parser.

    Program
      body: [CallExpression, ...]
    CallExpression
      name: 'add'
      params: [NumberLiteral | StringLiteral | CallExpression, ...]

Nodes are frozen pydantic models; `model_dump()` gives the plain
dictionary form and `Program.model_validate()` reads it back.
"""

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class NumberLiteral(Node):
    type: Literal["NumberLiteral"] = "NumberLiteral"
    value: str  # raw digits, never converted to int


class StringLiteral(Node):
    type: Literal["StringLiteral"] = "StringLiteral"
    value: str


class CallExpression(Node):
    type: Literal["CallExpression"] = "CallExpression"
    name: str
    params: List["Param"] = Field(default_factory=list)


Param = Annotated[
    Union[NumberLiteral, StringLiteral, CallExpression],
    Field(discriminator="type"),
]


class Program(Node):
    type: Literal["Program"] = "Program"
    body: List[CallExpression] = Field(default_factory=list)


CallExpression.model_rebuild()
Program.model_rebuild()

SOURCE_NODES = (Program, CallExpression, NumberLiteral, StringLiteral)
