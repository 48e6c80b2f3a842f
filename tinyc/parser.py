"""
Recursive-descent parser: token list -> source AST.

    [paren '(', name 'add', number '2', paren ')']

    Program(body=[CallExpression(name='add', params=[NumberLiteral('2')])])
"""

from typing import List

from tinyc.ast import CallExpression, NumberLiteral, Program, StringLiteral
from tinyc.errors import ParseError
from tinyc.tokenizer import Token


class Parser:
    """Walks a token list with a single cursor, building nodes as it goes."""

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.current = 0

    def parse(self) -> Program:
        """Parse every top-level call until the tokens run out."""
        program = Program()
        while self.current < len(self.tokens):
            token = self.tokens[self.current]
            # Program bodies hold only calls; a bare literal here is rejected
            if not self._is_open(token):
                raise ParseError(
                    f"Expected '(' to start a top-level call, found {token.type} {token.value!r}",
                    token=token,
                    index=self.current,
                )
            program.body.append(self.walk())
        return program

    def walk(self):
        """
        Parse one node starting at the cursor and leave the cursor after it.

        Calls still waiting for their ')' are kept on an explicit stack, so
        nesting depth is not bounded by the interpreter's recursion limit.
        """
        open_calls = []
        while True:
            if open_calls:
                token = self._peek("Unterminated call expression")
            else:
                token = self._peek("Unexpected end of input")

            if open_calls and self._is_close(token):
                self.current += 1
                node = open_calls.pop()
            elif token.type == "number":
                self.current += 1
                node = NumberLiteral(value=token.value)
            elif token.type == "string":
                self.current += 1
                node = StringLiteral(value=token.value)
            elif self._is_open(token):
                self.current += 1
                name = self._peek("Expected a name after '('")
                if name.type != "name":
                    raise ParseError(
                        f"Expected a name after '(', found {name.type} {name.value!r}",
                        token=name,
                        index=self.current,
                    )
                self.current += 1
                open_calls.append(CallExpression(name=name.value))
                continue
            else:
                raise ParseError(f"Unexpected token type: {token.type}", token=token, index=self.current)

            if not open_calls:
                return node
            open_calls[-1].params.append(node)

    def _peek(self, message: str) -> Token:
        if self.current >= len(self.tokens):
            raise ParseError(message, index=self.current)
        return self.tokens[self.current]

    @staticmethod
    def _is_open(token: Token) -> bool:
        return token.type == "paren" and token.value == "("

    @staticmethod
    def _is_close(token: Token) -> bool:
        return token.type == "paren" and token.value == ")"


def parse(tokens: List[Token]) -> Program:
    """Parse a token list into a source `Program`."""
    return Parser(tokens).parse()
