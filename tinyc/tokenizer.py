"""
Tokenizer for the tiny Lisp-like language.

Turns raw source text into a flat list of tokens:

    (add 2 (subtract 4 2))

    [{type: 'paren', value: '('}, {type: 'name', value: 'add'}, ...]

Each character is classified by the first pattern it matches, then the
token grows over a maximal run of the same class.
"""

import re
from typing import List, Literal

from pydantic import BaseModel, ConfigDict

from tinyc.errors import LexError

WHITESPACE = re.compile(r"\s")
NUMBERS = re.compile(r"[0-9]")
LETTERS = re.compile(r"[a-zA-Z]")

TokenType = Literal["paren", "name", "number", "string"]


class Token(BaseModel):
    """A single lexical unit: a type tag plus the literal text."""
    model_config = ConfigDict(frozen=True)

    type: TokenType
    value: str


def tokenize(source: str) -> List[Token]:
    """
    Split source text into tokens.

    Args:
        source: Program text

    Returns:
        Tokens in the order they appear in the source

    Raises:
        LexError: On an unrecognized character or an unterminated string
    """
    current = 0
    tokens = []

    while current < len(source):
        char = source[current]

        if char in "()":
            tokens.append(Token(type="paren", value=char))
            current += 1
            continue

        if WHITESPACE.match(char):
            current += 1
            continue

        if NUMBERS.match(char):
            start = current
            while current < len(source) and NUMBERS.match(source[current]):
                current += 1
            tokens.append(Token(type="number", value=source[start:current]))
            continue

        if char == '"':
            closing = source.find('"', current + 1)
            if closing < 0:
                raise LexError(
                    char,
                    position=current,
                    source=source,
                    message="Unterminated string",
                    suggestion="Close the string with a matching '\"'",
                )
            tokens.append(Token(type="string", value=source[current + 1:closing]))
            current = closing + 1
            continue

        if LETTERS.match(char):
            start = current
            while current < len(source) and LETTERS.match(source[current]):
                current += 1
            tokens.append(Token(type="name", value=source[start:current]))
            continue

        raise LexError(char, position=current, source=source)

    return tokens
