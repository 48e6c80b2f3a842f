# Tiny Compiler - Core Compiler Components
"""
Core modules for the tiny compiler:
- errors: Error taxonomy and formatting utilities
- tokenizer: Source text to tokens
- parser: Tokens to source AST
- traverser: Visitor-driven depth-first walk over either AST
- transformer: Source AST to target AST
- codegen: Target AST to output text
- result: Ok/Err outcome wrapper for callers that prefer values to exceptions
"""

from .errors import (
    TinyCompileError,
    LexError,
    ParseError,
    TraverseError,
    TransformError,
    CodegenError,
)
from .tokenizer import Token, tokenize
from .parser import Parser, parse
from .traverser import traverse
from .transformer import AstTransformer, transform
from .codegen import CodeGenerator, generate
from .result import CompileFailure, Err, ErrorKind, Ok, Result

__all__ = [
    'TinyCompileError',
    'LexError',
    'ParseError',
    'TraverseError',
    'TransformError',
    'CodegenError',
    'Token',
    'tokenize',
    'Parser',
    'parse',
    'traverse',
    'AstTransformer',
    'transform',
    'CodeGenerator',
    'generate',
    'CompileFailure',
    'Err',
    'ErrorKind',
    'Ok',
    'Result',
]
