# ==========================================
# ERROR HANDLING: Result<T, E> Model
# ==========================================

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from tinyc.errors import (
    CodegenError,
    LexError,
    ParseError,
    TinyCompileError,
    TransformError,
    TraverseError,
)


class ErrorKind(str, Enum):
    """Categorizes compilation failures by the stage that raised them."""
    LEX_ERROR = "LexError"
    PARSE_ERROR = "ParseError"
    TRAVERSE_ERROR = "TraverseError"
    TRANSFORM_ERROR = "TransformError"
    CODEGEN_ERROR = "CodegenError"


_KINDS = {
    LexError: ErrorKind.LEX_ERROR,
    ParseError: ErrorKind.PARSE_ERROR,
    TraverseError: ErrorKind.TRAVERSE_ERROR,
    TransformError: ErrorKind.TRANSFORM_ERROR,
    CodegenError: ErrorKind.CODEGEN_ERROR,
}


class CompileFailure(BaseModel):
    """Plain-data description of a failed compilation."""
    kind: ErrorKind
    message: str
    line_number: Optional[int] = None
    column: Optional[int] = None

    @classmethod
    def from_exception(cls, error: TinyCompileError) -> "CompileFailure":
        return cls(
            kind=_KINDS[type(error)],
            message=error.message,
            line_number=error.line_number,
            column=error.column,
        )

    def __str__(self):
        result = "❌ " + self.kind.value + ": " + self.message
        if self.line_number:
            result += f" (line {self.line_number}, column {self.column})"
        return result


class Result:
    """Base class for Result<T, E> (Ok or Err)."""

    def is_ok(self) -> bool:
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        return isinstance(self, Err)

    def unwrap(self):
        """Get value or raise error."""
        if isinstance(self, Ok):
            return self.value
        else:
            raise RuntimeError(f"Called unwrap() on Err: {self.error.message}")


class Ok(Result):
    """Success case: Ok<T>."""

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"Ok({self.value!r})"


class Err(Result):
    """Error case: Err<E>."""

    def __init__(self, error):
        self.error = error

    def __repr__(self):
        return f"Err({self.error!r})"

    def __str__(self):
        return str(self.error)
