"""
Error handling utilities for the tiny compiler.

Every stage aborts on the first problem it meets by raising one of the
exceptions below; nothing downstream tries to recover.
"""


class TinyCompileError(Exception):
    """Base exception for compilation errors with line numbers and hints."""
    def __init__(self, message, line_number=None, column=None, context=None, suggestion=None):
        self.message = message
        self.line_number = line_number
        self.column = column
        self.context = context  # The offending line
        self.suggestion = suggestion  # How to fix it
        super().__init__(self._format_error())

    def _format_error(self):
        """Format the error message with context and suggestion."""
        lines = ["\n❌ Compilation Error"]
        if self.line_number:
            lines.append(f" at line {self.line_number}")
            if self.column:
                lines.append(f", column {self.column}")
        lines.append(":\n")

        lines.append(f"   {self.message}\n")

        if self.context:
            lines.append(f"   > {self.context}\n")

        if self.suggestion:
            lines.append(f"   💡 {self.suggestion}\n")

        return "".join(lines)


class LexError(TinyCompileError):
    """A character that belongs to no token class, or an unterminated string."""
    def __init__(self, char, position=None, source=None, message=None, suggestion=None):
        self.char = char
        self.position = position
        line_number, column = locate(source, position)
        if message is None:
            message = f"Unrecognized character: {char!r}"
        if suggestion is None:
            suggestion = "Only parentheses, names, digits and double-quoted strings are allowed"
        super().__init__(
            message,
            line_number=line_number,
            column=column,
            context=get_line_context(source, line_number),
            suggestion=suggestion,
        )


class ParseError(TinyCompileError):
    """The token stream does not have the shape of a call expression."""
    def __init__(self, message, token=None, index=None):
        self.token = token
        self.index = index
        if index is not None:
            message = f"{message} (token {index})"
        super().__init__(message, suggestion="Check that every '(' is followed by a name and closed by ')'")


class TraverseError(TinyCompileError):
    """The traverser met a node it does not know how to descend into."""
    def __init__(self, node_type):
        self.node_type = node_type
        super().__init__(f"Unknown node type during traversal: {node_type}")


class TransformError(TinyCompileError):
    """The transformer was given something it cannot rebuild."""
    def __init__(self, message, node_type=None):
        self.node_type = node_type
        super().__init__(message)


class CodegenError(TinyCompileError):
    """The code generator met a node that is not part of the target tree."""
    def __init__(self, node_type):
        self.node_type = node_type
        super().__init__(f"Unknown node type during code generation: {node_type}")


def node_type_of(node):
    """Return the type tag of a node, falling back to its class name."""
    tag = getattr(node, "type", None)
    if isinstance(tag, str):
        return tag
    return type(node).__name__


def locate(source, offset):
    """Convert a 0-based character offset into a 1-based (line, column) pair."""
    if source is None or offset is None:
        return None, None
    offset = max(0, min(offset, len(source)))
    line_number = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line_number, column


def get_line_context(source_code, line_number):
    """Extract the line of code from source by line number (1-based)."""
    if not source_code or line_number is None:
        return None
    source_lines = source_code.split('\n')
    if 0 < line_number <= len(source_lines):
        return source_lines[line_number - 1].strip()
    return None
