import sys

# Import from the core package
from tinyc.codegen import generate
from tinyc.errors import TinyCompileError
from tinyc.parser import parse
from tinyc.result import CompileFailure, Err, Ok
from tinyc.tokenizer import tokenize
from tinyc.transformer import transform

# Global verbose flag
_VERBOSE = False

def set_verbose(value):
    """Set the global verbose flag."""
    global _VERBOSE
    _VERBOSE = value

def debug_log(message):
    """Log a debug message to stderr if verbose mode is enabled."""
    if _VERBOSE:
        print(f"\033[94mDEBUG:\033[0m {message}", file=sys.stderr)


def compile_stages(source_code):
    """
    Run the whole pipeline and keep every intermediate result.

    Returns:
        dict with 'tokens', 'ast', 'target' and 'output'
    """
    # STEP 1: TOKENIZE
    tokens = tokenize(source_code)
    debug_log(f"Tokenized {len(source_code)} characters into {len(tokens)} tokens")

    # STEP 2: PARSE
    ast = parse(tokens)
    debug_log(f"Parsed {len(ast.body)} top-level call(s)")

    # STEP 3: TRANSFORM
    new_ast = transform(ast)
    debug_log(f"Transformed into {len(new_ast.body)} statement(s)")

    # STEP 4: GENERATE
    output = generate(new_ast)
    debug_log(f"Generated {len(output)} characters of output")

    return {"tokens": tokens, "ast": ast, "target": new_ast, "output": output}


def compile_source(source_code):
    """Compile source text to C-like call expressions. Raises on the first error."""
    return compile_stages(source_code)["output"]


def try_compile(source_code):
    """Compile source text, returning Ok(output) or Err(CompileFailure)."""
    try:
        return Ok(compile_source(source_code))
    except TinyCompileError as e:
        debug_log(f"Compilation failed: {e.message}")
        return Err(CompileFailure.from_exception(e))
