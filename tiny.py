import argparse
import json
import os
import sys

from compiler import compile_stages, set_verbose
from tinyc.errors import TinyCompileError


def log(message):
    """Log informational messages to stderr."""
    print(f"\033[92m\033[1mINFO:\033[0m {message}", file=sys.stderr)


def read_source(filename):
    """Read source from a file, or from stdin when filename is None or '-'."""
    if filename is None or filename == "-":
        return sys.stdin.read()
    if not os.path.exists(filename):
        print(f"Error: File '{filename}' not found.", file=sys.stderr)
        return None
    with open(filename, 'r') as f:
        return f.read()


def run_stages(args):
    """Read and compile the input named by args.filename; None on failure."""
    set_verbose(args.verbose)
    source_code = read_source(args.filename)
    if source_code is None:
        return None
    try:
        return compile_stages(source_code)
    except TinyCompileError as e:
        print(f"Error: Compilation Failed:\n{e}", file=sys.stderr)
        return None


def cmd_compile(args):
    stages = run_stages(args)
    if stages is None:
        return 1

    if args.output:
        with open(args.output, 'w') as f:
            f.write(stages["output"] + "\n")
        log(f"Wrote {args.output}")
    else:
        print(stages["output"])
    return 0


def cmd_tokens(args):
    stages = run_stages(args)
    if stages is None:
        return 1
    print(json.dumps([t.model_dump() for t in stages["tokens"]], indent=2))
    return 0


def cmd_ast(args):
    stages = run_stages(args)
    if stages is None:
        return 1
    tree = stages["target"] if args.target else stages["ast"]
    print(tree.model_dump_json(indent=2))
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Tiny Lisp-to-C compiler CLI")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output (sent to stderr)")
    subparsers = parser.add_subparsers(dest="command")

    compile_cmd = subparsers.add_parser("compile", help="Compile file")
    compile_cmd.add_argument("filename", nargs="?", default="-", help="File to compile (default: read from stdin)")
    compile_cmd.add_argument("-o", "--output", help="Write output to this file instead of stdout")

    subparsers.add_parser("tokens", help="Print the token stream as JSON").add_argument(
        "filename", nargs="?", default="-", help="File to tokenize (default: read from stdin)")

    ast_cmd = subparsers.add_parser("ast", help="Print the AST as JSON")
    ast_cmd.add_argument("filename", nargs="?", default="-", help="File to parse (default: read from stdin)")
    ast_cmd.add_argument("--target", action="store_true", help="Print the transformed AST instead of the parsed one")

    args = parser.parse_args(argv)

    if args.command == "compile":
        return cmd_compile(args)
    elif args.command == "tokens":
        return cmd_tokens(args)
    elif args.command == "ast":
        return cmd_ast(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
