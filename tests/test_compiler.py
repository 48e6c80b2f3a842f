"""
End-to-end tests for compiler.py.
"""
import pytest

import compiler
from compiler import compile_source, compile_stages, try_compile
from tinyc.errors import LexError, ParseError, TinyCompileError
from tinyc.result import ErrorKind


class TestCompileSource:
    """Tests for the full pipeline."""

    @pytest.mark.parametrize('source, expected', [
        ('(add 2 2)', 'add(2, 2);'),
        ('(add 2 (subtract 4 2))', 'add(2, subtract(4, 2));'),
        ('(concat "foo" "bar")', 'concat("foo", "bar");'),
        ('(add 1 2)\n(subtract 3 1)', 'add(1, 2);\nsubtract(3, 1);'),
    ])
    def test_reference_programs(self, source, expected):
        """Reference programs compile to the expected output."""
        assert compile_source(source) == expected

    def test_canonical_stages(self, canonical_input, canonical_tokens, canonical_ast,
                              canonical_target, canonical_output):
        """Every intermediate stage matches the reference fixtures."""
        stages = compile_stages(canonical_input)
        assert [t.model_dump() for t in stages['tokens']] == canonical_tokens
        assert stages['ast'].model_dump() == canonical_ast
        assert stages['target'].model_dump() == canonical_target
        assert stages['output'] == canonical_output

    def test_deterministic(self):
        """The same input always gives the same output."""
        source = '(a 1 (b "x" (c 2)) 3)'
        assert compile_source(source) == compile_source(source)
        assert compile_source(source) == 'a(1, b("x", c(2)), 3);'

    def test_empty_input(self):
        assert compile_source('') == ''
        assert compile_source('  \n\t') == ''

    def test_lex_error_stops_the_pipeline(self):
        """An unsupported character raises and produces no output."""
        with pytest.raises(LexError):
            compile_source('(add 2 @)')

    def test_parse_error_propagates(self):
        with pytest.raises(ParseError):
            compile_source('(add 2')

    def test_errors_share_a_base_class(self):
        with pytest.raises(TinyCompileError):
            compile_source('(1)')


class TestTryCompile:
    """Tests for the Ok/Err entry point."""

    def test_success(self):
        result = try_compile('(add 2 2)')
        assert result.is_ok()
        assert result.unwrap() == 'add(2, 2);'

    def test_lex_failure(self):
        """Lexical errors become Err with the LexError kind and position."""
        result = try_compile('(add 2 @)')
        assert result.is_err()
        assert result.error.kind == ErrorKind.LEX_ERROR
        assert result.error.line_number == 1
        assert result.error.column == 8

    def test_parse_failure(self):
        result = try_compile('(add 2')
        assert result.error.kind == ErrorKind.PARSE_ERROR


class TestVerboseLogging:
    """Tests for debug output."""

    def test_silent_by_default(self, capsys):
        compile_source('(add 2 2)')
        assert capsys.readouterr().err == ''

    def test_verbose_logs_each_stage(self, capsys):
        """Verbose mode reports every stage on stderr."""
        compiler.set_verbose(True)
        compile_source('(add 2 2)')
        captured = capsys.readouterr()
        assert 'DEBUG:' in captured.err
        assert 'Tokenized' in captured.err
        assert 'Generated' in captured.err
        assert captured.out == ''


class TestDeepNesting:
    """Tests for programs nested far deeper than the interpreter's recursion limit."""

    @pytest.mark.parametrize('depth', [250, 1000, 5000])
    def test_deeply_nested_call_compiles(self, depth):
        source = '(a ' * depth + '1' + ')' * depth
        assert compile_source(source) == 'a(' * depth + '1' + ')' * depth + ';'

    def test_try_compile_returns_ok(self):
        """try_compile hands back Ok for deep input instead of raising."""
        depth = 3000
        result = try_compile('(a ' * depth + '"s"' + ')' * depth)
        assert result.is_ok()
        assert result.unwrap().endswith('("s"' + ')' * depth + ';')
