"""
Shared fixtures: the canonical program at every stage of the pipeline.
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import compiler  # noqa: E402


@pytest.fixture(autouse=True)
def quiet():
    """Keep verbose logging off between tests."""
    compiler.set_verbose(False)
    yield
    compiler.set_verbose(False)


@pytest.fixture
def canonical_input():
    return '(add 2 (subtract 4 2))'


@pytest.fixture
def canonical_output():
    return 'add(2, subtract(4, 2));'


@pytest.fixture
def canonical_tokens():
    return [
        {'type': 'paren', 'value': '('},
        {'type': 'name', 'value': 'add'},
        {'type': 'number', 'value': '2'},
        {'type': 'paren', 'value': '('},
        {'type': 'name', 'value': 'subtract'},
        {'type': 'number', 'value': '4'},
        {'type': 'number', 'value': '2'},
        {'type': 'paren', 'value': ')'},
        {'type': 'paren', 'value': ')'},
    ]


@pytest.fixture
def canonical_ast():
    return {
        'type': 'Program',
        'body': [{
            'type': 'CallExpression',
            'name': 'add',
            'params': [
                {'type': 'NumberLiteral', 'value': '2'},
                {
                    'type': 'CallExpression',
                    'name': 'subtract',
                    'params': [
                        {'type': 'NumberLiteral', 'value': '4'},
                        {'type': 'NumberLiteral', 'value': '2'},
                    ],
                },
            ],
        }],
    }


@pytest.fixture
def canonical_target():
    return {
        'type': 'Program',
        'body': [{
            'type': 'ExpressionStatement',
            'expression': {
                'type': 'CallExpression',
                'callee': {'type': 'Identifier', 'name': 'add'},
                'arguments': [
                    {'type': 'NumberLiteral', 'value': '2'},
                    {
                        'type': 'CallExpression',
                        'callee': {'type': 'Identifier', 'name': 'subtract'},
                        'arguments': [
                            {'type': 'NumberLiteral', 'value': '4'},
                            {'type': 'NumberLiteral', 'value': '2'},
                        ],
                    },
                ],
            },
        }],
    }
