import pytest

from SyntaxTree_Gen import parse_source

PROGRAM = "class A {{ public static void main(String[] args) {{ {body} }} }}"


def _parse_body(body):
    context = parse_source(PROGRAM.format(body=body))
    assert context.succeeded, context.errors
    return context.root.method.body


def _parse_expression(expr):
    statement = _parse_body(f"x = {expr};").statement
    assert statement.label == "ASSIGNMENT STATEMENT"
    return statement.children[0].value_expr


@pytest.fixture
def parse_body():
    """Parse statements placed inside a main method and return the body chain."""
    return _parse_body


@pytest.fixture
def parse_expression():
    return _parse_expression


def shape(node):
    """(label, value) for a leaf, (label, [child shapes...]) for an internal node."""
    if node is None:
        return None
    if node.is_leaf():
        return (node.label, node.value)
    return (node.label, [shape(child) for child in node.children])
