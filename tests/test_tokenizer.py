import pytest

from SyntaxTree_Gen import ParseContext, tokenize
from SyntaxTree_Gen import Tokenizer
from SyntaxTree_Gen.Tokenizer import build_lexer, find_column


def _types(src, context=None):
    return [tok.type for tok in tokenize(src, context)]


def test_keywords_become_reserved_tokens():
    src = "class public private static final void int char double if else new for print"
    assert _types(src) == [
        "CLASS", "PUBLIC", "PRIVATE", "STATIC", "FINAL", "VOID", "INT",
        "CHAR", "DOUBLE", "IF", "ELSE", "NEW", "FOR", "PRINT",
    ]


def test_multi_character_operators_win_over_single_ones():
    src = "++ -- || && == != >= <= << >> += -= *= /= %= &= ^= |="
    assert _types(src) == [
        "INC", "DEC", "LOGOR", "LOGAND", "EQ", "NEQ", "GTEQ", "LTEQ",
        "LSHIFT", "RSHIFT", "ADDASSGN", "SUBASSGN", "MULASSGN", "DIVASSGN",
        "MODASSGN", "ANDASSGN", "XORASSGN", "ORASSGN",
    ]


def test_single_character_punctuation():
    src = "{ } ( ) [ ] ; , + - * / > < ^ % = &"
    assert _types(src) == [
        "LBRACE", "RBRACE", "LPAREN", "RPAREN", "LBRACKET", "RBRACKET",
        "SEMI", "COMMA", "PLUS", "MINUS", "TIMES", "DIVIDE", "GT", "LT",
        "XOR", "MOD", "ASSIGN", "AND",
    ]


def test_adjacent_operators_without_spaces():
    assert _types("i++;x+=1") == ["ID", "INC", "SEMI", "ID", "ADDASSGN", "NUMBER"]


@pytest.mark.parametrize("src, kind, value", [
    ("counter", "ID", "counter"),
    ("_tmp1", "ID", "_tmp1"),
    ("String", "ID", "String"),
    ("42", "NUMBER", "42"),
    ("3.14", "NUMBER", "3.14"),
    ('"hello world"', "STRING", '"hello world"'),
    ('"say \\"hi\\""', "STRING", '"say \\"hi\\""'),
])
def test_literals_and_identifiers(src, kind, value):
    toks = list(tokenize(src))
    assert len(toks) == 1
    assert (toks[0].type, toks[0].value) == (kind, value)


def test_comments_are_skipped_and_lines_still_counted():
    src = "int a; // trailing\n/* one\ntwo */ int b;"
    toks = list(tokenize(src))
    assert [t.value for t in toks] == ["int", "a", ";", "int", "b", ";"]
    assert toks[0].lineno == 1
    assert toks[3].lineno == 3


def test_illegal_character_is_recorded_and_skipped():
    context = ParseContext()
    toks = list(tokenize("int x = 1 # 2", context))
    assert [t.value for t in toks] == ["int", "x", "=", "1", "2"]
    assert context.errors == ["Illegal character '#' on line 1, column 11"]


def test_illegal_character_position_on_later_line():
    context = ParseContext()
    list(tokenize("a\n  b @", context))
    assert context.errors == ["Illegal character '@' on line 2, column 5"]


def test_braces_track_scope_depth():
    context = ParseContext()
    list(tokenize("{ { } { { } } }", context))
    assert context.scope == 0
    assert context.max_scope == 3


def test_find_column():
    toks = list(tokenize("a\n   bc"))
    assert find_column("a\n   bc", toks[0]) == 1
    assert find_column("a\n   bc", toks[1]) == 4


def test_lexers_share_compiled_rules_but_not_state():
    first, second = build_lexer(), build_lexer()
    assert first is not second
    assert first.lexre is second.lexre is Tokenizer.lexer.lexre
    assert first.context is not second.context
    first.input("a\nb\nc")
    list(first)
    assert first.lineno == 3
    assert second.lineno == 1
    assert build_lexer().lineno == 1
