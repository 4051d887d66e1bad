from fractions import Fraction

import pytest

from twik.errors import TwikSyntaxError
from twik.reader.parser import lex, read, TokenStream
from twik.types.symbol import Symbol


def test_lex_tokens():
    tokens = [(kind, text) for kind, text, _ in lex('(+ 1 "a b") ; comment\n)')]
    assert tokens == [
        ("lparen", "("),
        ("symbol", "+"),
        ("symbol", "1"),
        ("string", '"a b"'),
        ("rparen", ")"),
        ("rparen", ")"),
    ]


def test_lex_positions():
    assert [pos for _, _, pos in lex("  (x  y)")] == [2, 3, 6, 7]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", Fraction(42)),
        ("-7", Fraction(-7)),
        ("+3", Fraction(3)),
        ("2.5", Fraction(5, 2)),
        ("0.1", Fraction(1, 10)),
        ("1/3", Fraction(1, 3)),
        ("-2/4", Fraction(-1, 2)),
    ]
)
def test_numbers_are_exact(source, expected):
    assert read(source) == [expected]
    assert isinstance(read(source)[0], Fraction)


@pytest.mark.parametrize("source", ["-", "+", "/", "==", "1+", "a1", "true", "nil", "make-counter"])
def test_symbols(source):
    assert read(source) == [Symbol(source)]


def test_nested_lists():
    assert read("(func f (a b) (+ a b))") == [
        [
            Symbol("func"),
            Symbol("f"),
            [Symbol("a"), Symbol("b")],
            [Symbol("+"), Symbol("a"), Symbol("b")],
        ]
    ]


def test_empty_list():
    assert read("()") == [[]]


def test_multiple_top_level_forms():
    assert read("(var x 1) x ; trailing") == [[Symbol("var"), Symbol("x"), Fraction(1)], Symbol("x")]


def test_empty_source():
    assert read("") == []
    assert read("  ; only a comment\n") == []
    assert TokenStream(lex("")).parse_expr() is None


@pytest.mark.parametrize(
    "source,expected",
    [
        (r'"plain"', "plain"),
        (r'"say \"hi\""', 'say "hi"'),
        (r'"back\\slash"', "back\\slash"),
        (r'"line\nbreak\ttab"', "line\nbreak\ttab"),
        ('"(not a list)"', "(not a list)"),
        ('"semi ; colon"', "semi ; colon"),
        ('""', ""),
    ]
)
def test_strings(source, expected):
    assert read(source) == [expected]


@pytest.mark.parametrize(
    "source,position",
    [
        ("(+ 1 2", 0),
        ("(a (b)", 0),
        (")", 0),
        ("(a))", 3),
        ('"open', 0),
        (r'"bad \q"', 5),
        ("1/0", 0),
    ]
)
def test_syntax_errors(source, position):
    with pytest.raises(TwikSyntaxError) as excinfo:
        read(source)
    assert excinfo.value.position == position


def test_deep_nesting_is_a_syntax_error():
    source = "x (+ " * 3000 + "1" + ")" * 3000
    with pytest.raises(TwikSyntaxError, match="Nesting too deep") as excinfo:
        read(source)
    assert excinfo.value.position == 2


def test_moderate_nesting_reads():
    source = "(" * 50 + ")" * 50
    node = read(source)[0]
    for _ in range(49):
        node = node[0]
    assert node == []
