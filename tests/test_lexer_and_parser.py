import pytest
from hypothesis import given, strategies as st

from qbscript.errors import QbSyntaxError
from qbscript.reader.parser import lex, parse, position_at, read_program, TokenStream
from qbscript.types.call import Call
from qbscript.types.symbol import Symbol

QUOTE = Symbol("quote")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a", 0)]),
        ("a#b #c", [("atom", "a#b", 0), ("quote", "#", 4), ("atom", "c", 5)]),
        ("#a", [("quote", "#", 0), ("atom", "a", 1)]),
        ('(a [1] "s" #b)', [
            ("lparen", "(", 0),
            ("atom", "a", 1),
            ("lbracket", "[", 3),
            ("atom", "1", 4),
            ("rbracket", "]", 5),
            ("string", '"s"', 7),
            ("quote", "#", 11),
            ("atom", "b", 12),
            ("rparen", ")", 13),
        ]),
        ('"a (b] #c"', [("string", '"a (b] #c"', 0)]),
        ("  \n\t x  ", [("atom", "x", 5)]),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("foo", Symbol("foo")),
        ("-", Symbol("-")),
        (":KEY", Symbol(":KEY")),
        ("a-b?", Symbol("a-b?")),
        ("a#b", Symbol("a#b")),
        ("x#", Symbol("x#")),
        ("42", 42),
        ("-7", -7),
        ("+3", 3),
        ("2.5", 2.5),
        ("-0.5", -0.5),
        ('"hello world"', "hello world"),
        ('""', ""),
        ('"a ( ] #"', "a ( ] #"),
        ("[]", []),
        ("()", Call([])),
        ("(add 1 2)", Call([Symbol("add"), 1, 2])),
        ("[a [1 2] (f x)]", [Symbol("a"), [1, 2], Call([Symbol("f"), Symbol("x")])]),
        ("#a", Call([QUOTE, Symbol("a")])),
        ("#[1 2]", Call([QUOTE, [1, 2]])),
        ("##a", Call([QUOTE, Call([QUOTE, Symbol("a")])])),
        ("# a", Call([QUOTE, Symbol("a")])),
    ]
)
def test_parser(source, expected):
    result = parse(source)
    assert result == [expected]  # Parser yields one expression


def test_numbers_keep_their_python_type():
    assert type(parse("2")[0]) is int
    assert type(parse("2.0")[0]) is float


def test_brackets_and_parens_read_differently():
    literal, call = parse("[f x] (f x)")
    assert type(literal) is list
    assert isinstance(call, Call)
    assert literal != call


def test_multiple_top_level_forms():
    forms = parse("(let x 7)\n x\n [1]")
    assert forms == [Call([Symbol("let"), Symbol("x"), 7]), Symbol("x"), [1]]


def test_nested_lists():
    source = "((a b) [c d])"
    expected = Call([Call([Symbol("a"), Symbol("b")]), [Symbol("c"), Symbol("d")]])
    assert parse(source) == [expected]


@pytest.mark.parametrize(
    "source,offset",
    [
        ("(add 1 2", 0),   # unbalanced call
        ("[1 2", 0),       # unbalanced list
        ("x [1 (2]", 7),   # mismatched closer
        ("[a)", 2),
        (")", 0),          # stray closer
        ("a ]", 2),
        ('"abc', 0),       # unterminated string
        ('x "abc', 2),
        ("#", 0),          # dangling quote
        ("(a #)", 3),
        ("12abc", 0),      # atoms cannot begin with a digit
        ("1.", 0),
        ("-5x", 0),
    ]
)
def test_syntax_errors(source, offset):
    with pytest.raises(QbSyntaxError) as exc:
        parse(source)
    assert exc.value.position.offset == offset
    assert exc.value.kind == "SyntaxError"


def test_syntax_error_reports_line_and_column():
    with pytest.raises(QbSyntaxError) as exc:
        parse("(a\n  (b c]")
    assert exc.value.position.line == 2
    assert exc.value.position.column == 7


def test_position_at():
    pos = position_at("ab\ncd", 4)
    assert (pos.offset, pos.line, pos.column) == (4, 2, 2)
    assert position_at("abc", 0).column == 1


def test_read_program_records_form_positions():
    forms, positions = read_program("(let x 1)\n  x")
    assert len(forms) == 2
    assert [p.offset for p in positions] == [0, 12]
    assert (positions[1].line, positions[1].column) == (2, 3)


def test_token_stream_parses_incrementally():
    stream = TokenStream(lex("1 2"), "1 2")
    assert stream.parse_expr() == 1
    assert stream.parse_expr() == 2
    with pytest.raises(QbSyntaxError):
        stream.parse_expr()


def test_deep_nesting_is_a_syntax_error():
    with pytest.raises(QbSyntaxError):
        parse("[" * 100_000)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(st.text(max_size=60))
def test_reader_only_raises_syntax_errors(source):
    try:
        parse(source)
    except QbSyntaxError:
        pass


@given(st.text(alphabet='()[]#" ab1-.\n', max_size=40))
def test_reader_on_delimiter_heavy_input(source):
    try:
        forms = parse(source)
    except QbSyntaxError:
        return
    assert isinstance(forms, list)


@given(st.integers())
def test_integers_read_back(n):
    assert parse(str(n)) == [n]
