import pytest

from qbscript.builtin.env_builtin import add
from qbscript.types.call import Call
from qbscript.types.environment import Environment
from qbscript.types.lambda_fn import Lambda
from qbscript.types.symbol import Symbol, T
from qbscript.types.values import is_atomic, kind_of, to_source, to_value, truth


def test_symbols_compare_by_exact_text():
    assert Symbol("a") == Symbol("a")
    assert Symbol("a") != Symbol("A")
    assert Symbol("a") != "a"
    assert len({Symbol("a"), Symbol("a")}) == 1


def test_call_only_equals_call():
    assert Call([1]) == Call([1])
    assert Call([1]) != [1]
    assert [1] != Call([1])
    assert [Call([1])] != [[1]]


@pytest.mark.parametrize(
    "value,expected",
    [
        (Symbol("a"), True),
        (0, True),
        (1.5, True),
        ("", True),
        (Lambda([], 1, Environment()), True),
        (add, True),
        ([], False),
        ([1], False),
        (Call([]), False),
    ]
)
def test_truthiness_is_structural(value, expected):
    assert is_atomic(value) is expected


def test_truth():
    assert truth(True) == T == Symbol("t")
    assert truth(False) == []
    assert truth(False) is not truth(False)


def test_to_value_copies_structure():
    form = [Symbol("a"), Call([Symbol("f"), [1]])]
    data = to_value(form)
    assert data == form
    assert data is not form
    assert data[1] is not form[1]
    assert isinstance(data[1], Call)
    assert data[1][1] is not form[1][1]


@pytest.mark.parametrize(
    "value,expected",
    [
        (Symbol("a"), "a"),
        ("s p", '"s p"'),
        (1, "1"),
        (2.5, "2.5"),
        ([], "[]"),
        ([1, [Symbol("a")], "x"], '[1 [a] "x"]'),
        (Call([Symbol("f"), 1]), "(f 1)"),
        (Call([Symbol("quote"), Symbol("a")]), "(quote a)"),
        (Lambda([Symbol("x")], Call([Symbol("add"), Symbol("x"), Symbol("x")]), Environment()), "(fun [x] (add x x))"),
        (add, "<builtin add>"),
    ]
)
def test_to_source(value, expected):
    assert to_source(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (Symbol("a"), "atom"),
        (1, "number"),
        (1.0, "number"),
        ("s", "string"),
        ([], "list"),
        (Call([]), "call"),
        (Lambda([], 1, Environment()), "closure"),
        (add, "builtin"),
    ]
)
def test_kind_of(value, expected):
    assert kind_of(value) == expected
