import pytest

from hilbertprove.axioms import NUM_AXIOMS, build_axioms, format_axioms
from hilbertprove.formula import FormulaTable, Operator, format_formula


@pytest.fixture
def table():
    return FormulaTable()


def test_three_implications(table):
    axioms = build_axioms(table)
    assert len(axioms) == NUM_AXIOMS
    assert all(axiom.op is Operator.IMPLIES for axiom in axioms)


def test_axioms_are_shared(table):
    assert all(x is y for x, y in zip(build_axioms(table), build_axioms(table)))


def test_first_axiom(table):
    a, b = table.var("a"), table.var("b")
    assert build_axioms(table)[0] is table.impl(a, table.impl(b, a))


def test_second_axiom(table):
    a, b, c = table.var("a"), table.var("b"), table.var("c")
    expected = table.impl(
        table.impl(a, table.impl(b, c)),
        table.impl(table.impl(a, b), table.impl(a, c)),
    )
    assert build_axioms(table)[1] is expected


def test_third_axiom(table):
    a, b = table.var("a"), table.var("b")
    expected = table.impl(table.impl(table.neg(b), table.neg(a)), table.impl(a, b))
    assert build_axioms(table)[2] is expected


def test_format_axioms(table):
    axioms = build_axioms(table)
    text = format_axioms(axioms)
    assert text.startswith("{")
    assert text.endswith("}")
    assert text.count(" ,") == NUM_AXIOMS
    for axiom in axioms:
        assert format_formula(axiom) + " ," in text


def test_format_no_axioms():
    assert format_axioms([]) == "{}"