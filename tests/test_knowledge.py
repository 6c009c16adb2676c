import pytest

from hilbertprove.axioms import build_axioms, format_axioms
from hilbertprove.formula import FormulaTable, format_formula
from hilbertprove.knowledge import KnowledgeSet


@pytest.fixture
def table():
    return FormulaTable()


def test_add_ignores_duplicates(table):
    ks = KnowledgeSet()
    a = table.var("a")
    ks.add(a)
    ks.add(a)
    assert len(ks) == 1
    assert a in ks


def test_order_is_kept(table):
    a, b, c = table.var("a"), table.var("b"), table.var("c")
    ks = KnowledgeSet([c, a, b, a])
    assert list(ks) == [c, a, b]
    assert ks[1] is a


def test_membership_is_by_identity(table):
    other = FormulaTable()
    ks = KnowledgeSet([table.var("a")])
    assert other.var("a") not in ks


def test_clone_is_independent(table):
    a, b = table.var("a"), table.var("b")
    ks = KnowledgeSet([a])
    copy = ks.clone()
    copy.add(b)
    assert list(ks) == [a]
    assert list(copy) == [a, b]


def test_format_empty(table):
    axioms = build_axioms(table)
    text = KnowledgeSet().format(axioms)
    assert text == format_axioms(axioms) + "\n" + " ⊢ ∅\n"


def test_format_lists_formulas(table):
    axioms = build_axioms(table)
    a, b = table.var("a"), table.var("b")
    formula = table.impl(a, b)
    lines = KnowledgeSet([a, formula]).format(axioms).splitlines()
    assert lines[0] == format_axioms(axioms)
    assert lines[1:] == [" ⊢ " + format_formula(a), " ⊢ " + format_formula(formula)]


def test_seed_with_axioms(table):
    axioms = build_axioms(table)
    ks = KnowledgeSet()
    ks.seed_with_axioms(axioms)
    ks.seed_with_axioms(axioms)
    assert list(ks) == list(axioms)