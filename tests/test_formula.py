import pytest

from hilbertprove.formula import (
    FormulaTable,
    Operator,
    compare_trees,
    format_formula,
    hash_binary,
    hash_unary,
    mix32,
)


@pytest.fixture
def table():
    return FormulaTable()


def test_variables_are_interned(table):
    assert table.var("a") is table.var("a")
    assert table.var("a") is not table.var("b")
    assert table.var("a").op is Operator.VARIABLE
    assert table.var("a").var_name == "a"


def test_implications_are_interned(table):
    a, b = table.var("a"), table.var("b")
    first = table.impl(a, b)
    assert table.impl(a, b) is first
    assert table.impl(b, a) is not first
    assert first.left is a and first.right is b


def test_negations_are_interned(table):
    a = table.var("a")
    assert table.neg(a) is table.neg(a)
    assert table.neg(a).child is a


def test_double_negation_collapses(table):
    a = table.var("a")
    assert table.neg(table.neg(a)) is a
    assert table.neg(table.neg(table.neg(a))) is table.neg(a)


def test_separate_tables_do_not_share(table):
    other = FormulaTable()
    assert other.var("a") is not table.var("a")
    assert other.var("a").hash == table.var("a").hash


def test_table_counts_distinct_formulas(table):
    a = table.var("a")
    table.impl(a, a)
    table.impl(a, a)
    table.var("a")
    assert len(table) == 2


def test_generic_is_fresh_each_time(table):
    first = table.generic()
    second = table.generic()
    assert first is not second
    assert first.op is Operator.GENERIC
    assert len(table) == 0


@pytest.mark.parametrize("name", ["", "ab"])
def test_bad_variable_name(table, name):
    with pytest.raises(ValueError):
        table.var(name)


def test_mix32_golden_ratio():
    assert mix32(0, 0) == 0x9E3779B9


def test_mix32_stays_in_32_bits():
    for op, target in [(0xFFFFFFFF, 0xFFFFFFFF), (0xFFFFFFFF, 0), (1 << 31, 1 << 31)]:
        assert 0 <= mix32(op, target) <= 0xFFFFFFFF


def test_hashes_match_helpers(table):
    a, b = table.var("a"), table.var("b")
    assert a.hash == mix32(Operator.VARIABLE, ord("a"))
    assert table.neg(a).hash == hash_unary(Operator.NEGATION, a)
    assert table.impl(a, b).hash == hash_binary(Operator.IMPLIES, a, b)


def test_compare_trees_same_shape(table):
    a, b = table.var("a"), table.var("b")
    assert compare_trees(table.impl(a, table.neg(b)), table.impl(b, table.neg(a)))


def test_compare_trees_differs(table):
    a, b = table.var("a"), table.var("b")
    assert not compare_trees(table.impl(a, b), table.neg(a))
    assert not compare_trees(table.impl(a, b), table.impl(table.neg(a), b))


def test_format_variable_and_generic(table):
    assert format_formula(table.var("a")) == " a "
    assert format_formula(table.generic()) == " □ "


def test_format_negation(table):
    assert format_formula(table.neg(table.var("a"))) == " ⌝ a "


def test_format_implication(table):
    formula = table.impl(table.var("a"), table.var("b"))
    assert format_formula(formula) == "( a  →  b )"
    assert str(formula) == format_formula(formula)