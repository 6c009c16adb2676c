"""The three axiom schemes of the Hilbert system."""

from __future__ import annotations

from .formula import Formula, FormulaTable, format_formula

NUM_AXIOMS = 3


def build_axioms(table: FormulaTable) -> tuple[Formula, Formula, Formula]:
    """Build the axiom schemes over the variables a, b and c."""
    a, b, c = table.var("a"), table.var("b"), table.var("c")

    # a → (b → a)
    ax1 = table.impl(a, table.impl(b, a))

    # (a → (b → c)) → ((a → b) → (a → c))
    a_impl_b = table.impl(a, b)
    ax2 = table.impl(
        table.impl(a, table.impl(b, c)),
        table.impl(a_impl_b, table.impl(a, c)),
    )

    # (⌝b → ⌝a) → (a → b)
    ax3 = table.impl(table.impl(table.neg(b), table.neg(a)), a_impl_b)

    return ax1, ax2, ax3


def format_axioms(axioms) -> str:
    """Render the axioms as a set."""
    return "{" + "".join(format_formula(axiom) + " ," for axiom in axioms) + "}"