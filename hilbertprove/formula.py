"""Propositional formulas, hash-consed so that equal formulas share one object."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_MASK32 = 0xFFFFFFFF
_GOLDEN_RATIO = 0x9E3779B9


class Operator(IntEnum):
    """The kind of node at the top of a formula."""

    VARIABLE = 0
    IMPLIES = 1
    NEGATION = 2
    GENERIC = 3


@dataclass(frozen=True, eq=False, repr=False)
class Formula:
    """A formula node. Identity is equality: build them through a FormulaTable."""

    op: Operator
    hash: int = 0
    var_name: str | None = None
    child: Formula | None = None
    left: Formula | None = None
    right: Formula | None = None

    def __str__(self) -> str:
        return format_formula(self)

    def __repr__(self) -> str:
        return f"Formula({format_formula(self)!r})"


def mix32(op: int, target: int) -> int:
    """Mix a 32-bit value into another, wrapping like unsigned 32-bit arithmetic."""
    op &= _MASK32
    target &= _MASK32
    mixed = (target + _GOLDEN_RATIO + ((op << 6) & _MASK32) + (op >> 2)) & _MASK32
    return (op ^ mixed) & _MASK32


def hash_unary(op: int, child: Formula) -> int:
    """Hash of a unary node over ``child``."""
    return mix32(int(op), child.hash)


def hash_binary(op: int, left: Formula, right: Formula) -> int:
    """Hash of a binary node over ``left`` and ``right``."""
    return mix32(mix32(int(op), left.hash), right.hash)


class FormulaTable:
    """Creates formulas, returning the existing object for any repeated structure."""

    def __init__(self) -> None:
        self._entries: dict[tuple, Formula] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def var(self, name: str) -> Formula:
        """The propositional variable called ``name`` (a single character)."""
        if not isinstance(name, str) or len(name) != 1:
            raise ValueError(f"variable name must be a single character, got {name!r}")
        key = (Operator.VARIABLE, name)
        found = self._entries.get(key)
        if found is not None:
            return found
        formula = Formula(
            Operator.VARIABLE,
            hash=mix32(Operator.VARIABLE, ord(name) & 0xFF),
            var_name=name,
        )
        self._entries[key] = formula
        return formula

    def neg(self, child: Formula) -> Formula:
        """The negation of ``child``; a double negation collapses to its core."""
        count = 1
        inner = child
        while inner.op is Operator.NEGATION:
            count += 1
            inner = inner.child
        if count % 2 == 0:
            return inner
        key = (Operator.NEGATION, child)
        found = self._entries.get(key)
        if found is not None:
            return found
        formula = Formula(
            Operator.NEGATION,
            hash=hash_unary(Operator.NEGATION, child),
            child=child,
        )
        self._entries[key] = formula
        return formula

    def impl(self, left: Formula, right: Formula) -> Formula:
        """The implication ``left → right``."""
        key = (Operator.IMPLIES, left, right)
        found = self._entries.get(key)
        if found is not None:
            return found
        formula = Formula(
            Operator.IMPLIES,
            hash=hash_binary(Operator.IMPLIES, left, right),
            left=left,
            right=right,
        )
        self._entries[key] = formula
        return formula

    def generic(self) -> Formula:
        """A fresh placeholder formula; never shared and never interned."""
        return Formula(Operator.GENERIC)


def compare_trees(a: Formula, b: Formula) -> bool:
    """Compare the shape of two formulas; variables match whatever their names."""
    if a.op is not b.op:
        return False
    if a.op is Operator.NEGATION:
        if a.child is not None and b.child is not None:
            return compare_trees(a.child, b.child)
        return False
    if a.op is Operator.IMPLIES:
        if a.left is not None and b.right is not None:
            return compare_trees(a.left, b.left) and compare_trees(a.right, b.right)
        return False
    return True


def format_formula(formula: Formula) -> str:
    """Render a formula in the prover's notation."""
    if formula.op is Operator.GENERIC:
        return " □ "
    if formula.op is Operator.VARIABLE:
        return f" {formula.var_name} "
    if formula.op is Operator.NEGATION:
        return " ⌝" + format_formula(formula.child)
    if formula.op is Operator.IMPLIES:
        return "(" + format_formula(formula.left) + " → " + format_formula(formula.right) + ")"
    return ""