"""The set of formulas known to be provable, kept in the order they were found."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .axioms import format_axioms
from .formula import Formula, format_formula


class KnowledgeSet:
    """An insertion-ordered set of formulas, compared by identity."""

    def __init__(self, formulas: Iterable[Formula] = ()) -> None:
        self._formulas: list[Formula] = []
        for formula in formulas:
            self.add(formula)

    def __len__(self) -> int:
        return len(self._formulas)

    def __iter__(self) -> Iterator[Formula]:
        return iter(self._formulas)

    def __getitem__(self, index: int) -> Formula:
        return self._formulas[index]

    def __contains__(self, formula: object) -> bool:
        return any(known is formula for known in self._formulas)

    def add(self, formula: Formula) -> None:
        """Add ``formula`` unless it is already known."""
        if formula not in self:
            self._formulas.append(formula)

    def clone(self) -> KnowledgeSet:
        """An independent copy holding the same formulas."""
        return KnowledgeSet(self._formulas)

    def format(self, axioms) -> str:
        """Render the axioms followed by one line per known formula."""
        lines = [format_axioms(axioms) + "\n"]
        if not self._formulas:
            lines.append(" ⊢ ∅\n")
        else:
            lines.extend(" ⊢ " + format_formula(formula) + "\n" for formula in self._formulas)
        return "".join(lines)

    def seed_with_axioms(self, axioms) -> None:
        """Add the axiom schemes themselves, with their variables left unbound."""
        for axiom in axioms:
            self.add(axiom)