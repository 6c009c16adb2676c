"""Matching formulas against axiom schemes, modus ponens, and the proof search."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

from .axioms import NUM_AXIOMS
from .decision import DecisionNode, format_decision_tree
from .formula import Formula, FormulaTable, Operator, format_formula
from .knowledge import KnowledgeSet

MAX_AXIOM_VARS = 3


class SubstitutionMap:
    """Bindings from axiom variables to formulas, holding at most a few entries."""

    def __init__(self, capacity: int = MAX_AXIOM_VARS) -> None:
        self.capacity = capacity
        self._bindings: dict[str, Formula] = {}

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[tuple[str, Formula]]:
        return iter(self._bindings.items())

    def find(self, key: str) -> Formula | None:
        """The formula bound to ``key``, or None if it is unbound."""
        return self._bindings.get(key)

    def bind(self, key: str, formula: Formula) -> bool:
        """Bind ``key`` to ``formula``; False on a conflicting binding or when full."""
        existing = self._bindings.get(key)
        if existing is formula:
            return True
        if existing is not None:
            return False
        if len(self._bindings) >= self.capacity:
            return False
        self._bindings[key] = formula
        return True

    def format(self) -> str:
        """Render one line per binding: position, variable, formula."""
        return "".join(
            f"{position}\t{key}\t{format_formula(value)}\n"
            for position, (key, value) in enumerate(self._bindings.items())
        )


def fit_onto_axiom(mapping: SubstitutionMap, axiom: Formula, target: Formula) -> bool:
    """Try to see ``target`` as an instance of ``axiom``, recording bindings."""
    if axiom.op is not target.op and axiom.op is not Operator.VARIABLE:
        return False
    if axiom.op is Operator.VARIABLE:
        return mapping.bind(axiom.var_name, target)
    if axiom.op is Operator.NEGATION:
        return fit_onto_axiom(mapping, axiom.child, target.child)
    if axiom.op is Operator.IMPLIES:
        return fit_onto_axiom(mapping, axiom.left, target.left) and fit_onto_axiom(
            mapping, axiom.right, target.right
        )
    return False


def generate_modified_axiom(
    mapping: SubstitutionMap, axiom: Formula, table: FormulaTable
) -> Formula | None:
    """Instantiate ``axiom`` with ``mapping``; unbound variables become fresh generics."""
    if axiom.op is Operator.VARIABLE:
        bound = mapping.find(axiom.var_name)
        return bound if bound is not None else table.generic()
    if axiom.op is Operator.IMPLIES:
        return table.impl(
            generate_modified_axiom(mapping, axiom.left, table),
            generate_modified_axiom(mapping, axiom.right, table),
        )
    if axiom.op is Operator.NEGATION:
        return table.neg(generate_modified_axiom(mapping, axiom.child, table))
    return None


def modus_ponens(ks: KnowledgeSet, goal: Formula | None) -> bool:
    """Close ``ks`` under modus ponens, stopping as soon as ``goal`` is derived."""
    for premise in ks:
        for rule in ks:
            if rule.op is Operator.IMPLIES and rule.left is premise:
                ks.add(rule.right)
                if rule.right is goal:
                    return True
    return False


def _say(echo: Callable[[str], object] | None, text: str) -> None:
    if echo is not None:
        echo(text)


def _goal_from_consequent(
    node: DecisionNode, axioms: Sequence[Formula], table: FormulaTable
) -> DecisionNode | None:
    """Add an axiom instance whose consequent is the goal; its antecedent is the new goal."""
    for index, axiom in enumerate(axioms):
        flag = index + NUM_AXIOMS
        if node.paths[flag]:
            continue
        node.paths[flag] = True
        mapping = SubstitutionMap()
        consequent = axiom.right
        if consequent is None or consequent.op is not Operator.IMPLIES:
            continue
        if not fit_onto_axiom(mapping, consequent, node.goal):
            continue
        instance = generate_modified_axiom(mapping, axiom, table)
        if instance in node.ks:
            continue
        new_ks = node.ks.clone()
        new_ks.add(instance)
        child = DecisionNode(instance.left, new_ks, prev=node)
        node.next = child
        return child
    return None


def _goal_from_inner_consequent(
    node: DecisionNode, axioms: Sequence[Formula], table: FormulaTable
) -> DecisionNode | None:
    """Add an axiom instance whose innermost consequent is the goal; two goals follow."""
    for index, axiom in enumerate(axioms):
        if node.paths[index + 2 * NUM_AXIOMS]:
            continue
        mapping = SubstitutionMap()
        inner = axiom.right.right if axiom.right is not None else None
        if inner is None or inner.op is not Operator.IMPLIES:
            continue
        if not fit_onto_axiom(mapping, inner, node.goal):
            continue
        new_ks = node.ks.clone()
        instance = generate_modified_axiom(mapping, axiom, table)
        new_ks.add(instance)
        child = DecisionNode(instance.left, new_ks, prev=node)
        grandchild = DecisionNode(instance.right.left, new_ks, prev=child)
        child.next = grandchild
        node.next = child
        node.paths[index] = True
        return child
    return None


def prove_with_tree(
    node: DecisionNode | None,
    seen_goals: KnowledgeSet,
    axioms: Sequence[Formula],
    table: FormulaTable,
    echo: Callable[[str], object] | None = None,
    pause: Callable[[], object] | None = None,
) -> bool:
    """Search for a derivation of ``node.goal``, backtracking along the decision path.

    A node without a goal has nothing left to prove and counts as solved.
    ``echo`` receives the search trace; ``pause`` is called before each backtrack.
    """
    while node is not None:
        if node.goal is None:
            return True
        _say(echo, format_decision_tree(node))

        if modus_ponens(node.ks, node.goal):
            return True
        seen_goals.add(node.goal)

        for index, axiom in enumerate(axioms):
            if node.paths[index]:
                continue
            node.paths[index] = True
            mapping = SubstitutionMap()
            if not fit_onto_axiom(mapping, axiom, node.goal):
                continue
            _say(echo, "\nGoal formed directly by an axiom\n")
            instance = generate_modified_axiom(mapping, axiom, table)
            if instance in node.ks:
                continue
            new_ks = node.ks.clone()
            new_ks.add(instance)
            child = DecisionNode(None, new_ks, prev=node)
            node.next = child
            _say(echo, "The KS is: \n" + new_ks.format(axioms) + "\n")
            if prove_with_tree(child, seen_goals, axioms, table, echo, pause):
                return True

        _say(echo, "Decision path 1 failed\n")

        child = _goal_from_consequent(node, axioms, table)
        if child is not None:
            node = child
            continue

        _say(echo, "Decision path 2 failed\n")

        child = _goal_from_inner_consequent(node, axioms, table)
        if child is not None:
            node = child
            continue

        _say(echo, "Decision path 3 failed\n")

        if node.prev is None:
            return False
        if pause is not None:
            pause()
        node = node.prev
    return False