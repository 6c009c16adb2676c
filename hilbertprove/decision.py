"""Nodes of the proof search's decision path."""

from __future__ import annotations

from dataclasses import dataclass, field

from .formula import Formula, format_formula
from .knowledge import KnowledgeSet

NUM_AXIOM_PATHS = 9


@dataclass(eq=False)
class DecisionNode:
    """One step of the search: a goal, what is known there, and tried branches."""

    goal: Formula | None
    ks: KnowledgeSet
    next: DecisionNode | None = field(default=None, repr=False)
    prev: DecisionNode | None = field(default=None, repr=False)
    paths: list[bool] = field(default_factory=lambda: [False] * NUM_AXIOM_PATHS)


def format_decision_tree(head: DecisionNode | None) -> str:
    """Render the goals from ``head`` back to the root, one per line."""
    lines = ["printing decision tree:\n"]
    node = head
    while node is not None:
        lines.append((format_formula(node.goal) if node.goal is not None else "") + "\n")
        node = node.prev
    lines.append("\n")
    return "".join(lines)