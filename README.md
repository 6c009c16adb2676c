# hilbertprove

A small prover for propositional formulas in a Hilbert-style system. Its
connectives are implication and negation. Its axiom schemes are the three
classical ones:

1. `a → (b → a)`
2. `(a → (b → c)) → ((a → b) → (a → c))`
3. `(⌝b → ⌝a) → (a → b)`

The only rule of inference is modus ponens.

Formulas are hash-consed. A `FormulaTable` returns the same object whenever it
builds a structurally identical formula, so formulas are compared by identity.
A double negation collapses to its core when it is built. `generic()` is the
exception: every call returns a fresh placeholder, rendered as `□`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
hilbertprove [--delay SECONDS] [--max-backtracks N]
```

The command builds the axiom schemes and an empty knowledge set, prints them,
and then searches for a proof of `a → a`. While it searches it prints a trace:
the current decision path, the knowledge set after each axiom instance that
directly forms a goal, and which kinds of decision failed. At the end it
prints `Result of proof: 1` or `Result of proof: 0`, followed by the initial
knowledge set.

Options:

- `--delay SECONDS` — how long to wait before each backtrack (default `1`;
  `0` turns the wait off).
- `--max-backtracks N` — give up after this many backtracks and report the
  result as `0` (default: no limit). The search is not guaranteed to end, so
  setting a limit is advisable.

## Library use

```python
from hilbertprove.formula import FormulaTable, format_formula
from hilbertprove.axioms import build_axioms, format_axioms
from hilbertprove.knowledge import KnowledgeSet
from hilbertprove.decision import DecisionNode
from hilbertprove.inference import prove_with_tree

table = FormulaTable()
axioms = build_axioms(table)
print(format_axioms(axioms))

a = table.var("a")
goal = table.impl(a, a)
print(format_formula(goal))

ks = KnowledgeSet()
head = DecisionNode(goal=goal, ks=ks)
seen = KnowledgeSet()
proved = prove_with_tree(head, seen, axioms, table)
```

`prove_with_tree` takes two optional callables: `echo`, which receives each
piece of the search trace as a string (for example `echo=print`), and `pause`,
which is called with no arguments before each backtrack. With neither given
the search is silent and never waits. A `pause` that raises an exception is a
way to bound the search.

The building blocks can also be used on their own:

- `hilbertprove.formula`: `Operator`, `Formula`, `FormulaTable`
  (`var`, `neg`, `impl`, `generic`), the hash helpers `mix32`, `hash_unary`
  and `hash_binary`, `compare_trees` (compares shape only, ignoring variable
  names) and `format_formula`.
- `hilbertprove.axioms`: `build_axioms(table)` returns the three schemes;
  `format_axioms(axioms)` renders them as a set.
- `hilbertprove.knowledge`: `KnowledgeSet`, an insertion-ordered set of
  formulas compared by identity, with `add`, `clone`, `format(axioms)` and
  `seed_with_axioms(axioms)`.
- `hilbertprove.inference`:
  - `SubstitutionMap` binds up to three axiom variables (`find`, `bind`,
    `format`); `bind` returns `False` on a conflicting binding or when full.
  - `fit_onto_axiom(mapping, axiom, target)` matches an axiom scheme against
    a formula and records the bindings.
  - `generate_modified_axiom(mapping, axiom, table)` instantiates a scheme;
    unbound variables become fresh generics.
  - `modus_ponens(ks, goal)` applies modus ponens across the knowledge set,
    adding each consequent it derives, and returns `True` as soon as `goal`
    is derived.
- `hilbertprove.decision`: `DecisionNode` (goal, knowledge set, neighbours and
  the flags of branches already tried) and `format_decision_tree(head)`.
- `hilbertprove.goal_queue`: `GoalQueue`, a bounded FIFO of formulas
  (capacity 100 by default) that raises `QueueFullError` or `QueueEmptyError`
  when it cannot push or pop.

## What it does not do

- There is no formula parser: formulas are built in code through a
  `FormulaTable`, and the command only ever tries to prove `a → a`.
- The search does not produce a written-out proof; it reports only whether a
  proof was found, alongside its trace.