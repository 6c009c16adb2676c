"""Backward-chaining prover for Hilbert-style propositional logic."""

__version__ = "0.1.0"