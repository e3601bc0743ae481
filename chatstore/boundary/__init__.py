"""Boundary adapters: relational entity store and in-process cache."""
