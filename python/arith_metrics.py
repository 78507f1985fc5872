"""
Arith - Structural metrics over terms.

Both functions are total: stuck terms are measured like any other.
"""

from arith_ast import Term, Succ, Pred, IsZero, IfThenElse


def size(t: Term) -> int:
    """Number of nodes in the term."""
    if isinstance(t, (Succ, Pred, IsZero)):
        return 1 + size(t.arg)
    if isinstance(t, IfThenElse):
        return 1 + size(t.cond) + size(t.then) + size(t.else_)
    return 1


def depth(t: Term) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if isinstance(t, (Succ, Pred, IsZero)):
        return 1 + depth(t.arg)
    if isinstance(t, IfThenElse):
        return 1 + max(depth(t.cond), depth(t.then), depth(t.else_))
    return 1
