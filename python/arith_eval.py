"""
Arith - Big-step Evaluator

Reduces a term straight to its value:

    B-Value       v                          => v
    B-IfTrue      if t1 then t2 else t3      => v2   when t1 => true
    B-IfFalse     if t1 then t2 else t3      => v3   when t1 => false
    B-Succ        succ t1                    => succ nv1
    B-PredZero    pred t1                    => 0    when t1 => 0
    B-PredSucc    pred t1                    => nv1  when t1 => succ nv1
    B-IsZeroZero  iszero t1                  => true when t1 => 0
    B-IsZeroSucc  iszero t1                  => false when t1 => succ nv1

A term none of these apply to is stuck and raises UnknownRuleError
carrying the sub-result that blocked reduction.
"""

from arith_ast import (
    Term, True_, False_, Zero, Succ, Pred, IsZero, IfThenElse,
    is_numeric_val, is_val, parse_term,
)
from arith_errors import UnknownRuleError


def eval_ast(t: Term) -> Term:
    """Evaluate a term to a value.

    Raises:
        UnknownRuleError: the term (or one of its sub-terms) is stuck.
    """
    if is_val(t):
        return t

    if isinstance(t, IfThenElse):
        cond = eval_ast(t.cond)
        if isinstance(cond, True_):
            return eval_ast(t.then)
        if isinstance(cond, False_):
            return eval_ast(t.else_)
        raise UnknownRuleError(cond)

    if isinstance(t, Succ):
        v = eval_ast(t.arg)
        if is_numeric_val(v):
            return Succ(v)
        raise UnknownRuleError(v)

    if isinstance(t, Pred):
        v = eval_ast(t.arg)
        if isinstance(v, Zero):
            return v
        if isinstance(v, Succ) and is_numeric_val(v.arg):
            return v.arg
        raise UnknownRuleError(v)

    if isinstance(t, IsZero):
        v = eval_ast(t.arg)
        if isinstance(v, Zero):
            return True_()
        if isinstance(v, Succ) and is_numeric_val(v.arg):
            return False_()
        raise UnknownRuleError(v)

    raise UnknownRuleError(t)


def evaluate(source: str) -> Term:
    """Parse, build and evaluate arith source."""
    return eval_ast(parse_term(source))
