"""
Arith - Abstract Syntax Tree

Term variants, the value predicates, and the builder that turns a
concrete parse tree (see arith_parser) into a Term.

Terms are immutable and each node owns its children; equality is
structural, and repr() gives the debug rendering used by the CLIs:

    IfThenElse(IsZero(Pred(Succ(Zero))), True, False)
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from arith_errors import UnexpectedNodeError
from arith_parser import Pair, Rule, parse


class Term:
    """Base class of all AST nodes."""
    pass


@dataclass(frozen=True)
class True_(Term):
    def __repr__(self): return "True"


@dataclass(frozen=True)
class False_(Term):
    def __repr__(self): return "False"


@dataclass(frozen=True)
class Zero(Term):
    def __repr__(self): return "Zero"


@dataclass(frozen=True)
class Succ(Term):
    arg: Term
    def __repr__(self): return f"Succ({self.arg!r})"


@dataclass(frozen=True)
class Pred(Term):
    arg: Term
    def __repr__(self): return f"Pred({self.arg!r})"


@dataclass(frozen=True)
class IsZero(Term):
    arg: Term
    def __repr__(self): return f"IsZero({self.arg!r})"


@dataclass(frozen=True)
class IfThenElse(Term):
    cond: Term
    then: Term
    else_: Term
    def __repr__(self): return f"IfThenElse({self.cond!r}, {self.then!r}, {self.else_!r})"


def is_numeric_val(t: Term) -> bool:
    """Zero, or Succ of a numeric value."""
    while isinstance(t, Succ):
        t = t.arg
    return isinstance(t, Zero)


def is_val(t: Term) -> bool:
    """True, False, or a numeric value."""
    return isinstance(t, (True_, False_)) or is_numeric_val(t)


# ======================================
# Parse tree -> AST
# ======================================

LITERALS = {
    Rule.TRUE: True_,
    Rule.FALSE: False_,
    Rule.ZERO: Zero,
}

UNARY = {
    Rule.SUCC: Succ,
    Rule.PRED: Pred,
    Rule.ISZERO: IsZero,
}


def from_pair(pair: Pair) -> Term:
    """Build the AST for one parse-tree node.

    Raises:
        EmptyPairsError: an operator or conditional node is missing a child.
        UnexpectedNodeError: the node's rule kind has no AST counterpart.
    """
    rule = pair.rule

    if rule == Rule.TERM:
        return from_pair(pair.into_inner().try_take())

    if rule in LITERALS:
        return LITERALS[rule]()

    if rule in UNARY:
        pairs = pair.into_inner()
        return UNARY[rule](from_pair(pairs.try_take()))

    if rule == Rule.IF_THEN_ELSE:
        pairs = pair.into_inner()
        cond = from_pair(pairs.try_take())
        then = from_pair(pairs.try_take())
        els = from_pair(pairs.try_take())
        return IfThenElse(cond, then, els)

    raise UnexpectedNodeError(rule)


def parse_term(source: str) -> Term:
    """Parse arith source straight to its AST."""
    return from_pair(parse(source).try_take())


# ======================================
# Rendering
# ======================================

def to_dict(t: Term) -> Dict[str, Any]:
    """JSON-ready representation of a term."""
    if isinstance(t, True_):
        return {"type": "true"}
    if isinstance(t, False_):
        return {"type": "false"}
    if isinstance(t, Zero):
        return {"type": "zero"}
    if isinstance(t, Succ):
        return {"type": "succ", "arg": to_dict(t.arg)}
    if isinstance(t, Pred):
        return {"type": "pred", "arg": to_dict(t.arg)}
    if isinstance(t, IsZero):
        return {"type": "iszero", "arg": to_dict(t.arg)}
    if isinstance(t, IfThenElse):
        return {
            "type": "if",
            "cond": to_dict(t.cond),
            "then": to_dict(t.then),
            "else": to_dict(t.else_),
        }
    raise TypeError(f"Not a term: {t!r}")


def to_source(t: Term) -> str:
    """Concrete syntax for a term; parse_term(to_source(t)) == t."""
    if isinstance(t, True_):
        return "true"
    if isinstance(t, False_):
        return "false"
    if isinstance(t, Zero):
        return "0"
    if isinstance(t, Succ):
        return f"succ {to_source(t.arg)}"
    if isinstance(t, Pred):
        return f"pred {to_source(t.arg)}"
    if isinstance(t, IsZero):
        return f"iszero {to_source(t.arg)}"
    if isinstance(t, IfThenElse):
        return f"if {to_source(t.cond)} then {to_source(t.then)} else {to_source(t.else_)}"
    raise TypeError(f"Not a term: {t!r}")


def to_int(t: Term) -> Optional[int]:
    """The natural number a numeric value denotes, or None."""
    n = 0
    while isinstance(t, Succ):
        n += 1
        t = t.arg
    return n if isinstance(t, Zero) else None
