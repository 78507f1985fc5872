import dataclasses

import pytest
from arith_ast import (
    True_, False_, Zero, Succ, Pred, IsZero, IfThenElse,
    from_pair, parse_term, is_val, is_numeric_val, to_dict, to_source, to_int,
)
from arith_errors import EmptyPairsError, UnexpectedNodeError
from arith_parser import Pair, Rule, parse


def num(n):
    t = Zero()
    for _ in range(n):
        t = Succ(t)
    return t


class TestBuilder:
    def test_nested_conditional(self):
        ast = parse_term("if iszero pred succ 0 then true else false")
        assert ast == IfThenElse(IsZero(Pred(Succ(Zero()))), True_(), False_())

    def test_literals(self):
        assert parse_term("true") == True_()
        assert parse_term("false") == False_()
        assert parse_term("0") == Zero()

    def test_branch_order(self):
        ast = parse_term("if 0 then true else false")
        assert ast.cond == Zero()
        assert ast.then == True_()
        assert ast.else_ == False_()

    def test_unexpected_node(self):
        pairs = parse("0")
        pairs.try_take()
        eoi = pairs.try_take()
        with pytest.raises(UnexpectedNodeError) as exc:
            from_pair(eoi)
        assert exc.value.kind == Rule.EOI

    def test_input_node_is_not_a_term(self):
        node = Pair(Rule.INPUT, [Pair(Rule.TERM, [Pair(Rule.ZERO)])])
        with pytest.raises(UnexpectedNodeError):
            from_pair(node)

    def test_missing_operand(self):
        with pytest.raises(EmptyPairsError):
            from_pair(Pair(Rule.SUCC, []))

    def test_missing_branch(self):
        term = Pair(Rule.TERM, [Pair(Rule.TRUE)])
        with pytest.raises(EmptyPairsError):
            from_pair(Pair(Rule.IF_THEN_ELSE, [term, term]))

    def test_empty_term_wrapper(self):
        with pytest.raises(EmptyPairsError):
            from_pair(Pair(Rule.TERM, []))


class TestTerms:
    def test_debug_rendering(self):
        ast = IfThenElse(IsZero(Pred(Succ(Zero()))), True_(), False_())
        assert repr(ast) == "IfThenElse(IsZero(Pred(Succ(Zero))), True, False)"

    def test_structural_equality(self):
        assert Succ(Zero()) == Succ(Zero())
        assert Succ(Zero()) != Pred(Zero())
        assert hash(Succ(Zero())) == hash(Succ(Zero()))

    def test_immutable(self):
        t = Succ(Zero())
        with pytest.raises(dataclasses.FrozenInstanceError):
            t.arg = True_()

    def test_value_predicates(self):
        assert is_numeric_val(Zero())
        assert is_numeric_val(num(3))
        assert not is_numeric_val(Succ(True_()))
        assert not is_numeric_val(Pred(Zero()))
        assert is_val(True_())
        assert is_val(False_())
        assert is_val(num(2))
        assert not is_val(IsZero(Zero()))
        assert not is_val(Succ(Pred(Zero())))

    def test_to_int(self):
        assert to_int(Zero()) == 0
        assert to_int(num(4)) == 4
        assert to_int(True_()) is None
        assert to_int(Succ(Pred(Zero()))) is None

    def test_to_dict(self):
        ast = IfThenElse(True_(), Succ(Zero()), False_())
        assert to_dict(ast) == {
            "type": "if",
            "cond": {"type": "true"},
            "then": {"type": "succ", "arg": {"type": "zero"}},
            "else": {"type": "false"},
        }

    def test_to_source_reparses(self):
        for source in [
            "if iszero succ 0 then if iszero pred 0 then true else succ 0 else false",
            "pred pred succ succ succ 0",
            "succ true",
        ]:
            ast = parse_term(source)
            assert to_source(ast) == source
            assert parse_term(to_source(ast)) == ast
