import pytest
from arith_parser import Lexer, Pair, Pairs, Rule, parse, parse_file
from arith_errors import EmptyPairsError, ParseError

class TestLexer:
    def test_keywords(self):
        tokens = Lexer("if iszero 0 then true else false").tokenize()
        assert [t.type for t in tokens] == [
            'IF', 'ISZERO', 'ZERO', 'THEN', 'TRUE', 'ELSE', 'FALSE', 'EOF'
        ]

    def test_positions(self):
        tokens = Lexer("succ\n  pred 0").tokenize()
        pred = tokens[1]
        assert (pred.line, pred.col, pred.pos) == (2, 3, 7)

    def test_unknown_word(self):
        with pytest.raises(ParseError) as exc:
            Lexer("succ\n  foo").tokenize()
        assert exc.value.line == 2
        assert exc.value.col == 3
        assert "foo" in str(exc.value)

    def test_word_boundary(self):
        # "succ0" is one word, not "succ 0"
        with pytest.raises(ParseError):
            Lexer("succ0").tokenize()

    def test_numeral_boundary(self):
        # "0else" is one word, not "0 else"
        with pytest.raises(ParseError) as exc:
            Lexer("if true then 0else 0").tokenize()
        assert "0else" in str(exc.value)
        with pytest.raises(ParseError):
            Lexer("10else").tokenize()

    def test_only_zero_numeral(self):
        with pytest.raises(ParseError):
            Lexer("succ 1").tokenize()
        with pytest.raises(ParseError):
            Lexer("00").tokenize()

    def test_unexpected_character(self):
        with pytest.raises(ParseError):
            Lexer("(succ 0)").tokenize()


class TestParser:
    def test_top_level_pairs(self):
        pairs = parse("succ 0")
        assert len(pairs) == 2
        term, eoi = list(pairs)
        assert term.rule == Rule.TERM
        assert term.text == "succ 0"
        assert eoi.rule == Rule.EOI

    def test_operator_takes_next_term(self):
        term = parse("succ pred 0").try_take()
        succ = term.children[0]
        assert succ.rule == Rule.SUCC
        assert len(succ.children) == 1
        pred = succ.children[0].children[0]
        assert pred.rule == Rule.PRED
        assert pred.text == "pred 0"

    def test_conditional_children(self):
        term = parse("if true then 0 else succ 0").try_take()
        cond = term.children[0]
        assert cond.rule == Rule.IF_THEN_ELSE
        assert [c.rule for c in cond.children] == [Rule.TERM, Rule.TERM, Rule.TERM]
        assert [c.text for c in cond.children] == ["true", "0", "succ 0"]

    def test_whitespace(self):
        term = parse("  iszero\n\t  0  ").try_take()
        assert term.children[0].rule == Rule.ISZERO
        assert term.text == "iszero\n\t  0"

    def test_empty_input(self):
        with pytest.raises(ParseError):
            parse("")

    def test_missing_operand(self):
        with pytest.raises(ParseError):
            parse("succ")

    def test_missing_else(self):
        with pytest.raises(ParseError) as exc:
            parse("if true then 0")
        assert "ELSE" in str(exc.value)

    def test_trailing_tokens(self):
        with pytest.raises(ParseError):
            parse("0 0")

    def test_keyword_out_of_place(self):
        with pytest.raises(ParseError):
            parse("then 0")

    def test_format_tree(self):
        tree = parse("succ 0").try_take().format_tree()
        assert tree.splitlines() == [
            "Term 'succ 0'",
            "  Succ 'succ 0'",
            "    Term '0'",
            "      Zero '0'",
        ]

    def test_parse_file(self, tmp_path):
        path = tmp_path / "term.arith"
        path.write_text("pred\nsucc 0\n\n")
        term = parse_file(str(path)).try_take()
        assert term.children[0].rule == Rule.PRED


class TestPairs:
    def test_try_take_consumes(self):
        a = Pair(Rule.ZERO)
        b = Pair(Rule.TRUE)
        pairs = Pairs([a, b])
        assert pairs.try_take() is a
        assert len(pairs) == 1
        assert list(pairs) == [b]
        assert pairs.try_take() is b

    def test_try_take_empty(self):
        with pytest.raises(EmptyPairsError):
            Pairs([]).try_take()
