"""
Arith - Grammar and Concrete Parse Tree

Recognizes the untyped arithmetic language and produces a tagged parse
tree (rule kind + ordered children) for the AST builder.

Syntax:
    true, false        # Boolean constants
    0                  # Zero
    succ <term>        # Successor
    pred <term>        # Predecessor
    iszero <term>      # Zero test
    if <term> then <term> else <term>

Each operator takes exactly the term immediately following it, so
`succ pred 0` is `succ (pred 0)`. Whitespace (including newlines) is
insignificant.

Grammar:
    Input      = Term EOI
    Term       = IfThenElse | Succ | Pred | IsZero | True | False | Zero
    Succ       = "succ" Term
    Pred       = "pred" Term
    IsZero     = "iszero" Term
    IfThenElse = "if" Term "then" Term "else" Term
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List

from arith_errors import ParseError, EmptyPairsError


class Rule(Enum):
    """Rule kinds tagging parse-tree nodes."""
    INPUT = "Input"
    TERM = "Term"
    TRUE = "True"
    FALSE = "False"
    ZERO = "Zero"
    SUCC = "Succ"
    PRED = "Pred"
    ISZERO = "IsZero"
    IF_THEN_ELSE = "IfThenElse"
    EOI = "EOI"


@dataclass
class Token:
    type: str
    value: str
    line: int
    col: int
    pos: int = 0


@dataclass
class Pair:
    """A parse-tree node: the rule that matched, its children and the matched text."""
    rule: Rule
    children: List["Pair"] = field(default_factory=list)
    start: int = 0
    end: int = 0
    text: str = ""

    def into_inner(self) -> "Pairs":
        return Pairs(self.children)

    def format_tree(self, indent: int = 0) -> str:
        lines = [f"{'  ' * indent}{self.rule.value} {self.text!r}"]
        for child in self.children:
            lines.append(child.format_tree(indent + 1))
        return "\n".join(lines)


class Pairs:
    """Cursor over a sequence of sibling parse-tree nodes."""

    def __init__(self, pairs: List[Pair]):
        self._pairs = list(pairs)
        self._pos = 0

    def try_take(self) -> Pair:
        """Consume the next pair, raising EmptyPairsError when there is none."""
        if self._pos >= len(self._pairs):
            raise EmptyPairsError()
        pair = self._pairs[self._pos]
        self._pos += 1
        return pair

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._pairs[self._pos:])

    def __len__(self) -> int:
        return len(self._pairs) - self._pos


class Lexer:
    """Tokenizer for the arith language."""

    KEYWORDS = {'true', 'false', 'succ', 'pred', 'iszero', 'if', 'then', 'else'}

    TOKEN_PATTERNS = [
        ('WHITESPACE', r'[ \t\r]+'),
        ('NEWLINE', r'\n'),
        ('NUMBER', r'\d+(?![a-zA-Z0-9_])'),
        ('WORD', r'[a-zA-Z0-9_]+'),
    ]

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.col = 1
        self.pattern = '|'.join(f'(?P<{name}>{pat})' for name, pat in self.TOKEN_PATTERNS)
        self.regex = re.compile(self.pattern)

    def tokenize(self) -> List[Token]:
        tokens = []

        while self.pos < len(self.source):
            match = self.regex.match(self.source, self.pos)

            if not match:
                raise ParseError(f"Unexpected character: {self.source[self.pos]!r}", self.line, self.col)

            token_type = match.lastgroup
            token_value = match.group()

            if token_type == 'NEWLINE':
                self.line += 1
                self.col = 1
                self.pos = match.end()
                continue
            elif token_type == 'WHITESPACE':
                pass
            elif token_type == 'NUMBER':
                if token_value != '0':
                    raise ParseError(f"Unsupported numeral {token_value!r} (only 0 is a literal)", self.line, self.col)
                tokens.append(Token('ZERO', token_value, self.line, self.col, self.pos))
            elif token_value in self.KEYWORDS:
                tokens.append(Token(token_value.upper(), token_value, self.line, self.col, self.pos))
            else:
                raise ParseError(f"Unknown word: {token_value!r}", self.line, self.col)

            self.col += len(token_value)
            self.pos = match.end()

        tokens.append(Token('EOF', '', self.line, self.col, self.pos))
        return tokens


class Parser:
    """Recursive descent recognizer producing a tagged parse tree."""

    LITERALS = {'TRUE': Rule.TRUE, 'FALSE': Rule.FALSE, 'ZERO': Rule.ZERO}
    OPERATORS = {'SUCC': Rule.SUCC, 'PRED': Rule.PRED, 'ISZERO': Rule.ISZERO}

    def __init__(self, tokens: List[Token], source: str = ""):
        self.tokens = tokens
        self.source = source
        self.pos = 0
        self.last_end = 0  # source offset just past the last consumed token

    def current(self) -> Token:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else self.tokens[-1]

    def advance(self) -> Token:
        tok = self.current()
        self.pos += 1
        self.last_end = tok.pos + len(tok.value)
        return tok

    def expect(self, token_type: str) -> Token:
        tok = self.current()
        if tok.type != token_type:
            raise ParseError(f"Expected {token_type}, got {tok.type} ({tok.value!r})", tok.line, tok.col)
        return self.advance()

    def match(self, *token_types: str) -> bool:
        return self.current().type in token_types

    def make_pair(self, rule: Rule, children: List[Pair], start: int) -> Pair:
        return Pair(rule, children, start, self.last_end, self.source[start:self.last_end])

    def parse(self) -> Pairs:
        """Parse `Input`: exactly one term followed by end of input."""
        term = self.parse_term()

        tok = self.current()
        if tok.type != 'EOF':
            raise ParseError(f"Expected end of input, got {tok.type} ({tok.value!r})", tok.line, tok.col)

        return Pairs([term, Pair(Rule.EOI, [], tok.pos, tok.pos, "")])

    def parse_term(self) -> Pair:
        """Parse a term, wrapped in a `Term` node."""
        tok = self.current()
        start = tok.pos

        if tok.type in self.LITERALS:
            self.advance()
            inner = self.make_pair(self.LITERALS[tok.type], [], start)
        elif tok.type in self.OPERATORS:
            self.advance()
            arg = self.parse_term()
            inner = self.make_pair(self.OPERATORS[tok.type], [arg], start)
        elif tok.type == 'IF':
            inner = self.parse_if()
        else:
            raise ParseError(f"Expected term, got {tok.type} ({tok.value!r})", tok.line, tok.col)

        return self.make_pair(Rule.TERM, [inner], start)

    def parse_if(self) -> Pair:
        """Parse `if <term> then <term> else <term>`."""
        start = self.expect('IF').pos
        cond = self.parse_term()
        self.expect('THEN')
        then = self.parse_term()
        self.expect('ELSE')
        els = self.parse_term()
        return self.make_pair(Rule.IF_THEN_ELSE, [cond, then, els], start)


def parse(source: str) -> Pairs:
    """Parse arith source into its top-level parse-tree pairs (Term, EOI)."""
    lexer = Lexer(source)
    tokens = lexer.tokenize()
    parser = Parser(tokens, source)
    return parser.parse()


def parse_file(filename: str) -> Pairs:
    """Parse an arith source file."""
    with open(filename, 'r') as f:
        source = f.read()
    return parse(source.rstrip())
