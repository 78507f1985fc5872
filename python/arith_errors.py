"""
Arith - Error Taxonomy

Every failure in the pipeline (lexing/parsing, AST construction,
evaluation) is raised as one of these. None of them is recoverable:
the first one aborts the run.
"""


class ArithError(Exception):
    """Base exception for arith errors."""
    pass


class ParseError(ArithError):
    """Raw input rejected by the grammar, with location information."""
    def __init__(self, message: str, line: int = None, col: int = None):
        self.line = line
        self.col = col
        self.diagnostic = message
        if line is not None:
            loc = f"line {line}"
            if col is not None:
                loc += f", col {col}"
            message = f"{loc}: {message}"
        super().__init__(message)

    def __repr__(self):
        return f"ParseError({str(self)!r})"


class UnexpectedNodeError(ArithError):
    """Parse-tree node whose rule kind has no AST counterpart."""
    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"Unexpected parse node: {kind}")

    def __repr__(self):
        return f"UnexpectedNodeError({self.kind})"


class EmptyPairsError(ArithError):
    """A required child node was absent."""
    def __init__(self):
        super().__init__("Expected a child node, found none")

    def __repr__(self):
        return "EmptyPairsError"


class UnknownRuleError(ArithError):
    """Stuck term: no evaluation rule applies to `term`."""
    def __init__(self, term):
        self.term = term
        super().__init__(f"No evaluation rule applies to {term!r}")

    def __repr__(self):
        return f"UnknownRuleError({self.term!r})"
