import operator
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional

from .Pratt import Token, Assoc
from .Grammar import (
    Literal, Digit, Infix, Bifix, Group, Keyword, Ternary, Conditional,
)
from .Tree import NumberNode, NameNode, UnaryNode, BinaryNode, IfNode


@dataclass(frozen=True)
class TokenTable:
    """
    Immutable registry from lexeme to token, handed to a lexer.

    `number` and `name` build tokens for numeric literals and identifiers
    that are not in the table. Use `extend` to derive a new table.
    """
    tokens: Mapping[str, Token] = field(default_factory=dict)
    number: Optional[Callable[[str], Token]] = None
    name: Optional[Callable[[str], Token]] = None

    def __post_init__(self):
        if "" in self.tokens:
            raise ValueError("a token table cannot map the empty lexeme")
        object.__setattr__(self, 'tokens', MappingProxyType(dict(self.tokens)))

    def lookup(self, lexeme: str) -> Optional[Token]:
        return self.tokens.get(lexeme)

    def __contains__(self, lexeme: str) -> bool:
        return lexeme in self.tokens

    def operators(self) -> List[str]:
        """Lexemes that are not words, longest first."""
        ops = [k for k in self.tokens if not (k[0].isalnum() or k[0] == "_")]
        return sorted(ops, key=len, reverse=True)

    def extend(self, tokens: Optional[Mapping[str, Token]] = None, **changes) -> 'TokenTable':
        merged = dict(self.tokens)
        merged.update(tokens or {})
        return replace(self, tokens=merged, **changes)


def number_literal(text: str) -> Literal:
    """Token for a scanned number: int when it has no fraction or exponent."""
    if any(c in text for c in ".eE"):
        return Literal(float(text), name=text)
    return Literal(int(text), name=text)


def _digits(**kwargs) -> dict:
    return {str(d): Digit(d, **kwargs) for d in range(10)}


# -----------------------------------------------------------
# Arithmetic: evaluates to a number
# -----------------------------------------------------------

# = compares, + - * / ^ with the customary precedence, ^ right
# associative, + and - also prefix. Digits are single characters.
arithmetic_table = TokenTable({
    "(": Group("(", close=")"),
    ")": Keyword(")"),
    "=": Infix("=", 10, operator.eq),
    "+": Bifix("+", 20, operator.add, operator.pos),
    "-": Bifix("-", 20, operator.sub, operator.neg),
    "*": Infix("*", 30, operator.mul),
    "/": Infix("/", 30, operator.truediv),
    "^": Infix("^", 40, operator.pow, Assoc.RIGHT),
    **_digits(make=float),
})


# -----------------------------------------------------------
# Tree: the same grammar building a syntax tree
# -----------------------------------------------------------

def _binary(op: str):
    return lambda left, right: BinaryNode(op, left, right)


def _unary(op: str):
    return lambda node: UnaryNode(op, node)


tree_table = TokenTable({
    "(": Group("(", close=")"),
    ")": Keyword(")"),
    "=": Infix("=", 10, _binary("=")),
    "+": Bifix("+", 20, _binary("+"), _unary("+")),
    "-": Bifix("-", 20, _binary("-"), _unary("-")),
    "*": Infix("*", 30, _binary("*")),
    "/": Infix("/", 30, _binary("/")),
    "^": Infix("^", 40, _binary("^"), Assoc.RIGHT),
    **_digits(make=NumberNode,
              extend=lambda node, d: NumberNode(node.number * 10 + d),
              joins=lambda left: isinstance(left, NumberNode)),
})


# -----------------------------------------------------------
# Conditionals: word based grammar for scan_lexer
# -----------------------------------------------------------

def _choose(cond, then, otherwise):
    return then if cond else otherwise


_comparison = {
    "==": Infix("==", 10, operator.eq, Assoc.NONE),
    "!=": Infix("!=", 10, operator.ne, Assoc.NONE),
    "<": Infix("<", 10, operator.lt, Assoc.NONE),
    "<=": Infix("<=", 10, operator.le, Assoc.NONE),
    ">": Infix(">", 10, operator.gt, Assoc.NONE),
    ">=": Infix(">=", 10, operator.ge, Assoc.NONE),
}

conditional_table = TokenTable({
    "if": Conditional("if", _choose),
    "then": Keyword("then"),
    "else": Keyword("else"),
    "end": Keyword("end"),
    "true": Literal(True, "true"),
    "false": Literal(False, "false"),
    "?": Ternary("?", 5, ":", _choose),
    ":": Keyword(":"),
    "(": Group("(", close=")"),
    ")": Keyword(")"),
    **_comparison,
    "+": Bifix("+", 20, operator.add, operator.pos),
    "-": Bifix("-", 20, operator.sub, operator.neg),
    "*": Infix("*", 30, operator.mul),
    "/": Infix("/", 30, operator.truediv),
    "^": Infix("^", 40, operator.pow, Assoc.RIGHT),
}, number=number_literal)

# Same words, building IfNode / BinaryNode trees.
conditional_tree_table = TokenTable({
    "if": Conditional("if", IfNode),
    "then": Keyword("then"),
    "else": Keyword("else"),
    "end": Keyword("end"),
    "?": Ternary("?", 5, ":", IfNode),
    ":": Keyword(":"),
    "(": Group("(", close=")"),
    ")": Keyword(")"),
    **{op: Infix(op, 10, _binary(op), Assoc.NONE) for op in _comparison},
    "+": Bifix("+", 20, _binary("+"), _unary("+")),
    "-": Bifix("-", 20, _binary("-"), _unary("-")),
    "*": Infix("*", 30, _binary("*")),
    "/": Infix("/", 30, _binary("/")),
    "^": Infix("^", 40, _binary("^"), Assoc.RIGHT),
}, number=lambda text: Literal(NumberNode(number_literal(text).value), name=text),
   name=lambda word: Literal(NameNode(word), name=word))
