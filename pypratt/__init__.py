# Core
from .Pratt import (
    Token, EndToken, END, Assoc, Matcher, matches,
    ParseError, MissingPrefixHandler, MissingInfixHandler, UnexpectedToken,
)
from .Source import TokenSource
from .Parser import PrattParser, run_parser, parse_test

# Token kinds
from .Grammar import (
    Literal, Digit, Infix, Prefix, Bifix, Postfix, Group, Keyword,
    Ternary, Conditional, traced, right_binding_power,
    PREFIX_RBP, DIGIT_LBP,
)

# Token tables
from .Language import (
    TokenTable, number_literal,
    arithmetic_table, tree_table, conditional_table, conditional_tree_table,
)

# Lexers
from .Lexer import LexError, char_lexer, scan_lexer

# Syntax tree
from .Tree import NumberNode, NameNode, UnaryNode, BinaryNode, IfNode
