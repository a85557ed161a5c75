import sys

from pypratt.Language import tree_table
from pypratt.Lexer import char_lexer
from pypratt.Parser import run_parser

# Parses arithmetic into a tree of *Node objects and prints it prefix
# style ala Lisp, once on a single line and once indented.
# + and - may be either prefix or infix.


def build(expression: str):
    return run_parser(char_lexer(tree_table, expression))


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: tree_builder.py EXPRESSION", file=sys.stderr)
        sys.exit(2)

    tree, err = build(sys.argv[1])
    if err:
        print(err, file=sys.stderr)
        sys.exit(1)

    print(tree)
    print(tree.pp())
