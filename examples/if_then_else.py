import sys

from pypratt.Language import conditional_table, conditional_tree_table
from pypratt.Lexer import scan_lexer
from pypratt.Parser import run_parser

# Word based grammar: numbers, comparisons, arithmetic,
# "if <cond> then <expr> [else <expr>] end" and "<cond> ? <expr> : <expr>".
#
#   if_then_else.py "if 1 < 2 then 10 else 20 end"     -> 10
#   if_then_else.py --tree "if x > 0 then x end"        -> (if (> x 0) x)

if __name__ == "__main__":
    args = sys.argv[1:]
    as_tree = "--tree" in args
    args = [a for a in args if a != "--tree"]
    if len(args) != 1:
        print("usage: if_then_else.py [--tree] EXPRESSION", file=sys.stderr)
        sys.exit(2)

    table = conditional_tree_table if as_tree else conditional_table
    try:
        result, err = run_parser(scan_lexer(table, args[0]))
    except ArithmeticError as e:
        print(f"Runtime error: {e}", file=sys.stderr)
        sys.exit(1)
    if err:
        print(err, file=sys.stderr)
        sys.exit(1)

    print(result)
    if as_tree:
        print(result.pp())
