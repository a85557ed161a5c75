import sys

from pypratt.Language import arithmetic_table
from pypratt.Lexer import char_lexer
from pypratt.Parser import PrattParser
from pypratt.Pratt import ParseError

# Evaluates simple arithmetic with a Pratt parser.
# Supports + - * / ^ with the customary precedence and associativity,
# parentheses, unary + and -, and = to compare numbers.
# Numbers are read one digit token at a time, so "12" is the digit 1
# extended by the digit 2.


def evaluate(expression: str) -> float:
    return PrattParser(char_lexer(arithmetic_table, expression)).run()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: expression_evaluator.py EXPRESSION", file=sys.stderr)
        sys.exit(2)

    try:
        print(evaluate(sys.argv[1]))
    except ParseError as err:
        print(err, file=sys.stderr)
        sys.exit(1)
    except ArithmeticError as e:
        print(f"Runtime error: {e}", file=sys.stderr)
        sys.exit(1)
