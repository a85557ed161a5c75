from pypratt.Language import arithmetic_table, tree_table, conditional_table
from pypratt.Lexer import char_lexer, scan_lexer
from pypratt.Parser import PrattParser, run_parser


def evaluate(text):
    """Run the arithmetic grammar, raising on parse errors."""
    return PrattParser(char_lexer(arithmetic_table, text)).run()


def build_tree(text):
    return PrattParser(char_lexer(tree_table, text)).run()


def run_words(text, table=conditional_table):
    """(value, error) for the word based grammar."""
    return run_parser(scan_lexer(table, text))
