from pypratt.Language import arithmetic_table, tree_table
from pypratt.Lexer import char_lexer
from pypratt.Parser import run_parser


class TimeArithmetic:
    def setup(self):
        # Left associative chains loop in one expression() call,
        # right associative and bracketed input recurse.
        self.flat_small = "+".join(["1"] * 1000)
        self.flat_large = "+".join(["1"] * 100000)
        self.mixed = "*".join(["(1+2)"] * 10000)
        self.nested = "(" * 200 + "1" + ")" * 200

    def time_flat_small(self):
        run_parser(char_lexer(arithmetic_table, self.flat_small))

    def time_flat_large(self):
        run_parser(char_lexer(arithmetic_table, self.flat_large))

    def time_mixed(self):
        run_parser(char_lexer(arithmetic_table, self.mixed))

    def time_nested(self):
        run_parser(char_lexer(arithmetic_table, self.nested))


class TimeTree:
    def setup(self):
        self.text = "-".join(["12*3"] * 10000)

    def time_build_tree(self):
        run_parser(char_lexer(tree_table, self.text))
