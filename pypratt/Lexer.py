import re
from typing import Iterator
from .Pratt import Token, ParseError
from .Language import TokenTable


class LexError(ParseError):
    """Raised by the lexers for input that maps to no token. `pos` is a character offset."""

    def __init__(self, pos: int, text: str):
        super().__init__(pos, f"unexpected character {text!r}")
        self.text = text

    def __str__(self) -> str:
        return f"Lex error at character {self.pos}: {self.message}"


def char_lexer(table: TokenTable, text: str, skip: str = " \t\r\n") -> Iterator[Token]:
    """Map every character of `text` through the table, skipping `skip`."""
    for i, c in enumerate(text):
        if c in skip:
            continue
        token = table.lookup(c)
        if token is None:
            raise LexError(i, c)
        yield token


_space = re.compile(r"\s+")
_number = re.compile(r"\d+(?:\.\d*)?(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?")
_word = re.compile(r"[A-Za-z_]\w*")


def scan_lexer(table: TokenTable, text: str) -> Iterator[Token]:
    """
    Scan `text` into numbers, words and operators.

    Numbers go through `table.number`, words are looked up in the table
    first (keywords) and otherwise go through `table.name`. Anything else is
    the longest operator in the table starting at the current character.
    """
    operators = table.operators()
    i = 0
    while i < len(text):
        m = _space.match(text, i)
        if m:
            i = m.end()
            continue

        m = _number.match(text, i)
        if m:
            if table.number is None:
                raise LexError(i, m.group())
            yield table.number(m.group())
            i = m.end()
            continue

        m = _word.match(text, i)
        if m:
            word = m.group()
            token = table.lookup(word)
            if token is None:
                if table.name is None:
                    raise LexError(i, word)
                token = table.name(word)
            yield token
            i = m.end()
            continue

        for op in operators:
            if text.startswith(op, i):
                yield table.tokens[op]
                i += len(op)
                break
        else:
            raise LexError(i, text[i])
