from typing import Any, Iterable, Optional, Tuple, Union
from .Pratt import (
    Token, END, Matcher, ParseError, MissingPrefixHandler, MissingInfixHandler,
    UnexpectedToken, matches, describe, show_token, T,
)
from .Source import TokenSource


class PrattParser:
    """
    Top down operator precedence parser.

    The grammar lives in the tokens: the parser only reads binding powers and
    dispatches to `nud`/`led`, which call back into `expression`, `expect`
    and `try_consume` to parse whatever follows them.
    """

    def __init__(self, tokens: Union[Iterable[Token], TokenSource], trace: bool = False):
        self.source = TokenSource(tokens)
        self.trace = trace
        self.token: Optional[Token] = None  # the lookahead
        self.pos = -1  # stream index of the lookahead
        self._started = False

    def run(self, strict: bool = False) -> Any:
        """
        Parse one expression and return its value.

        Tokens left after the expression are not read. With `strict`, the
        input must end right after the expression.
        """
        if self._started:
            raise RuntimeError("a PrattParser can only be run once")
        self._started = True
        self.advance()
        result = self.expression(0)
        if strict and self.token is not END:
            raise UnexpectedToken(self.pos, self.token, "end of input")
        return result

    def advance(self) -> Token:
        """Consume the lookahead and return it."""
        t = self.token
        self.token = self.source.next()
        self.pos = self.source.pos
        return t

    def expression(self, rbp: int = 0) -> Any:
        # Operators binding tighter than rbp belong to this expression;
        # anything else is left for the caller.
        pos = self.pos
        t = self.advance()
        nud = getattr(t, 'nud', None)
        if nud is None:
            raise MissingPrefixHandler(pos, t)
        if self.trace:
            print(f"nud {show_token(t)} at token {pos}")
        left = nud(self)
        while rbp < self.token.lbp:
            pos = self.pos
            t = self.advance()
            led = getattr(t, 'led', None)
            if led is None:
                raise MissingInfixHandler(pos, t)
            if self.trace:
                print(f"led {show_token(t)} at token {pos}")
            left = led(self, left)
        return left

    def expect(self, matcher: Matcher) -> Token:
        """Consume the lookahead if it matches, fail otherwise."""
        if not matches(matcher, self.token):
            raise UnexpectedToken(self.pos, self.token, describe(matcher))
        return self.advance()

    def try_consume(self, matcher: Matcher) -> bool:
        """Consume the lookahead only if it matches. Returns whether it did."""
        if matches(matcher, self.token):
            self.advance()
            return True
        return False


def run_parser(tokens: Union[Iterable[Token], TokenSource],
               trace: bool = False,
               strict: bool = False) -> Tuple[Optional[T], Optional[ParseError]]:
    try:
        return PrattParser(tokens, trace).run(strict), None
    except ParseError as err:
        return None, err


def parse_test(tokens: Iterable[Token]) -> None:
    """Parse the tokens and print the result."""
    value, err = run_parser(tokens)
    if err:
        print(err)
    else:
        print(value)
