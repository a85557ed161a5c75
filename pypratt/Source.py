from typing import Iterable, Iterator, Union
from .Pratt import Token, END


class TokenSource:
    """
    Single pass, pull based stream of tokens.

    Yields the wrapped tokens in order and then the END sentinel on every
    later pull, so the parser never has to special case running out of input.
    Wrapping a TokenSource gives back that same source.
    """

    def __new__(cls, tokens: Union[Iterable[Token], 'TokenSource']):
        if isinstance(tokens, TokenSource):
            return tokens
        return super().__new__(cls)

    def __init__(self, tokens: Union[Iterable[Token], 'TokenSource']):
        if tokens is self:
            return
        self._tokens: Iterator[Token] = iter(tokens)
        self.pos = -1  # index of the token most recently pulled
        self.exhausted = False

    def next(self) -> Token:
        self.pos += 1
        if self.exhausted:
            return END
        token = next(self._tokens, END)
        if getattr(token, 'is_end', False):
            self.exhausted = True
            return END
        return token

    def __iter__(self) -> 'TokenSource':
        return self

    # Never raises StopIteration: the sentinel repeats forever.
    __next__ = next
