from enum import Enum, auto
from typing import Any, Callable, Optional, TypeVar, Union

T = TypeVar('T')  # Generic type for parse results


class Token:
    """
    A token participating in a Pratt parse.

    Only the binding power is mandatory. `nud` is called when the token opens
    a (sub)expression, `led` when it follows a complete subexpression. A token
    without one of them has the attribute set to None, which the parser checks
    before dispatching.
    """
    nud: Optional[Callable[..., Any]] = None
    led: Optional[Callable[..., Any]] = None
    is_end = False

    def __init__(self,
                 lbp: int = 0,
                 name: Optional[str] = None,
                 nud: Optional[Callable[[Any], Any]] = None,
                 led: Optional[Callable[[Any, Any], Any]] = None):
        if lbp < 0:
            raise ValueError(f"binding power must be >= 0, got {lbp}")
        self.lbp = lbp
        self.name = name
        if nud is not None:
            self.nud = nud
        if led is not None:
            self.led = led

    def __repr__(self) -> str:
        if self.name is None:
            return f"{type(self).__name__}(lbp={self.lbp})"
        return f"{type(self).__name__}({self.name!r}, lbp={self.lbp})"


class EndToken(Token):
    """The sentinel appended to every token source. Binding power 0, no handlers."""
    is_end = True

    def __init__(self):
        super().__init__(0, "(end)")


END = EndToken()


class Assoc(Enum):
    NONE = auto()
    LEFT = auto()
    RIGHT = auto()


# A matcher is a token class, a token instance, a token name or a predicate.
Matcher = Union[type, Token, str, Callable[[Token], bool]]


def matches(matcher: Matcher, token: Token) -> bool:
    """Check `token` against a matcher as accepted by `expect` and `try_consume`."""
    if isinstance(matcher, type):
        return isinstance(token, matcher)
    if isinstance(matcher, Token):
        return token is matcher
    if isinstance(matcher, str):
        return getattr(token, 'name', None) == matcher
    if callable(matcher):
        return bool(matcher(token))
    raise TypeError(f"cannot match tokens against {matcher!r}")


def describe(matcher: Matcher) -> str:
    """Human readable form of a matcher for error messages."""
    if isinstance(matcher, type):
        return matcher.__name__
    if isinstance(matcher, Token):
        return repr(matcher)
    if isinstance(matcher, str):
        return repr(matcher)
    return getattr(matcher, '__name__', repr(matcher))


def show_token(token: Token) -> str:
    if getattr(token, 'is_end', False):
        return "end of input"
    name = getattr(token, 'name', None)
    if name is not None:
        return repr(name)
    return repr(token)


class ParseError(Exception):
    """Represents a parsing error with the offending token and its position."""

    def __init__(self, pos: int, message: str, token: Optional[Token] = None):
        super().__init__(pos, message)
        self.pos = pos
        self.message = message
        self.token = token

    def __str__(self) -> str:
        return f"Parse error at token {self.pos}: {self.message}"


class MissingPrefixHandler(ParseError):
    """A token that cannot start an expression was found where one begins."""

    def __init__(self, pos: int, token: Token):
        super().__init__(pos, f"unexpected {show_token(token)}, expecting an expression", token)


class MissingInfixHandler(ParseError):
    """A token bound tightly enough to continue an expression but has no led."""

    def __init__(self, pos: int, token: Token):
        super().__init__(pos, f"{show_token(token)} cannot follow an expression", token)


class UnexpectedToken(ParseError):
    """The lookahead did not satisfy what a handler or the parser demanded."""

    def __init__(self, pos: int, token: Token, expected: str):
        super().__init__(pos, f"unexpected {show_token(token)}, expecting {expected}", token)
        self.expected = expected
