from typing import Any, Callable, Optional
from .Pratt import Token, Assoc, Matcher, UnexpectedToken, show_token

# Right binding power for prefix operators: binds only the next operand,
# above every infix operator but below digit juxtaposition.
PREFIX_RBP = 1000
DIGIT_LBP = 1000000


def right_binding_power(lbp: int, assoc: Assoc) -> int:
    """rbp to parse the right operand with: lbp for LEFT/NONE, lbp - 1 for RIGHT."""
    if assoc == Assoc.RIGHT:
        return lbp - 1
    return lbp


# 1. Literal: a value standing on its own
class Literal(Token):
    def __init__(self, value: Any, name: Optional[str] = None, lbp: int = 0):
        super().__init__(lbp, name if name is not None else str(value))
        self.value = value

    def nud(self, parser) -> Any:
        return self.value


# 2. Digit: single character numbers, glued to the number on their left
class Digit(Token):
    """
    One decimal digit. A run of digits reads as one number because each
    digit's led extends the number parsed so far (`left * 10 + value`).
    `make` turns the first digit into a result, `extend` combines a result
    with a following digit, `joins` rejects left operands that are not
    numbers.
    """
    def __init__(self,
                 value: int,
                 lbp: int = DIGIT_LBP,
                 make: Callable[[int], Any] = lambda d: d,
                 extend: Optional[Callable[[Any, int], Any]] = None,
                 joins: Optional[Callable[[Any], bool]] = None):
        super().__init__(lbp, str(value))
        self.value = value
        self.make = make
        self.extend = extend
        self.joins = joins

    def nud(self, parser) -> Any:
        return self.make(self.value)

    def led(self, parser, left: Any) -> Any:
        if self.joins is not None and not self.joins(left):
            raise UnexpectedToken(parser.pos - 1, self, "an operator")
        if self.extend is not None:
            return self.extend(left, self.value)
        return left * 10 + self.value


# 3. Infix: binary operator with an associativity
class Infix(Token):
    def __init__(self, name: str, lbp: int, fn: Callable[[Any, Any], Any],
                 assoc: Assoc = Assoc.LEFT):
        if lbp < 1:
            raise ValueError(f"operator {name!r} needs a binding power >= 1")
        super().__init__(lbp, name)
        self.fn = fn
        self.assoc = assoc
        self.rbp = right_binding_power(lbp, assoc)

    def led(self, parser, left: Any) -> Any:
        right = parser.expression(self.rbp)
        if self.assoc == Assoc.NONE:
            following = parser.token
            if following.lbp == self.lbp and getattr(following, 'assoc', None) == Assoc.NONE:
                raise UnexpectedToken(parser.pos, following,
                                      f"no chained operator after {self.name!r}")
        return self.fn(left, right)


# 4. Prefix: unary operator opening an expression
class Prefix(Token):
    def __init__(self, name: str, fn: Callable[[Any], Any],
                 rbp: int = PREFIX_RBP, lbp: int = 0):
        super().__init__(lbp, name)
        self.fn = fn
        self.rbp = rbp

    def nud(self, parser) -> Any:
        return self.fn(parser.expression(self.rbp))


# 5. Bifix: prefix or infix depending on position, like '-'
class Bifix(Infix):
    def __init__(self, name: str, lbp: int,
                 infix_fn: Callable[[Any, Any], Any],
                 prefix_fn: Callable[[Any], Any],
                 assoc: Assoc = Assoc.LEFT,
                 prefix_rbp: int = PREFIX_RBP):
        super().__init__(name, lbp, infix_fn, assoc)
        self.prefix_fn = prefix_fn
        self.prefix_rbp = prefix_rbp

    def nud(self, parser) -> Any:
        return self.prefix_fn(parser.expression(self.prefix_rbp))


# 6. Postfix: unary operator following its operand, like '!'
class Postfix(Token):
    def __init__(self, name: str, lbp: int, fn: Callable[[Any], Any]):
        if lbp < 1:
            raise ValueError(f"operator {name!r} needs a binding power >= 1")
        super().__init__(lbp, name)
        self.fn = fn

    def led(self, parser, left: Any) -> Any:
        return self.fn(left)


# 7. Group: an opening bracket, parses up to its closing bracket
class Group(Token):
    def __init__(self, name: str, close: Matcher, lbp: int = 0,
                 wrap: Optional[Callable[[Any], Any]] = None):
        super().__init__(lbp, name)
        self.close = close
        self.wrap = wrap

    def nud(self, parser) -> Any:
        value = parser.expression(0)
        parser.expect(self.close)
        if self.wrap is not None:
            return self.wrap(value)
        return value


# 8. Keyword: delimiters only ever consumed by expect/try_consume
class Keyword(Token):
    def __init__(self, name: str, lbp: int = 0):
        super().__init__(lbp, name)


# 9. Ternary: cond ? a : b, right associative
class Ternary(Token):
    def __init__(self, name: str, lbp: int, separator: Matcher,
                 fn: Callable[[Any, Any, Any], Any]):
        if lbp < 1:
            raise ValueError(f"operator {name!r} needs a binding power >= 1")
        super().__init__(lbp, name)
        self.separator = separator
        self.fn = fn

    def led(self, parser, left: Any) -> Any:
        then = parser.expression(0)
        parser.expect(self.separator)
        otherwise = parser.expression(self.lbp - 1)
        return self.fn(left, then, otherwise)


# 10. Conditional: if c then a [else b] end
class Conditional(Token):
    """
    Opens `if <cond> then <expr> [else <expr>] end`. The else branch is
    optional and reaches `fn` as None when omitted.
    """
    def __init__(self, name: str, fn: Callable[[Any, Any, Optional[Any]], Any],
                 then: Matcher = "then", else_: Matcher = "else", end: Matcher = "end"):
        super().__init__(0, name)
        self.fn = fn
        self.then = then
        self.else_ = else_
        self.end = end

    def nud(self, parser) -> Any:
        cond = parser.expression(0)
        parser.expect(self.then)
        then = parser.expression(0)
        otherwise = None
        if parser.try_consume(self.else_):
            otherwise = parser.expression(0)
        parser.expect(self.end)
        return self.fn(cond, then, otherwise)


# 11. traced: debugging wrapper printing every dispatch of a token.
# The wrapper is a plain Token, so class matchers no longer see the original.
def traced(token: Token, label: Optional[str] = None) -> Token:
    label_str = label if label is not None else show_token(token)
    nud = getattr(token, 'nud', None)
    led = getattr(token, 'led', None)

    def traced_nud(parser) -> Any:
        print(f"{label_str}: nud at token {parser.pos - 1}")
        return nud(parser)

    def traced_led(parser, left: Any) -> Any:
        print(f"{label_str}: led at token {parser.pos - 1} after {left!r}")
        return led(parser, left)

    # A missing handler stays missing.
    wrapper = Token(token.lbp, getattr(token, 'name', None),
                    traced_nud if nud is not None else None,
                    traced_led if led is not None else None)
    # Infix reads the assoc of the operator that follows it.
    if hasattr(token, 'assoc'):
        wrapper.assoc = token.assoc
    return wrapper
