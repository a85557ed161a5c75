# tests/conftest.py
import pytest

from pypratt.Pratt import Token


@pytest.fixture
def calls():
    """Log of handler calls shared by the tokens made with `make_token`."""
    return []


@pytest.fixture
def make_token(calls):
    """
    Build a token that records its dispatches. A literal token's nud returns
    its name; an operator's led parses the right operand at its own binding
    power and returns a (name, left, right) tuple.
    """
    def _make(name, lbp=0, literal=False, operator=False):
        nud = led = None
        if literal:
            def nud(parser):
                calls.append(("nud", name))
                return name
        if operator:
            def led(parser, left):
                calls.append(("led", name))
                return (name, left, parser.expression(lbp))
        return Token(lbp, name, nud, led)

    return _make
