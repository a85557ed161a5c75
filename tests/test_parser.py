import pytest
from hypothesis import given, strategies as st

from pypratt.Pratt import (
    Token, END, MissingPrefixHandler, MissingInfixHandler, UnexpectedToken, ParseError,
)
from pypratt.Grammar import Keyword
from pypratt.Parser import PrattParser, run_parser, parse_test


# --- Dispatch ---

def test_calls_nud_with_the_parser_for_the_first_token():
    seen = []

    def nud(parser):
        seen.append(parser)
        return "ok"

    parser = PrattParser([Token(0, "a", nud=nud)])
    assert parser.run() == "ok"
    assert seen == [parser]


def test_led_receives_the_left_operand(make_token, calls):
    a = make_token("a", literal=True)
    b = make_token("b", literal=True)
    plus = make_token("+", 10, operator=True)

    assert PrattParser([a, plus, b]).run() == ("+", "a", "b")
    assert calls == [("nud", "a"), ("led", "+"), ("nud", "b")]


def test_equal_binding_power_groups_left(make_token):
    a, b, c = (make_token(n, literal=True) for n in "abc")
    minus = make_token("-", 10, operator=True)

    assert PrattParser([a, minus, b, minus, c]).run() == ("-", ("-", "a", "b"), "c")


def test_higher_binding_power_binds_tighter(make_token):
    a, b, c = (make_token(n, literal=True) for n in "abc")
    plus = make_token("+", 10, operator=True)
    times = make_token("*", 20, operator=True)

    assert PrattParser([a, plus, b, times, c]).run() == ("+", "a", ("*", "b", "c"))
    assert PrattParser([a, times, b, plus, c]).run() == ("+", ("*", "a", "b"), "c")


def test_rbp_one_below_lbp_groups_right():
    caret = Token(30, "^")
    caret.led = lambda parser, left: ("^", left, parser.expression(caret.lbp - 1))
    lit = lambda name: Token(0, name, nud=lambda parser: name)

    tokens = [lit("a"), caret, lit("b"), caret, lit("c")]
    assert PrattParser(tokens).run() == ("^", "a", ("^", "b", "c"))


def test_duck_typed_tokens():
    class Number:
        lbp = 0

        def __init__(self, value):
            self.value = value

        def nud(self, parser):
            return self.value

    class Plus:
        lbp = 10

        def led(self, parser, left):
            return left + parser.expression(10)

    assert PrattParser([Number(1), Plus(), Number(2)]).run() == 3


# --- Errors ---

def test_missing_prefix_handler():
    close = Keyword(")")
    with pytest.raises(MissingPrefixHandler) as exc:
        PrattParser([close]).run()
    assert exc.value.token is close
    assert exc.value.pos == 0
    assert "')'" in str(exc.value)


def test_empty_input_has_no_expression():
    with pytest.raises(MissingPrefixHandler) as exc:
        PrattParser([]).run()
    assert exc.value.token is END
    assert "end of input" in str(exc.value)


def test_missing_infix_handler(make_token):
    a = make_token("a", literal=True)
    prefix_only = make_token("!", 10)

    with pytest.raises(MissingInfixHandler) as exc:
        PrattParser([a, prefix_only]).run()
    assert exc.value.pos == 1
    assert exc.value.token is prefix_only


def test_trailing_tokens_are_left_unread(make_token):
    a = make_token("a", literal=True)
    b = make_token("b", literal=True)

    parser = PrattParser([a, b])
    assert parser.run() == "a"
    assert parser.token is b
    assert run_parser([a, Keyword(")")]) == ("a", None)


def test_strict_run_rejects_trailing_tokens(make_token):
    a = make_token("a", literal=True)
    b = make_token("b", literal=True)

    with pytest.raises(UnexpectedToken) as exc:
        PrattParser([a, b]).run(strict=True)
    assert exc.value.pos == 1
    assert exc.value.expected == "end of input"

    value, err = run_parser([a, b], strict=True)
    assert value is None
    assert isinstance(err, UnexpectedToken)
    assert run_parser([a], strict=True) == ("a", None)


def test_errors_are_parse_errors():
    assert issubclass(MissingPrefixHandler, ParseError)
    assert issubclass(MissingInfixHandler, ParseError)
    assert issubclass(UnexpectedToken, ParseError)


def test_parser_runs_once(make_token):
    parser = PrattParser([make_token("a", literal=True)])
    parser.run()
    with pytest.raises(RuntimeError):
        parser.run()


def test_negative_binding_power_is_rejected():
    with pytest.raises(ValueError):
        Token(-1)


# --- expect / try_consume ---

class TokenA(Token):
    def __init__(self, matcher):
        super().__init__(0, "a")
        self.matcher = matcher

    def nud(self, parser):
        parser.expect(self.matcher)
        return "A"


class TokenB(Token):
    def __init__(self):
        super().__init__(0, "b")


class TokenC(Token):
    def __init__(self):
        super().__init__(0, "c")


def test_expect_moves_on_to_the_next_token():
    fetched_after_b = []

    def tokens():
        yield TokenA(TokenB)
        yield TokenB()
        fetched_after_b.append(True)
        yield TokenC()

    parser = PrattParser(tokens())
    assert parser.run() == "A"
    assert fetched_after_b == [True]
    assert isinstance(parser.token, TokenC)


@pytest.mark.parametrize("matcher", [
    TokenB,
    "b",
    lambda token: token.name.startswith("b"),
])
def test_expect_matchers(matcher):
    assert PrattParser([TokenA(matcher), TokenB()]).run() == "A"


def test_expect_by_instance():
    b = TokenB()
    assert PrattParser([TokenA(b), b]).run() == "A"
    with pytest.raises(UnexpectedToken):
        PrattParser([TokenA(b), TokenB()]).run()


def test_expect_fails_on_a_mismatch():
    with pytest.raises(UnexpectedToken) as exc:
        PrattParser([TokenA("c"), TokenB()]).run()
    assert exc.value.pos == 1
    assert exc.value.expected == "'c'"
    assert "expecting 'c'" in str(exc.value)


def test_expect_fails_at_end_of_input():
    with pytest.raises(UnexpectedToken) as exc:
        PrattParser([TokenA(TokenB)]).run()
    assert exc.value.token is END


def test_expect_rejects_unknown_matchers():
    with pytest.raises(TypeError):
        PrattParser([TokenA(42), TokenB()]).run()


def test_try_consume():
    outcomes = []

    def nud(parser):
        outcomes.append(parser.try_consume("x"))
        outcomes.append(parser.try_consume("b"))
        return "done"

    assert PrattParser([Token(0, "a", nud=nud), TokenB()]).run() == "done"
    assert outcomes == [False, True]


def test_try_consume_leaves_the_lookahead_on_a_miss():
    b = TokenB()

    def nud(parser):
        parser.try_consume("x")
        return parser.token

    parser = PrattParser([Token(0, "a", nud=nud), b])
    assert parser.run() is b
    assert parser.token is b


# --- run_parser ---

def test_run_parser_returns_value_and_error(make_token):
    value, err = run_parser([make_token("a", literal=True)])
    assert value == "a"
    assert err is None

    value, err = run_parser([Keyword(")")])
    assert value is None
    assert isinstance(err, MissingPrefixHandler)


def test_parse_test_prints(capsys, make_token):
    parse_test([make_token("a", literal=True)])
    parse_test([Keyword(")")])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "a"
    assert out[1].startswith("Parse error at token 0")


def test_trace_prints_dispatches(capsys, make_token):
    a = make_token("a", literal=True)
    b = make_token("b", literal=True)
    plus = make_token("+", 10, operator=True)

    PrattParser([a, plus, b], trace=True).run()
    out = capsys.readouterr().out.splitlines()
    assert out == ["nud 'a' at token 0", "led '+' at token 1", "nud 'b' at token 2"]


# --- Properties ---

_kinds = st.sampled_from(["literal", "operator", "both", "neither"])


def _token(kind, lbp):
    nud = (lambda parser: "x") if kind in ("literal", "both") else None
    led = None
    if kind in ("operator", "both"):
        led = lambda parser, left: (left, parser.expression(lbp))
    return Token(lbp, kind, nud, led)


@given(st.lists(st.tuples(_kinds, st.integers(min_value=0, max_value=5)), max_size=30))
def test_run_terminates_on_any_finite_sequence(shape):
    value, err = run_parser([_token(kind, lbp) for kind, lbp in shape])
    assert (value is None) != (err is None)


@given(st.lists(st.tuples(_kinds, st.integers(min_value=0, max_value=5)), max_size=30))
def test_parsing_is_deterministic(shape):
    tokens = [_token(kind, lbp) for kind, lbp in shape]
    first = run_parser(tokens)
    second = run_parser(tokens)
    assert first[0] == second[0]
    assert type(first[1]) is type(second[1])
    assert str(first[1]) == str(second[1])
