# tests/test_laws.py
from hypothesis import given, strategies as st
from pycombinator.Parser import Input
from pycombinator.Char import char, digit, letter
from pycombinator.Prim import constant, fail

from conftest import assert_result_eq

# Strategy to generate arbitrary values
vals = st.integers() | st.text()

def run_p(p, input_str=""):
    """Helper to run a parser on a fresh input"""
    return p.parse(Input(input_str))

# 1. Left Identity: return a >>= f  === f a
@given(vals)
def test_monad_left_identity(v):
    f = lambda x: constant(x)

    lhs = constant(v).bind(f)
    rhs = f(v)

    assert_result_eq(run_p(lhs), run_p(rhs))

# 2. Right Identity: m >>= return === m
@given(vals)
def test_monad_right_identity(v):
    m = constant(v)

    lhs = m.bind(constant)
    rhs = m

    assert_result_eq(run_p(lhs), run_p(rhs))

# 3. Associativity: (m >>= f) >>= g === m >>= (\x -> f x >>= g)
@given(st.integers())
def test_monad_associativity(v):
    m = constant(v)
    f = lambda x: constant(x + 1)
    g = lambda y: constant(y * 2)

    lhs = m.bind(f).bind(g)
    rhs = m.bind(lambda x: f(x).bind(g))

    assert run_p(lhs).value == run_p(rhs).value

# The same laws over parsers that consume input or fail
texts = st.text(alphabet="12ab", max_size=6)

@given(st.sampled_from("12ab"), texts)
def test_left_identity_consuming(v, text):
    f = lambda x: char(x)

    assert_result_eq(run_p(constant(v).bind(f), text), run_p(f(v), text))

@given(texts)
def test_right_identity_consuming(text):
    m = digit()

    assert_result_eq(run_p(m.bind(constant), text), run_p(m, text))

@given(texts)
def test_associativity_consuming(text):
    m = digit()
    f = lambda d: char(d)  # the same digit again
    g = lambda d: letter().map(lambda c: d + c)

    lhs = m.bind(f).bind(g)
    rhs = m.bind(lambda x: f(x).bind(g))

    # Failures after consuming "11" must still rewind to the start
    assert_result_eq(run_p(lhs, text), run_p(rhs, text))

@given(texts)
def test_failure_is_left_zero(text):
    calls = []
    f = lambda x: calls.append(x) or digit()

    res = run_p(fail().bind(f), text)

    assert not res.is_success
    assert res.remaining_input == Input(text)
    assert calls == []
    assert_result_eq(run_p(fail().bind(constant), text), run_p(fail(), text))
