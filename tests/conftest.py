# tests/conftest.py
import pytest

from pycombinator.Parser import Input, Result


def assert_result_eq(res1: Result, res2: Result):
    """
    Deep comparison of two Results.
    """
    assert res1.is_success == res2.is_success, f"Outcome mismatch: {res1} != {res2}"
    assert res1.value == res2.value
    assert res1.remaining_input.position == res2.remaining_input.position
    assert res1.remaining_input.text == res2.remaining_input.text


@pytest.fixture
def make_input():
    def _make(text, position=0):
        return Input(text, position)

    return _make
