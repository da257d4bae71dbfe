import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.stacks import is_valid_parentheses

PAIRS = [("(", ")"), ("[", "]"), ("{", "}")]


@pytest.mark.parametrize("text", ["()", "()[]{}", "{[]}", "", "({[]})"])
def test_valid(text):
    assert is_valid_parentheses(text)


@pytest.mark.parametrize("text", ["(]", "([)]", "(((", ")))", "a", "(a)"])
def test_invalid(text):
    assert not is_valid_parentheses(text)


balanced = st.recursive(
    st.just(""),
    lambda inner: st.one_of(
        st.builds(lambda pair, body: pair[0] + body + pair[1], st.sampled_from(PAIRS), inner),
        st.builds(lambda a, b: a + b, inner, inner),
    ),
    max_leaves=20,
)


@given(balanced)
def test_generated_balanced_strings_are_valid(text):
    assert is_valid_parentheses(text)


@given(balanced, st.sampled_from(PAIRS))
def test_unmatched_opener_is_invalid(text, pair):
    assert not is_valid_parentheses(text + pair[0])


@given(balanced, st.sampled_from(PAIRS))
def test_stray_closer_is_invalid(text, pair):
    assert not is_valid_parentheses(pair[1] + text)