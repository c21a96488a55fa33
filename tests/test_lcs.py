from hypothesis import given
from hypothesis import strategies as st

from dsakit.lcs import common_subsequences, format_subsequences, lcs_brute_force


def test_sample_length():
    assert lcs_brute_force("ABCX", "ACYXB") == 3


def test_empty_string():
    assert lcs_brute_force("", "ABC") == 0
    assert common_subsequences("", "ABC") == [()]


def test_identical_strings():
    assert lcs_brute_force("ABC", "ABC") == 3


def test_format_single_match():
    subs = common_subsequences("A", "A")
    assert subs == [((0, 0),)]
    assert format_subsequences("A", "A", subs) == "SIZE = 1\n\tA | A\n"


def test_format_empty_subsequence_has_no_header():
    assert format_subsequences("x", "y", common_subsequences("x", "y")) == "\t_ | _\n"


def test_sample_subsequences_sorted():
    subs = common_subsequences("ABCX", "ACYXB")
    keys = [(len(s), s) for s in subs]
    assert keys == sorted(keys)
    assert len(set(subs)) == len(subs)


@given(st.text("ABC", max_size=6), st.text("ABC", max_size=6))
def test_subsequences_are_valid(a, b):
    subs = common_subsequences(a, b)
    for s in subs:
        for i, j in s:
            assert a[i] == b[j]
        for (i1, j1), (i2, j2) in zip(s, s[1:]):
            assert i1 < i2 and j1 < j2
    assert max(len(s) for s in subs) == lcs_brute_force(a, b)


@given(st.text("AB", max_size=6), st.text("AB", max_size=6))
def test_length_symmetric_and_bounded(a, b):
    n = lcs_brute_force(a, b)
    assert n == lcs_brute_force(b, a)
    assert n <= min(len(a), len(b))