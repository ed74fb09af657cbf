import pytest
from hypothesis import given, strategies as st

from tcpsend.seqnum import WrappingInt32, unwrap, wrap

UINT32_MAX = (1 << 32) - 1
INT32_MAX = (1 << 31) - 1


def test_compare_adjacent():
    assert (WrappingInt32(3) != WrappingInt32(1)) is True
    assert (WrappingInt32(3) == WrappingInt32(1)) is False


@given(st.integers(0, UINT32_MAX), st.integers(0, 255))
def test_compare_random(n, diff):
    m = (n + diff) & UINT32_MAX
    assert (WrappingInt32(n) == WrappingInt32(m)) == (n == m)
    assert (WrappingInt32(n) != WrappingInt32(m)) == (n != m)


@pytest.mark.parametrize(
    "n, isn, checkpoint, expected",
    [
        (1, 0, 0, 1),
        (1, 0, UINT32_MAX, (1 << 32) + 1),
        (UINT32_MAX - 1, 0, 3 * (1 << 32), 3 * (1 << 32) - 2),
        (UINT32_MAX - 10, 0, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 10, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 0, 0, UINT32_MAX),
        (16, 16, 0, 0),
        (15, 16, 0, UINT32_MAX),
        (0, INT32_MAX, 0, INT32_MAX + 2),
        (UINT32_MAX, INT32_MAX, 0, 1 << 31),
        (UINT32_MAX, 1 << 31, 0, UINT32_MAX >> 1),
    ],
)
def test_unwrap(n, isn, checkpoint, expected):
    assert unwrap(WrappingInt32(n), WrappingInt32(isn), checkpoint) == expected


@pytest.mark.parametrize(
    "n, isn, expected",
    [
        (3 * (1 << 32), 0, 0),
        (3 * (1 << 32) + 17, 15, 32),
        (7 * (1 << 32) - 2, 15, 13),
    ],
)
def test_wrap(n, isn, expected):
    assert wrap(n, WrappingInt32(isn)) == WrappingInt32(expected)


BIG_OFFSET = (1 << 31) - 1


@given(
    st.integers(0, UINT32_MAX),
    st.integers(1 << 31, 1 << 63),
    st.integers(0, (1 << 31) - 1),
)
def test_roundtrip(isn_raw, val, offset):
    isn = WrappingInt32(isn_raw)
    for value in (val, val + 1, val - 1, val + offset, val - offset, val + BIG_OFFSET, val - BIG_OFFSET):
        assert unwrap(wrap(value, isn), isn, val) == value


def test_raw_value_is_masked():
    assert WrappingInt32(1 << 32).raw_value == 0
    assert WrappingInt32(UINT32_MAX) + 1 == WrappingInt32(0)


def test_subtraction():
    assert WrappingInt32(0) - WrappingInt32(UINT32_MAX) == 1
    assert WrappingInt32(UINT32_MAX) - WrappingInt32(0) == -1
    assert WrappingInt32(0) - 1 == WrappingInt32(UINT32_MAX)