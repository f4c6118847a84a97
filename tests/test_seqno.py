import pytest
from hypothesis import given
from hypothesis import strategies as st

from tcpsender.seqno import unwrap, wrap

UINT32_MAX = 2**32 - 1
INT32_MAX = 2**31 - 1


@pytest.mark.parametrize(
    ("seqno", "isn", "checkpoint", "expected"),
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
def test_unwrap_cases(seqno, isn, checkpoint, expected):
    assert unwrap(seqno, isn, checkpoint) == expected


@pytest.mark.parametrize(
    ("n", "isn", "expected"),
    [
        (3 * (1 << 32), 0, 0),
        (3 * (1 << 32) + 17, 15, 32),
        (7 * (1 << 32) - 2, 15, 13),
    ],
)
def test_wrap_cases(n, isn, expected):
    assert wrap(n, isn) == expected


def test_wrap_rejects_negative():
    with pytest.raises(ValueError):
        wrap(-1, 0)


def test_unwrap_rejects_negative_checkpoint():
    with pytest.raises(ValueError):
        unwrap(0, 0, -5)


def test_compare_low_adjacent():
    assert (wrap(3, 0) != wrap(1, 0)) is True
    assert (wrap(3, 0) == wrap(1, 0)) is False


@given(st.integers(min_value=0, max_value=UINT32_MAX), st.integers(min_value=0, max_value=255))
def test_compare_nearby(n, diff):
    assert (wrap(n, 0) == wrap(n + diff, 0)) == (diff == 0)


@given(
    st.integers(min_value=0, max_value=UINT32_MAX),
    st.integers(min_value=2**31, max_value=2**63),
    st.integers(min_value=0, max_value=2**31 - 1),
)
def test_roundtrip(isn, val, offset):
    big_offset = (1 << 31) - 1
    for value in (val, val + 1, val - 1, val + offset, val - offset, val + big_offset, val - big_offset):
        assert unwrap(wrap(value, isn), isn, val) == value


@pytest.mark.parametrize("value", [0, 1, 5, UINT32_MAX, 1 << 32])
def test_roundtrip_small_values(value):
    assert unwrap(wrap(value, 7), 7, value) == value