import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tcpsender.segment import Segment


def test_empty_segment_occupies_nothing():
    assert Segment().length_in_sequence_space() == 0


def test_flags_count_in_sequence_space():
    payload = b"abcd"
    segment = Segment(syn=True, fin=True, payload=payload)
    assert segment.length_in_sequence_space() == len(payload) + 2


@given(st.binary(max_size=64), st.booleans(), st.booleans(), st.booleans(), st.booleans())
def test_length_invariant(payload, syn, fin, ack, rst):
    segment = Segment(syn=syn, fin=fin, ack=ack, rst=rst, payload=payload)
    assert segment.length_in_sequence_space() == len(payload) + syn + fin


def test_summary_lists_flags_and_fields():
    segment = Segment(syn=True, ack=True, seqno=7, ackno=9, win=3)
    assert segment.summary() == "Header(flags=SA,seqno=7,ack=9,win=3)"


def test_summary_flag_order():
    segment = Segment(syn=True, ack=True, rst=True, fin=True)
    assert "flags=SARF," in segment.summary()


@pytest.mark.parametrize("field", ["seqno", "ackno"])
def test_seqno_fields_must_fit_32_bits(field):
    with pytest.raises(ValueError):
        Segment(**{field: 2**32})


def test_window_must_fit_16_bits():
    with pytest.raises(ValueError):
        Segment(win=-1)


def test_segment_is_immutable():
    segment = Segment(seqno=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        segment.seqno = 2  # type: ignore[misc]
    assert segment.seqno == 1
    assert segment.summary() == Segment(seqno=1).summary()