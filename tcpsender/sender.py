"""The sending half of a TCP implementation."""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass

from tcpsender.segment import Segment
from tcpsender.seqno import unwrap, wrap

DEFAULT_CAPACITY = 64000
TIMEOUT_DFLT = 1000
MAX_PAYLOAD_SIZE = 1000
MAX_RETX_ATTEMPTS = 8


class OutboundStream:
    """A bounded byte stream written by the application and read by the sender."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._buffer = bytearray()
        self._input_ended = False

    def write(self, data: bytes) -> int:
        """Append as much of ``data`` as fits and return how many bytes were accepted."""
        accepted = bytes(data[: self.remaining_capacity()])
        self._buffer += accepted
        return len(accepted)

    def read(self, size: int) -> bytes:
        """Remove and return up to ``size`` bytes from the front of the stream."""
        chunk = bytes(self._buffer[:size])
        del self._buffer[:size]
        return chunk

    def end_input(self) -> None:
        """Signal that no more bytes will be written."""
        self._input_ended = True

    def buffer_size(self) -> int:
        return len(self._buffer)

    def buffer_empty(self) -> bool:
        return not self._buffer

    def input_ended(self) -> bool:
        return self._input_ended

    def remaining_capacity(self) -> int:
        return self.capacity - len(self._buffer)


@dataclass
class _InFlight:
    segment: Segment
    seqno: int

    @property
    def end(self) -> int:
        return self.seqno + self.segment.length_in_sequence_space()


class TCPSender:
    """Splits an outbound stream into segments, tracks them and retransmits on timeout."""

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        retx_timeout: int = TIMEOUT_DFLT,
        fixed_isn: int | None = None,
    ) -> None:
        self.isn = wrap(0, random.getrandbits(32) if fixed_isn is None else fixed_isn)
        self.stream_in = OutboundStream(capacity)
        self.segments_out: deque[Segment] = deque()
        self._initial_rto = retx_timeout
        self._rto = retx_timeout
        self._next_seqno = 0
        self._ackno = 0
        self._window_size = 1
        self._outstanding: list[_InFlight] = []
        self._bytes_in_flight = 0
        self._consecutive_retransmissions = 0
        self._ticks = 0
        self._timer_running = False
        self._timer_start = 0
        self._syn_sent = False
        self._fin_sent = False

    def fill_window(self) -> None:
        """Send as many new segments as the receiver's window allows."""
        # A zero window is probed as if it were one byte wide.
        window = self._window_size or 1
        remaining = max(window - self._bytes_in_flight, 0)

        while remaining > 0:
            syn = not self._syn_sent
            if syn:
                remaining -= 1
                self._syn_sent = True
                self._timer_running = True
                self._timer_start = self._ticks

            payload = b""
            if not syn and not self.stream_in.buffer_empty():
                payload = self.stream_in.read(min(remaining, MAX_PAYLOAD_SIZE))
                remaining -= len(payload)

            fin = False
            if self.stream_in.input_ended() and not self._fin_sent and remaining > 0:
                fin = True
                self._fin_sent = True
                remaining -= 1

            segment = Segment(seqno=wrap(self._next_seqno, self.isn), syn=syn, fin=fin, payload=payload)
            length = segment.length_in_sequence_space()
            if length == 0:
                break

            self._outstanding.append(_InFlight(segment, self._next_seqno))
            self._next_seqno += length
            self._bytes_in_flight += length
            self.segments_out.append(segment)

    def ack_received(self, ackno: int, window_size: int) -> None:
        """Process an acknowledgment and window advertisement from the receiver."""
        self._window_size = window_size
        absolute_ack = unwrap(ackno, self.isn, self._ackno)
        if absolute_ack > self._next_seqno:
            return

        if absolute_ack > self._ackno:
            self._rto = self._initial_rto
            self._timer_start = self._ticks
            self._consecutive_retransmissions = 0
            still_outstanding = []
            for flight in self._outstanding:
                if absolute_ack >= flight.end:
                    self._bytes_in_flight -= flight.segment.length_in_sequence_space()
                    if flight.segment.fin:
                        self._timer_running = False
                else:
                    still_outstanding.append(flight)
            self._outstanding = still_outstanding

        self._ackno = absolute_ack
        self.fill_window()

    def tick(self, ms_since_last_tick: int) -> None:
        """Advance time and retransmit the oldest outstanding segment if the timer expired."""
        self._ticks += ms_since_last_tick
        elapsed = self._ticks - self._timer_start
        if not (self._timer_running and elapsed > 0 and elapsed >= self._rto):
            return

        if self._outstanding:
            self.segments_out.append(self._outstanding[0].segment)
            if self._window_size != 0:
                self._consecutive_retransmissions += 1
                self._rto *= 2
        self._timer_start = self._ticks

    def send_empty_segment(self) -> None:
        """Queue a segment that occupies no sequence space."""
        self.segments_out.append(Segment(seqno=self.next_seqno()))

    def send_empty_ack_segment(self, ackno: int) -> None:
        """Queue an empty segment carrying an acknowledgment."""
        self.segments_out.append(Segment(seqno=self.next_seqno(), ack=True, ackno=ackno))

    def send_empty_rst_segment(self) -> None:
        """Queue an empty segment with the RST flag set."""
        self.segments_out.append(Segment(seqno=self.next_seqno(), rst=True))

    def bytes_in_flight(self) -> int:
        """Sequence numbers sent but not yet acknowledged."""
        return self._bytes_in_flight

    def consecutive_retransmissions(self) -> int:
        return self._consecutive_retransmissions

    def next_seqno_absolute(self) -> int:
        return self._next_seqno

    def next_seqno(self) -> int:
        return wrap(self._next_seqno, self.isn)

    def fully_acked(self) -> bool:
        return self._next_seqno == self._ackno

    def is_fin(self) -> bool:
        return self._fin_sent