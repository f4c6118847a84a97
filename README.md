# tcpsender

This package is the sending half of a TCP connection. Your code writes bytes into an outbound stream, and the sender does three things with them:

- It cuts the bytes into segments that fit the receiver's advertised window. Each segment carries at most 1000 payload bytes.
- It keeps track of the segments that are still in flight.
- It resends the oldest unacknowledged segment when the retransmission timer expires. Each time this happens it doubles the timeout.

## Installing

```
pip install .
```

The package has no runtime dependencies. To run the test suite:

```
pip install ".[test]"
pytest
```

## Sequence numbers

Sequence numbers on the wire are 32-bit values that wrap around. The `tcpsender.seqno` module converts between them and absolute sequence numbers, which never wrap:

- `wrap(n, isn)` maps the absolute sequence number `n` to a 32-bit seqno relative to `isn`. A negative `n` raises `ValueError`.
- `unwrap(seqno, isn, checkpoint)` returns the non-negative absolute sequence number for `seqno` that lies closest to `checkpoint`. A negative `checkpoint` raises `ValueError`.

## Segments

`tcpsender.segment.Segment` is a frozen dataclass with these fields:

- `seqno` and `ackno`, which must fit in 32 bits.
- The flags `syn`, `fin`, `ack` and `rst`.
- `win`, which must fit in 16 bits.
- `payload`, a `bytes` value.

A field value that is out of range raises `ValueError`.

`length_in_sequence_space()` counts the payload bytes, plus one for SYN and one for FIN. `summary()` returns a one-line description of the header.

## Using the sender

```python
from tcpsender.sender import TCPSender
from tcpsender.seqno import wrap

sender = TCPSender(fixed_isn=0)

sender.fill_window()                   # emits the SYN
syn = sender.segments_out.popleft()

sender.ack_received(wrap(1, 0), 1000)  # peer acknowledges SYN, opens a window
sender.stream_in.write(b"hello")
sender.stream_in.end_input()
sender.fill_window()                   # emits "hello" plus FIN

print(sender.bytes_in_flight())        # 6: five payload bytes and the FIN
sender.tick(1000)                      # the timer expires; the oldest segment is resent
print(sender.consecutive_retransmissions())
```

### Creating a sender

`TCPSender(capacity=64000, retx_timeout=1000, fixed_isn=None)` creates a sender. If `fixed_isn` is not given, the initial sequence number is random. The module also defines the constants `DEFAULT_CAPACITY`, `TIMEOUT_DFLT`, `MAX_PAYLOAD_SIZE` and `MAX_RETX_ATTEMPTS`.

### Writing data

`stream_in` is an `OutboundStream` with a fixed capacity:

- `write(data)` accepts as many bytes as fit and returns how many it took.
- `end_input()` marks the end of the data.
- `buffer_size()`, `buffer_empty()`, `input_ended()` and `remaining_capacity()` report the stream's state.

After writing, call `fill_window()` to turn the buffered bytes into segments. The first segment a sender produces is always a lone SYN. A FIN is sent once input has ended and the window has room for it.

### Collecting output

`segments_out` is a deque of `Segment` objects waiting to be put on the wire.

### Receiving acknowledgements

Call `ack_received(ackno, window_size)` when an acknowledgement arrives. The window size is always recorded.

An ackno beyond anything sent is otherwise ignored. When the ackno covers new data, the sender does the following:

- It drops the segments that are now fully acknowledged.
- It resets the timeout to its initial value and restarts the timer.
- It clears the retransmission count.

In both of these last two cases it then calls `fill_window()`. Once the FIN is acknowledged, the retransmission timer stops.

### Passing time

`tick(ms)` advances the clock. When the timer has run for at least the current timeout, the sender resends the oldest outstanding segment and restarts the timer. It also doubles the timeout and increments `consecutive_retransmissions()`, but only while the advertised window is non-zero.

If the receiver advertises a zero window, `fill_window()` treats the window as one sequence number wide, so the sender keeps probing.

### Control segments

These calls queue empty segments at the next sequence number:

- `send_empty_segment()`
- `send_empty_ack_segment(ackno)`
- `send_empty_rst_segment()`

### State queries

- `bytes_in_flight()`
- `consecutive_retransmissions()`
- `next_seqno()`, which returns the wrapped value.
- `next_seqno_absolute()`
- `fully_acked()`
- `is_fin()`, which is true once a FIN has been sent.

## What the package does not do

This package is only the sender. It has no receiver or reassembler and no connection state machine. It does not serialize segments into bytes, compute checksums or touch sockets. Putting segments on the wire and reading acknowledgements back is left to the caller. The sender also never gives up on its own: comparing `consecutive_retransmissions()` with `MAX_RETX_ATTEMPTS` is up to the caller.