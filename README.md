# tcpsend

`tcpsend` is the sender side of a TCP endpoint, with no sockets attached. It does these jobs:

- takes bytes from an outgoing byte stream and cuts them into segments;
- keeps within the receiver's advertised window;
- keeps track of which segments are still in flight;
- runs a retransmission timer with exponential backoff.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Sequence numbers

`tcpsend.seqnum` provides `WrappingInt32`, a 32-bit sequence number that wraps around modulo 2**32. Its `raw_value` is always reduced into that range.

- `seqno + n` and `seqno - n` with an `int` give a new `WrappingInt32`.
- `a - b` with two `WrappingInt32` values gives the signed 32-bit distance between them, as an `int`.
- `int(seqno)` and `str(seqno)` give the raw value.

Two functions convert between absolute stream indices and wrapped sequence numbers:

```python
from tcpsend.seqnum import WrappingInt32, wrap, unwrap

isn = WrappingInt32(15)
seqno = wrap(3 * 2**32 + 17, isn)          # WrappingInt32(raw_value=32)
unwrap(seqno, isn, checkpoint=3 * 2**32)   # 3 * 2**32 + 17
```

`unwrap` returns the non-negative absolute index closest to `checkpoint` that wraps to the given sequence number. On a tie it returns the smaller one.

## Sending

`tcpsend.sender` provides `TCPSender`, together with the `Segment` and `ByteStream` types it works with.

```python
from tcpsend.sender import TCPSender
from tcpsend.seqnum import WrappingInt32

sender = TCPSender(capacity=64000, retx_timeout=1000, fixed_isn=WrappingInt32(0))

sender.fill_window()              # sends the SYN
syn = sender.segments_out().popleft()

sender.ack_received(WrappingInt32(1), 1000)
sender.stream_in().write(b"hello")
sender.stream_in().end_input()
sender.fill_window()              # sends b"hello" with FIN set
```

The defaults for `TCPSender` are these:

- `capacity=64000`, the outgoing stream's capacity (`DEFAULT_CAPACITY`);
- `retx_timeout=1000` ms (`TIMEOUT_DFLT`);
- `fixed_isn=None`. With no fixed ISN, a random 32-bit ISN is chosen.

`segments_out()` returns a `collections.deque` of `Segment` objects that are waiting to be sent. The caller takes segments from it.

### The outgoing stream

`stream_in()` returns the sender's `ByteStream`. It has these methods:

- `write(data)` accepts as many bytes as fit and returns the count. Writing after `end_input()` raises `ValueError`.
- `end_input()` marks the end of the data.
- `read(length)` removes up to `length` bytes from the front and returns them.
- `eof()` is true once input has ended and the buffer is empty.
- `buffer_size()` and `remaining_capacity()` report the buffer's state.

### Segments

A `Segment` is a frozen dataclass with the fields `seqno`, `syn`, `fin` and `payload`. `length_in_sequence_space()` gives the payload length plus one for each of SYN and FIN.

### Filling the window

`fill_window()` sends segments while the window has room. It stops once FIN has been sent.

- The first segment carries SYN.
- Each payload is at most `MAX_PAYLOAD_SIZE` (1000) bytes.
- FIN is set once the stream reaches end of file, if the window still has room for it.
- A window of zero is treated as a window of one.
- Before any acknowledgement arrives, the window is one.

### Acknowledgements

`ack_received(ackno, window_size)` handles an incoming acknowledgement. It always records the advertised window size. If the acknowledgement covers sequence numbers that were sent but not yet acknowledged, it also does the following:

- it drops segments that are now fully acknowledged;
- it resets the retransmission timeout to its initial value;
- it resets `consecutive_retransmissions()` to zero;
- it restarts the timer if segments remain outstanding, and stops it otherwise.

Any other acknowledgement, whether already seen or for data never sent, changes nothing else.

### Retransmission

`tick(ms)` advances the retransmission timer while it is running. When the elapsed time reaches the timeout, the sender does four things:

- it queues the oldest outstanding segment again;
- it increments `consecutive_retransmissions()`;
- it restarts the timer;
- it doubles the timeout, unless the receiver's last advertised window was zero.

### Other methods

- `bytes_in_flight()` counts sequence numbers sent but not yet acknowledged. SYN and FIN each count as one.
- `next_seqno_absolute()` returns the absolute sequence number of the next byte to send.
- `next_seqno()` returns the same value in wrapped form.
- `send_empty_segment()` queues a segment at the next sequence number. The segment has no payload and no flags. It is not tracked for retransmission.

## What this package does not do

This package is only the sending half. It has none of the following:

- a receiver;
- a connection state machine;
- acknowledgement or window fields on outgoing segments;
- encoding of segments into bytes;
- any network I/O.

The caller must deliver the queued segments and feed acknowledgements back in.

## Running the tests

```
pytest
```