"""The sending half of a TCP endpoint: segmentation, windowing and retransmission."""

from __future__ import annotations

import secrets
from collections import deque
from dataclasses import dataclass

from .seqnum import WrappingInt32, unwrap, wrap

MAX_PAYLOAD_SIZE = 1000
DEFAULT_CAPACITY = 64000
TIMEOUT_DFLT = 1000


@dataclass(frozen=True)
class Segment:
    """A TCP segment as seen by the sender."""

    seqno: WrappingInt32
    syn: bool = False
    fin: bool = False
    payload: bytes = b""

    def length_in_sequence_space(self) -> int:
        """Payload length plus one for each of SYN and FIN."""
        return len(self.payload) + int(self.syn) + int(self.fin)


class ByteStream:
    """A bounded in-memory byte stream with a writer side and a reader side."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._buffer = bytearray()
        self._input_ended = False

    def write(self, data: bytes) -> int:
        """Append as much of ``data`` as fits; return the number of bytes accepted."""
        if self._input_ended:
            raise ValueError("write after end of input")
        accepted = bytes(data[: self.remaining_capacity()])
        self._buffer.extend(accepted)
        return len(accepted)

    def end_input(self) -> None:
        self._input_ended = True

    def read(self, length: int) -> bytes:
        """Remove and return up to ``length`` bytes from the front of the stream."""
        chunk = bytes(self._buffer[:length])
        del self._buffer[:length]
        return chunk

    def eof(self) -> bool:
        return self._input_ended and not self._buffer

    def buffer_size(self) -> int:
        return len(self._buffer)

    def remaining_capacity(self) -> int:
        return self.capacity - len(self._buffer)


class TCPSender:
    """Splits an outgoing byte stream into segments and retransmits unacknowledged ones."""

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        retx_timeout: int = TIMEOUT_DFLT,
        fixed_isn: WrappingInt32 | None = None,
    ) -> None:
        self._isn = fixed_isn if fixed_isn is not None else WrappingInt32(secrets.randbits(32))
        self._initial_retransmission_timeout = retx_timeout
        self._retransmission_timeout = retx_timeout
        self._stream = ByteStream(capacity)
        self._segments_out: deque[Segment] = deque()
        self._outstanding: deque[Segment] = deque()
        self._syn_sent = False
        self._fin_sent = False
        self._window_size = 1
        self._ackno = 0
        self._next_seqno = 0
        self._consecutive_retransmissions = 0
        self._timer_running = False
        self._elapsed_ms = 0

    def stream_in(self) -> ByteStream:
        return self._stream

    def segments_out(self) -> deque[Segment]:
        """Queue of segments waiting to be sent."""
        return self._segments_out

    def bytes_in_flight(self) -> int:
        """Sequence numbers sent but not yet acknowledged (SYN and FIN count as one each)."""
        return self._next_seqno - self._ackno

    def fill_window(self) -> None:
        """Send as many segments as the receiver's window allows."""
        window = self._window_size if self._window_size > 0 else 1
        while not self._fin_sent and window > self.bytes_in_flight():
            syn = not self._syn_sent
            self._syn_sent = True
            room = window - self.bytes_in_flight()
            payload = self._stream.read(min(room - int(syn), MAX_PAYLOAD_SIZE))
            fin = self._stream.eof() and int(syn) + len(payload) + 1 <= room
            if fin:
                self._fin_sent = True
            segment = Segment(wrap(self._next_seqno, self._isn), syn=syn, fin=fin, payload=payload)
            if segment.length_in_sequence_space() == 0:
                break
            self._next_seqno += segment.length_in_sequence_space()
            self._outstanding.append(segment)
            self._segments_out.append(segment)
            if not self._timer_running:
                self._timer_running = True
                self._elapsed_ms = 0

    def ack_received(self, ackno: WrappingInt32, window_size: int) -> None:
        """Process an acknowledgment and window advertisement from the receiver."""
        abs_ackno = unwrap(ackno, self._isn, self._ackno)
        self._window_size = window_size
        if not self._ackno < abs_ackno <= self._next_seqno:
            return
        self._ackno = abs_ackno
        self._retransmission_timeout = self._initial_retransmission_timeout
        self._consecutive_retransmissions = 0
        while self._outstanding:
            head = self._outstanding[0]
            start = unwrap(head.seqno, self._isn, self._ackno)
            if start + head.length_in_sequence_space() > self._ackno:
                break
            self._outstanding.popleft()
        self._timer_running = bool(self._outstanding)
        self._elapsed_ms = 0

    def tick(self, ms_since_last_tick: int) -> None:
        """Advance the retransmission timer, resending the oldest segment on expiry."""
        if not self._timer_running:
            return
        self._elapsed_ms += ms_since_last_tick
        if self._elapsed_ms >= self._retransmission_timeout:
            self._elapsed_ms = 0
            self._segments_out.append(self._outstanding[0])
            self._consecutive_retransmissions += 1
            if self._window_size != 0:
                self._retransmission_timeout *= 2

    def consecutive_retransmissions(self) -> int:
        return self._consecutive_retransmissions

    def send_empty_segment(self) -> None:
        """Queue a segment that occupies no sequence space."""
        self._segments_out.append(Segment(wrap(self._next_seqno, self._isn)))

    def next_seqno_absolute(self) -> int:
        return self._next_seqno

    def next_seqno(self) -> WrappingInt32:
        return wrap(self._next_seqno, self._isn)