"""Sender side of TCP: wrapping sequence numbers, segmentation, windowing and retransmission."""

__version__ = "0.1.0"
__all__ = ["seqnum", "sender"]