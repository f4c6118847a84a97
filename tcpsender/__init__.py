"""The sending half of a TCP connection: segments, the sender, and wrapping sequence numbers."""

__version__ = "0.1.0"
__all__ = ["seqno", "segment", "sender"]