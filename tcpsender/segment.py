"""Outbound TCP segments as seen by the sender."""

from dataclasses import dataclass

from tcpsender.seqno import SEQNO_MODULUS


@dataclass(frozen=True)
class Segment:
    """A TCP segment: header fields that the sender uses plus its payload."""

    seqno: int = 0
    ackno: int = 0
    syn: bool = False
    fin: bool = False
    ack: bool = False
    rst: bool = False
    win: int = 0
    payload: bytes = b""

    def __post_init__(self) -> None:
        for name in ("seqno", "ackno"):
            value = getattr(self, name)
            if not 0 <= value < SEQNO_MODULUS:
                raise ValueError(f"{name} must fit in 32 bits, got {value}")
        if not 0 <= self.win <= 0xFFFF:
            raise ValueError(f"win must fit in 16 bits, got {self.win}")

    def length_in_sequence_space(self) -> int:
        """Sequence numbers this segment occupies; SYN and FIN count one each."""
        return len(self.payload) + int(self.syn) + int(self.fin)

    def summary(self) -> str:
        """A one-line description of the header."""
        flags = "".join(
            letter
            for letter, present in (("S", self.syn), ("A", self.ack), ("R", self.rst), ("F", self.fin))
            if present
        )
        return f"Header(flags={flags},seqno={self.seqno},ack={self.ackno},win={self.win})"