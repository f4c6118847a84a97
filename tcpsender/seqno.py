"""32-bit wrapping sequence numbers and their 64-bit absolute counterparts."""

SEQNO_MODULUS = 1 << 32


def wrap(n: int, isn: int) -> int:
    """Convert the absolute sequence number ``n`` to a 32-bit seqno relative to ``isn``."""
    if n < 0:
        raise ValueError(f"absolute sequence number must be non-negative, got {n}")
    return (isn + n) % SEQNO_MODULUS


def unwrap(seqno: int, isn: int, checkpoint: int) -> int:
    """Return the absolute sequence number for ``seqno`` that lies closest to ``checkpoint``."""
    if checkpoint < 0:
        raise ValueError(f"checkpoint must be non-negative, got {checkpoint}")
    offset = (seqno - isn) % SEQNO_MODULUS
    base = checkpoint - checkpoint % SEQNO_MODULUS
    candidates = (
        candidate
        for candidate in (base - SEQNO_MODULUS + offset, base + offset, base + SEQNO_MODULUS + offset)
        if candidate >= 0
    )
    return min(candidates, key=lambda candidate: (abs(candidate - checkpoint), candidate))