class CodecError(ValueError):
    """Base for encode/decode failures surfaced to callers."""


class ShareCodecError(CodecError):
    """Malformed or out-of-range data for the compact share format."""


class CapacityError(CodecError):
    """Input exceeds a fixed prover capacity (cells or moves)."""
