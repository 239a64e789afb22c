"""
Decoder Exceptions

Input-driven failures derive from DecodeError (a ValueError), so callers can
log and skip a bad payload with a single except clause. RangeError is kept
apart: it signals a broken field table, not bad input.
"""


class DecodeError(ValueError):
    """Payload cannot be decoded into a message record"""


class LengthError(DecodeError):
    """Payload bit length is outside the message type's envelope"""

    def __init__(self, length: int, min_bits: int, max_bits: int):
        self.length = length
        self.min_bits = min_bits
        self.max_bits = max_bits
        super().__init__(
            f"Payload has {length} bits, expected {min_bits}-{max_bits}"
        )


class ArmorError(DecodeError):
    """Payload contains a character outside the six-bit armoring alphabet"""


class UnsupportedMessageError(DecodeError):
    """No parser is registered for the message type"""

    def __init__(self, message_type: int):
        self.message_type = message_type
        super().__init__(f"Unsupported message type: {message_type}")


class RangeError(IndexError):
    """Bit range violates 0 <= start < end <= length"""
