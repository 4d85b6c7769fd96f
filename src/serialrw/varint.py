"""
Variable-length integer codec.

Unsigned values are written as base-128 digits, most significant digit
first. Every byte except the last one has its high bit set.

Signed values carry their sign in the lowest bit: the magnitude is shifted
one bit to the left and the low bit is set for negative values. This is
*not* the zigzag encoding used by Protocol Buffers.
"""

import operator
from typing import Tuple, Union

from .exceptions import BufferReadError, EncodingRangeError, MalformedVarintError

UINT_VAR_MAX = 0xFFFFFFFF
UINT_VAR_MAX_SIZE = 5

INT_VAR_MIN = -0x80000000
INT_VAR_MAX = 0x7FFFFFFF

# packed form of INT_VAR_MIN, the largest value a signed varint may carry
PACKED_INT_VAR_MAX = 0x100000001

Buffer = Union[bytes, bytearray, memoryview]


def _size(value: int) -> int:
    return max(1, (value.bit_length() + 6) // 7)


def _encode(value: int) -> bytes:
    size = _size(value)
    return bytes(
        ((value >> (7 * i)) & 0x7F) | (0x80 if i else 0)
        for i in range(size - 1, -1, -1)
    )


def pack_int_var(value: int) -> int:
    """
    Fold the sign of `value` into the lowest bit of its magnitude.
    """
    value = operator.index(value)
    if value < INT_VAR_MIN or value > INT_VAR_MAX:
        raise EncodingRangeError(
            "Integer is out of range for a signed variable-length integer"
        )
    return (abs(value) << 1) | (1 if value < 0 else 0)


def unpack_int_var(packed: int) -> int:
    """
    Reverse :func:`pack_int_var`.

    A set sign bit with a zero magnitude decodes to `0`.
    """
    sign = -1 if packed & 1 else 1
    return (packed >> 1) * sign


def encode_uint_var(value: int) -> bytes:
    """
    Encode a variable-length unsigned integer.
    """
    value = operator.index(value)
    if value < 0 or value > UINT_VAR_MAX:
        raise EncodingRangeError("Integer is too big for a variable-length integer")
    return _encode(value)


def encode_int_var(value: int) -> bytes:
    """
    Encode a variable-length signed integer.
    """
    return _encode(pack_int_var(value))


def size_uint_var(value: int) -> int:
    """
    Return the number of bytes required to encode the given value
    as a variable-length unsigned integer.
    """
    value = operator.index(value)
    if value < 0 or value > UINT_VAR_MAX:
        raise EncodingRangeError("Integer is too big for a variable-length integer")
    return _size(value)


def size_int_var(value: int) -> int:
    """
    Return the number of bytes required to encode the given value
    as a variable-length signed integer.
    """
    return _size(pack_int_var(value))


def pull_uint_var(
    data: Buffer, pos: int = 0, maximum: int = UINT_VAR_MAX
) -> Tuple[int, int]:
    """
    Decode a variable-length unsigned integer from `data` at offset `pos`.

    Returns the decoded value and the offset of the first byte after it.
    """
    value = 0
    for size in range(1, UINT_VAR_MAX_SIZE + 1):
        try:
            byte = data[pos]
        except IndexError:
            raise BufferReadError()
        pos += 1
        value = (value << 7) | (byte & 0x7F)
        if not byte & 0x80:
            if value > maximum:
                raise MalformedVarintError(
                    "Variable-length integer exceeds %d" % maximum
                )
            return value, pos
    raise MalformedVarintError(
        "Variable-length integer is longer than %d bytes" % UINT_VAR_MAX_SIZE
    )


def pull_int_var(data: Buffer, pos: int = 0) -> Tuple[int, int]:
    """
    Decode a variable-length signed integer from `data` at offset `pos`.

    Returns the decoded value and the offset of the first byte after it.
    """
    packed, pos = pull_uint_var(data, pos, maximum=PACKED_INT_VAR_MAX)
    value = unpack_int_var(packed)
    if value > INT_VAR_MAX:
        raise MalformedVarintError("Variable-length integer exceeds %d" % INT_VAR_MAX)
    return value, pos


def decode_uint_var(data: Buffer) -> int:
    """
    Decode a buffer holding exactly one variable-length unsigned integer.
    """
    value, pos = pull_uint_var(data)
    if pos != len(data):
        raise MalformedVarintError("Trailing data after variable-length integer")
    return value


def decode_int_var(data: Buffer) -> int:
    """
    Decode a buffer holding exactly one variable-length signed integer.
    """
    value, pos = pull_int_var(data)
    if pos != len(data):
        raise MalformedVarintError("Trailing data after variable-length integer")
    return value
