import logging
import operator
import struct
from typing import Optional, Union

from ._formats import (
    float32,
    float64,
    int8,
    int16,
    int32,
    int64,
    uint8,
    uint16,
    uint32,
    uint64,
)
from .configuration import SerialConfiguration
from .exceptions import EncodingRangeError
from .varint import encode_int_var, encode_uint_var

logger = logging.getLogger("serialrw")


def _real(value) -> float:
    if not isinstance(value, (int, float)):
        raise TypeError("Expected a number, got %s" % type(value).__name__)
    return value


class SerialWriter:
    """
    Encode typed values into a growable byte buffer.

    The backing store is over-allocated and grows by doubling. Use
    :meth:`get_buffer` to retrieve the bytes written so far.
    """

    def __init__(
        self,
        data: Optional[Union[bytes, bytearray, memoryview]] = None,
        configuration: Optional[SerialConfiguration] = None,
    ) -> None:
        if configuration is None:
            configuration = SerialConfiguration()
        self._configuration = configuration
        if data is None:
            self._data = memoryview(bytearray(configuration.initial_capacity))
            self._pos = 0
        else:
            self._data = memoryview(bytearray(data))
            self._pos = len(self._data)
        self._capacity = len(self._data)

    def __len__(self) -> int:
        return self._pos

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def data(self) -> bytes:
        return bytes(self._data[0 : self._pos])

    @property
    def pos(self) -> int:
        return self._pos

    def get_buffer(self) -> bytes:
        """
        Return a copy of the bytes written so far.

        Writing may continue afterwards.
        """
        return self.data

    def tell(self) -> int:
        return self._pos

    def ensure_capacity(self, length: int) -> None:
        """
        Grow the backing store so that it holds at least `length` bytes.
        """
        if length <= self._capacity:
            return
        capacity = max(length, self._capacity * 2)
        logger.debug("Growing buffer from %d to %d bytes", self._capacity, capacity)
        data = memoryview(bytearray(capacity))
        data[0 : self._pos] = self._data[0 : self._pos]
        self._data = data
        self._capacity = capacity

    def ensure_extra(self, extra: int) -> None:
        """
        Grow the backing store so that `extra` bytes fit after the cursor.
        """
        self.ensure_capacity(self._pos + extra)

    def _advance(self, width: int) -> int:
        """
        Reserve `width` bytes at the cursor and return its previous value.
        """
        self.ensure_extra(width)
        pos = self._pos
        self._pos = pos + width
        return pos

    def _pack(self, fmt: struct.Struct, value) -> None:
        try:
            packed = fmt.pack(value)
        except (struct.error, OverflowError) as exc:
            raise EncodingRangeError(str(exc))
        self._push(packed)

    def _push(self, value: bytes) -> None:
        pos = self._advance(len(value))
        self._data[pos : self._pos] = value

    # fixed-width integers

    def wi8(self, value: int) -> None:
        self._pack(int8, operator.index(value))

    def wi16(self, value: int) -> None:
        self._pack(int16, operator.index(value))

    def wi32(self, value: int) -> None:
        self._pack(int32, operator.index(value))

    def wi64(self, value: int) -> None:
        self._pack(int64, operator.index(value))

    def wu8(self, value: int) -> None:
        self._pack(uint8, operator.index(value))

    def wu16(self, value: int) -> None:
        self._pack(uint16, operator.index(value))

    def wu32(self, value: int) -> None:
        self._pack(uint32, operator.index(value))

    def wu64(self, value: int) -> None:
        self._pack(uint64, operator.index(value))

    # floating point

    def wf32(self, value: float) -> None:
        self._pack(float32, _real(value))

    def wf64(self, value: float) -> None:
        self._pack(float64, _real(value))

    def wbool(self, value: bool) -> None:
        self.wu8(1 if value else 0)

    def wchar(self, value: str) -> None:
        """
        Write a single character in the range U+0000 to U+00FF as one byte.
        """
        if len(value) != 1:
            raise EncodingRangeError("Expected a single character")
        code = ord(value)
        if code > 0xFF:
            raise EncodingRangeError("Character U+%04X does not fit in a byte" % code)
        self.wu8(code)

    # variable-length integers

    def wiv(self, value: int) -> None:
        self._push(encode_int_var(value))

    def wuv(self, value: int) -> None:
        self._push(encode_uint_var(value))

    # length-prefixed payloads

    def wbytes(self, value: Union[bytes, bytearray, memoryview]) -> None:
        """
        Write a byte run: an unsigned varint length followed by the bytes.
        """
        value = memoryview(value).cast("B")
        length = len(value)
        prefix = encode_uint_var(length)
        self.ensure_extra(len(prefix) + length)
        self._push(prefix)
        self._push(value)

    def wutf8(self, value: str) -> None:
        self.wbytes(value.encode("utf-8", self._configuration.text_errors))
