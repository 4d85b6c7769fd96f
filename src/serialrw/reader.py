import struct
from typing import Optional, Union

from ._formats import (
    float32,
    float64,
    int8,
    int16,
    int32,
    int64,
    uint16,
    uint32,
    uint64,
)
from .configuration import SerialConfiguration
from .exceptions import BufferReadError
from .varint import pull_int_var, pull_uint_var


class SerialReader:
    """
    Decode typed values from a byte buffer, advancing a cursor.

    The buffer is copied on construction, so the caller remains free to
    modify or resize it. Values read with :meth:`rbytes` and
    :meth:`rutf8` are copies and do not share memory with it.
    """

    def __init__(
        self,
        data: Union[bytes, bytearray, memoryview],
        pos: int = 0,
        configuration: Optional[SerialConfiguration] = None,
    ) -> None:
        if configuration is None:
            configuration = SerialConfiguration()
        self._configuration = configuration
        self._data = memoryview(bytes(data))
        self._length = len(self._data)
        if pos < 0 or pos > self._length:
            raise BufferReadError("Seek out of bounds")
        self._pos = pos

    def __len__(self) -> int:
        return self._length

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return self._length - self._pos

    def eof(self) -> bool:
        return self._pos == self._length

    def get_buffer(self) -> bytes:
        """
        Return the whole underlying buffer, regardless of the cursor.
        """
        return bytes(self._data)

    def tell(self) -> int:
        return self._pos

    def _advance(self, width: int) -> int:
        """
        Move the cursor `width` bytes forward and return its previous value.
        """
        if width < 0 or self._length < self._pos + width:
            raise BufferReadError()
        pos = self._pos
        self._pos = pos + width
        return pos

    def _unpack(self, fmt: struct.Struct) -> int:
        (result,) = fmt.unpack_from(self._data, self._advance(fmt.size))
        return result

    # fixed-width integers

    def ri8(self) -> int:
        return self._unpack(int8)

    def ri16(self) -> int:
        return self._unpack(int16)

    def ri32(self) -> int:
        return self._unpack(int32)

    def ri64(self) -> int:
        return self._unpack(int64)

    def ru8(self) -> int:
        return self._data[self._advance(1)]

    def ru16(self) -> int:
        return self._unpack(uint16)

    def ru32(self) -> int:
        return self._unpack(uint32)

    def ru64(self) -> int:
        return self._unpack(uint64)

    # floating point

    def rf32(self) -> float:
        return self._unpack(float32)

    def rf64(self) -> float:
        return self._unpack(float64)

    def rbool(self) -> bool:
        return self.ru8() > 0

    def rchar(self) -> str:
        """
        Read a single byte as a character in the range U+0000 to U+00FF.
        """
        return chr(self.ru8())

    # variable-length integers

    def riv(self) -> int:
        value, self._pos = pull_int_var(self._data, self._pos)
        return value

    def ruv(self) -> int:
        value, self._pos = pull_uint_var(self._data, self._pos)
        return value

    # length-prefixed payloads

    def rbytes(self) -> bytes:
        """
        Read a byte run: an unsigned varint length followed by that many bytes.
        """
        start = self._pos
        length = self.ruv()
        try:
            pos = self._advance(length)
        except BufferReadError:
            self._pos = start
            raise
        return bytes(self._data[pos : pos + length])

    def rutf8(self) -> str:
        return self.rbytes().decode("utf-8", self._configuration.text_errors)
