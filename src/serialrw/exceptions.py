class SerialError(ValueError):
    """
    Base class for serialization errors.
    """


class BufferReadError(SerialError):
    """
    A read would consume bytes past the end of the buffer.
    """

    def __init__(self, message: str = "Read out of bounds") -> None:
        super().__init__(message)


class MalformedVarintError(SerialError):
    """
    A variable-length integer does not terminate within its maximum size,
    or decodes to a value outside the supported range.
    """

    def __init__(self, message: str = "Malformed variable-length integer") -> None:
        super().__init__(message)


class EncodingRangeError(SerialError):
    """
    A value cannot be represented by the requested encoding.
    """
