from dataclasses import dataclass

DEFAULT_INITIAL_CAPACITY = 8


@dataclass
class SerialConfiguration:
    """
    Settings shared by :class:`~serialrw.reader.SerialReader` and
    :class:`~serialrw.writer.SerialWriter`.
    """

    initial_capacity: int = DEFAULT_INITIAL_CAPACITY
    """
    The size in bytes of the backing store of a writer created without
    seed data.
    """

    text_errors: str = "strict"
    """
    The codec error handler used when encoding or decoding UTF-8 text.

    Any handler accepted by :meth:`bytes.decode` may be used, for instance
    `"replace"` to substitute invalid sequences instead of raising.
    """

    def __post_init__(self) -> None:
        if self.initial_capacity < 0:
            raise ValueError("initial_capacity must be non-negative")
