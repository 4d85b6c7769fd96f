from .configuration import SerialConfiguration  # noqa
from .exceptions import (  # noqa
    BufferReadError,
    EncodingRangeError,
    MalformedVarintError,
    SerialError,
)
from .reader import SerialReader  # noqa
from .writer import SerialWriter  # noqa

__version__ = "1.0.0"
