import logging
import os

from serialrw import SerialReader, SerialWriter


def roundtrip(kind: str, value):
    """
    Write `value` with the writer method `w<kind>` and read it back with
    the reader method `r<kind>`.
    """
    writer = SerialWriter()
    getattr(writer, "w" + kind)(value)
    data = writer.get_buffer()
    reader = SerialReader(data)
    result = getattr(reader, "r" + kind)()
    assert reader.eof(), "%d trailing bytes" % reader.remaining
    return result, data


if os.environ.get("SERIALRW_DEBUG"):
    logging.basicConfig(level=logging.DEBUG)
