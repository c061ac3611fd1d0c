from collections import Counter
from typing import BinaryIO

from huffpack.abc import FreqTableType

CHUNK_SIZE = 1 << 16


def count_frequencies(source: bytes | bytearray | memoryview | BinaryIO) -> FreqTableType:
    """Count occurrences of each byte value in `source`.

    `source` is either a bytes-like object or a readable binary stream. A
    stream is consumed to EOF; callers that need the bytes again must seek
    back or reopen it.
    """
    counter: Counter[int] = Counter()
    if isinstance(source, (bytes, bytearray, memoryview)):
        counter.update(bytes(source))
    else:
        while chunk := source.read(CHUNK_SIZE):
            counter.update(chunk)
    return dict(counter)
