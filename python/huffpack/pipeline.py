import os
import time
from dataclasses import dataclass

from huffpack.container import Huffman
from huffpack.errors import SinkUnavailable, SourceUnavailable


@dataclass
class Report:
    operation: str
    original_size: int
    compressed_size: int
    elapsed: float

    @property
    def empty(self) -> bool:
        return self.original_size == 0

    @property
    def ratio(self) -> float:
        if self.original_size == 0:
            return 0.0
        return self.compressed_size / self.original_size


def read_source(path: str | os.PathLike) -> bytes:
    # The codec makes two passes over its input, so it is buffered whole.
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise SourceUnavailable(os.fspath(path), e.strerror or str(e)) from e


def write_sink(path: str | os.PathLike, data: bytes) -> None:
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise SinkUnavailable(os.fspath(path), e.strerror or str(e)) from e


def compress(
    input_path: str | os.PathLike, output_path: str | os.PathLike, progress: bool = False
) -> Report:
    start = time.perf_counter()
    data = read_source(input_path)
    encoded = Huffman(progress=progress).encode(data)
    write_sink(output_path, encoded)
    elapsed = time.perf_counter() - start
    return Report("compress", len(data), len(encoded), elapsed)


def decompress(
    input_path: str | os.PathLike, output_path: str | os.PathLike, progress: bool = False
) -> Report:
    start = time.perf_counter()
    encoded = read_source(input_path)
    # Raises CorruptContainer before the output file is created
    decoded = Huffman(progress=progress).decode(encoded)
    write_sink(output_path, decoded)
    elapsed = time.perf_counter() - start
    return Report("decompress", len(decoded), len(encoded), elapsed)
