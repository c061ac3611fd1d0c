import random

import pytest  # noqa

from huffpack.abc import Compressor
from huffpack.container import Huffman


_comp_algos = [
    Huffman,
]
_data = [
    b"",
    b"hello, huffman! hello, huffman! hello, huffman!",
    b"a",
    b"a" * 1000,
    b"ab",
    b"abcde" * 500,
    bytes(range(256)),
    bytes(range(256)) * 3 + b"\x00" * 100,
    bytes(random.Random(0).getrandbits(8) for _ in range(10 * 1024)),
]


@pytest.mark.parametrize("algorithm_class", _comp_algos)
@pytest.mark.parametrize("data", _data)
def test_main(algorithm_class: type[Compressor], data: bytes):
    assert type(data) is bytes
    encoded: bytes = algorithm_class().encode(data)
    assert type(encoded) is bytes

    decoded: bytes = algorithm_class().decode(encoded)
    assert type(decoded) is bytes
    assert data == decoded


def test_progress_bar_does_not_change_output():
    data = b"abracadabra" * 50
    assert Huffman(progress=True).encode(data) == Huffman().encode(data)
    assert Huffman(progress=True).decode(Huffman().encode(data)) == data
