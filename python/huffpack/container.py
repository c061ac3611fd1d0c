"""Container format for Huffman-compressed data.

Layout, integers are unsigned 32-bit little-endian:

    [N]
    N x ([symbol: 1 byte][frequency])
    [payload: packed bitstream, MSB first]
    [padding bit count, 0..7]

N == 0 stands for an empty original and has no payload or padding field.
"""
import struct

from huffpack.abc import Compressor, FreqTableType
from huffpack.bitio import decode_walk, encode_bits, pack_bits
from huffpack.codes import generate_codes
from huffpack.errors import CorruptContainer, HuffmanError
from huffpack.freq import count_frequencies
from huffpack.tree import build_tree

U32 = struct.Struct("<I")
ENTRY = struct.Struct("<BI")
MAX_U32 = 2**32 - 1


def write_header(freq: FreqTableType) -> bytes:
    out = bytearray(U32.pack(len(freq)))
    for s, f in sorted(freq.items()):
        if f > MAX_U32:
            raise HuffmanError(f"Frequency of byte {s} too large for the format: {f}")
        out += ENTRY.pack(s, f)
    return bytes(out)


def read_header(blob: bytes) -> tuple[FreqTableType, int]:
    """Parse the header at the start of `blob`.

    Returns the frequency table and the offset just past the header.
    """
    if len(blob) < U32.size:
        raise CorruptContainer(f"Container too short for a header: {len(blob)} bytes")
    (n,) = U32.unpack_from(blob, 0)
    if n > 256:
        raise CorruptContainer(f"Header claims {n} distinct symbols")

    end = U32.size + n * ENTRY.size
    if len(blob) < end:
        raise CorruptContainer(
            f"Header claims {n} symbols but only {len(blob)} bytes are available"
        )

    freq: FreqTableType = {}
    for s, f in ENTRY.iter_unpack(blob[U32.size:end]):
        if s in freq:
            raise CorruptContainer(f"Symbol {s} appears twice in the header")
        if f == 0:
            raise CorruptContainer(f"Symbol {s} has zero frequency")
        freq[s] = f
    return freq, end


class Huffman(Compressor):
    def __init__(self, progress: bool = False) -> None:
        self.progress = progress

    def encode(self, data: bytes) -> bytes:
        assert isinstance(data, (bytes, bytearray))
        freq = count_frequencies(data)
        if not freq:
            return write_header(freq)

        root = build_tree(freq)
        codes = generate_codes(root)
        header = write_header(freq)

        bits = encode_bits(data, codes, progress=self.progress)
        payload, padding = pack_bits(bits)
        return header + payload + U32.pack(padding)

    def decode(self, encoded: bytes) -> bytes:
        if len(encoded) == 0:
            return b""

        freq, offset = read_header(encoded)
        if not freq:
            if offset != len(encoded):
                raise CorruptContainer("Trailing bytes after an empty header")
            return b""

        root = build_tree(freq)
        assert root is not None

        trailer = len(encoded) - U32.size
        if trailer < offset:
            raise CorruptContainer("Container has no padding trailer")
        (padding,) = U32.unpack_from(encoded, trailer)
        payload = encoded[offset:trailer]

        decoded = decode_walk(payload, padding, root, progress=self.progress)

        expected = sum(freq.values())
        if len(decoded) != expected:
            raise CorruptContainer(
                f"Decoded {len(decoded)} bytes, header says {expected}"
            )
        return bytes(decoded)
