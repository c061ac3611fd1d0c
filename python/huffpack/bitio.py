import tqdm  # noqa

from huffpack.abc import BitsType, CodeTableType
from huffpack.errors import CorruptContainer
from huffpack.tree import Internal, Leaf, Node


def encode_bits(data: bytes, codes: CodeTableType, progress: bool = False) -> BitsType:
    """Concatenate the code of every byte of `data`, in order."""
    return "".join(
        codes[s] for s in tqdm.tqdm(data, desc="Encoding", disable=not progress)
    )


def pack_bits(bits: BitsType) -> tuple[bytes, int]:
    """Pack a bit string MSB first.

    Returns (packed, padding) where padding is the number of zero filler bits
    in the low end of the last byte.
    """
    if not bits:
        return b"", 0
    padding = -len(bits) % 8
    bits += "0" * padding
    packed = int(bits, 2).to_bytes(len(bits) // 8, "big")
    return packed, padding


def unpack_bits(payload: bytes, padding: int) -> BitsType:
    """Inverse of pack_bits: the significant bits of `payload`."""
    if not 0 <= padding <= 7:
        raise CorruptContainer(f"Invalid padding bit count: {padding}")
    if not payload:
        if padding:
            raise CorruptContainer(f"Padding {padding} given for an empty payload")
        return ""
    bits = format(int.from_bytes(payload, "big"), "b").zfill(len(payload) * 8)
    return bits[: len(bits) - padding]


def decode_walk(
    payload: bytes, padding: int, root: Node, progress: bool = False
) -> bytearray:
    decoded = bytearray()
    bits = unpack_bits(payload, padding)

    if isinstance(root, Leaf):
        if "1" in bits:
            raise CorruptContainer("Bit 1 found in a single-symbol stream")
        decoded.extend(bytes([root.symbol]) * len(bits))
        return decoded

    node: Node = root
    for bit in tqdm.tqdm(bits, desc="Decoding", disable=not progress):
        assert isinstance(node, Internal)
        node = node.left if bit == "0" else node.right
        if isinstance(node, Leaf):
            decoded.append(node.symbol)
            node = root

    if node is not root:
        raise CorruptContainer("Bitstream ended in the middle of a code")
    return decoded
