import sys
from typing import NoReturn

import fire  # noqa

from huffpack.container import Huffman
from huffpack.errors import HuffmanError
from huffpack.pipeline import Report
from huffpack import pipeline


def _fail(e: HuffmanError) -> NoReturn:
    print(f"Error: {e}", file=sys.stderr)
    sys.exit(1)


def _print_compress(report: Report) -> None:
    print(f"Compression time: {report.elapsed:.6f} seconds")
    if report.empty:
        print("Compression ratio: 0 (empty input)")
        return
    print(f"Compression ratio: {report.ratio:.6f}")


def _print_decompress(report: Report) -> None:
    print(f"Decompression time: {report.elapsed:.6f} seconds")
    if report.empty:
        print("Decompression completed (empty input).")


def compress(in_file: str, out_file: str, progress: bool = False) -> None:
    try:
        report = pipeline.compress(in_file, out_file, progress=progress)
    except HuffmanError as e:
        _fail(e)
    _print_compress(report)


def decompress(in_file: str, out_file: str, progress: bool = False) -> None:
    try:
        report = pipeline.decompress(in_file, out_file, progress=progress)
    except HuffmanError as e:
        _fail(e)
    _print_decompress(report)


def check(in_file: str, progress: bool = False) -> None:
    try:
        data = pipeline.read_source(in_file)
    except HuffmanError as e:
        _fail(e)

    comp = Huffman(progress=progress)
    encoded = comp.encode(data)
    decoded = comp.decode(encoded)

    if data == decoded:
        print("Data successfully encoded and decoded!")
        print("Alphabet size:", len(set(data)))
        print("Data length: ", len(data), "symbols")
        print(f"Encoded length: {len(encoded)} bytes")
        if len(data) > 0:
            print(f"Compression rate: {len(data) / len(encoded):.2f}x")
    else:
        print("Error: decoded data does not match original!")
        print(f"Original data: {len(data)} {data[:20]!r}...")
        print(f"Decoded data:  {len(decoded)} {decoded[:20]!r}...")
        raise RuntimeError("Decoded data does not match original!")


def menu() -> None:
    choice = input("1. Compress\n2. Decompress\nEnter choice: ").strip()
    if choice == "1":
        in_file = input("Enter input file name: ")
        out_file = input("Enter compressed file name: ")
        compress(in_file, out_file)
    elif choice == "2":
        in_file = input("Enter compressed file name: ")
        out_file = input("Enter decompressed file name: ")
        decompress(in_file, out_file)
    else:
        print("Invalid choice.", file=sys.stderr)


def main() -> None:
    fire.Fire(
        {
            "compress": compress,
            "decompress": decompress,
            "check": check,
            "menu": menu,
        }
    )


if __name__ == "__main__":
    main()
