from abc import ABC, abstractmethod
from typing import TypeAlias


# byte value -> occurrence count
FreqTableType: TypeAlias = dict[int, int]
# byte value -> code as a string of '0'/'1'
CodeTableType: TypeAlias = dict[int, str]
BitsType: TypeAlias = str


class Compressor(ABC):
    @abstractmethod
    def encode(self, data: bytes) -> bytes:
        pass

    @abstractmethod
    def decode(self, encoded: bytes) -> bytes:
        pass
