class HuffmanError(RuntimeError):
    """Base class for failures reported by the codec."""


class SourceUnavailable(HuffmanError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot open input file {path!r}: {reason}")
        self.path = path


class CorruptContainer(HuffmanError):
    pass


class SinkUnavailable(HuffmanError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot write output file {path!r}: {reason}")
        self.path = path
