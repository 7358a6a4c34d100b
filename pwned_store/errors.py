# ==================================================
# pwned_store/errors.py
# ==================================================
class PwnedStoreError(Exception):
    """Base class for every fatal condition raised by pwned_store."""


class MissingInput(PwnedStoreError, FileNotFoundError):
    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"Input file does not exist: {self.path}")


class InvalidFormat(PwnedStoreError, ValueError):
    """A chunk of the text corpus is not a whole number of lines."""
    def __init__(self, offset: int, size: int, line_width: int):
        self.offset = offset
        self.size = size
        super().__init__(
            f"Invalid number of bytes read at offset {offset}: "
            f"{size} is not a multiple of {line_width}")


class CountParseFailure(PwnedStoreError, ValueError):
    def __init__(self, line_no: int, field: bytes):
        self.line_no = line_no
        self.field = field
        super().__init__(f"Line {line_no}: cannot parse occurrence count {field!r}")


class MalformedBinaryFile(PwnedStoreError, ValueError):
    def __init__(self, size: int, stride: int):
        self.size = size
        super().__init__(f"Binary file size {size} is not a multiple of {stride}")
