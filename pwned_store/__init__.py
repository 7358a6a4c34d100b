from .converter import convert, convert_file
from .digest    import password_digest, parse_digest
from .errors    import (PwnedStoreError, MissingInput, InvalidFormat,
                        CountParseFailure, MalformedBinaryFile)
from .search    import find_digest, find_record, lookup
from .store     import PwnedHashFile
from .verify    import verify_sorted

__all__ = ["convert", "convert_file", "password_digest", "parse_digest",
           "PwnedStoreError", "MissingInput", "InvalidFormat",
           "CountParseFailure", "MalformedBinaryFile",
           "find_digest", "find_record", "lookup",
           "PwnedHashFile", "verify_sorted"]
