__version__ = "1.0.0"

from bytetools.bytestring import ByteString, Pad
from bytetools.codec import CodecError
from bytetools.formatting import FormatError
from bytetools.numeric import ParseResult
from bytetools.search import NOT_FOUND, CaseSensitivity, CaseSensitive, CaseInsensitive
from bytetools.segmentation import SplitFlag
from bytetools.timeformat import TimeFormat

__all__ = [
    "ByteString",
    "Pad",
    "CodecError",
    "FormatError",
    "ParseResult",
    "NOT_FOUND",
    "CaseSensitivity",
    "CaseSensitive",
    "CaseInsensitive",
    "SplitFlag",
    "TimeFormat",
]
