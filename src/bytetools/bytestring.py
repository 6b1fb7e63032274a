"""ByteString: a mutable byte string value type for text processing.

Content lives in a bytearray.  Search, split, trim and numeric conversion
work on raw bytes with ASCII-only case rules; nothing here is Unicode aware.
Mutators (append, insert, remove, chomp, ...) change the value in place,
while shape transforms (trimmed, padded, to_lower, mid, ...) return new
values.
"""

import enum
import hashlib
from typing import Iterable, List, Optional

import bytetools.codec
import bytetools.formatting
import bytetools.numeric
import bytetools.search
import bytetools.segmentation
import bytetools.timeformat
from bytetools.casefold import LOWER_TABLE, equal_ignoring_case, fold_lower, fold_upper
from bytetools.numeric import ParseResult
from bytetools.search import NOT_FOUND, CaseSensitivity, CaseSensitive, CaseInsensitive
from bytetools.segmentation import SplitFlag
from bytetools.stringzilla_utils import WHITESPACE, as_sz, trim_bounds_sz
from bytetools.timeformat import TimeFormat
from bytetools.utils import as_byte, as_bytes


class Pad(enum.Enum):
    Beginning = 0
    End = 1


def _needle(value):
    """Search needles are either an int byte or immutable bytes."""
    if isinstance(value, int):
        return as_byte(value)
    return as_bytes(value)


class ByteString:
    """A mutable sequence of bytes.

    Equal content hashes equal, so a ByteString can key a dict; do not mutate
    it while it is being used as one.
    """

    __slots__ = ("_buffer", "_reserved")

    def __init__(self, data=None, length: Optional[int] = None):
        self._buffer = bytearray()
        self._reserved = 0
        if data is not None:
            self.assign(data, length)

    @classmethod
    def from_range(cls, data, begin: int, end: int) -> "ByteString":
        """Construct from the bytes of data in [begin, end)."""
        if not 0 <= begin <= end <= len(data):
            raise IndexError(f"Range [{begin}, {end}) is outside 0..{len(data)}")
        return cls(bytes(data[begin:end]))

    @classmethod
    def filled(cls, count: int, fill=b" ") -> "ByteString":
        """Construct count copies of the single byte fill."""
        result = cls()
        result._buffer = bytearray((as_byte(fill),)) * count
        return result

    # Buffer core

    def assign(self, data, length: Optional[int] = None) -> None:
        """Replace the content with data, or its first length bytes."""
        if data is None:
            self.clear()
            return
        content = as_bytes(data)
        if length is not None:
            if length > len(content):
                raise IndexError(f"Length {length} exceeds the {len(content)} available bytes")
            content = content[:length]
        self._buffer[:] = content

    def clear(self) -> None:
        del self._buffer[:]

    def append(self, data) -> None:
        self._buffer += as_bytes(data)

    def prepend(self, data) -> None:
        self._buffer[0:0] = as_bytes(data)

    def insert(self, pos: int, data) -> None:
        if not 0 <= pos <= len(self._buffer):
            raise IndexError(f"Insert position {pos} is outside 0..{len(self._buffer)}")
        self._buffer[pos:pos] = as_bytes(data)

    def remove(self, idx: int, count: int) -> None:
        """Erase up to count bytes starting at idx."""
        if not 0 <= idx <= len(self._buffer):
            raise IndexError(f"Remove position {idx} is outside 0..{len(self._buffer)}")
        del self._buffer[idx:idx + count]

    def resize(self, size: int, fill=0) -> None:
        """Truncate or grow to exactly size bytes; new bytes are fill (zero by default)."""
        if size < 0:
            raise ValueError(f"Cannot resize to {size} bytes")
        current = len(self._buffer)
        if size < current:
            del self._buffer[size:]
        elif size > current:
            self._buffer += bytes((as_byte(fill),)) * (size - current)

    def truncate(self, size: int) -> None:
        if len(self._buffer) > size:
            del self._buffer[size:]

    def chop(self, count: int) -> None:
        """Remove count bytes from the end."""
        if not 0 <= count <= len(self._buffer):
            raise IndexError(f"Cannot chop {count} of {len(self._buffer)} bytes")
        del self._buffer[len(self._buffer) - count:]

    def reserve(self, size: int) -> None:
        """Capacity hint; never changes the length."""
        self._reserved = max(self._reserved, size)

    def capacity(self) -> int:
        return max(self._reserved, len(self._buffer))

    def data(self) -> memoryview:
        """Writable view of the content.

        The view blocks resizing while it is alive; release it (or use it as a
        context manager) before the next mutation that changes the length.
        """
        return memoryview(self._buffer)

    def const_data(self) -> bytes:
        return bytes(self._buffer)

    def c_str(self) -> bytes:
        """Content followed by the zero terminator C consumers expect."""
        return bytes(self._buffer) + b"\0"

    def decode(self, encoding: str = "utf-8", errors: str = "strict") -> str:
        return self._buffer.decode(encoding, errors)

    def at(self, i: int) -> int:
        if not 0 <= i < len(self._buffer):
            raise IndexError(f"Index {i} is outside 0..{len(self._buffer)}")
        return self._buffer[i]

    def first(self) -> int:
        return self.at(0)

    def last(self) -> int:
        return self.at(len(self._buffer) - 1)

    def is_empty(self) -> bool:
        return not self._buffer

    def size(self) -> int:
        return len(self._buffer)

    length = size

    def __len__(self) -> int:
        return len(self._buffer)

    def __bool__(self) -> bool:
        return bool(self._buffer)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return ByteString(bytes(self._buffer[key]))
        return self._buffer[key]

    def __setitem__(self, key: int, value) -> None:
        if isinstance(key, slice):
            raise TypeError("ByteString only supports assigning single bytes; use replace()")
        self._buffer[key] = as_byte(value)

    def __iter__(self):
        return iter(self._buffer)

    def __bytes__(self) -> bytes:
        return bytes(self._buffer)

    def __repr__(self) -> str:
        return f"ByteString({bytes(self._buffer)!r})"

    def copy(self) -> "ByteString":
        return ByteString(bytes(self._buffer))

    def __copy__(self) -> "ByteString":
        return self.copy()

    def __deepcopy__(self, memo) -> "ByteString":
        return self.copy()

    def take(self) -> "ByteString":
        """Move the content into a new value, leaving this one empty."""
        moved = ByteString()
        moved._buffer, self._buffer = self._buffer, bytearray()
        moved._reserved, self._reserved = self._reserved, 0
        return moved

    # Search

    def index_of(self, needle, start: int = 0, cs: CaseSensitivity = CaseSensitive) -> int:
        return bytetools.search.index_of(self._buffer, _needle(needle), start, cs)

    def last_index_of(self, needle, start: int = NOT_FOUND, cs: CaseSensitivity = CaseSensitive) -> int:
        return bytetools.search.last_index_of(self._buffer, _needle(needle), start, cs)

    def contains(self, needle, cs: CaseSensitivity = CaseSensitive) -> bool:
        return self.index_of(needle, 0, cs) != NOT_FOUND

    def __contains__(self, needle) -> bool:
        return self.contains(needle)

    def chomp(self, chars) -> int:
        """Strip trailing bytes found in chars and return how many were removed."""
        keep = bytetools.search.chomp_boundary(self._buffer, as_bytes(chars))
        removed = len(self._buffer) - keep
        if removed:
            del self._buffer[keep:]
        return removed

    def starts_with(self, prefix, cs: CaseSensitivity = CaseSensitive) -> bool:
        prefix = as_bytes(prefix)
        if len(prefix) > len(self._buffer):
            return False
        head = bytes(self._buffer[:len(prefix)])
        if cs is CaseInsensitive:
            return equal_ignoring_case(head, prefix)
        return head == prefix

    def ends_with(self, suffix, cs: CaseSensitivity = CaseSensitive) -> bool:
        suffix = as_bytes(suffix)
        if len(suffix) > len(self._buffer):
            return False
        tail = bytes(self._buffer[len(self._buffer) - len(suffix):])
        if cs is CaseInsensitive:
            return equal_ignoring_case(tail, suffix)
        return tail == suffix

    def replace(self, old, new) -> int:
        """Replace every occurrence of old with new, left to right; return the count."""
        old, new = as_bytes(old), as_bytes(new)
        if not old:
            return 0
        count = 0
        idx = 0
        while True:
            idx = bytetools.search.index_of(self._buffer, old, idx)
            if idx == NOT_FOUND:
                break
            self._buffer[idx:idx + len(old)] = new
            idx += len(new)
            count += 1
        return count

    def replace_range(self, index: int, length: int, with_) -> None:
        if not 0 <= index <= len(self._buffer):
            raise IndexError(f"Replace position {index} is outside 0..{len(self._buffer)}")
        self._buffer[index:index + length] = as_bytes(with_)

    def replace_byte(self, old, new) -> int:
        """Replace every byte equal to old with new in place; return the count."""
        old, new = as_byte(old), as_byte(new)
        count = 0
        for i in range(len(self._buffer) - 1, -1, -1):
            if self._buffer[i] == old:
                self._buffer[i] = new
                count += 1
        return count

    # Segmentation

    def split(self, delimiter, flags: SplitFlag = SplitFlag.NoSplitFlag) -> List["ByteString"]:
        """Split at every occurrence of delimiter (a byte or a byte string)."""
        if not isinstance(delimiter, int):
            delimiter = as_bytes(delimiter)
        return [ByteString(segment)
                for segment in bytetools.segmentation.split(self._buffer, delimiter, flags)]

    @staticmethod
    def join(items: Iterable, separator=b"") -> "ByteString":
        result = ByteString()
        result._buffer = bytetools.segmentation.join(items, separator)
        return result

    # Shape transforms

    def trimmed(self, chars=WHITESPACE) -> "ByteString":
        bounds = trim_bounds_sz(as_sz(self._buffer), as_bytes(chars))
        if bounds is None:
            return ByteString()
        start, end = bounds
        return self.mid(start, end - start)

    def padded(self, pad: Pad, size: int, fill=b" ", truncate: bool = False) -> "ByteString":
        """Pad with fill at the given side up to size bytes.

        Longer content is returned unchanged unless truncate is set, in which
        case padding at the Beginning keeps the rightmost size bytes and
        padding at the End keeps the leftmost.
        """
        current = len(self._buffer)
        if current == size:
            return self.copy()
        if current > size:
            if not truncate:
                return self.copy()
            return self.right(size) if pad is Pad.Beginning else self.left(size)

        filler = bytes((as_byte(fill),)) * (size - current)
        result = self.copy()
        if pad is Pad.Beginning:
            result.prepend(filler)
        else:
            result.append(filler)
        return result

    def to_lower(self) -> "ByteString":
        return ByteString(fold_lower(self._buffer))

    def to_upper(self) -> "ByteString":
        return ByteString(fold_upper(self._buffer))

    def left(self, count: int) -> "ByteString":
        return ByteString(bytes(self._buffer[:max(count, 0)]))

    def right(self, count: int) -> "ByteString":
        count = min(max(count, 0), len(self._buffer))
        return ByteString(bytes(self._buffer[len(self._buffer) - count:]))

    def mid(self, start: int, length: Optional[int] = None) -> "ByteString":
        """Bytes [start, start + length), or from start to the end when length is None."""
        if not 0 <= start <= len(self._buffer):
            raise IndexError(f"mid() start {start} is outside 0..{len(self._buffer)}")
        if length is None:
            return ByteString(bytes(self._buffer[start:]))
        return ByteString(bytes(self._buffer[start:start + max(length, 0)]))

    # Numeric conversion

    def to_long_long(self, base: int = 10) -> ParseResult:
        return bytetools.numeric.to_long_long(self._buffer, base)

    def to_ulong_long(self, base: int = 10) -> ParseResult:
        return bytetools.numeric.to_ulong_long(self._buffer, base)

    def to_long(self, base: int = 10) -> ParseResult:
        return bytetools.numeric.to_long(self._buffer, base)

    def to_ulong(self, base: int = 10) -> ParseResult:
        return bytetools.numeric.to_ulong(self._buffer, base)

    @staticmethod
    def number(value, base: int = 10, precision: int = 2) -> "ByteString":
        return ByteString(bytetools.numeric.number(value, base, precision))

    def to_hex(self) -> "ByteString":
        return ByteString(bytetools.numeric.to_hex(self._buffer))

    # Formatted construction and delegates

    @classmethod
    def format(cls, template, *args,
               static_buf_size: int = bytetools.formatting.DEFAULT_STATIC_BUF_SIZE,
               **kwargs) -> "ByteString":
        result = cls()
        result._buffer = bytetools.formatting.format_bytes(
            template, *args, static_buf_size=static_buf_size, **kwargs)
        return result

    @staticmethod
    def format_time(epoch_seconds: int, fmt: TimeFormat = TimeFormat.DateTime) -> "ByteString":
        return ByteString(bytetools.timeformat.format_time(epoch_seconds, fmt))

    def compress(self) -> "ByteString":
        return ByteString(bytetools.codec.compress(self._buffer))

    def uncompress(self, original_length: Optional[int] = None) -> "ByteString":
        return ByteString(bytetools.codec.uncompress(self._buffer, original_length))

    @classmethod
    def from_compressed(cls, data, original_length: Optional[int] = None) -> "ByteString":
        return cls(bytetools.codec.uncompress(as_bytes(data), original_length))

    # Comparison, hashing and concatenation

    def compare(self, other, cs: CaseSensitivity = CaseSensitive) -> int:
        """Negative, zero or positive as self sorts before, equal to or after other."""
        mine, theirs = bytes(self._buffer), as_bytes(other)
        if cs is CaseInsensitive:
            mine, theirs = mine.translate(LOWER_TABLE), theirs.translate(LOWER_TABLE)
        return (mine > theirs) - (mine < theirs)

    def _other_content(self, other):
        if isinstance(other, ByteString):
            return other._buffer
        if isinstance(other, (bytes, bytearray, memoryview, str)):
            return as_bytes(other)
        return None

    def __eq__(self, other):
        if other is None:
            return False
        content = self._other_content(other)
        if content is None:
            return NotImplemented
        return self._buffer == content

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __lt__(self, other):
        content = self._other_content(other)
        return NotImplemented if content is None else self._buffer < content

    def __le__(self, other):
        content = self._other_content(other)
        return NotImplemented if content is None else self._buffer <= content

    def __gt__(self, other):
        content = self._other_content(other)
        return NotImplemented if content is None else self._buffer > content

    def __ge__(self, other):
        content = self._other_content(other)
        return NotImplemented if content is None else self._buffer >= content

    def __hash__(self) -> int:
        return hash(bytes(self._buffer))

    def content_hash(self) -> str:
        """16 hex digit SHA-256 prefix of the content, stable across processes."""
        return hashlib.sha256(self._buffer).hexdigest()[:16]

    def __add__(self, other) -> "ByteString":
        result = self.copy()
        result.append(other)
        return result

    def __radd__(self, other) -> "ByteString":
        result = ByteString(other)
        result.append(self)
        return result

    def __iadd__(self, other) -> "ByteString":
        self.append(other)
        return self
