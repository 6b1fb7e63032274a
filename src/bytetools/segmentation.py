"""Split byte content into segments and join segments back together."""

import enum
from typing import Iterable, List

from bytetools.search import NOT_FOUND, index_of_byte, index_of
from bytetools.stringzilla_utils import as_sz, count_sz
from bytetools.utils import as_bytes, is_nonbytes_iter


class SplitFlag(enum.IntFlag):
    NoSplitFlag = 0x0
    SkipEmpty = 0x1
    KeepSeparators = 0x2


def split_byte(data, delimiter: int, flags: SplitFlag = SplitFlag.NoSplitFlag) -> List[bytes]:
    """Split data at every occurrence of the single byte delimiter.

    With KeepSeparators the delimiter stays at the tail of the segment it ends.
    With SkipEmpty zero length segments, the trailing one included, are dropped.
    """
    segments = []
    last = 0
    add = 1 if flags & SplitFlag.KeepSeparators else 0
    skip_empty = bool(flags & SplitFlag.SkipEmpty)
    while True:
        nxt = index_of_byte(data, delimiter, last)
        if nxt == NOT_FOUND:
            break
        if nxt > last or not skip_empty:
            segments.append(bytes(data[last:nxt + add]))
        last = nxt + 1
    if last < len(data) or not skip_empty:
        segments.append(bytes(data[last:]))
    return segments


def split_bytes(data, delimiter: bytes, flags: SplitFlag = SplitFlag.NoSplitFlag) -> List[bytes]:
    """Split data at every occurrence of a multi-byte delimiter.

    KeepSeparators is ignored for substring delimiters.
    """
    if len(delimiter) == 1:
        return split_byte(data, delimiter[0], flags & ~SplitFlag.KeepSeparators)

    sz_view = as_sz(data)
    skip_empty = bool(flags & SplitFlag.SkipEmpty)
    # Delimiter count bounds the number of segments, so the list is sized once
    segments = [b""] * (count_sz(sz_view, delimiter) + 1)
    seg_idx = 0
    last = 0
    while True:
        nxt = index_of(data, delimiter, last, sz_view=sz_view)
        if nxt == NOT_FOUND:
            break
        if nxt > last or not skip_empty:
            segments[seg_idx] = bytes(data[last:nxt])
            seg_idx += 1
        last = nxt + len(delimiter)
    if last < len(data) or not skip_empty:
        segments[seg_idx] = bytes(data[last:])
        seg_idx += 1
    return segments[:seg_idx]


def split(data, delimiter, flags: SplitFlag = SplitFlag.NoSplitFlag) -> List[bytes]:
    """Dispatch on the delimiter: an int is a single byte, anything else a byte string."""
    if isinstance(delimiter, int):
        return split_byte(data, delimiter, flags)
    delimiter = as_bytes(delimiter)
    if not delimiter:
        # An empty delimiter is never found, leaving the whole input as one segment
        return [bytes(data)] if len(data) or not flags & SplitFlag.SkipEmpty else []
    return split_bytes(data, delimiter, flags)


def join(items: Iterable, separator=b"") -> bytearray:
    """Concatenate items with separator between consecutive items only.

    The total size is computed up front and the result allocated once.
    """
    if not is_nonbytes_iter(items):
        raise TypeError("join() expects an iterable of byte strings")
    parts = [as_bytes(item) for item in items]
    sep = as_bytes(separator)
    if not parts:
        return bytearray()

    total = sum(len(part) for part in parts) + len(sep) * (len(parts) - 1)
    result = bytearray(total)
    view = memoryview(result)
    pos = 0
    for i, part in enumerate(parts):
        view[pos:pos + len(part)] = part
        pos += len(part)
        if sep and i + 1 < len(parts):
            view[pos:pos + len(sep)] = sep
            pos += len(sep)
    view.release()
    return result
