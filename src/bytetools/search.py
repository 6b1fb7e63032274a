"""Forward and backward byte/substring search with optional ASCII case folding.

All functions work on bytes or bytearray content and report positions as
ints, NOT_FOUND (-1) when there is no match.  Multi-byte case-sensitive searches run through StringZilla; the
callers that search the same content repeatedly (split, replace) pass a
prepared stringzilla.Str as sz_view so the snapshot is taken only once.
"""

import enum
from typing import Optional

import stringzilla
from bytetools.casefold import LOWER_TABLE, fold_lower
from bytetools.stringzilla_utils import as_sz, find_sz, rfind_sz

NOT_FOUND = -1


class CaseSensitivity(enum.Enum):
    CaseSensitive = 0
    CaseInsensitive = 1


CaseSensitive = CaseSensitivity.CaseSensitive
CaseInsensitive = CaseSensitivity.CaseInsensitive


def _last_position(size: int, start: int) -> int:
    """Clamp a backward search start; NOT_FOUND (or anything past the end) means the last byte."""
    if start < 0 or start >= size:
        return size - 1
    return start


def index_of_byte(data, byte: int, start: int = 0, cs: CaseSensitivity = CaseSensitive) -> int:
    """Position of the first occurrence of byte at or after start."""
    size = len(data)
    start = max(start, 0)
    if start >= size:
        return NOT_FOUND
    if cs is CaseSensitive:
        return data.find(byte, start)

    target = LOWER_TABLE[byte]
    for i in range(start, size):
        if LOWER_TABLE[data[i]] == target:
            return i
    return NOT_FOUND


def last_index_of_byte(data, byte: int, start: int = NOT_FOUND, cs: CaseSensitivity = CaseSensitive) -> int:
    """Position of the last occurrence of byte at or before start."""
    pos = _last_position(len(data), start)
    if pos < 0:
        return NOT_FOUND
    if cs is CaseSensitive:
        return data.rfind(byte, 0, pos + 1)

    target = LOWER_TABLE[byte]
    while pos >= 0:
        if LOWER_TABLE[data[pos]] == target:
            return pos
        pos -= 1
    return NOT_FOUND


def _index_of_ignoring_case(data, needle: bytes, start: int) -> int:
    # Streaming matcher: on a mismatch the counter drops back to zero and the
    # scan moves on without re-testing the current byte.
    lowered = fold_lower(needle)
    needle_size = len(lowered)
    matched = 0
    for i in range(start, len(data)):
        if lowered[matched] != LOWER_TABLE[data[i]]:
            matched = 0
        else:
            matched += 1
            if matched == needle_size:
                return i - matched + 1
    return NOT_FOUND


def _last_index_of_ignoring_case(data, needle: bytes, start: int) -> int:
    # Same matcher run backwards, consuming the needle from its last byte.
    lowered = fold_lower(needle)
    needle_size = len(lowered)
    size = len(data)
    if start < 0 or start >= size:
        pos = size - 1
    else:
        pos = min(start + needle_size - 1, size - 1)
    matched = 0
    while pos >= 0:
        if lowered[needle_size - matched - 1] != LOWER_TABLE[data[pos]]:
            matched = 0
        else:
            matched += 1
            if matched == needle_size:
                return pos
        pos -= 1
    return NOT_FOUND


def index_of(data, needle, start: int = 0, cs: CaseSensitivity = CaseSensitive,
             sz_view: Optional['stringzilla.Str'] = None) -> int:
    """Position of the first occurrence of needle (an int byte or bytes) at or after start.

    An empty needle is never found.
    """
    if isinstance(needle, int):
        return index_of_byte(data, needle, start, cs)
    if not needle:
        return NOT_FOUND
    if len(needle) == 1:
        return index_of_byte(data, needle[0], start, cs)
    if cs is CaseSensitive:
        return find_sz(sz_view if sz_view is not None else as_sz(data), bytes(needle), start)
    return _index_of_ignoring_case(data, needle, max(start, 0))


def last_index_of(data, needle, start: int = NOT_FOUND, cs: CaseSensitivity = CaseSensitive,
                  sz_view: Optional['stringzilla.Str'] = None) -> int:
    """Position of the last occurrence of needle beginning at or before start.

    start of NOT_FOUND searches from the end.  An empty needle is never found.
    """
    if isinstance(needle, int):
        return last_index_of_byte(data, needle, start, cs)
    if not needle:
        return NOT_FOUND
    if len(needle) == 1:
        return last_index_of_byte(data, needle[0], start, cs)
    if cs is CaseSensitive:
        last_start = len(data) - 1 if start < 0 else start
        return rfind_sz(sz_view if sz_view is not None else as_sz(data), bytes(needle), last_start)
    return _last_index_of_ignoring_case(data, needle, start)


def contains(data, needle, cs: CaseSensitivity = CaseSensitive) -> bool:
    return index_of(data, needle, 0, cs) != NOT_FOUND


def chomp_boundary(data, chars: bytes) -> int:
    """Return the length data keeps once trailing bytes from chars are chomped.

    Scans from the end inward and stops at the first byte not in chars.
    The first byte is never chomped.
    """
    idx = len(data)
    while idx > 1 and data[idx - 1] in chars:
        idx -= 1
    return idx
