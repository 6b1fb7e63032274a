"""StringZilla utility functions for SIMD-optimized byte string scans.

ByteString keeps its content in a bytearray.  The helpers here wrap that
content in a stringzilla.Str so substring search and character set scans
run through StringZilla rather than pure Python loops.
"""

from typing import Optional, Tuple
import stringzilla

# Bytes removed by ByteString.trimmed() when no explicit set is given
WHITESPACE = b" \f\n\r\t\v"


def as_sz(data) -> 'stringzilla.Str':
    """Wrap byte content in a stringzilla.Str.

    The Str keeps a reference to an immutable bytes snapshot, so the caller
    is free to mutate its own buffer afterwards.
    """
    if isinstance(data, stringzilla.Str):
        return data
    if not isinstance(data, bytes):
        data = bytes(data)
    return stringzilla.Str(data)


def find_sz(sz_str: 'stringzilla.Str', needle: bytes, start: int = 0) -> int:
    """First occurrence of needle at or after start, -1 if there is none."""
    if start > len(sz_str) - len(needle):
        return -1
    return sz_str.find(needle, max(start, 0))


def rfind_sz(sz_str: 'stringzilla.Str', needle: bytes, last_start: int) -> int:
    """Last occurrence of needle whose first byte is at or before last_start."""
    if last_start < 0:
        return -1
    end = min(len(sz_str), last_start + len(needle))
    return sz_str.rfind(needle, 0, end)


def trim_bounds_sz(sz_str: 'stringzilla.Str', chars: bytes = WHITESPACE) -> Optional[Tuple[int, int]]:
    """Return the [start, end) range left after trimming chars from both ends.

    None means every byte belongs to chars.
    """
    if not chars:
        return 0, len(sz_str)
    start = sz_str.find_first_not_of(chars)
    if start == -1:
        return None
    end = sz_str.find_last_not_of(chars)
    return start, end + 1


def count_sz(sz_str: 'stringzilla.Str', needle: bytes) -> int:
    """Count the non-overlapping occurrences of needle."""
    if not needle:
        return 0
    return sz_str.count(needle)
