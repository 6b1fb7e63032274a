"""ASCII-only case folding.

bytes.lower()/bytes.upper() only touch A-Z/a-z, which is exactly the
classic C tolower/toupper behaviour in the "C" locale: bytes >= 128 pass
through unchanged.
"""

_IDENTITY = bytes(range(256))

LOWER_TABLE = _IDENTITY.lower()
UPPER_TABLE = _IDENTITY.upper()


def fold_lower(data) -> bytes:
    """Lower case every ASCII letter in data."""
    return bytes(data).translate(LOWER_TABLE)


def fold_upper(data) -> bytes:
    """Upper case every ASCII letter in data."""
    return bytes(data).translate(UPPER_TABLE)


def equal_ignoring_case(left, right) -> bool:
    return len(left) == len(right) and fold_lower(left) == fold_lower(right)
