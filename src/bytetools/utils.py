import argparse
from typing import Any


def is_nonbytes_iter(obj: Any) -> bool:
    """ Decide if the given variable is an iterable that is not itself
        a single piece of text (str, bytes-like or ByteString)
    """
    if isinstance(obj, (str, bytes, bytearray, memoryview)):
        return False
    if hasattr(obj, "__bytes__"):
        return False
    return hasattr(obj, "__iter__")


def as_bytes(value: Any) -> bytes:
    """Convert the byte-like things the package accepts into immutable bytes.

    str is UTF-8 encoded, an int is taken as a single byte value and
    anything providing __bytes__ (ByteString included) is asked for its content.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, int):
        return bytes((as_byte(value),))
    if isinstance(value, (bytearray, memoryview)) or hasattr(value, "__bytes__"):
        return bytes(value)
    raise TypeError(f"Expected a byte string, got {type(value).__name__}")


def as_byte(value: Any) -> int:
    """Return the single byte value held by value (an int or a one byte string)."""
    if isinstance(value, int):
        if not 0 <= value <= 255:
            raise ValueError(f"Byte value {value} is outside 0..255")
        return value
    data = as_bytes(value)
    if len(data) != 1:
        raise ValueError(f"Expected a single byte, got {len(data)} bytes")
    return data[0]


def tobool(value: Any) -> bool:
    """
    Tries to convert a wide variety of values to a boolean
    Raises an exception for unrecognised values
    """
    str_value = str(value).lower()
    if str_value in {"yes", "y", "true", "t", "1", "on"}:
        return True
    if str_value in {"no", "n", "false", "f", "0", "off"}:
        return False

    raise ValueError(f"Don't know how to convert {value} to boolean.")


def add_boolean_argument(
    parser: argparse.ArgumentParser,
    name: str,
    dest: str | None = None,
    default: bool = False,
    help: str | None = None
) -> None:
    """Add a boolean argument to an ArgumentParser instance."""
    dest = dest or name
    group = parser.add_mutually_exclusive_group()
    bool_help = f"{help} Use --no-{name} to turn the feature off."
    group.add_argument(
        f"--{name}",
        metavar="",
        nargs="?",
        dest=dest,
        default=default,
        const=True,
        type=tobool,
        help=bool_help,
    )
    group.add_argument(f"--no-{name}", dest=dest, action="store_false")


def add_flag_argument(
    parser: argparse.ArgumentParser,
    name: str,
    dest: str | None = None,
    default: bool = False,
    help: str | None = None
) -> None:
    """ Add a flag argument to an ArgumentParser instance.
        Either the --flag is present or the --no-flag is present.
        No trying to convert boolean values like the add_boolean_argument
    """
    dest = dest or name
    group = parser.add_mutually_exclusive_group()
    bool_help = f"{help} Use --no-{name} to turn the feature off."
    group.add_argument(
        f"--{name}", dest=dest, default=default, action="store_true", help=bool_help
    )
    group.add_argument(
        f"--no-{name}", dest=dest, action="store_false", default=not default
    )
