"""printf-style formatted construction that never truncates.

Rendering is done in two passes.  The first pass writes into a fixed size
scratch buffer (4096 bytes unless told otherwise) and reports how many
bytes the full output needs.  If that does not fit, the destination is
resized to exactly that many bytes and the template rendered again from a
second, untouched cursor over the arguments.
"""

import itertools
from collections.abc import Mapping

from bytetools.utils import as_bytes

DEFAULT_STATIC_BUF_SIZE = 4096


class FormatError(ValueError):
    """The template and its arguments do not form a valid format."""


def _coerce_argument(arg):
    # %s in a bytes template wants bytes; text arguments are sent as UTF-8
    if isinstance(arg, str):
        return arg.encode("utf-8")
    return arg


def _render(template: bytes, args) -> bytes:
    if isinstance(args, Mapping):
        # %(name)s in a bytes template looks the name up as bytes
        values = {_coerce_argument(key): _coerce_argument(value) for key, value in args.items()}
    else:
        values = tuple(_coerce_argument(arg) for arg in args)
    try:
        return template % values
    except (TypeError, ValueError, KeyError) as err:
        raise FormatError(f"Cannot format {template!r}: {err}") from err


def render_into(dest: bytearray, template: bytes, args) -> int:
    """Render into dest without ever growing it.

    Writes at most len(dest) bytes and returns the size the complete output needs.
    """
    rendered = _render(template, args)
    required = len(rendered)
    writable = min(required, len(dest))
    with memoryview(dest) as view:
        view[:writable] = rendered[:writable]
    return required


def vformat(template, args, static_buf_size: int = DEFAULT_STATIC_BUF_SIZE) -> bytearray:
    """Format args (a sequence, iterator or mapping) into a new bytearray."""
    template = as_bytes(template)
    if isinstance(args, Mapping):
        retry_args = args
    else:
        args, retry_args = itertools.tee(args)

    scratch = bytearray(static_buf_size)
    required = render_into(scratch, template, args)
    if required < static_buf_size:
        del scratch[required:]
        return scratch

    result = bytearray(required)
    render_into(result, template, retry_args)
    return result


def format_bytes(template, *args, static_buf_size: int = DEFAULT_STATIC_BUF_SIZE, **kwargs) -> bytearray:
    """Format template with either positional or keyword arguments."""
    if args and kwargs:
        raise FormatError("Use either positional or keyword arguments, not both")
    return vformat(template, kwargs if kwargs else args, static_buf_size)
