"""Opaque compress/uncompress service backed by Zstandard.

uncompress() does not need to be told the original length; when it is
told, the result is checked against it.
"""

import zstandard

DEFAULT_LEVEL = 3


class CodecError(ValueError):
    """Compressed input could not be restored."""


def compress(data, level: int = DEFAULT_LEVEL) -> bytes:
    compressor = zstandard.ZstdCompressor(level=level, write_content_size=True)
    return compressor.compress(bytes(data))


def uncompress(data, original_length: int | None = None) -> bytes:
    """Restore data produced by compress().

    Raises:
        CodecError: If data is not a valid frame or does not restore to original_length bytes
    """
    # decompressobj() copes with frames that carry no content size (empty input)
    decompressor = zstandard.ZstdDecompressor().decompressobj()
    try:
        restored = decompressor.decompress(bytes(data))
    except zstandard.ZstdError as err:
        raise CodecError(f"Failed to uncompress {len(data)} bytes: {err}") from err

    if original_length is not None and len(restored) != original_length:
        raise CodecError(f"Uncompressed to {len(restored)} bytes, expected {original_length}")
    return restored
