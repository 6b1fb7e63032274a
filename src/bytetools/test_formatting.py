import pytest

from bytetools.bytestring import ByteString
from bytetools.formatting import FormatError, DEFAULT_STATIC_BUF_SIZE, format_bytes, render_into, vformat


class TestFormat:
    def test_basic_substitution(self):
        assert ByteString.format(b"%s=%d", b"answer", 42) == b"answer=42"
        assert ByteString.format("%05.1f|%x", 3.14159, 255) == b"003.1|ff"

    def test_text_arguments_are_utf8(self):
        assert ByteString.format(b"[%s]", "café") == b"[caf\xc3\xa9]"

    def test_bytestring_arguments(self):
        assert ByteString.format(b"<%s>", ByteString(b"inner")) == b"<inner>"

    def test_keyword_arguments(self):
        assert ByteString.format(b"%(name)s is %(age)d", name="x", age=3) == b"x is 3"

    def test_output_larger_than_static_buffer_is_not_truncated(self):
        result = ByteString.format(b"%5000s", b"x")
        assert len(result) == 5000
        assert result.ends_with(b"x")
        assert result.left(4999) == b" " * 4999

    def test_output_exactly_at_static_buffer_size(self):
        result = ByteString.format(b"%*d", DEFAULT_STATIC_BUF_SIZE, 1)
        assert len(result) == DEFAULT_STATIC_BUF_SIZE

    def test_small_static_buffer(self):
        result = ByteString.format(b"%s-%s", b"abc", b"def", static_buf_size=4)
        assert result == b"abc-def"

    def test_iterator_arguments_are_rendered_twice(self):
        # The second pass needs its own cursor over a one-shot iterator
        values = iter([b"y" * 20, 7])
        assert vformat(b"%s%d", values, static_buf_size=8) == b"y" * 20 + b"7"

    def test_malformed_template_is_fatal(self):
        with pytest.raises(FormatError):
            ByteString.format(b"%d", b"not a number")
        with pytest.raises(FormatError):
            ByteString.format(b"%s %s", b"one")
        with pytest.raises(FormatError):
            ByteString.format(b"%q", 1)
        with pytest.raises(FormatError):
            format_bytes(b"%s", b"a", name=b"b")

    def test_format_error_is_a_value_error(self):
        assert issubclass(FormatError, ValueError)

    def test_render_into_never_grows_destination(self):
        dest = bytearray(4)
        assert render_into(dest, b"%s", (b"abcdefgh",)) == 8
        assert dest == bytearray(b"abcd")
