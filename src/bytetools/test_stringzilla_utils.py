import stringzilla as sz

from bytetools.stringzilla_utils import as_sz, find_sz, rfind_sz, trim_bounds_sz, count_sz


class TestStringZillaUtils:
    def setup_method(self):
        self.text = as_sz(bytearray(b"  abc abc  "))

    def test_as_sz_wraps_bytes_like(self):
        assert isinstance(self.text, sz.Str)
        assert as_sz(self.text) is self.text
        assert len(as_sz(b"")) == 0

    def test_find_and_rfind(self):
        assert find_sz(self.text, b"abc") == 2
        assert find_sz(self.text, b"abc", 3) == 6
        assert find_sz(self.text, b"abc", 7) == -1
        assert rfind_sz(self.text, b"abc", 10) == 6
        assert rfind_sz(self.text, b"abc", 5) == 2
        assert rfind_sz(self.text, b"abc", -1) == -1

    def test_trim_bounds(self):
        assert trim_bounds_sz(self.text) == (2, 9)
        assert trim_bounds_sz(as_sz(b"   ")) is None
        assert trim_bounds_sz(as_sz(b"xyx"), b"x") == (1, 2)
        assert trim_bounds_sz(as_sz(b"keep"), b"") == (0, 4)

    def test_count(self):
        assert count_sz(self.text, b"abc") == 2
        assert count_sz(self.text, b"") == 0
