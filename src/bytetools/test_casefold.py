from bytetools.casefold import LOWER_TABLE, UPPER_TABLE, equal_ignoring_case, fold_lower, fold_upper


def test_tables_only_touch_ascii_letters():
    for byte in range(256):
        if ord("A") <= byte <= ord("Z"):
            assert LOWER_TABLE[byte] == byte + 32
        elif ord("a") <= byte <= ord("z"):
            assert UPPER_TABLE[byte] == byte - 32
        else:
            assert LOWER_TABLE[byte] == byte
            assert UPPER_TABLE[byte] == byte


def test_fold():
    assert fold_lower(bytearray(b"MiXeD 123 \xc4")) == b"mixed 123 \xc4"
    assert fold_upper(b"MiXeD 123 \xe4") == b"MIXED 123 \xe4"


def test_equal_ignoring_case():
    assert equal_ignoring_case(b"HeLLo", b"hello")
    assert not equal_ignoring_case(b"hello", b"hell")
    assert not equal_ignoring_case(b"\xc4", b"\xe4")
