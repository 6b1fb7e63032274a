import io
import os
import tempfile

import pytest

import bytetools.apptools
import bytetools.cli
import bytetools.codec


def run(argv, data=b""):
    """Run the bytetools command and return (exit status, stdout bytes)"""
    stdout = io.BytesIO()
    status = bytetools.cli.main(list(argv), stdin=io.BytesIO(data), stdout=stdout)
    return status, stdout.getvalue()


@pytest.fixture(autouse=True)
def no_config_files(monkeypatch):
    """Keep a stray bytetools.conf or BYTETOOLS_* variable out of the tests"""
    monkeypatch.setattr(bytetools.apptools, "DEFAULT_CONFIG_FILES", [])
    for name in list(os.environ):
        if name.startswith("BYTETOOLS_"):
            monkeypatch.delenv(name)


class TestCommands:
    def test_split(self):
        assert run(["split", "--delimiter", ","], b"a,,b\n") == (0, b"a\n\nb\n")
        assert run(["split", "--delimiter", ",", "--skip-empty"], b"a,,b\n") == (0, b"a\nb\n")
        assert run(["split", "--delimiter", ",", "--keep-separators"], b"a,b") == (0, b"a,\nb\n")

    def test_join(self):
        assert run(["join", "--separator", "+"], b"1\n2\n3\n") == (0, b"1+2+3\n")

    def test_trim_and_case(self):
        assert run(["trim"], b"  padded  \n") == (0, b"padded\n")
        assert run(["trim", "--chars", "-"], b"--x--") == (0, b"x\n")
        assert run(["upper", "--no-newline"], b"MiXed\n") == (0, b"MIXED")
        assert run(["lower"], b"MiXed") == (0, b"mixed\n")

    def test_chomp(self):
        assert run(["chomp", "--no-newline"], b"text\r\n") == (0, b"text")

    def test_pad(self):
        assert run(["pad", "--side", "beginning", "--size", "3", "--fill", "0"], b"7\n") == (0, b"007\n")
        assert run(["pad", "--size", "2", "--truncate"], b"abcd") == (0, b"ab\n")

    def test_find(self):
        assert run(["find", "WORLD", "--ignore-case"], b"hello world\n") == (0, b"6\n")
        assert run(["find", "o", "--reverse"], b"hello world\n") == (0, b"7\n")
        assert run(["find", "xyz"], b"hello world\n") == (1, b"-1\n")

    def test_number(self):
        assert run(["number", "6", "--base", "1"]) == (0, b"011\n")
        assert run(["number", "255", "--base", "16"]) == (0, b"0xff\n")
        assert run(["number", "2.71828", "--precision", "3"]) == (0, b"2.718\n")

    def test_number_rejects_bad_base(self):
        assert run(["number", "6", "--base", "3"]) == (1, b"")

    def test_parse(self):
        assert run(["parse"], b"123\n") == (0, b"123 true\n")
        assert run(["parse"], b"123abc\n") == (1, b"123 false\n")
        assert run(["parse", "--base", "16", "--no-signed", "--bits", "32"], b"ffffffff") == (0, b"4294967295 true\n")

    def test_format(self):
        assert run(["format", "%s has %d items", "cart", "3"]) == (0, b"cart has 3 items\n")
        assert run(["format", "%d"]) == (1, b"")

    def test_time(self):
        status, output = run(["time", "0", "--time-format", "date"])
        assert status == 0
        assert len(output) == len(b"1970-01-01\n")

    def test_hex(self):
        assert run(["hex"], b"AB") == (0, b"4142\n")

    def test_compress_round_trip(self):
        payload = b"line of text\n" * 50
        status, compressed = run(["compress"], payload)
        assert status == 0
        assert bytetools.codec.uncompress(compressed) == payload
        assert run(["uncompress"], compressed) == (0, payload)
        assert run(["uncompress", "--original-length", "5"], compressed)[0] == 1

    def test_input_file(self):
        with tempfile.NamedTemporaryFile(suffix=".txt", delete=False) as handle:
            handle.write(b"x;y;z")
            filename = handle.name
        try:
            assert run(["split", "--delimiter", ";", "--input", filename]) == (0, b"x\ny\nz\n")
        finally:
            os.unlink(filename)

    def test_config_file_supplies_defaults(self):
        with tempfile.NamedTemporaryFile("w", suffix=".conf", delete=False) as handle:
            handle.write("delimiter = ;\n")
            config = handle.name
        try:
            assert run(["split", "-c", config], b"p;q") == (0, b"p\nq\n")
            assert run(["split", "-c", config, "--delimiter", "q"], b"p;q") == (0, b"p;\n\n")
        finally:
            os.unlink(config)

    def test_missing_operand(self):
        assert run(["find"], b"abc") == (1, b"")


def test_commands_listed():
    assert "split" in bytetools.cli.commands()
    assert "uncompress" in bytetools.cli.commands()
    assert "" not in bytetools.cli.commands()


def test_unknown_command_exits():
    with pytest.raises(SystemExit):
        run(["frobnicate"])
