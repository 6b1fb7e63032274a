"""The bytetools command: ByteString operations over stdin or a file.

e.g.,  printf 'a,,b' | bytetools split --delimiter , --skip-empty
       bytetools number 6 --base 1
"""

import sys

import bytetools.apptools
import bytetools.utils
from bytetools.bytestring import ByteString, Pad
from bytetools.search import CaseSensitive, CaseInsensitive, NOT_FOUND
from bytetools.segmentation import SplitFlag
from bytetools.timeformat import TimeFormat


def _operand(args, name):
    if not args.operands:
        raise ValueError(f"{args.command} needs a {name} operand")
    return args.operands[0]


def _parse_int_operand(text, name):
    value, ok = ByteString(text).to_long_long(0)
    if not ok:
        value, ok = ByteString(text).to_ulong_long(0)
    if not ok:
        raise ValueError(f"{name} '{text}' is not an integer")
    return value


class Command:
    """Base for the subcommands.  Derived classes implement __call__."""

    reads_input = True
    # Text commands ignore the newline that normally ends piped input
    chomp_input = True

    def __call__(self, args, data, out):
        raise NotImplementedError

    @staticmethod
    def emit(args, out, value):
        out.write(bytes(value))
        if args.newline:
            out.write(b"\n")


class SplitCommand(Command):
    def __call__(self, args, data, out):
        flags = SplitFlag.NoSplitFlag
        if args.skip_empty:
            flags |= SplitFlag.SkipEmpty
        if args.keep_separators:
            flags |= SplitFlag.KeepSeparators
        delimiter = bytetools.utils.as_bytes(args.delimiter)
        if len(delimiter) == 1:
            # A single byte delimiter is the only kind that honours --keep-separators
            delimiter = delimiter[0]
        segments = data.split(delimiter, flags)
        if args.verbose >= 1:
            print(f"Split into {len(segments)} segments", file=sys.stderr)
        for segment in segments:
            out.write(bytes(segment) + b"\n")
        return 0


class JoinCommand(Command):
    def __call__(self, args, data, out):
        lines = data.split(b"\n")
        self.emit(args, out, ByteString.join(lines, args.separator))
        return 0


class TrimCommand(Command):
    def __call__(self, args, data, out):
        if args.chars is None:
            self.emit(args, out, data.trimmed())
        else:
            self.emit(args, out, data.trimmed(args.chars))
        return 0


class ChompCommand(Command):
    chomp_input = False

    def __call__(self, args, data, out):
        removed = data.chomp(args.chars if args.chars is not None else b"\r\n")
        if args.verbose >= 1:
            print(f"Chomped {removed} bytes", file=sys.stderr)
        self.emit(args, out, data)
        return 0


class PadCommand(Command):
    def __call__(self, args, data, out):
        side = Pad.Beginning if args.side == "beginning" else Pad.End
        self.emit(args, out, data.padded(side, args.size, args.fill, args.truncate))
        return 0


class LowerCommand(Command):
    def __call__(self, args, data, out):
        self.emit(args, out, data.to_lower())
        return 0


class UpperCommand(Command):
    def __call__(self, args, data, out):
        self.emit(args, out, data.to_upper())
        return 0


class FindCommand(Command):
    def __call__(self, args, data, out):
        needle = _operand(args, "needle")
        cs = CaseInsensitive if args.ignore_case else CaseSensitive
        if args.reverse:
            start = NOT_FOUND if args.start is None else args.start
            pos = data.last_index_of(needle, start, cs)
        else:
            pos = data.index_of(needle, args.start or 0, cs)
        self.emit(args, out, ByteString.number(pos))
        return 0 if pos != NOT_FOUND else 1


class NumberCommand(Command):
    reads_input = False

    def __call__(self, args, data, out):
        text = _operand(args, "value")
        if args.precision is not None or "." in text:
            precision = 2 if args.precision is None else args.precision
            self.emit(args, out, ByteString.number(float(text), precision=precision))
        else:
            self.emit(args, out, ByteString.number(_parse_int_operand(text, "value"), args.base))
        return 0


class ParseCommand(Command):
    def __call__(self, args, data, out):
        signed_parsers = {32: data.to_long, 64: data.to_long_long}
        unsigned_parsers = {32: data.to_ulong, 64: data.to_ulong_long}
        parser = (signed_parsers if args.signed else unsigned_parsers)[args.bits]
        value, ok = parser(args.base)
        if args.verbose >= 1 and not ok:
            print(f"Could not parse {bytes(data)!r} in base {args.base}", file=sys.stderr)
        self.emit(args, out, ByteString.format(b"%d %s", value, "true" if ok else "false"))
        return 0 if ok else 1


class FormatCommand(Command):
    reads_input = False

    def __call__(self, args, data, out):
        template = _operand(args, "template")
        values = []
        for operand in args.operands[1:]:
            value, ok = ByteString(operand).to_long_long(0)
            values.append(value if ok and operand else operand)
        self.emit(args, out, ByteString.format(template, *values))
        return 0


class TimeCommand(Command):
    reads_input = False

    def __call__(self, args, data, out):
        epoch = _parse_int_operand(_operand(args, "epoch"), "epoch")
        fmt = {
            "datetime": TimeFormat.DateTime,
            "date": TimeFormat.Date,
            "time": TimeFormat.Time,
        }[args.time_format]
        self.emit(args, out, ByteString.format_time(epoch, fmt))
        return 0


class HexCommand(Command):
    def __call__(self, args, data, out):
        self.emit(args, out, data.to_hex())
        return 0


class CompressCommand(Command):
    chomp_input = False

    def __call__(self, args, data, out):
        compressed = data.compress()
        if args.verbose >= 1:
            print(f"Compressed {len(data)} bytes to {len(compressed)}", file=sys.stderr)
        out.write(bytes(compressed))
        return 0


class UncompressCommand(Command):
    chomp_input = False

    def __call__(self, args, data, out):
        out.write(bytes(data.uncompress(args.original_length)))
        return 0


def commands():
    return sorted(name[:-7].lower() for name in dict(globals()) if name.endswith("Command") and name != "Command")


def add_arguments(cap):
    """Add the command line arguments the bytetools subcommands use"""
    cap.add("command", choices=commands(), help="Operation to run")
    cap.add("operands", nargs="*", help="Needle, value, epoch or template depending on the command")
    cap.add("--input", help="Read the input from this file instead of stdin")
    cap.add("--delimiter", default=",", help="split: delimiter byte or byte string")
    bytetools.utils.add_flag_argument(
        parser=cap,
        name="skip-empty",
        dest="skip_empty",
        default=False,
        help="split: drop zero length segments.",
    )
    bytetools.utils.add_flag_argument(
        parser=cap,
        name="keep-separators",
        dest="keep_separators",
        default=False,
        help="split: keep a single byte delimiter at the end of each segment.",
    )
    cap.add("--separator", default=",", help="join: inserted between consecutive lines")
    cap.add("--chars", default=None, help="trim/chomp: bytes to remove (default whitespace / newlines)")
    cap.add("--side", choices=["beginning", "end"], default="end", help="pad: side that receives the fill")
    cap.add("--size", type=int, default=0, help="pad: target size in bytes")
    cap.add("--fill", default=" ", help="pad: single fill byte")
    bytetools.utils.add_flag_argument(
        parser=cap,
        name="truncate",
        default=False,
        help="pad: cut longer input down to --size.",
    )
    cap.add("--from", dest="start", type=int, default=None, help="find: position to start searching from")
    bytetools.utils.add_flag_argument(
        parser=cap,
        name="reverse",
        default=False,
        help="find: search backwards for the last occurrence.",
    )
    bytetools.utils.add_flag_argument(
        parser=cap,
        name="ignore-case",
        dest="ignore_case",
        default=False,
        help="find: compare with ASCII case folding.",
    )
    cap.add("--base", type=int, default=10, help="number/parse: numeric base")
    cap.add("--precision", type=int, default=None, help="number: decimals for floating point values")
    bytetools.utils.add_flag_argument(
        parser=cap,
        name="signed",
        default=True,
        help="parse: parse as a signed integer.",
    )
    cap.add("--bits", type=int, choices=[32, 64], default=64, help="parse: integer width")
    cap.add(
        "--time-format",
        dest="time_format",
        choices=["datetime", "date", "time"],
        default="datetime",
        help="time: output layout",
    )
    cap.add("--original-length", dest="original_length", type=int, default=None,
            help="uncompress: expected size of the restored data")
    bytetools.utils.add_boolean_argument(
        parser=cap,
        name="newline",
        default=True,
        help="Terminate single value output with a newline.",
    )


def read_input(args, stdin):
    if args.input:
        with open(args.input, "rb") as infile:
            return ByteString(infile.read())
    return ByteString(stdin.read())


def main(argv=None, stdin=None, stdout=None):
    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout.buffer

    cap = bytetools.apptools.create_parser("Byte string operations over stdin or a file", argv=argv)
    add_arguments(cap)
    args = bytetools.apptools.parseargs(cap, argv)

    command = globals()[args.command.title() + "Command"]()
    try:
        data = ByteString()
        if command.reads_input:
            data = read_input(args, stdin)
            if command.chomp_input:
                data.chomp(b"\n")
        if args.verbose >= 2:
            print(f"Running {args.command} on {len(data)} bytes", file=sys.stderr)
        return command(args, data, stdout)
    except (ValueError, IndexError, OSError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
