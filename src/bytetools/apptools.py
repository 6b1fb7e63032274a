import os
import sys

import configargparse

import bytetools

DEFAULT_CONFIG_FILES = [
    os.path.join("~", ".config", "bytetools", "bytetools.conf"),
    "bytetools.conf",
]


def create_parser(description, argv=None, default_config_files=None):
    """Create the ConfigArgParse parser every bytetools command starts from.

    Settings may come from the command line, from BYTETOOLS_* environment
    variables or from the config files (later files override earlier ones).
    """
    if default_config_files is None:
        default_config_files = DEFAULT_CONFIG_FILES
    cap = configargparse.ArgumentParser(
        description=description,
        formatter_class=configargparse.ArgumentDefaultsHelpFormatter,
        default_config_files=default_config_files,
        args_for_setting_config_path=["-c", "--config"],
        ignore_unknown_config_file_keys=True,
        auto_env_var_prefix="BYTETOOLS_",
    )
    add_common_arguments(cap)
    return cap


def add_common_arguments(cap):
    """Insert common arguments into the configargparse object"""
    cap.add(
        "--version",
        action="version",
        version=f"%(prog)s {bytetools.__version__}",
    )
    cap.add(
        "-v",
        "--verbose",
        help="Output verbosity. Add more v's to make it more verbose",
        action="count",
        default=0,
    )
    cap.add(
        "-q",
        "--quiet",
        help="Decrement verbosity. Useful in apps where the default verbosity > 0.",
        action="count",
        default=0,
    )


def parseargs(cap, argv):
    """Parse argv and fold --quiet into the verbose level"""
    args = cap.parse_args(args=argv)
    args.verbose -= args.quiet
    if args.verbose >= 3:
        print(cap.format_values(), file=sys.stderr)
    if args.verbose >= 2:
        print(f"Parsed arguments: {vars(args)}", file=sys.stderr)
    return args
