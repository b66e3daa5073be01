#
# Copyright (c) 2020 Bitdefender
# SPDX-License-Identifier: Apache-2.0
#
import argparse
import sys

from pathlib import Path

import yaml

from bin2array import __version__, config
from bin2array.emitters import Layout
from bin2array.modes import get_emitter, get_mode_from_str, get_mode_names, is_valid_mode, print_modes
from bin2array.names import is_valid_c_variable_name
from bin2array.reader import read_file
from bin2array.result import ErrorReason, Result

VERBOSE = 0


def print_error(message):
    print("Error: %s" % message, file=sys.stderr)


def get_argparser():
    """Get the argparse parser."""
    parser = argparse.ArgumentParser(
        prog="bin2array",
        description="Convert a binary file into a C/C++ byte array.",
        epilog="Known modes: %s" % ", ".join(get_mode_names()),
    )
    parser.add_argument("-i", "--input", help="The binary file to convert", action="store", default=None)
    parser.add_argument(
        "-o",
        "--output",
        help="Output file name, without extension. '.h' (and '.c') will be appended",
        action="store",
        default=None,
    )
    parser.add_argument("-n", "--name", help="Base name of the generated variables", action="store", default=None)
    parser.add_argument(
        "-m", "--mode", help="Output style. Default: %s" % config.DEFAULTS["mode"], action="store", default=None
    )
    parser.add_argument(
        "-c", "--config", help="YAML file with the default settings", action="store", default=None, type=Path
    )
    parser.add_argument(
        "-V", "--verbose", help="Verbosity level (0, 1 or 2)", action="store", type=int, choices=[0, 1, 2], default=None
    )
    parser.add_argument("-v", "--version", action="version", version="%(prog)s version: " + __version__)

    return parser


def validate_args(args, mode_name):
    """ Checks the command line arguments before touching any file.

    Returns:
        Result: - the selected Mode on success.
    """
    if not args.input:
        return Result.failure(ErrorReason.EMPTY_INPUT_NAME, "input file name is empty")

    if not args.output:
        return Result.failure(ErrorReason.EMPTY_OUTPUT_NAME, "output file name is empty")

    if not is_valid_c_variable_name(args.name):
        return Result.failure(ErrorReason.INVALID_NAME, "invalid var name %s" % args.name)

    mode = get_mode_from_str(mode_name)
    if mode is None:
        return Result.failure(ErrorReason.UNKNOWN_MODE, "undefined mode: %s" % mode_name)

    if not is_valid_mode(mode):
        return Result.failure(ErrorReason.INVALID_MODE, "invalid mode %r" % mode)

    return Result.success(mode)


def load_config(cfg_file):
    """ Loads the config file (or only the defaults, when `cfg_file` is None).

    Returns:
        Result: - no value on success.
    """
    try:
        config.parse(cfg_file)
    except (OSError, ValueError, yaml.YAMLError) as e:
        return Result.failure(ErrorReason.BAD_CONFIG, "bad config %s: %s" % (cfg_file, e))

    return Result.success()


def get_layout():
    return Layout(config.get("literals_per_line"), config.get("indent"), config.get("source_suffix"))


def run(args, mode):
    """ Actually runs the program, after the command line arguments have been validated. """
    read_result = read_file(args.input)
    if not read_result.ok:
        print_error(read_result.error.message)
        return 1

    data = read_result.value
    layout = get_layout()

    if VERBOSE >= 1:
        print("Read %d bytes from %s" % (len(data), args.input))
        print("Writing %s as %s" % (args.name, mode.name))

    if VERBOSE >= 2:
        print("Layout:", layout)

    emit_result = get_emitter(mode)(args.output, args.name, data, layout)
    if not emit_result.ok:
        print_error(emit_result.error.message)
        print("Error during writing output into file", file=sys.stderr)
        return 1

    if VERBOSE >= 1:
        for path in emit_result.value:
            print("Generated", path)

    return 0


def main(argv=None):
    """ Main entrypoint. Parses the command line and runs the program. """
    global VERBOSE

    args = get_argparser().parse_args(argv)

    result = load_config(args.config)
    if not result.ok:
        print_error(result.error.message)
        return 1

    VERBOSE = args.verbose if args.verbose is not None else config.get("verbose")

    mode_name = args.mode if args.mode is not None else config.get("mode")

    result = validate_args(args, mode_name)
    if not result.ok:
        print_error(result.error.message)

        if result.error.reason is ErrorReason.UNKNOWN_MODE:
            print("The list of known modes is:", file=sys.stderr)
            print_modes(sys.stderr)

        return 1

    return run(args, result.value)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
