#
# Copyright (c) 2020 Bitdefender
# SPDX-License-Identifier: Apache-2.0
#
import io

from bin2array.defines import layout_defaults


def write_bytes(stream, data, per_line=layout_defaults["literals_per_line"], indent=layout_defaults["indent"]):
    """ Writes `data` into `stream` as a list of C hex literals.

    Each byte is written as `0x%02x` and the literals are separated by ', '. A new line (followed by
    `indent`) is started before the first literal and then before every `per_line` literals, so
    with the default layout the line breaks come before the literals 0, 11, 22 and so on.

    Nothing is written after the last literal, the caller closes the array.
    """
    if type(per_line) is not int or per_line <= 0:
        raise ValueError("Invalid literals per line: %r" % (per_line,))

    need_comma = False

    for i, byte in enumerate(data):
        if need_comma:
            stream.write(", ")
        else:
            need_comma = True

        if i % per_line == 0:
            stream.write("\n" + indent)

        # data may come as a sequence of signed ints
        stream.write("0x%02x" % (byte & 0xFF))


def format_bytes(data, per_line=layout_defaults["literals_per_line"], indent=layout_defaults["indent"]):
    """ Same as write_bytes, but returns the text instead of writing it. """
    out = io.StringIO()
    write_bytes(out, data, per_line, indent)
    return out.getvalue()
