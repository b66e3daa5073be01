#
# Copyright (c) 2020 Bitdefender
# SPDX-License-Identifier: Apache-2.0
#
from collections import namedtuple
from enum import Enum, auto

from bin2array import emitters


class Mode(Enum):
    C_HEADER_SINGLE = auto()
    C_HEADER_SOURCE_EXTERN = auto()
    C_HEADER_SOURCE_FUNCS = auto()
    C_HEADER_SOURCE_STRUCT_EXTERN = auto()
    C_HEADER_SOURCE_STRUCT_FUNC = auto()


ModeInfo = namedtuple("ModeInfo", ["mode", "mode_name"])

MODES = (
    ModeInfo(Mode.C_HEADER_SINGLE, "c_header"),
    ModeInfo(Mode.C_HEADER_SOURCE_EXTERN, "c_extern"),
    ModeInfo(Mode.C_HEADER_SOURCE_FUNCS, "c_funcs"),
    ModeInfo(Mode.C_HEADER_SOURCE_STRUCT_EXTERN, "c_struct_extern"),
    ModeInfo(Mode.C_HEADER_SOURCE_STRUCT_FUNC, "c_struct_func"),
)

DEFAULT_MODE_NAME = "c_header"

_emitters = {
    Mode.C_HEADER_SINGLE: emitters.write_c_header_single,
    Mode.C_HEADER_SOURCE_EXTERN: emitters.write_c_header_source_extern,
    Mode.C_HEADER_SOURCE_FUNCS: emitters.write_c_header_source_funcs,
    Mode.C_HEADER_SOURCE_STRUCT_EXTERN: emitters.write_c_header_source_struct_extern,
    Mode.C_HEADER_SOURCE_STRUCT_FUNC: emitters.write_c_header_source_struct_func,
}


def get_mode_from_str(name):
    """ Returns the Mode registered as `name` or None if there is no such mode. """
    for info in MODES:
        if info.mode_name == name:
            return info.mode

    return None


def is_valid_mode(mode):
    return any(info.mode is mode for info in MODES)


def get_mode_names():
    return [info.mode_name for info in MODES]


def print_modes(output):
    for info in MODES:
        output.write("\t%s\n" % info.mode_name)


def get_emitter(mode):
    if not is_valid_mode(mode):
        raise ValueError("Invalid mode: %r" % (mode,))

    return _emitters[mode]
