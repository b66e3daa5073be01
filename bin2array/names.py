#
# Copyright (c) 2020 Bitdefender
# SPDX-License-Identifier: Apache-2.0
#
import re

from bin2array.defines import identifier_limits

_NAME_CHARS = re.compile(r"[A-Za-z0-9_]+")


def is_valid_c_variable_name(name):
    """ Checks if `name` can be used as the base name of the generated C symbols.

    The rules are a conservative subset of what C and C++ accept:
        - the length is between 1 and 255 characters;
        - the first character is not a digit;
        - only ascii letters, digits and underscores are allowed.

    Non-ascii characters are never accepted and C/C++ keywords are NOT checked, so `int` is
    considered a valid name.
    """
    if name is None:
        return False

    if not identifier_limits["MIN_NAME_LENGTH"] <= len(name) <= identifier_limits["MAX_NAME_LENGTH"]:
        return False

    if name[0] in "0123456789":
        return False

    return _NAME_CHARS.fullmatch(name) is not None
