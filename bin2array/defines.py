#
# Copyright (c) 2020 Bitdefender
# SPDX-License-Identifier: Apache-2.0
#

suffixes = {
    "header": ".h",
    "source": ".c",
    }

identifier_limits = {
    "MIN_NAME_LENGTH": 1,
    "MAX_NAME_LENGTH": 255,
    }

# how the byte literals are laid out inside the generated arrays
layout_defaults = {
    "literals_per_line": 11,
    "indent": "\t",
    }

snippets = {
    "pragma_once": "#pragma once\n",
    "include_stddef": "#include <stddef.h> /* for size_t */\n",
    "linkage_open": (
        "#ifdef __cplusplus\n"
        "extern \"C\" {\n"
        "#endif\n"
    ),
    "linkage_close": (
        "#ifdef __cplusplus\n"
        "} /* extern \"C\" */\n"
        "#endif\n"
    ),
    "separator": "/* ------------------------------------------------------ */\n",
    }
