#
# Copyright (c) 2020 Bitdefender
# SPDX-License-Identifier: Apache-2.0
#
import os
import re

import yaml

from bin2array.defines import layout_defaults, suffixes
from bin2array.modes import DEFAULT_MODE_NAME


CONFIG = None

DEFAULTS = {
    "mode": DEFAULT_MODE_NAME,
    "literals_per_line": layout_defaults["literals_per_line"],
    "indent": layout_defaults["indent"],
    "source_suffix": suffixes["source"],
    "verbose": 0,
}


def _check_value(key, value):
    """ Raises ValueError if `value` is not acceptable for the config entry `key`. """
    if key in ("mode", "indent", "source_suffix"):
        if type(value) is not str:
            raise ValueError("{} must be a string, not {}".format(key, type(value).__name__))

    if key == "source_suffix" and (len(value) < 2 or not value.startswith(".")):
        raise ValueError("source_suffix must look like '.c', got {!r}".format(value))

    if key == "source_suffix" and value.lower() == suffixes["header"]:
        raise ValueError("source_suffix can't be the header suffix {!r}".format(value))

    if key == "source_suffix" and ("/" in value or os.sep in value):
        raise ValueError("source_suffix can't contain a path separator, got {!r}".format(value))

    # anything else would end up inside the array initializer
    if key == "indent" and not re.fullmatch(r"[ \t]*", value):
        raise ValueError("indent may only hold spaces and tabs, got {!r}".format(value))

    if key in ("literals_per_line", "verbose"):
        # yaml turns `yes` into a bool, which is an int subclass
        if type(value) is not int:
            raise ValueError("{} must be an integer, not {}".format(key, type(value).__name__))

    if key == "literals_per_line" and value <= 0:
        raise ValueError("literals_per_line must be positive, got {}".format(value))

    if key == "verbose" and value not in (0, 1, 2):
        raise ValueError("verbose must be 0, 1 or 2, got {}".format(value))


def parse(cfg_file=None):
    """ Loads the yaml config from `cfg_file` (a pathlib.Path) over the defaults.

    Without a file only the defaults are loaded. Raises ValueError if the file has unknown
    entries or bad values and yaml.YAMLError if it isn't valid yaml.
    """
    global CONFIG

    config = dict(DEFAULTS)

    if cfg_file is not None:
        loaded = yaml.load(cfg_file.read_text(), Loader=yaml.SafeLoader)

        # an empty file is a valid (empty) config
        if loaded is None:
            loaded = {}

        if not isinstance(loaded, dict):
            raise ValueError("{} must contain a mapping, not {}".format(cfg_file, type(loaded).__name__))

        for key, value in loaded.items():
            if key not in DEFAULTS:
                raise ValueError("Unknown config entry {!r} in {}".format(key, cfg_file))

            _check_value(key, value)
            config[key] = value

    CONFIG = config


def get(obj):
    if CONFIG is None:
        raise ValueError("Config not loaded")

    if obj not in CONFIG:
        raise KeyError("{} not present in config".format(obj))

    return CONFIG[obj]
