#
# Copyright (c) 2020 Bitdefender
# SPDX-License-Identifier: Apache-2.0
#
import re

import pytest

from bin2array import config

_ARRAY = re.compile(r"unsigned char (\w+)\[(\d+)\] = \{(.*?)\};", re.DOTALL)
_LITERAL = re.compile(r"0x([0-9a-f]{2})")


def parse_c_arrays(text):
    """ Poor man's C compiler: returns {name: (declared length, bytes)} for every byte array in `text`. """
    arrays = {}
    for name, length, body in _ARRAY.findall(text):
        arrays[name] = (int(length), bytes(int(h, 16) for h in _LITERAL.findall(body)))
    return arrays


@pytest.fixture
def parse_arrays():
    return parse_c_arrays


@pytest.fixture
def make_input(tmp_path):
    def _make(data, name="input.bin"):
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _make


@pytest.fixture(autouse=True)
def default_config():
    config.parse(None)
    yield
    config.CONFIG = None
