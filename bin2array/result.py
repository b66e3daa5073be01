#
# Copyright (c) 2020 Bitdefender
# SPDX-License-Identifier: Apache-2.0
#
from collections import namedtuple
from enum import Enum, auto


class ErrorReason(Enum):
    # argument errors
    EMPTY_INPUT_NAME = auto()
    EMPTY_OUTPUT_NAME = auto()
    INVALID_NAME = auto()
    UNKNOWN_MODE = auto()
    INVALID_MODE = auto()

    # i/o errors
    CANNOT_OPEN_INPUT = auto()
    EMPTY_INPUT = auto()
    SHORT_READ = auto()
    CANNOT_OPEN_OUTPUT = auto()
    WRITE_FAILED = auto()

    OUT_OF_MEMORY = auto()

    BAD_CONFIG = auto()


Error = namedtuple("Error", ["reason", "message"])


class Result(namedtuple("Result", ["value", "error"])):
    """ The outcome of a fallible operation.

    Exactly one of `value` and `error` is meaningful: `error` is None on success, otherwise it
    holds an `Error` describing why the operation failed. Callers must check `ok` before using
    `value`.
    """

    __slots__ = ()

    @property
    def ok(self):
        return self.error is None

    @classmethod
    def success(cls, value=None):
        return cls(value, None)

    @classmethod
    def failure(cls, reason, message):
        return cls(None, Error(reason, message))
