#
# Copyright (c) 2020 Bitdefender
# SPDX-License-Identifier: Apache-2.0
#
import os

from bin2array.result import ErrorReason, Result


def read_file(path):
    """ Reads the whole content of the (binary) file found at `path`.

    Returns:
        Result: - on success the value is a bytes object holding the file content. Fails if the file
                  cannot be opened, is empty or if it can't be read entirely.
    """
    try:
        f = open(path, "rb")
    except OSError:
        return Result.failure(ErrorReason.CANNOT_OPEN_INPUT, "can't open file %s" % path)

    with f:
        file_size = os.fstat(f.fileno()).st_size

        if file_size == 0:
            return Result.failure(ErrorReason.EMPTY_INPUT, "file %s is empty" % path)

        try:
            data = f.read(file_size)
        except MemoryError:
            return Result.failure(
                ErrorReason.OUT_OF_MEMORY,
                "cannot allocate memory (%d bytes) to store file's %s content" % (file_size, path),
            )
        except OSError:
            data = b""

    if len(data) != file_size:
        return Result.failure(
            ErrorReason.SHORT_READ,
            "cannot read the whole file %s. (read bytes: %d != content bytes %d)" % (path, len(data), file_size),
        )

    return Result.success(data)
