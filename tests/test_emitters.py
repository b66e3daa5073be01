#
# Copyright (c) 2020 Bitdefender
# SPDX-License-Identifier: Apache-2.0
#
import errno
from pathlib import Path

import pytest

from bin2array import emitters
from bin2array.emitters import (
    Layout,
    write_c_header_single,
    write_c_header_source_extern,
    write_c_header_source_funcs,
    write_c_header_source_struct_extern,
    write_c_header_source_struct_func,
)
from bin2array.result import ErrorReason

SAMPLE = bytes([0x00, 0x41, 0xFF])

HEADER_START = (
    "#pragma once\n"
    "\n"
    "#include <stddef.h> /* for size_t */\n"
    "\n"
    "#ifdef __cplusplus\n"
    'extern "C" {\n'
    "#endif\n"
    "\n"
)

HEADER_END = (
    "\n"
    "#ifdef __cplusplus\n"
    '} /* extern "C" */\n'
    "#endif\n"
)

ALL_EMITTERS = [
    write_c_header_single,
    write_c_header_source_extern,
    write_c_header_source_funcs,
    write_c_header_source_struct_extern,
    write_c_header_source_struct_func,
]

TWO_FILE_EMITTERS = ALL_EMITTERS[1:]


def emit(emitter, tmp_path, data=SAMPLE, name="my_data", layout=None):
    stem = str(tmp_path / "out")
    result = emitter(stem, name, data, layout)

    assert result.ok, result.error
    return [Path(path).read_text() for path in result.value]


def test_single_header(tmp_path):
    (header,) = emit(write_c_header_single, tmp_path)

    assert header == (
        HEADER_START
        + "static const unsigned char my_data_bytes[3] = {\n"
        "\t0x00, 0x41, 0xff\n"
        "};\n"
        "\n"
        "static const size_t my_data_size = 3;\n" + HEADER_END
    )
    assert not (tmp_path / "out.c").exists()


def test_extern_pair(tmp_path):
    header, source = emit(write_c_header_source_extern, tmp_path)

    assert header == (
        HEADER_START
        + "extern const unsigned char* my_data_bytes;\n"
        "extern size_t               my_data_size;\n" + HEADER_END
    )
    assert source == (
        '#include "out.h"\n'
        "\n"
        "static const unsigned char my_data_bytes_array[3] = {\n"
        "\t0x00, 0x41, 0xff\n"
        "};\n"
        "\n"
        "const unsigned char* my_data_bytes = my_data_bytes_array;\n"
        "size_t               my_data_size  = 3;\n"
    )


def test_accessor_functions(tmp_path):
    header, source = emit(write_c_header_source_funcs, tmp_path)

    assert header == (
        HEADER_START
        + "const unsigned char* get_my_data_bytes(void);\n"
        "size_t               get_my_data_size(void);\n" + HEADER_END
    )
    assert "static const unsigned char my_data_bytes[3] = {" in source
    assert "static const size_t my_data_size = 3;\n" in source
    assert source.endswith(
        "const unsigned char* get_my_data_bytes(void) { return my_data_bytes; }\n"
        "size_t               get_my_data_size(void)  { return my_data_size; }\n"
    )


def test_struct_extern(tmp_path):
    header, source = emit(write_c_header_source_struct_extern, tmp_path)

    assert header == (
        HEADER_START + "typedef struct my_data_data\n"
        "{\n"
        "    const unsigned char* bytes;\n"
        "    size_t               size;\n"
        "} my_data_data;\n"
        "\n"
        "extern const my_data_data my_data;\n" + HEADER_END
    )
    assert source.startswith('#include "out.h"\n\nstatic const unsigned char my_data_bytes[3] = {')
    assert source.endswith("const my_data_data my_data = {my_data_bytes, 3};\n")


def test_struct_accessor(tmp_path):
    header, source = emit(write_c_header_source_struct_func, tmp_path)

    assert "typedef struct my_data_data\n{\n" in header
    assert "    const unsigned char* bytes;\n    size_t               size;\n" in header
    assert header.endswith("const my_data_data* get_my_data_data(void);\n" + HEADER_END)

    assert source == (
        '#include "out.h"\n'
        "\n"
        "static const unsigned char my_data_bytes[3] = {\n"
        "\t0x00, 0x41, 0xff\n"
        "};\n"
        "\n"
        "/* ------------------------------------------------------ */\n"
        "\n"
        "static const my_data_data my_data_data_struct = {my_data_bytes, 3};\n"
        "\n"
        "const my_data_data* get_my_data_data(void) { return &my_data_data_struct; }\n"
    )


@pytest.mark.parametrize("emitter", ALL_EMITTERS)
def test_round_trip(emitter, tmp_path, parse_arrays):
    data = bytes(range(256)) * 3 + b"\x00"
    artifacts = emit(emitter, tmp_path, data=data)

    arrays = {}
    for text in artifacts:
        arrays.update(parse_arrays(text))

    assert len(arrays) == 1
    ((length, parsed),) = arrays.values()
    assert length == len(data)
    assert parsed == data
    assert str(len(data)) in "".join(artifacts).replace("[%d]" % len(data), "")


@pytest.mark.parametrize("emitter", ALL_EMITTERS)
def test_headers_have_linkage_guards(emitter, tmp_path):
    header = emit(emitter, tmp_path)[0]

    assert header.startswith(HEADER_START)
    assert header.endswith(HEADER_END)


@pytest.mark.parametrize("emitter", TWO_FILE_EMITTERS)
def test_custom_layout(emitter, tmp_path, parse_arrays):
    layout = Layout(literals_per_line=4, indent="    ", source_suffix=".cpp")
    data = bytes(range(10))

    result = emitter(str(tmp_path / "blob"), "blob", data, layout)

    assert result.value == [str(tmp_path / "blob.h"), str(tmp_path / "blob.cpp")]
    source = (tmp_path / "blob.cpp").read_text()
    assert source.startswith('#include "blob.h"\n')
    assert "\n    0x00, 0x01, 0x02, 0x03, \n    0x04," in source
    ((length, parsed),) = parse_arrays(source).values()
    assert (length, parsed) == (10, data)


@pytest.mark.parametrize("emitter", ALL_EMITTERS)
def test_cannot_open_header(emitter, tmp_path):
    result = emitter(str(tmp_path / "missing" / "out"), "my_data", SAMPLE)

    assert not result.ok
    assert result.error.reason is ErrorReason.CANNOT_OPEN_OUTPUT
    assert "out.h" in result.error.message


@pytest.mark.parametrize("emitter", TWO_FILE_EMITTERS)
def test_cannot_open_source(emitter, tmp_path):
    # a directory where the source should go
    (tmp_path / "out.c").mkdir()

    result = emitter(str(tmp_path / "out"), "my_data", SAMPLE)

    assert result.error.reason is ErrorReason.CANNOT_OPEN_OUTPUT
    assert "out.c" in result.error.message
    # no rollback of what was already written
    assert (tmp_path / "out.h").is_file()


def _disk_full(*args, **kwargs):
    raise OSError(errno.ENOSPC, "No space left on device")


def test_write_failure_single_header(tmp_path, monkeypatch):
    monkeypatch.setattr(emitters, "write_bytes", _disk_full)

    result = write_c_header_single(str(tmp_path / "out"), "my_data", SAMPLE)

    assert result.error.reason is ErrorReason.WRITE_FAILED
    assert result.error.message == "can't write the file %s (No space left on device)" % (tmp_path / "out.h")


@pytest.mark.parametrize("emitter", TWO_FILE_EMITTERS)
def test_write_failure_keeps_header(emitter, tmp_path, monkeypatch):
    # only the source holds the array in the two file modes
    monkeypatch.setattr(emitters, "write_bytes", _disk_full)

    result = emitter(str(tmp_path / "out"), "my_data", SAMPLE)

    assert result.value is None
    assert result.error.reason is ErrorReason.WRITE_FAILED
    assert "out.c" in result.error.message
    assert (tmp_path / "out.h").read_text().endswith(HEADER_END)


@pytest.mark.parametrize("emitter", ALL_EMITTERS)
def test_unencodable_text_is_a_write_failure(emitter, tmp_path):
    layout = Layout(indent="\udcff")

    result = emitter(str(tmp_path / "out"), "my_data", SAMPLE, layout)

    assert result.error.reason is ErrorReason.WRITE_FAILED
