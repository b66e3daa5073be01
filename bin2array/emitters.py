#
# Copyright (c) 2020 Bitdefender
# SPDX-License-Identifier: Apache-2.0
#
import os
from collections import namedtuple

from bin2array.defines import layout_defaults, snippets, suffixes
from bin2array.encoder import write_bytes
from bin2array.result import ErrorReason, Result

Layout = namedtuple(
    "Layout",
    ["literals_per_line", "indent", "source_suffix"],
    defaults=[layout_defaults["literals_per_line"], layout_defaults["indent"], suffixes["source"]],
)


def write_header_start(fd):
    fd.write(snippets["pragma_once"])
    fd.write("\n")
    fd.write(snippets["include_stddef"])
    fd.write("\n")
    fd.write(snippets["linkage_open"])
    fd.write("\n")


def write_header_end(fd):
    fd.write("\n")
    fd.write(snippets["linkage_close"])


def write_source_start(fd, header_path):
    fd.write('#include "%s"\n' % os.path.basename(header_path))
    fd.write("\n")


def write_array(fd, array_name, data, layout):
    fd.write("static const unsigned char %s[%d] = {" % (array_name, len(data)))
    write_bytes(fd, data, layout.literals_per_line, layout.indent)
    fd.write("\n};\n")


def write_record_type(fd, var_name):
    fd.write(
        "typedef struct %s_data\n"
        "{\n"
        "    const unsigned char* bytes;\n"
        "    size_t               size;\n"
        "} %s_data;\n"
        "\n" % (var_name, var_name)
    )


def _artifact_paths(file_name, layout):
    return (file_name + suffixes["header"], file_name + layout.source_suffix)


def _describe(error):
    if isinstance(error, OSError) and error.strerror:
        return error.strerror

    return str(error)


def _write_artifacts(artifacts):
    """ Writes every (path, writer) pair, in order.

    Each file is opened right before its writer runs and closed right after, on every path. Stops
    at the first file that cannot be opened or written; the files written before it are left on
    disk.

    Returns:
        Result: - the list of written paths on success.
    """
    written = []

    for path, writer in artifacts:
        try:
            fd = open(path, "w", encoding="utf-8")
        except (OSError, UnicodeError) as e:
            return Result.failure(ErrorReason.CANNOT_OPEN_OUTPUT, "can't open the file %s (%s)" % (path, _describe(e)))

        try:
            with fd:
                writer(fd)
        except (OSError, UnicodeError) as e:
            return Result.failure(ErrorReason.WRITE_FAILED, "can't write the file %s (%s)" % (path, _describe(e)))

        written.append(path)

    return Result.success(written)


def write_c_header_single(file_name, var_name, data, layout=None):
    """ A single header with the array and its size, both static. """
    layout = layout or Layout()
    header_path = file_name + suffixes["header"]

    def header(fd):
        write_header_start(fd)
        write_array(fd, "%s_bytes" % var_name, data, layout)
        fd.write("\n")
        fd.write("static const size_t %s_size = %d;\n" % (var_name, len(data)))
        write_header_end(fd)

    return _write_artifacts([(header_path, header)])


def write_c_header_source_extern(file_name, var_name, data, layout=None):
    """ The header declares an extern pointer and size, the source defines them.

    The storage itself is a static array in the source, the exported pointer refers to it.
    """
    layout = layout or Layout()
    header_path, source_path = _artifact_paths(file_name, layout)

    def header(fd):
        write_header_start(fd)
        fd.write(
            "extern const unsigned char* %s_bytes;\n"
            "extern size_t               %s_size;\n" % (var_name, var_name)
        )
        write_header_end(fd)

    def source(fd):
        write_source_start(fd, header_path)
        write_array(fd, "%s_bytes_array" % var_name, data, layout)
        fd.write("\n")
        fd.write(
            "const unsigned char* %s_bytes = %s_bytes_array;\n"
            "size_t               %s_size  = %d;\n" % (var_name, var_name, var_name, len(data))
        )

    return _write_artifacts([(header_path, header), (source_path, source)])


def write_c_header_source_funcs(file_name, var_name, data, layout=None):
    """ The header declares two accessor functions, the source keeps the data static. """
    layout = layout or Layout()
    header_path, source_path = _artifact_paths(file_name, layout)

    def header(fd):
        write_header_start(fd)
        fd.write(
            "const unsigned char* get_%s_bytes(void);\n"
            "size_t               get_%s_size(void);\n" % (var_name, var_name)
        )
        write_header_end(fd)

    def source(fd):
        write_source_start(fd, header_path)
        write_array(fd, "%s_bytes" % var_name, data, layout)
        fd.write("\n")
        fd.write("static const size_t %s_size = %d;\n" % (var_name, len(data)))
        fd.write("\n")
        fd.write(snippets["separator"])
        fd.write("\n")
        fd.write("const unsigned char* get_%s_bytes(void) { return %s_bytes; }\n" % (var_name, var_name))
        fd.write("size_t               get_%s_size(void)  { return %s_size; }\n" % (var_name, var_name))

    return _write_artifacts([(header_path, header), (source_path, source)])


def write_c_header_source_struct_extern(file_name, var_name, data, layout=None):
    """ The header declares a {bytes, size} record type and an extern instance of it. """
    layout = layout or Layout()
    header_path, source_path = _artifact_paths(file_name, layout)

    def header(fd):
        write_header_start(fd)
        write_record_type(fd, var_name)
        fd.write("extern const %s_data %s;\n" % (var_name, var_name))
        write_header_end(fd)

    def source(fd):
        write_source_start(fd, header_path)
        write_array(fd, "%s_bytes" % var_name, data, layout)
        fd.write("\n")
        fd.write(snippets["separator"])
        fd.write("\n")
        fd.write("const %s_data %s = {%s_bytes, %d};\n" % (var_name, var_name, var_name, len(data)))

    return _write_artifacts([(header_path, header), (source_path, source)])


def write_c_header_source_struct_func(file_name, var_name, data, layout=None):
    """ The header declares the record type and a function returning a pointer to the record. """
    layout = layout or Layout()
    header_path, source_path = _artifact_paths(file_name, layout)

    def header(fd):
        write_header_start(fd)
        write_record_type(fd, var_name)
        fd.write("const %s_data* get_%s_data(void);\n" % (var_name, var_name))
        write_header_end(fd)

    def source(fd):
        write_source_start(fd, header_path)
        write_array(fd, "%s_bytes" % var_name, data, layout)
        fd.write("\n")
        fd.write(snippets["separator"])
        fd.write("\n")
        fd.write("static const %s_data %s_data_struct = {%s_bytes, %d};\n" % (var_name, var_name, var_name, len(data)))
        fd.write("\n")
        fd.write("const %s_data* get_%s_data(void) { return &%s_data_struct; }\n" % (var_name, var_name, var_name))

    return _write_artifacts([(header_path, header), (source_path, source)])
