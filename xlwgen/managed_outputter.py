"""Generate managed wrapper declarations and definitions for described functions."""

from __future__ import annotations

from collections.abc import Iterable

from .parser_data import FunctionArgument, FunctionDescription
from .paths import strip_path
from .type_registry import TypeRegistry

_PREAMBLE = (
    "//// ",
    "//// Autogenerated by xlw ",
    "//// Do not edit this file, it will be overwritten ",
    "//// by InterfaceGenerator ",
    "////",
    "",
    '#include "xlw/MyContainers.h"',
    "#include <xlw/CellMatrix.h>",
    "#include <stdexcept>",
)

_BLOCK_GAP = "\n\n\n\n"
_SEPARATOR = "////////////////////////////////////"


def _join(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def _conversion_body(argument: FunctionArgument, registry: TypeRegistry) -> str:
    """Statements converting the incoming value along its chain to the declared type."""
    chain = argument.the_type.conversion_chain
    name = argument.name
    steps = list(reversed(chain[:-1]))
    body = ""
    last_id = name + "a"
    suffix = ord("b")
    for position, step in enumerate(steps):
        new_id = name if position == len(steps) - 1 else name + chr(suffix)
        data = registry.get_registration(step)
        body += f"\t\t\t{data.new_type} {new_id}("

        identifier_bit = ""
        if data.takes_identifier:
            identifier_bit = f'"{new_id}"' if data.is_method else f',"{new_id}"'

        if data.is_method:
            body += f" {last_id}.{data.converter}({identifier_bit} ));\n"
        else:
            body += f" {data.converter}({last_id}{identifier_bit} ));\n"

        suffix += 1
        last_id = new_id
    return body


def _function_blocks(
    description: FunctionDescription, registry: TypeRegistry
) -> tuple[list[str], list[str]]:
    """Return the header and source lines for one non-void function.

    The description is renamed to its managed wrapper name.
    """
    return_type = description.return_type
    name = description.function_name
    managed_name = f"mxlw_{name}"
    description.function_name = managed_name

    source = [f"{return_type} {managed_name}", "\t\t("]
    header = [f"{return_type}  // {description.description}", f"{managed_name}\t\t("]

    passing = "("
    bodies: list[str] = []
    count = len(description.arguments)
    for index, argument in enumerate(description.arguments):
        chain = argument.the_type.conversion_chain
        passing += argument.name
        bodies.append(_conversion_body(argument, registry))

        uniqifier = "" if len(chain) == 1 else "a"
        param = f"\t\t{chain[-1]} {argument.name}{uniqifier}"
        header_param = f"\t\t{chain[-1]} {argument.name}"

        is_last = index == count - 1
        term = "" if is_last else ","
        closing = " );" if is_last else ""
        passing += term + closing

        source.append(param + term)
        header.append(f"{header_param}{term} //{argument.description}")
        if closing:
            header.append(closing)

    source += ["\t\t)", "\t\t{", "\t\tMANAGED_EXECL_BEGIN"]
    source += [body for body in bodies if body]
    source += [
        f"\t\t\treturn {name}{passing}",
        "\t\tMANAGED_EXECL_END",
        "\t\t}",
        "",
        _SEPARATOR,
        "",
    ]
    return header, source


def output_file_creator_managed(
    descriptions: Iterable[FunctionDescription],
    input_file_name: str,
    library_name: str,
    registry: TypeRegistry,
    includes: Iterable[str],
    usings: Iterable[str],
) -> tuple[str, str]:
    """Return the (header, source) text of the managed wrappers.

    Each non-void description is renamed to its ``mxlw_`` wrapper name.
    """
    header = list(_PREAMBLE)
    source = list(_PREAMBLE)

    source += [
        f'#include "{strip_path(input_file_name)}"',
        "#include <xlw/xlwManaged.h>",
        "using namespace System;",
        "using namespace Runtime::InteropServices;",
    ]
    header.append("using namespace xlw;")

    for include in includes:
        source.append(f"#include {include}\n")
        header.append(f"#include {include}\n")
    for using in usings:
        source.append(f"using namespace {using};\n")

    source.append(_BLOCK_GAP)
    header.append(_BLOCK_GAP)

    for description in descriptions:
        if description.return_type == "void":
            header += [
                f"void //{description.description}",
                f"{description.function_name}();",
                _BLOCK_GAP,
            ]
            continue
        function_header, function_source = _function_blocks(description, registry)
        header += function_header
        source += function_source

    return _join(header), _join(source)