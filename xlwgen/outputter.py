"""Generate the native Excel registration wrappers for described functions."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .parser_data import FunctionArgument, FunctionDescription
from .paths import strip_path
from .type_registry import TypeRegistry

_log = logging.getLogger(__name__)

_WIZARD_NAME_LIMIT = 19

_PREAMBLE = (
    "//// ",
    "//// Autogenerated by xlw ",
    "//// Do not edit this file, it will be overwritten ",
    "//// by InterfaceGenerator ",
    "////",
    "",
    '#include "xlw/MyContainers.h"',
    "#include <xlw/CellMatrix.h>",
)

_STANDARD_INCLUDES = (
    "#include <xlw/xlw.h>",
    "#include <xlw/XlFunctionRegistration.h>",
    "#include <stdexcept>",
    "#include <xlw/XlOpenClose.h>",
    "#include <xlw/HiResTimer.h>",
)

_SEPARATOR = "//////////////////////////"


def _join(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def _flag(value: bool) -> str:
    return ",true" if value else ",false"


def _macro_lines(policy: str, methods: Iterable[str]) -> list[str]:
    lines = [
        _SEPARATOR,
        f"// Methods that will get registered to execute in Auto{policy}",
        _SEPARATOR,
        "",
    ]
    for method in methods:
        quoted = f'"{method}"'
        lines += [
            f"void {method}();",
            "namespace {",
            f"\tMacroCache<xlw::{policy}>::MacroRegistra {method}_registra"
            f"({quoted},{quoted},{method});",
            "}",
            "",
            "",
        ]
    return lines


def write_macros_initialisation(policy: str, methods: Iterable[str]) -> str:
    """Return the code registering methods to run on Auto<policy>."""
    return _join(_macro_lines(policy, methods))


def _conversion_lines(argument: FunctionArgument, registry: TypeRegistry) -> list[str]:
    """Lines converting an incoming value along its chain to the declared type."""
    chain = argument.the_type.conversion_chain
    name = argument.name
    steps = list(reversed(chain[:-1]))
    lines: list[str] = []
    last_id = name + "a"
    suffix = ord("b")
    for position, step in enumerate(steps):
        new_id = name if position == len(steps) - 1 else name + chr(suffix)
        data = registry.get_registration(step)
        lines.append(f"{data.new_type} {new_id}(")

        identifier_bit = ""
        if data.takes_identifier:
            identifier_bit = f'"{new_id}"' if data.is_method else f',"{new_id}"'

        if data.is_method:
            lines.append(f"\t{last_id}.{data.converter}({identifier_bit}));")
        else:
            lines.append(f"\t{data.converter}({last_id}{identifier_bit}));")

        suffix += 1
        last_id = new_id
    return lines


def _command_lines(description: FunctionDescription) -> list[str]:
    name = description.function_name
    return [
        "  XLRegistration::XLCommandRegistrationHelper",
        f'register{name}("xl{name}",',
        f'"{description.display_name}",',
        f'"{description.description} ",',
        "LibraryName,",
        f'"{description.description} ");',
        "}",
        "",
        "",
        "",
        'extern "C"',
        "{",
        "int EXCEL_EXPORT",
        f"xl{name}()",
        "{",
        "EXCEL_BEGIN;",
        f"\t{name}();",
        "EXCEL_END_CMD;",
        "}",
        "}",
    ]


def _argument_table(description: FunctionDescription) -> list[str]:
    name = description.function_name
    arguments = description.arguments
    lines = ["XLRegistration::Arg", f"{name}Args[]=", "{"]
    for index, argument in enumerate(arguments):
        if len(argument.name) >= _WIZARD_NAME_LIMIT:
            _log.warning(
                'XLW Warning - Argument name "%s" for function "%s" may be too long '
                "to fit the in the function wizard",
                argument.name,
                name,
            )
        line = (
            f'{{ "{argument.name}","{argument.description} ",'
            f'"{argument.the_type.excel_key}"}}'
        )
        if index + 1 < len(arguments):
            line += ","
        lines.append(line)
    lines.append("};")
    return lines


def _function_lines(
    description: FunctionDescription, registry: TypeRegistry
) -> list[str]:
    name = description.function_name
    arguments = description.arguments
    count = len(arguments)

    lines: list[str] = []
    if count > 0:
        lines += _argument_table(description)

    lines += [
        "  XLRegistration::XLFunctionRegistrationHelper",
        f'register{name}("xl{name}",',
        f'"{description.display_name}",',
        f'"{description.description} ",',
        "LibraryName,",
        f"{name}Args," if count > 0 else "0,",
        str(count),
        _flag(description.volatile),
        _flag(description.threadsafe),
        ',""',
        f",{description.help_id}" if description.help_id else ',""',
        _flag(description.asynchronous),
        _flag(description.macro_sheet),
        _flag(description.cluster_safe),
        ");",
        "}",
        "",
        "",
        "",
        'extern "C"',
        "{",
        "LPXLFOPER EXCEL_EXPORT",
        f"xl{name}(",
    ]

    for index, argument in enumerate(arguments):
        delimiter = "," if index + 1 < count else ")"
        chain = argument.the_type.conversion_chain
        uniqifier = "" if len(chain) == 1 else "a"
        lines.append(f"{chain[-1]} {argument.name}{uniqifier}{delimiter}")
    if count == 0:
        lines.append(")")

    lines += ["{", "EXCEL_BEGIN;", ""]
    if description.return_type != "void":
        lines += [
            "\tif (XlfExcel::Instance().IsCalledByFuncWiz())",
            "\t\treturn XlfOper(true);",
            "",
        ]
        for argument in arguments:
            lines += _conversion_lines(argument, registry)
            lines.append("")

        if description.time:
            lines.append(" HiResTimer t;")

        lines.append(f"{description.return_type} result(")
        if count > 0:
            lines.append(f"\t{name}(")
            for index, argument in enumerate(arguments):
                delimiter = "," if index + 1 < count else ")"
                lines.append(f"\t\t{argument.name}{delimiter}")
            lines.append("\t);")
        else:
            lines.append(f"\t{name}());")

        if description.time:
            lines += [
                "CellMatrix resultCells(result);",
                "CellMatrix time(1,2);",
                'time(0,0) = "time taken";',
                "time(0,1) = t.elapsed();",
                "resultCells.PushBottom(time);",
                "return XlfOper(resultCells);",
            ]
        else:
            lines.append("return XlfOper(result);")
    else:
        lines.append(f"\t{name}();")
    lines += ["EXCEL_END", "}", "}"]
    return lines


def output_file_creator(
    descriptions: Iterable[FunctionDescription],
    input_file_name: str,
    library_name: str,
    open_methods: Iterable[str],
    close_methods: Iterable[str],
    registry: TypeRegistry,
    includes: Iterable[str],
) -> str:
    """Return the source of the native wrapper file for the described functions."""
    lines = list(_PREAMBLE)
    lines.append(f'#include "..\\{strip_path(input_file_name)}"')
    lines += _STANDARD_INCLUDES
    for include in includes:
        lines.append(f"#include {include}\n")

    lines += [
        "using namespace xlw;",
        "",
        "namespace {",
        f'const char* LibraryName = "{library_name}";',
        "};",
        "",
        "",
        "// registrations start here",
        "",
        "",
    ]

    for description in descriptions:
        lines += ["namespace", "{"]
        if description.return_type == "void":
            lines += _command_lines(description)
        else:
            lines += _function_lines(description, registry)
        lines += ["", "", "", _SEPARATOR, ""]

    lines += _macro_lines("Open", open_methods)
    lines += _macro_lines("Close", close_methods)
    return _join(lines)