# xlwgen

`xlwgen` generates C++ source for a spreadsheet add-in. It takes descriptions
of C++ functions and produces two things: code that registers each function
with the spreadsheet and wraps it in an exported entry point, and a managed
wrapper layer made of a header and a source file.

It needs nothing outside the Python standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The pieces

- `xlwgen.tokenizer`: `tokenize(text)` splits C++ declaration text into a list
  of `Token` objects. Each token has a `type` (a `TokenType`: comma, left and
  right parenthesis, ampersand, semicolon, comment, preprocessor line or
  identifier) and a `value`. Braces come back as parentheses. A `/` that does
  not start a comment raises `GeneratorError`, which is the exception every
  module in the package raises.
- `xlwgen.function_model`: `FunctionModel` is a declared function. It holds
  the return type, name, description, the flags `volatile`, `time`,
  `threadsafe`, `asynchronous`, `macro_sheet` and `cluster_safe`, a `help_id`,
  and its arguments (`ModelArgument`). Use `add_argument(arg_type, name,
  description)` to add an argument and `number_of_args()` to count them.
- `xlwgen.type_registry`: `TypeRegistry` records how each type is converted
  from another one, through a `Registration` (new type, old type, converter,
  whether the converter is a method, whether it takes an identifier,
  spreadsheet key, include file, managed namespace).
  - `native_registry()` returns an empty registry whose base types are
    `LPXLFOPER`, `double`, `LPXLARRAY` and `void`.
  - `managed_registry(native)` returns one whose base types are `std::string`,
    `CellMatrix` and every type registered in `native`.
  - `get_chain(name)` returns the chain of types from `name` back to its base
    type. A chain longer than 26 steps raises `GeneratorError`.
  - `used_includes()` returns the include files of the types whose chains have
    been looked up.
- `xlwgen.function_typer`: `check_and_get_type(registry, class_name)` returns
  a type's spreadsheet key and conversion chain. `function_typer(registry,
  models)` turns `FunctionModel` objects into `FunctionDescription` objects.
- `xlwgen.parser_data`: `FunctionDescription`, `FunctionArgument` and
  `FunctionArgumentType` hold functions whose types have been resolved.
  `transit(source, destination)` copies the display name, description and flags
  from one list of descriptions to another. Both lists must name the same
  functions in the same order.
- `xlwgen.outputter`: `output_file_creator(descriptions, input_file_name,
  library_name, open_methods, close_methods, registry, includes)` returns the
  native wrapper source as a string. Functions that return `void` are
  registered as commands. `write_macros_initialisation(policy, methods)`
  returns the code that registers methods to run on `Auto<policy>`. An
  argument name of 19 characters or more is logged as a warning, because the
  function wizard may not have room for it.
- `xlwgen.managed_outputter`: `output_file_creator_managed(descriptions,
  input_file_name, library_name, registry, includes, usings)` returns a
  `(header, source)` pair. It renames every non-`void` description to
  `mxlw_<name>`.
- `xlwgen.paths`:
  - `strip_path(path)` returns the file name part of a path.
  - `get_dir(path)` returns the directory part.
  - Both accept `/` and `\` as separators.
  - `write_output_file(path, text)` writes generated text to disk and raises
    `GeneratorError` if the file cannot be created.

## Example

```python
from xlwgen.function_model import FunctionModel
from xlwgen.function_typer import function_typer
from xlwgen.outputter import output_file_creator
from xlwgen.type_registry import native_registry

registry = native_registry()
registry.add("short", "double", "ConvertToShort", False, False, "B")

model = FunctionModel("short", "EchoShort", "echoes a short")
model.add_argument("short", "x", "number to be echoed")

descriptions = function_typer(registry, [model])
source = output_file_creator(
    descriptions, "cppinterface.h", "MyTestLibrary", [], [], registry,
    registry.used_includes(),
)
```

Every type used as a return type or an argument type must be registered in the
registry you pass, and the first registered type in its chain must carry a
spreadsheet key. Otherwise `function_typer` raises `GeneratorError`.

## What the package does not do

- It has no command-line tool.
- It does not read `<xlw:...>` comment commands from a header.
- It does not turn a token list into `FunctionModel` objects, and it does not
  drop `const` or `&` from tokens. You build the `FunctionModel` objects, with
  their flags, library name and open/close methods, yourself and hand them to
  `function_typer`.