"""Resolve the declared types of functions into conversion chains."""

from __future__ import annotations

from .function_model import FunctionModel
from .parser_data import FunctionArgument, FunctionArgumentType, FunctionDescription
from .tokenizer import GeneratorError
from .type_registry import TypeRegistry


def check_and_get_type(registry: TypeRegistry, class_name: str) -> tuple[str, list[str]]:
    """Return the Excel key and the conversion chain of a type.

    The key is empty when the chain ends in a base type that is not registered.
    """
    chain = registry.get_chain(class_name)
    key = ""
    for position, step in enumerate(chain):
        if key:
            break
        if not registry.is_type_registered(step):
            if registry.is_of_base_type(step):
                if position != len(chain) - 1:
                    raise GeneratorError(
                        f"chain for {class_name} not terminating with parent type {step}"
                    )
                return "", chain
            raise GeneratorError(f"Unknown type {step}")
        key = registry.get_registration(step).excel_key
    if not key:
        raise GeneratorError(f"excel key not given  {class_name}")
    return key, chain


def function_typer(
    registry: TypeRegistry, models: list[FunctionModel]
) -> list[FunctionDescription]:
    """Turn function models into descriptions with resolved argument types."""
    output: list[FunctionDescription] = []
    for model in models:
        key, _ = check_and_get_type(registry, model.return_type)
        arguments = []
        for argument in model.arguments:
            arg_key, arg_chain = check_and_get_type(registry, argument.arg_type)
            arg_type = FunctionArgumentType(argument.arg_type, tuple(arg_chain), arg_key)
            arguments.append(FunctionArgument(arg_type, argument.name, argument.description))
        output.append(
            FunctionDescription(
                model.name,
                model.description,
                model.return_type,
                key,
                arguments,
                model.volatile,
                model.time,
                model.threadsafe,
                model.help_id,
                model.asynchronous,
                model.macro_sheet,
                model.cluster_safe,
            )
        )
    return output