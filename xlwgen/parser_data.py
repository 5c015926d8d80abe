"""Typed descriptions of functions, ready for code generation."""

from __future__ import annotations

from dataclasses import dataclass, field

from .tokenizer import GeneratorError


@dataclass(frozen=True)
class FunctionArgumentType:
    """A declared type together with its conversion chain and Excel key."""

    name_identifier: str
    conversion_chain: tuple[str, ...]
    excel_key: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "conversion_chain", tuple(self.conversion_chain))


@dataclass(frozen=True)
class FunctionArgument:
    """One argument of a described function."""

    the_type: FunctionArgumentType
    name: str
    description: str


@dataclass
class FunctionDescription:
    """A function with resolved argument types and registration flags."""

    function_name: str
    description: str
    return_type: str
    excel_key: str
    arguments: list[FunctionArgument] = field(default_factory=list)
    volatile: bool = False
    time: bool = False
    threadsafe: bool = False
    help_id: str = ""
    asynchronous: bool = False
    macro_sheet: bool = False
    cluster_safe: bool = False
    display_name: str = field(init=False)

    def __post_init__(self) -> None:
        self.arguments = list(self.arguments)
        self.display_name = self.function_name

    def number_of_arguments(self) -> int:
        """Return the number of arguments."""
        return len(self.arguments)


_TRANSFERRED = (
    "asynchronous",
    "cluster_safe",
    "display_name",
    "description",
    "help_id",
    "macro_sheet",
    "threadsafe",
    "time",
    "volatile",
)


def transit(
    source: list[FunctionDescription], destination: list[FunctionDescription]
) -> None:
    """Copy display name, description and flags from source onto destination.

    The two lists must describe the same functions in the same order.
    """
    if len(source) != len(destination):
        raise GeneratorError("number of managed functions and native wrappers not the same")
    for src, dest in zip(source, destination):
        for name in _TRANSFERRED:
            setattr(dest, name, getattr(src, name))
        if dest.function_name != src.function_name:
            raise GeneratorError(
                "unmanaged wrappers must be in same order as manged function: "
                f"{dest.function_name} : {src.function_name}"
            )