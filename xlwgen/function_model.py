"""Raw description of a declared function as read from the header."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ModelArgument:
    """One declared argument: its type, name and description."""

    arg_type: str
    name: str
    description: str


@dataclass
class FunctionModel:
    """A declared function with its flags and arguments."""

    return_type: str
    name: str
    description: str
    volatile: bool = False
    time: bool = False
    threadsafe: bool = False
    help_id: str = ""
    asynchronous: bool = False
    macro_sheet: bool = False
    cluster_safe: bool = False
    arguments: list[ModelArgument] = field(default_factory=list)

    def add_argument(self, arg_type: str, name: str, description: str) -> None:
        """Append an argument to the function."""
        self.arguments.append(ModelArgument(arg_type, name, description))

    def number_of_args(self) -> int:
        """Return the number of declared arguments."""
        return len(self.arguments)