"""Registries of type conversions used when generating wrappers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .tokenizer import GeneratorError

_MAX_CHAIN_DEPTH = 26

NATIVE_BASE_TYPES = frozenset({"LPXLFOPER", "double", "LPXLARRAY", "void"})
MANAGED_BASE_TYPES = frozenset({"std::string", "CellMatrix"})


@dataclass(frozen=True)
class Registration:
    """How a new type is obtained from an older one."""

    new_type: str
    old_type: str
    converter: str
    is_method: bool
    takes_identifier: bool
    excel_key: str = ""
    include_file: str = ""
    managed_namespace: str = ""


class TypeRegistry:
    """Registered types and the conversion chains leading back to base types.

    A registry may have a parent; types registered in the parent count as
    base types here and may be used directly.
    """

    def __init__(
        self, base_types: Iterable[str] = (), parent: TypeRegistry | None = None
    ) -> None:
        self._base_types = frozenset(base_types)
        self._parent = parent
        self._registrations: dict[str, Registration] = {}
        self._chains: dict[str, list[str]] | None = None
        self._type_includes: dict[str, str] = {}
        self._used_includes: set[str] = set()

    def register(self, registration: Registration) -> None:
        """Add a registration; a type already registered keeps its first one."""
        if registration.new_type not in self._registrations:
            self._registrations[registration.new_type] = registration
            self._chains = None

    def add(
        self,
        new_type: str,
        old_type: str,
        converter: str,
        is_method: bool,
        takes_identifier: bool,
        excel_key: str = "",
        include_file: str = "",
        managed_namespace: str = "",
    ) -> Registration:
        """Build a registration from its parts, register it and return it."""
        registration = Registration(
            new_type,
            old_type,
            converter,
            is_method,
            takes_identifier,
            excel_key,
            include_file,
            managed_namespace,
        )
        self.register(registration)
        return registration

    def get_registration(self, key: str) -> Registration:
        """Return the registration of a type."""
        try:
            return self._registrations[key]
        except KeyError:
            raise GeneratorError(f"unknown type {key}") from None

    def is_type_registered(self, name: str) -> bool:
        """Tell whether a type is registered here."""
        return name in self._registrations

    def is_of_base_type(self, name: str) -> bool:
        """Tell whether a type ends a conversion chain."""
        if self._parent is not None and self._parent.is_type_registered(name):
            return True
        return name in self._base_types

    def _build_chains(self) -> dict[str, list[str]]:
        if self._chains is not None:
            return self._chains
        chains: dict[str, list[str]] = {}
        for key in sorted(self._registrations):
            registration = self._registrations[key]
            self._type_includes[registration.new_type] = registration.include_file
            chain = [registration.new_type]
            while not self.is_of_base_type(chain[-1]):
                step = self._registrations.get(chain[-1])
                if step is None:
                    raise GeneratorError(f"broken chain {chain[-1]} {key}")
                chain.append(step.old_type)
                if len(chain) - 1 >= _MAX_CHAIN_DEPTH:
                    raise GeneratorError("26 deep type conversions suggests recursive loop")
            chains[key] = chain
        self._chains = chains
        return chains

    def get_chain(self, name: str) -> list[str]:
        """Return the conversion chain from a type back to its base type."""
        chains = self._build_chains()
        chain = chains.get(name)
        if chain is None:
            if self._parent is None or not self._parent.is_type_registered(name):
                raise GeneratorError(f" bad type {name}")
            chain = [name]
            chains[name] = chain
            return list(chain)
        for step in chain:
            include = self._type_includes.get(step, "")
            if include:
                self._used_includes.add(include)
        return list(chain)

    def used_includes(self) -> list[str]:
        """Return, sorted, the include files of the types whose chains were used."""
        return sorted(self._used_includes)


def native_registry() -> TypeRegistry:
    """Create an empty registry for native wrapper types."""
    return TypeRegistry(NATIVE_BASE_TYPES)


def managed_registry(native: TypeRegistry) -> TypeRegistry:
    """Create an empty registry for managed types on top of a native one."""
    return TypeRegistry(MANAGED_BASE_TYPES, parent=native)