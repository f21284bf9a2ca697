from __future__ import annotations

from typing import Callable, Dict, Iterable

from .catalog import DEFAULT_CATALOG_VERSION, CatalogBuilder, RegulationCatalog, RegulationBuilder

RegulationDefinition = Callable[[RegulationBuilder], None]


class RegulationRegistry:
    def __init__(self):
        self._definitions: Dict[str, RegulationDefinition] = {}

    def register(self, name: str, definition: RegulationDefinition) -> None:
        if not name:
            raise ValueError("Regulation definition missing name")
        if name in self._definitions:
            raise ValueError(f"Duplicate regulation registered: {name}")
        self._definitions[name] = definition

    def names(self) -> Iterable[str]:
        return self._definitions.keys()

    def build_catalog(self, *, version: str = DEFAULT_CATALOG_VERSION) -> RegulationCatalog:
        builder = CatalogBuilder(version=version)
        for name, definition in self._definitions.items():
            definition(builder.regulation(name))
        return builder.build()


registry = RegulationRegistry()


def register_regulation(name: str) -> Callable[[RegulationDefinition], RegulationDefinition]:
    def _decorator(definition: RegulationDefinition) -> RegulationDefinition:
        registry.register(name, definition)
        return definition

    return _decorator


def build_default_catalog() -> RegulationCatalog:
    # Ensure built-in regulations are imported/registered before building.
    from . import regulations as _builtin_regulations  # noqa: F401

    return registry.build_catalog()
