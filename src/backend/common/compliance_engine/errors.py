from __future__ import annotations


class ComplianceEngineError(Exception):
    """Base class for compliance engine errors."""


class CatalogConstructionError(ComplianceEngineError, ValueError):
    """Raised while building a catalog (duplicate ids, empty names, bad predicates)."""


class UnknownRegulationError(ComplianceEngineError, ValueError):
    def __init__(self, names: list[str]):
        super().__init__(f"Unknown regulation(s): {', '.join(names)}")
        self.names = names
