from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import CatalogConstructionError
from .predicates import Predicate

DEFAULT_CATALOG_VERSION = "2024.1"


class Clause(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    title: str
    predicate: Predicate
    remediation: str


class Regulation(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    clauses: Tuple[Clause, ...] = ()


class RegulationCatalog(BaseModel):
    """Ordered, immutable set of regulations and their clauses.

    Built once at process start and shared read-only by every scan.
    """

    model_config = ConfigDict(frozen=True)

    version: str = DEFAULT_CATALOG_VERSION
    regulations: Tuple[Regulation, ...] = ()

    @model_validator(mode="after")
    def check_unique_keys(self) -> "RegulationCatalog":
        seen_names: set[str] = set()
        seen_ids: set[str] = set()
        for regulation in self.regulations:
            if regulation.name in seen_names:
                raise ValueError(f"Duplicate regulation name: {regulation.name}")
            seen_names.add(regulation.name)
            for clause in regulation.clauses:
                if clause.id in seen_ids:
                    raise ValueError(f"Duplicate clause id: {clause.id}")
                seen_ids.add(clause.id)
        return self

    def iter_clauses(self) -> Iterator[Tuple[Regulation, Clause]]:
        for regulation in self.regulations:
            for clause in regulation.clauses:
                yield regulation, clause

    def clause_ids(self) -> List[str]:
        return [clause.id for _, clause in self.iter_clauses()]

    def regulation_names(self) -> List[str]:
        return [r.name for r in self.regulations]

    def clause_count(self) -> int:
        return sum(len(r.clauses) for r in self.regulations)

    def select(self, names: List[str]) -> "RegulationCatalog":
        """Return a catalog restricted to `names`, keeping catalog order."""
        wanted = set(names)
        return RegulationCatalog(
            version=self.version,
            regulations=tuple(r for r in self.regulations if r.name in wanted),
        )


class RegulationBuilder:
    def __init__(self, parent: "CatalogBuilder", name: str):
        self._parent = parent
        self.name = name
        self.clauses: List[Clause] = []

    def clause(
        self,
        clause_id: str,
        title: str,
        predicate: Any,
        remediation: str,
    ) -> "RegulationBuilder":
        try:
            clause = Clause(id=clause_id, title=title, predicate=predicate, remediation=remediation)
        except ValidationError as exc:
            raise CatalogConstructionError(f"Invalid clause {clause_id!r}: {exc}") from exc
        self._parent._claim_clause_id(clause_id)
        self.clauses.append(clause)
        return self


class CatalogBuilder:
    """Declarative construction of a `RegulationCatalog`.

    Clause ids are checked as they are added, so a duplicate fails at the
    offending `clause(...)` call rather than at scan time.
    """

    def __init__(self, *, version: str = DEFAULT_CATALOG_VERSION):
        self.version = version
        self._regulations: Dict[str, RegulationBuilder] = {}
        self._clause_ids: set[str] = set()

    def regulation(self, name: str) -> RegulationBuilder:
        if not name:
            raise CatalogConstructionError("Regulation name must be non-empty.")
        if name not in self._regulations:
            self._regulations[name] = RegulationBuilder(self, name)
        return self._regulations[name]

    def _claim_clause_id(self, clause_id: str) -> None:
        if not clause_id:
            raise CatalogConstructionError("Clause id must be non-empty.")
        if clause_id in self._clause_ids:
            raise CatalogConstructionError(f"Duplicate clause id: {clause_id}")
        self._clause_ids.add(clause_id)

    def build(self) -> RegulationCatalog:
        return RegulationCatalog(
            version=self.version,
            regulations=tuple(
                Regulation(name=b.name, clauses=tuple(b.clauses))
                for b in self._regulations.values()
            ),
        )


def catalog_from_dict(raw: Dict[str, Any]) -> RegulationCatalog:
    try:
        return RegulationCatalog.model_validate(raw)
    except ValidationError as exc:
        raise CatalogConstructionError(f"Invalid catalog: {exc}") from exc


def load_catalog(path: str | Path) -> RegulationCatalog:
    """Load a catalog from a `.json`, `.yaml` or `.yml` file."""
    import yaml

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() in (".yaml", ".yml"):
            raw = yaml.safe_load(text)
        else:
            raw = json.loads(text)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise CatalogConstructionError(f"Cannot read catalog file {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise CatalogConstructionError(f"Catalog file {path} must contain a mapping.")
    return catalog_from_dict(raw)


def dump_catalog(catalog: RegulationCatalog, fmt: str = "yaml") -> str:
    data = catalog.model_dump(mode="json")
    if fmt == "json":
        return json.dumps(data, indent=2)
    import yaml

    return yaml.safe_dump(data, sort_keys=False)


def main(argv: list[str] | None = None) -> None:
    from .registry import build_default_catalog

    parser = argparse.ArgumentParser(description="Print the built-in regulation catalog.")
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml).",
    )
    args = parser.parse_args(argv)
    print(dump_catalog(build_default_catalog(), args.format))


if __name__ == "__main__":
    main()
