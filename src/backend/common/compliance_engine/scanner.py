from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Tuple

from .catalog import Clause, Regulation, RegulationCatalog, load_catalog
from .config import ScanConfig
from .errors import UnknownRegulationError
from .evaluator import evaluate
from .models import ClauseFault, Finding, ScanResult
from .normalizer import NormalizedText, normalize

logger = logging.getLogger(__name__)


class ComplianceScanner:
    def __init__(self, catalog: RegulationCatalog, *, max_workers: int = 1):
        self._catalog = catalog
        self._max_workers = max(1, int(max_workers))

    @classmethod
    def from_config(cls, config: ScanConfig) -> "ComplianceScanner":
        if config.catalog_path:
            catalog = load_catalog(config.catalog_path)
        else:
            from .registry import build_default_catalog

            catalog = build_default_catalog()
        if config.regulations:
            catalog = _restrict(catalog, config.regulations)
        return cls(catalog, max_workers=config.max_workers)

    @property
    def catalog(self) -> RegulationCatalog:
        return self._catalog

    def scan(self, raw_text: Optional[str], *, regulations: Optional[Iterable[str]] = None) -> ScanResult:
        catalog = self._select(regulations)
        text = normalize(raw_text)
        pairs = list(catalog.iter_clauses())

        if self._max_workers > 1 and len(pairs) > 1:
            with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
                outcomes = list(pool.map(lambda pair: _check(pair, text), pairs))
        else:
            outcomes = [_check(pair, text) for pair in pairs]

        findings: List[Finding] = []
        faults: List[ClauseFault] = []
        for (regulation, clause), (satisfied, fault) in zip(pairs, outcomes):
            if fault is not None:
                faults.append(fault)
            if not satisfied:
                findings.append(
                    Finding(
                        regulation=regulation.name,
                        clause_id=clause.id,
                        clause_title=clause.title,
                        remediation=clause.remediation,
                    )
                )

        result = ScanResult.from_findings(findings, faults)
        logger.info(
            "Compliance scan finished: catalog=%s clauses=%d findings=%d faults=%d",
            catalog.version,
            len(pairs),
            result.total_findings,
            len(faults),
        )
        return result

    def _select(self, regulations: Optional[Iterable[str]]) -> RegulationCatalog:
        if regulations is None:
            return self._catalog
        names = list(regulations)
        if not names:
            return self._catalog
        return _restrict(self._catalog, names)


def _restrict(catalog: RegulationCatalog, names: List[str]) -> RegulationCatalog:
    known = set(catalog.regulation_names())
    unknown = [n for n in names if n not in known]
    if unknown:
        raise UnknownRegulationError(unknown)
    return catalog.select(names)


def _check(pair: Tuple[Regulation, Clause], text: NormalizedText) -> Tuple[bool, Optional[ClauseFault]]:
    regulation, clause = pair
    try:
        return evaluate(clause, text), None
    except Exception as exc:
        # Count a broken predicate as unsatisfied so the clause is still reported.
        logger.exception("Clause predicate failed: regulation=%s clause=%s", regulation.name, clause.id)
        return False, ClauseFault(regulation=regulation.name, clause_id=clause.id, error=repr(exc))


def scan(catalog: RegulationCatalog, raw_text: Optional[str]) -> ScanResult:
    return ComplianceScanner(catalog).scan(raw_text)
