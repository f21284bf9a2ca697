import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import common...` work.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest

from common.compliance_engine import CatalogBuilder, Clause, Regulation, RegulationCatalog, build_default_catalog
from common.compliance_engine.predicates import contains_any


class ExplodingPredicate:
    """Stand-in predicate whose evaluation always fails."""

    def test(self, text: str) -> bool:
        raise RuntimeError("predicate blew up")

    def keyword_set(self) -> set[str]:
        return set()


@pytest.fixture
def reference_clause_ids() -> list[str]:
    return [
        "GDPR-Article-5",
        "GDPR-Article-6",
        "GDPR-Article-7",
        "HIPAA-Privacy",
        "HIPAA-Security",
        "HIPAA-Breach",
    ]


@pytest.fixture
def default_catalog() -> RegulationCatalog:
    return build_default_catalog()


@pytest.fixture
def make_catalog():
    def _make(layout: dict[str, list[str]]) -> RegulationCatalog:
        """Build a catalog where each clause id is satisfied by its lowercased id as keyword."""
        builder = CatalogBuilder(version="test")
        for name, clause_ids in layout.items():
            regulation = builder.regulation(name)
            for clause_id in clause_ids:
                regulation.clause(
                    clause_id,
                    f"{clause_id} title",
                    contains_any(clause_id),
                    f"Fix {clause_id}.",
                )
        return builder.build()

    return _make


@pytest.fixture
def make_faulty_catalog():
    def _make() -> RegulationCatalog:
        broken = Clause.model_construct(
            id="BROKEN-1",
            title="Broken clause",
            predicate=ExplodingPredicate(),
            remediation="Fix the catalog entry.",
        )
        healthy = Clause(
            id="OK-1",
            title="Healthy clause",
            predicate=contains_any("policy"),
            remediation="Add a policy.",
        )
        trailing = Clause(
            id="OK-2",
            title="Another healthy clause",
            predicate=contains_any("retention"),
            remediation="Describe retention.",
        )
        return RegulationCatalog(
            version="test",
            regulations=(Regulation(name="TEST", clauses=(healthy, broken, trailing)),),
        )

    return _make
