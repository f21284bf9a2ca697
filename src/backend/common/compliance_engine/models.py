from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class Finding(BaseModel):
    """One clause that was not satisfied by the scanned document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    regulation: str
    clause_id: str = Field(alias="clauseId")
    clause_title: str = Field(alias="clauseTitle")
    remediation: str


class ClauseFault(BaseModel):
    """A clause whose predicate raised during evaluation.

    Faults are kept apart from findings so operators can tell a broken catalog
    entry from a document that genuinely misses the clause.
    """

    model_config = ConfigDict(frozen=True)

    regulation: str
    clause_id: str
    error: str


class ScanResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ok: bool
    total_findings: int = Field(alias="totalFindings", ge=0)
    findings: List[Finding] = Field(default_factory=list)
    faults: List[ClauseFault] = Field(default_factory=list, exclude=True)

    @classmethod
    def from_findings(
        cls,
        findings: List[Finding],
        faults: List[ClauseFault] | None = None,
    ) -> "ScanResult":
        return cls(
            ok=len(findings) == 0,
            total_findings=len(findings),
            findings=list(findings),
            faults=list(faults or []),
        )

    def clause_ids(self) -> List[str]:
        return [f.clause_id for f in self.findings]

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
