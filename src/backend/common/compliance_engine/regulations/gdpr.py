from __future__ import annotations

from ..catalog import RegulationBuilder
from ..predicates import all_of, contains_all, contains_any
from ..registry import register_regulation

LAWFUL_BASES = (
    "consent",
    "contract",
    "legal obligation",
    "vital interests",
    "public task",
    "legitimate interests",
)


@register_regulation("GDPR")
def define_gdpr(regulation: RegulationBuilder) -> None:
    regulation.clause(
        "GDPR-Article-5",
        "Principles relating to processing of personal data",
        all_of(contains_all("purpose"), contains_any("minimization", "minimize")),
        "Document purpose limitation and data minimization practices.",
    )
    regulation.clause(
        "GDPR-Article-6",
        "Lawfulness of processing",
        contains_any(*LAWFUL_BASES),
        "Specify a lawful basis for processing (e.g., consent, contract, legitimate interests).",
    )
    regulation.clause(
        "GDPR-Article-7",
        "Conditions for consent",
        all_of(contains_all("consent"), contains_any("withdraw", "withdrawal")),
        "Describe how consent is obtained and how users can withdraw consent.",
    )
