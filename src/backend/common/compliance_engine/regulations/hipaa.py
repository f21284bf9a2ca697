from __future__ import annotations

from ..catalog import RegulationBuilder
from ..predicates import any_of, contains_all, contains_any
from ..registry import register_regulation


@register_regulation("HIPAA")
def define_hipaa(regulation: RegulationBuilder) -> None:
    regulation.clause(
        "HIPAA-Privacy",
        "Privacy Rule - PHI handling",
        contains_any("protected health information", "phi"),
        "State how Protected Health Information (PHI) is used, disclosed, and safeguarded.",
    )
    regulation.clause(
        "HIPAA-Security",
        "Security Rule - Safeguards",
        contains_any("encryption", "access control", "audit"),
        "Document administrative, physical, and technical safeguards "
        "(e.g., encryption, access controls, audits).",
    )
    # "breach notification" alone, or "breach" and "notify" anywhere in the text.
    regulation.clause(
        "HIPAA-Breach",
        "Breach Notification Rule",
        any_of(contains_all("breach notification"), contains_all("breach", "notify")),
        "Include breach notification procedures and timelines.",
    )
