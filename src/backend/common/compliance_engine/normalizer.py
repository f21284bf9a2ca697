from __future__ import annotations

from typing import NewType, Optional

NormalizedText = NewType("NormalizedText", str)


def normalize(raw_text: Optional[str]) -> NormalizedText:
    """Lowercase extracted document text for case-insensitive keyword matching.

    Tokens are left intact (no stemming, no punctuation stripping) so that
    multi-word keywords such as "legal obligation" still match.
    """
    if not raw_text:
        return NormalizedText("")
    return NormalizedText(raw_text.lower())
