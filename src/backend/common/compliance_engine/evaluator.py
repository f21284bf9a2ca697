from __future__ import annotations

from .catalog import Clause
from .normalizer import NormalizedText


def evaluate(clause: Clause, text: NormalizedText) -> bool:
    """Return whether `clause` is satisfied by already-normalized `text`.

    Predicate errors are not caught here; the scanner decides how to isolate them.
    """
    return bool(clause.predicate.test(text))
