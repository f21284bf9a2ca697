"""Lexical compliance checks for extracted document text.

This package intentionally contains only domain logic:
- Inputs are plain text plus an immutable regulation catalog.
- No HTTP, PDF parsing, or provider calls live here.
"""

from .catalog import (
    CatalogBuilder,
    Clause,
    Regulation,
    RegulationCatalog,
    dump_catalog,
    load_catalog,
)
from .errors import CatalogConstructionError, ComplianceEngineError, UnknownRegulationError
from .evaluator import evaluate
from .models import ClauseFault, Finding, ScanResult
from .normalizer import NormalizedText, normalize
from .registry import build_default_catalog, register_regulation
from .scanner import ComplianceScanner, scan
