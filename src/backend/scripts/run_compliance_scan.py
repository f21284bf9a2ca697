from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path


def _ensure_backend_on_path() -> None:
    backend_dir = Path(__file__).resolve().parents[1]
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))


_ensure_backend_on_path()

from adapters.documents import DocumentExtractionError, DocumentInputError, detect_kind, extract_text  # noqa: E402
from common.compliance_engine import (  # noqa: E402
    CatalogConstructionError,
    ComplianceScanner,
    ScanResult,
    UnknownRegulationError,
    build_default_catalog,
    load_catalog,
)
from common.logging_config import configure_logging  # noqa: E402


def _render_markdown(result: ScanResult, source: str) -> str:
    lines = [
        f"# Compliance Scan: {source}",
        "",
        f"Status: {'OK' if result.ok else 'ISSUES FOUND'}",
        f"Total findings: {result.total_findings}",
    ]
    if result.findings:
        lines.append("")
        lines.append("| Regulation | Clause | Title | Recommended Fix |")
        lines.append("|---|---|---|---|")
        for f in result.findings:
            lines.append(f"| {f.regulation} | {f.clause_id} | {f.clause_title} | {f.remediation} |")
    if result.faults:
        lines.append("")
        lines.append("## Clause errors")
        for fault in result.faults:
            lines.append(f"- {fault.clause_id} ({fault.regulation}): {fault.error}")
    return "\n".join(lines) + "\n"


def scan_file(path: Path, *, regulations: list[str] | None = None, catalog_path: str | None = None) -> ScanResult:
    catalog = load_catalog(catalog_path) if catalog_path else build_default_catalog()
    kind = detect_kind(path.name)
    text = extract_text(path.read_bytes(), kind)
    return ComplianceScanner(catalog).scan(text, regulations=regulations)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Scan a .txt or .pdf document for GDPR/HIPAA clause coverage."
    )
    parser.add_argument("file", help="Path to the document to scan.")
    parser.add_argument(
        "--format",
        choices=("json", "markdown"),
        default="json",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Write the report to this path instead of stdout.",
    )
    parser.add_argument(
        "--regulation",
        action="append",
        default=None,
        help="Restrict the scan to a regulation (repeatable, e.g. --regulation GDPR).",
    )
    parser.add_argument(
        "--catalog",
        default=None,
        help="JSON/YAML catalog file to use instead of the built-in catalog.",
    )
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING).")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    path = Path(args.file)
    if not path.is_file():
        print(f"File not found: {path}", file=sys.stderr)
        return 2

    try:
        result = scan_file(path, regulations=args.regulation, catalog_path=args.catalog)
    except (DocumentInputError, UnknownRegulationError, CatalogConstructionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except DocumentExtractionError as exc:
        print(f"Scan failed: {exc}", file=sys.stderr)
        return 3

    if args.format == "markdown":
        rendered = _render_markdown(result, path.name)
    else:
        rendered = json.dumps(result.to_response(), indent=2) + "\n"

    if args.output:
        Path(args.output).write_text(rendered, encoding="utf-8")
        print(f"Wrote {args.output}")
    else:
        sys.stdout.write(rendered)

    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
