import json

from scripts.run_compliance_scan import main


def test_cli_writes_json_report_and_exits_nonzero_on_findings(tmp_path):
    doc = tmp_path / "policy.txt"
    doc.write_text("We rely on legitimate interests for processing and document our encryption controls.")
    out = tmp_path / "report.json"

    code = main([str(doc), "--output", str(out)])

    assert code == 1
    report = json.loads(out.read_text())
    assert report["totalFindings"] == 4
    assert [f["clauseId"] for f in report["findings"]] == [
        "GDPR-Article-5",
        "GDPR-Article-7",
        "HIPAA-Privacy",
        "HIPAA-Breach",
    ]


def test_cli_exits_zero_when_compliant(tmp_path, capsys):
    doc = tmp_path / "policy.txt"
    doc.write_text(
        "Purpose and minimization. Consent can be withdrawn. Encryption. PHI. Breach notification."
    )
    assert main([str(doc)]) == 0
    assert json.loads(capsys.readouterr().out) == {"ok": True, "totalFindings": 0, "findings": []}


def test_cli_markdown_output(tmp_path, capsys):
    doc = tmp_path / "notes.txt"
    doc.write_text("nothing relevant")
    assert main([str(doc), "--format", "markdown", "--regulation", "HIPAA"]) == 1
    out = capsys.readouterr().out
    assert "Total findings: 3" in out
    assert "| HIPAA | HIPAA-Breach | Breach Notification Rule |" in out


def test_cli_input_errors(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 2

    doc = tmp_path / "contract.docx"
    doc.write_bytes(b"PK")
    assert main([str(doc)]) == 2
    assert "Unsupported document type" in capsys.readouterr().err


def test_cli_custom_catalog(tmp_path, capsys):
    catalog = tmp_path / "catalog.json"
    catalog.write_text(
        json.dumps(
            {
                "version": "custom",
                "regulations": [
                    {
                        "name": "CCPA",
                        "clauses": [
                            {
                                "id": "CCPA-Opt-Out",
                                "title": "Right to opt out",
                                "predicate": {"kind": "contains_any", "keywords": ["do not sell"]},
                                "remediation": "Add a 'Do Not Sell' link.",
                            }
                        ],
                    }
                ],
            }
        )
    )
    doc = tmp_path / "notice.txt"
    doc.write_text("We honour Do Not Sell requests.")
    assert main([str(doc), "--catalog", str(catalog)]) == 0


def test_cli_missing_catalog_is_input_error(tmp_path, capsys):
    doc = tmp_path / "notice.txt"
    doc.write_text("anything")
    assert main([str(doc), "--catalog", str(tmp_path / "nope.json")]) == 2
    assert "Cannot read catalog file" in capsys.readouterr().err


def test_cli_malformed_catalog_is_input_error(tmp_path, capsys):
    doc = tmp_path / "notice.txt"
    doc.write_text("anything")
    catalog = tmp_path / "c.json"
    catalog.write_text("{not json")
    assert main([str(doc), "--catalog", str(catalog)]) == 2
    assert "Cannot read catalog file" in capsys.readouterr().err
