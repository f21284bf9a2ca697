from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, Request, UploadFile

from adapters.documents import (
    DocumentExtractionError,
    DocumentInputError,
    DocumentTooLargeError,
    detect_kind,
    ensure_within_limit,
    extract_text,
)
from common.compliance_engine import ComplianceScanner, UnknownRegulationError
from common.settings import AppSettings


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/compliance", tags=["compliance"])


def get_scanner(request: Request) -> ComplianceScanner:
    return request.app.state.scanner


def get_app_settings(request: Request) -> AppSettings:
    return request.app.state.settings


@router.post("/scan")
def compliance_scan(
    file: Optional[UploadFile] = File(None),
    regulation: Optional[List[str]] = Query(None),
    scanner: ComplianceScanner = Depends(get_scanner),
    settings: AppSettings = Depends(get_app_settings),
):
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded. Use form field 'file'.")

    try:
        kind = detect_kind(file.filename, file.content_type)
        # The body is already spooled; read one byte past the cap to detect oversize uploads.
        data = file.file.read(settings.max_upload_bytes + 1)
        ensure_within_limit(data, settings.max_upload_bytes)
        text = extract_text(data, kind)
    except DocumentTooLargeError as exc:
        raise HTTPException(status_code=413, detail=str(exc)) from exc
    except DocumentInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except DocumentExtractionError as exc:
        logger.error("Document extraction failed: filename=%s error=%s", file.filename, exc)
        raise HTTPException(status_code=500, detail=f"Scan failed: {exc}") from exc

    try:
        result = scanner.scan(text, regulations=regulation)
    except UnknownRegulationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    if result.faults:
        logger.warning(
            "Scan of %s completed with faulty clauses: %s",
            file.filename,
            ", ".join(f.clause_id for f in result.faults),
        )
    return result.to_response()


@router.get("/catalog")
def compliance_catalog(scanner: ComplianceScanner = Depends(get_scanner)):
    return scanner.catalog.model_dump(mode="json")
