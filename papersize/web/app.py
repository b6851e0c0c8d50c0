from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any, Mapping
from uuid import uuid4

from fastapi import FastAPI, File, HTTPException, Query, Request, UploadFile
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from papersize.catalog.core import PaperCatalog, PaperRecord, build_catalog
from papersize.catalog.units import UNIT_NAMES, factor_for, to_points
from papersize.constants import PaperSettings
from papersize.events import log_event
from papersize.locale_paper import LocalePaperFacility, detect_locale_facility
from papersize.pdf_pages import identify_pages
from papersize.resolver import PaperResolver

_LOGGER = logging.getLogger("papersize.web")
_DEFAULT_UNIT = "pt"


def _validated_unit(unit: str) -> str:
    normalized = unit.strip().lower()
    if factor_for(normalized) is None:
        valid = ", ".join(UNIT_NAMES)
        raise HTTPException(status_code=400, detail=f"Unsupported unit '{unit}'. Choose one of: {valid}.")
    return normalized


def _paper_payload(record: PaperRecord, unit: str = _DEFAULT_UNIT) -> dict[str, Any]:
    width, height = record.size_in(unit)
    width_mm, height_mm = record.size_mm()
    return {
        "name": record.name,
        "width": width,
        "height": height,
        "unit": unit,
        "width_pt": record.width_pt,
        "height_pt": record.height_pt,
        "width_mm": width_mm,
        "height_mm": height_mm,
    }


def _read_pdf(payload: bytes, *, job_id: str, source_name: str) -> PdfReader:
    if not payload:
        log_event(_LOGGER, logging.WARNING, "web.identify.empty_upload", job_id=job_id, source_name=source_name)
        raise HTTPException(status_code=400, detail="The uploaded file is empty.")

    try:
        reader = PdfReader(io.BytesIO(payload))
    except PdfReadError as exc:
        log_event(
            _LOGGER,
            logging.WARNING,
            "web.identify.invalid_pdf",
            job_id=job_id,
            source_name=source_name,
            payload_bytes=len(payload),
            error=str(exc),
        )
        raise HTTPException(status_code=400, detail="The upload could not be parsed as a PDF.") from exc

    if reader.is_encrypted:
        log_event(_LOGGER, logging.WARNING, "web.identify.encrypted_pdf", job_id=job_id, source_name=source_name)
        raise HTTPException(status_code=400, detail="Encrypted PDFs are not supported. Remove encryption and retry.")

    return reader


def create_app(
    catalog: PaperCatalog | None = None,
    *,
    settings: PaperSettings | None = None,
    environ: Mapping[str, str] | None = None,
    locale_facility: LocalePaperFacility | None = None,
    detect_locale: bool = True,
) -> FastAPI:
    app = FastAPI(title="papersize", version="0.1.0")

    base_dir = Path(__file__).resolve().parent
    templates = Jinja2Templates(directory=str(base_dir / "templates"))

    resolved_settings = settings or PaperSettings()
    paper_catalog = catalog if catalog is not None else build_catalog(resolved_settings.spec_path)
    if locale_facility is None and detect_locale:
        locale_facility = detect_locale_facility()

    resolver = PaperResolver(
        paper_catalog,
        settings=resolved_settings,
        environ=environ,
        locale_facility=locale_facility,
    )
    app.state.catalog = paper_catalog
    app.state.resolver = resolver
    app.state.templates = templates

    def lookup_or_404(name: str) -> PaperRecord:
        record = paper_catalog.lookup_by_name(name)
        if record is None:
            log_event(_LOGGER, logging.INFO, "web.papers.not_found", name=name)
            raise HTTPException(status_code=404, detail=f"Unknown paper size '{name}'.")
        return record

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request, unit: str = Query("mm")) -> HTMLResponse:
        normalized_unit = _validated_unit(unit)
        return templates.TemplateResponse(
            request=request,
            name="index.html",
            context={
                "papers": [_paper_payload(record, normalized_unit) for record in paper_catalog],
                "unit": normalized_unit,
                "units": UNIT_NAMES,
                "default_name": resolver.default_name(),
                "system_name": resolver.system_name(),
            },
        )

    @app.get("/papers")
    def list_papers(unit: str = Query(_DEFAULT_UNIT)) -> list[dict[str, Any]]:
        normalized_unit = _validated_unit(unit)
        return [_paper_payload(record, normalized_unit) for record in paper_catalog]

    @app.get("/papers/lookup")
    def lookup_by_dimensions(
        width: float = Query(..., ge=0),
        height: float = Query(..., ge=0),
        unit: str = Query(_DEFAULT_UNIT),
    ) -> dict[str, Any]:
        normalized_unit = _validated_unit(unit)
        width_pt = width if normalized_unit == "pt" else to_points(width, normalized_unit)
        height_pt = height if normalized_unit == "pt" else to_points(height, normalized_unit)
        record = paper_catalog.lookup_by_dimensions(width_pt, height_pt)
        if record is None:
            log_event(_LOGGER, logging.INFO, "web.lookup.not_found", width_pt=width_pt, height_pt=height_pt)
            raise HTTPException(status_code=404, detail="No paper size has exactly these dimensions.")
        return _paper_payload(record, normalized_unit)

    @app.get("/papers/default")
    def default_paper() -> dict[str, Any]:
        name = resolver.default_name()
        record = paper_catalog.lookup_by_name(name)
        return {"name": name, "paper": None if record is None else _paper_payload(record)}

    @app.get("/papers/system")
    def system_paper() -> dict[str, Any]:
        name = resolver.system_name()
        record = paper_catalog.lookup_by_name(name)
        return {"name": name, "paper": None if record is None else _paper_payload(record)}

    @app.get("/papers/{name}")
    def get_paper(name: str, unit: str = Query(_DEFAULT_UNIT)) -> dict[str, Any]:
        normalized_unit = _validated_unit(unit)
        return _paper_payload(lookup_or_404(name), normalized_unit)

    @app.post("/identify")
    async def identify(file: UploadFile | None = File(default=None)) -> dict[str, Any]:
        job_id = uuid4().hex
        if file is None or not file.filename:
            log_event(_LOGGER, logging.WARNING, "web.identify.upload_missing", job_id=job_id)
            raise HTTPException(status_code=400, detail="Upload a PDF file to continue.")

        source_name = Path(file.filename).name
        if Path(source_name).suffix.lower() != ".pdf":
            log_event(_LOGGER, logging.WARNING, "web.identify.unsupported_upload", job_id=job_id, source_name=source_name)
            raise HTTPException(status_code=400, detail="Only .pdf uploads are supported.")

        payload = await file.read()
        reader = _read_pdf(payload, job_id=job_id, source_name=source_name)
        try:
            matches = identify_pages(reader, paper_catalog)
        except PdfReadError as exc:
            log_event(_LOGGER, logging.WARNING, "web.identify.invalid_pdf", job_id=job_id, source_name=source_name, error=str(exc))
            raise HTTPException(status_code=400, detail="The upload could not be parsed as a PDF.") from exc

        log_event(
            _LOGGER,
            logging.INFO,
            "web.identify.completed",
            job_id=job_id,
            source_name=source_name,
            pages=len(matches),
            unmatched=sum(1 for match in matches if match.paper is None),
        )
        return {
            "source_name": source_name,
            "page_count": len(matches),
            "pages": [
                {
                    "page_index": match.page_index,
                    "width_pt": match.width_pt,
                    "height_pt": match.height_pt,
                    "paper": match.paper_name,
                    "orientation": match.orientation,
                    "match": match.match,
                }
                for match in matches
            ],
        }

    return app


app = create_app()
