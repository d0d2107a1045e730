import random
from typing import Optional

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status
from fastapi.responses import Response
from pydantic import ValidationError

from stamplayout.core.config import get_settings
from stamplayout.core.errors import InvalidConfiguration, PDFProcessingError
from stamplayout.core.logging import configure_logging
from stamplayout.models import WatermarkConfig, WatermarkConfigPayload, WatermarkLayoutRequest
from stamplayout.services.generator import preview_layout
from stamplayout.services.pdf_service import WatermarkPDFService, estimate_rendering_time
from stamplayout.services.renderer import available_fonts
from stamplayout.services.summary import summarize_config
from stamplayout.services.validator import detect_overlaps, validate_config, validate_layout
from stamplayout.utils.file_utils import ensure_pdf, output_filename

router = APIRouter(prefix="/watermark", tags=["Watermark Layout"])

logger = configure_logging(__name__)
pdf_service = WatermarkPDFService()


def _rng(seed: Optional[int]) -> random.Random:
    # One base source per request; never shared between requests.
    return random.Random(seed) if seed is not None else random.Random()


def _to_config(payload: WatermarkConfigPayload) -> WatermarkConfig:
    try:
        return payload.to_config()
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail={"errors": [str(exc)]})


def _reject(errors: list[str]) -> HTTPException:
    logger.warning("Watermark configuration rejected: %s", errors)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail={"errors": errors})


@router.get("/fonts", summary="List the fonts available for watermark text")
async def list_fonts() -> dict:
    return {"fonts": available_fonts()}


@router.post("/preview", summary="Resolve a configuration into a concrete watermark layout")
async def preview(payload: WatermarkLayoutRequest) -> dict:
    page = payload.page.to_dimensions()
    config = _to_config(payload.config)

    errors = validate_config(config, page)
    if errors:
        raise _reject(errors)

    layout = preview_layout(page, config, rng=_rng(payload.seed))
    summary = summarize_config(config)
    overlaps = detect_overlaps(layout.watermarks)

    return {
        "status": "ok",
        "layout": layout.to_card(),
        "overlaps": [list(pair) for pair in overlaps],
        "summary": {
            "position": summary.position_summary,
            "orientation": summary.orientation_summary,
            "font_size": summary.font_size_summary,
            "color": summary.color_summary,
            "quantity": summary.quantity_summary,
            "estimated_processing_time": summary.estimated_processing_time,
            "warnings": summary.warnings,
            "recommendations": summary.recommendations,
        },
    }


@router.post("/validate", summary="Check a configuration against a page size")
async def validate(payload: WatermarkLayoutRequest) -> dict:
    page = payload.page.to_dimensions()
    config = _to_config(payload.config)
    result = validate_layout(page, config, rng=_rng(payload.seed))
    return {"status": "ok", "result": result.to_card()}


@router.post("/apply", summary="Apply a watermark configuration to every page of a PDF")
def apply(
    file: UploadFile = File(...),
    config: str = Form(..., description="Watermark configuration as JSON."),
    seed: Optional[int] = Form(None),
) -> Response:
    # Blocking PDF work; FastAPI runs sync endpoints in its threadpool.
    ensure_pdf(file)
    try:
        payload = WatermarkConfigPayload.model_validate_json(config)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"errors": [error["msg"] for error in exc.errors()]},
        )
    watermark_config = _to_config(payload)

    settings = get_settings()
    data = file.file.read(settings.max_upload_bytes + 1)
    if len(data) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds the {settings.max_upload_mb} MB upload limit.",
        )

    try:
        reader = pdf_service.read(data)
        page_count = len(reader.pages)
        logger.info(
            "Watermarking %s (%d pages, estimated %d ms)",
            file.filename,
            page_count,
            estimate_rendering_time(page_count, watermark_config.quantity),
        )
        result = pdf_service.stamp_document(reader, watermark_config, rng=_rng(seed))
    except InvalidConfiguration as exc:
        raise _reject(exc.errors)
    except PDFProcessingError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))

    name = output_filename(file.filename)
    return Response(
        content=result,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{name}"'},
    )
