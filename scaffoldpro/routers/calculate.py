"""
Calculator endpoints.

POST /api/calculate/dimensions      — per-side width/height form
POST /api/calculate/area            — total area + height form
POST /api/calculate/dimensions/pdf  — same, as a downloadable PDF
POST /api/calculate/area/pdf        — same, as a downloadable PDF

Engine ValidationError / UnknownCatalogKey are mapped to 400 by the
exception handlers in main.py.
"""

from fastapi import APIRouter
from fastapi.responses import Response

from .. import schemas
from ..calculators.registry import calculate
from ..pdf_generator import generate_calculation_pdf

router = APIRouter(prefix="/calculate", tags=["calculate"])

PDF_FILENAME = "scaffolding-calculation.pdf"


def _run(request) -> dict:
    return calculate(request.to_form(), request.to_policy())


def _pdf_response(result: dict, request) -> Response:
    inputs = request.model_dump(exclude_none=True)
    # Convert bytearray to bytes for Response compatibility
    pdf_bytes = bytes(generate_calculation_pdf(result, inputs))
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{PDF_FILENAME}"',
        },
    )


@router.post("/dimensions", response_model=schemas.CalculationResult)
def calculate_from_dimensions(request: schemas.DimensionsRequest):
    return _run(request)


@router.post("/area", response_model=schemas.CalculationResult)
def calculate_from_area(request: schemas.AreaRequest):
    return _run(request)


@router.post("/dimensions/pdf")
def export_dimensions_pdf(request: schemas.DimensionsRequest):
    return _pdf_response(_run(request), request)


@router.post("/area/pdf")
def export_area_pdf(request: schemas.AreaRequest):
    return _pdf_response(_run(request), request)
