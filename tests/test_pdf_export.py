"""
PDF export tests.

Tests:
1-2. generate_calculation_pdf returns a PDF document for both input forms
3.   Unicode in specifications/assumptions does not break latin-1 fonts
4.   format_number thousands separators
5-6. POST /api/calculate/*/pdf — content type, attachment filename, errors
"""

from scaffoldpro.calculators.inputs import AreaForm, DimensionForm, SideDimension
from scaffoldpro.calculators.mason_frame import MasonFrameCalculator
from scaffoldpro.pdf_generator import format_number, generate_calculation_pdf


def _result():
    form = DimensionForm(
        sides=(SideDimension(width=10.0, height=3.0),),
        frame_size="mason-frame-152x152",
        platform_length="platform-244",
        work_levels=2,
        building_sides=1,
    )
    return MasonFrameCalculator().from_dimensions(form)


def test_pdf_from_dimension_result():
    pdf = bytes(generate_calculation_pdf(_result(), {
        "sides": [{"width": 10.0, "height": 3.0}],
    }))
    assert pdf[:4] == b"%PDF"
    assert len(pdf) > 1000


def test_pdf_from_area_result_without_inputs():
    form = AreaForm(
        area=250.0, height=6.0,
        frame_size="mason-frame-193x152", platform_length="platform-305",
        work_levels=5, building_sides=4,
    )
    result = MasonFrameCalculator().from_area(form)
    pdf = bytes(generate_calculation_pdf(result))
    assert pdf[:4] == b"%PDF"


def test_pdf_handles_unicode_text():
    result = _result()
    result["assumptions"] = result["assumptions"] + ["Façade — 3 × 5 m bay “north”"]
    pdf = bytes(generate_calculation_pdf(result, {"area": 30.0, "height": 3.0}))
    assert pdf[:4] == b"%PDF"


def test_format_number():
    assert format_number(1515) == "1,515"
    assert format_number(1234567) == "1,234,567"
    assert format_number(29.73) == "29.73"
    assert format_number(675.0) == "675"
    assert format_number(None) == "0"


def test_pdf_endpoint_dimensions(client):
    resp = client.post("/api/calculate/dimensions/pdf", json={
        "sides": [{"width": 10, "height": 3}],
        "frame_size": "mason-frame-152x152",
        "platform_length": "platform-244",
        "work_levels": 2,
        "building_sides": 1,
    })
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert 'filename="scaffolding-calculation.pdf"' in resp.headers["content-disposition"]
    assert resp.content[:4] == b"%PDF"


def test_pdf_endpoint_area_validation_error(client):
    resp = client.post("/api/calculate/area/pdf", json={
        "area": -5,
        "height": 3,
        "frame_size": "mason-frame-152x152",
        "platform_length": "platform-244",
        "work_levels": 2,
    })
    assert resp.status_code == 400
    assert resp.json()["field"] == "area"
