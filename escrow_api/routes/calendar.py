from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from escrow_api.schemas import CalendarRequest, CalendarResponse
from escrow_api.settings import Settings, get_settings
from escrow_core.fields import build_form
from escrow_core.models import Range, Single
from escrow_core.pdf_export import render_calendar_pdf
from escrow_core.view import build_calendar_view

logger = logging.getLogger(__name__)

router = APIRouter()


def _form_from_request(payload: CalendarRequest):
    fixed_values = {
        "acceptance": Single(payload.acceptance),
        "inspection": Range(payload.inspection.start_date, payload.inspection.end_date),
        "loan_appraisal": Range(payload.loan_appraisal.start_date, payload.loan_appraisal.end_date),
    }
    custom = [(item.name, item.value) for item in payload.custom_fields]
    return build_form(payload.address, fixed_values, custom)


def _view_for(payload: CalendarRequest, settings: Settings):
    return build_calendar_view(
        _form_from_request(payload),
        conserve_days=settings.conserve_days,
        reject_extra_months=settings.reject_extra_months,
    )


@router.post("/v1/calendar/render", response_model=CalendarResponse)
async def render_calendar(payload: CalendarRequest, settings: Settings = Depends(get_settings)):
    view = _view_for(payload, settings)
    return view.to_payload()


@router.post("/v1/calendar/export")
async def export_calendar(payload: CalendarRequest, settings: Settings = Depends(get_settings)):
    view = _view_for(payload, settings)
    pdf_bytes = render_calendar_pdf(view)
    logger.info("Exported %s for %r", settings.pdf_filename, view.title)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{settings.pdf_filename}"'},
    )
