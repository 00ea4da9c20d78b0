from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.api import get_service
from services.analytics import AnalyticsService, PanelNotFoundError


templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))


router = APIRouter(include_in_schema=False)


@router.get("/ui", name="ui_index", response_class=HTMLResponse)
async def ui_index(
    request: Request,
    service: AnalyticsService = Depends(get_service),
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "ui/index.html",
        {"panels": service.list_panels()},
    )


@router.get("/ui/panels/{panel_id}", name="ui_panel_detail", response_class=HTMLResponse)
async def ui_panel_detail(
    request: Request,
    panel_id: str,
    service: AnalyticsService = Depends(get_service),
) -> HTMLResponse:
    try:
        panel = service.get_panel(panel_id)
        summaries = service.daily_summaries(panel_id)
        readings = service.list_readings(panel_id)
    except PanelNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc

    return templates.TemplateResponse(
        request,
        "ui/panel.html",
        {
            "panel": panel,
            "summaries": summaries,
            "readings": sorted(readings, key=lambda reading: reading.date_time),
        },
    )
