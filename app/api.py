"""HTTP route definitions for the service."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.schemas import (
    DailySummary,
    HourlyReading,
    HourlyReadingCreate,
    HourlyReadingList,
    Panel,
)
from services.analytics import (
    AnalyticsService,
    PanelAlreadyExistsError,
    PanelNotFoundError,
    build_default_service,
    reading_location,
)

router = APIRouter()


def get_service() -> AnalyticsService:
    return build_default_service()


@router.post(
    "/panel",
    status_code=status.HTTP_201_CREATED,
    response_model=Panel,
    summary="Register a solar panel.",
)
async def register_panel(
    panel: Panel,
    response: Response,
    service: AnalyticsService = Depends(get_service),
) -> Panel:
    try:
        created = service.register_panel(panel)
    except PanelAlreadyExistsError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(exc),
        ) from exc
    response.headers["Location"] = f"panel/{created.serial}"
    return created


@router.get(
    "/panel",
    response_model=List[Panel],
    summary="List registered panels.",
)
async def list_panels(service: AnalyticsService = Depends(get_service)) -> List[Panel]:
    return service.list_panels()


@router.get(
    "/panel/{panel_id}",
    response_model=Panel,
    summary="Fetch a registered panel.",
)
async def get_panel(
    panel_id: str,
    service: AnalyticsService = Depends(get_service),
) -> Panel:
    try:
        return service.get_panel(panel_id)
    except PanelNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc


@router.get(
    "/panel/{panel_id}/analytics",
    response_model=HourlyReadingList,
    summary="List the hourly readings recorded for a panel.",
)
async def get_readings(
    panel_id: str,
    service: AnalyticsService = Depends(get_service),
) -> HourlyReadingList:
    try:
        readings = service.list_readings(panel_id)
    except PanelNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return HourlyReadingList(readings=readings)


@router.get(
    "/panel/{panel_id}/analytics/day",
    response_model=List[DailySummary],
    summary="Per-day minimum, maximum, sum and average for a panel.",
)
async def get_daily_summaries(
    panel_id: str,
    service: AnalyticsService = Depends(get_service),
) -> List[DailySummary]:
    try:
        return service.daily_summaries(panel_id)
    except PanelNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc


@router.post(
    "/panel/{panel_id}/analytics",
    status_code=status.HTTP_201_CREATED,
    response_model=HourlyReading,
    summary="Record one hour of generated power for a panel.",
)
async def post_reading(
    panel_id: str,
    payload: HourlyReadingCreate,
    response: Response,
    service: AnalyticsService = Depends(get_service),
) -> HourlyReading:
    reading = service.record_reading(panel_id, payload)
    response.headers["Location"] = reading_location(panel_id, reading.id)
    return reading


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /health for service status."}
