"""
Report API routes — submit, list.

Route prefix: /api/reports
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from api.dependencies import get_report_service
from reports.service import ReportService
from utils.result import ErrorKind
from utils.schemas import ReportRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["reports"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_report(
    req: ReportRequest,
    service: ReportService = Depends(get_report_service),
) -> JSONResponse:
    """Submit an incident report."""
    result = await service.create_report(req)
    if not result.ok:
        content = {"error": result.message}
        # This path has always echoed the store error to the client.
        if result.kind is ErrorKind.INTERNAL:
            content["details"] = result.details
        return JSONResponse(status_code=result.status_code, content=content)

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={"message": "Report submitted successfully", "report": result.value.to_json()},
    )


@router.get("")
async def list_reports(
    type_: Optional[str] = Query(None, alias="type"),
    service: ReportService = Depends(get_report_service),
) -> JSONResponse:
    """List reports newest first, optionally only those of one type."""
    result = await service.list_reports(type_)
    if not result.ok:
        return JSONResponse(status_code=result.status_code, content={"error": result.message})
    return JSONResponse(content=[report.to_json() for report in result.value])
