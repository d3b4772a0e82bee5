"""
Create and list use cases for incident reports.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Report
from utils.result import ErrorKind, Failure, Result, Success
from utils.schemas import ReportOut, ReportRequest
from utils.validators import validate_report

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ReportService:
    def __init__(
        self,
        session: AsyncSession,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.session = session
        self.clock = clock

    async def create_report(self, req: ReportRequest) -> Result:
        """Store a report stamped with the current time and return it as stored."""
        checked = validate_report(req)
        if not checked.ok:
            return checked

        report = Report(
            type=req.type,
            location=req.location,
            description=req.description,
            contact=req.contact,
            severity=req.severity,
            timestamp=self.clock(),
        )
        try:
            self.session.add(report)
            await self.session.commit()
            # Re-read so the returned timestamp matches what listings return.
            await self.session.refresh(report)
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.exception("Error submitting report")
            return Failure(ErrorKind.INTERNAL, "Failed to submit report", details=str(exc))

        logger.info("Report %s submitted (type=%s)", report.report_id, report.type)
        return Success(ReportOut.model_validate(report))

    async def list_reports(self, type_filter: Optional[str] = None) -> Result:
        """All reports, or only those whose type equals ``type_filter``, newest first."""
        stmt = select(Report)
        if type_filter:
            stmt = stmt.where(Report.type == type_filter)
        stmt = stmt.order_by(Report.timestamp.desc())

        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.exception("Error fetching reports")
            return Failure(ErrorKind.INTERNAL, "Failed to fetch reports", details=str(exc))

        reports: List[ReportOut] = [
            ReportOut.model_validate(row) for row in result.scalars().all()
        ]
        return Success(reports)
