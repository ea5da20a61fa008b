"""Dashboard and report schemas: grouped counts over the pipeline."""

from datetime import date
from typing import Dict, List, Optional

from backend.app.schemas.common import CamelModel
from backend.app.schemas.event import EventRead


class PipelineTotals(CamelModel):
    leads: int
    students: int
    applications: int
    admissions: int


class PipelineBreakdown(CamelModel):
    totals: PipelineTotals
    leads_by_status: Dict[str, int]
    leads_by_source: Dict[str, int]
    leads_by_counselor: Dict[str, int]
    students_by_status: Dict[str, int]
    applications_by_status: Dict[str, int]
    applications_by_country: Dict[str, int]
    admissions_by_visa_status: Dict[str, int]


class DashboardSummary(PipelineBreakdown):
    period_start: date
    period_end: date
    upcoming_events: List[EventRead]


class ReportSummary(PipelineBreakdown):
    start: Optional[date] = None
    end: Optional[date] = None
    branch: Optional[str] = None
    counselor_id: Optional[int] = None
