"""
Pydantic models for the dashboard and reports endpoints.
"""

from datetime import date
from typing import Dict, List, Optional

from .common import ApiModel
from .followup import FollowUpRead
from .project import ProjectRead


class DashboardRead(ApiModel):
    """Counters shown on the dashboard landing page."""

    total_clients: int
    active_projects: int
    pending_follow_ups: int
    overdue_follow_ups: int
    total_revenue: float
    recent_projects: List[ProjectRead]
    pending_follow_ups_list: List[FollowUpRead]


class ClientRevenue(ApiModel):
    client_id: int
    client_name: str
    client_type: str
    project_count: int
    total_revenue: float


class ReportRead(ApiModel):
    """Aggregates behind the reports page.

    ``projectsInRange`` counts projects requested between ``startDate``
    and ``endDate`` inclusive; when a bound is omitted the range is open
    on that side.  Every other figure covers all records.
    """

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    client_type_counts: Dict[str, int]
    project_status_counts: Dict[str, int]
    projects_in_range: int
    pending_projects: int
    pending_follow_ups: int
    approval_rate: float
    total_revenue: float
    client_revenue: List[ClientRevenue]
