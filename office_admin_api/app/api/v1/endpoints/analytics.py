"""
Analytics endpoints for API v1.

``/analytics/dashboard`` feeds the landing page counters and
``/analytics/reports`` the reports page.  Both are recomputed on every
request.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from office_admin_api.app.core.security import get_current_user
from office_admin_api.app.core.store import Store, get_store
from office_admin_api.app.schemas.analytics import DashboardRead, ReportRead
from office_admin_api.app.services.analytics_service import AnalyticsService

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/dashboard", response_model=DashboardRead)
async def dashboard(store: Store = Depends(get_store)) -> DashboardRead:
    return await AnalyticsService.dashboard(store)


@router.get("/reports", response_model=ReportRead)
async def reports(
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    store: Store = Depends(get_store),
) -> ReportRead:
    """Return report figures.

    ``startDate`` and ``endDate`` (ISO dates, inclusive) limit which
    projects count towards ``projectsInRange``.
    """
    return await AnalyticsService.report(store, start_date=start_date, end_date=end_date)
