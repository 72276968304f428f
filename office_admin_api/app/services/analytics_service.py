"""
Service layer for dashboard counters and reports.

Every figure is recomputed from the clients, projects and follow-ups on
each call; nothing is cached.  Sorting and filtering happen in Python
over the full tables, which is fine for the volumes a small business
produces.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Any, Dict, List, Optional

from office_admin_api.app.core.store import Store
from office_admin_api.app.schemas.analytics import ClientRevenue, DashboardRead, ReportRead
from office_admin_api.app.schemas.common import ClientType, FollowUpStatus, ProjectStatus
from office_admin_api.app.schemas.followup import FollowUpRead
from office_admin_api.app.schemas.project import ProjectRead


DASHBOARD_LIST_SIZE = 5


def is_overdue(followup: Dict[str, Any], now: datetime) -> bool:
    """Whether a follow-up is Pending and its due date has passed.

    A due date stands for midnight UTC at the start of that day, so a
    task due today is already overdue once the day has begun.
    """
    if followup["status"] != FollowUpStatus.PENDING.value:
        return False
    due = datetime.combine(followup["due_date"], time.min, tzinfo=timezone.utc)
    return due < now


class AnalyticsService:
    """Service providing aggregated figures for the dashboard and reports."""

    @classmethod
    async def dashboard(cls, store: Store, now: Optional[datetime] = None) -> DashboardRead:
        """Return the dashboard counters.

        Parameters
        ----------
        store : Store
            Store to aggregate.
        now : datetime, optional
            Reference time for the overdue check.  Defaults to the
            current UTC time; naive values are taken as UTC.
        """
        current_time = now or datetime.now(timezone.utc)
        if current_time.tzinfo is None:
            current_time = current_time.replace(tzinfo=timezone.utc)

        projects = store.projects.all()
        followups = store.followups.all()
        pending = [f for f in followups if f["status"] == FollowUpStatus.PENDING.value]

        recent = sorted(projects, key=lambda p: p["date_requested"], reverse=True)[:DASHBOARD_LIST_SIZE]
        soonest = sorted(pending, key=lambda f: f["due_date"])[:DASHBOARD_LIST_SIZE]

        return DashboardRead(
            total_clients=len(store.clients),
            active_projects=sum(1 for p in projects if p["status"] == ProjectStatus.IN_PROGRESS.value),
            pending_follow_ups=len(pending),
            overdue_follow_ups=sum(1 for f in pending if is_overdue(f, current_time)),
            total_revenue=sum(p["price"] for p in projects),
            recent_projects=[ProjectRead.model_validate(p) for p in recent],
            pending_follow_ups_list=[FollowUpRead.model_validate(f) for f in soonest],
        )

    @classmethod
    async def report(
        cls,
        store: Store,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> ReportRead:
        """Return the figures shown on the reports page.

        ``start_date`` and ``end_date`` bound (inclusively) only the
        ``projects_in_range`` count.  The approval rate is the share of
        Completed projects among those no longer Pending, in percent.
        """
        clients = store.clients.all()
        projects = store.projects.all()
        followups = store.followups.all()

        client_type_counts = {t.value: 0 for t in ClientType}
        for client in clients:
            client_type_counts[client["client_type"]] = client_type_counts.get(client["client_type"], 0) + 1

        status_counts = {s.value: 0 for s in ProjectStatus}
        for project in projects:
            status_counts[project["status"]] = status_counts.get(project["status"], 0) + 1

        in_range = [
            p
            for p in projects
            if (start_date is None or p["date_requested"] >= start_date)
            and (end_date is None or p["date_requested"] <= end_date)
        ]

        sent = len(projects) - status_counts[ProjectStatus.PENDING.value]
        completed = status_counts[ProjectStatus.COMPLETED.value]
        approval_rate = completed / sent * 100 if sent > 0 else 0.0

        client_revenue: List[ClientRevenue] = []
        for client in clients:
            owned = [p for p in projects if p["client_id"] == client["id"]]
            client_revenue.append(
                ClientRevenue(
                    client_id=client["id"],
                    client_name=client["name"],
                    client_type=client["client_type"],
                    project_count=len(owned),
                    total_revenue=sum(p["price"] for p in owned),
                )
            )

        return ReportRead(
            start_date=start_date,
            end_date=end_date,
            client_type_counts=client_type_counts,
            project_status_counts=status_counts,
            projects_in_range=len(in_range),
            pending_projects=status_counts[ProjectStatus.PENDING.value],
            pending_follow_ups=sum(1 for f in followups if f["status"] == FollowUpStatus.PENDING.value),
            approval_rate=approval_rate,
            total_revenue=sum(p["price"] for p in projects),
            client_revenue=client_revenue,
        )
