from __future__ import annotations

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone

from maintrack.app.controllers.lifecycle import ListGateway, PageController
from maintrack.app.notifications import Notifier
from maintrack.app.view_state import PageState, PageStatus
from maintrack.clients.maintrack_sdk.models import MaintenanceRecord, Vehicle

LOADING_MARKER = "..."
ERROR_MARKER = "error"
RECENT_LIMIT = 5


@dataclass(frozen=True)
class StatCard:
    name: str
    value: str


def filter_records(records: Iterable[MaintenanceRecord], term: str) -> list[MaintenanceRecord]:
    """Case-insensitive substring match on the vehicle label and service type."""
    needle = (term or "").lower()
    rows = list(records)
    if not needle:
        return rows
    return [
        record
        for record in rows
        if needle in record.vehicle_label.lower() or needle in (record.service_type or "").lower()
    ]


def _sort_key(record: MaintenanceRecord) -> tuple[int, datetime]:
    raw = (record.date or "").strip()
    if raw.endswith("Z"):
        raw = f"{raw[:-1]}+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        return (0, datetime.min)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return (1, parsed)


def recent_records(records: Iterable[MaintenanceRecord], limit: int = RECENT_LIMIT) -> list[MaintenanceRecord]:
    # undated rows sort last
    return sorted(records, key=_sort_key, reverse=True)[: max(limit, 0)]


def _stat_value(state: PageState, value: str) -> str:
    if state.status in (PageStatus.IDLE, PageStatus.LOADING):
        return LOADING_MARKER
    if state.status == PageStatus.FAILED:
        return ERROR_MARKER
    return value


def stats(vehicles: PageState[Vehicle], maintenance: PageState[MaintenanceRecord]) -> list[StatCard]:
    total_spent = sum(record.cost for record in maintenance.items)
    return [
        StatCard("Total Vehicles", _stat_value(vehicles, str(len(vehicles.items)))),
        StatCard("Maintenance Records", _stat_value(maintenance, str(len(maintenance.items)))),
        StatCard("Total Spent", _stat_value(maintenance, f"${total_spent:,.2f}")),
    ]


class DashboardController:
    def __init__(
        self,
        vehicles_gateway: ListGateway,
        maintenance_gateway: ListGateway,
        notifier: Notifier,
        recent_limit: int = RECENT_LIMIT,
    ) -> None:
        self.vehicles: PageController[Vehicle] = PageController(
            vehicles_gateway, notifier, name="dashboard.vehicles"
        )
        self.maintenance: PageController[MaintenanceRecord] = PageController(
            maintenance_gateway, notifier, name="dashboard.maintenance"
        )
        self.recent_limit = recent_limit
        self.search_term = ""

    async def mount(self) -> None:
        await asyncio.gather(self.vehicles.mount(), self.maintenance.mount())

    def unmount(self) -> None:
        self.vehicles.unmount()
        self.maintenance.unmount()

    async def refresh(self) -> None:
        await asyncio.gather(self.vehicles.refresh(), self.maintenance.refresh())

    def set_search(self, term: str) -> None:
        self.search_term = term or ""

    def stats(self) -> list[StatCard]:
        return stats(self.vehicles.state, self.maintenance.state)

    def recent_maintenance(self, limit: int | None = None) -> list[MaintenanceRecord]:
        return recent_records(self.maintenance.items, self.recent_limit if limit is None else limit)

    def visible_maintenance(self) -> list[MaintenanceRecord]:
        return recent_records(filter_records(self.maintenance.items, self.search_term), self.recent_limit)
