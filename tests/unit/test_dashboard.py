from __future__ import annotations

import pytest

from maintrack.app.controllers import DashboardController, filter_records, recent_records
from maintrack.app.controllers.dashboard import ERROR_MARKER, LOADING_MARKER
from maintrack.clients.maintrack_sdk.envelope import Envelope
from maintrack.clients.maintrack_sdk.models import MaintenanceRecord, Vehicle


def _record(record_id: str, date: str | None, service: str = "Oil change", modelo: str = "Civic", cost=0):
    return MaintenanceRecord.model_validate(
        {"id": record_id, "date": date, "serviceType": service, "modelo": modelo, "placa": "ABC", "cost": cost}
    )


RECORDS = [
    _record("m1", "2024-01-10", "Oil change", "Civic", "40"),
    _record("m2", "2024-03-02", "Brakes", "Corolla", 120.5),
    _record("m3", "2023-12-24", "Tires", "Civic", "300"),
    _record("m4", None, "Inspection", "Mazda", 10),
    _record("m5", "2024-02-15T08:30:00Z", "Oil change", "Mazda", 25),
    _record("m6", "2024-02-01", "Battery", "Corolla", 90),
]


def _values(controller: DashboardController) -> dict[str, str]:
    return {card.name: card.value for card in controller.stats()}


@pytest.mark.asyncio
async def test_total_vehicles_renders_after_loading(make_gateway, notifications) -> None:
    vehicles = make_gateway(rows=[Vehicle(id="v1"), Vehicle(id="v2")])
    dashboard = DashboardController(vehicles, make_gateway(rows=RECORDS), notifications)

    assert _values(dashboard)["Total Vehicles"] == LOADING_MARKER

    await dashboard.mount()

    values = _values(dashboard)
    assert values["Total Vehicles"] == "2"
    assert values["Maintenance Records"] == "6"
    assert values["Total Spent"] == "$585.50"


@pytest.mark.asyncio
async def test_failed_fetch_shows_error_marker(make_gateway, notifications) -> None:
    vehicles = make_gateway(list_results=[Envelope.connection_error()])
    dashboard = DashboardController(vehicles, make_gateway(rows=[]), notifications)

    await dashboard.mount()

    values = _values(dashboard)
    assert values["Total Vehicles"] == ERROR_MARKER
    assert values["Maintenance Records"] == "0"
    assert values["Total Spent"] == "$0.00"


@pytest.mark.asyncio
async def test_recent_and_visible_maintenance(make_gateway, notifications) -> None:
    dashboard = DashboardController(make_gateway(rows=[]), make_gateway(rows=RECORDS), notifications)
    await dashboard.mount()

    assert [record.id for record in dashboard.recent_maintenance()] == ["m2", "m5", "m6", "m1", "m3"]
    assert [record.id for record in dashboard.recent_maintenance(limit=2)] == ["m2", "m5"]

    dashboard.set_search("civic")
    assert [record.id for record in dashboard.visible_maintenance()] == ["m1", "m3"]

    dashboard.set_search("")
    assert len(dashboard.visible_maintenance()) == 5


def test_filter_matches_label_or_service_type_case_insensitively() -> None:
    assert [record.id for record in filter_records(RECORDS, "OIL")] == ["m1", "m5"]
    assert [record.id for record in filter_records(RECORDS, "corolla")] == ["m2", "m6"]
    assert [record.id for record in filter_records(RECORDS, "civic abc")] == ["m1", "m3"]
    assert filter_records(RECORDS, "nothing-matches") == []


@pytest.mark.parametrize("term", ["", "a", "Civic", "brak", "  "])
def test_filter_results_are_subset_containing_term(term: str) -> None:
    result = filter_records(RECORDS, term)
    needle = term.lower()

    assert all(record in RECORDS for record in result)
    if not needle:
        assert result == RECORDS
    for record in result:
        assert needle in record.vehicle_label.lower() or needle in (record.service_type or "").lower()


def test_recent_records_puts_undated_last() -> None:
    ordered = recent_records(RECORDS, limit=10)

    assert ordered[-1].id == "m4"
    assert recent_records(RECORDS, limit=0) == []


@pytest.mark.asyncio
async def test_unmount_stops_both_lists(make_gateway, notifications) -> None:
    dashboard = DashboardController(make_gateway(rows=[]), make_gateway(rows=[]), notifications)
    await dashboard.mount()

    dashboard.unmount()

    assert dashboard.vehicles.is_mounted is False
    assert dashboard.maintenance.is_mounted is False


def test_filter_does_not_trim_the_search_term() -> None:
    records = [MaintenanceRecord.model_validate({"id": "m1", "modelo": "Civic", "serviceType": "Brakes"})]

    assert filter_records(records, "civic ") == []
    assert filter_records(records, " ") == []
    assert [record.id for record in filter_records(records, "civic")] == ["m1"]


def test_recent_records_compares_dates_across_offsets() -> None:
    records = [
        _record("early", "2024-05-06T03:00:00+05:00"),
        _record("late", "2024-05-06T01:00:00Z"),
        _record("naive", "2024-05-05T23:00:00"),
    ]

    assert [record.id for record in recent_records(records)] == ["late", "naive", "early"]
