from __future__ import annotations

from maintrack.app.controllers.lifecycle import DeleteStrategy, ListGateway, PageController
from maintrack.app.notifications import Notifier
from maintrack.clients.maintrack_sdk.models import CreateMaintenanceData, MaintenanceRecord


class MaintenanceController(PageController[MaintenanceRecord]):
    def __init__(self, gateway: ListGateway, notifier: Notifier) -> None:
        super().__init__(
            gateway,
            notifier,
            name="maintenance",
            create_model=CreateMaintenanceData,
            delete_strategy=DeleteStrategy.LOCAL,
        )

    def total_cost(self) -> float:
        return sum(record.cost for record in self.state.items)
