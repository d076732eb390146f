from maintrack.app.controllers.auth import AuthController
from maintrack.app.controllers.dashboard import DashboardController, StatCard, filter_records, recent_records
from maintrack.app.controllers.lifecycle import DeleteStrategy, PageController
from maintrack.app.controllers.maintenance import MaintenanceController
from maintrack.app.controllers.vehicles import VehiclesController

__all__ = [
    "AuthController",
    "DashboardController",
    "DeleteStrategy",
    "MaintenanceController",
    "PageController",
    "StatCard",
    "VehiclesController",
    "filter_records",
    "recent_records",
]
