from maintrack.clients.maintrack_sdk.modules.auth_client import AuthClient
from maintrack.clients.maintrack_sdk.modules.maintenance_client import MaintenanceClient
from maintrack.clients.maintrack_sdk.modules.vehicles_client import VehiclesClient

__all__ = ["AuthClient", "MaintenanceClient", "VehiclesClient"]
