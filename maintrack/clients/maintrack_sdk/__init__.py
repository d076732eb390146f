from maintrack.clients.maintrack_sdk.envelope import Envelope
from maintrack.clients.maintrack_sdk.errors import ApiError
from maintrack.clients.maintrack_sdk.http_client import HttpClient
from maintrack.clients.maintrack_sdk.models import (
    AuthResponse,
    CreateMaintenanceData,
    CreateVehicleData,
    MaintenanceRecord,
    User,
    Vehicle,
)
from maintrack.clients.maintrack_sdk.modules import AuthClient, MaintenanceClient, VehiclesClient

__all__ = [
    "ApiError",
    "AuthClient",
    "AuthResponse",
    "CreateMaintenanceData",
    "CreateVehicleData",
    "Envelope",
    "HttpClient",
    "MaintenanceClient",
    "MaintenanceRecord",
    "User",
    "Vehicle",
    "VehiclesClient",
]
