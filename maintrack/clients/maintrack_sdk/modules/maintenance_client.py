from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from maintrack.clients.maintrack_sdk.envelope import Envelope
from maintrack.clients.maintrack_sdk.models import CreateMaintenanceData, MaintenanceRecord, UpdateMaintenanceData
from maintrack.clients.maintrack_sdk.modules.base import (
    ResourceGateway,
    parse_entity,
    parse_rows,
    to_payload,
    validation_failure,
)


class MaintenanceClient(ResourceGateway):
    module = "maintenance"

    async def list(self, filters: dict[str, Any] | None = None) -> Envelope[list[MaintenanceRecord]]:
        return await self._call(
            "list",
            "GET",
            "/maintenance/user",
            parse=parse_rows(MaintenanceRecord),
            filters=filters,
            success_message="Maintenance records loaded",
            failure_message="Failed to load maintenance records",
        )

    async def get(self, record_id: str) -> Envelope[MaintenanceRecord]:
        return await self._call(
            "get",
            "GET",
            f"/maintenance/{record_id}",
            parse=parse_entity(MaintenanceRecord),
            success_message="Maintenance record loaded",
            failure_message="Failed to load maintenance record",
        )

    async def create(self, data: CreateMaintenanceData | dict[str, Any]) -> Envelope[MaintenanceRecord]:
        try:
            body = to_payload(data, CreateMaintenanceData)
        except ValidationError as error:
            return validation_failure(error)
        return await self._call(
            "create",
            "POST",
            "/maintenance/create",
            parse=parse_entity(MaintenanceRecord),
            json_body=body,
            success_message="Maintenance record added",
            failure_message="Failed to add maintenance record",
        )

    async def update(self, record_id: str, data: UpdateMaintenanceData | dict[str, Any]) -> Envelope[MaintenanceRecord]:
        try:
            body = to_payload(data, UpdateMaintenanceData)
        except ValidationError as error:
            return validation_failure(error)
        return await self._call(
            "update",
            "PUT",
            f"/maintenance/{record_id}",
            parse=parse_entity(MaintenanceRecord),
            json_body=body,
            success_message="Maintenance record updated",
            failure_message="Failed to update maintenance record",
        )

    async def delete(self, record_id: str) -> Envelope[None]:
        return await self._call(
            "delete",
            "DELETE",
            f"/maintenance/{record_id}",
            success_message="Maintenance record deleted",
            failure_message="Failed to delete maintenance record",
        )
