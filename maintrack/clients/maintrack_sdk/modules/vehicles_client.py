from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from maintrack.clients.maintrack_sdk.envelope import Envelope
from maintrack.clients.maintrack_sdk.models import CreateVehicleData, UpdateVehicleData, Vehicle
from maintrack.clients.maintrack_sdk.modules.base import (
    ResourceGateway,
    parse_entity,
    parse_rows,
    to_payload,
    validation_failure,
)


class VehiclesClient(ResourceGateway):
    module = "vehicles"

    async def list(self, filters: dict[str, Any] | None = None) -> Envelope[list[Vehicle]]:
        return await self._call(
            "list",
            "GET",
            "/car/user",
            parse=parse_rows(Vehicle),
            filters=filters,
            success_message="Vehicles loaded",
            failure_message="Failed to load vehicles",
        )

    async def get(self, vehicle_id: str) -> Envelope[Vehicle]:
        return await self._call(
            "get",
            "GET",
            f"/vehicles/{vehicle_id}",
            parse=parse_entity(Vehicle),
            success_message="Vehicle loaded",
            failure_message="Failed to load vehicle",
        )

    async def create(self, data: CreateVehicleData | dict[str, Any]) -> Envelope[Vehicle]:
        try:
            body = to_payload(data, CreateVehicleData)
        except ValidationError as error:
            return validation_failure(error)
        return await self._call(
            "create",
            "POST",
            "/car/create",
            parse=parse_entity(Vehicle),
            json_body=body,
            success_message="Vehicle added",
            failure_message="Failed to add vehicle",
        )

    async def update(self, vehicle_id: str, data: UpdateVehicleData | dict[str, Any]) -> Envelope[Vehicle]:
        try:
            body = to_payload(data, UpdateVehicleData)
        except ValidationError as error:
            return validation_failure(error)
        return await self._call(
            "update",
            "PUT",
            f"/vehicles/{vehicle_id}",
            parse=parse_entity(Vehicle),
            json_body=body,
            success_message="Vehicle updated",
            failure_message="Failed to update vehicle",
        )

    async def delete(self, vehicle_id: str) -> Envelope[None]:
        return await self._call(
            "delete",
            "DELETE",
            f"/car/delete/{vehicle_id}",
            success_message="Vehicle deleted",
            failure_message="Failed to delete vehicle",
        )
