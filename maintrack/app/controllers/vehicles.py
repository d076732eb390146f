from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError

from maintrack.app.controllers.lifecycle import DeleteStrategy, ListGateway, PageController
from maintrack.app.infrastructure.logging.logger import get_logger, log_action
from maintrack.app.notifications import NotificationLevel, Notifier
from maintrack.app.view_state import Action, ActionType
from maintrack.clients.maintrack_sdk.auth_store import TokenStore
from maintrack.clients.maintrack_sdk.models import CreateMaintenanceData, CreateVehicleData, Vehicle
from maintrack.clients.maintrack_sdk.modules.base import describe_validation_error

logger = get_logger("maintrack.controllers")


class VehiclesController(PageController[Vehicle]):
    """Vehicle list plus the add-maintenance form opened from a vehicle row."""

    def __init__(
        self,
        gateway: ListGateway,
        maintenance_gateway: ListGateway,
        notifier: Notifier,
        session: TokenStore,
    ) -> None:
        super().__init__(
            gateway,
            notifier,
            name="vehicles",
            create_model=CreateVehicleData,
            delete_strategy=DeleteStrategy.LOCAL,
        )
        self.maintenance_gateway = maintenance_gateway
        self.session = session

    async def mount(self) -> None:
        if not self.session.has_valid_session():
            log_action(logger, self.name, "mount", "deferred", code="NO_SESSION")
            return
        await super().mount()

    @property
    def selected_vehicle(self) -> Vehicle | None:
        return self.state.maintenance_target

    @property
    def maintenance_submitting(self) -> bool:
        return self.state.maintenance_submitting

    def start_maintenance(self, vehicle: Vehicle) -> None:
        self.dispatch(Action(ActionType.MAINTENANCE_OPEN, vehicle))

    def cancel_maintenance(self) -> None:
        if not self.maintenance_submitting:
            self.dispatch(Action(ActionType.MAINTENANCE_CLOSE))

    async def add_maintenance(self, data: BaseModel | dict[str, Any]) -> bool:
        vehicle = self.selected_vehicle
        if vehicle is None or self.maintenance_submitting:
            return False
        fields = data.model_dump(by_alias=True) if isinstance(data, BaseModel) else dict(data)
        fields.pop("car_fk_id", None)
        fields["carFkId"] = vehicle.id
        try:
            payload = CreateMaintenanceData.model_validate(fields)
        except ValidationError as error:
            self._notify(NotificationLevel.ERROR, describe_validation_error(error))
            return False

        self.dispatch(Action(ActionType.MAINTENANCE_START))
        result = await self.maintenance_gateway.create(payload)
        if not self.is_mounted:
            return result.success
        if not result.success:
            self.dispatch(Action(ActionType.MAINTENANCE_FAILURE))
            self._notify(NotificationLevel.ERROR, result.message)
            log_action(logger, self.name, "add_maintenance", "error", code=result.code)
            return False
        self.dispatch(Action(ActionType.MAINTENANCE_SUCCESS))
        self._notify(NotificationLevel.SUCCESS, result.message)
        log_action(logger, self.name, "add_maintenance", "success")
        return True
