from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from maintrack.clients.maintrack_sdk.normalizers import to_float, to_int


def _id_to_str(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class User(WireModel):
    id: str | None = None
    name: str | None = None
    email: str | None = None
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")

    normalize_id = field_validator("id", mode="before")(_id_to_str)


class AuthResponse(WireModel):
    token: str | None = None
    user: User | None = None


class LoginCredentials(WireModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class RegisterData(WireModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class Vehicle(WireModel):
    id: str
    modelo: str | None = None
    placa: str | None = None
    user_id_fk: str | None = Field(default=None, alias="userIdFk")

    normalize_ids = field_validator("id", "user_id_fk", mode="before")(_id_to_str)

    @property
    def label(self) -> str:
        return " ".join(part for part in (self.modelo, self.placa) if part)


class CreateVehicleData(WireModel):
    modelo: str = Field(min_length=1)
    placa: str = Field(min_length=1)

    @field_validator("modelo", "placa", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


class UpdateVehicleData(WireModel):
    modelo: str | None = None
    placa: str | None = None


class MaintenanceRecord(WireModel):
    id: str
    car_fk_id: str | None = Field(default=None, alias="carFkId")
    service_type: str | None = Field(default=None, alias="serviceType")
    description: str | None = None
    date: str | None = None
    odometer: int = 0
    cost: float = 0.0
    mechanic_name: str | None = Field(default=None, alias="mechanicName")
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")
    placa: str | None = None
    modelo: str | None = None

    normalize_ids = field_validator("id", "car_fk_id", mode="before")(_id_to_str)

    @field_validator("cost", mode="before")
    @classmethod
    def _coerce_cost(cls, value: Any) -> float:
        return to_float(value)

    @field_validator("odometer", mode="before")
    @classmethod
    def _coerce_odometer(cls, value: Any) -> int:
        return to_int(value)

    @property
    def vehicle_label(self) -> str:
        return " ".join(part for part in (self.modelo, self.placa) if part)


class CreateMaintenanceData(WireModel):
    date: str = Field(min_length=1)
    service_type: str = Field(alias="serviceType", min_length=1)
    description: str = Field(min_length=1)
    cost: float
    mileage: int = 0
    car_fk_id: str = Field(alias="carFkId", min_length=1)
    place_name: str = Field(alias="placeName", min_length=1)
    mechanic_name: str = Field(alias="mechanicName", min_length=1)

    normalize_car = field_validator("car_fk_id", mode="before")(_id_to_str)

    @field_validator("date", "service_type", "description", "place_name", "mechanic_name", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("cost", mode="before")
    @classmethod
    def _parse_cost(cls, value: Any) -> Any:
        if isinstance(value, str):
            if not value.strip():
                raise ValueError("cost is required")
            return to_float(value)
        return value

    @field_validator("mileage", mode="before")
    @classmethod
    def _parse_mileage(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0
        return to_int(value) if isinstance(value, str) else value


class UpdateMaintenanceData(WireModel):
    date: str | None = None
    service_type: str | None = Field(default=None, alias="serviceType")
    description: str | None = None
    cost: float | None = None
    mileage: int | None = None
    place_name: str | None = Field(default=None, alias="placeName")
    mechanic_name: str | None = Field(default=None, alias="mechanicName")
