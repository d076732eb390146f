from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")

EMPTY_MESSAGE = "No records found."


class PageStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class ActionType(str, Enum):
    FETCH_INIT = "FETCH_INIT"
    FETCH_SUCCESS = "FETCH_SUCCESS"
    FETCH_FAILURE = "FETCH_FAILURE"
    FORM_OPEN = "FORM_OPEN"
    FORM_CLOSE = "FORM_CLOSE"
    CREATE_START = "CREATE_START"
    CREATE_SUCCESS = "CREATE_SUCCESS"
    CREATE_FAILURE = "CREATE_FAILURE"
    DELETE_REQUEST = "DELETE_REQUEST"
    DELETE_CANCEL = "DELETE_CANCEL"
    DELETE_START = "DELETE_START"
    DELETE_SUCCESS = "DELETE_SUCCESS"
    DELETE_SETTLED = "DELETE_SETTLED"
    DELETE_FAILURE = "DELETE_FAILURE"
    RESET_ERROR = "RESET_ERROR"
    MAINTENANCE_OPEN = "MAINTENANCE_OPEN"
    MAINTENANCE_CLOSE = "MAINTENANCE_CLOSE"
    MAINTENANCE_START = "MAINTENANCE_START"
    MAINTENANCE_SUCCESS = "MAINTENANCE_SUCCESS"
    MAINTENANCE_FAILURE = "MAINTENANCE_FAILURE"


@dataclass(frozen=True)
class Action:
    type: ActionType
    payload: Any = None


@dataclass(frozen=True)
class PageState(Generic[T]):
    status: PageStatus = PageStatus.IDLE
    items: tuple[T, ...] = ()
    error: str | None = None
    generation: int = 0
    form_open: bool = False
    is_submitting: bool = False
    pending_delete_id: str | None = None
    deleting_id: str | None = None
    maintenance_target: Any = None
    maintenance_submitting: bool = False

    def is_deleting(self, entity_id: str) -> bool:
        return self.deleting_id is not None and self.deleting_id == entity_id

    def contains(self, entity_id: str) -> bool:
        return any(entity_key(item) == entity_id for item in self.items)


def entity_key(item: Any) -> str | None:
    value = item.get("id") if isinstance(item, dict) else getattr(item, "id", None)
    return None if value is None else str(value)


def reduce(state: PageState[T], action: Action) -> PageState[T]:
    kind = action.type
    if kind == ActionType.FETCH_INIT:
        generation = action.payload if action.payload is not None else state.generation + 1
        return replace(state, status=PageStatus.LOADING, error=None, generation=generation)
    if kind == ActionType.FETCH_SUCCESS:
        return replace(state, status=PageStatus.READY, items=tuple(action.payload or ()), error=None)
    if kind == ActionType.FETCH_FAILURE:
        return replace(state, status=PageStatus.FAILED, error=action.payload)
    if kind == ActionType.FORM_OPEN:
        return replace(state, form_open=True)
    if kind == ActionType.FORM_CLOSE:
        return replace(state, form_open=False)
    if kind == ActionType.CREATE_START:
        return replace(state, is_submitting=True)
    if kind == ActionType.CREATE_SUCCESS:
        return replace(state, is_submitting=False, form_open=False)
    if kind == ActionType.CREATE_FAILURE:
        return replace(state, is_submitting=False)
    if kind == ActionType.DELETE_REQUEST:
        return replace(state, pending_delete_id=action.payload)
    if kind == ActionType.DELETE_CANCEL:
        return replace(state, pending_delete_id=None)
    if kind == ActionType.DELETE_START:
        return replace(state, deleting_id=action.payload, pending_delete_id=None)
    if kind == ActionType.DELETE_SUCCESS:
        remaining = tuple(item for item in state.items if entity_key(item) != action.payload)
        return replace(state, items=remaining, deleting_id=None)
    if kind in (ActionType.DELETE_SETTLED, ActionType.DELETE_FAILURE):
        return replace(state, deleting_id=None)
    if kind == ActionType.RESET_ERROR:
        return replace(state, error=None)
    if kind == ActionType.MAINTENANCE_OPEN:
        return replace(state, maintenance_target=action.payload)
    if kind == ActionType.MAINTENANCE_CLOSE:
        return replace(state, maintenance_target=None)
    if kind == ActionType.MAINTENANCE_START:
        return replace(state, maintenance_submitting=True)
    if kind == ActionType.MAINTENANCE_SUCCESS:
        return replace(state, maintenance_submitting=False, maintenance_target=None)
    if kind == ActionType.MAINTENANCE_FAILURE:
        return replace(state, maintenance_submitting=False)
    return state


class ViewStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    EMPTY = "empty"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    status: ViewStatus
    message: str | None = None
    data_available: bool = False

    def render(self) -> dict[str, Any]:
        return {"status": self.status.value, "message": self.message, "data_available": self.data_available}


def resolve_view(state: PageState[Any]) -> ViewState:
    if state.status == PageStatus.IDLE:
        return ViewState(ViewStatus.IDLE)
    if state.status == PageStatus.LOADING:
        return ViewState(ViewStatus.LOADING, "Loading...", data_available=bool(state.items))
    if state.status == PageStatus.FAILED:
        return ViewState(ViewStatus.ERROR, state.error)
    if not state.items:
        return ViewState(ViewStatus.EMPTY, EMPTY_MESSAGE)
    return ViewState(ViewStatus.READY, data_available=True)
