from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, Generic, Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from maintrack.app.infrastructure.logging.logger import get_logger, log_action
from maintrack.app.notifications import NotificationLevel, Notifier
from maintrack.app.view_state import Action, ActionType, PageState, ViewState, reduce, resolve_view
from maintrack.clients.maintrack_sdk.envelope import Envelope
from maintrack.clients.maintrack_sdk.modules.base import describe_validation_error

T = TypeVar("T")

logger = get_logger("maintrack.controllers")

Listener = Callable[[PageState[Any]], None]


class DeleteStrategy(str, Enum):
    LOCAL = "local"
    REFETCH = "refetch"


class ListGateway(Protocol):
    async def list(self, filters: dict[str, Any] | None = None) -> Envelope[Any]: ...

    async def create(self, data: Any) -> Envelope[Any]: ...

    async def delete(self, entity_id: str) -> Envelope[Any]: ...


class PageController(Generic[T]):
    """Fetch/create/delete lifecycle for one list screen.

    Every state change goes through ``reduce``. Each fetch carries a
    generation number; a response that is not from the latest fetch, or that
    arrives after ``unmount()``, is dropped.
    """

    def __init__(
        self,
        gateway: ListGateway,
        notifier: Notifier,
        *,
        name: str = "page",
        create_model: type[BaseModel] | None = None,
        delete_strategy: DeleteStrategy = DeleteStrategy.LOCAL,
    ) -> None:
        self.gateway = gateway
        self.notifier = notifier
        self.name = name
        self.create_model = create_model
        self.delete_strategy = delete_strategy
        self._state: PageState[T] = PageState()
        self._listeners: list[Listener] = []
        self._generation = 0
        self._mounted = False

    @property
    def state(self) -> PageState[T]:
        return self._state

    @property
    def items(self) -> list[T]:
        return list(self._state.items)

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    def view(self) -> ViewState:
        return resolve_view(self._state)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Action) -> PageState[T]:
        self._state = reduce(self._state, action)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    async def mount(self) -> None:
        self._mounted = True
        self._state = PageState(generation=self._generation)
        await self.refresh()

    def unmount(self) -> None:
        self._mounted = False

    async def refresh(self) -> None:
        if not self._mounted:
            return
        self._generation += 1
        generation = self._generation
        self.dispatch(Action(ActionType.FETCH_INIT, generation))

        result = await self.gateway.list()
        if not self._is_current(generation):
            log_action(logger, self.name, "fetch", "stale", generation=generation)
            return
        if result.success:
            self.dispatch(Action(ActionType.FETCH_SUCCESS, list(result.data or [])))
            log_action(logger, self.name, "fetch", "success", count=len(self._state.items))
            return
        self.dispatch(Action(ActionType.FETCH_FAILURE, result.message))
        self._notify(NotificationLevel.ERROR, result.message)
        log_action(logger, self.name, "fetch", "error", code=result.code)

    def open_form(self) -> None:
        self.dispatch(Action(ActionType.FORM_OPEN))

    def close_form(self) -> None:
        if self._state.is_submitting:
            return
        self.dispatch(Action(ActionType.FORM_CLOSE))

    async def create(self, data: BaseModel | dict[str, Any]) -> bool:
        if self._state.is_submitting:
            log_action(logger, self.name, "create", "refused", code="IN_FLIGHT")
            return False
        try:
            payload = self._validate(data)
        except ValidationError as error:
            self._notify(NotificationLevel.ERROR, describe_validation_error(error))
            log_action(logger, self.name, "create", "invalid", code="VALIDATION_ERROR")
            return False

        self.dispatch(Action(ActionType.CREATE_START))
        result = await self.gateway.create(payload)
        if not self._mounted:
            return result.success
        if not result.success:
            self.dispatch(Action(ActionType.CREATE_FAILURE))
            self._notify(NotificationLevel.ERROR, result.message)
            log_action(logger, self.name, "create", "error", code=result.code)
            return False

        self.dispatch(Action(ActionType.CREATE_SUCCESS))
        self._notify(NotificationLevel.SUCCESS, result.message)
        log_action(logger, self.name, "create", "success")
        await self.refresh()
        return True

    def request_delete(self, entity_id: str) -> bool:
        key = str(entity_id)
        if self._state.deleting_id is not None or not self._state.contains(key):
            log_action(logger, self.name, "delete_request", "refused")
            return False
        self.dispatch(Action(ActionType.DELETE_REQUEST, key))
        return True

    def cancel_delete(self) -> None:
        self.dispatch(Action(ActionType.DELETE_CANCEL))

    async def confirm_delete(self) -> bool:
        target = self._state.pending_delete_id
        if target is None or self._state.deleting_id is not None:
            return False

        self.dispatch(Action(ActionType.DELETE_START, target))
        result = await self.gateway.delete(target)
        if not self._mounted:
            return result.success
        if not result.success:
            self.dispatch(Action(ActionType.DELETE_FAILURE))
            self._notify(NotificationLevel.ERROR, result.message)
            log_action(logger, self.name, "delete", "error", code=result.code)
            return False

        self._notify(NotificationLevel.SUCCESS, result.message)
        log_action(logger, self.name, "delete", "success", strategy=self.delete_strategy.value)
        if self.delete_strategy == DeleteStrategy.LOCAL:
            self.dispatch(Action(ActionType.DELETE_SUCCESS, target))
        else:
            self.dispatch(Action(ActionType.DELETE_SETTLED))
            await self.refresh()
        return True

    def _validate(self, data: BaseModel | dict[str, Any]) -> Any:
        if self.create_model is None or isinstance(data, self.create_model):
            return data
        if isinstance(data, BaseModel):
            data = data.model_dump(by_alias=True)
        return self.create_model.model_validate(data)

    def _is_current(self, generation: int) -> bool:
        return self._mounted and generation == self._generation

    def _notify(self, level: NotificationLevel, message: str) -> None:
        if self._mounted:
            self.notifier.notify(level, message)
