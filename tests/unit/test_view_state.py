from maintrack.app.view_state import (
    EMPTY_MESSAGE,
    Action,
    ActionType,
    PageState,
    PageStatus,
    ViewStatus,
    reduce,
    resolve_view,
)

ROWS = ({"id": "a"}, {"id": "b"})


def test_fetch_transitions() -> None:
    loading = reduce(PageState(error="old"), Action(ActionType.FETCH_INIT, 4))
    assert (loading.status, loading.error, loading.generation) == (PageStatus.LOADING, None, 4)

    ready = reduce(loading, Action(ActionType.FETCH_SUCCESS, list(ROWS)))
    assert ready.status == PageStatus.READY
    assert ready.items == ROWS

    failed = reduce(ready, Action(ActionType.FETCH_FAILURE, "boom"))
    assert failed.status == PageStatus.FAILED
    assert failed.error == "boom"
    assert failed.items == ROWS

    assert reduce(failed, Action(ActionType.RESET_ERROR)).error is None


def test_form_and_create_transitions() -> None:
    opened = reduce(PageState(), Action(ActionType.FORM_OPEN))
    submitting = reduce(opened, Action(ActionType.CREATE_START))
    assert submitting.form_open is True
    assert submitting.is_submitting is True

    failed = reduce(submitting, Action(ActionType.CREATE_FAILURE))
    assert failed.form_open is True
    assert failed.is_submitting is False

    done = reduce(submitting, Action(ActionType.CREATE_SUCCESS))
    assert done.form_open is False
    assert done.is_submitting is False

    assert reduce(opened, Action(ActionType.FORM_CLOSE)).form_open is False


def test_delete_transitions() -> None:
    state = PageState(status=PageStatus.READY, items=ROWS)

    requested = reduce(state, Action(ActionType.DELETE_REQUEST, "a"))
    assert requested.pending_delete_id == "a"
    assert reduce(requested, Action(ActionType.DELETE_CANCEL)).pending_delete_id is None

    started = reduce(requested, Action(ActionType.DELETE_START, "a"))
    assert started.deleting_id == "a"
    assert started.pending_delete_id is None
    assert started.is_deleting("a") is True

    removed = reduce(started, Action(ActionType.DELETE_SUCCESS, "a"))
    assert removed.items == ({"id": "b"},)
    assert removed.deleting_id is None

    settled = reduce(started, Action(ActionType.DELETE_SETTLED))
    assert settled.items == ROWS
    assert settled.deleting_id is None

    failed = reduce(started, Action(ActionType.DELETE_FAILURE))
    assert failed.items == ROWS
    assert failed.deleting_id is None


def test_delete_success_for_absent_id_keeps_items() -> None:
    state = PageState(status=PageStatus.READY, items=ROWS)

    assert reduce(state, Action(ActionType.DELETE_SUCCESS, "zzz")).items == ROWS


def test_unknown_action_returns_same_state() -> None:
    state = PageState()

    assert reduce(state, Action("SOMETHING_ELSE")) is state


def test_resolve_view_covers_every_status() -> None:
    assert resolve_view(PageState()).status == ViewStatus.IDLE
    assert resolve_view(PageState(status=PageStatus.LOADING)).status == ViewStatus.LOADING

    error = resolve_view(PageState(status=PageStatus.FAILED, error="Unable to connect to the server"))
    assert error.status == ViewStatus.ERROR
    assert error.message == "Unable to connect to the server"

    empty = resolve_view(PageState(status=PageStatus.READY))
    assert empty.status == ViewStatus.EMPTY
    assert empty.message == EMPTY_MESSAGE

    ready = resolve_view(PageState(status=PageStatus.READY, items=ROWS))
    assert ready.render() == {"status": "ready", "message": None, "data_available": True}


def test_add_maintenance_transitions() -> None:
    opened = reduce(PageState(), Action(ActionType.MAINTENANCE_OPEN, "v1"))
    assert opened.maintenance_target == "v1"

    started = reduce(opened, Action(ActionType.MAINTENANCE_START))
    assert started.maintenance_submitting is True

    failed = reduce(started, Action(ActionType.MAINTENANCE_FAILURE))
    assert (failed.maintenance_target, failed.maintenance_submitting) == ("v1", False)

    done = reduce(started, Action(ActionType.MAINTENANCE_SUCCESS))
    assert (done.maintenance_target, done.maintenance_submitting) == (None, False)

    assert reduce(opened, Action(ActionType.MAINTENANCE_CLOSE)).maintenance_target is None
