"""QueryState transitions keep result and error mutually exclusive."""

from __future__ import annotations

from querypad.config import DEFAULT_QUERY
from querypad.domain.models import ErrorKind, QueryState, QueryStatus
from querypad.utils.rendering import render_result


def test_new_state_is_idle():
    state = QueryState()

    assert state.status is QueryStatus.IDLE
    assert state.query_text == DEFAULT_QUERY
    assert state.result is None
    assert state.error_message is None
    assert state.is_loading is False
    assert state.has_result is False


def test_set_query_text_accepts_anything_and_keeps_status():
    state = QueryState()
    state.fail(ErrorKind.PARSE, "bad body")

    state.set_query_text("")

    assert state.query_text == ""
    assert state.status is QueryStatus.ERROR
    assert state.error_message == "bad body"


def test_fail_then_succeed_clears_error():
    state = QueryState()
    state.fail(ErrorKind.TRANSPORT, "unreachable")

    state.succeed({"rows": []})

    assert state.status is QueryStatus.SUCCESS
    assert state.result == {"rows": []}
    assert state.error_message is None
    assert state.error_kind is None


def test_begin_clears_result_and_keeps_query():
    state = QueryState(query_text="SELECT 2")
    state.succeed([1, 2])

    state.begin()

    assert state.status is QueryStatus.LOADING
    assert state.result is None
    assert state.has_result is False
    assert state.query_text == "SELECT 2"


def test_null_result_still_counts_as_success():
    state = QueryState()
    state.succeed(None)

    view = state.view(render_result)

    assert state.has_result is True
    assert view.result_text == "null"


def test_view_hides_result_outside_success():
    state = QueryState()
    state.fail(ErrorKind.HTTP_STATUS, "Network response was not ok (status 404)")

    view = state.view(render_result)

    assert view.status is QueryStatus.ERROR
    assert view.result_text is None
    assert view.error_message == "Network response was not ok (status 404)"
    assert view.is_loading is False


def test_reset_returns_to_idle():
    state = QueryState()
    state.begin()

    state.reset()

    assert state.status is QueryStatus.IDLE
    assert state.is_loading is False
