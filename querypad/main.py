"""Application entrypoint: a minimal terminal front end for the query endpoint."""

from __future__ import annotations

import asyncio
import sys
from typing import Sequence

import httpx

from querypad.config import QuerypadSettings, get_settings
from querypad.domain.models import QueryState, QueryStatus, QueryView
from querypad.i18n import I18nService
from querypad.logging import configure_logging, logger
from querypad.services.endpoint import QueryEndpointClient
from querypad.services.submission import SubmissionController


def build_client(settings: QuerypadSettings) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.request_timeout_seconds)


def render_view(view: QueryView, i18n: I18nService) -> str:
    if view.is_loading:
        return i18n.gettext("status.loading")
    if view.status is QueryStatus.ERROR:
        return i18n.gettext("ui.error", message=view.error_message)
    if view.status is QueryStatus.SUCCESS and view.result_text is not None:
        return view.result_text
    return i18n.gettext("status.idle")


async def _read_query(state: QueryState, i18n: I18nService) -> None:
    prompt = f"{i18n.gettext('ui.prompt')} [{state.query_text}]: "
    entered = await asyncio.to_thread(input, prompt)
    if entered.strip():
        state.set_query_text(entered)


async def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    configure_logging(settings.log_level)
    args = list(sys.argv[1:] if argv is None else argv)

    i18n = I18nService(default_locale=settings.default_language)
    state = QueryState(query_text=settings.initial_query)
    if args:
        state.set_query_text(" ".join(args))
    else:
        await _read_query(state, i18n)

    print(i18n.gettext("ui.title"))
    logger.info("querypad_starting", environment=settings.environment, endpoint=settings.endpoint)
    async with build_client(settings) as client:
        controller = SubmissionController(state, QueryEndpointClient(client, settings=settings), i18n=i18n)
        pending = controller.submit()
        print(render_view(controller.view(), i18n))
        try:
            await pending
        finally:
            await controller.aclose()
        print(render_view(controller.view(), i18n))

    return 0 if state.status is QueryStatus.SUCCESS else 1


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
