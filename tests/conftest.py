"""Shared pytest fixtures wiring the controller to a mocked endpoint."""

from __future__ import annotations

from typing import Awaitable, Callable

import httpx
import pytest
import pytest_asyncio

from querypad.config import QuerypadSettings
from querypad.domain.models import QueryState
from querypad.services.endpoint import QueryEndpointClient
from querypad.services.submission import SubmissionController

Handler = Callable[[httpx.Request], Awaitable[httpx.Response]]

ENDPOINT_URL = "http://compiler.test/compiler/plainText"


@pytest.fixture
def settings() -> QuerypadSettings:
    return QuerypadSettings(endpoint_url=ENDPOINT_URL, request_timeout_seconds=5)


@pytest_asyncio.fixture
async def make_controller(settings):
    clients: list[httpx.AsyncClient] = []
    controllers: list[SubmissionController] = []

    def factory(handler: Handler, state: QueryState | None = None) -> SubmissionController:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        endpoint = QueryEndpointClient(client, settings=settings)
        controller = SubmissionController(state or QueryState(), endpoint)
        controllers.append(controller)
        return controller

    try:
        yield factory
    finally:
        for controller in controllers:
            await controller.aclose()
        for client in clients:
            await client.aclose()
