"""Drives query submissions and records their outcome on the shared state."""

from __future__ import annotations

import asyncio
from functools import partial
from typing import Callable

from querypad.domain.models import ErrorKind, QueryState, QueryView
from querypad.i18n import I18nService
from querypad.logging import logger
from querypad.services.endpoint import QueryEndpointClient
from querypad.services.exceptions import HttpStatusError, ParseError, SubmissionError
from querypad.utils.rendering import render_result


class SubmissionController:
    """Runs one endpoint round trip per ``submit`` call.

    Every submission gets a sequence number when it is issued. When a round
    trip settles it only touches the state if no newer submission has been
    issued since, so overlapping calls resolve as "latest submit wins" and
    superseded responses are dropped.
    """

    def __init__(
        self,
        state: QueryState,
        endpoint: QueryEndpointClient,
        *,
        i18n: I18nService | None = None,
        locale: str | None = None,
    ) -> None:
        self._state = state
        self._endpoint = endpoint
        self._i18n = i18n or I18nService()
        self._locale = locale
        self._sequence = 0
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def latest_sequence(self) -> int:
        return self._sequence

    @property
    def in_flight(self) -> int:
        return sum(1 for task in self._tasks if not task.done())

    def submit(self, text: str | None = None) -> asyncio.Task[None]:
        """Mark the state as loading and schedule the round trip.

        The state is already ``LOADING`` when this returns. ``text`` defaults
        to the current query text and is sent unmodified.
        """

        loop = asyncio.get_running_loop()
        query = self._state.query_text if text is None else text
        self._sequence += 1
        sequence = self._sequence
        self._state.begin()
        logger.info("submission_started", sequence=sequence, query_length=len(query))

        task = loop.create_task(self._round_trip(sequence, query), name=f"querypad-submit-{sequence}")
        self._tasks.add(task)
        task.add_done_callback(partial(self._settle, sequence))
        return task

    async def run(self, text: str | None = None) -> QueryState:
        await self.submit(text)
        return self._state

    def view(self) -> QueryView:
        return self._state.view(render_result)

    async def aclose(self) -> None:
        pending = [task for task in self._tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    async def _round_trip(self, sequence: int, query: str) -> None:
        apply: Callable[[], None] | None = None
        try:
            result = await self._endpoint.execute(query)
            apply = partial(self._state.succeed, result)
            logger.info("submission_succeeded", sequence=sequence)
        except SubmissionError as exc:
            apply = partial(self._state.fail, exc.kind, self._describe(exc))
            logger.warning(
                "submission_failed",
                sequence=sequence,
                kind=exc.kind.value,
                error=str(exc),
            )
        except asyncio.CancelledError:
            logger.info("submission_cancelled", sequence=sequence)
            raise
        except Exception as exc:
            logger.exception("submission_crashed", sequence=sequence)
            apply = partial(
                self._state.fail,
                ErrorKind.TRANSPORT,
                self._gettext("errors.unexpected", detail=str(exc) or exc.__class__.__name__),
            )
        finally:
            if apply is not None:
                if sequence == self._sequence:
                    apply()
                else:
                    logger.info(
                        "submission_superseded",
                        sequence=sequence,
                        latest_sequence=self._sequence,
                    )

    def _settle(self, sequence: int, task: asyncio.Task[None]) -> None:
        # Runs even for tasks cancelled before their first step.
        self._tasks.discard(task)
        if task.cancelled() and sequence == self._sequence and self._state.is_loading:
            self._state.reset()

    def _describe(self, exc: SubmissionError) -> str:
        if isinstance(exc, HttpStatusError):
            return self._gettext("errors.http_status", status_code=exc.status_code)
        if isinstance(exc, ParseError):
            return self._gettext("errors.parse", detail=str(exc))
        return self._gettext("errors.transport", detail=str(exc))

    def _gettext(self, key: str, **kwargs) -> str:
        return self._i18n.gettext(key, locale=self._locale, **kwargs)


__all__ = ["SubmissionController"]
