"""Dispatcher resolving resources into results."""

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator, Callable

from .config import WebserviceSettings, settings as default_settings
from .core import HttpTransport, Transport
from .errors import StatusError, TransportError
from .resource import Resource
from .result import Failure, Result

_LOGGER = logging.getLogger(__name__)


class Loader:
    """Dispatcher for resources.

    Every dispatch performs one round trip and reports one result. Callbacks
    run on the event loop that was running when ``dispatch`` was called, in a
    task of their own, never inside the ``dispatch`` call itself.

    In-flight dispatch tasks are held by the loader until they finish, so
    dropping the task returned by ``dispatch`` does not lose the callback.

    Without an explicit transport each dispatch opens a fresh HttpTransport
    and closes it after the callback has fired. A transport passed in is
    shared between dispatches and left open; its owner closes it.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        settings: WebserviceSettings | None = None,
    ):
        self.transport = transport
        self.settings = settings or default_settings
        self._tasks: set[asyncio.Task] = set()

    @contextlib.asynccontextmanager
    async def _session(self) -> AsyncIterator[Transport]:
        if self.transport is not None:
            yield self.transport
            return

        async with HttpTransport(
            timeout=self.settings.timeout,
            user_agent=self.settings.user_agent,
            follow_redirects=self.settings.follow_redirects,
        ) as transport:
            yield transport

    async def _round_trip(self, transport: Transport, resource: Resource) -> Result:
        request = resource.request
        try:
            response = await transport.send(request)
        except TransportError as exc:
            return Failure(exc)
        except Exception as exc:
            return Failure(TransportError(str(exc) or type(exc).__name__, url=request.url))

        if response.content is None:
            return Failure(TransportError("Transport returned no data", url=request.url))
        if self.settings.check_status and not response.ok:
            return Failure(StatusError(response.status, url=response.url))
        return resource.decode(response.content)

    async def load(
        self,
        resource: Resource,
        on_complete: Callable[[Result], None] | None = None,
    ) -> Result:
        """Perform one round trip and return its result.

        If given, on_complete is called with the result before the session
        opened for this round trip is released.
        """
        async with self._session() as transport:
            result = await self._round_trip(transport, resource)
            _LOGGER.debug(
                "%s %s -> %s",
                resource.request.method,
                resource.request.url,
                type(result).__name__,
            )
            if on_complete is not None:
                on_complete(result)
        return result

    def dispatch(
        self, resource: Resource, on_complete: Callable[[Result], None]
    ) -> asyncio.Task:
        """Issue the resource's request and return immediately.

        on_complete receives exactly one Success or Failure. The returned
        task resolves to the same result once the callback has returned.
        Must be called from a running event loop.
        """
        task = asyncio.get_running_loop().create_task(self.load(resource, on_complete))
        self._tasks.add(task)
        task.add_done_callback(self._task_done)
        return task

    def _task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            _LOGGER.error("Completion callback failed", exc_info=task.exception())
