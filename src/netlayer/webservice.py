from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from types import TracebackType
from typing import TypeVar

import httpx
import structlog

from .config import WebserviceConfig
from .errors import WebserviceError
from .http.httpx import wrap
from .http.types import HttpImplementation, Request, RequestFailed, Response
from .models import Error, Resource, Result, result_of
from .types import Headers

T = TypeVar("T")

Completion = Callable[[Result[T]], None]

# Emits on the stdlib logger; silent until the host configures logging.
logger = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)


class Webservice:
    """
    Executes ``Resource`` descriptions over HTTP and classifies the outcome.

    Every load resolves to exactly one ``Result``: transport failures become
    ``Error(bad_input)``, a 401 response becomes ``Error(not_authenticated)``
    and an empty or undecodable body becomes ``Error(other)``. Nothing is
    raised to the caller and nothing is retried.

    When no ``http`` implementation is given, an ``httpx.AsyncClient`` is built
    from ``config`` and closed by ``aclose``.
    """

    def __init__(
        self,
        http: HttpImplementation | None = None,
        *,
        config: WebserviceConfig | None = None,
        authentication_token: str | None = None,
    ) -> None:
        self.config = config or WebserviceConfig.default()
        self.authentication_token = authentication_token
        self._client: httpx.AsyncClient | None = None
        if http is None:
            self._client = self.config.client()
            http = wrap(self._client)
        self.http = http
        self._in_flight: set[asyncio.Task[None]] = set()

    async def __aenter__(self) -> Webservice:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()

    def build_request(self, resource: Resource[T]) -> Request:
        headers: Headers | None = None
        if self.authentication_token is not None and self.config.attach_token:
            headers = {"Authorization": f"Bearer {self.authentication_token}"}
        return Request(
            method=resource.method.name,
            url=resource.url,
            headers=headers,
            body=resource.method.body,
        )

    async def fetch(self, resource: Resource[T]) -> Result[T]:
        return await self._send(resource, self.build_request(resource))

    async def _send(self, resource: Resource[T], request: Request) -> Result[T]:
        logger.debug("request_issued", method=request.method, url=request.url)
        try:
            response = await self.http(request)
        except RequestFailed as exc:
            logger.warning(
                "request_failed",
                method=request.method,
                url=request.url,
                error=repr(exc.inner),
            )
            return Error(WebserviceError.bad_input)
        logger.debug("request_completed", url=request.url, status=response.status)
        if response.is_unauthorized:
            logger.info("not_authenticated", url=request.url)
            return Error(WebserviceError.not_authenticated)
        return self._decode(resource, response)

    def load(
        self, resource: Resource[T], completion: Completion[T]
    ) -> asyncio.Task[None]:
        """
        Schedule ``resource`` on the running loop and hand the result to
        ``completion`` once the response is classified. ``completion`` is never
        called before this method returns. The request, including the current
        ``authentication_token``, is built before this method returns.
        """
        loop = asyncio.get_running_loop()
        request = self.build_request(resource)
        task = loop.create_task(self._load(resource, request, completion))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        return task

    async def _load(
        self, resource: Resource[T], request: Request, completion: Completion[T]
    ) -> None:
        result: Result[T]
        try:
            result = await self._send(resource, request)
        except Exception:
            logger.error("load_failed", url=request.url, exc_info=True)
            result = Error(WebserviceError.bad_input)
        completion(result)

    def _decode(self, resource: Resource[T], response: Response) -> Result[T]:
        if not response.body:
            logger.warning(
                "decode_failed", url=resource.url, status=response.status, empty=True
            )
            return Error(WebserviceError.other)
        try:
            value = resource.parse(response.body)
        except Exception:
            logger.warning(
                "decode_failed",
                url=resource.url,
                status=response.status,
                exc_info=True,
            )
            return Error(WebserviceError.other)
        if value is None:
            logger.warning("decode_failed", url=resource.url, status=response.status)
        return result_of(value, WebserviceError.other)
