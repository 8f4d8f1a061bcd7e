"""
The seam between ``Webservice`` and an HTTP library. An adapter is any async
callable taking a ``Request`` and returning a ``Response``; it reports every
failure to get a response by raising ``RequestFailed``.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from ..types import Headers, Method, Url


@dataclass(frozen=True)
class Request:
    method: Method
    url: Url
    headers: Headers | None
    # None for GET and DELETE
    body: bytes | None


@dataclass(frozen=True)
class Response:
    status: int
    body: bytes

    @property
    def is_unauthorized(self) -> bool:
        return self.status == 401


@dataclass
class RequestFailed(Exception):
    inner: Exception

    def __str__(self) -> str:
        return f"{type(self.inner).__name__}: {self.inner}"


HttpImplementation = Callable[[Request], Awaitable[Response]]
