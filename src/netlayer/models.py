from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, NoReturn, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import ResultError, WebserviceError
from .types import Method, Parser, Url

T = TypeVar("T")


@dataclass(frozen=True)
class Get:
    name: ClassVar[Method] = "GET"
    body: ClassVar[None] = None


@dataclass(frozen=True)
class Delete:
    name: ClassVar[Method] = "DELETE"
    body: ClassVar[None] = None


@dataclass(frozen=True)
class _WithBody:
    body: bytes

    def __post_init__(self) -> None:
        if isinstance(self.body, (bytearray, memoryview)):
            object.__setattr__(self, "body", bytes(self.body))
        elif not isinstance(self.body, bytes):
            raise TypeError(
                f"{type(self).__name__} body must be bytes, got {type(self.body).__name__}"
            )


@dataclass(frozen=True)
class Post(_WithBody):
    name: ClassVar[Method] = "POST"


@dataclass(frozen=True)
class Put(_WithBody):
    name: ClassVar[Method] = "PUT"


HttpMethod = Get | Post | Put | Delete

GET = Get()
DELETE = Delete()


def json_parser(model: type[T]) -> Parser[T]:
    """
    Default decode strategy: validate the bytes as a JSON document of ``model``.
    Malformed JSON and shape mismatches both yield ``None``.
    """
    adapter = TypeAdapter(model)

    def parse(data: bytes) -> T | None:
        try:
            return adapter.validate_json(data)
        except ValidationError:
            return None

    return parse


def json_body(value: Any) -> bytes:
    return TypeAdapter(type(value)).dump_json(value, by_alias=True)


@dataclass(frozen=True)
class Resource(Generic[T]):
    url: Url
    parse: Parser[T]
    method: HttpMethod = GET

    @classmethod
    def json(cls, url: Url, model: type[T], method: HttpMethod = GET) -> Resource[T]:
        return cls(url=url, parse=json_parser(model), method=method)


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Error:
    error: WebserviceError

    @property
    def value(self) -> None:
        return None

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise ResultError(self.error)


Result = Success[T] | Error


def result_of(value: T | None, or_error: WebserviceError) -> Result[T]:
    if value is not None:
        return Success(value)
    return Error(or_error)
