from .config import WebserviceConfig
from .errors import ResultError, WebserviceError
from .models import (
    DELETE,
    GET,
    Delete,
    Error,
    Get,
    HttpMethod,
    Post,
    Put,
    Resource,
    Result,
    Success,
    json_body,
    json_parser,
    result_of,
)
from .webservice import Completion, Webservice

__all__ = [
    "Completion",
    "DELETE",
    "Delete",
    "Error",
    "GET",
    "Get",
    "HttpMethod",
    "Post",
    "Put",
    "Resource",
    "Result",
    "ResultError",
    "Success",
    "Webservice",
    "WebserviceConfig",
    "WebserviceError",
    "json_body",
    "json_parser",
    "result_of",
]
