from dataclasses import dataclass
from enum import Enum, unique


@unique
class WebserviceError(Enum):
    not_authenticated = "NOT_AUTHENTICATED"
    bad_input = "BAD_INPUT"
    other = "OTHER"


@dataclass
class ResultError(Exception):
    """
    Raised by ``Error.unwrap``. ``Webservice`` itself never raises this, failed
    loads are always delivered as an ``Error`` result.
    """

    kind: WebserviceError
