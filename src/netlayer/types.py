from collections.abc import Callable
from typing import Literal, TypeVar

T = TypeVar("T")

Seconds = float | int

Method = Literal["GET", "POST", "PUT", "DELETE"]
Url = str
Headers = dict[str, str]

Parser = Callable[[bytes], T | None]
