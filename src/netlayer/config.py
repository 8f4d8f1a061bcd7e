from __future__ import annotations

from dataclasses import dataclass

import httpx

from .types import Seconds


@dataclass(frozen=True)
class WebserviceConfig:
    timeout: Seconds = 60
    verify: bool = True
    follow_redirects: bool = True
    attach_token: bool = True
    user_agent: str | None = None

    @classmethod
    def default(cls) -> WebserviceConfig:
        return cls()

    def client(self) -> httpx.AsyncClient:
        """
        Build the httpx client a ``Webservice`` uses when no transport is
        injected. The caller owns the returned client and must close it.
        """
        headers = {"User-Agent": self.user_agent} if self.user_agent else None
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            verify=self.verify,
            follow_redirects=self.follow_redirects,
            headers=headers,
        )
