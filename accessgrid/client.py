from __future__ import annotations

import logging
import os
from typing import Any

import httpx

from .access_cards import AccessCards
from .console import Console
from .errors import AccessGridError
from .responses import decode_response
from .signing import encode_json, normalize_method, sign_request
from .version import __version__

logger = logging.getLogger(__name__)

DEFAULT_API_HOST = "https://api.accessgrid.com"
USER_AGENT = f"accessgrid.py @ v{__version__}"


def _normalize_base(url: str) -> str:
    return str(url or "").rstrip("/")


class AccessGrid:
    def __init__(
        self,
        account_id: str,
        api_secret: str,
        api_host: str = DEFAULT_API_HOST,
        timeout_ms: int = 30_000,
        http_client: httpx.Client | None = None,
    ):
        if not account_id:
            raise ValueError("Account ID is required")
        if not api_secret:
            raise ValueError("API Secret is required")

        self.account_id = account_id
        self.api_secret = api_secret
        self.api_host = _normalize_base(api_host)
        self.timeout_ms = timeout_ms
        self._http = http_client or httpx.Client(timeout=self.timeout_ms / 1000)
        self._access_cards: AccessCards | None = None
        self._console: Console | None = None

    @classmethod
    def from_env(cls, **kwargs: Any) -> AccessGrid:
        """Build a client from ``ACCESSGRID_ACCOUNT_ID``, ``ACCESSGRID_SECRET_KEY`` and ``ACCESSGRID_API_HOST``."""
        account_id = os.getenv("ACCESSGRID_ACCOUNT_ID", "")
        api_secret = os.getenv("ACCESSGRID_SECRET_KEY", "")
        if not account_id or not api_secret:
            raise ValueError("Missing env vars: ACCESSGRID_ACCOUNT_ID and/or ACCESSGRID_SECRET_KEY")
        kwargs.setdefault("api_host", os.getenv("ACCESSGRID_API_HOST") or DEFAULT_API_HOST)
        return cls(account_id, api_secret, **kwargs)

    @property
    def access_cards(self) -> AccessCards:
        if self._access_cards is None:
            self._access_cards = AccessCards(self)
        return self._access_cards

    @property
    def console(self) -> Console:
        if self._console is None:
            self._console = Console(self)
        return self._console

    def make_request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        verb = normalize_method(method)
        signed = sign_request(self.api_secret, verb, path, body)

        query = {**(params or {}), **signed.params}
        headers = {
            "Content-Type": "application/json",
            "X-ACCT-ID": self.account_id,
            "X-PAYLOAD-SIG": signed.signature,
            "User-Agent": USER_AGENT,
        }
        content = encode_json(body).encode("utf-8") if body is not None and verb != "GET" else None

        logger.debug("%s %s params=%s", verb, path, sorted(query))
        try:
            resp = self._http.request(
                verb,
                f"{self.api_host}{path}",
                params=query or None,
                headers=headers,
                content=content,
            )
        except httpx.TimeoutException as err:
            raise AccessGridError("Request timed out", 408) from err
        except httpx.HTTPError as err:
            raise AccessGridError(str(err)) from err

        logger.debug("%s %s -> %s", verb, path, resp.status_code)
        return decode_response(resp.status_code, resp.text)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> AccessGrid:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def create_client(**kwargs: Any) -> AccessGrid:
    return AccessGrid(**kwargs)
