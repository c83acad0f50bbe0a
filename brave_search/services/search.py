"""Async client for the Brave Search web, suggest and spellcheck endpoints."""

from __future__ import annotations

from typing import Any, Mapping, Union
from urllib.parse import quote

import httpx
from pydantic import SecretStr

from brave_search.config import BraveSearchSettings, ClientConfig, get_settings
from brave_search.domain.models import SearchKind, SearchOptions
from brave_search.logging import logger
from brave_search.services.exceptions import TransportError, UpstreamStatusError

OptionsLike = Union[SearchOptions, Mapping[str, Any], None]

# Same unreserved set as JavaScript's encodeURIComponent.
_UNESCAPED = "-_.!~*'()"

# (option field, query key) in the order they are appended.
_QUERY_KEYS: dict[SearchKind, tuple[tuple[str, str], ...]] = {
    SearchKind.WEB: (
        ("language", "search_lang"),
        ("country", "country"),
        ("size", "count"),
        ("offset", "offset"),
        ("filters", "result_filter"),
    ),
    SearchKind.SUGGEST: (
        ("language", "language"),
        ("country", "country"),
    ),
    SearchKind.SPELLCHECK: (("language", "language"),),
}


def _encode(value: Any) -> str:
    return quote(str(value), safe=_UNESCAPED)


class SearchClient:
    """Issue one GET per call against the Brave Search API.

    The instance holds no per-call state, so a single client can serve any
    number of concurrent ``search``/``suggest``/``spellcheck`` calls.
    """

    def __init__(
        self,
        api_key: str | SecretStr | None = None,
        http_client: httpx.AsyncClient | None = None,
        *,
        config: ClientConfig | None = None,
    ) -> None:
        if config is None:
            if api_key is None:
                raise ValueError("An API key or a ClientConfig is required.")
            config = ClientConfig(api_key=api_key)
        elif api_key is not None:
            secret = api_key if isinstance(api_key, SecretStr) else SecretStr(api_key)
            config = config.model_copy(update={"api_key": secret})
        self._config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=config.request_timeout_seconds)

    @classmethod
    def from_settings(
        cls,
        settings: BraveSearchSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> SearchClient:
        settings = settings or get_settings()
        return cls(http_client=http_client, config=settings.client_config())

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def __aenter__(self) -> SearchClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _base_url(self, kind: SearchKind) -> str:
        if kind is SearchKind.WEB:
            return self._config.web_search_url
        if kind is SearchKind.SUGGEST:
            return self._config.suggest_url
        return self._config.spellcheck_url

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Accept-Encoding": "gzip",
            "X-Subscription-Token": self._config.api_key.get_secret_value(),
        }

    def build_url(self, kind: SearchKind | str, term: str, options: OptionsLike = None) -> str:
        kind = SearchKind(kind)
        opts = SearchOptions.coerce(options)
        url = f"{self._base_url(kind)}?q={_encode(term)}"
        for field, key in _QUERY_KEYS[kind]:
            value = getattr(opts, field)
            if value is not None:
                url += f"&{key}={_encode(value)}"
        return url

    def build_search_url(self, term: str, options: OptionsLike = None) -> str:
        return self.build_url(SearchKind.WEB, term, options)

    def build_suggest_url(self, term: str, options: OptionsLike = None) -> str:
        return self.build_url(SearchKind.SUGGEST, term, options)

    def build_spellcheck_url(self, term: str, options: OptionsLike = None) -> str:
        return self.build_url(SearchKind.SPELLCHECK, term, options)

    async def execute(self, kind: SearchKind | str, term: str, options: OptionsLike = None) -> Any:
        """Run one request and return the decoded JSON body.

        Raises ``UpstreamStatusError`` for any non-2xx status and
        ``TransportError`` when the request fails or the body is not JSON.
        Nothing is retried.
        """

        kind = SearchKind(kind)
        url = self.build_url(kind, term, options)
        logger.info("search_request", kind=kind.value, url=url)

        timeout = self._config.request_timeout_seconds
        try:
            response = await self._client.get(
                url,
                headers=self._headers(),
                timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
            )
        except httpx.RequestError as exc:
            logger.warning("search_transport_error", kind=kind.value, error=str(exc))
            raise TransportError(str(exc)) from exc

        if not response.is_success:
            logger.warning(
                "search_upstream_error",
                kind=kind.value,
                status_code=response.status_code,
                reason=response.reason_phrase,
            )
            raise UpstreamStatusError(response.status_code, response.reason_phrase)

        try:
            return response.json()
        except ValueError as exc:
            logger.warning("search_transport_error", kind=kind.value, error=str(exc))
            raise TransportError(str(exc)) from exc

    async def search(self, term: str, options: OptionsLike = None) -> Any:
        return await self.execute(SearchKind.WEB, term, options)

    async def suggest(self, term: str, options: OptionsLike = None) -> Any:
        return await self.execute(SearchKind.SUGGEST, term, options)

    async def spellcheck(self, term: str, options: OptionsLike = None) -> Any:
        return await self.execute(SearchKind.SPELLCHECK, term, options)


__all__ = ["OptionsLike", "SearchClient"]
