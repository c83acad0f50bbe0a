"""Pydantic models describing search requests."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict


class SearchKind(str, Enum):
    WEB = "web"
    SUGGEST = "suggest"
    SPELLCHECK = "spellcheck"


class SearchOptions(BaseModel):
    """Optional query parameters shared by all endpoints.

    Values are passed through unchecked; the upstream service rejects
    out-of-range sizes or unknown language/country codes. Fields an endpoint
    does not understand are ignored for that endpoint (``filters`` only
    applies to web search, ``country`` is not sent to spellcheck).
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    language: Any = None
    country: Any = None
    size: Any = None
    offset: Any = None
    filters: Any = None

    @classmethod
    def coerce(cls, options: SearchOptions | Mapping[str, Any] | None) -> SearchOptions:
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))


__all__ = [
    "SearchKind",
    "SearchOptions",
]
