from brave_search.config import ClientConfig
from brave_search.domain.models import SearchKind, SearchOptions
from brave_search.services.exceptions import SearchClientError, TransportError, UpstreamStatusError
from brave_search.services.search import SearchClient

__all__ = [
    "ClientConfig",
    "SearchClient",
    "SearchClientError",
    "SearchKind",
    "SearchOptions",
    "TransportError",
    "UpstreamStatusError",
]
