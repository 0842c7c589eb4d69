from itunes_search.services.exceptions import (
    InvalidJSONError,
    NetworkError,
    NoDataError,
    PerformSearchError,
    RequestURLIsNilError,
    ServiceError,
)
from itunes_search.services.search import SearchOutcome, SearchResultController
from itunes_search.services.transport import (
    HttpxTransport,
    StaticTransport,
    Transport,
    TransportResponse,
)

__all__ = [
    "HttpxTransport",
    "InvalidJSONError",
    "NetworkError",
    "NoDataError",
    "PerformSearchError",
    "RequestURLIsNilError",
    "SearchOutcome",
    "SearchResultController",
    "ServiceError",
    "StaticTransport",
    "Transport",
    "TransportResponse",
]
