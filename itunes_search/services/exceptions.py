"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class PerformSearchError(ServiceError):
    """Base class for the closed set of search failures."""

    kind = "perform_search"


class RequestURLIsNilError(PerformSearchError):
    kind = "request_url_is_nil"

    def __init__(self, message: str = "Could not compose a request URL.") -> None:
        super().__init__(message)


class NetworkError(PerformSearchError):
    kind = "network"

    def __init__(self, inner: Exception) -> None:
        super().__init__(f"Search request failed: {inner}")
        self.inner = inner
        self.__cause__ = inner


class NoDataError(PerformSearchError):
    """The transport reported neither an error nor a payload."""

    kind = "invalid_state_no_error_but_no_data"

    def __init__(self) -> None:
        super().__init__("Transport returned no error and no data.")


class InvalidJSONError(PerformSearchError):
    kind = "invalid_json"

    def __init__(self, inner: Exception) -> None:
        super().__init__(f"Search response could not be decoded: {inner}")
        self.inner = inner
        self.__cause__ = inner
