from itunes_search.domain.models import ResultType, SearchQuery, SearchResult, SearchResults

__all__ = ["ResultType", "SearchQuery", "SearchResult", "SearchResults"]
